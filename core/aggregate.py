from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple
import math

from core.normalize_skills import normalize_key


@dataclass(frozen=True)
class Aggregate:
    recommended: Tuple[str, ...] = ()
    attempted_count: int = 0
    coverage: int = 0
    remaining_gap_percent: int = 0


def percent(part: int, whole: int) -> int:
    """Whole-number percentage, rounding halves up; 0 when `whole` is 0."""
    if not whole:
        return 0
    return int(math.floor(part / whole * 100 + 0.5))


def aggregate(master: Sequence[str], passed: Sequence[str], failed: Sequence[str]) -> Aggregate:
    """
    Derive the recommendation and progress figures:
      recommended = master skills neither passed nor failed (master order kept)
      attempted   = distinct skills across passed + failed
      coverage    = passed / master, as a percentage
      gap         = recommended / master, as a percentage
    """
    passed_keys = {normalize_key(s) for s in passed}
    failed_keys = {normalize_key(s) for s in failed}
    taken = passed_keys | failed_keys

    recommended = tuple(s for s in master if normalize_key(s) not in taken)

    return Aggregate(
        recommended=recommended,
        attempted_count=len(taken),
        coverage=percent(len(passed), len(master)),
        remaining_gap_percent=percent(len(recommended), len(master)),
    )

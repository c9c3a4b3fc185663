from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Sequence, Tuple, Union

from core.normalize_skills import normalize_key, sort_skills
from core.parse_skills import parse_skills

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartitionResult:
    canonical: Tuple[str, ...] = ()
    unknown: Tuple[str, ...] = ()


def partition(raw: Union[str, Sequence[str]], lookup: Mapping[str, str]) -> PartitionResult:
    """
    Split student skills into catalog matches and unknown entries.

    Matches are reported with the master spelling and collapse to one entry per
    master skill, so "Algebra", "algebra" and "ALGEBRA" all become the catalog's
    "Algebra". Unknown entries are only collapsed when their raw text is identical,
    so "algebra" and "Algebra" stay separate when neither is in the catalog.
    Both lists come back sorted.
    """
    skills = parse_skills(raw) if isinstance(raw, str) else raw

    canonical: List[str] = []
    unknown: List[str] = []
    seen_canonical = set()
    seen_unknown = set()

    for skill in skills:
        key = normalize_key(skill)
        if not key:
            continue
        value = lookup.get(key)
        if value:
            if value not in seen_canonical:
                seen_canonical.add(value)
                canonical.append(value)
        elif skill not in seen_unknown:
            seen_unknown.add(skill)
            unknown.append(skill)

    logger.debug("partitioned %d skills: %d canonical, %d unknown", len(skills), len(canonical), len(unknown))
    return PartitionResult(canonical=tuple(sort_skills(canonical)), unknown=tuple(sort_skills(unknown)))

"""One-call reconciliation of the three skill lists.

The report is rebuilt from scratch for every set of inputs; `cached_report` only skips the
work when the exact same three strings come in again.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, Tuple

from core.aggregate import aggregate
from core.catalog import build_catalog
from core.partition import PartitionResult, partition

logger = logging.getLogger(__name__)

DEMO_MASTER = """Algebra Basics
Algebraic Expressions
Data Analysis
Decimals
Fractions
Geometry: Angles
Geometry: Shapes
Measurement
Number Patterns
Percentages
Probability
Word Problems"""

DEMO_PASSED = """Decimals
Fractions
Measurement
Number Patterns"""

DEMO_FAILED = """Percentages
Probability
Algebraic Expressions"""


def demo_inputs() -> Dict[str, str]:
    return {"master_text": DEMO_MASTER, "passed_text": DEMO_PASSED, "failed_text": DEMO_FAILED}


@dataclass(frozen=True)
class SkillReport:
    master: Tuple[str, ...] = ()
    passed: PartitionResult = field(default_factory=PartitionResult)
    failed: PartitionResult = field(default_factory=PartitionResult)
    recommended: Tuple[str, ...] = ()
    attempted_count: int = 0
    coverage: int = 0
    remaining_gap_percent: int = 0

    @property
    def counts(self) -> Dict[str, int]:
        return {
            "master": len(self.master),
            "passed": len(self.passed.canonical),
            "failed": len(self.failed.canonical),
            "recommended": len(self.recommended),
        }

    def to_dict(self) -> Dict[str, Any]:
        """JSON-shaped copy (lists, not tuples), the same shape `/reconcile` returns."""
        return {
            "master": list(self.master),
            "passed": {"canonical": list(self.passed.canonical), "unknown": list(self.passed.unknown)},
            "failed": {"canonical": list(self.failed.canonical), "unknown": list(self.failed.unknown)},
            "recommended": list(self.recommended),
            "attempted_count": self.attempted_count,
            "coverage": self.coverage,
            "remaining_gap_percent": self.remaining_gap_percent,
            "counts": self.counts,
        }


def build_report(master_text: str = "", passed_text: str = "", failed_text: str = "") -> SkillReport:
    catalog = build_catalog(master_text)
    passed = partition(passed_text, catalog.lookup)
    failed = partition(failed_text, catalog.lookup)
    agg = aggregate(catalog.skills, passed.canonical, failed.canonical)

    logger.debug(
        "report: master=%d passed=%d failed=%d recommended=%d coverage=%d%%",
        len(catalog), len(passed.canonical), len(failed.canonical), len(agg.recommended), agg.coverage,
    )
    return SkillReport(
        master=tuple(catalog.skills),
        passed=passed,
        failed=failed,
        recommended=agg.recommended,
        attempted_count=agg.attempted_count,
        coverage=agg.coverage,
        remaining_gap_percent=agg.remaining_gap_percent,
    )


@lru_cache(maxsize=32)
def cached_report(master_text: str, passed_text: str, failed_text: str) -> SkillReport:
    return build_report(master_text, passed_text, failed_text)

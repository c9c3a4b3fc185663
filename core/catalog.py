from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from core.normalize_skills import dedupe, normalize_key, sort_skills
from core.parse_skills import parse_skills

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillCatalog:
    """Sorted master skills plus a lookup from normalised key to canonical spelling."""
    skills: List[str] = field(default_factory=list)
    lookup: Dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.skills)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and normalize_key(term) in self.lookup

    def resolve(self, term: str) -> str | None:
        return self.lookup.get(normalize_key(term))


def build_catalog(master_text: str) -> SkillCatalog:
    skills = sort_skills(dedupe(parse_skills(master_text)))
    lookup = {normalize_key(s): s for s in skills}
    logger.debug("master catalog built with %d skills", len(skills))
    return SkillCatalog(skills=skills, lookup=lookup)

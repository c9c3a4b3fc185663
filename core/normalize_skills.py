"""Skill normalisation utilities.

Two skills are "the same" when their normalised keys are equal: whitespace runs collapsed,
trimmed and lower-cased.  The display form of a skill is always the first-seen original
spelling, so keys are only ever used for comparison and lookup.

Whitespace here includes U+FEFF, so a byte-order mark pasted in from a file is trimmed
like any other blank.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from pyuca import Collator

_ws = re.compile(r"[\s\ufeff]+")

_collator = Collator()


def trim(term: str) -> str:
    while True:
        stripped = term.strip().strip("\ufeff")
        if stripped == term:
            return term
        term = stripped


def normalize_key(term: str) -> str:
    """Collapse whitespace, trim and lower-case a skill name."""
    return trim(_ws.sub(" ", term)).lower()


def collation_key(term: str) -> Tuple[int, ...]:
    """Primary-strength UCA sort key: ignores case and accents ("Øresund" sorts with "O")."""
    key = _collator.sort_key(term)
    # levels are separated by 0; everything before the first one is the primary level
    try:
        return tuple(key[:key.index(0)])
    except ValueError:
        return tuple(key)


def sort_skills(skills: Iterable[str]) -> List[str]:
    # stable: entries equal under collation keep their input order
    return sorted(skills, key=collation_key)


def dedupe(skills: Iterable[str]) -> List[str]:
    """Remove duplicates by normalised key, keeping the first spelling seen."""
    seen = set()
    out: List[str] = []
    for s in skills:
        key = normalize_key(s)
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(trim(s))
    return out

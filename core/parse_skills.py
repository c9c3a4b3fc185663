from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, List, Optional

from core.normalize_skills import trim

logger = logging.getLogger(__name__)

_SPLIT = re.compile(r"[\n,;]+")
_BULLET = re.compile(r"^[\s\ufeff]*[-*•][\s\ufeff]*")


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def _to_text(value: Any) -> str:
    """Stringify a JSON array element the way a browser's String() would."""
    if not isinstance(value, list):
        return _scalar_text(value)
    # nested arrays join their items with "," at every depth; walk them without recursion
    out: List[str] = []
    stack = [iter(value)]
    first = [True]
    while stack:
        item = next(stack[-1], stack)
        if item is stack:
            stack.pop()
            first.pop()
            continue
        if not first[-1]:
            out.append(",")
        first[-1] = False
        if isinstance(item, list):
            stack.append(iter(item))
            first.append(True)
        else:
            out.append(_scalar_text(item))
    return "".join(out)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_json_list(text: str) -> Optional[List[str]]:
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # ValueError covers JSONDecodeError and NaN/Infinity; RecursionError is nesting too deep
        logger.debug("input is not a JSON array, splitting as plain text")
        return None
    if not isinstance(parsed, list):
        return None
    return [t for t in (trim(_to_text(v)) for v in parsed) if t]


def _parse_plain(text: str) -> List[str]:
    out: List[str] = []
    for part in _SPLIT.split(text):
        t = trim(_BULLET.sub("", part, count=1))
        if t:
            out.append(t)
    return out


def parse_skills(text: str) -> List[str]:
    """
    Turn one pasted blob into a list of skill strings.

    Accepts a JSON array (`["Algebra", "Geometry"]`) or free text separated by newlines,
    commas or semicolons, with optional leading bullets (-, *, •). A JSON array wins
    over plain-text splitting; anything else that fails to decode is split as text.
    """
    trimmed = trim(text or "")
    if not trimmed:
        return []

    skills = _parse_json_list(trimmed)
    if skills is not None:
        logger.debug("parsed %d skills from JSON array", len(skills))
        return skills

    skills = _parse_plain(trimmed)
    logger.debug("parsed %d skills from plain text", len(skills))
    return skills

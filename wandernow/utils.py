"""Utility helpers."""

import re
from typing import Any, Iterable, List, Optional

from .models import DEFAULT_PREFERENCE

LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
MAX_DAYS = 30


def parse_leading_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_day_count(value: Any, max_days: int = MAX_DAYS) -> int:
    """Read a day count the way the form reads it; anything unusable is 0.

    Counts above ``max_days`` are clamped to it.
    """

    parsed = parse_leading_int(value)
    if parsed is None or parsed < 0:
        return 0
    return min(parsed, max_days)


def parse_budget(value: Any) -> Optional[int]:
    parsed = parse_leading_int(value)
    if parsed is None or parsed <= 0:
        return None
    return parsed


def normalize_preferences(values: Optional[Iterable[Any]]) -> List[str]:
    """Lowercase the tags, keeping order and duplicates, default to heritage."""

    prefs: List[str] = []
    for value in values or []:
        tag = getattr(value, "value", value)
        tag = str(tag).strip().lower()
        if tag:
            prefs.append(tag)
    return prefs or [DEFAULT_PREFERENCE]


def format_amount(amount: int) -> str:
    return f"{amount:,}"


def preference_label(tag: str) -> str:
    return tag[:1].upper() + tag[1:]

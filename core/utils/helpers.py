"""
MealProtocol text utilities
"""

from __future__ import annotations
import re
from typing import Any, Optional


_PARENTHETICAL = re.compile(r"\([^)]*\)")
_NOT_LETTER_DIGIT_SPACE = re.compile(r"[^a-z0-9\s]")
_NOT_LETTER_SPACE = re.compile(r"[^a-z\s]")
_WHITESPACE = re.compile(r"\s+")


def coerce_text(value: Any) -> str:
    """Return value if it is a str, otherwise the empty string."""
    return value if isinstance(value, str) else ""


def optional_text(value: Any) -> Optional[str]:
    """Trimmed text or None when empty / not a string."""
    text = coerce_text(value).strip()
    return text or None


def normalize(text: Any, keep_digits: bool = True) -> str:
    """
    Canonicalize free ingredient text for lookups.

    Steps, in order: coerce to str, trim, lowercase, drop "(...)" groups,
    replace anything that is not a letter/space (or digit when keep_digits)
    with a space, collapse whitespace, trim.

    Idempotent: normalize(normalize(x)) == normalize(x).
    """
    s = coerce_text(text).strip().lower()
    if not s:
        return ""
    s = _PARENTHETICAL.sub(" ", s)
    s = (_NOT_LETTER_DIGIT_SPACE if keep_digits else _NOT_LETTER_SPACE).sub(" ", s)
    s = _WHITESPACE.sub(" ", s)
    return s.strip()


def contains_token(haystack: str, needle: str) -> bool:
    """
    True when needle occurs in haystack bounded by start/end of string or a
    non-letter character on both sides ("quinoa" in "cooked quinoa", but not
    "lime" in "limestone").
    """
    if not haystack or not needle:
        return False
    pattern = rf"(?<![a-z]){re.escape(needle)}(?![a-z])"
    return re.search(pattern, haystack) is not None

"""Ordering of string keys, with ``None`` treated as a missing key."""

from __future__ import annotations

from typing import Optional


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def compare_keys(left: Optional[str], right: Optional[str]) -> int:
    """Compare two keys character by character.

    Returns the difference of the character codes at the first position
    where the keys differ, the end of a key counting as code 0, so the
    result is 0 for equal keys. When one key is missing, the result is the
    code of the other key's first character; two missing keys compare equal.
    """
    if left is None and right is None:
        return 0
    if left is None:
        return _code_at(right, 0)
    if right is None:
        return _code_at(left, 0)
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    position = min(len(left), len(right))
    return _code_at(left, position) - _code_at(right, position)


def less(left: Optional[str], right: Optional[str]) -> bool:
    """True if ``left`` orders before ``right``."""
    return compare_keys(left, right) < 0


def greater(left: Optional[str], right: Optional[str]) -> bool:
    """True if ``left`` orders after ``right``."""
    return compare_keys(left, right) > 0


def equal(left: Optional[str], right: Optional[str]) -> bool:
    """True if the two keys compare equal."""
    return compare_keys(left, right) == 0
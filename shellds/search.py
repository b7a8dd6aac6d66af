"""Searching and comparing within strings and byte sequences.

Positions are returned as indexes into the searched value, or ``None``
when nothing matches.
"""

from __future__ import annotations

import operator
from typing import Optional, Union

CharLike = Union[str, int]
BytesLike = Union[bytes, bytearray, memoryview]


def _code(ch: CharLike) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return operator.index(ch)


def _check_count(count: int, name: str = "count") -> int:
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"{name} must not be negative, got {count}")
    return count


def find_char(text: str, ch: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``ch`` in ``text``.

    Searching for the NUL character gives the length of ``text``, the
    position of its terminator.
    """
    code = _code(ch)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def find_last_char(text: str, ch: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``ch`` in ``text``.

    Searching for the NUL character gives the length of ``text``.
    """
    code = _code(ch)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def compare_prefix(left: str, right: str, count: int) -> int:
    """Compare at most ``count`` leading characters of two strings.

    Returns the difference of the character codes at the first position
    where the strings differ, 0 when the compared parts are equal. The end
    of a string counts as code 0.
    """
    count = _check_count(count)
    for i in range(count):
        a = ord(left[i]) if i < len(left) else 0
        b = ord(right[i]) if i < len(right) else 0
        if a != b or a == 0 or i == count - 1:
            return a - b
    return 0


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` in ``haystack``, matching only within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    length = _check_count(length, "length")
    if not needle:
        return 0
    size = len(needle)
    for i in range(len(haystack)):
        if i + size > length:
            break
        if haystack.startswith(needle, i):
            return i
    return None


def find_substring(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle`` anywhere in ``haystack``."""
    return find_within(haystack, needle, len(haystack))


def contains(haystack: str, needle: str) -> bool:
    """True if ``needle`` occurs in ``haystack``."""
    return find_substring(haystack, needle) is not None


def ends_with(haystack: str, needle: str) -> bool:
    """True if ``haystack`` ends with ``needle``."""
    if len(needle) > len(haystack):
        return False
    start = len(haystack) - len(needle)
    return compare_prefix(haystack[start:], needle, len(needle)) == 0


def find_byte(data: BytesLike, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (taken modulo 256) among the first ``count`` bytes."""
    count = _check_count(count)
    view = memoryview(data).cast("B")
    if count > len(view):
        raise ValueError(f"count {count} exceeds data length {len(view)}")
    target = operator.index(value) & 0xFF
    return next((i for i, byte in enumerate(view[:count]) if byte == target), None)


def compare_bytes(left: BytesLike, right: BytesLike, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    count = _check_count(count)
    a_view = memoryview(left).cast("B")
    b_view = memoryview(right).cast("B")
    if count > len(a_view) or count > len(b_view):
        raise ValueError(f"count {count} exceeds buffer length")
    for a, b in zip(a_view[:count], b_view[:count]):
        if a != b:
            return a - b
    return 0
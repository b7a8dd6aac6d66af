"""String building, copying, splitting and trimming.

``None`` stands in for a missing string. Each function treats it the way
its documentation states.
"""

from __future__ import annotations

import operator
from typing import Callable, List, Optional, Tuple


def _check_size(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def length(text: Optional[str]) -> int:
    """Number of characters in ``text``; ``None`` has length 0."""
    return 0 if text is None else len(text)


def duplicate(text: Optional[str]) -> str:
    """Return a copy of ``text``; ``None`` gives an empty string."""
    return "" if text is None else str(text)


def append(left: Optional[str], right: Optional[str]) -> Optional[str]:
    """Return ``left`` followed by ``right``.

    A missing side counts as empty. When both are missing, ``left`` is
    returned unchanged, that is ``None``.
    """
    if left is None and right is None:
        return left
    return (left or "") + (right or "")


def join(left: Optional[str], right: Optional[str]) -> Optional[str]:
    """Concatenate two strings; ``None`` if either is missing."""
    if left is None or right is None:
        return None
    return left + right


def split(text: Optional[str], sep: str) -> Optional[List[str]]:
    """Split ``text`` on the single character ``sep``, dropping empty words.

    Returns ``None`` for a missing ``text``.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if text is None:
        return None
    return [word for word in text.split(sep) if word]


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, at most ``size - 1`` characters, and the full
    length of ``src``, which shows whether the copy was truncated. A size of
    0 copies nothing.
    """
    size = _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had
    without the limit: the length of ``src`` plus the length of ``dst``
    counted up to ``size``. If ``dst`` already fills the buffer it is
    returned unchanged.
    """
    size = _check_size(size, "size")
    dst_len = min(len(dst), size)
    total = len(src) + dst_len
    if dst_len >= size:
        return dst, total
    room = size - 1 - dst_len
    return dst + src[:room], total


def map_chars(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` applied to each character.

    Returns ``None`` if ``text`` or ``func`` is missing. ``func`` must return
    a single character.
    """
    if text is None or func is None:
        return None
    mapped = []
    for index, ch in enumerate(text):
        result = func(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(
                f"mapping function must return a single character, got {result!r}"
            )
        mapped.append(result)
    return "".join(mapped)


def trim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``text``.

    Returns ``None`` if either argument is missing.
    """
    if text is None or charset is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def substring(text: Optional[str], start: int, count: int) -> str:
    """Return at most ``count`` characters of ``text`` beginning at ``start``.

    A missing ``text`` or a ``start`` past its end gives an empty string.
    """
    start = _check_size(start, "start")
    count = _check_size(count, "count")
    if text is None or start > len(text):
        return ""
    return text[start : start + min(len(text) - start, count)]
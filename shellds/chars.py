"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
Case conversions return a value of the same kind they were given.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset(map(ord, " \t\n\v\f\r"))


def _code(ch: CharLike) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return operator.index(ch)


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(ch: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(ch)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(ch: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(ch) <= ord("9")


def is_alnum(ch: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(ch) or is_alpha(ch)


def is_ascii(ch: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(ch) <= 127


def is_print(ch: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(ch) <= 126


def is_space(ch: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    return _code(ch) in _SPACE_CODES


def to_lower(ch: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(ch)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(ch, code + 32)
    return ch


def to_upper(ch: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(ch)
    if ord("a") <= code <= ord("z"):
        return _same_kind(ch, code - 32)
    return ch
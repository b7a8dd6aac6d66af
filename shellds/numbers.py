"""Integer parsing and formatting with C integer semantics."""

from __future__ import annotations

from itertools import takewhile
from typing import Optional

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: Optional[str]) -> int:
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda c: "0" <= c <= "9", rest))
    return sign * int(digits or "0")


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. ``None`` or text without digits gives 0. Values
    outside the 32-bit range wrap around.
    """
    return _wrap(_parse(text), 32)


def atoll(text: Optional[str]) -> int:
    """Parse a leading decimal integer as a 64-bit signed value."""
    return _wrap(_parse(text), 64)


def itoa(number: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit integer")
    return str(number)


def lltoa(number: int) -> str:
    """Format a 64-bit integer in decimal after narrowing it to 32 bits.

    The value is reduced to a 32-bit signed integer before formatting, so
    only numbers within that range come back unchanged.
    """
    if not LLONG_MIN <= number <= LLONG_MAX:
        raise OverflowError(f"{number} does not fit in a 64-bit integer")
    return str(_wrap(number, 32))
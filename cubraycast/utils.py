"""Small helpers for reading scene files: checks, number parsing, splitting."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = "\t\n\v\f\r "
_LEADING_NUMBER = re.compile("[\t\n\v\f\r ]*([+-]?)([0-9]*)")


class CubError(Exception):
    """Raised when a scene cannot be loaded or is invalid."""


def check_extension(filename: str) -> bool:
    """Return True when ``filename`` ends with ``.cub``."""
    return len(filename) >= 4 and filename.endswith(".cub")


def is_digit_str(text: str) -> bool:
    """Return True when every character is an ASCII digit (True for "")."""
    return all("0" <= ch <= "9" for ch in text)


def is_empty_line(line: str) -> bool:
    """Return True when the line holds only whitespace (True for "")."""
    return all(ch in _WHITESPACE for ch in line)


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_div10(value: int) -> int:
    quotient = abs(value) // 10
    return quotient if value >= 0 else -quotient


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the scene reader does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0. Arithmetic wraps at 32 bits, and
    once the accumulated value divided by ten exceeds ``INT_MAX // 10`` the
    result is clamped to ``INT_MAX`` or ``INT_MIN`` depending on the sign.
    """
    match = _LEADING_NUMBER.match(text)
    sign = -1 if match.group(1) == "-" else 1
    decimal = 0
    for digit in match.group(2):
        decimal = _wrap32(decimal * 10 + int(digit))
        if _trunc_div10(decimal) > INT_MAX // 10:
            return INT_MAX if sign == 1 else INT_MIN
    return _wrap32(sign * decimal)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]
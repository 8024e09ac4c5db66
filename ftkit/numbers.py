"""Conversions between numbers and their decimal text."""

from __future__ import annotations

import math
import operator

from ftkit.chars import isdigit, isspace

_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer: whitespace, one optional sign, then digits.

    Parsing stops at the first non-digit; no digits yields 0. The result
    wraps to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and isspace(text[pos]):
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and isdigit(text[pos]):
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return _wrap_int32(-value if negative else value)


def nbrlen(n: int) -> int:
    """Number of characters in the decimal form of n, minus sign included."""
    return len(itoa(n))


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    return str(operator.index(n))


def dtoa(n: float, precision: int) -> str:
    """Fixed-point text of n with precision digits after the point.

    Digits are produced by repeated multiplication by ten and truncation,
    never rounded. The point is always present, even with no digits after it.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    if math.isnan(n) or math.isinf(n):
        raise ValueError(f"cannot format {n!r}")
    whole = int(n)
    frac = n - whole
    sign = ""
    if n < 0:
        sign = "-"
        whole = -whole
        frac = -frac
    digits = []
    for _ in range(precision):
        frac *= 10
        digit = int(frac)
        digits.append(str(digit))
        frac -= digit
    return f"{sign}{whole}.{''.join(digits)}"
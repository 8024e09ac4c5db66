"""Formatted output with a small set of conversions.

Supported conversions: %c, %s, %p, %d, %i, %u, %f, %x, %X and %%. Any
other character after '%' is written as it is. Each function returns the
number of characters written.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any, TextIO

from ftkit.output import (
    putchar,
    putnbr,
    putnbr_base,
    putnbr_float,
    putnbr_unsigned,
    putpointer,
    putstr,
)

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_TAKES_ARGUMENT = frozenset("cspdiufxX")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any], stream: TextIO | None) -> int:
    if spec == "%":
        return putchar("%", stream)
    if spec not in _TAKES_ARGUMENT:
        return putchar(spec, stream)
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return putchar(_as_char(value), stream)
    if spec == "s":
        return putstr(None if value is None else str(value), stream)
    if spec == "p":
        return putpointer(value, stream)
    if spec in "di":
        return putnbr(_wrap_int32(operator.index(value)), stream)
    if spec == "u":
        return putnbr_unsigned(value, stream)
    if spec == "f":
        return putnbr_float(float(value), stream)
    # Hex digits are produced from the value taken as a signed 32-bit integer.
    digits = _LOWER_HEX if spec == "x" else _UPPER_HEX
    return putnbr_base(_wrap_int32(operator.index(value)), digits, stream)


def fprintf(stream: TextIO | None, fmt: str, *args: Any) -> int:
    """Write fmt to stream with its conversions filled from args."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    values = iter(args)
    written = 0
    literal: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            literal.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if literal:
            written += putstr("".join(literal), stream)
            literal = []
        written += _convert(spec, values, stream)
    if literal:
        written += putstr("".join(literal), stream)
    return written


def printf(fmt: str, *args: Any) -> int:
    """Write fmt to standard output with its conversions filled from args."""
    return fprintf(None, fmt, *args)
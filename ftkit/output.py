"""Writing characters, strings and numbers to a text stream.

Every function returns the number of characters it wrote. When no stream
is given, standard output is used.
"""

from __future__ import annotations

import operator
import sys
from typing import TextIO

from ftkit.numbers import dtoa

_UINT_MODULUS = 1 << 32
_HEX_DIGITS = "0123456789abcdef"


def _emit(text: str, stream: TextIO | None) -> int:
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)


def putchar(c: str, stream: TextIO | None = None) -> int:
    """Write the single character c."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _emit(c, stream)


def putstr(s: str | None, stream: TextIO | None = None) -> int:
    """Write s, or "(null)" when s is None."""
    return _emit("(null)" if s is None else s, stream)


def putendl(s: str | None, stream: TextIO | None = None) -> int:
    """Write s followed by a newline; write nothing when s is None."""
    if s is None:
        return 0
    return _emit(s + "\n", stream)


def putnbr(n: int, stream: TextIO | None = None) -> int:
    """Write n in decimal."""
    return _emit(str(operator.index(n)), stream)


def putlnbr(n: int, stream: TextIO | None = None) -> int:
    """Write the long integer n in decimal."""
    return putnbr(n, stream)


def _in_base(n: int, base: str) -> str:
    size = len(base)
    digits = []
    while True:
        n, rem = divmod(n, size)
        digits.append(base[rem])
        if n == 0:
            break
    return "".join(reversed(digits))


def putnbr_base(n: int, base: str, stream: TextIO | None = None) -> int:
    """Write n using the characters of base as its digits, with '-' if negative."""
    n = operator.index(n)
    if len(base) < 2:
        raise ValueError("base needs at least two digits")
    if len(set(base)) != len(base):
        raise ValueError("base digits must be distinct")
    text = ("-" if n < 0 else "") + _in_base(abs(n), base)
    return _emit(text, stream)


def putnbr_unsigned(n: int, stream: TextIO | None = None) -> int:
    """Write n as an unsigned 32-bit integer in decimal; negatives wrap around."""
    return _emit(str(operator.index(n) % _UINT_MODULUS), stream)


def putnbr_float(n: float, stream: TextIO | None = None) -> int:
    """Write n in fixed-point with six truncated digits after the point."""
    return _emit(dtoa(n, 6), stream)


def putpointer(address: int | None, stream: TextIO | None = None) -> int:
    """Write an address as "0x" and lower-case hex, or "(nil)" when it is None."""
    if address is None:
        return _emit("(nil)", stream)
    address = operator.index(address)
    if address < 0:
        raise ValueError("address must not be negative")
    return _emit("0x" + _in_base(address, _HEX_DIGITS), stream)
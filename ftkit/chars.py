"""Character classification and case conversion restricted to ASCII."""

from __future__ import annotations

WHITESPACE = " \t\n\v\f\r"


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def isupper(c: str | int) -> bool:
    """True for 'A' to 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def islower(c: str | int) -> bool:
    """True for 'a' to 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    return isupper(c) or islower(c)


def isdigit(c: str | int) -> bool:
    """True for '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for printable ASCII, space to tilde."""
    return 32 <= _code(c) <= 126


def isspace(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return 9 <= code <= 13 or code == ord(" ")


def toupper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    if not islower(c):
        return c
    if isinstance(c, str):
        return chr(ord(c) - 32)
    return c - 32


def tolower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    if not isupper(c):
        return c
    if isinstance(c, str):
        return chr(ord(c) + 32)
    return c + 32


def is_charset(c: str, charset: str) -> bool:
    """True if the single character c occurs in charset."""
    _code(c)
    return c in charset


def string_lower(text: str) -> str:
    """Return text with ASCII upper-case letters turned to lower case."""
    return "".join(tolower(ch) for ch in text)
"""Splitting UTF-8 encoded bytes into per-character pieces and back."""

from __future__ import annotations

from collections.abc import Iterable


def _byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected a byte value, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def is_ascii(byte: int) -> bool:
    """True for a single-byte (ASCII) character."""
    return _byte(byte) < 0x80


def is_two_byte(byte: int) -> bool:
    """True for the lead byte of a two-byte sequence."""
    return (_byte(byte) & 0xE0) == 0xC0


def is_three_byte(byte: int) -> bool:
    """True for the lead byte of a three-byte sequence."""
    return (_byte(byte) & 0xF0) == 0xE0


def is_four_byte(byte: int) -> bool:
    """True for the lead byte of a four-byte sequence."""
    return (_byte(byte) & 0xF8) == 0xF0


def _sequence_length(lead: int) -> int:
    if is_two_byte(lead):
        return 2
    if is_three_byte(lead):
        return 3
    if is_four_byte(lead):
        return 4
    # ASCII and stray continuation or invalid bytes stand alone.
    return 1


def split_chars(data: bytes | bytearray) -> list[bytes]:
    """Split UTF-8 data into one bytes object per character.

    The length of each piece is taken from its lead byte alone; a byte that
    is not a valid lead byte becomes a piece of its own, and a sequence cut
    short by the end of the data keeps what is left.
    """
    raw = bytes(data)
    pieces: list[bytes] = []
    pos = 0
    while pos < len(raw):
        size = _sequence_length(raw[pos])
        pieces.append(raw[pos : pos + size])
        pos += size
    return pieces


def join_chars(chars: Iterable[bytes]) -> bytes:
    """Concatenate per-character pieces back into one bytes object."""
    return b"".join(bytes(piece) for piece in chars)
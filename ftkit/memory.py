"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_span(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer size {len(buf)}")


def memset(buf: bytearray | memoryview, c: int, n: int) -> bytearray | memoryview:
    """Set the first n bytes of buf to the low byte of c and return buf."""
    _check_span(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray | memoryview, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dst: bytearray | memoryview, src: Buffer, n: int) -> bytearray | memoryview:
    """Copy the first n bytes of src into the start of dst and return dst."""
    _check_span(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: bytearray | memoryview, src: Buffer, n: int) -> bytearray | memoryview:
    """Copy n bytes from src to dst, correct even when the two overlap; return dst."""
    _check_span(n, dst, src)
    # Taking a snapshot of the source first makes overlapping regions safe.
    chunk = bytes(src[:n])
    dst[:n] = chunk
    return dst


def memchr(data: Buffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of c among the first n, or None."""
    _check_span(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first n bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)
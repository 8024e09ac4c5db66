"""String searching, comparison and bounded copying with NUL-terminated semantics.

A string ends at its first NUL character, if it has one.
"""

from __future__ import annotations

NUL = "\0"


def _terminated(s: str) -> str:
    return s.split(NUL, 1)[0]


def _char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_terminated(s))


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first c in s, or None; searching for NUL finds the terminator."""
    text = _terminated(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last c in s, or None; searching for NUL finds the terminator."""
    text = _terminated(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(a: str, b: str) -> int:
    for x, y in zip(a + NUL, b + NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing character codes, or 0 when equal."""
    return _compare(_terminated(a), _terminated(b))


def strncmp(a: str, b: str, n: int) -> int:
    """Like strcmp, looking at no more than n characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(_terminated(a)[:n], _terminated(b)[:n]) if n else 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    needle = _terminated(needle)
    if not needle:
        return 0
    text = _terminated(haystack)
    index = text.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the length of src, which the caller can
    compare with size to detect truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _terminated(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When dst already fills the buffer it is left as it is and the length
    reported is size plus the length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head = _terminated(dst)
    tail = _terminated(src)
    if size == 0:
        return head, len(tail)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strncpy(src: str, length: int) -> str:
    """Exactly length characters: src cut to length, padded with NULs if shorter."""
    if length < 0:
        raise ValueError("length must not be negative")
    return _terminated(src)[:length].ljust(length, NUL)
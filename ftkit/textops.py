"""Building, trimming, joining and rewriting strings."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ftkit.chars import WHITESPACE


def _single(c: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"expected a character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strndup(s: str, n: int) -> str:
    """A copy of at most the first n characters of s."""
    return s[: max(n, 0)]


def substr(s: str, start: int, length: int) -> str:
    """Up to length characters of s beginning at start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(a: str | None, b: str | None) -> str | None:
    """Concatenate a and b; a missing side yields the other, both missing yields None."""
    if a is None and b is None:
        return None
    return (a or "") + (b or "")


def strjoin_list(strs: Iterable[str] | None, sep: str) -> str | None:
    """Join strs with sep between them; None when there is nothing to join."""
    if strs is None:
        return None
    items = list(strs)
    if not items:
        return None
    return sep.join(items)


def charjoin(s: str | None, c: str) -> str:
    """s with the single character c appended; a missing s yields just c."""
    _single(c)
    return (s or "") + c


def strtrim(s: str, chars: str) -> str:
    """s with every leading and trailing character found in chars removed."""
    if not chars:
        return s
    return s.strip(chars)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string built from f(index, character) for each character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: str, f: Callable[[int, str], str | None]) -> str:
    """Call f(index, character) for each character of s.

    When f returns a string it replaces that character; when it returns
    None the character is kept. The resulting string is returned.
    """
    out = []
    for i, ch in enumerate(s):
        replacement = f(i, ch)
        out.append(ch if replacement is None else replacement)
    return "".join(out)


def count_char(s: str, c: str) -> int:
    """Number of times the character c occurs in s."""
    return s.count(_single(c))


def count_chars(s: str, chars: str) -> int:
    """Number of characters of s that occur in chars."""
    wanted = set(chars)
    return sum(1 for ch in s if ch in wanted)


def trunc(s: str, n: int) -> str:
    """s without its last n characters; unchanged when s is shorter than n."""
    if n < 0:
        raise ValueError("n must not be negative")
    if len(s) < n:
        return s
    return s[: len(s) - n]


def strreplace(s: str, old: str, new: str) -> str:
    """s with every non-overlapping occurrence of old, left to right, replaced by new."""
    if not old:
        raise ValueError("the text to replace must not be empty")
    return s.replace(old, new)


def strsameedge(s: str | None, edge: str) -> bool:
    """True if s, ignoring surrounding whitespace, starts and ends with edge's first character."""
    if not s or not edge:
        return False
    stripped = s.strip(WHITESPACE)
    if not stripped:
        return False
    mark = edge[0]
    return stripped[0] == mark and stripped[-1] == mark


def append(s1: str | None, s2: str) -> str:
    """s2 appended to s1, a missing s1 counting as empty."""
    return (s1 or "") + s2
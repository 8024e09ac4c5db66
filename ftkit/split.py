"""Splitting strings into words on delimiter characters or separator strings."""

from __future__ import annotations

from collections.abc import Iterator


def _runs(s: str, charset: str) -> Iterator[str]:
    """Yield the maximal runs of characters of s that are not in charset."""
    delimiters = set(charset)
    word: list[str] = []
    for ch in s:
        if ch in delimiters:
            if word:
                yield "".join(word)
                word = []
        else:
            word.append(ch)
    if word:
        yield "".join(word)


def count_words(s: str, charset: str) -> int:
    """Number of runs of characters of s that contain no character of charset."""
    return sum(1 for _ in _runs(s, charset))


def split(s: str, charset: str) -> list[str]:
    """The words of s, taking every character of charset as a delimiter.

    Empty words are never produced.
    """
    return list(_runs(s, charset))


def split_quote(s: str, charset: str, quotes: str) -> list[str]:
    """Split s on characters of charset, except inside quoted stretches.

    A character of quotes opens a quoted stretch that lasts until the same
    character appears again. Quote characters are kept in the words, and an
    unterminated quote runs to the end of the string.
    """
    delimiters = set(charset)
    quote_chars = set(quotes)
    words: list[str] = []
    pos = 0
    end = len(s)
    while pos < end:
        while pos < end and s[pos] in delimiters:
            pos += 1
        if pos == end:
            break
        start = pos
        current_quote = ""
        while pos < end and (current_quote or s[pos] not in delimiters):
            ch = s[pos]
            if not current_quote and ch in quote_chars:
                current_quote = ch
            elif ch == current_quote:
                current_quote = ""
            pos += 1
        words.append(s[start:pos])
    return words


def strsplit(s: str, separator: str) -> list[str]:
    """Split s on the whole string separator.

    No more pieces are produced than there are characters of s that occur
    in separator, and splitting stops once s is used up; so a trailing
    piece after the last separator is not returned.
    """
    wanted = set(separator)
    limit = sum(1 for ch in s if ch in wanted)
    pieces: list[str] = []
    rest = s
    while len(pieces) < limit and rest:
        pos = rest.find(separator)
        if pos < 0:
            pos = len(rest)
        pieces.append(rest[:pos])
        rest = rest[pos + len(separator):]
    return pieces
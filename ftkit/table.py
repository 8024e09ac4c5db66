"""Operations on lists of strings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from ftkit.output import putstr


def tabdel(table: list[str], pos: int) -> str:
    """Remove the string at pos from table in place and return it.

    Raises IndexError when pos is not a position inside the table.
    """
    if pos < 0 or pos >= len(table):
        raise IndexError(f"position {pos} is outside a table of {len(table)} strings")
    return table.pop(pos)


def tabdup(table: Sequence[str]) -> list[str]:
    """A new list holding the same strings as table."""
    return list(table)


def tabinsert(table: Sequence[str], s: str, pos: int) -> list[str]:
    """A new list with s inserted before position pos.

    A pos equal to the table's length appends s; a pos beyond it leaves s
    out, so the result is a plain copy of table.
    """
    if pos < 0:
        raise IndexError("position must not be negative")
    items = list(table)
    if pos <= len(items):
        items.insert(pos, s)
    return items


def tabjoin(first: Sequence[str] | None, second: Sequence[str] | None) -> list[str] | None:
    """A new list of the strings of first followed by those of second.

    None when either table is missing.
    """
    if first is None or second is None:
        return None
    return [*first, *second]


def tablen(table: Sequence[str] | None) -> int:
    """Number of strings in table; a missing table counts as empty."""
    return 0 if table is None else len(table)


def tabprint(
    table: Sequence[str | None],
    prefix: str | None = "",
    suffix: str | None = "",
    stream: TextIO | None = None,
) -> int:
    """Write each string of table on its own line between prefix and suffix.

    A missing prefix, suffix or entry is written as "(null)". Returns the
    number of characters written.
    """
    written = 0
    for item in table:
        written += putstr(prefix, stream)
        written += putstr(item, stream)
        written += putstr(suffix, stream)
        written += putstr("\n", stream)
    return written
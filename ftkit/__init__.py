"""Helpers for characters, strings, buffers, output, lines, lists, tables and UTF-8."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "colors",
    "cstring",
    "lines",
    "linkedlist",
    "memory",
    "numbers",
    "output",
    "printf",
    "split",
    "table",
    "textops",
    "utf8",
]
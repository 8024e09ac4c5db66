"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TextIO

from ftkit.printf import fprintf


@dataclass
class _Node:
    content: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list; iteration yields the contents front to back."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def add_front(self, content: Any) -> None:
        """Put content at the front."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content: Any) -> None:
        """Put content at the back."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Content of the last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every element, passing each content to delete first if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = self._tail = None
        self._size = 0

    def iterate(self, f: Callable[[Any], None]) -> None:
        """Call f on each content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> LinkedList:
        """A new list holding f applied to each content."""
        return LinkedList(f(content) for content in self)

    def show(self, stream: TextIO | None = None) -> LinkedList:
        """Write each content on its own line and return the list."""
        for content in self:
            fprintf(stream, "%s\n", content)
        return self
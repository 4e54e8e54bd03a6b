"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list whose nodes are reachable from ``head``."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for content in contents:
            self.add_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Put ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content, from head to tail."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func(content)`` for each content, in order."""
        return LinkedList(func(content) for content in self)

    def clear(self, on_delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each content to ``on_delete`` first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if on_delete is not None:
                on_delete(node.content)
            node.next = None
            node = following
        self.head = None
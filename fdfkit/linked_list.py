"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(Node(content))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; ``None`` is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` (and whatever follows it) after the last node; ``None`` is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Pass every content to ``delete`` and empty the list.

        Without a ``delete`` function the list is left untouched.
        """
        if delete is None:
            return
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.next = None
            delete(node.content)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Optional[Callable[[Any], Any]],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """A new list holding ``func(content)`` for every content.

        If ``func`` raises part way, the contents already made are passed to
        ``delete`` before the exception propagates. Without ``func`` the
        result is an empty list.
        """
        result = LinkedList()
        if func is None:
            return result
        try:
            for content in self:
                result.push_back(Node(func(content)))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
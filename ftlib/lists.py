"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list reachable from its first node, ``head``."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(Node(content))

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of each node, first to last."""
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def nodes(self) -> Iterator[Node]:
        """Yield each node, first to last."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the first node of the list; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` after the last node of the list; None is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self.nodes():
            pass
        return tail

    def iterate(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on the content of every node, first to last."""
        if f is None:
            return
        for content in self:
            f(content)

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Empty the list, passing each node's content to ``delete`` if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def map(
        self,
        f: Optional[Callable[[Any], Any]],
        delete: Optional[Callable[[Any], Any]],
    ) -> "LinkedList":
        """Return a new list holding ``f`` applied to each content.

        If ``f`` raises part way through, the contents built so far are passed
        to ``delete`` and the error propagates. A None ``f`` gives an empty list.
        """
        result = LinkedList()
        if f is None:
            return result
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result
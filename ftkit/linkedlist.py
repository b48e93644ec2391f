"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list, reached through its ``head`` node.

    Iterating yields contents, not nodes.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    @staticmethod
    def _check_node(node: Any) -> Node:
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")
        return node

    def push_front(self, node: Node) -> None:
        """Make ``node`` the new head; its old ``next`` is replaced."""
        node = self._check_node(node)
        node.next = self.head
        self.head = node

    def push_back(self, node: Node) -> None:
        """Link ``node`` after the last node.

        Any nodes already following ``node`` come along with it.
        """
        node = self._check_node(node)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """The last node, or ``None`` for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def pop_front(self, delete: Optional[Callable[[Any], Any]] = None) -> Any:
        """Unlink the head node and return its content.

        ``delete``, when given, is called on the content first. Raises
        ``IndexError`` on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """New list of ``f(content)`` for every content.

        If ``f`` raises, the contents produced so far are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
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
"""Intrusive doubly-linked recency list.

Nodes carry their own ``prev``/``next`` links. A single sentinel closes the
ring, so ``sentinel.next`` is the most recently used node and
``sentinel.prev`` the least recently used one.
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Node(Generic[K, V]):
    """Cache entry with its position in the recency list."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: Node[K, V] = self
        self.next: Node[K, V] = self

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r})"


class OrderList(Generic[K, V]):
    """Nodes ordered from most recently used (head) to least recently used (tail)."""

    def __init__(self) -> None:
        self._sentinel: Node[K, V] = Node(None, None)  # type: ignore[arg-type]
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Node[K, V]]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node
            node = node.next

    @property
    def head(self) -> Node[K, V] | None:
        node = self._sentinel.next
        return None if node is self._sentinel else node

    @property
    def tail(self) -> Node[K, V] | None:
        node = self._sentinel.prev
        return None if node is self._sentinel else node

    def push_front(self, node: Node[K, V]) -> None:
        """Link a detached node in at the head."""
        first = self._sentinel.next
        node.prev = self._sentinel
        node.next = first
        first.prev = node
        self._sentinel.next = node
        self._length += 1

    def unlink(self, node: Node[K, V]) -> None:
        """Detach a node linked into this list; neighbours keep their relative order.

        A detached node links to itself, so unlinking it again is a no-op.
        """
        if node.next is node:
            return
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node
        node.next = node
        self._length -= 1

    def move_to_front(self, node: Node[K, V]) -> None:
        if self._sentinel.next is node:
            return
        self.unlink(node)
        self.push_front(node)

    def clear(self) -> None:
        node = self._sentinel.next
        while node is not self._sentinel:
            following = node.next
            node.prev = node
            node.next = node
            node = following
        self._sentinel.prev = self._sentinel
        self._sentinel.next = self._sentinel
        self._length = 0

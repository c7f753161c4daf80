"""Intrusive doubly linked lists of objects."""

from __future__ import annotations

from typing import Iterator, TypeVar

N = TypeVar("N", bound="ObjectListNode")


class ObjectListNode:
    """Mixin giving an object the links to belong to one ObjectList."""

    _list: ObjectList | None = None
    _next: ObjectListNode | None = None
    _prev: ObjectListNode | None = None


def _require_node(node: object) -> None:
    if not isinstance(node, ObjectListNode):
        raise TypeError(f"expected an ObjectListNode, got {type(node).__name__}")


class ObjectList:
    """A list that owns its nodes; a node belongs to at most one list."""

    def __init__(self) -> None:
        self._head: ObjectListNode | None = None
        self._tail: ObjectListNode | None = None
        self._count = 0

    def empty(self) -> bool:
        """Tell whether the list holds no nodes."""
        return self._head is None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[ObjectListNode]:
        node = self._head
        while node is not None:
            following = node._next
            yield node
            node = following

    def __reversed__(self) -> Iterator[ObjectListNode]:
        node = self._tail
        while node is not None:
            preceding = node._prev
            yield node
            node = preceding

    def __contains__(self, node: object) -> bool:
        return isinstance(node, ObjectListNode) and node._list is self

    def add(self, node: ObjectListNode) -> bool:
        """Append node, taking it from any other list; False if already here."""
        _require_node(node)
        if node._list is self:
            return False
        if node._list is not None:
            node._list.remove(node)
        node._prev = self._tail
        node._next = None
        if self._tail is None:
            self._head = node
        else:
            self._tail._next = node
        self._tail = node
        self._count += 1
        node._list = self
        return True

    def remove(self, node: ObjectListNode) -> bool:
        """Unlink node from this list; False if it does not belong here."""
        _require_node(node)
        if node._list is not self:
            return False
        prev, nxt = node._prev, node._next
        if prev is not None:
            prev._next = nxt
        else:
            self._head = nxt
        if nxt is not None:
            nxt._prev = prev
        else:
            self._tail = prev
        node._list = node._next = node._prev = None
        self._count -= 1
        return True

    def clear(self) -> None:
        """Detach every node and leave the list empty."""
        node = self._head
        while node is not None:
            following = node._next
            node._list = node._next = node._prev = None
            node = following
        self._head = self._tail = None
        self._count = 0
"""A singly linked list used as a stack: items are pushed and popped at the head."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next_node: Optional["_Node[T]"]) -> None:
        self.value = value
        self.next = next_node


class LinkedList(Generic[T]):
    """Singly linked list; the most recently pushed item is at the head."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        """Put ``value`` at the head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the head value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> T:
        """Return the head value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("peek into empty list")
        return self._head.value

    def replace_head(self, value: T) -> None:
        """Overwrite the head value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("replace head of empty list")
        self._head.value = value

    def drain(self) -> Iterator[T]:
        """Yield values from head to tail, removing each one."""
        while self._head is not None:
            yield self.pop()

    def __iter__(self) -> Iterator[T]:
        """Yield values from head to tail without changing the list."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
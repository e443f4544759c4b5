"""A queue and a double-ended queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class CapacityError(Exception):
    """Raised when adding to a container that is already full."""

    def __init__(self, message: str = "No space available") -> None:
        super().__init__(message)


class BoundedQueue(Generic[T]):
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: Deque[T] = deque()

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back; raise CapacityError when full."""
        if len(self._items) == self.capacity:
            raise CapacityError()
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek into empty queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self.capacity}, items={list(self._items)!r})"


class BoundedDeque(Generic[T]):
    """A double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        # The right end is the front, the left end the rear.
        self._items: Deque[T] = deque()

    def _check_space(self) -> None:
        if len(self._items) == self.capacity:
            raise CapacityError()

    def add_front(self, value: T) -> None:
        """Add ``value`` at the front; raise CapacityError when full."""
        self._check_space()
        self._items.append(value)

    def add_rear(self, value: T) -> None:
        """Add ``value`` at the rear; raise CapacityError when full."""
        self._check_space()
        self._items.appendleft(value)

    def remove_front(self) -> T:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("remove from empty deque")
        return self._items.pop()

    def remove_rear(self) -> T:
        """Remove and return the rear item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("remove from empty deque")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from rear to front."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedDeque(capacity={self.capacity}, items={list(self._items)!r})"


def _first(items: Deque[T]) -> Optional[T]:
    return items[0] if items else None
"""A stack built on a single queue."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class QueueStack(Generic[T]):
    """Last-in first-out stack that stores its items in a queue.

    Pushing appends to the back of the queue.  Popping rotates all but the
    newest item to the back so that the newest item reaches the front, then
    removes it from there.
    """

    def __init__(self) -> None:
        self._queue: Deque[T] = deque()

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._queue.append(value)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        self._queue.rotate(-(len(self._queue) - 1))
        return self._queue.popleft()

    def peek(self) -> T:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._queue:
            raise IndexError("peek into empty stack")
        return self._queue[-1]

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the underlying queue from front to back."""
        return iter(self._queue)

    def __repr__(self) -> str:
        return f"QueueStack({list(self._queue)!r})"
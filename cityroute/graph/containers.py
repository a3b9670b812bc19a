"""Fixed-capacity containers used as open lists by the graph searches.

Both containers pre-allocate their backing storage and never grow. A
push or enqueue on a full container raises ``CapacityExceededError``.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from ..domain.errors import CapacityExceededError, EmptyAccessError

T = TypeVar("T")

DEFAULT_STACK_CAPACITY = 100
DEFAULT_QUEUE_CAPACITY = 1000


def _check_capacity(capacity: int) -> int:
    if capacity <= 0:
        raise ValueError(f"Capacity must be positive, got {capacity}")
    return capacity


class BoundedStack(Generic[T]):
    """Last-in-first-out container with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_STACK_CAPACITY) -> None:
        self._data: List[Optional[T]] = [None] * _check_capacity(capacity)
        self._top = -1

    @property
    def capacity(self) -> int:
        return len(self._data)

    def size(self) -> int:
        return self._top + 1

    def is_empty(self) -> bool:
        return self._top == -1

    def top(self) -> T:
        """Return the top element without removing it.

        Raises
        ------
        EmptyAccessError
            If the stack holds no element.
        """
        if self.is_empty():
            raise EmptyAccessError("Stack is empty")
        return self._data[self._top]  # type: ignore[return-value]

    def push(self, element: T) -> None:
        if self._top == len(self._data) - 1:
            raise CapacityExceededError("Stack is full", capacity=self.capacity)
        self._top += 1
        self._data[self._top] = element

    def pop(self) -> Optional[T]:
        """Remove and return the top element, or None when empty."""
        if self.is_empty():
            return None
        element = self._data[self._top]
        self._data[self._top] = None
        self._top -= 1
        return element

    def __len__(self) -> int:
        return self.size()


class BoundedQueue(Generic[T]):
    """First-in-first-out circular buffer with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY) -> None:
        self._data: List[Optional[T]] = [None] * _check_capacity(capacity)
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def first(self) -> Optional[T]:
        """Return the front element without removing it, or None."""
        if self.is_empty():
            return None
        return self._data[self._front]

    def enqueue(self, element: T) -> None:
        if self._size == len(self._data):
            raise CapacityExceededError("Queue is full", capacity=self.capacity)
        avail = (self._front + self._size) % len(self._data)
        self._data[avail] = element
        self._size += 1

    def dequeue(self) -> Optional[T]:
        """Remove and return the front element, or None when empty."""
        if self.is_empty():
            return None
        element = self._data[self._front]
        self._data[self._front] = None
        self._front = (self._front + 1) % len(self._data)
        self._size -= 1
        return element

    def __len__(self) -> int:
        return self._size

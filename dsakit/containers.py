"""Bounded queues, a minimum-tracking stack, a stock spanner and a max priority queue."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Any


class CircularQueue:
    """A fixed-capacity FIFO queue stored in a ring of slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def enqueue(self, value: Any) -> None:
        """Append value at the rear; raise IndexError when the queue is full."""
        if self.is_full():
            raise IndexError("queue is full")
        tail = (self._head + self._size) % self.capacity
        self._slots[tail] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> Any:
        """The value at the front; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        """The value at the rear; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[(self._head + self._size - 1) % self.capacity]


class MinStack:
    """A stack that reports its smallest value in constant time."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._minima: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        self._items.append(value)
        if not self._minima or value <= self._minima[-1]:
            self._minima.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        value = self._items.pop()
        if value == self._minima[-1]:
            self._minima.pop()
        return value

    def top(self) -> Any:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def get_min(self) -> Any:
        if not self._minima:
            raise IndexError("stack is empty")
        return self._minima[-1]


class BoundedQueue:
    """A FIFO queue that refuses to grow past its capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def enqueue(self, value: Any) -> None:
        """Append value; raise IndexError on overflow."""
        if self.is_full():
            raise IndexError("queue overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError on underflow."""
        if self.is_empty():
            raise IndexError("queue underflow")
        return self._items.popleft()

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._items[0]


class TwoStackQueue:
    """A FIFO queue built from an input stack and an output stack."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, value: Any) -> None:
        self._inbox.append(value)

    def pop(self) -> Any:
        """Remove and return the oldest value; raise IndexError when empty."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        """The oldest value; raise IndexError when empty."""
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox


class StockSpanner:
    """Reports, for each new price, how many consecutive days it has been the high."""

    def __init__(self) -> None:
        self._stack: list[tuple[Any, int]] = []

    def span(self, price: Any) -> int:
        """Count of consecutive days up to today with price at most today's."""
        days = 1
        while self._stack and self._stack[-1][0] <= price:
            days += self._stack.pop()[1]
        self._stack.append((price, days))
        return days


class MaxPriorityQueue:
    """A priority queue that always removes its largest value first."""

    def __init__(self) -> None:
        self._heap: list[Any] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def insert(self, value: Any) -> None:
        heapq.heappush(self._heap, -value)

    def remove_max(self) -> Any | None:
        """Remove and return the largest value, or None when the queue is empty."""
        if not self._heap:
            return None
        return -heapq.heappop(self._heap)

    def contains(self, value: Any) -> bool:
        return -value in self._heap
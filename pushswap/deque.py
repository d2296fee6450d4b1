"""A double-ended queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class BoundedDeque:
    """Double-ended queue of integers that holds at most ``capacity`` items."""

    def __init__(self, capacity: int, values: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[int] = deque()
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedDeque({self.capacity}, {list(self._items)!r})"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def clear(self) -> None:
        self._items.clear()

    def push_front(self, value: int) -> None:
        """Add ``value`` at the top; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._items.appendleft(value)

    def push_back(self, value: int) -> None:
        """Add ``value`` at the bottom; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._items.append(value)

    def pop_front(self) -> int:
        """Remove and return the top item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def pop_back(self) -> int:
        """Remove and return the bottom item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from an empty deque")
        return self._items.pop()

    def peek(self, index: int) -> int:
        """Return the item ``index`` places from the top, or 0 if there is none."""
        if index < 0 or index >= len(self._items):
            return 0
        return self._items[index]
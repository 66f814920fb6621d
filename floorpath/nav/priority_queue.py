"""Min-priority queue used as the A* frontier."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Binary min-heap keyed by a float priority.

    Entries are ``(priority, seq, element)`` so elements never get compared.
    Equal priorities come back in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def is_empty(self) -> bool:
        return not self._heap

    def put(self, element: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), element))

    def get(self) -> T | None:
        """Pop the lowest-priority element, or None when the queue is empty."""
        if not self._heap:
            return None
        _, _, element = heapq.heappop(self._heap)
        return element

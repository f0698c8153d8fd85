"""Min-priority frontier queue with stable ties and lazy deletion.

Entries are ``(priority, sequence, element)`` tuples on a binary heap. The
monotonically increasing sequence number makes an element enqueued later sort
after every existing entry of equal priority, so the queue dequeues in the same
order as a sorted list that inserts with a strict less-than comparison.

There is no decrease-key: callers re-enqueue a relaxed element and discard the
obsolete entry when it is eventually dequeued.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Generic, List, Optional, Tuple, TypeVar

from pathtrace.types.base import Cost

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Frontier of ``(element, priority)`` entries, minimum priority first."""

    def __init__(self) -> None:
        self._heap: List[Tuple[Cost, int, T]] = []
        self._next_seq: int = 0

    def enqueue(self, element: T, priority: Cost) -> None:
        """Insert ``element``; duplicates of an existing element are allowed."""
        heappush(self._heap, (priority, self._next_seq, element))
        self._next_seq += 1

    def dequeue(self) -> Optional[T]:
        """Remove and return the minimum-priority element, or ``None`` if empty."""
        if not self._heap:
            return None
        return heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def peek_all(self) -> Tuple[T, ...]:
        """Return all queued elements in dequeue order without mutating the heap."""
        return tuple(entry[2] for entry in sorted(self._heap))

    def __len__(self) -> int:
        return len(self._heap)

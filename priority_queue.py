"""
User-facing min-priority queue backed by MinBinaryHeap.

Semantics:
- add_with_priority(e, p): insert if new; otherwise overwrite (last write wins).
- next(): remove and return the lowest-priority element; None if empty.
- adjust_priority(e, p): update if present; insert if absent.

Priorities must be finite floats. Negative values are allowed.
"""

from typing import Hashable, Optional, TypeVar

from algorithms import MinPriorityQueue
from min_binary_heap import MinBinaryHeap


T = TypeVar("T", bound=Hashable)


class PriorityQueue(MinPriorityQueue[T]):
    """
    Thin facade over MinBinaryHeap tuned for shortest-path relaxation.

    Complexity:
        add_with_priority / next / adjust_priority: O(log n)
        is_empty: O(1)

    Not safe for concurrent mutation.
    """

    def __init__(self) -> None:
        self._heap: MinBinaryHeap[T] = MinBinaryHeap()

    def is_empty(self) -> bool:
        return self._heap.is_empty()

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, elem: object) -> bool:
        return elem in self._heap

    def add_with_priority(self, elem: T, priority: float) -> None:
        self._heap.add_or_update(elem, priority)

    def next(self) -> Optional[T]:
        node = self._heap.pop()
        return node.elem if node is not None else None

    def adjust_priority(self, elem: T, new_priority: float) -> None:
        # update_priority validates before touching the heap, so a bad value
        # never reaches the insert branch.
        if not self._heap.update_priority(elem, new_priority):
            self._heap.push(elem, new_priority)

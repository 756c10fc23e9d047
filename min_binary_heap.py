"""
Indexed binary min-heap.

Stores (elem, priority) pairs in a list-backed complete binary tree and keeps
an elem -> slot map alongside it, so that any element's priority can be raised
or lowered in O(log n) instead of only popping the minimum.

Not safe for concurrent mutation; callers sharing an instance across threads
must synchronise externally.
"""

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, List, Optional, TypeVar
import math

from errors import DuplicateElementError, InvalidPriorityError


T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class HeapNode(Generic[T]):
    """Single heap slot: element plus its current priority."""
    elem: T
    priority: float


def _check_priority(priority: float) -> None:
    if not math.isfinite(priority):
        raise InvalidPriorityError(f"Priority must be finite. Got {priority}")


class MinBinaryHeap(Generic[T]):
    """
    Binary min-heap with O(log n) push, pop and priority update.

    Complexity:
        push / pop / update_priority / add_or_update: O(log n)
        contains / peek / size / is_empty: O(1)
    """

    def __init__(self) -> None:
        self._heap: List[HeapNode[T]] = []
        self._index_of: Dict[T, int] = {}

    # --- Queries -------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self._heap

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def contains(self, elem: T) -> bool:
        return elem in self._index_of

    def __contains__(self, elem: object) -> bool:
        return elem in self._index_of

    def peek(self) -> Optional[HeapNode[T]]:
        """Current minimum without removing it, or None if empty."""
        return self._heap[0] if self._heap else None

    # --- Mutation ------------------------------------------------------------

    def push(self, elem: T, priority: float) -> None:
        """
        Insert elem with priority. Requires elem not already present.

        Use add_or_update() for overwrite semantics.
        """
        _check_priority(priority)
        if elem in self._index_of:
            raise DuplicateElementError(f"Element already present: {elem!r}")
        self._heap.append(HeapNode(elem, float(priority)))
        i = len(self._heap) - 1
        self._index_of[elem] = i
        self._sift_up(i)

    def add_or_update(self, elem: T, priority: float) -> bool:
        """
        Insert elem, or overwrite its priority if already present.

        Returns:
            True if inserted, False if an existing entry was updated.
        """
        _check_priority(priority)
        idx = self._index_of.get(elem)
        if idx is None:
            self.push(elem, priority)
            return True
        self._update_at(idx, float(priority))
        return False

    def update_priority(self, elem: T, new_priority: float) -> bool:
        """
        Raise or lower the priority of an existing element.

        Returns:
            True if updated, False if elem is not in the heap (nothing is
            inserted in that case).
        """
        _check_priority(new_priority)
        idx = self._index_of.get(elem)
        if idx is None:
            return False
        self._update_at(idx, float(new_priority))
        return True

    def pop(self) -> Optional[HeapNode[T]]:
        """Remove and return the node with minimum priority, or None if empty."""
        if not self._heap:
            return None
        root = self._heap[0]
        last = self._heap.pop()
        del self._index_of[root.elem]

        if self._heap:
            self._heap[0] = last
            self._index_of[last.elem] = 0
            self._sift_down(0)
        return root

    def check_invariants(self) -> None:
        """
        Assert heap order and array/index-map consistency.

        Raises AssertionError on the first violation found.
        """
        assert len(self._index_of) == len(self._heap), "index map size differs from heap size"
        for i, node in enumerate(self._heap):
            assert self._index_of.get(node.elem) == i, f"index map out of sync for {node.elem!r} at slot {i}"
            if i > 0:
                p = self._parent(i)
                assert self._heap[p].priority <= node.priority, f"heap order broken between slots {p} and {i}"

    # --- Internal heap mechanics ---------------------------------------------

    def _update_at(self, i: int, new_priority: float) -> None:
        node = self._heap[i]
        old = node.priority
        self._heap[i] = HeapNode(node.elem, new_priority)
        if new_priority < old:
            self._sift_up(i)
        else:
            self._sift_down(i)

    def _sift_up(self, i: int) -> None:
        while i > 0:
            p = self._parent(i)
            if self._heap[i].priority < self._heap[p].priority:
                self._swap(i, p)
                i = p
            else:
                break

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i

            if left < n and self._heap[left].priority < self._heap[smallest].priority:
                smallest = left
            if right < n and self._heap[right].priority < self._heap[smallest].priority:
                smallest = right

            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest

    def _swap(self, i: int, j: int) -> None:
        # Array slots and index entries move together.
        if i == j:
            return
        ni = self._heap[i]
        nj = self._heap[j]
        self._heap[i] = nj
        self._heap[j] = ni
        self._index_of[nj.elem] = i
        self._index_of[ni.elem] = j

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

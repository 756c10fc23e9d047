"""
Algorithm interfaces for shortest-path search.

Keeps the search algorithm separate from the queue and graph implementations
it drives.
"""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, List, Optional, Tuple, TypeVar

from graph import Graph


V = TypeVar("V", bound=Hashable)
T = TypeVar("T", bound=Hashable)


class MinPriorityQueue(ABC, Generic[T]):
    """
    Interface for a min-priority queue with in-place priority changes.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def add_with_priority(self, elem: T, priority: float) -> None:
        """Insert elem, or overwrite its priority if present (last write wins)."""
        raise NotImplementedError

    @abstractmethod
    def next(self) -> Optional[T]:
        """Remove and return the lowest-priority element, or None if empty."""
        raise NotImplementedError

    @abstractmethod
    def adjust_priority(self, elem: T, new_priority: float) -> None:
        """Update elem's priority if present; insert it otherwise."""
        raise NotImplementedError


class ShortestPathEngine(ABC):
    """
    Interface for single-source, single-target shortest-path computation.
    """

    @abstractmethod
    def shortest_path_with_cost(
        self, graph: Graph[V], start: V, dest: V
    ) -> Optional[Tuple[List[V], float]]:
        """
        Compute the cheapest start -> dest path.

        Returns:
            (path, cost) with path running from start to dest inclusive,
            or None if dest is unreachable.
        """
        raise NotImplementedError

    def shortest_path(self, graph: Graph[V], start: V, dest: V) -> Optional[List[V]]:
        """
        Path-only variant of shortest_path_with_cost().

        Returns None if dest is unreachable.
        """
        result = self.shortest_path_with_cost(graph, start, dest)
        if result is None:
            return None
        return result[0]

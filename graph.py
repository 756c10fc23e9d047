"""
Directed, weighted graph abstraction.

Vertices are any hashable value.
Edges are directed: u -> v with float weight.
"""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Mapping, Set, TypeVar


V = TypeVar("V", bound=Hashable)


class Graph(ABC, Generic[V]):
    """Directed, weighted graph over hashable vertices."""

    @abstractmethod
    def get_vertices(self) -> Set[V]:
        """Return all vertices in the graph (caller-owned copy)."""
        raise NotImplementedError

    @abstractmethod
    def get_edges(self, vertex: V) -> Mapping[V, float]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns an empty mapping for unknown vertices or vertices without
        outgoing edges.
        """
        raise NotImplementedError

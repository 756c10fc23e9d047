"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using a simple adjacency-list representation.
"""

from typing import Dict, Hashable, Set, TypeVar
import math

from errors import InvalidWeightError
from graph import Graph


V = TypeVar("V", bound=Hashable)


class DirectedWeightedGraph(Graph[V]):
    """
    Directed, weighted graph backed by a vertex -> (neighbour -> weight) mapping.

    Weights must be finite. Negative weights and self-loops are stored as
    given; rejecting negatives is left to the algorithms that need it.
    Not safe for concurrent mutation.
    """

    def __init__(self) -> None:
        self._adj: Dict[V, Dict[V, float]] = {}

    # --- Mutation API --------------------------------------------------------

    def add_edge(self, src: V, dst: V, weight: float) -> None:
        """
        Add or overwrite a directed edge src -> dst with weight.
        Auto-adds both endpoints as vertices.
        """
        if not math.isfinite(weight):
            raise InvalidWeightError(f"Edge weight must be finite. Got {weight} on {src!r} -> {dst!r}")
        self._adj.setdefault(src, {})
        self._adj.setdefault(dst, {})
        self._adj[src][dst] = float(weight)

    def clear(self) -> None:
        self._adj.clear()

    # --- Graph interface -----------------------------------------------------

    def get_vertices(self) -> Set[V]:
        return set(self._adj)  # defensive copy

    def get_edges(self, vertex: V) -> Dict[V, float]:
        return dict(self._adj.get(vertex, {}))  # defensive copy

    def __len__(self) -> int:
        return len(self._adj)

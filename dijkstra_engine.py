"""
Indexed-heap Dijkstra implementation.

Drives a PriorityQueue with in-place priority updates to compute the
cheapest path between two vertices of any Graph implementation.
"""

from typing import Dict, Hashable, List, Optional, Tuple, TypeVar
import math

from algorithms import ShortestPathEngine
from errors import InvalidWeightError, NegativeWeightError
from graph import Graph
from priority_queue import PriorityQueue


V = TypeVar("V", bound=Hashable)


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Single-source, single-target Dijkstra with early exit at the destination.

    Each vertex is in the queue at most once; relaxations adjust its priority
    in place instead of pushing stale duplicates.

    Complexity:
        O(E log V) over the vertices reachable from start.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def shortest_path_with_cost(
        self, graph: Graph[V], start: V, dest: V
    ) -> Optional[Tuple[List[V], float]]:
        """
        Cheapest start -> dest path and its cost, or None if unreachable.

        Vertices move from unvisited to frontier (tentative distance, queued)
        to finalized (popped). A popped vertex's distance is optimal as long
        as every weight is non-negative, so the loop stops as soon as dest is
        popped. start and dest need not be known to the graph.

        Raises:
            NegativeWeightError: an explored edge has weight < 0. The query is
                aborted; no partial result is returned.
            InvalidWeightError: an explored edge has a non-finite weight, or a
                path cost overflows to infinity.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

        dist: Dict[V, float] = {start: 0.0}
        prev: Dict[V, V] = {}
        pq: PriorityQueue[V] = PriorityQueue()
        pq.add_with_priority(start, 0.0)
        self.last_heap_pushes += 1

        while not pq.is_empty():
            u = pq.next()
            self.last_heap_pops += 1
            if u == dest:
                break

            d_u = dist[u]
            for v, w in graph.get_edges(u).items():
                self.last_edges_examined += 1
                if not math.isfinite(w):
                    raise InvalidWeightError(f"Edge weight must be finite. Found {w} on edge {u!r} -> {v!r}")
                if w < 0:
                    raise NegativeWeightError(
                        f"Dijkstra requires non-negative edge weights. Found {w} on edge {u!r} -> {v!r}"
                    )
                alt = d_u + w
                if math.isinf(alt):
                    raise InvalidWeightError(f"Path cost to {v!r} overflows to infinity via {u!r}")
                if alt < dist.get(v, math.inf):
                    if v not in dist:
                        self.last_heap_pushes += 1
                    dist[v] = alt
                    prev[v] = u
                    pq.adjust_priority(v, alt)
                    self.last_relaxed += 1

        best = dist.get(dest, math.inf)
        if math.isinf(best):
            return None
        return _reconstruct_path(prev, start, dest), best


def _reconstruct_path(prev: Dict[V, V], start: V, dest: V) -> List[V]:
    """Walk predecessors back from dest to start, then reverse."""
    path = [dest]
    cur = dest
    while cur != start:
        cur = prev[cur]
        path.append(cur)
    path.reverse()
    return path


def shortest_path(graph: Graph[V], start: V, dest: V) -> Optional[List[V]]:
    """Convenience wrapper: cheapest start -> dest path, or None."""
    return SimpleDijkstraEngine().shortest_path(graph, start, dest)


def shortest_path_with_cost(
    graph: Graph[V], start: V, dest: V
) -> Optional[Tuple[List[V], float]]:
    """Convenience wrapper: (path, cost) for start -> dest, or None."""
    return SimpleDijkstraEngine().shortest_path_with_cost(graph, start, dest)

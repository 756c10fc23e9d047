"""
Utilities to generate seeded random directed graphs.

Used by the batch runner and by the randomized optimality tests.
"""

from typing import List, Optional
import random

from directed_weighted_graph import DirectedWeightedGraph


def build_random_graph(
    vertices: int,
    edge_probability: float,
    max_weight: float = 10.0,
    seed: Optional[int] = None,
    allow_self_loops: bool = False,
) -> DirectedWeightedGraph[int]:
    """
    Erdős–Rényi style directed graph over vertices 0..vertices-1.

    Args:
        vertices: number of vertices; only vertices touched by an edge show up
            in get_vertices(), matching DirectedWeightedGraph semantics.
        edge_probability: independent probability of each ordered pair u -> v.
        max_weight: weights are drawn uniformly from [0, max_weight].
        seed: RNG seed for reproducibility.
        allow_self_loops: whether u -> u pairs are also sampled.
    """
    if vertices < 0:
        raise ValueError("vertices must be non-negative")
    if not 0.0 <= edge_probability <= 1.0:
        raise ValueError("edge_probability must lie in [0, 1]")
    if max_weight < 0:
        raise ValueError("max_weight must be non-negative")

    rng = random.Random(seed)
    graph: DirectedWeightedGraph[int] = DirectedWeightedGraph()
    for u in range(vertices):
        for v in range(vertices):
            if u == v and not allow_self_loops:
                continue
            if rng.random() < edge_probability:
                graph.add_edge(u, v, _round_weight(rng.uniform(0.0, max_weight)))
    return graph


def random_endpoints(vertices: int, seed: Optional[int] = None) -> List[int]:
    """Pick a (start, dest) pair from 0..vertices-1, possibly equal."""
    if vertices <= 0:
        raise ValueError("vertices must be positive")
    rng = random.Random(seed)
    return [rng.randrange(vertices), rng.randrange(vertices)]


def _round_weight(w: float) -> float:
    # Two decimals keep weights readable in results CSVs.
    return round(w, 2)

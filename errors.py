"""
Error types raised by the heap, the graph store and the shortest-path engine.

All of them signal invalid input or misuse, so they derive from ValueError.
"""


class InvalidPriorityError(ValueError):
    """Priority handed to the heap or queue is NaN or infinite."""


class InvalidWeightError(ValueError):
    """Edge weight handed to the graph is NaN or infinite."""


class DuplicateElementError(ValueError):
    """Direct heap push of an element that is already present."""


class NegativeWeightError(ValueError):
    """
    A negative edge weight was met while traversing a graph.

    Raised by Dijkstra (and by maze cost functions) rather than at insertion
    time, since the graph store itself allows negative weights.
    """

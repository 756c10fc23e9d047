"""
Grid-maze adapter over the shortest-path engine.

The maze is a rectangular grid of single characters:
- '#' is a wall (impassable)
- '.' is an open walkable cell
- 'S' is the start cell, 'T' the target cell
- any other character is open terrain priced by the move-cost function

Each open cell becomes a Position vertex and each of its four axis-aligned
moves into an in-bounds, non-wall neighbour becomes a directed edge weighted
by move_cost(neighbour, cell_char).
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Set, Union
import math

import numpy as np

from dijkstra_engine import SimpleDijkstraEngine
from errors import InvalidWeightError, NegativeWeightError
from graph import Graph


WALL = "#"
OPEN = "."
START = "S"
TARGET = "T"

# (d_row, d_col) for up, down, left, right.
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class MazePath:
    """Cells from start to target (inclusive) and the total move cost."""
    path: List[Position]
    cost: float


MoveCost = Callable[[Position, str], float]
MazeLike = Union[Sequence[str], np.ndarray]


def unit_cost(position: Position, cell: str) -> float:
    return 1.0


def terrain_cost(costs: Mapping[str, float], default: float = 1.0) -> MoveCost:
    """
    Build a move-cost function from a cell-char -> cost table.

    Characters missing from the table cost `default`.
    """
    table: Dict[str, float] = dict(costs)

    def cost(position: Position, cell: str) -> float:
        return table.get(cell, default)

    return cost


def as_grid(maze: MazeLike) -> np.ndarray:
    """
    Normalise a maze (list of strings or 2-D char array) into a 2-D numpy
    array of single characters.
    """
    if isinstance(maze, np.ndarray):
        if maze.ndim != 2 or maze.size == 0:
            raise ValueError("Maze must be a non-empty 2-D grid")
        cells = maze.astype(str)
        if np.any(np.char.str_len(cells) != 1):
            raise ValueError("Maze cells must be single characters")
        return cells.astype("<U1")

    rows = list(maze)
    if not rows or not rows[0]:
        raise ValueError("Maze cannot be empty")
    width = len(rows[0])
    for i, line in enumerate(rows):
        if len(line) != width:
            raise ValueError(f"Maze row {i} has length {len(line)}, expected {width}")
    return np.array([list(line) for line in rows], dtype="<U1")


def find_position(grid: np.ndarray, marker: str) -> Optional[Position]:
    """First cell (row-major) holding marker, or None."""
    hits = np.argwhere(grid == marker)
    if len(hits) == 0:
        return None
    row, col = hits[0]
    return Position(int(row), int(col))


class MazeGraph(Graph[Position]):
    """
    Read-only Graph view of a maze grid.

    Edges are generated on demand from the grid; weights come from move_cost,
    which must not return negative values.
    """

    def __init__(self, maze: MazeLike, move_cost: MoveCost = unit_cost) -> None:
        self._grid = as_grid(maze)
        self._move_cost = move_cost

    @property
    def grid(self) -> np.ndarray:
        return self._grid

    def is_open(self, position: Position) -> bool:
        rows, cols = self._grid.shape
        if not (0 <= position.row < rows and 0 <= position.col < cols):
            return False
        return self._grid[position.row, position.col] != WALL

    def get_vertices(self) -> Set[Position]:
        return {Position(int(r), int(c)) for r, c in np.argwhere(self._grid != WALL)}

    def get_edges(self, vertex: Position) -> Dict[Position, float]:
        if not self.is_open(vertex):
            return {}
        edges: Dict[Position, float] = {}
        for d_row, d_col in DIRECTIONS:
            neighbor = Position(vertex.row + d_row, vertex.col + d_col)
            if not self.is_open(neighbor):
                continue
            cell = str(self._grid[neighbor.row, neighbor.col])
            weight = self._move_cost(neighbor, cell)
            if not math.isfinite(weight):
                raise InvalidWeightError(
                    f"Move cost must be finite, got {weight} for cell {neighbor}"
                )
            if weight < 0:
                raise NegativeWeightError(
                    f"Move cost must be non-negative, got {weight} for cell {neighbor}"
                )
            edges[neighbor] = weight
        return edges


def solve_maze(maze: MazeLike, move_cost: MoveCost = unit_cost) -> Optional[MazePath]:
    """
    Cheapest route from 'S' to 'T'.

    Returns None when the target cannot be reached. Raises ValueError for an
    empty or ragged maze, or one missing 'S' or 'T'; NegativeWeightError if
    move_cost returns a negative value for an explored cell, InvalidWeightError
    if it returns NaN or infinity.
    """
    graph = MazeGraph(maze, move_cost)
    start = find_position(graph.grid, START)
    if start is None:
        raise ValueError("Start position 'S' not found in maze")
    target = find_position(graph.grid, TARGET)
    if target is None:
        raise ValueError("Target position 'T' not found in maze")

    result = SimpleDijkstraEngine().shortest_path_with_cost(graph, start, target)
    if result is None:
        return None
    path, cost = result
    return MazePath(path, cost)


def visualize_solution(maze: MazeLike, path: Sequence[Position]) -> str:
    """Render the maze with open '.' cells on the path marked '*'."""
    visual = as_grid(maze).copy()
    for pos in path:
        if visual[pos.row, pos.col] == OPEN:
            visual[pos.row, pos.col] = "*"
    return "\n".join("".join(row) for row in visual)

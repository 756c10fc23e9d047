"""
Tests for the grid-maze adapter over the Dijkstra engine.
"""

import math

import numpy as np
import pytest

from dijkstra_engine import shortest_path_with_cost
from errors import InvalidWeightError, NegativeWeightError
from maze_solver import (
    MazeGraph,
    Position,
    find_position,
    solve_maze,
    terrain_cost,
    visualize_solution,
)


SIMPLE_MAZE = [
    "#####",
    "#S..#",
    "#.#.#",
    "#..T#",
    "#####",
]


def _assert_contiguous(path):
    for a, b in zip(path, path[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1


def test_solve_simple_maze():
    result = solve_maze(SIMPLE_MAZE)
    assert result is not None

    assert result.path[0] == Position(1, 1)
    assert result.path[-1] == Position(3, 3)
    # unweighted: cost is the number of moves
    assert result.cost == 4.0
    assert result.cost == len(result.path) - 1.0
    _assert_contiguous(result.path)


def test_solve_complex_maze():
    maze = [
        "#########",
        "#......S#",
        "#.#.#####",
        "#...#...#",
        "#.#####.#",
        "#.......#",
        "#.#####.#",
        "#.#T....#",
        "#########",
    ]

    result = solve_maze(maze)
    assert result is not None
    assert result.path[0] == Position(1, 7)
    assert result.path[-1] == Position(7, 3)
    _assert_contiguous(result.path)
    assert result.cost == len(result.path) - 1.0
    for pos in result.path:
        assert maze[pos.row][pos.col] != "#"


def test_no_path_exists():
    maze = [
        "#####",
        "#S#T#",
        "#####",
    ]
    assert solve_maze(maze) is None


def test_short_corridor():
    maze = [
        "#####",
        "#S.T#",
        "#####",
    ]
    result = solve_maze(maze)
    assert result is not None
    assert result.path == [Position(1, 1), Position(1, 2), Position(1, 3)]
    assert result.cost == 2.0


def test_weighted_maze_avoids_mud():
    maze = [
        "#######",
        "#S....#",
        "#.###.#",
        "#...mT#",
        "#######",
    ]
    result = solve_maze(maze, terrain_cost({"m": 10.0}))
    assert result is not None

    # Top corridor costs 6; the bottom route through the mud costs 15.
    assert Position(3, 4) not in result.path
    assert result.cost == 6.0


def test_weighted_maze_crosses_mud_when_forced():
    maze = [
        "#####",
        "#SmT#",
        "#####",
    ]
    result = solve_maze(maze, terrain_cost({"m": 10.0}))
    assert result is not None
    # entering m costs 10, entering T costs 1
    assert result.cost == 11.0


def test_negative_move_cost_rejected():
    maze = [
        "#####",
        "#S.T#",
        "#####",
    ]
    with pytest.raises(NegativeWeightError):
        solve_maze(maze, lambda pos, cell: -1.0)


def test_missing_markers_and_bad_shapes():
    with pytest.raises(ValueError):
        solve_maze(["#####", "#..T#", "#####"])
    with pytest.raises(ValueError):
        solve_maze(["#####", "#S..#", "#####"])
    with pytest.raises(ValueError):
        solve_maze([])
    with pytest.raises(ValueError):
        solve_maze(["#S.T#", "###"])


def test_large_maze():
    maze = ["#" * 20]
    for i in range(1, 19):
        if i % 2 == 1:
            maze.append("#" + "." * 18 + "#")
        else:
            maze.append("#" + "#." * 9 + "#")
    maze.append("#" * 20)
    maze[1] = "#S" + "." * 17 + "#"
    maze[18] = "#" + "." * 17 + "T#"

    result = solve_maze(maze)
    assert result is not None
    assert result.path[0] == Position(1, 1)
    assert result.path[-1] == Position(18, 18)
    # Manhattan distance is a lower bound for 4-connected unit moves
    assert result.cost >= 34.0
    _assert_contiguous(result.path)


def test_accepts_numpy_grid():
    grid = np.array([list(row) for row in SIMPLE_MAZE])
    result = solve_maze(grid)
    assert result is not None
    assert result.cost == 4.0


def test_maze_graph_edges_respect_walls_and_bounds():
    g = MazeGraph(SIMPLE_MAZE)
    assert g.get_edges(Position(1, 1)) == {Position(1, 2): 1.0, Position(2, 1): 1.0}
    assert g.get_edges(Position(0, 0)) == {}  # wall
    assert g.get_edges(Position(-1, 7)) == {}  # out of bounds
    assert Position(2, 2) not in g.get_vertices()
    assert len(g.get_vertices()) == 8


def test_maze_graph_is_usable_directly_by_engine():
    g = MazeGraph(SIMPLE_MAZE)
    start = find_position(g.grid, "S")
    target = find_position(g.grid, "T")
    result = shortest_path_with_cost(g, start, target)
    assert result is not None
    assert result[1] == 4.0


def test_visualize_solution_marks_open_cells_only():
    result = solve_maze(SIMPLE_MAZE)
    rendered = visualize_solution(SIMPLE_MAZE, result.path)
    lines = rendered.split("\n")

    assert len(lines) == len(SIMPLE_MAZE)
    assert lines[1][1] == "S"
    assert lines[3][3] == "T"
    assert rendered.count("*") == len(result.path) - 2
    # input is untouched
    assert SIMPLE_MAZE[1] == "#S..#"


@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_non_finite_move_cost_rejected(bad):
    maze = [
        "#####",
        "#S.T#",
        "#####",
    ]
    with pytest.raises(InvalidWeightError):
        solve_maze(maze, lambda pos, cell: bad)


def test_numpy_grid_with_multichar_cells_rejected():
    grid = np.array([["#", "#", "#"], ["S", "ab", "T"], ["#", "#", "#"]])
    with pytest.raises(ValueError):
        solve_maze(grid)
    with pytest.raises(ValueError):
        MazeGraph(np.array([["S", "", "T"]]))


def test_negative_cost_on_start_cell_is_rejected():
    """Stepping back onto S is an explored edge, so its cost is checked too."""
    maze = [
        "#####",
        "#S.T#",
        "#####",
    ]
    with pytest.raises(NegativeWeightError):
        solve_maze(maze, terrain_cost({"S": -1.0}))

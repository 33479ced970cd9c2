#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
BFS 路径规划测试
"""

import numpy as np
import pytest

from maze_vision.solver.common.exceptions import InputError, UnreachableGoalError
from maze_vision.solver.core.bfs_planner import bfs_shortest_path, bfs_distance_map
from maze_vision.solver.core.move_compressor import compress_path
from maze_vision.solver.core.maze_model import Direction, Move

from conftest import MAZE_7X7, MAZE_BLOCKED, layout_to_grid


def _assert_four_connected(path):
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        assert abs(x1 - x0) + abs(y1 - y0) == 1


def test_open_grid_tie_break_east_first():
    grid = np.ones((3, 3), dtype=bool)
    path = bfs_shortest_path(grid, (0, 0), (2, 2))
    assert path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]


def test_tie_break_west_before_south():
    grid = np.ones((3, 3), dtype=bool)
    path = bfs_shortest_path(grid, (2, 0), (0, 2))
    assert path == [(2, 0), (1, 0), (0, 0), (0, 1), (0, 2)]


def test_maze_unique_path():
    grid = layout_to_grid(MAZE_7X7)
    path = bfs_shortest_path(grid, (1, 0), (5, 6))
    assert path[0] == (1, 0)
    assert path[-1] == (5, 6)
    assert len(path) == 15
    assert len(set(path)) == len(path)
    assert all(grid[y, x] for x, y in path)
    _assert_four_connected(path)


def test_two_by_two_corner_path():
    grid = np.array([[True, True], [False, True]])
    path = bfs_shortest_path(grid, (0, 0), (1, 1))
    assert path == [(0, 0), (1, 0), (1, 1)]
    assert compress_path(path) == [Move(Direction.EAST, 1), Move(Direction.SOUTH, 1)]


def test_start_equals_goal():
    grid = np.ones((2, 2), dtype=bool)
    assert bfs_shortest_path(grid, (1, 1), (1, 1)) == [(1, 1)]


def test_unreachable_goal():
    grid = layout_to_grid(MAZE_BLOCKED)
    with pytest.raises(UnreachableGoalError):
        bfs_shortest_path(grid, (1, 0), (3, 4))


def test_blocked_goal_is_unreachable():
    grid = np.ones((3, 3), dtype=bool)
    grid[2, 2] = False
    with pytest.raises(UnreachableGoalError):
        bfs_shortest_path(grid, (0, 0), (2, 2))


@pytest.mark.parametrize("start,goal", [((-1, 0), (1, 1)), ((0, 0), (3, 0)), ((0, 0), (0, 5))])
def test_out_of_bounds_points(start, goal):
    with pytest.raises(InputError):
        bfs_shortest_path(np.ones((3, 3), dtype=bool), start, goal)


def test_distance_map():
    grid = layout_to_grid(MAZE_7X7)
    dist = bfs_distance_map(grid, (1, 0))
    assert dist[0, 1] == 0
    assert dist[6, 5] == 14
    assert dist[0, 0] == -1


@pytest.mark.parametrize("seed", range(8))
def test_random_grids_shortest_and_connected(seed):
    rng = np.random.default_rng(seed)
    grid = rng.random((15, 20)) > 0.3
    start, goal = (0, 0), (19, 14)
    grid[0, 0] = grid[14, 19] = True

    dist = bfs_distance_map(grid, start)
    if dist[goal[1], goal[0]] == -1:
        with pytest.raises(UnreachableGoalError):
            bfs_shortest_path(grid, start, goal)
        return

    path = bfs_shortest_path(grid, start, goal)
    assert path[0] == start and path[-1] == goal
    assert len(path) - 1 == dist[goal[1], goal[0]]
    assert len(set(path)) == len(path)
    assert all(grid[y, x] for x, y in path)
    _assert_four_connected(path)


def test_repeatable_output():
    rng = np.random.default_rng(42)
    grid = rng.random((30, 30)) > 0.25
    # 打通 L 形通道，保证 (0,0) → (29,29) 连通
    grid[0, :] = True
    grid[:, 29] = True

    first = bfs_shortest_path(grid, (0, 0), (29, 29))
    assert len(first) - 1 == 58
    for _ in range(3):
        assert bfs_shortest_path(grid, (0, 0), (29, 29)) == first

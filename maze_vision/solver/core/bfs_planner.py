#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四邻接 BFS 最短路径规划器

功能：
- 在布尔栅格上做无权最短路径搜索
- 邻居顺序固定为 东、西、南、北，保证等长路径的选择可复现
- 距离数组（-1=未访问）防止重复入队
"""

from collections import deque
from typing import List, Optional

import numpy as np
from loguru import logger

from ..common.constants import DIRECTIONS_4WAY
from ..common.exceptions import InputError, UnreachableGoalError
from .maze_model import GridPoint


def _check_in_bounds(grid: np.ndarray, point: GridPoint, name: str) -> None:
    rows, cols = grid.shape
    x, y = point
    if not (0 <= x < cols and 0 <= y < rows):
        raise InputError(f"{name}={point} 超出栅格范围 {cols}x{rows}")


def _run_bfs(grid: np.ndarray, start: GridPoint, goal: Optional[GridPoint]):
    """
    执行 BFS

    Returns:
        (dist, parent_x, parent_y, nodes_explored)
    """
    h, w = grid.shape
    sx, sy = start

    dist = np.full((h, w), -1, dtype=np.int32)
    parent_x = np.full((h, w), -1, dtype=np.int32)
    parent_y = np.full((h, w), -1, dtype=np.int32)

    queue = deque([start])
    dist[sy, sx] = 0
    nodes_explored = 0

    while queue:
        x, y = queue.popleft()
        nodes_explored += 1
        if goal is not None and (x, y) == goal:
            break

        for dx, dy in DIRECTIONS_4WAY:
            nx, ny = x + dx, y + dy
            if nx < 0 or ny < 0 or nx >= w or ny >= h:
                continue
            if not grid[ny, nx]:
                continue
            if dist[ny, nx] != -1:
                continue
            dist[ny, nx] = dist[y, x] + 1
            parent_x[ny, nx] = x
            parent_y[ny, nx] = y
            queue.append((nx, ny))

    return dist, parent_x, parent_y, nodes_explored


def bfs_distance_map(grid: np.ndarray, start: GridPoint) -> np.ndarray:
    """
    计算从起点出发的完整 BFS 距离图

    Args:
        grid: rows x cols bool 栅格
        start: 起点 (x, y)

    Returns:
        rows x cols int32，-1 表示不可达
    """
    _check_in_bounds(grid, start, "start")
    dist, _, _, _ = _run_bfs(grid, start, None)
    return dist


def bfs_shortest_path(grid: np.ndarray, start: GridPoint, goal: GridPoint) -> List[GridPoint]:
    """
    BFS 最短路径

    Args:
        grid: rows x cols bool 栅格（True=可通行）
        start: 起点 (x, y)
        goal: 终点 (x, y)

    Returns:
        path: [(x, y), ...]，从 start 到 goal（包含两端）

    Raises:
        InputError: 起点/终点越界
        UnreachableGoalError: 终点不可达
    """
    _check_in_bounds(grid, start, "start")
    _check_in_bounds(grid, goal, "goal")
    start = (int(start[0]), int(start[1]))
    goal = (int(goal[0]), int(goal[1]))

    dist, parent_x, parent_y, nodes_explored = _run_bfs(grid, start, goal)

    gx, gy = goal
    if dist[gy, gx] == -1:
        logger.warning(f"BFS规划失败: 无法找到从{start}到{goal}的路径, 探索节点数={nodes_explored}")
        raise UnreachableGoalError(f"无法找到从{start}到{goal}的路径")

    # 回溯路径
    path: List[GridPoint] = [goal]
    cur = goal
    while cur != start:
        cx, cy = cur
        cur = (int(parent_x[cy, cx]), int(parent_y[cy, cx]))
        path.append(cur)
    path.reverse()

    logger.debug(f"BFS规划成功: 路径长度={len(path)}, 距离={int(dist[gy, gx])}, 探索节点数={nodes_explored}")
    return path

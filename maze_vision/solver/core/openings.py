#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
边界出入口识别与封边

功能：
- 按固定顺序扫描栅格四条边，收集可通行单元作为候选出入口
- 取第一个候选为起点、最后一个候选为终点
- 封闭除起点/终点外的所有边界单元，防止 BFS 从边缘噪点“漏”出迷宫
"""

from typing import List, Tuple

import numpy as np
from loguru import logger

from ..common.exceptions import InputError, OpeningDetectionError
from .maze_model import GridPoint


def iter_border_cells(rows: int, cols: int) -> List[GridPoint]:
    """
    按扫描顺序列出边界单元（不重复）

    顺序：上边 左→右，下边 左→右，左边 上→下，右边 上→下。

    Returns:
        [(x, y), ...]
    """
    order: List[GridPoint] = []
    order.extend((x, 0) for x in range(cols))
    order.extend((x, rows - 1) for x in range(cols))
    order.extend((0, y) for y in range(rows))
    order.extend((cols - 1, y) for y in range(rows))

    # 角点、单行/单列栅格会被扫到多次，只保留第一次
    seen = set()
    unique: List[GridPoint] = []
    for cell in order:
        if cell not in seen:
            seen.add(cell)
            unique.append(cell)
    return unique


def collect_openings(grid: np.ndarray) -> List[GridPoint]:
    """
    收集所有可通行的边界单元

    Args:
        grid: rows x cols bool 栅格

    Returns:
        候选出入口列表（扫描顺序）
    """
    rows, cols = grid.shape
    return [(x, y) for (x, y) in iter_border_cells(rows, cols) if grid[y, x]]


def find_openings(grid: np.ndarray) -> Tuple[GridPoint, GridPoint]:
    """
    选出起点和终点

    Args:
        grid: rows x cols bool 栅格

    Returns:
        (start, goal)

    Raises:
        OpeningDetectionError: 候选出入口少于两个
    """
    if grid.size == 0:
        raise OpeningDetectionError("栅格为空")

    openings = collect_openings(grid)
    if len(openings) < 2:
        logger.warning(f"出入口不足: 仅找到 {len(openings)} 个边界可通行单元")
        raise OpeningDetectionError(f"出入口不足两个（找到 {len(openings)} 个）")

    start, goal = openings[0], openings[-1]
    logger.debug(f"出入口识别完成: 候选数={len(openings)}, 起点={start}, 终点={goal}")
    return start, goal


def seal_border(
    grid: np.ndarray,
    start: GridPoint,
    goal: GridPoint,
    in_place: bool = False,
) -> np.ndarray:
    """
    封闭除起点/终点外的全部边界单元

    Args:
        grid: rows x cols bool 栅格
        start: 起点 (x, y)
        goal: 终点 (x, y)
        in_place: 是否直接修改传入栅格（默认复制一份）

    Returns:
        封边后的栅格
    """
    rows, cols = grid.shape
    for name, (x, y) in (("start", start), ("goal", goal)):
        if not (0 <= x < cols and 0 <= y < rows):
            raise InputError(f"{name}={(x, y)} 超出栅格范围 {cols}x{rows}")

    sealed = grid if in_place else grid.copy()
    keep_start = bool(sealed[start[1], start[0]])
    keep_goal = bool(sealed[goal[1], goal[0]])

    sealed[0, :] = False
    sealed[rows - 1, :] = False
    sealed[:, 0] = False
    sealed[:, cols - 1] = False

    sealed[start[1], start[0]] = keep_start
    sealed[goal[1], goal[0]] = keep_goal
    return sealed

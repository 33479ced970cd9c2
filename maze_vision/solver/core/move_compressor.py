#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径压缩模块：将逐格路径压缩为 (方向, 步数) 序列
"""

import json
from typing import Dict, List, Optional, Tuple

from loguru import logger

from .maze_model import Direction, GridPoint, Move

_DELTA_TO_DIRECTION: Dict[Tuple[int, int], Direction] = {
    (1, 0): Direction.EAST,
    (-1, 0): Direction.WEST,
    (0, 1): Direction.SOUTH,
    (0, -1): Direction.NORTH,
}


def compress_path(path: List[GridPoint]) -> List[Move]:
    """
    游程编码：同方向的连续单步合并为一条 Move

    非四邻接的跳变直接跳过，不打断当前游程。

    Args:
        path: [(x, y), ...]

    Returns:
        Move 列表；路径少于2个点时为空
    """
    if len(path) < 2:
        return []

    moves: List[Move] = []
    cur_dir: Optional[Direction] = None
    cur_steps = 0
    skipped = 0

    prev = path[0]
    for p in path[1:]:
        d = _DELTA_TO_DIRECTION.get((p[0] - prev[0], p[1] - prev[1]))
        prev = p
        if d is None:
            skipped += 1
            continue
        if cur_steps == 0:
            cur_dir, cur_steps = d, 1
        elif d == cur_dir:
            cur_steps += 1
        else:
            moves.append(Move(cur_dir, cur_steps))
            cur_dir, cur_steps = d, 1

    if cur_steps > 0:
        moves.append(Move(cur_dir, cur_steps))

    if skipped:
        logger.warning(f"路径压缩: 跳过 {skipped} 个非四邻接步")
    logger.debug(f"路径压缩: 原始长度={len(path)}, 指令数={len(moves)}")
    return moves


def expand_moves(moves: List[Move]) -> List[Direction]:
    """把 Move 序列展开为逐步方向序列"""
    directions: List[Direction] = []
    for m in moves:
        directions.extend([m.direction] * m.steps)
    return directions


def moves_to_json(moves: List[Move]) -> str:
    """序列化为 [{"dir":"E","steps":5}, ...]"""
    return json.dumps([m.ToDict() for m in moves])

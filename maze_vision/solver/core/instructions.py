#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分步导航指令：将绝对方向的 Move 序列转换为小车可执行的相对指令

指令集：FORWARD <格数>、TURN LEFT、TURN RIGHT
"""

from typing import List, Optional

from .maze_model import Direction, Move

# 顺时针排列
_CLOCKWISE = [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]

FORWARD = "FORWARD"
TURN_LEFT = "TURN LEFT"
TURN_RIGHT = "TURN RIGHT"


def turn_commands(heading: Direction, target: Direction) -> List[str]:
    """
    从当前朝向转到目标朝向所需的转向指令

    掉头用两次右转表示。
    """
    diff = (_CLOCKWISE.index(target) - _CLOCKWISE.index(heading)) % 4
    if diff == 1:
        return [TURN_RIGHT]
    if diff == 2:
        return [TURN_RIGHT, TURN_RIGHT]
    if diff == 3:
        return [TURN_LEFT]
    return []


def moves_to_instructions(moves: List[Move], initial_heading: Optional[Direction] = None) -> List[str]:
    """
    生成相对指令序列

    Args:
        moves: Move 序列
        initial_heading: 初始朝向（None=默认朝向第一段移动的方向）

    Returns:
        ["FORWARD 3", "TURN LEFT", ...]
    """
    if not moves:
        return []

    heading = initial_heading if initial_heading is not None else moves[0].direction
    instructions: List[str] = []
    for m in moves:
        instructions.extend(turn_commands(heading, m.direction))
        instructions.append(f"{FORWARD} {m.steps}")
        heading = m.direction
    return instructions


def format_instructions(instructions: List[str]) -> str:
    """编号输出：Step 1: ...，每行一条"""
    return "\n".join(f"Step {i}: {cmd}" for i, cmd in enumerate(instructions, start=1))

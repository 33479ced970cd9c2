#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解模块

提供从迷宫照片到路径、移动指令和叠加图的完整流水线。
"""

from .maze_solver import MazeSolver
from .visualizer import PathOverlay
from .common.exceptions import (
    MazeSolverError,
    InputError,
    OpeningDetectionError,
    UnreachableGoalError,
    ConfigurationError,
    DegenerateFrameWarning,
)

__all__ = [
    'MazeSolver',
    'PathOverlay',
    'MazeSolverError',
    'InputError',
    'OpeningDetectionError',
    'UnreachableGoalError',
    'ConfigurationError',
    'DegenerateFrameWarning',
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫数据模型：外框、移动指令、求解结果
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

GridPoint = Tuple[int, int]              # (col, row) 即 (x, y)
NormalizedPoint = Tuple[float, float]    # [0,1]，原点左上，y 向下
PixelPoint = Tuple[float, float]         # 原图像素坐标


class Direction(str, Enum):
    """栅格移动方向"""
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


@dataclass(frozen=True)
class BoundingBox:
    """
    迷宫外框（像素坐标，上下界均包含）

    is_fallback 为 True 表示未找到深色像素，外框退化为整幅图像。
    """
    x_min: int
    y_min: int
    x_max: int
    y_max: int
    padding: int = 0
    is_fallback: bool = False

    @property
    def width(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        return self.y_max - self.y_min + 1

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return (self.width, self.height)

    def Crop(self, image: np.ndarray) -> np.ndarray:
        """
        裁剪外框区域（返回视图，不复制）

        Args:
            image: 原始图像

        Returns:
            外框内的图像
        """
        return image[self.y_min:self.y_max + 1, self.x_min:self.x_max + 1]


@dataclass(frozen=True)
class Move:
    """一段同方向的连续移动"""
    direction: Direction
    steps: int

    def ToDict(self) -> Dict[str, Union[str, int]]:
        """序列化为 {"dir": ..., "steps": ...}，方向在前"""
        return {"dir": self.direction.value, "steps": self.steps}


@dataclass
class SolveResult:
    """一次求解的完整结果"""
    bbox: BoundingBox
    raw_grid: np.ndarray             # 封边前的栅格
    grid: np.ndarray                 # 封边后的栅格（True=可通行）
    start: GridPoint
    goal: GridPoint
    path: List[GridPoint]
    moves: List[Move]
    normalized_points: List[NormalizedPoint]
    pixel_points: List[PixelPoint]
    cell_size: int
    degenerate_frame: bool = False
    openings: Optional[List[GridPoint]] = field(default=None)

    @property
    def grid_size(self) -> Tuple[int, int]:
        """(cols, rows)"""
        rows, cols = self.grid.shape
        return (cols, rows)

    def MovesAsDicts(self) -> List[Dict[str, Union[str, int]]]:
        return [m.ToDict() for m in self.moves]

    def MovesJson(self) -> str:
        return json.dumps(self.MovesAsDicts())

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试公共夹具：由字符布局生成迷宫图像/栅格
'#' = 墙（黑色），'.' = 通道（白色）
"""

from typing import List, Optional, Tuple

import numpy as np
import pytest

# 7x7 迷宫：上边 (1,0) 入口，下边 (5,6) 出口，唯一通路
MAZE_7X7 = [
    "#.#####",
    "#...#.#",
    "###.#.#",
    "#...#.#",
    "#.###.#",
    "#.....#",
    "#####.#",
]

# 两个出入口被墙隔开，无通路
MAZE_BLOCKED = [
    "#.###",
    "#.###",
    "#####",
    "###.#",
    "###.#",
]


def layout_to_grid(layout: List[str]) -> np.ndarray:
    """字符布局 → bool 栅格（True=可通行）"""
    return np.array([[ch == '.' for ch in row] for row in layout], dtype=bool)


def layout_to_image(
    layout: List[str],
    px: int = 3,
    offset: Tuple[int, int] = (0, 0),
    canvas_size: Optional[Tuple[int, int]] = None,
    background: int = 255,
) -> np.ndarray:
    """
    字符布局 → BGR 图像

    Args:
        layout: 字符布局
        px: 每个布局单元的像素边长
        offset: 迷宫左上角在画布中的位置 (x, y)
        canvas_size: 画布尺寸 (width, height)，None=刚好容纳迷宫
        background: 画布背景灰度
    """
    rows, cols = len(layout), len(layout[0])
    ox, oy = offset
    if canvas_size is None:
        canvas_size = (ox + cols * px, oy + rows * px)
    w, h = canvas_size

    image = np.full((h, w, 3), background, dtype=np.uint8)
    for r, row in enumerate(layout):
        for c, ch in enumerate(row):
            value = 0 if ch == '#' else 255
            y0, x0 = oy + r * px, ox + c * px
            image[y0:y0 + px, x0:x0 + px] = value
    return image


@pytest.fixture
def maze_image() -> np.ndarray:
    return layout_to_image(MAZE_7X7)


@pytest.fixture
def blocked_maze_image() -> np.ndarray:
    return layout_to_image(MAZE_BLOCKED)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格化模块：将迷宫图像采样为布尔占据栅格

功能：
- 按固定单元边长划分图像（向上取整，边缘单元可能不完整）
- 单元内白色像素占比超过阈值才视为可通行，避免单个噪点翻转整格
"""

import numpy as np
from loguru import logger

from ..common.constants import (
    DEFAULT_CELL_SIZE,
    DEFAULT_FREE_LUMINANCE,
    DEFAULT_FREE_RATIO,
    DEFAULT_MAX_GRID_DIMENSION,
    DEFAULT_COLOR_ORDER,
)
from ..common.exceptions import InputError
from .image_utils import compute_luminance, validate_image


def grid_shape_for(width: int, height: int, cell_size: int) -> tuple[int, int]:
    """
    计算栅格尺寸

    Returns:
        (cols, rows)
    """
    cols = (width + cell_size - 1) // cell_size
    rows = (height + cell_size - 1) // cell_size
    return cols, rows


def build_occupancy_grid(
    image: np.ndarray,
    cell_size: int = DEFAULT_CELL_SIZE,
    free_threshold: int = DEFAULT_FREE_LUMINANCE,
    free_ratio: float = DEFAULT_FREE_RATIO,
    max_grid_dimension: int = DEFAULT_MAX_GRID_DIMENSION,
    color_order: str = DEFAULT_COLOR_ORDER,
) -> np.ndarray:
    """
    构建占据栅格

    Args:
        image: 裁剪后的迷宫图像
        cell_size: 单元边长（像素）
        free_threshold: 亮度大于该值视为白色像素
        free_ratio: 白色像素占比大于该值视为可通行
        max_grid_dimension: 栅格单边上限
        color_order: 通道顺序

    Returns:
        rows x cols bool 数组，True=可通行

    Raises:
        InputError: 单元边长无效或栅格超出上限
    """
    if cell_size < 1:
        raise InputError(f"单元边长必须大于0: {cell_size}")

    validate_image(image)
    h, w = image.shape[:2]
    cols, rows = grid_shape_for(w, h, cell_size)

    # 先检查尺寸再计算亮度
    if cols > max_grid_dimension or rows > max_grid_dimension:
        raise InputError(
            f"栅格尺寸 {cols}x{rows} 超过上限 {max_grid_dimension}，请增大 cell_size 或缩小图像"
        )

    lum = compute_luminance(image, color_order)

    # 补齐到整数个单元；补齐区域既不计入白色也不计入总数
    pad_h = rows * cell_size - h
    pad_w = cols * cell_size - w
    white = np.pad((lum > free_threshold).astype(np.int32), ((0, pad_h), (0, pad_w)))
    valid = np.pad(np.ones((h, w), dtype=np.int32), ((0, pad_h), (0, pad_w)))

    white_count = white.reshape(rows, cell_size, cols, cell_size).sum(axis=(1, 3))
    total = valid.reshape(rows, cell_size, cols, cell_size).sum(axis=(1, 3))

    ratio = white_count / total
    grid = ratio > free_ratio

    logger.debug(
        f"栅格构建完成: 尺寸={cols}x{rows}, 单元={cell_size}px, "
        f"可通行单元={int(grid.sum())}/{grid.size}"
    )
    return grid

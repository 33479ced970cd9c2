#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫外框定位

功能：
- 以深色（墨线）像素的外接矩形作为迷宫区域
- 外扩若干像素并限制在图像范围内
- 无深色像素时退化为整幅图像
"""

import numpy as np
from loguru import logger

from ..common.constants import (
    DEFAULT_WALL_LUMINANCE,
    DEFAULT_BBOX_PADDING,
    DEFAULT_COLOR_ORDER,
    LUMINANCE_BAND_ROWS,
)
from .image_utils import compute_luminance, validate_image
from .maze_model import BoundingBox


def locate_maze_frame(
    image: np.ndarray,
    wall_threshold: int = DEFAULT_WALL_LUMINANCE,
    padding: int = DEFAULT_BBOX_PADDING,
    color_order: str = DEFAULT_COLOR_ORDER,
) -> BoundingBox:
    """
    定位迷宫外框

    按行分块计算亮度，只保留每行/每列是否含深色像素。

    Args:
        image: 原始照片
        wall_threshold: 亮度小于该值视为深色像素
        padding: 外扩像素数
        color_order: 通道顺序

    Returns:
        外框（包含边界），永不为空
    """
    validate_image(image)
    h, w = image.shape[:2]

    dark_rows = np.zeros(h, dtype=bool)
    dark_cols = np.zeros(w, dtype=bool)
    for top in range(0, h, LUMINANCE_BAND_ROWS):
        band = image[top:top + LUMINANCE_BAND_ROWS]
        dark = compute_luminance(band, color_order) < wall_threshold
        dark_rows[top:top + band.shape[0]] = dark.any(axis=1)
        dark_cols |= dark.any(axis=0)

    ys = np.flatnonzero(dark_rows)
    xs = np.flatnonzero(dark_cols)
    if xs.size == 0:
        logger.warning(f"未找到深色像素（阈值={wall_threshold}），外框退化为整幅图像 {w}x{h}")
        return BoundingBox(0, 0, w - 1, h - 1, padding=padding, is_fallback=True)

    x_min = max(0, int(xs[0]) - padding)
    y_min = max(0, int(ys[0]) - padding)
    x_max = min(w - 1, int(xs[-1]) + padding)
    y_max = min(h - 1, int(ys[-1]) + padding)

    bbox = BoundingBox(x_min, y_min, x_max, y_max, padding=padding)
    logger.debug(f"外框定位完成: x=[{x_min},{x_max}], y=[{y_min},{y_max}], 尺寸={bbox.width}x{bbox.height}")
    return bbox

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
可视化工具：在原图上绘制求解路径，以及栅格调试视图
"""

from typing import List, Optional, Tuple

import cv2
import numpy as np
from loguru import logger

from .common.constants import (
    DEFAULT_PATH_COLOR,
    MIN_PATH_THICKNESS,
    PATH_THICKNESS_DIVISOR,
    PATH_DRAW_SHIFT,
)
from .core.image_utils import validate_image
from .core.maze_model import GridPoint, PixelPoint


def _to_bgr(image: np.ndarray) -> np.ndarray:
    """统一转换为 BGR 三通道副本"""
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
    return image.copy()


class PathOverlay:
    """路径叠加绘制器"""

    def __init__(self, color: Tuple[int, int, int] = DEFAULT_PATH_COLOR, thickness: Optional[int] = None):
        """
        初始化绘制器

        Args:
            color: 路径颜色 (B, G, R)
            thickness: 线宽（None=max(3, 宽度/200)）
        """
        self.color_ = tuple(int(c) for c in color)
        self.thickness_ = thickness

    def ThicknessFor(self, image_width: int) -> int:
        if self.thickness_ is not None:
            return self.thickness_
        return max(MIN_PATH_THICKNESS, image_width // PATH_THICKNESS_DIVISOR)

    def DrawPath(self, image: np.ndarray, pixel_points: List[PixelPoint]) -> np.ndarray:
        """
        在原图副本上用直线段依次连接路径点

        Args:
            image: 原始照片（不会被修改）
            pixel_points: 原图像素坐标 [(x, y), ...]

        Returns:
            新的 BGR 叠加图
        """
        validate_image(image)
        result = _to_bgr(image)
        if len(pixel_points) < 2:
            logger.debug("路径点少于2个，跳过绘制")
            return result

        thickness = self.ThicknessFor(result.shape[1])
        # 定点坐标保留亚像素位置
        scale = 1 << PATH_DRAW_SHIFT
        pts = [(int(round(x * scale)), int(round(y * scale))) for x, y in pixel_points]
        for pt1, pt2 in zip(pts, pts[1:]):
            cv2.line(result, pt1, pt2, self.color_, thickness, cv2.LINE_AA, PATH_DRAW_SHIFT)

        logger.debug(f"路径绘制完成: 点数={len(pts)}, 线宽={thickness}")
        return result

    def DrawGrid(self, grid: np.ndarray, path: List[GridPoint],
                 start: Optional[GridPoint] = None, goal: Optional[GridPoint] = None,
                 scale: int = 4) -> np.ndarray:
        """
        绘制栅格调试视图（白=可通行，黑=障碍）

        Args:
            grid: rows x cols bool 栅格
            path: 栅格路径
            start: 起点
            goal: 终点
            scale: 每个单元放大的像素数

        Returns:
            彩色调试图
        """
        grid_image = cv2.cvtColor(grid.astype(np.uint8) * 255, cv2.COLOR_GRAY2BGR)
        grid_image = cv2.resize(grid_image, (grid.shape[1] * scale, grid.shape[0] * scale),
                                interpolation=cv2.INTER_NEAREST)

        def center(p: GridPoint) -> Tuple[int, int]:
            return (p[0] * scale + scale // 2, p[1] * scale + scale // 2)

        # 绘制路径
        for p1, p2 in zip(path, path[1:]):
            cv2.line(grid_image, center(p1), center(p2), (255, 0, 255), max(1, scale // 2))

        # 绘制起点/终点
        if start is not None:
            cv2.circle(grid_image, center(start), max(2, scale), (0, 255, 0), -1)
        if goal is not None:
            cv2.circle(grid_image, center(goal), max(2, scale), (0, 0, 255), -1)

        return grid_image

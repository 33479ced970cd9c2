#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
坐标转换工具模块

提供栅格坐标、归一化坐标和原图像素坐标之间的转换功能。
"""

from typing import List, Tuple

from .maze_model import BoundingBox, GridPoint, NormalizedPoint, PixelPoint


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(v, hi))


def grid_to_pixel(grid_pos: GridPoint, cell_size: int) -> Tuple[float, float]:
    """
    栅格单元中心的像素坐标（裁剪图内）

    Args:
        grid_pos: 栅格坐标 (x, y)
        cell_size: 单元边长

    Returns:
        像素坐标 (x, y)
    """
    gx, gy = grid_pos
    return ((gx + 0.5) * cell_size, (gy + 0.5) * cell_size)


def pixel_to_normalized(pixel_pos: Tuple[float, float], image_size: Tuple[int, int]) -> NormalizedPoint:
    """
    裁剪图像素坐标 → 归一化坐标

    先限制在 [0, dim-1]，再除以 (dim-1)；单像素宽/高时该轴为 0。

    Args:
        pixel_pos: 像素坐标 (x, y)
        image_size: 裁剪图尺寸 (width, height)
    """
    px, py = pixel_pos
    w, h = image_size
    span_x = w - 1
    span_y = h - 1
    nx = _clamp(px, 0.0, span_x) / span_x if span_x > 0 else 0.0
    ny = _clamp(py, 0.0, span_y) / span_y if span_y > 0 else 0.0
    return (nx, ny)


def grid_path_to_normalized(
    path: List[GridPoint],
    cell_size: int,
    image_size: Tuple[int, int],
) -> List[NormalizedPoint]:
    """
    将栅格路径转换为归一化坐标（相对裁剪图，原点左上）

    Args:
        path: 栅格路径 [(x, y), ...]
        cell_size: 单元边长
        image_size: 裁剪图尺寸 (width, height)

    Returns:
        [(nx, ny), ...]，均在 [0, 1]
    """
    return [pixel_to_normalized(grid_to_pixel(p, cell_size), image_size) for p in path]


def normalized_to_pixel(point: NormalizedPoint, bbox: BoundingBox) -> PixelPoint:
    """
    归一化坐标 → 原图像素坐标

    px = bbox.x_min + clamp(nx, 0, 1) * (bbox.width - 1)，y 同理。
    """
    nx, ny = point
    px = bbox.x_min + _clamp(nx, 0.0, 1.0) * (bbox.width - 1)
    py = bbox.y_min + _clamp(ny, 0.0, 1.0) * (bbox.height - 1)
    return (px, py)


def normalized_to_pixels(points: List[NormalizedPoint], bbox: BoundingBox) -> List[PixelPoint]:
    """批量转换归一化坐标到原图像素坐标"""
    return [normalized_to_pixel(p, bbox) for p in points]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解流水线

原图 → 外框定位 → 裁剪 → 栅格化 → 出入口识别 → 封边 → BFS → 路径压缩 / 坐标映射
"""

import warnings
from typing import Optional, Tuple

import numpy as np
from loguru import logger

from .common.exceptions import DegenerateFrameWarning
from .config.models import SolverConfig, RenderConfig
from .core.image_utils import decode_image, validate_image
from .core.frame_locator import locate_maze_frame
from .core.grid_rasterizer import build_occupancy_grid
from .core.openings import collect_openings, find_openings, seal_border
from .core.bfs_planner import bfs_shortest_path
from .core.move_compressor import compress_path
from .core.coordinate_utils import grid_path_to_normalized, normalized_to_pixels
from .core.maze_model import SolveResult
from .visualizer import PathOverlay


class MazeSolver:
    """
    迷宫求解器：纯计算，不做文件/网络 I/O

    每次调用独立分配栅格、距离数组和父节点数组，实例本身不保存求解状态，
    可在多个线程中并发使用。

    示例:
        ```python
        solver = MazeSolver()
        result = solver.Solve(cv2.imread("maze.png"))
        print(result.MovesJson())
        overlay = solver.RenderOverlay(image, result)
        ```
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        """
        初始化求解器

        Args:
            config: 求解配置（None=使用默认值）
        """
        self.config_ = config if config is not None else SolverConfig()

    @property
    def config(self) -> SolverConfig:
        return self.config_

    def Solve(self, image: np.ndarray) -> SolveResult:
        """
        求解迷宫

        Args:
            image: 原始照片（灰度/BGR/RGB/BGRA，不会被修改）

        Returns:
            SolveResult

        Raises:
            InputError: 图像无效或栅格过大
            OpeningDetectionError: 出入口不足两个
            UnreachableGoalError: 起点到终点无路径
        """
        cfg = self.config_
        validate_image(image)

        # 1. 外框定位并裁剪
        bbox = locate_maze_frame(
            image,
            wall_threshold=cfg.wall_luminance_threshold,
            padding=cfg.bbox_padding,
            color_order=cfg.color_order,
        )
        if bbox.is_fallback:
            warnings.warn(DegenerateFrameWarning("未找到迷宫边框，使用整幅图像，栅格质量可能较差"),
                          stacklevel=2)
        maze = bbox.Crop(image)

        # 2. 栅格化
        raw_grid = build_occupancy_grid(
            maze,
            cell_size=cfg.cell_size,
            free_threshold=cfg.free_luminance_threshold,
            free_ratio=cfg.free_ratio_threshold,
            max_grid_dimension=cfg.max_grid_dimension,
            color_order=cfg.color_order,
        )

        # 3. 出入口 + 封边
        start, goal = find_openings(raw_grid)
        grid = seal_border(raw_grid, start, goal)

        # 4. BFS
        path = bfs_shortest_path(grid, start, goal)

        # 5. 压缩与坐标映射
        moves = compress_path(path)
        normalized = grid_path_to_normalized(path, cfg.cell_size, bbox.size)
        pixels = normalized_to_pixels(normalized, bbox)

        logger.info(
            f"迷宫求解完成: 栅格={raw_grid.shape[1]}x{raw_grid.shape[0]}, 起点={start}, 终点={goal}, "
            f"路径长度={len(path)}, 指令数={len(moves)}"
        )
        return SolveResult(
            bbox=bbox,
            raw_grid=raw_grid,
            grid=grid,
            start=start,
            goal=goal,
            path=path,
            moves=moves,
            normalized_points=normalized,
            pixel_points=pixels,
            cell_size=cfg.cell_size,
            degenerate_frame=bbox.is_fallback,
            openings=collect_openings(raw_grid),
        )

    def SolveBytes(self, data: bytes) -> Tuple[np.ndarray, SolveResult]:
        """
        解码图像字节后求解

        Returns:
            (解码后的 BGR 图像, SolveResult)
        """
        image = decode_image(data)
        if self.config_.color_order != "BGR":
            # imdecode 固定输出 BGR
            return image, MazeSolver(self.config_.model_copy(update={"color_order": "BGR"})).Solve(image)
        return image, self.Solve(image)

    def RenderOverlay(self, image: np.ndarray, result: SolveResult,
                      render: Optional[RenderConfig] = None) -> np.ndarray:
        """
        在原图副本上绘制求解路径

        Args:
            image: 求解时使用的原始照片
            result: Solve 的结果
            render: 绘制配置（None=默认红色、自动线宽）

        Returns:
            新的叠加图（调用方持有）
        """
        render = render if render is not None else RenderConfig()
        overlay = PathOverlay(color=render.color, thickness=render.thickness)
        return overlay.DrawPath(image, result.pixel_points)

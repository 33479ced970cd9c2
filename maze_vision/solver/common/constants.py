#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理所有魔法数字和配置常量
"""

# =============================
# 亮度相关常量
# =============================

# 亮度权重 (R, G, B)
LUMINANCE_WEIGHTS: tuple[float, float, float] = (0.2126, 0.7152, 0.0722)

# 墙体（墨线）亮度阈值：亮度 < 阈值 视为深色
DEFAULT_WALL_LUMINANCE: int = 200

# 通道（白色）亮度阈值：亮度 > 阈值 视为可通行像素
DEFAULT_FREE_LUMINANCE: int = 230

# 默认通道顺序（OpenCV 约定）
DEFAULT_COLOR_ORDER: str = "BGR"

# =============================
# 外框定位相关常量
# =============================

# 外框外扩像素数
DEFAULT_BBOX_PADDING: int = 2

# =============================
# 栅格相关常量
# =============================

# 每个栅格单元的边长（像素）
DEFAULT_CELL_SIZE: int = 3

# 单元内白色像素占比超过该值才视为可通行
DEFAULT_FREE_RATIO: float = 0.7

# 栅格单边最大尺寸，防止超大图像占用过多内存
DEFAULT_MAX_GRID_DIMENSION: int = 4096

# 外框定位时每次计算亮度的行数，限制临时数组大小
LUMINANCE_BAND_ROWS: int = 1024

# BFS 邻居顺序（四方向）：东、西、南、北
DIRECTIONS_4WAY = [(1, 0), (-1, 0), (0, 1), (0, -1)]

# =============================
# 绘制相关常量
# =============================

# 路径颜色 (BGR)，红色
DEFAULT_PATH_COLOR: tuple[int, int, int] = (0, 0, 255)

# 最小线宽
MIN_PATH_THICKNESS: int = 3

# 线宽 = 图像宽度 / 该值
PATH_THICKNESS_DIVISOR: int = 200

# cv2.line 亚像素小数位数（坐标乘以 2^shift）
PATH_DRAW_SHIFT: int = 4

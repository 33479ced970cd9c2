#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解配置模型

使用Pydantic定义类型安全的配置模型。阈值均为经验值，提供默认值但允许覆盖。
"""

from typing import Literal, Optional, Tuple
from pydantic import BaseModel, Field, field_validator

from ..common.constants import (
    DEFAULT_WALL_LUMINANCE,
    DEFAULT_FREE_LUMINANCE,
    DEFAULT_BBOX_PADDING,
    DEFAULT_CELL_SIZE,
    DEFAULT_FREE_RATIO,
    DEFAULT_MAX_GRID_DIMENSION,
    DEFAULT_COLOR_ORDER,
    DEFAULT_PATH_COLOR,
)


class SolverConfig(BaseModel):
    """求解流水线配置"""
    wall_luminance_threshold: int = Field(DEFAULT_WALL_LUMINANCE, description="墙体亮度阈值（小于即为深色）")
    free_luminance_threshold: int = Field(DEFAULT_FREE_LUMINANCE, description="通道亮度阈值（大于即为白色）")
    bbox_padding: int = Field(DEFAULT_BBOX_PADDING, description="外框外扩像素数")
    cell_size: int = Field(DEFAULT_CELL_SIZE, description="栅格单元边长（像素）")
    free_ratio_threshold: float = Field(DEFAULT_FREE_RATIO, description="单元白色像素占比阈值")
    max_grid_dimension: int = Field(DEFAULT_MAX_GRID_DIMENSION, description="栅格单边最大尺寸")
    color_order: Literal["BGR", "RGB"] = Field(DEFAULT_COLOR_ORDER, description="输入图像通道顺序")

    @field_validator('wall_luminance_threshold', 'free_luminance_threshold')
    @classmethod
    def validate_luminance(cls, v: int) -> int:
        """验证亮度阈值范围"""
        if not 0 <= v <= 255:
            raise ValueError(f"亮度阈值必须在0-255之间: {v}")
        return v

    @field_validator('bbox_padding')
    @classmethod
    def validate_padding(cls, v: int) -> int:
        """验证外扩像素数"""
        if v < 0:
            raise ValueError(f"外扩像素数不能为负数: {v}")
        return v

    @field_validator('cell_size')
    @classmethod
    def validate_cell_size(cls, v: int) -> int:
        """验证单元边长"""
        if v < 1:
            raise ValueError(f"单元边长必须大于0: {v}")
        return v

    @field_validator('free_ratio_threshold')
    @classmethod
    def validate_free_ratio(cls, v: float) -> float:
        """验证占比阈值范围"""
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"占比阈值必须在0.0-1.0之间: {v}")
        return v

    @field_validator('max_grid_dimension')
    @classmethod
    def validate_max_grid_dimension(cls, v: int) -> int:
        """验证栅格最大尺寸"""
        if v < 1:
            raise ValueError(f"栅格最大尺寸必须大于0: {v}")
        return v


class RenderConfig(BaseModel):
    """叠加图绘制配置"""
    color: Tuple[int, int, int] = Field(DEFAULT_PATH_COLOR, description="路径颜色 (B, G, R)")
    thickness: Optional[int] = Field(None, description="线宽（None=按图像宽度自动计算）")

    @field_validator('color')
    @classmethod
    def validate_color(cls, v: Tuple[int, int, int]) -> Tuple[int, int, int]:
        """验证颜色分量"""
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"颜色分量必须在0-255之间: {v}")
        return v

    @field_validator('thickness')
    @classmethod
    def validate_thickness(cls, v: Optional[int]) -> Optional[int]:
        """验证线宽"""
        if v is not None and v < 1:
            raise ValueError(f"线宽必须大于0: {v}")
        return v


LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """日志配置"""
    level: LogLevel = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录（None=仅输出到控制台）")


class MazeVisionConfig(BaseModel):
    """主配置模型"""
    solver: SolverConfig = Field(default_factory=SolverConfig, description="求解配置")
    render: RenderConfig = Field(default_factory=RenderConfig, description="绘制配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
求解配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    MazeVisionConfig,
    SolverConfig,
    RenderConfig,
    LoggingConfig,
    LogLevel,
)
from .loader import load_config

__all__ = [
    'MazeVisionConfig',
    'SolverConfig',
    'RenderConfig',
    'LoggingConfig',
    'LogLevel',
    'load_config'
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
maze_vision 主包
从迷宫照片中提取路径，输出叠加图与分步移动指令
"""

__version__ = "0.1.0"

__all__ = []

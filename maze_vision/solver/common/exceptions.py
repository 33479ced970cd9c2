#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义迷宫求解模块的专用异常
"""


class MazeSolverError(Exception):
    """迷宫求解模块基础异常类"""
    pass


class InputError(MazeSolverError):
    """输入无效异常（图像无法解码、尺寸为0、栅格坐标越界等）"""
    pass


class OpeningDetectionError(MazeSolverError):
    """边界出入口不足两个"""
    pass


class UnreachableGoalError(MazeSolverError):
    """BFS 搜索耗尽仍未到达终点"""
    pass


class ConfigurationError(MazeSolverError):
    """配置错误异常"""
    pass


class DegenerateFrameWarning(UserWarning):
    """未找到深色边框像素，外框退化为整幅图像"""
    pass

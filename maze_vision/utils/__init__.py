#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具模块
"""

from .logger import SetupLogger

__all__ = ['SetupLogger']

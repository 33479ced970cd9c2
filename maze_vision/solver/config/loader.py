#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

import yaml
from pathlib import Path
from loguru import logger
from pydantic import ValidationError

from ..common.exceptions import ConfigurationError
from .models import MazeVisionConfig


def load_config(config_path: Path) -> MazeVisionConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径

    Returns:
        验证后的MazeVisionConfig对象

    Raises:
        ConfigurationError: 文件不存在、YAML格式错误、内容为空或验证失败
    """
    config_path = Path(config_path)

    # 检查文件是否存在
    if not config_path.exists():
        error_msg = f"配置文件不存在: {config_path}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    # 加载YAML文件
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"YAML格式错误: {e}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg) from e

    if raw_config is None:
        error_msg = "配置文件为空"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    if not isinstance(raw_config, dict):
        error_msg = f"配置文件顶层必须是映射: {config_path}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    # 使用Pydantic验证配置
    try:
        config = MazeVisionConfig(**raw_config)
    except ValidationError as e:
        logger.error(f"配置验证失败: {config_path}")
        # 输出详细的验证错误信息
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise ConfigurationError(f"配置验证失败:\n{e}") from e

    logger.info(f"配置加载成功: {config_path}")
    return config

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图像工具：解码、校验、亮度计算
"""

import cv2
import numpy as np
from loguru import logger

from ..common.constants import LUMINANCE_WEIGHTS, DEFAULT_COLOR_ORDER
from ..common.exceptions import InputError


def decode_image(data: bytes) -> np.ndarray:
    """
    将编码后的图像字节解码为 BGR 图像

    Args:
        data: PNG/JPEG 等格式的字节

    Returns:
        BGR uint8 图像

    Raises:
        InputError: 数据为空或无法解码
    """
    if not data:
        raise InputError("图像数据为空")
    buf = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buf, cv2.IMREAD_COLOR)
    if image is None:
        raise InputError("图像解码失败")
    logger.debug(f"图像解码完成: {image.shape[1]}x{image.shape[0]}")
    return image


def validate_image(image: np.ndarray) -> None:
    """
    校验图像类型与形状

    支持 uint8 的 HxW（灰度）、HxWx3、HxWx4。

    Raises:
        InputError: 图像为空、像素类型或维度不支持、宽高为0
    """
    if image is None:
        raise InputError("图像为 None")
    if not isinstance(image, np.ndarray):
        raise InputError(f"图像必须是 numpy 数组: {type(image).__name__}")
    if image.dtype != np.uint8:
        raise InputError(f"像素类型必须是 uint8: {image.dtype}")
    if image.ndim == 3:
        if image.shape[2] not in (3, 4):
            raise InputError(f"不支持的通道数: {image.shape[2]}")
    elif image.ndim != 2:
        raise InputError(f"不支持的图像维度: {image.shape}")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InputError(f"图像宽高不能为0: {image.shape[1]}x{image.shape[0]}")


def compute_luminance(image: np.ndarray, color_order: str = DEFAULT_COLOR_ORDER) -> np.ndarray:
    """
    计算逐像素亮度 int(0.2126R + 0.7152G + 0.0722B)

    Args:
        image: 灰度/BGR/RGB/带 alpha 的图像
        color_order: 三通道顺序，"BGR" 或 "RGB"

    Returns:
        HxW int32 亮度图（截断取整）
    """
    validate_image(image)

    if image.ndim == 2:
        return image.astype(np.int32)

    if color_order == "BGR":
        b, g, r = image[..., 0], image[..., 1], image[..., 2]
    elif color_order == "RGB":
        r, g, b = image[..., 0], image[..., 1], image[..., 2]
    else:
        raise InputError(f"不支持的通道顺序: {color_order}")

    wr, wg, wb = LUMINANCE_WEIGHTS
    lum = (wr * r.astype(np.float64)
           + wg * g.astype(np.float64)
           + wb * b.astype(np.float64))
    # 非负值截断等价于向下取整
    return lum.astype(np.int32)

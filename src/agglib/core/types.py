"""
Shared type definitions for the aggregation library.
"""
# 说明：聚合库共享的类型定义。
# 职责：
# - ElementCategory：元素类型的计算路径标签（整数路径 / 浮点路径）
# - Scalar / Container：公共类型别名，统一 Python 数值与 numpy 标量

from __future__ import annotations

import enum
from typing import Any, Iterable, Union

import numpy as np

Scalar = Union[int, float, np.generic]
Container = Union[Iterable[Any], np.ndarray]


class ElementCategory(enum.Enum):
    """Computation path selected from the element type."""

    # 整数类：精确累加，mean 使用向零截断的整数除法
    INTEGRAL = "integral"
    # 浮点类：全程以双精度累加
    FLOATING = "floating"

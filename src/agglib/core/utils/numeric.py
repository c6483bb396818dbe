"""
Numeric-path helpers shared by the collection and variadic operations.

Responsibilities
  - Widen values to double precision and accumulate them in order.
  - Provide the second pass of the population variance.
  - Divide integers with truncation toward zero.
  - Promote heterogeneous argument packs to a common arithmetic type.

Usage Context
  - Internal helpers; operations run their capability guards first.

Limitations
  - Accumulation is a plain left-to-right loop, without compensation, so
    results match the order of the input exactly.
"""
# 说明：集合操作与可变参数操作共用的数值路径工具函数。
# 职责：
# - double_sum：将每个值拓宽为双精度后按顺序累加
# - squared_deviation_sum：方差第二遍扫描，累加 (x - mu)^2
# - truncating_divide：整数路径的向零截断除法（Python 的 // 为向下取整）
# - promote_to_common_type：将异构参数包提升为公共算术类型

from __future__ import annotations

import numbers
from typing import Any, Iterable, List, Sequence

import numpy as np


def double_sum(values: Iterable[Any]) -> float:
    """Sum values widened to float, left to right."""
    total = 0.0
    for value in values:
        total += float(value)
    return total


def squared_deviation_sum(values: Iterable[Any], mu: float) -> float:
    """Return sum((float(x) - mu) ** 2) over one full pass."""
    # 第二遍扫描：均值已知后累加离差平方
    acc = 0.0
    for value in values:
        delta = float(value) - mu
        acc += delta * delta
    return acc


def truncating_divide(total: Any, count: int) -> Any:
    """Integer division rounding toward zero, e.g. -7 / 2 -> -3."""
    # 先向下取整，商为负且不能整除时加 1 得到向零截断；不取绝对值，避免 numpy 有符号最小值溢出
    quotient = total // count
    if quotient < 0 and quotient * count != total:
        quotient += 1
    return quotient


def promote_to_common_type(values: Sequence[Any]) -> List[Any]:
    """
    Convert every value to the common arithmetic type of the pack.

    numpy scalars follow ``numpy.result_type``. Plain Python packs keep a
    shared type, collapse mixed integral types to ``int`` and otherwise
    become ``float``.
    """
    if any(isinstance(value, np.generic) for value in values):
        target = np.result_type(*values)
        return [target.type(value) for value in values]
    kinds = {type(value) for value in values}
    if len(kinds) == 1:
        return list(values)
    if all(isinstance(value, numbers.Integral) for value in values):
        return [int(value) for value in values]
    return [float(value) for value in values]

"""
Aggregations over positional argument packs.

Each argument is checked against the Numeric capability on its own, so
heterogeneous packs such as ``(1, 2.7, 3)`` are allowed. The folds here do
not build a container to reuse the collection operations; they share only
the low-level numeric helpers.
"""
# 说明：面向可变参数包（*args）的聚合操作，对每个参数单独执行 Numeric 能力检查。
# 职责：
# - sum_variadic：按原始类型从左到右折叠相加，不做拓宽
# - mean_variadic / variance_variadic：全部拓宽为双精度后计算，恒返回 float
# - max_variadic：先提升到公共类型，再从 first 开始左折叠，严格大于才替换
# 约定：
# - 空参数包抛出 EmptyInputError；max_variadic 的 first 为必需的位置参数

from __future__ import annotations

import functools
import operator
from typing import Any, Sequence

from agglib.core.capabilities import require_numeric
from agglib.core.exceptions import EmptyInputError
from agglib.core.types import Scalar
from agglib.core.utils.numeric import double_sum, promote_to_common_type, squared_deviation_sum

__all__ = ["sum_variadic", "mean_variadic", "variance_variadic", "max_variadic"]


def _require_pack(values: Sequence[Any], operation: str) -> None:
    # 参数包的前置检查：非空，且每个参数都是非字符的算术标量
    if not values:
        raise EmptyInputError(operation)
    for position, value in enumerate(values):
        require_numeric(type(value), operation, detail=f"argument {position}")


def sum_variadic(*xs: Scalar) -> Any:
    """Left-to-right ``+`` fold over the raw arguments."""
    _require_pack(xs, "sum_variadic")
    return functools.reduce(operator.add, xs)


def mean_variadic(*xs: Scalar) -> float:
    """Mean of the arguments widened to double."""
    _require_pack(xs, "mean_variadic")
    return double_sum(xs) / len(xs)


def variance_variadic(*xs: Scalar) -> float:
    """Population variance of the arguments widened to double."""
    _require_pack(xs, "variance_variadic")
    n = len(xs)
    widened = [float(x) for x in xs]
    mu = double_sum(widened) / n
    return squared_deviation_sum(widened, mu) / n


def max_variadic(first: Scalar, *rest: Scalar) -> Any:
    """
    Largest argument, as the common type of the pack.

    ``max_variadic(1, 2.7, 3, 4)`` returns ``4.0``; ties keep the earlier
    argument.
    """
    pack = (first,) + rest
    _require_pack(pack, "max_variadic")
    promoted = promote_to_common_type(pack)
    result = promoted[0]
    for value in promoted[1:]:
        if value > result:
            result = value
    return result

"""
Aggregations over ordered, finite containers.

Responsibilities
  - sum / mean / variance / max / transform_reduce over any re-iterable
    container of a uniform element type (lists, tuples, 1-D ndarrays, ...).
  - Pick the integral or floating computation path from the element type.
  - Run every capability guard before the first accumulation step.

Usage Context
  - Call directly, or by name through ``agglib.ops.registry``.

Limitations
  - Integer overflow follows the element type's native arithmetic.
  - Variance is the population variance (divisor n) and reads the
    container twice.
"""
# 说明：面向集合（容器）的聚合操作。每个操作先执行能力守卫，再按元素类型的计算路径
#       （整数 / 浮点）选择具体的累加策略。两条路径是彼此独立的实现，不合并为同一段浮点代码。
# 职责：
# - sum：从类型零值 T() 开始按迭代顺序累加，结果类型与元素类型一致
# - mean：整数路径复用 sum 并向零截断；浮点路径独立做双精度累加
# - variance：总体方差，先求均值再完整扫描第二遍
# - max：以 container[0] 为初值，严格大于才替换（并列保留先出现的值）
# - transform_reduce：结果类型由 func(第一个元素) 推断，需支持从零值开始累加

from __future__ import annotations

from typing import Any, Callable

from agglib.core.capabilities import (
    require_accumulable,
    require_addable,
    require_divisible,
    require_indexable,
    require_iterable,
    require_non_empty,
    require_numeric,
    require_sized,
    require_widenable,
    resolve_element_type,
    zero_value,
)
from agglib.core.types import Container, ElementCategory
from agglib.core.utils.logging import get_logger
from agglib.core.utils.numeric import double_sum, squared_deviation_sum, truncating_divide
from agglib.core.utils.param_validation import ensure_callable

__all__ = ["sum", "mean", "variance", "max", "transform_reduce"]

logger = get_logger(__name__)


def sum(container: Container) -> Any:
    """
    Add the elements in iteration order starting from ``T()``.

    Requires Addable(element type). An empty numpy array returns its dtype's
    zero; any other empty container returns ``0``.
    """
    profile = resolve_element_type(container, "sum")
    if profile.element_type is None:
        return 0
    require_addable(profile, "sum")
    result = zero_value(profile, "sum")
    for element in container:
        result += element
    return result


def mean(container: Container) -> Any:
    """
    Arithmetic mean.

    Integral elements: ``sum(container)`` divided by the count, truncated
    toward zero, returned as the element type. Floating elements: a separate
    double accumulation divided by the count, returned as ``float``.
    """
    profile = resolve_element_type(container, "mean")
    require_sized(container, "mean")
    require_non_empty(profile, "mean")
    require_divisible(profile, "mean")
    count = len(container)
    if profile.category is ElementCategory.INTEGRAL:
        # 整数路径实例化了 sum，因此同样要求 Addable
        require_addable(profile, "mean")
        logger.debug("mean: integral path for %s", profile.element_type.__name__)
        return profile.element_type(truncating_divide(sum(container), count))
    require_widenable(profile, "mean")
    logger.debug("mean: floating path for %s", profile.element_type.__name__)
    return double_sum(container) / count


def variance(container: Container) -> float:
    """Population variance ``(1/n) * sum((x - mu) ** 2)`` in double precision."""
    profile = resolve_element_type(container, "variance")
    require_sized(container, "variance")
    require_non_empty(profile, "variance")
    require_addable(profile, "variance")
    require_widenable(profile, "variance")
    count = len(container)
    if profile.category is ElementCategory.INTEGRAL:
        logger.debug("variance: integral path for %s", profile.element_type.__name__)
        mu = float(sum(container)) / count
    else:
        # 浮点路径不复用 mean，单独完成一次双精度累加
        logger.debug("variance: floating path for %s", profile.element_type.__name__)
        mu = double_sum(container) / count
    return squared_deviation_sum(container, mu) / count


def max(container: Container) -> Any:
    """
    Largest element, seeded from ``container[0]``.

    A later element replaces the running maximum only when strictly greater,
    so ties keep the earlier value.
    """
    profile = resolve_element_type(container, "max")
    require_indexable(container, "max")
    require_non_empty(profile, "max")
    require_numeric(profile.element_type, "max")
    result = container[0]
    for element in container:
        if element > result:
            result = element
    return result


def transform_reduce(container: Container, func: Callable[[Any], Any]) -> Any:
    """
    Accumulate ``func(x)`` over the container, starting from ``R()``.

    ``R`` is the type returned by ``func`` for the first element and must
    accept accumulation from its zero value. ``func`` is called exactly once
    per element. An empty container returns ``0``.
    """
    require_iterable(container, "transform_reduce")
    ensure_callable(func, label="func")
    iterator = iter(container)
    try:
        first = next(iterator)
    except StopIteration:
        return 0
    mapped = func(first)
    result_type = type(mapped)
    require_accumulable(result_type, mapped, "transform_reduce")
    result = result_type()
    result += mapped
    for element in iterator:
        result += func(element)
    return result

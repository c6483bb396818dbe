"""Aggregation operations entrypoint."""

from __future__ import annotations

from .collection import max, mean, sum, transform_reduce, variance
from .registry import (
    OperationRegistry,
    apply_operation,
    available_operations,
    get_operation,
    register_operation,
)
from .variadic import max_variadic, mean_variadic, sum_variadic, variance_variadic

__all__ = [
    "sum",
    "mean",
    "variance",
    "max",
    "transform_reduce",
    "sum_variadic",
    "mean_variadic",
    "variance_variadic",
    "max_variadic",
    "register_operation",
    "get_operation",
    "apply_operation",
    "available_operations",
    "OperationRegistry",
]

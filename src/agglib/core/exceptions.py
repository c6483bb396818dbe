"""
Error hierarchy for the aggregation library.

Responsibilities
  - Define the base error shared by every aggregation failure.
  - Report rejected element types as a typed capability failure.
  - Report empty containers and empty argument packs explicitly.

Usage Context
  - Raised by capability guards before any accumulation starts.

Limitations
  - Exceptions carry message text plus a few context attributes only.
"""
# 说明：聚合库的异常体系，区分“类型能力不满足”与“空输入”两类失败。
# 职责：
# - AggregationError：库内统一基类异常
# - CapabilityError：元素类型不满足操作所需能力谓词（相当于编译期实例化被拒绝）
# - EmptyInputError：对空容器或空参数包调用 mean/variance/max 等操作

from __future__ import annotations

from typing import Optional


class AggregationError(Exception):
    """Base exception for aggregation failures."""


class CapabilityError(AggregationError, TypeError):
    """
    Raised when a type fails a capability required by an operation.

    - Configuration
      - operation: Name of the rejected operation.
      - capability: Name of the failed predicate.
      - element_type: The offending type, when known.

    - Behavior
      - Formats a message naming all three parts.

    - Usage Notes
      - Always raised before accumulation, never mid-computation.
    """

    def __init__(
        self,
        operation: str,
        capability: str,
        element_type: Optional[type] = None,
        *,
        detail: Optional[str] = None,
    ) -> None:
        self.operation = operation
        self.capability = capability
        self.element_type = element_type
        type_name = getattr(element_type, "__name__", repr(element_type))
        message = f"{operation}: type '{type_name}' does not satisfy {capability}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class EmptyInputError(AggregationError, ValueError):
    """Raised when an operation needs at least one element and got none."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires at least one element")

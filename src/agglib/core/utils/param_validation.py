"""
Reusable validation helpers.
"""
# 说明：参数验证相关的辅助函数，用于在库内部统一进行轻量级参数检查。
# 职责：
# - ParamValidationError：专门用于参数校验失败的异常类型
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_callable：检查参数是否可调用，并在失败时给出带 label 的错误提示

from __future__ import annotations

from typing import Any, Type


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_callable(value: Any, *, label: str = "value") -> None:
    # 检查 value 是否可调用，否则抛出带字段标签的 ParamValidationError
    if not callable(value):
        raise ParamValidationError(f"{label} must be callable, got {type(value).__name__}")

"""Registry utilities for selecting aggregation operations by name."""
# 说明：提供聚合操作的注册与按名称调用能力，便于通过配置选择聚合操作。
# 职责：
# - 维护从字符串标识到操作函数的注册表，支持运行时扩展
# - 提供按名称查找与调用操作的统一入口
# - 通过 OperationRegistry 封装类方便在配置驱动或依赖注入场景中使用

from __future__ import annotations

from typing import Any, Callable, Dict, List

from agglib.core.utils.param_validation import ParamValidationError, ensure, ensure_callable
from . import collection, variadic

_OPERATION_REGISTRY: Dict[str, Callable[..., Any]] = {}


def register_operation(name: str, func: Callable[..., Any]) -> None:
    """Register an operation under a string identifier."""
    # 将操作函数以给定名称写入全局注册表，同名注册会覆盖旧值
    ensure(bool(name), "operation name must be non-empty")
    ensure_callable(func, label="func")
    _OPERATION_REGISTRY[str(name)] = func


def get_operation(name: str) -> Callable[..., Any]:
    """Retrieve an operation by name."""
    key = str(name)
    if key not in _OPERATION_REGISTRY:
        raise ParamValidationError(f"operation '{name}' not registered")
    return _OPERATION_REGISTRY[key]


def apply_operation(name: str, *args: Any, **kwargs: Any) -> Any:
    """Look up ``name`` and call it with the given arguments."""
    return get_operation(name)(*args, **kwargs)


def available_operations() -> List[str]:
    return sorted(_OPERATION_REGISTRY)


class OperationRegistry:
    """Convenience wrapper mirroring the function-based registry helpers."""

    @staticmethod
    def register(name: str, func: Callable[..., Any]) -> None:
        register_operation(name, func)

    @staticmethod
    def get(name: str) -> Callable[..., Any]:
        return get_operation(name)

    @staticmethod
    def apply(name: str, *args: Any, **kwargs: Any) -> Any:
        return apply_operation(name, *args, **kwargs)


# Pre-register the built-in operations
register_operation("sum", collection.sum)
register_operation("mean", collection.mean)
register_operation("variance", collection.variance)
register_operation("max", collection.max)
register_operation("transform_reduce", collection.transform_reduce)
register_operation("sum_variadic", variadic.sum_variadic)
register_operation("mean_variadic", variadic.mean_variadic)
register_operation("variance_variadic", variadic.variance_variadic)
register_operation("max_variadic", variadic.max_variadic)

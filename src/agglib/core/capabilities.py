"""
Capability predicates and upfront guards for the aggregation operations.

Responsibilities
  - Decide whether a container or element type offers the capabilities an
    operation needs (iteration, addition, division by a count, numeric
    comparison, widening to double, accumulation).
  - Classify element types into the integral or floating computation path.
  - Resolve the element type of a container and enforce a uniform type.
  - Raise CapabilityError before any accumulation starts.

Usage Context
  - Every public operation calls the matching ``require_*`` guards first.

Limitations
  - Python has no static instantiation step; type-level properties are
    probed through one representative value of the type.
  - Probing calls ``+`` and ``/`` once on that representative.
"""
# 说明：能力谓词与前置守卫。原设计中的编译期约束在此改写为显式的前置类型检查，
#       在任何累加开始之前抛出 CapabilityError，不存在“算到一半才失败”的情况。
# 职责：
# - is_iterable / is_sized / is_indexable：容器层面的能力（可多次遍历、已知长度、可按位置访问）
# - is_addable / is_divisible / is_numeric / is_widenable / is_accumulable：元素类型层面的能力
# - element_category：为元素类型打上整数 / 浮点计算路径标签
# - resolve_element_type：确定容器的元素类型与代表值，并按配置检查类型一致性
# - require_*：对应的守卫函数，失败时记录 DEBUG 日志并抛出 CapabilityError
# 约定：
# - 字符类型（str / bytes / numpy 字符类型）即便可比较也明确排除在“数值”之外
# - numpy 一维数值数组按 dtype 判断元素类型，不逐元素扫描

from __future__ import annotations

import numbers
from collections import abc
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from .exceptions import CapabilityError, EmptyInputError
from .types import ElementCategory
from .utils.config import get_config
from .utils.logging import get_logger

logger = get_logger(__name__)

_CHARACTER_TYPES = (str, bytes, bytearray, np.character)
# numpy 数值 dtype 的 kind：布尔、有符号整数、无符号整数、浮点
_NUMERIC_DTYPE_KINDS = frozenset("biuf")


# ------------------------------------------------------------------ container predicates
def is_iterable(container: Any) -> bool:
    """True if the container can be traversed from start to end repeatedly."""
    # 一次性迭代器（生成器等）不满足：前置检查与方差的两遍扫描都需要重新遍历
    if isinstance(container, np.ndarray):
        return container.ndim >= 1
    if not isinstance(container, abc.Iterable):
        return False
    return not isinstance(container, abc.Iterator)


def is_sized(container: Any) -> bool:
    """True if the element count is known up front."""
    return isinstance(container, abc.Sized)


def is_indexable(container: Any) -> bool:
    """True if the container supports positional access such as ``c[0]``."""
    return isinstance(container, (abc.Sequence, np.ndarray))


# ------------------------------------------------------------------ element predicates
def is_character_type(element_type: type) -> bool:
    return issubclass(element_type, _CHARACTER_TYPES)


def is_numeric(element_type: type) -> bool:
    """True for arithmetic scalar types that are not character types."""
    # numbers.Real 覆盖 int / bool / float / Fraction 以及 numpy 整数与浮点；
    # numpy.bool_ 未注册到 numbers 体系，需要单独放行；复数不属于可比较的算术标量
    if is_character_type(element_type):
        return False
    return issubclass(element_type, (numbers.Real, np.bool_))


def is_addable(element_type: type, sample: Any) -> bool:
    """True if ``T + T`` is defined and yields exactly ``T``."""
    # 不允许结果类型被隐式拓宽，例如 bool + bool -> int 视为不满足
    try:
        with np.errstate(all="ignore"):
            result = sample + sample
    except TypeError:
        return False
    return type(result) is element_type


def is_divisible(element_type: type, sample: Any) -> bool:
    """True if ``T / n`` is defined and converts back to ``T``."""
    try:
        with np.errstate(all="ignore"):
            element_type(sample / 1)
    except TypeError:
        return False
    except OverflowError:
        # 大整数转浮点溢出属于取值问题，除法本身对该类型是定义良好的
        return True
    return True


def is_widenable(element_type: type) -> bool:
    """True if values of the type convert to a double."""
    if is_character_type(element_type):
        return False
    # 复数虽有 __float__（numpy 复数类型、旧版 Python complex），转换会丢弃虚部
    if issubclass(element_type, (numbers.Complex, np.complexfloating)) and not issubclass(element_type, numbers.Real):
        return False
    return hasattr(element_type, "__float__")


def is_accumulable(result_type: type, sample: Any) -> bool:
    """True if ``R()`` gives a zero value and ``R() + sample`` is defined."""
    try:
        zero = result_type()
        with np.errstate(all="ignore"):
            zero + sample
    except TypeError:
        return False
    return True


def element_category(element_type: type) -> ElementCategory:
    """Tag the element type with its computation path."""
    if issubclass(element_type, (numbers.Integral, np.integer, np.bool_)):
        return ElementCategory.INTEGRAL
    return ElementCategory.FLOATING


# ------------------------------------------------------------------ element type resolution
@dataclass(frozen=True)
class ElementProfile:
    """
    Element type of a container plus one representative value.

    - Configuration
      - element_type: ``type(first)`` or the numpy dtype's scalar type;
        ``None`` for an empty container of unknown type.
      - sample: A representative value used to probe capabilities.
      - empty: Whether the container holds no elements.

    - Behavior
      - Exposes the computation category of the element type.
    """

    element_type: Optional[type]
    sample: Any
    empty: bool

    @property
    def category(self) -> Optional[ElementCategory]:
        if self.element_type is None:
            return None
        return element_category(self.element_type)


def resolve_element_type(container: Any, operation: str) -> ElementProfile:
    """
    Return the element profile of ``container`` for ``operation``.

    Raises CapabilityError when the container is not iterable, or when
    strict validation is enabled and the elements do not share one type.
    """
    require_iterable(container, operation)
    if (
        isinstance(container, np.ndarray)
        and container.ndim == 1
        and container.dtype.kind in _NUMERIC_DTYPE_KINDS
    ):
        scalar_type = container.dtype.type
        if container.size == 0:
            return ElementProfile(scalar_type, scalar_type(0), True)
        return ElementProfile(scalar_type, container[0], False)

    iterator = iter(container)
    try:
        representative = next(iterator)
    except StopIteration:
        return ElementProfile(None, None, True)
    element_type = type(representative)
    if get_config().strict_validation:
        # 严格模式下逐元素确认类型一致，保证后续累加不会中途因类型问题失败
        for position, element in enumerate(iterator, start=1):
            if type(element) is not element_type:
                _reject(
                    operation,
                    "a uniform element type",
                    element_type,
                    detail=f"element {position} is '{type(element).__name__}'",
                )
    return ElementProfile(element_type, representative, False)


# ------------------------------------------------------------------ guards
def _reject(operation: str, capability: str, element_type: Optional[type], *, detail: Optional[str] = None) -> None:
    logger.debug("rejecting %s for %r: %s", operation, element_type, capability)
    raise CapabilityError(operation, capability, element_type, detail=detail)


def require_iterable(container: Any, operation: str) -> None:
    if not is_iterable(container):
        _reject(operation, "Iterable", type(container), detail="need a re-iterable container")


def require_sized(container: Any, operation: str) -> None:
    if not is_sized(container):
        _reject(operation, "a known element count", type(container))


def require_indexable(container: Any, operation: str) -> None:
    if not is_indexable(container):
        _reject(operation, "positional access", type(container))


def require_non_empty(profile: ElementProfile, operation: str) -> None:
    if profile.empty:
        raise EmptyInputError(operation)


def require_addable(profile: ElementProfile, operation: str) -> None:
    if not is_addable(profile.element_type, profile.sample):
        _reject(operation, "Addable", profile.element_type)


def require_divisible(profile: ElementProfile, operation: str) -> None:
    if not is_divisible(profile.element_type, profile.sample):
        _reject(operation, "Divisible", profile.element_type)


def require_widenable(profile: ElementProfile, operation: str) -> None:
    if not is_widenable(profile.element_type):
        _reject(operation, "conversion to double", profile.element_type)


def require_numeric(element_type: type, operation: str, *, detail: Optional[str] = None) -> None:
    if not is_numeric(element_type):
        _reject(operation, "Numeric", element_type, detail=detail)


def require_accumulable(result_type: type, sample: Any, operation: str) -> None:
    if not is_accumulable(result_type, sample):
        _reject(operation, "accumulation from a zero value", result_type)


def zero_value(profile: ElementProfile, operation: str) -> Any:
    """Return the additive identity ``T()`` of the element type."""
    try:
        return profile.element_type()
    except TypeError:
        _reject(operation, "an additive identity", profile.element_type)

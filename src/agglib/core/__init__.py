"""Entry point for the core library components."""

from __future__ import annotations

from .capabilities import (
    ElementProfile,
    element_category,
    is_accumulable,
    is_addable,
    is_character_type,
    is_divisible,
    is_indexable,
    is_iterable,
    is_numeric,
    is_sized,
    is_widenable,
    resolve_element_type,
)
from .exceptions import AggregationError, CapabilityError, EmptyInputError
from .types import ElementCategory
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    configure_logging,
    get_config,
    get_logger,
)

__all__: list[str] = [
    "AggregationError",
    "CapabilityError",
    "ElementCategory",
    "ElementProfile",
    "EmptyInputError",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "configure_logging",
    "element_category",
    "get_config",
    "get_logger",
    "is_accumulable",
    "is_addable",
    "is_character_type",
    "is_divisible",
    "is_indexable",
    "is_iterable",
    "is_numeric",
    "is_sized",
    "is_widenable",
    "resolve_element_type",
]

"""Shared utility helpers used across the core library."""

from .numeric import (
    double_sum,
    squared_deviation_sum,
    truncating_divide,
    promote_to_common_type,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_callable,
    ParamValidationError,
)

__all__ = [
    "double_sum",
    "squared_deviation_sum",
    "truncating_divide",
    "promote_to_common_type",
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_callable",
    "ParamValidationError",
]

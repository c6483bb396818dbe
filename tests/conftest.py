"""Shared pytest configuration and path setup for test modules."""

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for all tests
_SRC = Path(__file__).resolve().parents[1] / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from agglib.core.utils.config import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 每个测试结束后恢复全局配置，避免测试之间相互影响
    cfg = get_config()
    saved = (cfg.strict_validation, cfg.log_level)
    yield
    cfg.strict_validation, cfg.log_level = saved

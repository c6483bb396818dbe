"""
Unit tests for the numeric-path helpers.
"""
# 说明：数值路径辅助函数的单元测试。
# 覆盖：
# - double_sum / squared_deviation_sum：双精度累加与离差平方和
# - truncating_divide：向零截断的整数除法
# - promote_to_common_type：异构参数包的公共类型提升规则

import numpy as np
import pytest

from agglib.core.utils import (
    double_sum,
    promote_to_common_type,
    squared_deviation_sum,
    truncating_divide,
)


def test_double_sum_widens() -> None:
    result = double_sum([1, 2, np.int8(3)])
    assert result == 6.0
    assert isinstance(result, float)


def test_squared_deviation_sum() -> None:
    assert squared_deviation_sum([1, 2, 3, 4], 2.5) == pytest.approx(5.0)


@pytest.mark.parametrize(
    "total, count, expected",
    [(10, 4, 2), (-10, 4, -2), (-7, 2, -3), (7, 2, 3), (0, 5, 0)],
)
def test_truncating_divide(total, count, expected) -> None:
    assert truncating_divide(total, count) == expected


def test_promote_python_packs() -> None:
    assert promote_to_common_type([1, 2]) == [1, 2]
    assert [type(v) for v in promote_to_common_type([True, 2])] == [int, int]
    assert [type(v) for v in promote_to_common_type([1, 2.5])] == [float, float]


def test_promote_numpy_packs() -> None:
    promoted = promote_to_common_type([np.int16(1), np.int32(2)])
    assert all(isinstance(v, np.int32) for v in promoted)
    promoted = promote_to_common_type([np.int32(1), 2.5])
    assert all(isinstance(v, np.float64) for v in promoted)


def test_truncating_divide_numpy_minimum() -> None:
    # 有符号类型最小值取绝对值会回绕，截断除法必须在原生类型内保持正确符号
    total = np.int64(np.iinfo(np.int64).min)
    result = truncating_divide(total, 2)
    assert result == -(2 ** 62)
    assert isinstance(result, np.int64)
    assert truncating_divide(np.int64(-7), 2) == -3

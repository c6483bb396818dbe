"""
Property-based tests for the collection and variadic aggregations.
"""
# 说明：集合与可变参数聚合操作的属性测试。
# 覆盖：
# - variance 非负，且当且仅当所有元素相等时为 0
# - 浮点路径的 mean 落在 [min, max] 区间内
# - max 等于真实最大值且与元素顺序无关
# - 整数路径的 mean 等于向零截断的整除结果
# - 可变参数版本与集合版本在相同数据上结果一致
# - 能力不满足时不产生部分结果，容器不被遍历

import builtins

import pytest
from hypothesis import given, strategies as st

from agglib.core import CapabilityError
from agglib.ops import (
    max,
    max_variadic,
    mean,
    mean_variadic,
    sum,
    sum_variadic,
    transform_reduce,
    variance,
    variance_variadic,
)
from strategies import float_arrays, float_lists, int_lists, numeric_packs


# ------------------------------------------------------------------ variance
@given(st.one_of(int_lists(), float_lists()))
def test_variance_non_negative(values):
    assert variance(values) >= 0.0


@given(st.one_of(st.integers(-1000, 1000), st.integers(-10**6, 10**6).map(float)),
       st.integers(min_value=1, max_value=30))
def test_variance_zero_for_constant_containers(value, size):
    assert variance([value] * size) == 0.0


@given(int_lists(min_size=2))
def test_variance_positive_when_elements_differ(values):
    # 整数元素的离差至少为 1/n，不会被浮点误差抹平
    if len(set(values)) > 1:
        assert variance(values) > 0.0


# ------------------------------------------------------------------ mean
@given(st.one_of(float_lists(), float_arrays()))
def test_floating_mean_within_bounds(values):
    result = mean(values)
    tolerance = 1e-9 * builtins.max(1.0, builtins.max(abs(float(v)) for v in values))
    assert builtins.min(values) - tolerance <= result <= builtins.max(values) + tolerance


@given(int_lists())
def test_integral_mean_truncates_toward_zero(values):
    total = builtins.sum(values)
    quotient = abs(total) // len(values)
    expected = quotient if total >= 0 else -quotient
    assert mean(values) == expected


# ------------------------------------------------------------------ max
@given(st.one_of(int_lists(), float_lists()), st.randoms())
def test_max_is_order_invariant(values, rnd):
    shuffled = list(values)
    rnd.shuffle(shuffled)
    assert max(values) == builtins.max(values)
    assert max(shuffled) == max(values)


# ------------------------------------------------------------------ sum / transform_reduce
@given(int_lists(min_size=0))
def test_integral_sum_is_exact(values):
    assert sum(values) == builtins.sum(values)


@given(int_lists())
def test_transform_reduce_identity_matches_sum(values):
    assert transform_reduce(values, lambda x: x) == sum(values)


# ------------------------------------------------------------------ variadic vs collection
@given(numeric_packs())
def test_variadic_mean_and_variance_match_widened_collection(pack):
    widened = [float(x) for x in pack]
    assert mean_variadic(*pack) == pytest.approx(mean(widened))
    assert variance_variadic(*pack) == pytest.approx(variance(widened))


@given(numeric_packs())
def test_max_variadic_matches_builtin(pack):
    assert max_variadic(*pack) == builtins.max(pack)


@given(int_lists(max_size=10))
def test_sum_variadic_matches_collection_sum(values):
    assert sum_variadic(*values) == sum(values)


# ------------------------------------------------------------------ rejection
class _Tracked(list):
    # 记录被遍历的元素个数，用于确认拒绝发生在累加之前
    consumed = 0

    def __iter__(self):
        for item in super().__iter__():
            type(self).consumed += 1
            yield item


@given(st.lists(st.text(min_size=1, max_size=3), min_size=1, max_size=10))
def test_rejected_types_produce_no_partial_result(words):
    for op in (mean, max):
        with pytest.raises(CapabilityError):
            op(words)
    _Tracked.consumed = 0
    with pytest.raises(CapabilityError):
        variance(_Tracked(words))
    # 仅有前置的类型一致性扫描读取过元素
    assert _Tracked.consumed == len(words)

"""
Тесты для равенства, порядка и hash CheckedFloat

Проверяет:
1. Равенство ±0.0 и согласованность hash
2. Сравнение с raw значениями и отказ сравнения разных типов
3. Total order на валидных значениях (сортировка с бесконечностями)
4. Использование в set / dict
5. Конверсии from_checked между политиками и разрядностями
6. Свойства (Hypothesis): порядок, равенство, hash
"""

import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from checked_float import N32, N64, R32, R64, IllegalFloatValue
from checked_float.testing import checked_floats

INF = math.inf
NAN = math.nan


# =============================================================================
# ТЕСТЫ РАВЕНСТВА И HASH
# =============================================================================


class TestEquality:
    """Тесты для ==, != и hash"""

    def test_signed_zeros_equal(self) -> None:
        """+0.0 и -0.0 равны и имеют одинаковый hash"""
        assert N64(0.0) == N64(-0.0)
        assert hash(N64(0.0)) == hash(N64(-0.0))
        assert hash(R32(-0.0)) == hash(0)
        assert N64(0.0).cmp(N64(-0.0)) == 0

    def test_reflexive(self) -> None:
        """Каждое валидное значение равно самому себе"""
        for value in (N64(1.5), N64(INF), N64(-INF), R32(-0.0), R64(5e-324)):
            assert value == value
            assert not (value != value)

    def test_equal_values_equal_hashes(self) -> None:
        """Равные значения одного типа имеют одинаковый hash"""
        assert hash(N64(1.25)) == hash(N64(1.25))
        assert hash(N64(INF)) == hash(N64.infinity())

    def test_compare_with_raw(self) -> None:
        """Сравнение с raw числами в обе стороны"""
        assert N64(1.0) == 1.0
        assert 1.0 == N64(1.0)
        assert N64(2.0) == 2
        assert N64(1.0) != 1.5

    def test_raw_operand_compared_exactly(self) -> None:
        """Raw операнд сравнивается точно, без приведения к разрядности"""
        assert N64(0.1) == 0.1
        assert N32(0.1) != 0.1
        assert N32(0.1) == np.float32(0.1)
        assert N32(0.1) == float(np.float32(0.1))
        assert N32(0.5) == 0.5

    def test_huge_int_operand(self) -> None:
        """Целое вне диапазона float сравнивается точно, без OverflowError"""
        big = 10**400

        assert (N64(1.0) == big) is False
        assert N64(1.0) < big
        assert N64(1.0).cmp(big) == -1
        assert N64(1.0) not in [big]
        assert N64(INF) > big
        assert N64(-INF) < -big

    def test_int_operand_exact(self) -> None:
        """Большие целые сравниваются без округления"""
        assert N64(2.0**60) == 2**60
        assert N64(2.0**53) != 2**53 + 1
        assert N64(2.0**53) < 2**53 + 1

    def test_f32_infinity_vs_finite_raw(self) -> None:
        """Конечный raw операнд вне диапазона f32 не равен бесконечности"""
        assert not (N32(INF) == 1e300)
        assert N32(INF) > 1e300
        assert N32(-INF) < -1e300
        assert N32.max_value() < 1e300
        assert R32(3.0) == 3.0

    def test_hash_matches_raw_numbers(self) -> None:
        """Равные checked и raw значения имеют одинаковый hash"""
        assert hash(N64(1.0)) == hash(1.0) == hash(1)
        assert hash(N32(0.5)) == hash(0.5)
        assert hash(N64(INF)) == hash(INF)

    def test_mixed_raw_and_checked_keys(self) -> None:
        """set / dict с raw и checked ключами"""
        assert N64(1.0) in {1.0}
        assert 2.0 in {N64(2.0)}
        assert {1.0: "raw"}[N64(1.0)] == "raw"
        assert {R64(-0.0): "zero"}[0] == "zero"
        assert len({N64(2.0), 2.0, 2}) == 1

    def test_different_types_not_equal(self) -> None:
        """Значения разных checked типов не равны"""
        assert N64(1.0) != R64(1.0)
        assert not (N64(1.0) == R64(1.0))
        assert N32(1.0) != N64(1.0)

    def test_non_numbers_not_equal(self) -> None:
        """Сравнение с не-числами возвращает False"""
        assert N64(1.0) != "1.0"
        assert N64(1.0) != None  # noqa: E711

    def test_set_deduplication(self) -> None:
        """set схлопывает равные значения, включая ±0.0"""
        values = {N64(0.0), N64(-0.0), N64(1.0), N64(1.0), N64(INF)}
        assert len(values) == 3

    def test_dict_keys(self) -> None:
        """Значения используются как ключи dict"""
        table = {R64(1.5): "a", R64(-0.0): "zero"}
        assert table[R64(1.5)] == "a"
        assert table[R64(0.0)] == "zero"


# =============================================================================
# ТЕСТЫ ПОРЯДКА
# =============================================================================


class TestOrdering:
    """Тесты для <, <=, >, >= и cmp"""

    def test_basic_order(self) -> None:
        """Нативный порядок на raw значениях"""
        assert N64(1.0) < N64(2.0)
        assert N64(2.0) >= N64(2.0)
        assert R32(-1.0) <= R32(0.0)
        assert R64(3.0) > 2.5
        assert 2.5 < R64(3.0)

    def test_infinities_are_extremes(self) -> None:
        """-inf < любое конечное значение < +inf"""
        assert N64(-INF) < N64.min_value()
        assert N64.max_value() < N64(INF)
        assert N32(-INF) < N32(INF)

    def test_sorting(self) -> None:
        """Сортировка списка с бесконечностями и нулями"""
        values = [N64(3.0), N64(-INF), N64(0.0), N64(INF), N64(-1.5), N64(-0.0)]
        result = [value.raw() for value in sorted(values)]

        assert result[0] == -INF
        assert result[1] == -1.5
        assert result[2] == 0.0 and result[3] == 0.0
        assert result[4:] == [3.0, INF]

    def test_signed_zeros_unordered(self) -> None:
        """-0.0 и +0.0 не упорядочены строго"""
        assert not (N64(-0.0) < N64(0.0)) and not (N64(-0.0) > N64(0.0))
        assert not (R32(0.0) < R32(-0.0)) and not (R32(0.0) > R32(-0.0))
        assert N64(-0.0) <= N64(0.0) and N64(-0.0) >= N64(0.0)

    def test_min_max_builtins(self) -> None:
        """builtin min/max работают на checked значениях"""
        values = [R64(2.0), R64(-7.0), R64(4.5)]
        assert min(values) == R64(-7.0)
        assert max(values) == R64(4.5)

    def test_cmp(self) -> None:
        """cmp возвращает -1, 0, 1"""
        assert N64(1.0).cmp(N64(2.0)) == -1
        assert N64(2.0).cmp(2.0) == 0
        assert N64(INF).cmp(N64(2.0)) == 1

    def test_different_types_not_orderable(self) -> None:
        """Порядок между разными checked типами не определён"""
        with pytest.raises(TypeError):
            N64(1.0) < R64(2.0)
        with pytest.raises(TypeError):
            N32(1.0) >= N64(2.0)
        with pytest.raises(TypeError, match="cannot compare"):
            N64(1.0).cmp(R64(1.0))

    def test_unchecked_nan_comparisons(self) -> None:
        """NaN в unchecked-значении: все сравнения ложны"""
        nan_value = N64.unchecked_new(NAN)
        one = N64(1.0)

        assert not (nan_value == nan_value)
        assert not (nan_value < one)
        assert not (nan_value > one)
        assert not (one <= nan_value)


# =============================================================================
# ТЕСТЫ КОНВЕРСИЙ МЕЖДУ ТИПАМИ
# =============================================================================


class TestFromChecked:
    """Тесты для from_checked"""

    def test_same_type_returns_same_object(self) -> None:
        """Конверсия в тот же тип — тождественная"""
        value = N64(1.5)
        assert N64.from_checked(value) is value

    def test_widening_policy(self) -> None:
        """Finite → Num не может упасть"""
        assert N64.from_checked(R64(1.5)) == N64(1.5)
        assert N32.from_checked(R32(-2.0)) == N32(-2.0)

    def test_widening_width(self) -> None:
        """f32 → f64 сохраняет значение точно"""
        value = N64.from_checked(N32(0.1))
        assert value.raw() == N32(0.1).raw()
        assert value.raw_scalar().dtype.itemsize == 8

        assert N64.from_checked(R32(0.5)) == N64(0.5)

    def test_narrowing_policy(self) -> None:
        """Num → Finite отклоняет бесконечности"""
        assert R64.from_checked(N64(2.0)) == R64(2.0)
        with pytest.raises(IllegalFloatValue):
            R64.from_checked(N64(INF))

    def test_narrowing_width(self) -> None:
        """f64 → f32 округляет; переполнение допустимо только для Num"""
        assert N32.from_checked(N64(1e300)).is_infinite()
        with pytest.raises(IllegalFloatValue):
            R32.from_checked(R64(1e300))

        assert R32.from_checked(R64(0.1)) == R32(0.1)

    def test_rejects_raw_input(self) -> None:
        """from_checked принимает только checked значения"""
        with pytest.raises(TypeError, match="expects a checked float"):
            N64.from_checked(1.0)


# =============================================================================
# PROPERTY-BASED ТЕСТЫ
# =============================================================================


class TestOrderingProperties:
    """Свойства порядка и hash на сгенерированных значениях"""

    @given(st.lists(checked_floats(N64)))
    def test_sorted_is_monotone(self, values: list) -> None:
        """Отсортированный список не убывает"""
        result = sorted(values)
        for left, right in zip(result, result[1:]):
            assert left <= right

    @given(checked_floats(N64), checked_floats(N64))
    def test_equality_matches_raw(self, a: N64, b: N64) -> None:
        """a == b тогда и только тогда, когда raw(a) == raw(b)"""
        assert (a == b) == (a.raw() == b.raw())

    @given(checked_floats(R32), checked_floats(R32))
    def test_hash_consistent_with_equality(self, a: R32, b: R32) -> None:
        """a == b ⟹ hash(a) == hash(b)"""
        if a == b:
            assert hash(a) == hash(b)

    @given(checked_floats(N64), checked_floats(N64))
    def test_total_order(self, a: N64, b: N64) -> None:
        """Ровно одно из a < b, a == b, a > b"""
        assert [a < b, a == b, a > b].count(True) == 1

    @given(checked_floats(R64))
    def test_try_new_roundtrip(self, value: R64) -> None:
        """try_new(raw(v)) == v"""
        assert R64.try_new(value.raw()) == value

    @given(checked_floats(N64))
    def test_raw_equality_and_hash(self, value: N64) -> None:
        """v == raw(v) и hash(v) == hash(raw(v))"""
        assert value == value.raw()
        assert hash(value) == hash(value.raw())
        assert value in {value.raw()}


class TestConversionProperties:
    """Свойства from_checked на сгенерированных значениях"""

    @given(checked_floats(R64))
    def test_widening_preserves_raw_f64(self, value: R64) -> None:
        """Finite → Num сохраняет raw значение"""
        assert N64.from_checked(value).raw() == value.raw()

    @given(checked_floats(R32))
    def test_widening_preserves_raw_f32(self, value: R32) -> None:
        """R32 → N32 и R32 → N64 сохраняют raw значение"""
        assert N32.from_checked(value).raw() == value.raw()
        assert N64.from_checked(value).raw() == value.raw()

    @given(checked_floats(N64))
    def test_narrowing_fails_only_for_infinities(self, value: N64) -> None:
        """Num → Finite падает ровно на ±inf"""
        if value.is_infinite():
            with pytest.raises(IllegalFloatValue):
                R64.from_checked(value)
        else:
            assert R64.from_checked(value).raw() == value.raw()

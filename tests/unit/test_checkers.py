"""
Тесты для политик валидности (Checkers)

Проверяет:
1. Предикаты NumChecker / FiniteChecker на всех классах значений
2. Диагностику assert_valid
3. Отключение верификации
4. Отношение подмножеств между политиками
5. Пользовательскую политику
"""

import math

import numpy as np
import pytest

from checked_float.config import verification
from checked_float.core.checkers import FiniteChecker, FloatChecker, NumChecker
from checked_float.errors import CheckedFloatError, FloatInvariantViolation

INF = math.inf
NAN = math.nan


class NonNegativeChecker(FiniteChecker):
    """Конечные значения >= 0 (включая -0.0)."""

    violation_message = "unexpected negative, NaN or infinity"

    @staticmethod
    def check(value) -> bool:
        return math.isfinite(value) and value >= 0.0


# =============================================================================
# ТЕСТЫ ПРЕДИКАТОВ
# =============================================================================


class TestNumChecker:
    """Тесты для NumChecker"""

    @pytest.mark.parametrize("value", [0.0, -0.0, 1.0, -1.5, 5e-324, 1e308, INF, -INF])
    def test_accepts_everything_but_nan(self, value: float) -> None:
        """Все значения, кроме NaN, допустимы"""
        assert NumChecker.check(value) is True

    def test_rejects_nan(self) -> None:
        """NaN недопустим"""
        assert NumChecker.check(NAN) is False
        assert NumChecker.check(np.float32(NAN)) is False

    def test_accepts_numpy_scalars(self) -> None:
        """NumPy scalars проверяются так же, как Python float"""
        assert NumChecker.check(np.float32(1.0)) is True
        assert NumChecker.check(np.float64(-INF)) is True


class TestFiniteChecker:
    """Тесты для FiniteChecker"""

    @pytest.mark.parametrize("value", [0.0, -0.0, 1.0, -1.5, 5e-324, 1e308])
    def test_accepts_finite(self, value: float) -> None:
        """Конечные значения, включая ±0.0 и subnormal, допустимы"""
        assert FiniteChecker.check(value) is True

    @pytest.mark.parametrize("value", [NAN, INF, -INF])
    def test_rejects_nan_and_infinities(self, value: float) -> None:
        """NaN и ±inf недопустимы"""
        assert FiniteChecker.check(value) is False


# =============================================================================
# ТЕСТЫ ВЕРИФИКАЦИИ
# =============================================================================


class TestAssertValid:
    """Тесты для assert_valid"""

    def test_valid_value_passes(self) -> None:
        """Валидное значение не вызывает ошибку"""
        NumChecker.assert_valid(INF)
        FiniteChecker.assert_valid(1.0)

    def test_num_diagnostic(self) -> None:
        """NumChecker сообщает 'unexpected NaN'"""
        with pytest.raises(FloatInvariantViolation, match="^unexpected NaN$"):
            NumChecker.assert_valid(NAN)

    def test_finite_diagnostic(self) -> None:
        """FiniteChecker сообщает 'unexpected NaN or infinity'"""
        with pytest.raises(FloatInvariantViolation, match="unexpected NaN or infinity"):
            FiniteChecker.assert_valid(-INF)

    def test_violation_carries_context(self) -> None:
        """Исключение содержит значение и политику"""
        with pytest.raises(FloatInvariantViolation) as exc_info:
            FiniteChecker.assert_valid(INF)

        assert exc_info.value.value == INF
        assert exc_info.value.checker is FiniteChecker

    def test_violation_is_assertion_error(self) -> None:
        """Нарушение инварианта — ошибка программиста (AssertionError)"""
        with pytest.raises(AssertionError):
            NumChecker.assert_valid(NAN)

        assert issubclass(FloatInvariantViolation, CheckedFloatError)

    def test_disabled_verification_skips_check(self) -> None:
        """При выключенной верификации assert_valid ничего не проверяет"""
        with verification(False):
            NumChecker.assert_valid(NAN)
            FiniteChecker.assert_valid(INF)

        with pytest.raises(FloatInvariantViolation):
            NumChecker.assert_valid(NAN)


# =============================================================================
# ТЕСТЫ КОНТРАКТА ПОЛИТИКИ
# =============================================================================


class TestCheckerContract:
    """Тесты для контракта политики"""

    def test_checkers_are_stateless(self) -> None:
        """Политики не создают экземпляров"""
        with pytest.raises(TypeError, match="stateless"):
            NumChecker()

    def test_base_check_not_implemented(self) -> None:
        """Базовый класс не задаёт предикат"""
        with pytest.raises(NotImplementedError):
            FloatChecker.check(1.0)

    def test_finite_is_subset_of_num(self) -> None:
        """Finite ⊂ Num: расширение Finite → Num допустимо, обратное — нет"""
        assert NumChecker.accepts_all_of(FiniteChecker) is True
        assert FiniteChecker.accepts_all_of(NumChecker) is False
        assert NumChecker.accepts_all_of(NumChecker) is True

    def test_custom_checker(self) -> None:
        """Пользовательская политика использует собственную диагностику"""
        assert NonNegativeChecker.check(-0.0) is True
        assert NonNegativeChecker.check(2.0) is True
        assert NonNegativeChecker.check(-1.0) is False

        with pytest.raises(FloatInvariantViolation, match="unexpected negative"):
            NonNegativeChecker.assert_valid(-1.0)

        assert FiniteChecker.accepts_all_of(NonNegativeChecker) is True
        assert NumChecker.accepts_all_of(NonNegativeChecker) is True

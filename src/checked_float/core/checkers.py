"""
Checkers — Политики валидности float

Политика — stateless класс (экземпляры не создаются) с двумя операциями:
- check(value): чистый предикат, один тест классификации float
- assert_valid(value): верификация с диагностикой, активна только при
  включённой верификации (см. checked_float.config)

Стандартные политики:
- NumChecker: всё, кроме NaN (включая ±inf и ±0.0)
- FiniteChecker: только конечные значения (без NaN и ±inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Политика зависит только от текущих bits значения, не от истории
2. Подкласс политики принимает подмножество значений родителя
   (FiniteChecker ⊂ NumChecker), поэтому issubclass задаёт расширяющие конверсии
"""

import logging
import math
from typing import Any, ClassVar

from checked_float.config import verification_enabled
from checked_float.errors import FloatInvariantViolation

logger = logging.getLogger(__name__)


# =============================================================================
# БАЗОВАЯ ПОЛИТИКА
# =============================================================================


class FloatChecker:
    """
    Базовый контракт политики валидности.

    Пользовательская политика наследуется от FloatChecker (или от существующей
    политики, если её множество допустимых значений — подмножество родительского),
    задаёт violation_message и переопределяет check.

    Example:
        >>> class NonNegativeChecker(FiniteChecker):
        ...     violation_message = "unexpected negative, NaN or infinity"
        ...
        ...     @staticmethod
        ...     def check(value) -> bool:
        ...         return math.isfinite(value) and value >= 0.0
    """

    violation_message: ClassVar[str] = "illegal float value"

    def __init__(self) -> None:
        raise TypeError(f"{type(self).__name__} is stateless and cannot be instantiated")

    @staticmethod
    def check(value: Any) -> bool:
        raise NotImplementedError

    @classmethod
    def assert_valid(cls, value: Any) -> None:
        """
        Проверка значения с диагностикой.

        Args:
            value: Raw float (Python float или NumPy scalar)

        Raises:
            FloatInvariantViolation: если верификация включена и check(value) == False
        """
        if verification_enabled() and not cls.check(value):
            logger.debug(f"{cls.__name__} rejected {value!r}: {cls.violation_message}")
            raise FloatInvariantViolation(cls.violation_message, value=value, checker=cls)

    @classmethod
    def accepts_all_of(cls, other: type["FloatChecker"]) -> bool:
        """True если каждое значение, допустимое для other, допустимо и для cls."""
        return issubclass(other, cls)


# =============================================================================
# СТАНДАРТНЫЕ ПОЛИТИКИ
# =============================================================================


class NumChecker(FloatChecker):
    """Все значения, кроме NaN ("number" = не "not-a-number")."""

    violation_message: ClassVar[str] = "unexpected NaN"

    @staticmethod
    def check(value: Any) -> bool:
        return not math.isnan(value)


class FiniteChecker(NumChecker):
    """Все значения, кроме NaN и ±inf."""

    violation_message: ClassVar[str] = "unexpected NaN or infinity"

    @staticmethod
    def check(value: Any) -> bool:
        return math.isfinite(value)

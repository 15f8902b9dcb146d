"""
Errors — Иерархия исключений checked_float

Два вида ошибок:
- FloatInvariantViolation: нарушение инварианта политики в безопасной точке
  конструирования или после арифметической операции (ошибка программиста)
- IllegalFloatValue: явный отказ fallible-конструктора на границе
  (внешние данные, сужающие конверсии между политиками)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. FloatInvariantViolation возбуждается только при включённой верификации
2. IllegalFloatValue возбуждается всегда, независимо от настроек верификации
"""

from typing import Any


class CheckedFloatError(Exception):
    """Базовое исключение пакета checked_float."""


class FloatInvariantViolation(CheckedFloatError, AssertionError):
    """
    Нарушение инварианта политики валидности.

    Сообщение — диагностика политики ("unexpected NaN",
    "unexpected NaN or infinity"). Не предназначено для восстановления:
    код, ожидающий невалидные значения, должен использовать try_new/try_from.

    Attributes:
        value: Raw значение, не прошедшее проверку
        checker: Класс политики, которая отклонила значение
    """

    def __init__(self, message: str, value: Any = None, checker: type | None = None) -> None:
        super().__init__(message)
        self.value = value
        self.checker = checker


class IllegalFloatValue(CheckedFloatError, ValueError):
    """
    Отказ fallible-конструирования: значение не удовлетворяет политике.

    Attributes:
        value: Отклонённое raw значение
        checker: Класс политики, которая отклонила значение
    """

    def __init__(
        self,
        message: str = "illegal value",
        value: Any = None,
        checker: type | None = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.checker = checker

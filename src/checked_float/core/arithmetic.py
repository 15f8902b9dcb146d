"""
Arithmetic — Операторы и элементарные функции checked float

Каждая операция следует одному алгоритму:
1. Вычислить результат нативной IEEE-754 арифметикой на raw NumPy scalars
   (floating-point предупреждения подавлены)
2. Пропустить результат через checked-panicking конструктор

Нарушение политики на любом шаге возбуждает FloatInvariantViolation сразу
на этом шаге, а не после того, как NaN испортит сравнения или hash.
Fallible-вариантов арифметики нет: код, ожидающий невалидный результат,
проверяет операнды заранее или вычисляет на raw и использует try_new.

Поддерживаемые операнды: (checked, checked того же типа), (checked, raw),
(raw, checked). Checked float другого типа → NotImplemented (TypeError).
"""

from collections.abc import Callable
from typing import Any

import numpy as np

from checked_float.core.widths import FloatCategory


# =============================================================================
# ФАБРИКИ МЕТОДОВ
# =============================================================================


def _binary_operator(ufunc: np.ufunc) -> tuple[Callable, Callable]:
    """Прямой и отражённый (reflected) оператор на основе NumPy ufunc."""

    def forward(self, other):
        raw = self._raw_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        with np.errstate(all="ignore"):
            result = ufunc(self._value, raw)
        return self._checked_result(result)

    def reflected(self, other):
        raw = self._raw_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        with np.errstate(all="ignore"):
            result = ufunc(raw, self._value)
        return self._checked_result(result)

    return forward, reflected


def _unary_function(ufunc: np.ufunc, doc: str | None = None) -> Callable:
    def method(self):
        with np.errstate(all="ignore"):
            result = ufunc(self._value)
        return self._checked_result(result)

    method.__doc__ = doc
    return method


def _binary_function(ufunc: np.ufunc, doc: str | None = None) -> Callable:
    def method(self, other):
        raw = self._require_operand(other)
        with np.errstate(all="ignore"):
            result = ufunc(self._value, raw)
        return self._checked_result(result)

    method.__doc__ = doc
    return method


# =============================================================================
# ARITHMETIC MIXIN
# =============================================================================


class ArithmeticMixin:
    """
    Операторный слой CheckedFloat.

    Ожидает от класса: _value, _raw_operand(other), _checked_result(raw), width.
    """

    __slots__ = ()

    def _require_operand(self, other: Any) -> Any:
        raw = self._raw_operand(other)
        if raw is NotImplemented:
            raise TypeError(
                f"unsupported operand type for {type(self).__name__}: {type(other).__name__}"
            )
        return raw

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    __add__, __radd__ = _binary_operator(np.add)
    __sub__, __rsub__ = _binary_operator(np.subtract)
    __mul__, __rmul__ = _binary_operator(np.multiply)
    __truediv__, __rtruediv__ = _binary_operator(np.true_divide)
    __floordiv__, __rfloordiv__ = _binary_operator(np.floor_divide)
    # Python floor-modulo: знак результата совпадает со знаком делителя
    __mod__, __rmod__ = _binary_operator(np.remainder)

    def __divmod__(self, other):
        if self._raw_operand(other) is NotImplemented:
            return NotImplemented
        return self // other, self % other

    def __rdivmod__(self, other):
        if self._raw_operand(other) is NotImplemented:
            return NotImplemented
        return other // self, other % self

    def __pow__(self, other, modulo=None):
        if modulo is not None:
            return NotImplemented
        raw = self._raw_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        with np.errstate(all="ignore"):
            result = np.power(self._value, raw)
        return self._checked_result(result)

    def __rpow__(self, other, modulo=None):
        if modulo is not None:
            return NotImplemented
        raw = self._raw_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        with np.errstate(all="ignore"):
            result = np.power(raw, self._value)
        return self._checked_result(result)

    def __neg__(self):
        return self._checked_result(np.negative(self._value))

    def __pos__(self):
        return self

    def __abs__(self):
        return self._checked_result(np.abs(self._value))

    # -------------------------------------------------------------------------
    # NumPy ufunc protocol
    # -------------------------------------------------------------------------

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        """
        Вызов NumPy ufunc на checked scalars: вычисление на raw + проверка результата.

        Массивы, out= и методы кроме __call__ (reduce, accumulate, ...) не поддерживаются.
        """
        if method != "__call__" or "out" in kwargs:
            return NotImplemented
        raws = []
        for item in inputs:
            raw = self._raw_operand(item)
            if raw is NotImplemented:
                return NotImplemented
            raws.append(raw)
        with np.errstate(all="ignore"):
            result = ufunc(*raws, **kwargs)
        if isinstance(result, tuple):
            return tuple(self._ufunc_output(item) for item in result)
        return self._ufunc_output(result)

    def _ufunc_output(self, value):
        if isinstance(value, np.floating):
            return self._checked_result(value)
        if isinstance(value, np.generic):
            return value.item()
        return value

    # -------------------------------------------------------------------------
    # Округление
    # -------------------------------------------------------------------------

    floor = _unary_function(np.floor, "Наибольшее целое значение <= self.")
    ceil = _unary_function(np.ceil, "Наименьшее целое значение >= self.")
    trunc = _unary_function(np.trunc, "Целая часть (округление к нулю).")

    def round(self):
        """
        Округление к ближайшему целому, половины — от нуля.

        В отличие от builtin round() (banker's rounding, результат int),
        возвращает значение того же checked типа.

        Examples:
            >>> N64(2.5).round()
            N64(3.0)
            >>> N64(-2.5).round()
            N64(-3.0)
        """
        value = self._value
        truncated = np.trunc(value)
        with np.errstate(all="ignore"):
            if abs(value - truncated) >= 0.5:
                truncated = truncated + np.copysign(self.width.coerce(1.0), value)
        return self._checked_result(truncated)

    def fract(self):
        """Дробная часть: self - trunc(self)."""
        with np.errstate(all="ignore"):
            return self._checked_result(self._value - np.trunc(self._value))

    # -------------------------------------------------------------------------
    # Знак и модуль
    # -------------------------------------------------------------------------

    def abs(self):
        return abs(self)

    def signum(self):
        """1.0 для +0.0 и положительных значений, -1.0 для -0.0 и отрицательных."""
        one = self.width.coerce(1.0)
        if np.isnan(self._value):
            return self._checked_result(self._value)
        return self._checked_result(np.copysign(one, self._value))

    copysign = _binary_function(np.copysign, "Модуль self со знаком other.")

    def abs_sub(self, other):
        """
        Положительная разность: self - other, если self > other, иначе +0.0.

        NaN в raw операнде даёт NaN (и нарушение политики).
        """
        raw = self._require_operand(other)
        if np.isnan(raw):
            return self._checked_result(raw)
        with np.errstate(all="ignore"):
            if self._value > raw:
                return self._checked_result(self._value - raw)
        return self._checked_result(self.width.coerce(0.0))

    # -------------------------------------------------------------------------
    # Степени, корни, экспоненты, логарифмы
    # -------------------------------------------------------------------------

    def mul_add(self, a, b):
        """self * a + b (без fused multiply-add: два округления)."""
        raw_a = self._require_operand(a)
        raw_b = self._require_operand(b)
        with np.errstate(all="ignore"):
            return self._checked_result(self._value * raw_a + raw_b)

    def recip(self):
        """1 / self."""
        with np.errstate(all="ignore"):
            return self._checked_result(self.width.coerce(1.0) / self._value)

    def powi(self, n: int):
        """Возведение в целую степень."""
        if not isinstance(n, (int, np.integer)):
            raise TypeError(f"powi expects an integer exponent, got {type(n).__name__}")
        with np.errstate(all="ignore"):
            return self._checked_result(np.power(self._value, self.width.coerce(n)))

    powf = _binary_function(np.power, "Возведение в вещественную степень.")
    sqrt = _unary_function(np.sqrt, "Квадратный корень (отрицательный аргумент → NaN → нарушение).")
    cbrt = _unary_function(np.cbrt, "Кубический корень.")
    exp = _unary_function(np.exp)
    exp2 = _unary_function(np.exp2)
    expm1 = _unary_function(np.expm1, "exp(self) - 1, точно для малых self.")
    log1p = _unary_function(np.log1p, "log(1 + self), точно для малых self.")
    log2 = _unary_function(np.log2)
    log10 = _unary_function(np.log10)

    def log(self, base=None):
        """
        Логарифм: натуральный при base=None, иначе log(self) / log(base).

        log(0.0) = -inf (допустимо для NumChecker, нарушение для FiniteChecker).
        """
        with np.errstate(all="ignore"):
            if base is None:
                return self._checked_result(np.log(self._value))
            raw_base = self._require_operand(base)
            return self._checked_result(np.log(self._value) / np.log(raw_base))

    hypot = _binary_function(np.hypot, "sqrt(self**2 + other**2) без промежуточного переполнения.")
    fmod = _binary_function(np.fmod, "Остаток с усечением (знак как у self), в отличие от %.")
    max = _binary_function(np.fmax, "Максимум из self и other.")
    min = _binary_function(np.fmin, "Минимум из self и other.")

    # -------------------------------------------------------------------------
    # Тригонометрия
    # -------------------------------------------------------------------------

    sin = _unary_function(np.sin)
    cos = _unary_function(np.cos)
    tan = _unary_function(np.tan)
    asin = _unary_function(np.arcsin)
    acos = _unary_function(np.arccos)
    atan = _unary_function(np.arctan)
    atan2 = _binary_function(np.arctan2, "Арктангенс self / other с учётом квадранта.")
    sinh = _unary_function(np.sinh)
    cosh = _unary_function(np.cosh)
    tanh = _unary_function(np.tanh)
    asinh = _unary_function(np.arcsinh)
    acosh = _unary_function(np.arccosh)
    atanh = _unary_function(np.arctanh)
    degrees = _unary_function(np.degrees, "Радианы → градусы.")
    radians = _unary_function(np.radians, "Градусы → радианы.")

    def sin_cos(self):
        return self.sin(), self.cos()

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    def is_nan(self) -> bool:
        return bool(np.isnan(self._value))

    def is_infinite(self) -> bool:
        return bool(np.isinf(self._value))

    def is_finite(self) -> bool:
        return bool(np.isfinite(self._value))

    def is_normal(self) -> bool:
        return self.classify() is FloatCategory.NORMAL

    def classify(self) -> FloatCategory:
        return self.width.classify(self._value)

    def is_sign_positive(self) -> bool:
        return not bool(np.signbit(self._value))

    def is_sign_negative(self) -> bool:
        return bool(np.signbit(self._value))

    def is_positive(self) -> bool:
        """Знак положительный, включая +0.0 и +inf."""
        return self.is_sign_positive()

    def is_negative(self) -> bool:
        """Знак отрицательный, включая -0.0 и -inf."""
        return self.is_sign_negative()

    def integer_decode(self) -> tuple[int, int, int]:
        """(mantissa, exponent, sign), где self == sign * mantissa * 2**exponent."""
        return self.width.integer_decode(self._value)

"""
Floats — Стандартные checked float типы

| Тип | Разрядность | Политика |
|-----|-------------|----------|
| N32 | f32 | NumChecker (без NaN) |
| N64 | f64 | NumChecker (без NaN) |
| R32 | f32 | FiniteChecker (без NaN и ±inf) |
| R64 | f64 | FiniteChecker (без NaN и ±inf) |

Функции n32/n64/r32/r64 — короткая запись checked-panicking конструктора.
"""

from typing import Any, ClassVar

from checked_float.core.checkers import FiniteChecker, FloatChecker, NumChecker
from checked_float.core.value import CheckedFloat
from checked_float.core.widths import FLOAT32, FLOAT64, FloatWidth


class N32(CheckedFloat):
    """32-битный float, не допускающий NaN."""

    __slots__ = ()
    width: ClassVar[FloatWidth] = FLOAT32
    checker: ClassVar[type[FloatChecker]] = NumChecker


class N64(CheckedFloat):
    """64-битный float, не допускающий NaN."""

    __slots__ = ()
    width: ClassVar[FloatWidth] = FLOAT64
    checker: ClassVar[type[FloatChecker]] = NumChecker


class R32(CheckedFloat):
    """32-битный float, не допускающий NaN и ±inf."""

    __slots__ = ()
    width: ClassVar[FloatWidth] = FLOAT32
    checker: ClassVar[type[FloatChecker]] = FiniteChecker


class R64(CheckedFloat):
    """64-битный float, не допускающий NaN и ±inf."""

    __slots__ = ()
    width: ClassVar[FloatWidth] = FLOAT64
    checker: ClassVar[type[FloatChecker]] = FiniteChecker


def n32(value: Any) -> N32:
    return N32(value)


def n64(value: Any) -> N64:
    return N64(value)


def r32(value: Any) -> R32:
    return R32(value)


def r64(value: Any) -> R64:
    return R64(value)

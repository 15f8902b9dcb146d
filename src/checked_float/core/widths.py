"""
Widths — Описание разрядности IEEE-754 float (32/64 бит)

Единая generic-реализация для обеих разрядностей, параметризованная
NumPy dtype: приведение значения, reinterpret в unsigned integer,
классификация, integer_decode, предельные значения.

Арифметика выполняется на NumPy scalars с подавленными floating-point
предупреждениями: результаты соответствуют IEEE-754 (x/0.0 → ±inf, 0/0 → nan),
а не поведению Python float (ZeroDivisionError).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

import numpy as np


# =============================================================================
# ENUMS
# =============================================================================


class FloatCategory(str, Enum):
    """Категория float значения"""

    NAN = "nan"
    INFINITE = "infinite"
    ZERO = "zero"
    SUBNORMAL = "subnormal"
    NORMAL = "normal"


# =============================================================================
# FLOAT WIDTH
# =============================================================================


@dataclass(frozen=True)
class FloatWidth:
    """
    Описание разрядности float.

    Attributes:
        name: Короткое имя ("f32", "f64")
        bits: Общее число бит
        dtype: NumPy float dtype
        uint: NumPy unsigned integer dtype той же ширины
        mantissa_bits: Число явных бит мантиссы
        exponent_bits: Число бит экспоненты
    """

    name: str
    bits: int
    dtype: type
    uint: type
    mantissa_bits: int
    exponent_bits: int

    @property
    def exponent_bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def finfo(self) -> np.finfo:
        return np.finfo(self.dtype)

    def coerce(self, value: Any) -> np.floating:
        """
        Приведение к dtype разрядности (с округлением для f32).

        Переполнение при сужении даёт ±inf, а не исключение.

        Raises:
            OverflowError: если Python int не представим даже как float64
            TypeError / ValueError: если значение не числовое
        """
        if isinstance(value, self.dtype):
            return value
        if isinstance(value, int):
            value = float(value)
        with np.errstate(all="ignore"):
            return self.dtype(value)

    def to_bits(self, value: Any) -> int:
        """Reinterpret значения как unsigned integer той же ширины."""
        return int(np.asarray(self.coerce(value), dtype=self.dtype).view(self.uint))

    def from_bits(self, bits: int) -> np.floating:
        """Reinterpret unsigned integer как float."""
        return np.asarray(bits, dtype=self.uint).view(self.dtype)[()]

    def canonical_bits(self, value: Any) -> int:
        """Bits значения, где +0.0 и -0.0 отображаются в 0."""
        if value == 0.0:
            return 0
        return self.to_bits(value)

    def classify(self, value: Any) -> FloatCategory:
        """Классификация значения по категориям IEEE-754."""
        if np.isnan(value):
            return FloatCategory.NAN
        if np.isinf(value):
            return FloatCategory.INFINITE
        if value == 0.0:
            return FloatCategory.ZERO
        if abs(value) < self.finfo.tiny:
            return FloatCategory.SUBNORMAL
        return FloatCategory.NORMAL

    def integer_decode(self, value: Any) -> tuple[int, int, int]:
        """
        Разложение на (mantissa, exponent, sign): value == sign * mantissa * 2**exponent.

        Examples:
            >>> FLOAT64.integer_decode(1.0)
            (4503599627370496, -52, 1)
        """
        bits = self.to_bits(value)
        sign = -1 if bits >> (self.bits - 1) else 1
        exponent = (bits >> self.mantissa_bits) & ((1 << self.exponent_bits) - 1)
        fraction = bits & ((1 << self.mantissa_bits) - 1)
        if exponent == 0:
            mantissa = fraction << 1
        else:
            mantissa = fraction | (1 << self.mantissa_bits)
        exponent -= self.exponent_bias + self.mantissa_bits
        return mantissa, exponent, sign

    def __repr__(self) -> str:
        return f"FloatWidth({self.name})"


FLOAT32: Final[FloatWidth] = FloatWidth(
    name="f32",
    bits=32,
    dtype=np.float32,
    uint=np.uint32,
    mantissa_bits=23,
    exponent_bits=8,
)

FLOAT64: Final[FloatWidth] = FloatWidth(
    name="f64",
    bits=64,
    dtype=np.float64,
    uint=np.uint64,
    mantissa_bits=52,
    exponent_bits=11,
)

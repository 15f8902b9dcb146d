"""
Tolerance — Приближённые сравнения checked float

Сравнения с учётом машинной точности поверх точного total order
CheckedFloat: абсолютная и относительная толерантность, расстояние в ULP.

Аргументы — checked float одного типа или raw числа; вычисления выполняются
на raw значениях, результаты — bool/int (без конструирования checked значений).
"""

import math
from typing import Any, Final

from checked_float.core.value import CheckedFloat

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность по умолчанию
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность по умолчанию
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Допустимое расстояние в ULP по умолчанию
MAX_ULPS_DEFAULT: Final[int] = 4


def _raw(value: Any) -> float:
    if isinstance(value, CheckedFloat):
        return value.raw()
    return float(value)


def _check_same_type(a: Any, b: Any) -> None:
    if isinstance(a, CheckedFloat) and isinstance(b, CheckedFloat) and type(a) is not type(b):
        raise TypeError(f"cannot compare {type(a).__name__} with {type(b).__name__}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def abs_diff_eq(a: Any, b: Any, epsilon: Any = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Равенство с абсолютной толерантностью: |a - b| <= epsilon.

    Бесконечности равны только самим себе.

    Examples:
        >>> abs_diff_eq(N64(1.0), N64(1.0 + 1e-13))
        True
    """
    _check_same_type(a, b)
    x, y = _raw(a), _raw(b)
    if x == y:
        return True
    return abs(x - y) <= _raw(epsilon)


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение с относительной и абсолютной толерантностью.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(N64(1.0), N64(1.0 + 1e-10))
        True
        >>> is_close(N64(1.0), N64(1.1))
        False
    """
    _check_same_type(a, b)
    return math.isclose(_raw(a), _raw(b), rel_tol=rel_tol, abs_tol=abs_tol)


def ulps_distance(a: CheckedFloat, b: CheckedFloat) -> int:
    """
    Расстояние между значениями в ULP разрядности типа.

    +0.0 и -0.0 находятся на расстоянии 0.

    Raises:
        TypeError: если a и b разных checked типов
    """
    _check_same_type(a, b)
    width = a.width
    sign_bit = 1 << (width.bits - 1)

    def ordinal(value: CheckedFloat) -> int:
        bits = width.canonical_bits(value.raw_scalar())
        if bits & sign_bit:
            return -(bits & ~sign_bit)
        return bits

    return abs(ordinal(a) - ordinal(b))


def ulps_eq(a: CheckedFloat, b: CheckedFloat, max_ulps: int = MAX_ULPS_DEFAULT) -> bool:
    """Равенство с точностью до max_ulps шагов разрядности."""
    if a == b:
        return True
    if a.is_infinite() or b.is_infinite():
        return False
    return ulps_distance(a, b) <= max_ulps


def is_zero(value: Any, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(_raw(value)) <= tol


def compare_with_tolerance(a: Any, b: Any, tol: float = EPS_FLOAT_COMPARE_ABS) -> int:
    """
    Трёхзначное сравнение с толерантностью.

    Returns:
        -1 если a < b, 0 если |a - b| <= tol, +1 если a > b

    Examples:
        >>> compare_with_tolerance(N64(1.0), N64(2.0))
        -1
        >>> compare_with_tolerance(N64(1.0), N64(1.0 + 1e-13))
        0
    """
    _check_same_type(a, b)
    x, y = _raw(a), _raw(b)
    if x == y:
        return 0
    diff = x - y
    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1

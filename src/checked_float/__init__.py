"""
checked_float — float с проверяемой политикой валидности

Обёртка над IEEE-754 float (32/64 бит), которая при каждом конструировании
и после каждой арифметической операции проверяет политику валидности
(NumChecker: без NaN; FiniteChecker: без NaN и ±inf). Валидные значения
имеют total order, рефлексивное равенство и hash, согласованный с равенством.

Usage:
    >>> from checked_float import N64, R64
    >>> N64(5.0) / 0.0
    N64(inf)
    >>> R64(5.0) / 0.0  # doctest: +SKIP
    Traceback (most recent call last):
        ...
    FloatInvariantViolation: unexpected NaN or infinity
"""

from checked_float.config import (
    VerificationSettings,
    get_settings,
    reload_settings,
    set_verification,
    verification,
    verification_enabled,
)
from checked_float.core import (
    FLOAT32,
    FLOAT64,
    FLOAT_CONSTANTS,
    N32,
    N64,
    R32,
    R64,
    CheckedFloat,
    FiniteChecker,
    FloatCategory,
    FloatChecker,
    FloatWidth,
    NumChecker,
    n32,
    n64,
    r32,
    r64,
)
from checked_float.errors import CheckedFloatError, FloatInvariantViolation, IllegalFloatValue

__all__ = [
    # Config
    "VerificationSettings",
    "get_settings",
    "reload_settings",
    "set_verification",
    "verification",
    "verification_enabled",
    # Errors
    "CheckedFloatError",
    "FloatInvariantViolation",
    "IllegalFloatValue",
    # Checkers
    "FiniteChecker",
    "FloatChecker",
    "NumChecker",
    # Widths
    "FLOAT32",
    "FLOAT64",
    "FloatCategory",
    "FloatWidth",
    # Value type
    "FLOAT_CONSTANTS",
    "CheckedFloat",
    "N32",
    "N64",
    "R32",
    "R64",
    "n32",
    "n64",
    "r32",
    "r64",
]

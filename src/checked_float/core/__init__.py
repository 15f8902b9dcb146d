"""
Core: политики валидности, разрядности, checked value type и операторный слой.
"""

# Checkers
from checked_float.core.checkers import FiniteChecker, FloatChecker, NumChecker

# Widths
from checked_float.core.widths import FLOAT32, FLOAT64, FloatCategory, FloatWidth

# Value type
from checked_float.core.value import FLOAT_CONSTANTS, CheckedFloat

# Standard types
from checked_float.core.floats import N32, N64, R32, R64, n32, n64, r32, r64

__all__ = [
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
    # Standard types
    "N32",
    "N64",
    "R32",
    "R64",
    "n32",
    "n64",
    "r32",
    "r64",
]

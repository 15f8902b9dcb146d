"""
Math helpers для checked float.

Приближённые сравнения поверх точного total order.
"""

from checked_float.math.tolerance import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MAX_ULPS_DEFAULT,
    abs_diff_eq,
    compare_with_tolerance,
    is_close,
    is_zero,
    ulps_distance,
    ulps_eq,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "MAX_ULPS_DEFAULT",
    # Comparisons
    "abs_diff_eq",
    "compare_with_tolerance",
    "is_close",
    "is_zero",
    "ulps_distance",
    "ulps_eq",
]

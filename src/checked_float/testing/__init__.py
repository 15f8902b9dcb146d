"""
Testing helpers: Hypothesis strategies и детерминированный shrinker.

Требует установленного hypothesis (extra "hypothesis").
"""

from checked_float.testing.strategies import (
    BinarySearch,
    checked_floats,
    register_type_strategies,
)

__all__ = [
    "BinarySearch",
    "checked_floats",
    "register_type_strategies",
]

"""
Core math modules

Арифметика над натуральными числами, расширенными точкой на бесконечности.
"""

from src.core.math.extended_arithmetic import (
    UNBOUNDED,
    UNBOUNDED_TOKEN,
    Bound,
    Unbounded,
    bound_add,
    bound_le,
    bound_max,
    bound_mul,
    bound_to_str,
    is_finite,
    is_finite_zero,
    is_unbounded,
    parse_bound,
)

__all__ = [
    # Sentinel
    "UNBOUNDED",
    "UNBOUNDED_TOKEN",
    "Unbounded",
    "Bound",
    # Predicates
    "is_finite",
    "is_finite_zero",
    "is_unbounded",
    # Arithmetic
    "bound_add",
    "bound_le",
    "bound_max",
    "bound_mul",
    # Rendering / parsing
    "bound_to_str",
    "parse_bound",
]

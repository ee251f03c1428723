"""
Core math modules для exactlinalg

Точная скалярная арифметика и квадратный корень методом Герона.
"""

# Numerical Safeguards
from exactlinalg.math.numerical_safeguards import (
    # Exact context and constants
    DECIMAL_ONE,
    DECIMAL_ZERO,
    EXACT_CONTEXT,
    # Scalar domains
    DECIMAL_DOMAIN,
    INTEGER_DOMAIN,
    ScalarDomain,
    # Exact operations
    exact_abs,
    exact_add,
    exact_multiply,
    exact_negate,
    exact_subtract,
    # Validation
    is_finite,
    validate_non_negative,
)

# Square Root
from exactlinalg.math.square_root import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING_MODE,
    DEFAULT_SCALE,
    DEFAULT_SQUARE_ROOT_CALCULATOR,
    SQRT_GUARD_DIGITS,
    InexactRoundingError,
    NotPerfectSquareError,
    RoundingMode,
    ScientificNotation,
    SquareRootCalculator,
    is_perfect_square,
    scientific_notation_for_sqrt,
    seed_value,
    sqrt,
    sqrt_of_perfect_square,
    square_root_calculator,
)

__all__ = [
    # Numerical Safeguards — Constants
    "DECIMAL_ONE",
    "DECIMAL_ZERO",
    "EXACT_CONTEXT",
    # Numerical Safeguards — Scalar domains
    "DECIMAL_DOMAIN",
    "INTEGER_DOMAIN",
    "ScalarDomain",
    # Numerical Safeguards — Exact operations
    "exact_abs",
    "exact_add",
    "exact_multiply",
    "exact_negate",
    "exact_subtract",
    # Numerical Safeguards — Validation
    "is_finite",
    "validate_non_negative",
    # Square Root — Constants
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING_MODE",
    "DEFAULT_SCALE",
    "DEFAULT_SQUARE_ROOT_CALCULATOR",
    "SQRT_GUARD_DIGITS",
    # Square Root — Exceptions
    "InexactRoundingError",
    "NotPerfectSquareError",
    # Square Root — Types
    "RoundingMode",
    "ScientificNotation",
    "SquareRootCalculator",
    # Square Root — Functions
    "is_perfect_square",
    "scientific_notation_for_sqrt",
    "seed_value",
    "sqrt",
    "sqrt_of_perfect_square",
    "square_root_calculator",
]

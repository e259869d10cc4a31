"""
Core math modules для Matrix Toolkit

Численные примитивы: округление до фиксированной сетки и float-проверки.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Rounding constants
    MATRIX_CLOSE_ABS_TOL,
    ROUND_DECIMALS,
    ROUND_SCALE,
    # Rounding
    round_half_away,
    round_to_precision,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    is_close,
)

__all__ = [
    # Numerical Safeguards: Rounding constants
    "MATRIX_CLOSE_ABS_TOL",
    "ROUND_DECIMALS",
    "ROUND_SCALE",
    # Numerical Safeguards: Rounding
    "round_half_away",
    "round_to_precision",
    # Numerical Safeguards: NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards: Epsilon comparisons
    "is_close",
]

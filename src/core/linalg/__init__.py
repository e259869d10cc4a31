"""
Linear algebra engine для Matrix Toolkit

Арифметика, структурные предикаты и спецоперации над Matrix.
Все операции возвращают новые матрицы и не мутируют операнды.
"""

# Arithmetic
from src.core.linalg.arithmetic import (
    add,
    multiply,
    negate,
    scale,
    subtract,
)

# Special operations
from src.core.linalg.special_operations import (
    adjoint,
    cofactor_matrix,
    determinant,
    inverse,
    minor_matrix,
    trace,
    transpose,
)

# Properties
from src.core.linalg.properties import (
    is_diagonal,
    is_identity,
    is_scalar,
    is_singular,
    is_skew_symmetric,
    is_square,
    is_symmetric,
    is_zero,
)

__all__ = [
    # Arithmetic
    "add",
    "multiply",
    "negate",
    "scale",
    "subtract",
    # Special operations
    "adjoint",
    "cofactor_matrix",
    "determinant",
    "inverse",
    "minor_matrix",
    "trace",
    "transpose",
    # Properties
    "is_diagonal",
    "is_identity",
    "is_scalar",
    "is_singular",
    "is_skew_symmetric",
    "is_square",
    "is_symmetric",
    "is_zero",
]

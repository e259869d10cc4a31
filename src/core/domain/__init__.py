"""
Domain models and value objects.

Contains the Matrix value type, its error taxonomy and text formatting.
"""

from src.core.domain.errors import (
    DimensionMismatchError,
    InconsistentColumnSizeError,
    IndexOutOfBoundsError,
    MatrixError,
    MatrixErrorKind,
    NonSquareMatrixError,
    SingularMatrixError,
    ZeroDimensionError,
)
from src.core.domain.formatting import (
    DEFAULT_FORMAT_CONFIG,
    MatrixFormatConfig,
    format_matrix,
    format_value,
)
from src.core.domain.matrix import Matrix

__all__ = [
    # Matrix model
    "Matrix",
    # Errors
    "MatrixError",
    "MatrixErrorKind",
    "ZeroDimensionError",
    "InconsistentColumnSizeError",
    "DimensionMismatchError",
    "NonSquareMatrixError",
    "SingularMatrixError",
    "IndexOutOfBoundsError",
    # Formatting
    "DEFAULT_FORMAT_CONFIG",
    "MatrixFormatConfig",
    "format_matrix",
    "format_value",
]

"""
Messages — пользовательские сообщения об ошибках операций

Ядро не печатает и не формирует UI; эти тексты — значения по умолчанию для
внешнего интерактивного слоя, который может их заменить.

Ключи — значения Operation (str) и MatrixErrorKind.
"""

from enum import Enum
from typing import Final

from src.core.domain.errors import MatrixErrorKind

# =============================================================================
# СООБЩЕНИЯ ПО ОПЕРАЦИЯМ
# =============================================================================

OPERATION_ERROR_MESSAGES: Final[dict[tuple[str, MatrixErrorKind], str]] = {
    ("add", MatrixErrorKind.DIMENSION_MISMATCH): "Dimensions of the two matrices do not match",
    ("subtract", MatrixErrorKind.DIMENSION_MISMATCH): "Dimensions of the two matrices do not match",
    ("multiply", MatrixErrorKind.DIMENSION_MISMATCH): (
        "Number of columns of the first matrix is not equal to "
        "the number of rows of the second matrix"
    ),
    ("trace", MatrixErrorKind.NON_SQUARE_MATRIX): "Only square matrices have traces",
    ("determinant", MatrixErrorKind.NON_SQUARE_MATRIX): "Only square matrices have determinants",
    ("adjoint", MatrixErrorKind.NON_SQUARE_MATRIX): "Only square matrices have adjoints",
    ("inverse", MatrixErrorKind.NON_SQUARE_MATRIX): "Only square matrices have inverses",
    ("inverse", MatrixErrorKind.SINGULAR_MATRIX): "Singular matrices do not have inverse",
}

# Запасные сообщения, если для пары (операция, вид) нет своего текста
DEFAULT_ERROR_MESSAGES: Final[dict[MatrixErrorKind, str]] = {
    MatrixErrorKind.ZERO_DIMENSION: "Matrix dimensions should be whole numbers greater than 0",
    MatrixErrorKind.INCONSISTENT_COLUMN_SIZE: "Every row should have the same number of elements",
    MatrixErrorKind.DIMENSION_MISMATCH: "Dimensions of the matrices do not match",
    MatrixErrorKind.NON_SQUARE_MATRIX: "Only square matrices support this operation",
    MatrixErrorKind.SINGULAR_MATRIX: "Singular matrices do not have inverse",
    MatrixErrorKind.INDEX_OUT_OF_BOUNDS: "Index is outside the matrix",
}


def error_message(operation: str, kind: MatrixErrorKind) -> str:
    """
    Текст ошибки для пользователя.

    Args:
        operation: Имя операции (значение Operation, например 'multiply')
        kind: Вид ошибки

    Returns:
        Сообщение для пары (operation, kind) или общее сообщение для kind
    """
    name = operation.value if isinstance(operation, Enum) else operation
    specific = OPERATION_ERROR_MESSAGES.get((name, kind))
    if specific is not None:
        return specific
    return DEFAULT_ERROR_MESSAGES[kind]

"""
Matrix Errors — таксономия ошибок матричного ядра

Все ошибки детерминированы (зависят только от формы и значений входа),
поэтому ядро никогда не повторяет операцию. Внешний слой (CLI/UI) отвечает
за перевод ошибок в сообщения пользователю — для этого каждая ошибка
несёт машиночитаемый MatrixErrorKind.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class MatrixErrorKind(str, Enum):
    """Вид ошибки матричной операции"""

    ZERO_DIMENSION = "ZERO_DIMENSION"
    INCONSISTENT_COLUMN_SIZE = "INCONSISTENT_COLUMN_SIZE"
    DIMENSION_MISMATCH = "DIMENSION_MISMATCH"
    NON_SQUARE_MATRIX = "NON_SQUARE_MATRIX"
    SINGULAR_MATRIX = "SINGULAR_MATRIX"
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(Exception):
    """
    Базовая ошибка матричного ядра.

    Атрибут kind позволяет обрабатывать ошибки по виду без isinstance-цепочек.
    """

    kind: MatrixErrorKind


class ZeroDimensionError(MatrixError):
    """Запрошена форма с нулевым числом строк или столбцов."""

    kind = MatrixErrorKind.ZERO_DIMENSION


class InconsistentColumnSizeError(MatrixError):
    """Строки переданной сетки имеют разную длину (сетка не прямоугольная)."""

    kind = MatrixErrorKind.INCONSISTENT_COLUMN_SIZE


class DimensionMismatchError(MatrixError):
    """Формы операндов (или заменяющих данных) не согласованы."""

    kind = MatrixErrorKind.DIMENSION_MISMATCH


class NonSquareMatrixError(MatrixError):
    """Операция определена только для квадратных матриц."""

    kind = MatrixErrorKind.NON_SQUARE_MATRIX


class SingularMatrixError(MatrixError):
    """Обратная матрица запрошена для матрицы с определителем ровно 0.0."""

    kind = MatrixErrorKind.SINGULAR_MATRIX


class IndexOutOfBoundsError(MatrixError):
    """Индекс строки/столбца выходит за текущие размеры матрицы."""

    kind = MatrixErrorKind.INDEX_OUT_OF_BOUNDS

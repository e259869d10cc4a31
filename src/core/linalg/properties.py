"""
Properties — структурные предикаты матриц

Все предикаты чистые и никогда не бросают исключений: для неквадратной
матрицы предикаты, определённые только для квадратных, возвращают False.

Сравнения точные (по уже сохранённым значениям), без толерантности.
"""

from src.core.domain.errors import NonSquareMatrixError
from src.core.domain.matrix import Matrix
from src.core.linalg.arithmetic import negate
from src.core.linalg.special_operations import determinant, transpose


def is_square(matrix: Matrix) -> bool:
    """rows == columns."""
    return matrix.rows == matrix.columns


def is_symmetric(matrix: Matrix) -> bool:
    """Квадратная и равна своей транспонированной."""
    if not is_square(matrix):
        return False
    return matrix == transpose(matrix)


def is_skew_symmetric(matrix: Matrix) -> bool:
    """Квадратная и равна минус своей транспонированной."""
    if not is_square(matrix):
        return False
    return matrix == negate(transpose(matrix))


def is_diagonal(matrix: Matrix) -> bool:
    """Квадратная, все внедиагональные элементы ровно 0."""
    if not is_square(matrix):
        return False
    return all(
        value == 0.0
        for i, row in enumerate(matrix.data)
        for j, value in enumerate(row)
        if i != j
    )


def is_scalar(matrix: Matrix) -> bool:
    """
    Скалярная матрица: квадратная, непустая, все диагональные элементы равны
    a[0][0], все внедиагональные — 0.
    """
    if not is_square(matrix) or matrix.rows == 0:
        return False
    first = matrix.data[0][0]
    return all(
        value == (first if i == j else 0.0)
        for i, row in enumerate(matrix.data)
        for j, value in enumerate(row)
    )


def is_identity(matrix: Matrix) -> bool:
    """Скалярная матрица с единицей на диагонали."""
    return is_scalar(matrix) and matrix.data[0][0] == 1.0


def is_zero(matrix: Matrix) -> bool:
    """Все элементы ровно 0 (любая форма)."""
    return all(value == 0.0 for row in matrix.data for value in row)


def is_singular(matrix: Matrix) -> bool:
    """
    Вырожденная матрица: определитель вычислим и равен ровно 0.0.

    Неквадратные матрицы не считаются вырожденными.
    """
    try:
        return determinant(matrix) == 0.0
    except NonSquareMatrixError:
        return False

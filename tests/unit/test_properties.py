"""
Тесты для структурных предикатов

Предикаты никогда не бросают исключений: неквадратная матрица просто
не обладает свойствами, определёнными для квадратных.
"""

import pytest

from src.core.domain import Matrix
from src.core.linalg import (
    is_diagonal,
    is_identity,
    is_scalar,
    is_singular,
    is_skew_symmetric,
    is_square,
    is_symmetric,
    is_zero,
)

GENERIC_3X3 = [
    [2.1, 9.7, 3.5],
    [8.4, 1.6, 7.2],
    [5.9, 12.3, 0.8],
]

DIAGONAL_4X4 = [
    [1.5, 0.0, 0.0, 0.0],
    [0.0, 3.2, 0.0, 0.0],
    [0.0, 0.0, 6.7, 0.0],
    [0.0, 0.0, 0.0, 9.1],
]

SCALAR_3X3 = [
    [2.0, 0.0, 0.0],
    [0.0, 2.0, 0.0],
    [0.0, 0.0, 2.0],
]


class TestSquare:
    def test_square_shapes(self) -> None:
        for size in (1, 2, 3, 5):
            assert is_square(Matrix.new_zero(size, size))

    def test_rectangular(self) -> None:
        assert not is_square(Matrix.new_zero(2, 3))


class TestSymmetry:
    """Тесты симметрии и кососимметрии"""

    def test_symmetric(self) -> None:
        matrix = Matrix.new_from_rows(
            [
                [9.5, 2.3, 3.5],
                [2.3, -1.0, -8.5],
                [3.5, -8.5, 0.0],
            ]
        )
        assert is_symmetric(matrix)
        assert not is_skew_symmetric(matrix)

    def test_skew_symmetric(self) -> None:
        matrix = Matrix.new_from_rows(
            [
                [0.0, 2.3, 3.5],
                [-2.3, 0.0, -8.5],
                [-3.5, 8.5, 0.0],
            ]
        )
        assert is_skew_symmetric(matrix)
        assert not is_symmetric(matrix)

    def test_generic_is_neither(self) -> None:
        matrix = Matrix.new_from_rows(GENERIC_3X3)
        assert not is_symmetric(matrix)
        assert not is_skew_symmetric(matrix)

    def test_non_square_is_neither(self) -> None:
        matrix = Matrix.new_zero(2, 3)
        assert not is_symmetric(matrix)
        assert not is_skew_symmetric(matrix)

    def test_zero_matrix_is_both(self) -> None:
        matrix = Matrix.new_zero(3, 3)
        assert is_symmetric(matrix)
        assert is_skew_symmetric(matrix)


class TestDiagonalFamily:
    """Тесты diagonal → scalar → identity"""

    def test_diagonal(self) -> None:
        assert is_diagonal(Matrix.new_from_rows(DIAGONAL_4X4))
        assert not is_diagonal(Matrix.new_from_rows(GENERIC_3X3))

    def test_diagonal_is_not_scalar(self) -> None:
        assert not is_scalar(Matrix.new_from_rows(DIAGONAL_4X4))

    def test_scalar(self) -> None:
        assert is_scalar(Matrix.new_from_rows(SCALAR_3X3))
        assert is_diagonal(Matrix.new_from_rows(SCALAR_3X3))

    def test_scalar_is_not_identity(self) -> None:
        assert not is_identity(Matrix.new_from_rows(SCALAR_3X3))

    def test_identity(self) -> None:
        matrix = Matrix.new_identity(4)
        assert is_identity(matrix)
        assert is_scalar(matrix)
        assert is_diagonal(matrix)

    def test_non_square(self) -> None:
        matrix = Matrix.new_from_rows([[1.0, 0.0, 0.0]])
        assert not is_diagonal(matrix)
        assert not is_scalar(matrix)
        assert not is_identity(matrix)

    def test_empty_matrix_is_not_scalar(self) -> None:
        """0×0 — квадратная, но не скалярная и не единичная"""
        matrix = Matrix.new_from_rows([])
        assert is_square(matrix)
        assert not is_scalar(matrix)
        assert not is_identity(matrix)


class TestZeroAndSingular:
    """Тесты is_zero / is_singular"""

    def test_zero(self) -> None:
        assert is_zero(Matrix.new_from_rows([[0.0, 0.0]]))
        assert is_zero(Matrix.new_zero(3, 2))
        assert not is_zero(Matrix.new_from_rows([[7.2, 13.8, 5.1], [9.3, 2.7, 6.4]]))

    def test_empty_matrix_is_zero(self) -> None:
        assert is_zero(Matrix.new_from_rows([]))

    def test_singular(self) -> None:
        assert is_singular(Matrix.new_from_rows([[1.0, 2.0], [2.0, 4.0]]))
        assert is_singular(Matrix.new_zero(3, 3))

    def test_invertible_is_not_singular(self) -> None:
        assert not is_singular(Matrix.new_from_rows(GENERIC_3X3))
        assert not is_singular(Matrix.new_identity(2))

    def test_non_square_is_not_singular(self) -> None:
        """Неквадратная матрица: определитель не определён → False"""
        assert not is_singular(Matrix.new_zero(2, 3))

    def test_empty_matrix_is_not_singular(self) -> None:
        assert not is_singular(Matrix.new_from_rows([]))


@pytest.mark.parametrize(
    "method",
    [
        "is_square",
        "is_symmetric",
        "is_skew_symmetric",
        "is_diagonal",
        "is_scalar",
        "is_identity",
        "is_zero",
        "is_singular",
    ],
)
def test_methods_match_functions(method: str) -> None:
    """Методы Matrix делегируют в одноимённые функции"""
    import src.core.linalg as linalg

    for grid in (GENERIC_3X3, DIAGONAL_4X4, SCALAR_3X3, [[1.0, 2.0, 3.0]]):
        matrix = Matrix.new_from_rows(grid)
        assert getattr(matrix, method)() == getattr(linalg, method)(matrix)

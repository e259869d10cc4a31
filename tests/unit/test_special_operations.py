"""
Тесты для спецопераций

Проверяет:
1. transpose / trace
2. determinant: 1×1 без округления, 2×2 ad-bc, n>=3 Гаусс с pivoting
3. minor_matrix / cofactor_matrix / adjoint
4. inverse и ошибки вырожденности
5. NonSquareMatrixError для неквадратных матриц
"""

import logging

import pytest

from src.core.domain import (
    IndexOutOfBoundsError,
    Matrix,
    MatrixErrorKind,
    NonSquareMatrixError,
    SingularMatrixError,
)
from src.core.linalg import (
    adjoint,
    cofactor_matrix,
    determinant,
    inverse,
    minor_matrix,
    trace,
    transpose,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def matrix_1x1() -> Matrix:
    return Matrix.new_from_rows([[2.5]])


@pytest.fixture
def matrix_2x2() -> Matrix:
    return Matrix.new_from_rows([[4.5, 2.8], [1.3, 6.7]])


@pytest.fixture
def matrix_3x3() -> Matrix:
    return Matrix.new_from_rows(
        [
            [2.1, 9.7, 3.5],
            [8.4, 1.6, 7.2],
            [5.9, 12.3, 0.8],
        ]
    )


@pytest.fixture
def matrix_5x5() -> Matrix:
    return Matrix.new_from_rows(
        [
            [0.0, 7.1, 0.5, 9.3, 2.8],
            [6.4, 1.9, 8.7, 4.2, 5.6],
            [0.3, 9.8, 2.1, 7.5, 3.9],
            [5.7, 3.6, 8.2, 1.4, 6.0],
            [9.1, 4.5, 2.6, 7.8, 0.7],
        ]
    )


@pytest.fixture
def matrix_2x3() -> Matrix:
    return Matrix.new_from_rows([[7.2, 13.8, 5.1], [9.3, 2.7, 6.4]])


# =============================================================================
# TRANSPOSE & TRACE
# =============================================================================


class TestTranspose:
    """Тесты транспонирования"""

    def test_transpose_rectangular(self, matrix_2x3: Matrix) -> None:
        result = transpose(matrix_2x3)
        assert result.shape == (3, 2)
        assert result.data == [[7.2, 9.3], [13.8, 2.7], [5.1, 6.4]]

    def test_transpose_square(self, matrix_2x2: Matrix) -> None:
        assert transpose(matrix_2x2).data == [[4.5, 1.3], [2.8, 6.7]]

    def test_transpose_twice_is_identity(self, matrix_5x5: Matrix) -> None:
        assert transpose(transpose(matrix_5x5)) == matrix_5x5

    def test_method_delegates(self, matrix_2x3: Matrix) -> None:
        assert matrix_2x3.transpose() == transpose(matrix_2x3)


class TestTrace:
    """Тесты следа"""

    def test_trace_values(
        self,
        matrix_1x1: Matrix,
        matrix_2x2: Matrix,
        matrix_3x3: Matrix,
        matrix_5x5: Matrix,
    ) -> None:
        assert trace(matrix_1x1) == 2.5
        assert trace(matrix_2x2) == 11.2
        assert trace(matrix_3x3) == 4.5
        assert trace(matrix_5x5) == 6.1

    def test_trace_non_square(self, matrix_2x3: Matrix) -> None:
        with pytest.raises(NonSquareMatrixError) as exc_info:
            trace(matrix_2x3)
        assert exc_info.value.kind == MatrixErrorKind.NON_SQUARE_MATRIX


# =============================================================================
# DETERMINANT
# =============================================================================


class TestDeterminant:
    """Тесты определителя"""

    def test_determinant_values(
        self,
        matrix_1x1: Matrix,
        matrix_2x2: Matrix,
        matrix_3x3: Matrix,
        matrix_5x5: Matrix,
    ) -> None:
        assert determinant(matrix_1x1) == 2.5
        assert determinant(matrix_2x2) == 26.51
        assert determinant(matrix_3x3) == 492.164
        assert determinant(matrix_5x5) == -2204.89804

    def test_1x1_is_not_rounded(self) -> None:
        """1×1: элемент возвращается как есть"""
        assert determinant(Matrix.new_from_rows([[0.123456789]])) == 0.123456789

    def test_2x2_is_rounded(self) -> None:
        matrix = Matrix.new_from_rows([[1.0 / 3.0, 0.0], [0.0, 1.0]])
        assert determinant(matrix) == 0.33333

    def test_zero_matrix(self) -> None:
        assert determinant(Matrix.new_zero(3, 3)) == 0.0

    def test_identity(self) -> None:
        assert determinant(Matrix.new_identity(4)) == 1.0

    def test_row_swap_flips_sign(self) -> None:
        """Перестановка двух строк меняет знак определителя"""
        original = Matrix.new_from_rows([[1.0, 2.0, 3.0], [0.0, 1.0, 4.0], [5.0, 6.0, 0.0]])
        swapped = Matrix.new_from_rows([[0.0, 1.0, 4.0], [1.0, 2.0, 3.0], [5.0, 6.0, 0.0]])
        assert determinant(original) == 1.0
        assert determinant(swapped) == -1.0

    def test_empty_matrix(self) -> None:
        """Матрица 0×0 — пустое произведение"""
        assert determinant(Matrix.new_from_rows([])) == 1.0

    def test_operand_not_mutated(self, matrix_5x5: Matrix) -> None:
        before = matrix_5x5.get_data()
        determinant(matrix_5x5)
        assert matrix_5x5.data == before

    def test_pivot_swaps_logged(self, matrix_5x5: Matrix, caplog: pytest.LogCaptureFixture) -> None:
        """Первый столбец 5×5 начинается с 0.0 → как минимум одна перестановка"""
        with caplog.at_level(logging.DEBUG, logger="src.core.linalg.special_operations"):
            determinant(matrix_5x5)
        assert any("pivot swap" in record.getMessage() for record in caplog.records)

    def test_non_square(self, matrix_2x3: Matrix) -> None:
        with pytest.raises(NonSquareMatrixError):
            determinant(matrix_2x3)


# =============================================================================
# MINORS, COFACTORS, ADJOINT
# =============================================================================


class TestMinorsAndCofactors:
    """Тесты миноров и алгебраических дополнений"""

    def test_minor_matrix(self, matrix_3x3: Matrix) -> None:
        assert minor_matrix(matrix_3x3, 0, 0).data == [[1.6, 7.2], [12.3, 0.8]]
        assert minor_matrix(matrix_3x3, 1, 2).data == [[2.1, 9.7], [5.9, 12.3]]

    def test_minor_out_of_bounds(self, matrix_3x3: Matrix) -> None:
        with pytest.raises(IndexOutOfBoundsError):
            minor_matrix(matrix_3x3, 3, 0)

    def test_minor_non_square(self, matrix_2x3: Matrix) -> None:
        with pytest.raises(NonSquareMatrixError):
            minor_matrix(matrix_2x3, 0, 0)

    def test_cofactor_matrix(self, matrix_3x3: Matrix) -> None:
        """Матрица дополнений — транспонированная присоединённая"""
        assert cofactor_matrix(matrix_3x3).data == [
            [-87.28, 35.76, 93.88],
            [35.29, -18.97, 31.4],
            [64.24, 14.28, -78.12],
        ]


class TestAdjoint:
    """Тесты присоединённой матрицы"""

    def test_adjoint_1x1(self, matrix_1x1: Matrix) -> None:
        assert adjoint(matrix_1x1).data == [[1.0]]

    def test_adjoint_2x2(self, matrix_2x2: Matrix) -> None:
        assert adjoint(matrix_2x2).data == [[6.7, -2.8], [-1.3, 4.5]]

    def test_adjoint_3x3(self, matrix_3x3: Matrix) -> None:
        assert adjoint(matrix_3x3).data == [
            [-87.28, 35.29, 64.24],
            [35.76, -18.97, 14.28],
            [93.88, 31.4, -78.12],
        ]

    def test_adjoint_non_square(self, matrix_2x3: Matrix) -> None:
        with pytest.raises(NonSquareMatrixError):
            adjoint(matrix_2x3)


# =============================================================================
# INVERSE
# =============================================================================


class TestInverse:
    """Тесты обратной матрицы"""

    def test_inverse_1x1(self, matrix_1x1: Matrix) -> None:
        assert inverse(matrix_1x1).data == [[0.4]]

    def test_inverse_2x2(self, matrix_2x2: Matrix) -> None:
        assert inverse(matrix_2x2).data == [
            [0.25273, -0.10562],
            [-0.04904, 0.16975],
        ]

    def test_inverse_3x3(self, matrix_3x3: Matrix) -> None:
        assert inverse(matrix_3x3).data == [
            [-0.17734, 0.0717, 0.13053],
            [0.07266, -0.03854, 0.02901],
            [0.19075, 0.0638, -0.15873],
        ]

    def test_inverse_of_identity(self) -> None:
        assert inverse(Matrix.new_identity(3)) == Matrix.new_identity(3)

    def test_singular(self) -> None:
        matrix = Matrix.new_from_rows([[1.0, 2.0], [2.0, 4.0]])
        with pytest.raises(SingularMatrixError, match="do not have inverse") as exc_info:
            inverse(matrix)
        assert exc_info.value.kind == MatrixErrorKind.SINGULAR_MATRIX

    def test_singular_1x1(self) -> None:
        with pytest.raises(SingularMatrixError):
            inverse(Matrix.new_from_rows([[0.0]]))

    def test_non_square(self, matrix_2x3: Matrix) -> None:
        with pytest.raises(NonSquareMatrixError):
            inverse(matrix_2x3)

    def test_method_delegates(self, matrix_2x2: Matrix) -> None:
        assert matrix_2x2.inverse() == inverse(matrix_2x2)
        assert matrix_2x2.determinant() == determinant(matrix_2x2)
        assert matrix_2x2.adjoint() == adjoint(matrix_2x2)
        assert matrix_2x2.trace() == trace(matrix_2x2)

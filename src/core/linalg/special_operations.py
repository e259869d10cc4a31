"""
Special Operations — транспонирование, след, определитель, присоединённая
и обратная матрицы

Алгоритмы:
- determinant (n >= 3): приведение к верхнетреугольному виду методом Гаусса
  с частичным выбором ведущего элемента (partial pivoting)
- adjoint (n >= 3): матрица алгебраических дополнений через рекурсивные
  миноры, затем транспонирование
- inverse: (1 / det) × adjoint

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ведущий элемент столбца — строка с наибольшим |a[row][col]| среди
   строк от текущей и ниже; при равенстве остаётся более ранняя строка
2. Чётность числа перестановок строк определяет знак определителя
3. Строки с уже нулевым целевым элементом не обрабатываются (нет шума от
   деления на ведущий элемент)
4. Определитель округляется один раз в конце, не на каждом шаге
5. 1×1: det = элемент (без округления), adjoint = [[1.0]]

СЛОЖНОСТЬ:
    adjoint для n >= 3 вызывает determinant n² раз для миноров (n-1)×(n-1),
    каждый O(n³). Это приемлемо для небольших интерактивных матриц;
    реализация выбрана ради прозрачности, а не скорости.

ФОРМУЛЫ:
    det(A) = (-1)^swaps × Π U[i][i]           (U — верхнетреугольная)
    C[i][j] = (-1)^(i+j) × det(M_ij)           (M_ij — минор без строки i и столбца j)
    adj(A) = Cᵀ
    A⁻¹ = adj(A) / det(A)
"""

import logging

from src.core.domain.errors import NonSquareMatrixError, SingularMatrixError
from src.core.domain.matrix import Matrix
from src.core.linalg.arithmetic import scale
from src.core.math.numerical_safeguards import round_to_precision

logger = logging.getLogger(__name__)


def _require_square(matrix: Matrix, operation: str) -> None:
    if not matrix.is_square():
        raise NonSquareMatrixError(
            f"Only square matrices have {operation}, got {matrix.rows}x{matrix.columns}"
        )


# =============================================================================
# TRANSPOSE & TRACE
# =============================================================================


def transpose(matrix: Matrix) -> Matrix:
    """Транспонированная матрица columns × rows: t[i][j] = m[j][i]."""
    return Matrix._from_trusted_grid(
        [[matrix.data[j][i] for j in range(matrix.rows)] for i in range(matrix.columns)]
    )


def trace(matrix: Matrix) -> float:
    """
    След: округлённая сумма диагональных элементов.

    Raises:
        NonSquareMatrixError: Если матрица не квадратная
    """
    _require_square(matrix, "traces")
    total = 0.0
    for i in range(matrix.rows):
        total += matrix.data[i][i]
    return round_to_precision(total)


# =============================================================================
# DETERMINANT
# =============================================================================


def determinant(matrix: Matrix) -> float:
    """
    Определитель квадратной матрицы.

    - 1×1: единственный элемент (без округления)
    - 2×2: ad - bc (с округлением)
    - n >= 3: Гаусс с частичным выбором ведущего элемента

    Матрица 0×0 (артефакт конструктора) имеет определитель 1.0 — пустое
    произведение.

    Raises:
        NonSquareMatrixError: Если матрица не квадратная

    Examples:
        >>> determinant(Matrix.new_from_rows([[4.5, 2.8], [1.3, 6.7]]))
        26.51
    """
    _require_square(matrix, "determinants")
    data = matrix.data

    if matrix.rows == 1:
        return data[0][0]

    if matrix.rows == 2:
        return round_to_precision(data[0][0] * data[1][1] - data[0][1] * data[1][0])

    return _eliminate(matrix.get_data())


def _eliminate(upper: list[list[float]]) -> float:
    """
    Приведение рабочей копии к верхнетреугольному виду и произведение диагонали.

    Args:
        upper: Рабочая копия сетки n×n (мутируется)

    Returns:
        Округлённый определитель
    """
    n = len(upper)
    swaps = 0

    for column in range(n):
        # Частичный выбор ведущего элемента: наибольший |a| в столбце
        pivot = upper[column][column]
        pivot_row = column
        for row in range(column, n):
            element = upper[row][column]
            if abs(element) > abs(pivot):
                pivot = element
                pivot_row = row

        if pivot_row != column:
            upper[column], upper[pivot_row] = upper[pivot_row], upper[column]
            swaps += 1
            logger.debug("pivot swap: column=%d, row %d <-> row %d", column, column, pivot_row)

        for row in range(column + 1, n):
            target = upper[row][column]
            if target == 0.0:
                continue
            factor = target / upper[column][column]
            for i in range(n):
                upper[row][i] -= factor * upper[column][i]

    result = 1.0
    for i in range(n):
        result *= upper[i][i]

    if swaps % 2 == 1:
        result = -result

    return round_to_precision(result)


# =============================================================================
# MINORS, COFACTORS, ADJOINT
# =============================================================================


def minor_matrix(matrix: Matrix, row: int, column: int) -> Matrix:
    """
    Подматрица (n-1)×(n-1) без строки row и столбца column.

    Raises:
        NonSquareMatrixError: Если матрица не квадратная
        IndexOutOfBoundsError: Если row/column вне границ
    """
    _require_square(matrix, "minors")
    # Проверка индексов через аксессор
    matrix.get_element(row, column)
    return Matrix._from_trusted_grid(
        [
            [v for j, v in enumerate(r) if j != column]
            for i, r in enumerate(matrix.data)
            if i != row
        ]
    )


def cofactor_matrix(matrix: Matrix) -> Matrix:
    """
    Матрица алгебраических дополнений.

    C[i][j] = det(M_ij), со сменой знака при нечётном (i + j).

    Raises:
        NonSquareMatrixError: Если матрица не квадратная
    """
    _require_square(matrix, "cofactors")
    n = matrix.rows
    logger.debug("cofactor expansion: %d minors of size %d", n * n, n - 1)

    cofactors = []
    for i in range(n):
        row = []
        for j in range(n):
            minor = determinant(minor_matrix(matrix, i, j))
            row.append(-minor if (i + j) % 2 == 1 else minor)
        cofactors.append(row)

    return Matrix._from_trusted_grid(cofactors)


def adjoint(matrix: Matrix) -> Matrix:
    """
    Присоединённая (adjugate) матрица.

    - 1×1: [[1.0]] по соглашению
    - 2×2: [[d, -b], [-c, a]]
    - n >= 3: транспонированная матрица алгебраических дополнений

    Raises:
        NonSquareMatrixError: Если матрица не квадратная
    """
    _require_square(matrix, "adjoints")
    data = matrix.data

    if matrix.rows == 1:
        return Matrix._from_trusted_grid([[1.0]])

    if matrix.rows == 2:
        return Matrix._from_trusted_grid(
            [
                [data[1][1], -data[0][1]],
                [-data[1][0], data[0][0]],
            ]
        )

    return transpose(cofactor_matrix(matrix))


# =============================================================================
# INVERSE
# =============================================================================


def inverse(matrix: Matrix) -> Matrix:
    """
    Обратная матрица: (1 / det) × adjoint.

    Raises:
        NonSquareMatrixError: Если матрица не квадратная
        SingularMatrixError: Если определитель ровно 0.0

    Examples:
        >>> inverse(Matrix.new_from_rows([[2.5]])).data
        [[0.4]]
    """
    _require_square(matrix, "inverses")

    det = determinant(matrix)
    if det == 0.0:
        logger.debug(
            "inverse rejected: determinant is zero for %dx%d matrix",
            matrix.rows,
            matrix.columns,
        )
        raise SingularMatrixError("Singular matrices do not have inverse")

    return scale(1.0 / det, adjoint(matrix))

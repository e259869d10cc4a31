"""
Arithmetic — поэлементная и линейная арифметика матриц

Операции:
- add / subtract: поэлементно, формы должны совпадать
- multiply: матричное произведение (lhs.columns == rhs.rows)
- scale: умножение на скаляр (всегда успешно)
- negate: scale(-1.0, m)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат — всегда новая матрица, операнды не мутируются
2. Каждый элемент результата округляется до 5 знаков
3. В multiply округляется полная сумма скалярного произведения, а не слагаемые
"""

from typing import Callable

from src.core.domain.errors import DimensionMismatchError
from src.core.domain.matrix import Matrix
from src.core.math.numerical_safeguards import round_to_precision


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ОПЕРАЦИИ
# =============================================================================


def _elementwise(
    lhs: Matrix,
    rhs: Matrix,
    operation: Callable[[float, float], float],
    name: str,
) -> Matrix:
    if lhs.shape != rhs.shape:
        raise DimensionMismatchError(
            f"Cannot {name} a {lhs.rows}x{lhs.columns} matrix and "
            f"a {rhs.rows}x{rhs.columns} matrix"
        )
    return Matrix._from_trusted_grid(
        [
            [round_to_precision(operation(a, b)) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(lhs.data, rhs.data)
        ]
    )


def add(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Поэлементная сумма.

    Raises:
        DimensionMismatchError: Если формы операндов не совпадают
    """
    return _elementwise(lhs, rhs, lambda a, b: a + b, "add")


def subtract(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Поэлементная разность lhs - rhs.

    Raises:
        DimensionMismatchError: Если формы операндов не совпадают
    """
    return _elementwise(lhs, rhs, lambda a, b: a - b, "subtract")


# =============================================================================
# МАТРИЧНОЕ ПРОИЗВЕДЕНИЕ
# =============================================================================


def multiply(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Матричное произведение lhs × rhs.

    Формула:
        result[i][j] = round(Σ_k lhs[i][k] * rhs[k][j])

    Args:
        lhs: Левый операнд (m × n)
        rhs: Правый операнд (n × p)

    Returns:
        Новая матрица m × p

    Raises:
        DimensionMismatchError: Если lhs.columns != rhs.rows
    """
    if lhs.columns != rhs.rows:
        raise DimensionMismatchError(
            f"Cannot multiply a {lhs.rows}x{lhs.columns} matrix by "
            f"a {rhs.rows}x{rhs.columns} matrix: {lhs.columns} columns != {rhs.rows} rows"
        )

    result = []
    for i in range(lhs.rows):
        row = []
        for j in range(rhs.columns):
            total = 0.0
            for k in range(lhs.columns):
                total += lhs.data[i][k] * rhs.data[k][j]
            row.append(round_to_precision(total))
        result.append(row)

    return Matrix._from_trusted_grid(result)


# =============================================================================
# СКАЛЯРНЫЕ ОПЕРАЦИИ
# =============================================================================


def scale(scalar: float, matrix: Matrix) -> Matrix:
    """
    Умножение каждого элемента на scalar с округлением.

    Examples:
        >>> scale(0.5, Matrix.new_from_rows([[5.1]])).data
        [[2.55]]
    """
    return Matrix._from_trusted_grid(
        [[round_to_precision(scalar * v) for v in row] for row in matrix.data]
    )


def negate(matrix: Matrix) -> Matrix:
    """Противоположная матрица: scale(-1.0, matrix)."""
    return scale(-1.0, matrix)

"""
Matrix Formatting — текстовое представление матрицы

Каждый столбец выравнивается по ширине самого длинного значения в нём,
значения центрируются (лишний пробел — слева), каждая строка матрицы
завершается переводом строки.

Числа печатаются без экспоненты: целые значения без дробной части
(1.0 → "1"), остальные — кратчайшей десятичной записью (0.25273).
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from src.core.math.numerical_safeguards import is_valid_float

if TYPE_CHECKING:
    from src.core.domain.matrix import Matrix


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MatrixFormatConfig:
    """Параметры текстового представления матрицы."""

    # Минимальный отступ слева от каждого значения
    column_gap: int = 1

    # Фиксированное число знаков после запятой (None → кратчайшая запись)
    precision: Optional[int] = None

    def __post_init__(self) -> None:
        if self.column_gap < 0:
            raise ValueError(f"column_gap must be non-negative, got {self.column_gap}")
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")


DEFAULT_FORMAT_CONFIG = MatrixFormatConfig()


# =============================================================================
# FORMATTING
# =============================================================================


def format_value(value: float, precision: Optional[int] = None) -> str:
    """
    Строковое представление одного элемента.

    Examples:
        >>> format_value(1.0)
        '1'
        >>> format_value(-2.8)
        '-2.8'
        >>> format_value(1e-05)
        '0.00001'
        >>> format_value(2.0, precision=2)
        '2.00'
    """
    if precision is not None:
        return f"{value:.{precision}f}"

    if not is_valid_float(value):
        return repr(value)

    if value.is_integer():
        text = str(int(value))
        # -0.0 сохраняет знак
        if value == 0.0 and str(value).startswith("-"):
            return "-0"
        return text

    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def format_matrix(
    matrix: "Matrix",
    config: MatrixFormatConfig = DEFAULT_FORMAT_CONFIG,
) -> str:
    """
    Текст матрицы с центрированными столбцами.

    Args:
        matrix: Матрица для печати
        config: Параметры представления

    Returns:
        Многострочный текст; пустая строка для матрицы 0×0
    """
    cells = [[format_value(v, config.precision) for v in row] for row in matrix.data]
    widths = [
        max(len(cells[r][c]) for r in range(matrix.rows)) for c in range(matrix.columns)
    ]

    lines = []
    for row in cells:
        parts = []
        for column, text in enumerate(row):
            total_pad = widths[column] - len(text)
            right_pad = total_pad // 2
            left_pad = total_pad - right_pad + config.column_gap
            parts.append(" " * left_pad + text + " " * right_pad)
        lines.append("".join(parts) + "\n")

    return "".join(lines)

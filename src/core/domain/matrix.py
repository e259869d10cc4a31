"""
Matrix — плотная вещественная матрица

Pydantic модель-значение: прямоугольная сетка float с фиксированной формой.

Жизненный цикл:
- Создаётся только через валидирующие конструкторы (new_zero, new_from_rows,
  new_diagonal, new_scalar, new_identity) или from_payload
- Мутируется на месте только поэлементно / построчно / постолбцово / целиком,
  с проверкой формы; rows и columns после создания неизменяемы
- Арифметика и спецоперации всегда возвращают НОВУЮ матрицу и никогда не
  мутируют операнды

Сырые записи через сеттеры и конструкторы НЕ округляются; округление до
5 знаков применяется только к вычисленным значениям (см. numerical_safeguards).
"""

from typing import Annotated, Any, Sequence

from pydantic import BaseModel, Field, model_validator

from src.core.domain.errors import (
    DimensionMismatchError,
    InconsistentColumnSizeError,
    IndexOutOfBoundsError,
    ZeroDimensionError,
)
from src.core.domain.formatting import format_matrix
from src.core.math.numerical_safeguards import (
    MATRIX_CLOSE_ABS_TOL,
    is_close,
    validate_finite,
)

# Элемент матрицы: конечный float (NaN/Inf, str и bool отвергаются при валидации)
Element = Annotated[float, Field(allow_inf_nan=False, strict=True)]


# =============================================================================
# HELPERS
# =============================================================================


def _coerce_element(value: float, name: str) -> float:
    """Приведение к float с отказом от str/bool и NaN/Inf."""
    if isinstance(value, (bool, str, bytes)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    value = float(value)
    validate_finite(value, name)
    return value


def _coerce_row(values: Sequence[float], name: str) -> list[float]:
    """Копия строки с приведением к float и проверкой на NaN/Inf."""
    return [_coerce_element(v, name) for v in values]


def _is_rectangular(grid: Sequence[Sequence[float]]) -> bool:
    """Все строки сетки имеют длину первой строки."""
    return all(len(row) == len(grid[0]) for row in grid)


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Плотная матрица float64.

    Инварианты:
    - len(data) == rows, len(data[i]) == columns для всех i
    - rows >= 1 и columns >= 1 для всех матриц, кроме артефакта
      new_from_rows([]) (матрица 0×0)
    - rows/columns заморожены (frozen поля)
    """

    rows: int = Field(..., ge=0, frozen=True, description="Число строк")
    columns: int = Field(..., ge=0, frozen=True, description="Число столбцов")
    data: list[list[Element]] = Field(..., description="Сетка значений (row-major)")

    # validate_assignment: присваивание data проходит validate_shape
    model_config = {"extra": "forbid", "validate_assignment": True}

    @model_validator(mode="after")
    def validate_shape(self) -> "Matrix":
        """Согласованность rows/columns с фактической сеткой."""
        if len(self.data) != self.rows:
            raise ValueError(f"data has {len(self.data)} rows, expected {self.rows}")
        for index, row in enumerate(self.data):
            if len(row) != self.columns:
                raise ValueError(
                    f"row {index} has {len(row)} columns, expected {self.columns}"
                )
        if (self.rows == 0) != (self.columns == 0):
            raise ValueError(f"degenerate shape {self.rows}x{self.columns}")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new_zero(cls, rows: int, columns: int) -> "Matrix":
        """
        Нулевая матрица rows × columns.

        Raises:
            ZeroDimensionError: Если rows == 0 или columns == 0
        """
        if rows <= 0 or columns <= 0:
            raise ZeroDimensionError(
                f"Cannot create a {rows}x{columns} matrix: dimensions must be positive"
            )
        return cls._from_trusted_grid([[0.0] * columns for _ in range(rows)])

    @classmethod
    def new_from_rows(cls, grid: Sequence[Sequence[float]]) -> "Matrix":
        """
        Матрица из явной сетки (сетка копируется).

        Пустая сетка даёт матрицу 0×0.

        Raises:
            InconsistentColumnSizeError: Если строки разной длины
            ZeroDimensionError: Если строки есть, но все они пустые
            pydantic.ValidationError: Если элементы не конечные числа
        """
        if not _is_rectangular(grid):
            lengths = [len(row) for row in grid]
            raise InconsistentColumnSizeError(
                f"Every row must have the same number of elements, got row lengths {lengths}"
            )
        rows = len(grid)
        columns = len(grid[0]) if grid else 0
        if rows > 0 and columns == 0:
            raise ZeroDimensionError(f"Cannot create a {rows}x0 matrix")
        return cls(rows=rows, columns=columns, data=[list(row) for row in grid])

    @classmethod
    def new_diagonal(cls, values: Sequence[float]) -> "Matrix":
        """
        Квадратная матрица с values на главной диагонали и нулями вне её.

        Raises:
            ZeroDimensionError: Если values пуст
        """
        if len(values) == 0:
            raise ZeroDimensionError("Cannot create a diagonal matrix without elements")
        diagonal = _coerce_row(values, "diagonal element")
        size = len(diagonal)
        matrix = cls.new_zero(size, size)
        for i, value in enumerate(diagonal):
            matrix.data[i][i] = value
        return matrix

    @classmethod
    def new_scalar(cls, value: float, size: int) -> "Matrix":
        """Скалярная матрица size × size (value на диагонали)."""
        if size <= 0:
            raise ZeroDimensionError(f"Cannot create a scalar matrix of size {size}")
        return cls.new_diagonal([value] * size)

    @classmethod
    def new_identity(cls, size: int) -> "Matrix":
        """Единичная матрица size × size."""
        if size <= 0:
            raise ZeroDimensionError(f"Cannot create an identity matrix of size {size}")
        return cls.new_scalar(1.0, size)

    @classmethod
    def _from_trusted_grid(cls, grid: list[list[float]]) -> "Matrix":
        """
        Сборка матрицы из уже проверенной прямоугольной сетки без валидации.

        Используется арифметикой и спецоперациями: форма гарантирована
        алгоритмом, а сетка принадлежит новой матрице.
        """
        rows = len(grid)
        columns = len(grid[0]) if grid else 0
        return cls.model_construct(rows=rows, columns=columns, data=grid)

    # -------------------------------------------------------------------------
    # Payload (wire format)
    # -------------------------------------------------------------------------

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Matrix":
        """
        Матрица из payload {"rows", "columns", "data"}.

        Сначала payload проверяется JSON Schema контрактом, затем
        доменными инвариантами.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            InconsistentColumnSizeError: Если data не прямоугольная
            DimensionMismatchError: Если объявленная форма не совпадает с data
        """
        from src.core.contracts import validate_matrix_payload

        validate_matrix_payload(payload)
        matrix = cls.new_from_rows(payload["data"])
        if (matrix.rows, matrix.columns) != (payload["rows"], payload["columns"]):
            raise DimensionMismatchError(
                f"Payload declares {payload['rows']}x{payload['columns']}, "
                f"data is {matrix.rows}x{matrix.columns}"
            )
        return matrix

    def to_payload(self) -> dict[str, Any]:
        """Payload {"rows", "columns", "data"} (data — глубокая копия)."""
        return {"rows": self.rows, "columns": self.columns, "data": self.get_data()}

    # -------------------------------------------------------------------------
    # Доступ к данным
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        """Форма (rows, columns)."""
        return (self.rows, self.columns)

    def get_data(self) -> list[list[float]]:
        """Глубокая копия сетки."""
        return [list(row) for row in self.data]

    def get_row(self, row: int) -> list[float]:
        """Копия строки row."""
        self._check_row_index(row)
        return list(self.data[row])

    def get_column(self, column: int) -> list[float]:
        """Копия столбца column."""
        self._check_column_index(column)
        return [r[column] for r in self.data]

    def get_element(self, row: int, column: int) -> float:
        """Элемент (row, column)."""
        self._check_row_index(row)
        self._check_column_index(column)
        return self.data[row][column]

    # -------------------------------------------------------------------------
    # Мутаторы (на месте, без округления)
    # -------------------------------------------------------------------------

    def set_data(self, grid: Sequence[Sequence[float]]) -> None:
        """
        Замена всей сетки с сохранением формы.

        Raises:
            DimensionMismatchError: Если число строк или длина первой строки
                не совпадают с формой матрицы
            InconsistentColumnSizeError: Если сетка не прямоугольная
        """
        if len(grid) != self.rows or (len(grid) > 0 and len(grid[0]) != self.columns):
            first = len(grid[0]) if len(grid) > 0 else 0
            raise DimensionMismatchError(
                f"Replacement data is {len(grid)}x{first}, matrix is {self.rows}x{self.columns}"
            )
        if not _is_rectangular(grid):
            raise InconsistentColumnSizeError(
                "Every row of the replacement data must have the same number of elements"
            )
        self.data = [_coerce_row(row, "element") for row in grid]

    def set_row(self, row: int, values: Sequence[float]) -> None:
        """
        Замена строки row.

        Raises:
            IndexOutOfBoundsError: Если row >= rows
            DimensionMismatchError: Если len(values) != columns
        """
        self._check_row_index(row)
        if len(values) != self.columns:
            raise DimensionMismatchError(
                f"Row has {len(values)} elements, matrix has {self.columns} columns"
            )
        self.data[row] = _coerce_row(values, "element")

    def set_column(self, column: int, values: Sequence[float]) -> None:
        """
        Замена столбца column.

        Raises:
            IndexOutOfBoundsError: Если column >= columns
            DimensionMismatchError: Если len(values) != rows
        """
        self._check_column_index(column)
        if len(values) != self.rows:
            raise DimensionMismatchError(
                f"Column has {len(values)} elements, matrix has {self.rows} rows"
            )
        for r, value in enumerate(_coerce_row(values, "element")):
            self.data[r][column] = value

    def set_element(self, row: int, column: int, value: float) -> None:
        """Замена элемента (row, column)."""
        self._check_row_index(row)
        self._check_column_index(column)
        self.data[row][column] = _coerce_element(value, "element")

    def clone(self) -> "Matrix":
        """Независимая глубокая копия."""
        return self._from_trusted_grid(self.get_data())

    def _check_row_index(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise IndexOutOfBoundsError(f"Row index {row} out of bounds for {self.rows} rows")

    def _check_column_index(self, column: int) -> None:
        if not 0 <= column < self.columns:
            raise IndexOutOfBoundsError(
                f"Column index {column} out of bounds for {self.columns} columns"
            )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and self.data == other.data
        )

    def is_close(self, other: "Matrix", abs_tol: float = MATRIX_CLOSE_ABS_TOL) -> bool:
        """
        Приближённое равенство: одинаковая форма и все элементы в пределах abs_tol.

        По умолчанию допуск — один шаг сетки округления.
        """
        if self.shape != other.shape:
            return False
        return all(
            is_close(a, b, abs_tol)
            for row_a, row_b in zip(self.data, other.data)
            for a, b in zip(row_a, row_b)
        )

    # -------------------------------------------------------------------------
    # Арифметика (делегирование в src.core.linalg.arithmetic)
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from src.core.linalg.arithmetic import add

        return add(self, other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from src.core.linalg.arithmetic import subtract

        return subtract(self, other)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from src.core.linalg.arithmetic import multiply

        return multiply(self, other)

    def __mul__(self, other: object) -> "Matrix":
        from src.core.linalg.arithmetic import multiply, scale

        if isinstance(other, Matrix):
            return multiply(self, other)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return scale(other, self)
        return NotImplemented

    def __rmul__(self, other: object) -> "Matrix":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            from src.core.linalg.arithmetic import scale

            return scale(other, self)
        return NotImplemented

    def __neg__(self) -> "Matrix":
        from src.core.linalg.arithmetic import negate

        return negate(self)

    # -------------------------------------------------------------------------
    # Свойства и спецоперации (делегирование в src.core.linalg)
    # -------------------------------------------------------------------------

    def is_square(self) -> bool:
        return self.rows == self.columns

    def is_symmetric(self) -> bool:
        from src.core.linalg.properties import is_symmetric

        return is_symmetric(self)

    def is_skew_symmetric(self) -> bool:
        from src.core.linalg.properties import is_skew_symmetric

        return is_skew_symmetric(self)

    def is_diagonal(self) -> bool:
        from src.core.linalg.properties import is_diagonal

        return is_diagonal(self)

    def is_scalar(self) -> bool:
        from src.core.linalg.properties import is_scalar

        return is_scalar(self)

    def is_identity(self) -> bool:
        from src.core.linalg.properties import is_identity

        return is_identity(self)

    def is_zero(self) -> bool:
        from src.core.linalg.properties import is_zero

        return is_zero(self)

    def is_singular(self) -> bool:
        from src.core.linalg.properties import is_singular

        return is_singular(self)

    def transpose(self) -> "Matrix":
        from src.core.linalg.special_operations import transpose

        return transpose(self)

    def trace(self) -> float:
        from src.core.linalg.special_operations import trace

        return trace(self)

    def determinant(self) -> float:
        from src.core.linalg.special_operations import determinant

        return determinant(self)

    def adjoint(self) -> "Matrix":
        from src.core.linalg.special_operations import adjoint

        return adjoint(self)

    def inverse(self) -> "Matrix":
        from src.core.linalg.special_operations import inverse

        return inverse(self)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return format_matrix(self)

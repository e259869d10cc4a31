"""Operations — фасад матричных операций для интерактивного слоя

Внешний слой (меню, реестр матриц по имени, печать) вызывает одну операцию и
отображает OperationResult. Фасад:
- выполняет одну арифметическую или спецоперацию
- перехватывает MatrixError и возвращает его как значение (error_kind + details)
- не печатает и не хранит состояние между вызовами

Ошибки программирования вызывающей стороны (нет второго операнда, нет скаляра)
не перехватываются и поднимаются как ValueError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.domain.errors import MatrixError, MatrixErrorKind
from src.core.domain.matrix import Matrix
from src.core.linalg import (
    add,
    adjoint,
    determinant,
    inverse,
    multiply,
    negate,
    scale,
    subtract,
    trace,
    transpose,
)
from src.toolkit.messages import error_message


class Operation(str, Enum):
    """Операция над матрицами."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    SCALE = "scale"
    NEGATE = "negate"
    TRACE = "trace"
    TRANSPOSE = "transpose"
    DETERMINANT = "determinant"
    ADJOINT = "adjoint"
    INVERSE = "inverse"


# Операции с двумя матричными операндами
BINARY_OPERATIONS = frozenset({Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY})

# Операции с числовым результатом
SCALAR_RESULT_OPERATIONS = frozenset({Operation.TRACE, Operation.DETERMINANT})


@dataclass(frozen=True)
class OperationResult:
    """Результат операции."""

    operation: Operation
    ok: bool

    # Ровно одно из matrix/value заполнено при ok=True
    matrix: Optional[Matrix] = None
    value: Optional[float] = None

    # Заполнены при ok=False
    error_kind: Optional[MatrixErrorKind] = None
    details: str = ""


class MatrixOperations:
    """Фасад операций.

    Порядок обработки:
    1. Проверка наличия нужных операндов → ValueError
    2. Выполнение операции
    3. MatrixError → OperationResult(ok=False)
    """

    def evaluate(
        self,
        operation: Operation,
        lhs: Matrix,
        rhs: Optional[Matrix] = None,
        scalar: Optional[float] = None,
    ) -> OperationResult:
        """Выполнение одной операции.

        Args:
            operation: операция
            lhs: первый (или единственный) операнд
            rhs: второй операнд для add/subtract/multiply
            scalar: скаляр для scale

        Returns:
            OperationResult с матрицей, числом или видом ошибки

        Raises:
            ValueError: если не передан нужный операнд или скаляр
        """
        operation = Operation(operation)

        if operation in BINARY_OPERATIONS and rhs is None:
            raise ValueError(f"{operation.value} requires a second matrix")
        if operation == Operation.SCALE and scalar is None:
            raise ValueError("scale requires a scalar")

        try:
            if operation in SCALAR_RESULT_OPERATIONS:
                return OperationResult(
                    operation=operation,
                    ok=True,
                    value=self._compute_value(operation, lhs),
                )
            return OperationResult(
                operation=operation,
                ok=True,
                matrix=self._compute_matrix(operation, lhs, rhs, scalar),
            )
        except MatrixError as e:
            return OperationResult(
                operation=operation,
                ok=False,
                error_kind=e.kind,
                details=error_message(operation, e.kind),
            )

    @staticmethod
    def _compute_value(operation: Operation, lhs: Matrix) -> float:
        if operation == Operation.TRACE:
            return trace(lhs)
        return determinant(lhs)

    @staticmethod
    def _compute_matrix(
        operation: Operation,
        lhs: Matrix,
        rhs: Optional[Matrix],
        scalar: Optional[float],
    ) -> Matrix:
        if operation == Operation.ADD:
            return add(lhs, rhs)
        if operation == Operation.SUBTRACT:
            return subtract(lhs, rhs)
        if operation == Operation.MULTIPLY:
            return multiply(lhs, rhs)
        if operation == Operation.SCALE:
            return scale(scalar, lhs)
        if operation == Operation.NEGATE:
            return negate(lhs)
        if operation == Operation.TRANSPOSE:
            return transpose(lhs)
        if operation == Operation.ADJOINT:
            return adjoint(lhs)
        return inverse(lhs)

"""Properties Report — пакетная проверка структурных свойств матрицы

Внешний слой выбирает набор свойств и отображает отчёт вида:
    Is Square: ✅
    Is Singular: ❌
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from src.core.domain.matrix import Matrix
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

PASS_MARK = "✅"
FAIL_MARK = "❌"


class MatrixProperty(str, Enum):
    """Структурное свойство матрицы."""

    SQUARE = "square"
    SYMMETRIC = "symmetric"
    SKEW_SYMMETRIC = "skew_symmetric"
    DIAGONAL = "diagonal"
    SCALAR = "scalar"
    IDENTITY = "identity"
    ZERO = "zero"
    SINGULAR = "singular"

    @property
    def label(self) -> str:
        """Подпись для отображения ('Is Skew Symmetric')."""
        return "Is " + self.value.replace("_", " ").title()


_PREDICATES: dict[MatrixProperty, Callable[[Matrix], bool]] = {
    MatrixProperty.SQUARE: is_square,
    MatrixProperty.SYMMETRIC: is_symmetric,
    MatrixProperty.SKEW_SYMMETRIC: is_skew_symmetric,
    MatrixProperty.DIAGONAL: is_diagonal,
    MatrixProperty.SCALAR: is_scalar,
    MatrixProperty.IDENTITY: is_identity,
    MatrixProperty.ZERO: is_zero,
    MatrixProperty.SINGULAR: is_singular,
}


@dataclass(frozen=True)
class PropertyReport:
    """Результаты проверки свойств в порядке объявления MatrixProperty."""

    results: tuple[tuple[MatrixProperty, bool], ...]

    def as_dict(self) -> dict[MatrixProperty, bool]:
        return dict(self.results)

    def render(self) -> str:
        return "".join(
            f"{prop.label}: {PASS_MARK if passed else FAIL_MARK}\n"
            for prop, passed in self.results
        )


def check_properties(
    matrix: Matrix,
    properties: Optional[Iterable[MatrixProperty]] = None,
) -> PropertyReport:
    """
    Проверка выбранных свойств (по умолчанию — всех).

    Повторы в properties игнорируются; порядок результатов — порядок
    объявления MatrixProperty, независимо от порядка запроса.
    """
    if properties is None:
        requested = set(MatrixProperty)
    else:
        requested = {MatrixProperty(p) for p in properties}
    return PropertyReport(
        results=tuple(
            (prop, _PREDICATES[prop](matrix)) for prop in MatrixProperty if prop in requested
        )
    )

"""
Numerical Safeguards — Rounding & Float Primitives

Модуль обеспечивает детерминированность всех матричных вычислений:
- Округление до фиксированной сетки (5 знаков после запятой)
- NaN/Inf проверки для входных данных
- Epsilon-сравнения float для приближённого равенства матриц

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое значение, произведённое арифметикой или спецоперацией,
   округляется ровно один раз, после полного накопления (не по слагаемым)
2. Округление — half away from zero (0.000005 → 0.00001, -0.000005 → -0.00001)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ОКРУГЛЕНИЯ
# =============================================================================

# Количество знаков после запятой для всех вычисленных значений
ROUND_DECIMALS: Final[int] = 5

# Масштаб сетки округления: 10 ** ROUND_DECIMALS
ROUND_SCALE: Final[float] = 100_000.0

# Абсолютная толерантность для приближённого сравнения матриц
# (один шаг сетки округления)
MATRIX_CLOSE_ABS_TOL: Final[float] = 1e-5


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(value: float) -> float:
    """
    Округление до ближайшего целого, половины — от нуля.

    В отличие от встроенного round() (banker's rounding), 2.5 → 3.0,
    -2.5 → -3.0.

    Examples:
        >>> round_half_away(2.5)
        3.0
        >>> round_half_away(-2.5)
        -3.0
        >>> round_half_away(2.4)
        2.0
    """
    if not is_valid_float(value):
        return value

    # Дробная часть считается отдельно: value + 0.5 теряет точность
    # у значений вроде 0.49999999999999994
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def round_to_precision(value: float, scale: float = ROUND_SCALE) -> float:
    """
    Округление значения до сетки 1 / scale.

    Алгоритм: value * scale → round half away from zero → / scale.

    Args:
        value: Исходное значение
        scale: Масштаб сетки (default: ROUND_SCALE = 100 000)

    Returns:
        Округлённое значение. NaN/Inf возвращаются без изменений; если
        value * scale переполняется, результат — inf со знаком value.

    Raises:
        ValueError: Если scale <= 0

    Examples:
        >>> round_to_precision(0.2527348170501697)
        0.25273
        >>> round_to_precision(-0.000005)
        -1e-05
        >>> round_to_precision(26.510000000000005)
        26.51
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    if not is_valid_float(value):
        return value

    scaled = value * scale
    if not is_valid_float(scaled):
        return scaled / scale

    return round_half_away(scaled) / scale


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value — NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(a: float, b: float, abs_tol: float = MATRIX_CLOSE_ABS_TOL) -> bool:
    """
    Сравнение float с абсолютной толерантностью.

    По умолчанию толерантность равна одному шагу сетки округления, что
    достаточно для сравнения результатов, прошедших разный порядок суммирования.

    Examples:
        >>> is_close(1.0, 1.00001)
        True
        >>> is_close(1.0, 1.0001)
        False
    """
    if abs_tol < 0:
        raise ValueError(f"abs_tol must be non-negative, got {abs_tol}")
    # Небольшой запас на двоичное представление самой толерантности
    return abs(a - b) <= abs_tol + 1e-12

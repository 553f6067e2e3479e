"""
Numerical Safeguards — Safe Math Primitives для геометрии диска Пуанкаре

Модуль обеспечивает численную устойчивость геометрических операций:
- Epsilon-параметры для знаменателей Möbius-преобразований и сравнений
- NaN/Inf проверки входных float значений
- Epsilon-сравнения float с учётом машинной точности
- Квантование float в целые (ключи дедупликации орбиты)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в геометрию (ValueError на входе)
2. Float сравнения всегда учитывают машинную точность
3. Квантование детерминировано и воспроизводимо (round half away from zero)
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог |cz + d|, ниже которого Möbius-преобразование считается вырожденным
EPS_DENOMINATOR: Final[float] = 1e-12

# Epsilon для общих вычислений и сравнений
EPS_CALC: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Максимальная точность квантования (десятичных знаков) для ключей орбиты
MAX_KEY_PRECISION: Final[int] = 12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """Проверка abs(value) <= tol."""
    return abs(value) <= tol


# =============================================================================
# КВАНТОВАНИЕ
# =============================================================================


def quantize(value: float, precision: int) -> int:
    """
    Квантование float в целое число шагов 10^-precision.

    Используется для построения hashable ключей дедупликации вместо
    строкового форматирования. Округление "half away from zero", так что
    результат симметричен относительно нуля и -0.0 даёт 0.

    Args:
        value: Значение для квантования
        precision: Количество десятичных знаков (0..MAX_KEY_PRECISION)

    Returns:
        round(value * 10^precision) как int

    Raises:
        ValueError: если precision вне диапазона или value NaN/Inf

    Examples:
        >>> quantize(0.12345, 3)
        123
        >>> quantize(-0.0005, 3)
        -1
        >>> quantize(-0.0, 3)
        0
    """
    if not 0 <= precision <= MAX_KEY_PRECISION:
        raise ValueError(
            f"precision must be in [0, {MAX_KEY_PRECISION}], got {precision}"
        )
    if not is_valid_float(value):
        raise ValueError(f"Cannot quantize NaN/Inf value: {value}")

    ratio = value * (10 ** precision)

    if ratio >= 0:
        return math.floor(ratio + 0.5)
    return math.ceil(ratio - 0.5)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(60.0, 0.1, 50.0)
        50.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str, eps: float = EPS_CALC) -> None:
    """
    Валидация, что значение положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        eps: Минимальный порог (default: EPS_CALC)

    Raises:
        ValueError: Если value <= eps или NaN/Inf
    """
    validate_finite(value, name)

    if value <= eps:
        raise ValueError(f"{name} must be positive (> {eps}), got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

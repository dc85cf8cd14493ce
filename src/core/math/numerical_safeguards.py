"""
Numerical Safeguards: tolerances and safe scalar primitives

Модуль задаёт единственный источник истины для численных допусков
математического ядра (Complex, Matrix2x2, Vector3) и содержит
скалярные примитивы, на которых построены все толерантные сравнения:
- Epsilon-параметры (общий и "корневой" для sqrt/pow около нуля)
- Sentinel-значения для математически неопределённых точек
- Проверка NaN/Inf
- Epsilon-сравнения float
- Clamp и валидация входов оптического слоя

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ядро никогда не бросает исключений на числовом входе
2. Все сравнения принимают явный tolerance с именованным default
3. Магические числа допусков живут только в этом модуле
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Общий допуск для сравнений с нулём и равенства
EPSILON: Final[float] = 1e-12

# Допуск для sqrt/pow около начала координат.
# Эти операции усиливают относительную ошибку вблизи нуля, поэтому он грубее.
SQRT_EPSILON: Final[float] = 1e-6


# =============================================================================
# SENTINEL-ЗНАЧЕНИЯ
# =============================================================================

# Вещественная часть ln(0): большое отрицательное число вместо -inf,
# чтобы цепочки вычислений оставались конечными
LOG_ZERO_SENTINEL: Final[float] = -1e10


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, tol: float = EPSILON) -> bool:
    """
    Проверка, близко ли значение к нулю.

    Сравнение строгое: abs(value) < tol. Граница tol считается ненулевой,
    так же как в методах is_zero/equals ядра.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPSILON)

    Returns:
        True если abs(value) < tol

    Examples:
        >>> is_zero(1e-13)
        True
        >>> is_zero(1e-12)
        False
    """
    return abs(value) < tol


def is_close(a: float, b: float, tol: float = EPSILON) -> bool:
    """
    Абсолютное сравнение двух float: abs(a - b) < tol.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPSILON)

    Returns:
        True если значения близки
    """
    return abs(a - b) < tol


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Используется перед acos/asin, чтобы ошибка округления не выводила
    косинус за [-1, 1].

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(1.0000000000000002, -1.0, 1.0)
        1.0
        >>> clamp(-3.0, -1.0, 1.0)
        -1.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ (только для оптического слоя, не для ядра)
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

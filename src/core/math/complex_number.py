"""
Complex: complex numbers for optical physics

Комплексные амплитуды, фазовые множители e^(iφ), коэффициенты Френеля
(включая мнимые углы при полном внутреннем отражении), элементы матриц Джонса.

Две формы API:
- Объектный API: неизменяемый Complex, каждая операция возвращает новый экземпляр
- Скалярный API: свободные функции complex_* над парами (re, im) без создания
  объектов, для горячих циклов (per-pixel, per-frame цепочки матриц Джонса).
  Объектные методы являются тонкими обёртками над скалярными функциями.

ВЫРОЖДЕННЫЕ ТОЧКИ (sentinel вместо NaN/исключения):
    z / 0          → ZERO                 (нулевое пропускание)
    ln(0)          → (LOG_ZERO_SENTINEL, 0)
    0^n, n > 0     → ZERO
    0^n, n ≤ 0     → (inf, 0)
    0^w            → ZERO для любого комплексного w, включая 0^0
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Sequence, Union

from src.core.math.numerical_safeguards import (
    EPSILON,
    LOG_ZERO_SENTINEL,
    SQRT_EPSILON,
    is_close,
    is_valid_float,
    is_zero as is_near_zero,
)

Real = Union[int, float]


# =============================================================================
# СКАЛЯРНЫЙ API (без создания объектов)
# =============================================================================


def complex_add(r1: float, i1: float, r2: float, i2: float) -> tuple[float, float]:
    """Сложение (r1 + i1·i) + (r2 + i2·i) → (re, im)."""
    return (r1 + r2, i1 + i2)


def complex_sub(r1: float, i1: float, r2: float, i2: float) -> tuple[float, float]:
    """Вычитание (r1 + i1·i) - (r2 + i2·i) → (re, im)."""
    return (r1 - r2, i1 - i2)


def complex_mul(r1: float, i1: float, r2: float, i2: float) -> tuple[float, float]:
    """
    Умножение: (a+bi)(c+di) = (ac - bd) + (ad + bc)i

    Четыре умножения и два сложения.
    """
    return (r1 * r2 - i1 * i2, r1 * i2 + i1 * r2)


def complex_div(r1: float, i1: float, r2: float, i2: float) -> tuple[float, float]:
    """
    Деление: (a+bi)/(c+di) = [(ac + bd) + (bc - ad)i] / (c² + d²)

    Если |делитель|² < EPSILON, возвращается (0.0, 0.0).
    В оптике это соответствует бесконечному импедансу (нулевое пропускание);
    строгая математика дала бы NaN.

    Examples:
        >>> complex_div(1.0, 0.0, 0.0, 0.0)
        (0.0, 0.0)
    """
    denom = r2 * r2 + i2 * i2
    if denom < EPSILON:
        return (0.0, 0.0)
    return ((r1 * r2 + i1 * i2) / denom, (i1 * r2 - r1 * i2) / denom)


def complex_scale(r: float, i: float, k: float) -> tuple[float, float]:
    """Умножение на вещественный скаляр."""
    return (r * k, i * k)


def complex_conj(r: float, i: float) -> tuple[float, float]:
    """Комплексное сопряжение."""
    return (r, -i)


def complex_mag_sq(r: float, i: float) -> float:
    """Квадрат модуля |z|² = re² + im² (без sqrt)."""
    return r * r + i * i


# =============================================================================
# COMPLEX
# =============================================================================


@dataclass(frozen=True)
class Complex:
    """
    Неизменяемое комплексное число real + imag·i.

    NaN и Inf допустимы и распространяются по правилам IEEE-754.
    Точное равенство (==) сравнивает поля; толерантное равенство: equals().
    """

    real: float
    imag: float = 0.0

    ZERO: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    I: ClassVar["Complex"]

    # ========== Static factories ==========

    @staticmethod
    def from_polar(magnitude: float, phase: float) -> "Complex":
        """Полярная форма: r·e^(iθ) = r(cos θ + i sin θ)"""
        return Complex(magnitude * math.cos(phase), magnitude * math.sin(phase))

    @staticmethod
    def exp_i(theta: float) -> "Complex":
        """Фазовый множитель e^(iθ) = (cos θ, sin θ)"""
        return Complex(math.cos(theta), math.sin(theta))

    @staticmethod
    def from_array(arr: Sequence[float]) -> "Complex":
        """Создание из [real, imag]"""
        return Complex(float(arr[0]), float(arr[1]))

    # ========== Properties ==========

    @property
    def magnitude(self) -> float:
        """Модуль |z| = √(x² + y²)"""
        return math.sqrt(complex_mag_sq(self.real, self.imag))

    @property
    def magnitude_squared(self) -> float:
        """|z|² = x² + y², когда нужен только порядок сравнения"""
        return complex_mag_sq(self.real, self.imag)

    @property
    def phase(self) -> float:
        """Аргумент arg(z) = atan2(y, x) ∈ (-π, π]"""
        return math.atan2(self.imag, self.real)

    # ========== Arithmetic ==========

    def add(self, other: "Complex") -> "Complex":
        return Complex(*complex_add(self.real, self.imag, other.real, other.imag))

    def sub(self, other: "Complex") -> "Complex":
        return Complex(*complex_sub(self.real, self.imag, other.real, other.imag))

    def mul(self, other: "Complex") -> "Complex":
        return Complex(*complex_mul(self.real, self.imag, other.real, other.imag))

    def div(self, other: "Complex") -> "Complex":
        """Деление z₁ / z₂; при |z₂|² < EPSILON возвращает ZERO (см. complex_div)."""
        return Complex(*complex_div(self.real, self.imag, other.real, other.imag))

    def scale(self, k: float) -> "Complex":
        return Complex(*complex_scale(self.real, self.imag, k))

    def conjugate(self) -> "Complex":
        return Complex(*complex_conj(self.real, self.imag))

    def negate(self) -> "Complex":
        return Complex(-self.real, -self.imag)

    def __add__(self, other: "Complex") -> "Complex":
        return self.add(other)

    def __sub__(self, other: "Complex") -> "Complex":
        return self.sub(other)

    def __mul__(self, other: Union["Complex", Real]) -> "Complex":
        if isinstance(other, Complex):
            return self.mul(other)
        return self.scale(other)

    def __rmul__(self, other: Real) -> "Complex":
        return self.scale(other)

    def __truediv__(self, other: Union["Complex", Real]) -> "Complex":
        if isinstance(other, Complex):
            return self.div(other)
        return self.div(Complex(other, 0.0))

    def __neg__(self) -> "Complex":
        return self.negate()

    # ========== Transcendental ==========

    def exp(self) -> "Complex":
        """
        Комплексная экспонента: e^z = e^x·(cos y + i sin y)

        Фазовые множители и распространение волны.
        """
        exp_real = math.exp(self.real)
        return Complex(exp_real * math.cos(self.imag), exp_real * math.sin(self.imag))

    def sqrt(self) -> "Complex":
        """
        Главный квадратный корень: √z = √|z|·e^(i·arg(z)/2)

        Ветвь всегда главная (половина фазы из (-π, π]), на ней держится
        обработка полного внутреннего отражения в формулах Френеля.
        При |z| < SQRT_EPSILON возвращает ZERO.
        """
        mag = self.magnitude
        if mag < SQRT_EPSILON:
            return Complex.ZERO
        return Complex.from_polar(math.sqrt(mag), self.phase / 2)

    def log(self) -> "Complex":
        """
        Натуральный логарифм: ln z = ln|z| + i·arg(z), главное значение.

        При |z| < EPSILON возвращает (LOG_ZERO_SENTINEL, 0) вместо -inf.
        """
        mag = self.magnitude
        if mag < EPSILON:
            return Complex(LOG_ZERO_SENTINEL, 0.0)
        return Complex(math.log(mag), self.phase)

    def pow(self, n: float) -> "Complex":
        """
        Вещественная степень: z^n = |z|^n·e^(i·n·arg(z))

        Для дробных n используется главная ветвь: (-1)^(1/2) = i.
        n·arg(z) может выйти за (-π, π], cos/sin это корректно обрабатывают.
        При |z| < SQRT_EPSILON: ZERO для n > 0, иначе (inf, 0).
        """
        mag = self.magnitude
        if mag < SQRT_EPSILON:
            return Complex.ZERO if n > 0 else Complex(math.inf, 0.0)
        return Complex.from_polar(mag**n, self.phase * n)

    def pow_complex(self, exponent: "Complex") -> "Complex":
        """
        Комплексная степень: z₁^z₂ = e^(z₂·ln z₁)

        Нулевое основание (по is_zero) даёт ZERO для любого показателя.
        Строго 0^0 неопределено, а 0^w с Re(w) < 0 расходится; здесь оба случая
        сведены к ZERO как стабильный default для цепочек симуляции.
        """
        if self.is_zero():
            return Complex.ZERO
        return exponent.mul(self.log()).exp()

    # ========== Comparison ==========

    def is_zero(self, tolerance: float = EPSILON) -> bool:
        return is_near_zero(self.real, tolerance) and is_near_zero(self.imag, tolerance)

    def equals(self, other: "Complex", tolerance: float = EPSILON) -> bool:
        """Толерантное равенство по каждой компоненте (default: EPSILON)."""
        return is_close(self.real, other.real, tolerance) and is_close(
            self.imag, other.imag, tolerance
        )

    def is_real(self, tolerance: float = EPSILON) -> bool:
        return is_near_zero(self.imag, tolerance)

    def is_imaginary(self, tolerance: float = EPSILON) -> bool:
        return is_near_zero(self.real, tolerance)

    # ========== Numerical stability ==========

    def is_finite(self) -> bool:
        """
        Нет ли Inf/NaN в компонентах.

        Например, коэффициенты Френеля при скользящем падении могут уходить
        в бесконечность.
        """
        return is_valid_float(self.real) and is_valid_float(self.imag)

    def is_valid_physical_quantity(self) -> bool:
        """
        Конечная амплитуда с неотрицательным модулем.

        Для конечного числа всегда True; оставлено для assert в местах вызова.
        """
        return self.is_finite() and self.magnitude >= 0

    # ========== Utility ==========

    def clone(self) -> "Complex":
        return Complex(self.real, self.imag)

    def to_array(self) -> list[float]:
        """[real, imag] для сериализации"""
        return [self.real, self.imag]

    def to_string(self, precision: int = 4) -> str:
        """
        Отладочное представление с фиксированной точкой.

        Examples:
            >>> Complex(1, -2).to_string()
            '1.0000 - 2.0000i'
            >>> Complex(0, 3).to_string(2)
            '3.00i'
        """
        r = f"{self.real:.{precision}f}"
        i = f"{abs(self.imag):.{precision}f}"
        if self.is_zero():
            return "0"
        if self.is_real():
            return r
        if self.is_imaginary():
            return f"{i}i" if self.imag >= 0 else f"-{i}i"
        return f"{r} + {i}i" if self.imag >= 0 else f"{r} - {i}i"

    def __str__(self) -> str:
        return self.to_string()


Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
Complex.I = Complex(0.0, 1.0)

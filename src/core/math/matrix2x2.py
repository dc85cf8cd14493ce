"""
Matrix2x2: 2×2 complex matrices for Jones calculus

Матрица над Complex, строки a00/a01 и a10/a11. Используется для матриц
Джонса (преобразование состояния поляризации) и матриц когерентности.

Эрмитовость, унитарность и положительная полуопределённость являются
производными свойствами (предикаты is_*), а не инвариантами конструктора.

inverse() возвращает None для сингулярной матрицы: отсутствие обратной
является нормальным исходом, а не ошибкой.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Union

from src.core.math.complex_number import Complex
from src.core.math.numerical_safeguards import EPSILON

MatrixEntry = Union[Complex, Sequence[float]]


def _as_complex(entry: MatrixEntry) -> Complex:
    if isinstance(entry, Complex):
        return entry
    return Complex.from_array(entry)


@dataclass(frozen=True)
class Matrix2x2:
    """
    Неизменяемая 2×2 комплексная матрица [[a00, a01], [a10, a11]].
    """

    a00: Complex
    a01: Complex
    a10: Complex
    a11: Complex

    ZERO: ClassVar["Matrix2x2"]
    IDENTITY: ClassVar["Matrix2x2"]

    # ========== Static factories ==========

    @staticmethod
    def from_real(a: float, b: float, c: float, d: float) -> "Matrix2x2":
        """[[a, b], [c, d]] с нулевыми мнимыми частями"""
        return Matrix2x2(
            Complex(float(a)), Complex(float(b)), Complex(float(c)), Complex(float(d))
        )

    @staticmethod
    def diagonal(d0: Complex, d1: Complex) -> "Matrix2x2":
        return Matrix2x2(d0, Complex.ZERO, Complex.ZERO, d1)

    @staticmethod
    def scaled_identity(k: Complex) -> "Matrix2x2":
        """k·I"""
        return Matrix2x2(k, Complex.ZERO, Complex.ZERO, k)

    @staticmethod
    def hermitian(a00_real: float, a01: Complex, a11_real: float) -> "Matrix2x2":
        """
        Эрмитова по построению матрица [[a00, a01], [conj(a01), a11]].

        Диагональ вещественная, a10 = conj(a01).
        """
        return Matrix2x2(Complex(a00_real), a01, a01.conjugate(), Complex(a11_real))

    @staticmethod
    def from_array(rows: Sequence[Sequence[MatrixEntry]]) -> "Matrix2x2":
        """
        Создание из вложенного 2×2 массива.

        Элементы могут быть Complex или парами [real, imag].
        """
        return Matrix2x2(
            _as_complex(rows[0][0]),
            _as_complex(rows[0][1]),
            _as_complex(rows[1][0]),
            _as_complex(rows[1][1]),
        )

    # ========== Element access ==========

    def get(self, i: int, j: int) -> Complex:
        """Элемент (i, j); IndexError вне диапазона 0..1."""
        return self.to_array()[i][j]

    def to_array(self) -> list[list[Complex]]:
        return [[self.a00, self.a01], [self.a10, self.a11]]

    # ========== Arithmetic ==========

    def add(self, other: "Matrix2x2") -> "Matrix2x2":
        return Matrix2x2(
            self.a00.add(other.a00),
            self.a01.add(other.a01),
            self.a10.add(other.a10),
            self.a11.add(other.a11),
        )

    def sub(self, other: "Matrix2x2") -> "Matrix2x2":
        return Matrix2x2(
            self.a00.sub(other.a00),
            self.a01.sub(other.a01),
            self.a10.sub(other.a10),
            self.a11.sub(other.a11),
        )

    def scale(self, k: float) -> "Matrix2x2":
        return Matrix2x2(
            self.a00.scale(k), self.a01.scale(k), self.a10.scale(k), self.a11.scale(k)
        )

    def scale_complex(self, k: Complex) -> "Matrix2x2":
        return Matrix2x2(self.a00.mul(k), self.a01.mul(k), self.a10.mul(k), self.a11.mul(k))

    def mul(self, other: "Matrix2x2") -> "Matrix2x2":
        """
        Матричное произведение self × other.

        Порядок важен: для цепочки элементов Джонса свет сначала проходит
        через правый множитель.
        """
        return Matrix2x2(
            self.a00.mul(other.a00).add(self.a01.mul(other.a10)),
            self.a00.mul(other.a01).add(self.a01.mul(other.a11)),
            self.a10.mul(other.a00).add(self.a11.mul(other.a10)),
            self.a10.mul(other.a01).add(self.a11.mul(other.a11)),
        )

    def apply(self, v0: Complex, v1: Complex) -> tuple[Complex, Complex]:
        """Умножение на столбец (v0, v1)ᵀ"""
        return (
            self.a00.mul(v0).add(self.a01.mul(v1)),
            self.a10.mul(v0).add(self.a11.mul(v1)),
        )

    def __add__(self, other: "Matrix2x2") -> "Matrix2x2":
        return self.add(other)

    def __sub__(self, other: "Matrix2x2") -> "Matrix2x2":
        return self.sub(other)

    def __matmul__(self, other: "Matrix2x2") -> "Matrix2x2":
        return self.mul(other)

    # ========== Properties ==========

    def trace(self) -> Complex:
        return self.a00.add(self.a11)

    def determinant(self) -> Complex:
        """det = a00·a11 - a01·a10"""
        return self.a00.mul(self.a11).sub(self.a01.mul(self.a10))

    def frobenius_norm(self) -> float:
        """√(Σ|aij|²), вещественная и неотрицательная"""
        return math.sqrt(
            self.a00.magnitude_squared
            + self.a01.magnitude_squared
            + self.a10.magnitude_squared
            + self.a11.magnitude_squared
        )

    # ========== Transformations ==========

    def transpose(self) -> "Matrix2x2":
        return Matrix2x2(self.a00, self.a10, self.a01, self.a11)

    def conjugate(self) -> "Matrix2x2":
        return Matrix2x2(
            self.a00.conjugate(),
            self.a01.conjugate(),
            self.a10.conjugate(),
            self.a11.conjugate(),
        )

    def adjoint(self) -> "Matrix2x2":
        """Эрмитово сопряжение A† = (A*)ᵀ"""
        return Matrix2x2(
            self.a00.conjugate(),
            self.a10.conjugate(),
            self.a01.conjugate(),
            self.a11.conjugate(),
        )

    def inverse(self) -> Optional["Matrix2x2"]:
        """
        Обратная матрица (1/det)·[[a11, -a01], [-a10, a00]].

        Returns:
            None если |det| <= EPSILON (точный ноль и почти сингулярные матрицы).
            Порог абсолютный: матрица из равномерно малых элементов тоже
            считается сингулярной.
        """
        det = self.determinant()
        if det.magnitude <= EPSILON:
            return None
        # 1/det = conj(det) / |det|²; Complex.div даёт ZERO уже при |det|² < EPSILON
        inv_det = det.conjugate().scale(1.0 / det.magnitude_squared)
        return Matrix2x2(
            self.a11.mul(inv_det),
            self.a01.negate().mul(inv_det),
            self.a10.negate().mul(inv_det),
            self.a00.mul(inv_det),
        )

    # ========== Predicates ==========

    def is_hermitian(self, tolerance: float = EPSILON) -> bool:
        """Диагональ вещественная и a01 = conj(a10)"""
        return (
            self.a00.is_real(tolerance)
            and self.a11.is_real(tolerance)
            and self.a01.equals(self.a10.conjugate(), tolerance)
        )

    def is_unitary(self, tolerance: float = EPSILON) -> bool:
        """A·A† ≈ I (оператор без потерь)"""
        return self.mul(self.adjoint()).equals(Matrix2x2.IDENTITY, tolerance)

    def is_positive_semi_definite(self, tolerance: float = EPSILON) -> bool:
        """
        Для эрмитовой 2×2 матрицы PSD ⇔ tr ≥ 0 и det ≥ 0.

        Неэрмитова матрица отвергается сразу.
        """
        if not self.is_hermitian(tolerance):
            return False
        return self.trace().real >= -tolerance and self.determinant().real >= -tolerance

    def is_zero(self, tolerance: float = EPSILON) -> bool:
        return (
            self.a00.is_zero(tolerance)
            and self.a01.is_zero(tolerance)
            and self.a10.is_zero(tolerance)
            and self.a11.is_zero(tolerance)
        )

    def equals(self, other: "Matrix2x2", tolerance: float = EPSILON) -> bool:
        return (
            self.a00.equals(other.a00, tolerance)
            and self.a01.equals(other.a01, tolerance)
            and self.a10.equals(other.a10, tolerance)
            and self.a11.equals(other.a11, tolerance)
        )

    # ========== Utility ==========

    def clone(self) -> "Matrix2x2":
        return Matrix2x2(self.a00, self.a01, self.a10, self.a11)

    def to_string(self, precision: int = 4) -> str:
        def fmt(c: Complex) -> str:
            # Для матрицы нулевой элемент показывается с той же точностью
            if c.is_zero():
                return f"{0.0:.{precision}f}"
            return c.to_string(precision)

        return (
            f"[[{fmt(self.a00)}, {fmt(self.a01)}], "
            f"[{fmt(self.a10)}, {fmt(self.a11)}]]"
        )

    def __str__(self) -> str:
        return self.to_string()


Matrix2x2.ZERO = Matrix2x2(Complex.ZERO, Complex.ZERO, Complex.ZERO, Complex.ZERO)
Matrix2x2.IDENTITY = Matrix2x2(Complex.ONE, Complex.ZERO, Complex.ZERO, Complex.ONE)


# =============================================================================
# JONES-CALCULUS FACTORIES
# =============================================================================


def jones_linear_polarizer(theta: float) -> Matrix2x2:
    """
    Линейный поляризатор с осью пропускания под углом θ.

    Проектор P(θ) = u·uᵀ, u = (cos θ, sin θ):
        [[cos²θ,      cosθ·sinθ],
         [cosθ·sinθ,  sin²θ    ]]

    Эрмитов и идемпотентен: P² = P.
    """
    c = math.cos(theta)
    s = math.sin(theta)
    return Matrix2x2.from_real(c * c, c * s, c * s, s * s)


def jones_rotator(theta: float) -> Matrix2x2:
    """
    Матрица поворота [[cos θ, -sin θ], [sin θ, cos θ]] с нулевыми мнимыми частями.

    Унитарна; R(θ)·R(φ) = R(θ + φ).
    """
    c = math.cos(theta)
    s = math.sin(theta)
    return Matrix2x2.from_real(c, -s, s, c)


def jones_wave_plate(retardance: float, fast_axis_angle: float) -> Matrix2x2:
    """
    Фазовая пластинка: R(θ)·diag(1, e^(iδ))·R(-θ).

    Собственный базис диагонального фазосдвигателя поворачивается к углу
    быстрой оси. Унитарна для любых δ, θ.

    Args:
        retardance: Фазовая задержка δ (π/2 для λ/4, π для λ/2)
        fast_axis_angle: Угол быстрой оси θ
    """
    retarder = Matrix2x2.diagonal(Complex.ONE, Complex.exp_i(retardance))
    return (
        jones_rotator(fast_axis_angle)
        .mul(retarder)
        .mul(jones_rotator(-fast_axis_angle))
    )

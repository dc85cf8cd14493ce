"""
Polarization — векторы Джонса, параметры Стокса, матрицы когерентности

Чистые (полностью поляризованные) состояния описываются вектором Джонса
(Ex, Ey). Частично поляризованный и неполяризованный свет описывается
эрмитовой положительно полуопределённой матрицей когерентности
C = <E·E†>, которая преобразуется элементом Джонса J как C' = J·C·J†.

Конвенции:
    C01 = <Ex·conj(Ey)>
    S0 = C00 + C11,  S1 = C00 - C11,  S2 = 2·Re(C01),  S3 = 2·Im(C01)
    RIGHT_CIRCULAR = (1, -i)/√2  →  S3 = +1
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar, NamedTuple, Sequence

from src.core.contracts.validators import validate_jones_vector
from src.core.math.complex_number import Complex
from src.core.math.matrix2x2 import Matrix2x2
from src.core.math.numerical_safeguards import EPSILON, validate_non_negative

# Допуск эрмитовости при создании матрицы когерентности (относительно ||C||)
HERMITIAN_TOLERANCE = 1e-9


# =============================================================================
# STOKES PARAMETERS
# =============================================================================


class StokesParameters(NamedTuple):
    """Параметры Стокса (S0, S1, S2, S3)."""

    s0: float
    s1: float
    s2: float
    s3: float

    @property
    def polarized_intensity(self) -> float:
        return math.sqrt(self.s1 * self.s1 + self.s2 * self.s2 + self.s3 * self.s3)

    @property
    def degree_of_polarization(self) -> float:
        """√(S1² + S2² + S3²) / S0; 0 для нулевой интенсивности."""
        if self.s0 < EPSILON:
            return 0.0
        return self.polarized_intensity / self.s0


# =============================================================================
# JONES VECTOR
# =============================================================================


@dataclass(frozen=True)
class JonesVector:
    """Полностью поляризованное состояние (Ex, Ey)."""

    ex: Complex
    ey: Complex

    ZERO: ClassVar["JonesVector"]

    @staticmethod
    def from_array(arr: Sequence[Sequence[float]]) -> "JonesVector":
        """Создание из [[re, im], [re, im]]"""
        return JonesVector(Complex.from_array(arr[0]), Complex.from_array(arr[1]))

    @staticmethod
    def from_payload(data: Any) -> "JonesVector":
        """
        Декодирование payload с проверкой контракта jones_vector.json.

        Raises:
            ValidationError: Если payload не соответствует схеме
        """
        validate_jones_vector(data)
        return JonesVector.from_array(data)

    @property
    def intensity(self) -> float:
        return self.ex.magnitude_squared + self.ey.magnitude_squared

    def normalize(self) -> "JonesVector":
        """Единичная интенсивность; нулевой вектор возвращается как ZERO."""
        intensity = self.intensity
        if intensity < EPSILON:
            return JonesVector.ZERO
        k = 1.0 / math.sqrt(intensity)
        return JonesVector(self.ex.scale(k), self.ey.scale(k))

    def apply(self, matrix: Matrix2x2) -> "JonesVector":
        """Прохождение через элемент Джонса: E' = J·E"""
        ex, ey = matrix.apply(self.ex, self.ey)
        return JonesVector(ex, ey)

    def inner(self, other: "JonesVector") -> Complex:
        """Скалярное произведение <self|other> (сопряжение слева)."""
        return self.ex.conjugate().mul(other.ex).add(self.ey.conjugate().mul(other.ey))

    def stokes(self) -> StokesParameters:
        cross = self.ex.mul(self.ey.conjugate())
        ix = self.ex.magnitude_squared
        iy = self.ey.magnitude_squared
        return StokesParameters(ix + iy, ix - iy, 2.0 * cross.real, 2.0 * cross.imag)

    def equals(self, other: "JonesVector", tolerance: float = EPSILON) -> bool:
        return self.ex.equals(other.ex, tolerance) and self.ey.equals(other.ey, tolerance)

    def to_array(self) -> list[list[float]]:
        return [self.ex.to_array(), self.ey.to_array()]

    def to_string(self, precision: int = 4) -> str:
        return f"JonesVector({self.ex.to_string(precision)}, {self.ey.to_string(precision)})"

    def __str__(self) -> str:
        return self.to_string()


JonesVector.ZERO = JonesVector(Complex.ZERO, Complex.ZERO)

_INV_SQRT2 = 1.0 / math.sqrt(2.0)

HORIZONTAL = JonesVector(Complex.ONE, Complex.ZERO)
VERTICAL = JonesVector(Complex.ZERO, Complex.ONE)
DIAGONAL = JonesVector(Complex(_INV_SQRT2), Complex(_INV_SQRT2))
ANTIDIAGONAL = JonesVector(Complex(_INV_SQRT2), Complex(-_INV_SQRT2))
RIGHT_CIRCULAR = JonesVector(Complex(_INV_SQRT2), Complex(0.0, -_INV_SQRT2))
LEFT_CIRCULAR = JonesVector(Complex(_INV_SQRT2), Complex(0.0, _INV_SQRT2))


def linear_polarization(theta: float) -> JonesVector:
    """Линейная поляризация под углом θ к горизонтали."""
    return JonesVector(Complex(math.cos(theta)), Complex(math.sin(theta)))


def malus_law(intensity: float, theta: float) -> float:
    """
    Закон Малюса: I = I0·cos²θ

    Raises:
        ValueError: Если intensity отрицательна или NaN/Inf
    """
    validate_non_negative(intensity, "intensity")
    c = math.cos(theta)
    return intensity * c * c


# =============================================================================
# COHERENCY MATRIX
# =============================================================================


def _hermitian_part(m: Matrix2x2) -> Matrix2x2:
    # Симметризация убирает шум округления после J·C·J†
    a01 = m.a01.add(m.a10.conjugate()).scale(0.5)
    return Matrix2x2.hermitian(m.a00.real, a01, m.a11.real)


@dataclass(frozen=True)
class CoherencyMatrix:
    """
    Матрица когерентности 2×2 (эрмитова).

    Raises:
        ValueError: При создании из неэрмитовой матрицы
    """

    matrix: Matrix2x2

    UNPOLARIZED: ClassVar["CoherencyMatrix"]

    def __post_init__(self) -> None:
        tolerance = HERMITIAN_TOLERANCE * max(1.0, self.matrix.frobenius_norm())
        if not self.matrix.is_hermitian(tolerance):
            raise ValueError(
                f"Coherency matrix must be Hermitian, got {self.matrix.to_string()}"
            )

    @staticmethod
    def from_jones_vector(vector: JonesVector) -> "CoherencyMatrix":
        """C = E·E† для полностью поляризованного света."""
        return CoherencyMatrix(
            Matrix2x2.hermitian(
                vector.ex.magnitude_squared,
                vector.ex.mul(vector.ey.conjugate()),
                vector.ey.magnitude_squared,
            )
        )

    @staticmethod
    def from_stokes(stokes: StokesParameters) -> "CoherencyMatrix":
        """C = ½·[[S0 + S1, S2 + iS3], [S2 - iS3, S0 - S1]]"""
        s0, s1, s2, s3 = stokes
        return CoherencyMatrix(
            Matrix2x2.hermitian(0.5 * (s0 + s1), Complex(0.5 * s2, 0.5 * s3), 0.5 * (s0 - s1))
        )

    @staticmethod
    def unpolarized(intensity: float = 1.0) -> "CoherencyMatrix":
        """
        Неполяризованный свет: C = (I/2)·E

        Raises:
            ValueError: Если intensity отрицательна
        """
        validate_non_negative(intensity, "intensity")
        return CoherencyMatrix(Matrix2x2.scaled_identity(Complex(0.5 * intensity)))

    @property
    def intensity(self) -> float:
        return self.matrix.trace().real

    def stokes(self) -> StokesParameters:
        c = self.matrix
        return StokesParameters(
            c.a00.real + c.a11.real,
            c.a00.real - c.a11.real,
            2.0 * c.a01.real,
            2.0 * c.a01.imag,
        )

    def degree_of_polarization(self) -> float:
        return self.stokes().degree_of_polarization

    def transform(self, jones: Matrix2x2) -> "CoherencyMatrix":
        """C' = J·C·J†"""
        return CoherencyMatrix(_hermitian_part(jones.mul(self.matrix).mul(jones.adjoint())))

    def add(self, other: "CoherencyMatrix") -> "CoherencyMatrix":
        """Некогерентное сложение пучков."""
        return CoherencyMatrix(self.matrix.add(other.matrix))

    def is_physical(self, tolerance: float = EPSILON) -> bool:
        """Эрмитова и положительно полуопределённая."""
        return self.matrix.is_positive_semi_definite(tolerance)


CoherencyMatrix.UNPOLARIZED = CoherencyMatrix.unpolarized(1.0)

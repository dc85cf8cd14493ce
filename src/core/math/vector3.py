"""
Vector3: real 3D vectors for ray and polarization-basis geometry

Неизменяемый вектор (x, y, z): алгебра, отражение/преломление лучей,
проекции, интерполяция на единичной сфере.

Вырожденные случаи не бросают исключений:
- normalize() нулевого вектора → ZERO (или fallback в normalize_or)
- refract() при полном внутреннем отражении → None
- angle_to() с нулевым вектором → 0
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

from src.core.math.numerical_safeguards import (
    EPSILON,
    SQRT_EPSILON,
    clamp,
    is_close,
    is_zero as is_near_zero,
)


@dataclass(frozen=True)
class Vector3:
    """Неизменяемый вещественный 3D вектор."""

    x: float
    y: float
    z: float

    ZERO: ClassVar["Vector3"]
    X: ClassVar["Vector3"]
    Y: ClassVar["Vector3"]
    Z: ClassVar["Vector3"]
    NEG_X: ClassVar["Vector3"]
    NEG_Y: ClassVar["Vector3"]
    NEG_Z: ClassVar["Vector3"]

    # ========== Static factories ==========

    @staticmethod
    def from_array(arr: Sequence[float]) -> "Vector3":
        return Vector3(float(arr[0]), float(arr[1]), float(arr[2]))

    @staticmethod
    def from_spherical(theta: float, phi: float) -> "Vector3":
        """
        Единичный вектор из сферических координат.

        Args:
            theta: Полярный угол от оси +Z (theta=0 даёт ровно (0, 0, 1))
            phi: Азимут от оси +X в плоскости XY
        """
        sin_theta = math.sin(theta)
        return Vector3(
            sin_theta * math.cos(phi),
            sin_theta * math.sin(phi),
            math.cos(theta),
        )

    # ========== Properties ==========

    @property
    def length(self) -> float:
        return math.sqrt(self.length_squared)

    @property
    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    # ========== Arithmetic ==========

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, k: float) -> "Vector3":
        return Vector3(self.x * k, self.y * k, self.z * k)

    def negate(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Векторное произведение (правая тройка: X × Y = Z).

        Антикоммутативно; для параллельных векторов даёт ZERO.
        """
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.sub(other)

    def __mul__(self, k: float) -> "Vector3":
        return self.scale(k)

    def __rmul__(self, k: float) -> "Vector3":
        return self.scale(k)

    def __neg__(self) -> "Vector3":
        return self.negate()

    # ========== Normalization ==========

    def normalize(self) -> "Vector3":
        """Единичный вектор того же направления; ZERO для нулевого вектора."""
        return self.normalize_or(Vector3.ZERO)

    def normalize_or(self, fallback: "Vector3") -> "Vector3":
        """Как normalize(), но для нулевого вектора возвращает fallback."""
        length = self.length
        if length < EPSILON:
            return fallback
        return self.scale(1.0 / length)

    # ========== Geometry ==========

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Зеркальное отражение: v - 2(v·n)n

        Нормаль должна быть единичной (ответственность вызывающего).
        """
        return self.sub(normal.scale(2.0 * self.dot(normal)))

    def refract(self, normal: "Vector3", eta: float) -> Optional["Vector3"]:
        """
        Преломление по закону Снеллиуса.

        Args:
            normal: Единичная нормаль поверхности. Если она смотрит в ту же
                сторону, что и падающий луч, она разворачивается.
            eta: n_падающей / n_прошедшей среды

        Returns:
            Единичное направление преломлённого луча или None при полном
            внутреннем отражении (отрицательный дискриминант).
        """
        incident = self.normalize()
        cos_i = -incident.dot(normal)
        if cos_i < 0:
            normal = normal.negate()
            cos_i = -cos_i

        k = 1.0 - eta * eta * (1.0 - cos_i * cos_i)
        if k < 0:
            return None

        refracted = incident.scale(eta).add(normal.scale(eta * cos_i - math.sqrt(k)))
        return refracted.normalize()

    def project_onto(self, target: "Vector3") -> "Vector3":
        """Составляющая вдоль target; ZERO для нулевого target."""
        denom = target.length_squared
        if denom < EPSILON:
            return Vector3.ZERO
        return target.scale(self.dot(target) / denom)

    def perpendicular(self, target: "Vector3") -> "Vector3":
        """Составляющая, ортогональная target: v - proj(v)."""
        return self.sub(self.project_onto(target))

    def angle_to(self, other: "Vector3") -> float:
        """Угол в [0, π]; 0 если любой из векторов нулевой."""
        denom = self.length * other.length
        if denom < EPSILON:
            return 0.0
        return math.acos(clamp(self.dot(other) / denom, -1.0, 1.0))

    # ========== Comparison ==========

    def is_parallel(self, other: "Vector3", tolerance: float = EPSILON) -> bool:
        """|a × b| ≤ tol·|a|·|b|; антипараллельные тоже считаются параллельными."""
        return self.cross(other).length <= tolerance * self.length * other.length

    def is_perpendicular(self, other: "Vector3", tolerance: float = EPSILON) -> bool:
        """|a · b| ≤ tol·|a|·|b|"""
        return abs(self.dot(other)) <= tolerance * self.length * other.length

    def equals(self, other: "Vector3", tolerance: float = EPSILON) -> bool:
        return (
            is_close(self.x, other.x, tolerance)
            and is_close(self.y, other.y, tolerance)
            and is_close(self.z, other.z, tolerance)
        )

    def is_zero(self, tolerance: float = EPSILON) -> bool:
        return (
            is_near_zero(self.x, tolerance)
            and is_near_zero(self.y, tolerance)
            and is_near_zero(self.z, tolerance)
        )

    def is_normalized(self, tolerance: float = EPSILON) -> bool:
        return is_close(self.length_squared, 1.0, tolerance)

    # ========== Interpolation ==========

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def slerp(self, other: "Vector3", t: float) -> "Vector3":
        """
        Сферическая интерполяция единичных направлений.

        t=0 → self, t=1 → other. Для почти (анти)параллельных векторов
        sin(угла) в знаменателе близок к нулю, поэтому используется lerp.
        """
        if t == 0:
            return self
        if t == 1:
            return other

        angle = self.angle_to(other)
        sin_angle = math.sin(angle)
        if sin_angle < SQRT_EPSILON:
            return self.lerp(other, t)

        w_self = math.sin((1.0 - t) * angle) / sin_angle
        w_other = math.sin(t * angle) / sin_angle
        return self.scale(w_self).add(other.scale(w_other))

    # ========== Utility ==========

    def clone(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z]

    def to_string(self, precision: int = 4) -> str:
        return (
            f"Vector3({self.x:.{precision}f}, "
            f"{self.y:.{precision}f}, {self.z:.{precision}f})"
        )

    def __str__(self) -> str:
        return self.to_string()


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.X = Vector3(1.0, 0.0, 0.0)
Vector3.Y = Vector3(0.0, 1.0, 0.0)
Vector3.Z = Vector3(0.0, 0.0, 1.0)
Vector3.NEG_X = Vector3(-1.0, 0.0, 0.0)
Vector3.NEG_Y = Vector3(0.0, -1.0, 0.0)
Vector3.NEG_Z = Vector3(0.0, 0.0, -1.0)


# =============================================================================
# FREE FUNCTIONS
# =============================================================================


def build_orthonormal_basis(normal: Vector3) -> tuple[Vector3, Vector3]:
    """
    Ортонормированный базис (t1, t2) касательной плоскости к normal.

    t1, t2 единичные, взаимно перпендикулярны, перпендикулярны normal,
    и normal × t1 = t2 (правая тройка). Используется для s/p базиса
    поляризации на поверхности.
    """
    n = normal.normalize_or(Vector3.Z)
    helper = Vector3.X if abs(n.x) < 0.9 else Vector3.Y
    t1 = n.cross(helper).normalize()
    t2 = n.cross(t1)
    return t1, t2


def rotate_around_axis(v: Vector3, axis: Vector3, angle: float) -> Vector3:
    """
    Поворот v вокруг axis на angle (формула Родрига):

        v_rot = v·cos θ + (k × v)·sin θ + k·(k·v)·(1 - cos θ)

    Вектор, параллельный оси, не меняется; период по angle равен 2π.
    Нулевая ось оставляет v без изменений.
    """
    k = axis.normalize()
    if k.is_zero():
        return v
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (
        v.scale(cos_a)
        .add(k.cross(v).scale(sin_a))
        .add(k.scale(k.dot(v) * (1.0 - cos_a)))
    )


def signed_angle(v1: Vector3, v2: Vector3, axis: Vector3) -> float:
    """
    Угол от v1 к v2 в плоскости, перпендикулярной axis, в (-π, π].

    Знак по правилу правой руки вокруг axis: положителен, если поворот
    v1 → v2 идёт против часовой стрелки при взгляде с конца axis.
    """
    k = axis.normalize()
    p1 = v1.perpendicular(k)
    p2 = v2.perpendicular(k)
    return math.atan2(k.dot(p1.cross(p2)), p1.dot(p2))

"""
Geometric optics — закон Снеллиуса и взаимодействие луча с границей

Скалярные функции работают с углами в радианах; пересчёт в градусы
остаётся на стороне вызывающего (math.degrees / math.radians).
Полное внутреннее отражение возвращается как None, а не как исключение.
"""

import math
from typing import NamedTuple, Optional

from src.core.domain.media import OpticalInterface
from src.core.math.vector3 import Vector3, build_orthonormal_basis


# =============================================================================
# SNELL'S LAW
# =============================================================================


def refraction_angle(theta_i: float, n1: float, n2: float) -> Optional[float]:
    """
    Угол преломления по закону Снеллиуса: n1·sin θ1 = n2·sin θ2

    Args:
        theta_i: Угол падения (радианы)
        n1: Показатель преломления среды падения
        n2: Показатель преломления среды пропускания

    Returns:
        Угол преломления (радианы) или None при полном внутреннем отражении

    Raises:
        ValidationError: Если n1 или n2 не положительны
    """
    interface = OpticalInterface(n1=n1, n2=n2)
    sin_t = interface.relative_index * math.sin(theta_i)
    if abs(sin_t) > 1.0:
        return None
    return math.asin(sin_t)


def critical_angle(n1: float, n2: float) -> Optional[float]:
    """
    Критический угол ПВО (радианы); None если n1 <= n2.

    Raises:
        ValidationError: Если n1 или n2 не положительны
    """
    return OpticalInterface(n1=n1, n2=n2).critical_angle()


def brewster_angle(n1: float, n2: float) -> float:
    """
    Угол Брюстера tan θB = n2 / n1 (радианы).

    Raises:
        ValidationError: Если n1 или n2 не положительны
    """
    return OpticalInterface(n1=n1, n2=n2).brewster_angle()


# =============================================================================
# 3D RAY / INTERFACE INTERACTION
# =============================================================================


class RayInteraction(NamedTuple):
    """Результат взаимодействия луча с границей."""

    reflected: Vector3
    refracted: Optional[Vector3]
    incidence_angle: float
    total_internal_reflection: bool


def _facing_normal(direction: Vector3, normal: Vector3) -> Vector3:
    # Нормаль разворачивается навстречу падающему лучу
    n = normal.normalize()
    return n.negate() if direction.dot(n) > 0 else n


def trace_interface(
    direction: Vector3,
    normal: Vector3,
    interface: OpticalInterface,
) -> RayInteraction:
    """
    Отражённый и преломлённый лучи на границе interface.

    Args:
        direction: Направление падающего луча (нормируется)
        normal: Нормаль поверхности (любая ориентация)
        interface: Граница n1 → n2

    Returns:
        RayInteraction; refracted = None при полном внутреннем отражении
    """
    d = direction.normalize()
    n = _facing_normal(d, normal)
    refracted = d.refract(n, interface.relative_index)
    return RayInteraction(
        reflected=d.reflect(n),
        refracted=refracted,
        incidence_angle=d.negate().angle_to(n),
        total_internal_reflection=refracted is None,
    )


def sp_basis(direction: Vector3, normal: Vector3) -> tuple[Vector3, Vector3]:
    """
    Базис s/p поляризации для луча direction на поверхности с нормалью normal.

    s перпендикулярна плоскости падения, p лежит в ней, (s, p, direction)
    образуют правую тройку. При нормальном падении плоскость падения не
    определена, и s берётся из build_orthonormal_basis(direction).
    """
    d = direction.normalize()
    n = _facing_normal(d, normal)
    s = d.cross(n).normalize()
    if s.is_zero():
        s, _ = build_orthonormal_basis(d)
    p = d.cross(s)
    return s, p

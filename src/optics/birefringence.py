"""
Birefringence — двулучепреломление в одноосных кристаллах

Обыкновенный луч преломляется по закону Снеллиуса с n_o. Необыкновенный
луч видит эффективный показатель эллипсоида показателей:

    1/n_e(θ)² = cos²θ/n_o² + sin²θ/n_e²

где θ: угол между направлением распространения и оптической осью.
Свет падает из воздуха (n = 1), граница кристалла: плоскость y = 0,
лучи идут в плоскости XY. Все углы в радианах.
"""

import math
from typing import Final, NamedTuple

from src.core.domain.media import (
    BIREFRINGENT_MATERIALS,
    BirefringentMaterial,
    OpticalInterface,
)
from src.core.math.matrix2x2 import Matrix2x2, jones_wave_plate
from src.core.math.numerical_safeguards import clamp, validate_non_negative
from src.core.math.vector3 import Vector3


# =============================================================================
# CONSTANTS
# =============================================================================

INCIDENT_INDEX: Final[float] = 1.0

CALCITE: Final[BirefringentMaterial] = BIREFRINGENT_MATERIALS["calcite"]

# Поперечный снос e-луча на схеме хода лучей (доля длины луча на sin поворота)
E_RAY_DISPLACEMENT: Final[float] = 0.3

# Смещения двойного изображения на единицу расстояния
O_IMAGE_OFFSET: Final[float] = 0.4
E_IMAGE_OFFSET: Final[float] = -0.3
IMAGE_SWING: Final[float] = 0.1


# =============================================================================
# EFFECTIVE INDEX / WALK-OFF
# =============================================================================


def effective_extraordinary_index(n_o: float, n_e: float, theta: float) -> float:
    """
    Эффективный показатель необыкновенного луча.

    Равен n_o вдоль оптической оси (θ = 0) и n_e поперёк неё (θ = π/2).

    Args:
        n_o: Показатель обыкновенного луча
        n_e: Главный показатель необыкновенного луча
        theta: Угол к оптической оси (радианы)
    """
    c = math.cos(theta)
    s = math.sin(theta)
    return 1.0 / math.sqrt(c * c / (n_o * n_o) + s * s / (n_e * n_e))


def _refraction_from_air(theta_i: float, n: float) -> float:
    interface = OpticalInterface(n1=INCIDENT_INDEX, n2=n)
    return math.asin(clamp(interface.relative_index * math.sin(theta_i), -1.0, 1.0))


class BirefringentRefraction(NamedTuple):
    """Углы преломления o- и e-лучей (радианы)."""

    theta_o: float
    theta_e: float

    @property
    def walk_off_angle(self) -> float:
        """Угол расхождения лучей |θe - θo|."""
        return abs(self.theta_e - self.theta_o)


def birefringent_refraction(
    theta_i: float,
    optic_axis_angle: float,
    material: BirefringentMaterial = CALCITE,
) -> BirefringentRefraction:
    """
    Преломление неполяризованного луча на входе в кристалл.

    Args:
        theta_i: Угол падения из воздуха (радианы)
        optic_axis_angle: Поворот оптической оси кристалла (радианы)
        material: Кристалл (по умолчанию кальцит)
    """
    n_eff = effective_extraordinary_index(material.n_o, material.n_e, optic_axis_angle)
    return BirefringentRefraction(
        theta_o=_refraction_from_air(theta_i, material.n_o),
        theta_e=_refraction_from_air(theta_i, n_eff),
    )


def walk_off_angle(
    theta_i: float,
    optic_axis_angle: float,
    material: BirefringentMaterial = CALCITE,
) -> float:
    """Угол между o- и e-лучами внутри кристалла (радианы)."""
    return birefringent_refraction(theta_i, optic_axis_angle, material).walk_off_angle


# =============================================================================
# RAY PATHS / DOUBLE IMAGE
# =============================================================================


class BirefringenceRayPaths(NamedTuple):
    """Ход лучей: падающий отрезок и концы o- и e-лучей от точки входа."""

    incident_start: Vector3
    incident_end: Vector3
    o_ray_end: Vector3
    e_ray_end: Vector3
    theta_o: float
    theta_e: float
    walk_off_angle: float


def birefringence_ray_paths(
    theta_i: float,
    optic_axis_angle: float,
    material: BirefringentMaterial = CALCITE,
    ray_length: float = 3.0,
) -> BirefringenceRayPaths:
    """
    Геометрия расщепления луча на границе кристалла.

    Точка входа: начало координат; падающий луч приходит сверху (y > 0),
    преломлённые уходят вниз. e-луч дополнительно сносится вдоль X и Z
    пропорционально sin поворота оптической оси.

    Raises:
        ValueError: Если ray_length < 0
    """
    validate_non_negative(ray_length, "ray_length")

    refraction = birefringent_refraction(theta_i, optic_axis_angle, material)
    theta_o, theta_e = refraction
    displacement = E_RAY_DISPLACEMENT * math.sin(optic_axis_angle)

    return BirefringenceRayPaths(
        incident_start=Vector3(
            -ray_length * math.sin(theta_i), ray_length * math.cos(theta_i), 0.0
        ),
        incident_end=Vector3.ZERO,
        o_ray_end=Vector3(
            ray_length * math.sin(theta_o), -ray_length * math.cos(theta_o), 0.0
        ),
        e_ray_end=Vector3(
            ray_length * math.sin(theta_e) + displacement,
            -ray_length * math.cos(theta_e),
            0.5 * displacement,
        ),
        theta_o=theta_o,
        theta_e=theta_e,
        walk_off_angle=refraction.walk_off_angle,
    )


class DoubleImageOffset(NamedTuple):
    o_ray: float
    e_ray: float


def double_image_offset(optic_axis_angle: float, distance: float = 1.0) -> DoubleImageOffset:
    """
    Смещения двух изображений, видимых через кристалл.

    При повороте кристалла e-изображение обходит o-изображение.
    """
    return DoubleImageOffset(
        o_ray=(O_IMAGE_OFFSET + IMAGE_SWING * math.sin(optic_axis_angle)) * distance,
        e_ray=(E_IMAGE_OFFSET - IMAGE_SWING * math.cos(optic_axis_angle)) * distance,
    )


# =============================================================================
# RETARDATION
# =============================================================================


def retardance(material: BirefringentMaterial, thickness: float, wavelength: float) -> float:
    """
    Фазовая задержка пластинки, вырезанной параллельно оптической оси.

    δ = 2π·|n_e - n_o|·d/λ (d и λ в одних единицах).

    Raises:
        ValueError: Если thickness < 0 или wavelength <= 0
    """
    validate_non_negative(thickness, "thickness")
    validate_non_negative(wavelength, "wavelength")
    if wavelength == 0:
        raise ValueError("wavelength must be positive, got 0")
    return 2.0 * math.pi * material.birefringence * thickness / wavelength


def crystal_wave_plate(
    material: BirefringentMaterial,
    thickness: float,
    wavelength: float,
    optic_axis_angle: float,
) -> Matrix2x2:
    """
    Матрица Джонса кристаллической пластинки.

    Быстрая ось совпадает с оптической осью у отрицательного кристалла
    (n_e < n_o) и перпендикулярна ей у положительного.
    """
    fast_axis = optic_axis_angle
    if material.is_positive_uniaxial:
        fast_axis += math.pi / 2
    return jones_wave_plate(retardance(material, thickness, wavelength), fast_axis)

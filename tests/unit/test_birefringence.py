"""
Тесты для двулучепреломления

Проверяет:
1. Эффективный показатель необыкновенного луча
2. Углы преломления o- и e-лучей и угол расхождения
3. Геометрию хода лучей и двойного изображения
4. Фазовую задержку и матрицу Джонса кристаллической пластинки
"""

import math

import pytest

from src.core.domain import BIREFRINGENT_MATERIALS, BirefringentMaterial
from src.core.math import Vector3, jones_wave_plate
from src.optics import (
    HORIZONTAL,
    VERTICAL,
    birefringence_ray_paths,
    birefringent_refraction,
    crystal_wave_plate,
    double_image_offset,
    effective_extraordinary_index,
    retardance,
    walk_off_angle,
)

WAVELENGTH = 589e-9


@pytest.fixture
def calcite() -> BirefringentMaterial:
    return BIREFRINGENT_MATERIALS["calcite"]


@pytest.fixture
def quartz() -> BirefringentMaterial:
    return BIREFRINGENT_MATERIALS["quartz"]


# =============================================================================
# EFFECTIVE INDEX
# =============================================================================


class TestEffectiveExtraordinaryIndex:
    """n_e(θ)"""

    def test_along_optic_axis(self) -> None:
        assert effective_extraordinary_index(1.658, 1.486, 0.0) == pytest.approx(1.658)

    def test_across_optic_axis(self) -> None:
        assert effective_extraordinary_index(1.658, 1.486, math.pi / 2) == pytest.approx(1.486)

    def test_lies_between_principal_indices(self) -> None:
        for theta in (0.2, 0.7, 1.2):
            n = effective_extraordinary_index(1.658, 1.486, theta)
            assert 1.486 < n < 1.658

    def test_isotropic_crystal(self) -> None:
        assert effective_extraordinary_index(1.5, 1.5, 0.9) == pytest.approx(1.5)


# =============================================================================
# REFRACTION / WALK-OFF
# =============================================================================


class TestBirefringentRefraction:
    """Углы o- и e-лучей"""

    def test_ordinary_ray_obeys_snell(self, calcite: BirefringentMaterial) -> None:
        theta_i = math.radians(30)
        refraction = birefringent_refraction(theta_i, math.pi / 2, calcite)
        assert calcite.n_o * math.sin(refraction.theta_o) == pytest.approx(math.sin(theta_i))
        assert calcite.n_e * math.sin(refraction.theta_e) == pytest.approx(math.sin(theta_i))

    def test_calcite_extraordinary_ray_bends_less(self, calcite: BirefringentMaterial) -> None:
        refraction = birefringent_refraction(math.radians(45), math.pi / 2, calcite)
        assert refraction.theta_e > refraction.theta_o

    def test_no_walk_off_along_optic_axis(self, calcite: BirefringentMaterial) -> None:
        assert walk_off_angle(math.radians(40), 0.0, calcite) == pytest.approx(0.0, abs=1e-15)

    def test_no_walk_off_at_normal_incidence(self, calcite: BirefringentMaterial) -> None:
        assert walk_off_angle(0.0, math.pi / 3, calcite) == 0.0

    def test_walk_off_value(self, calcite: BirefringentMaterial) -> None:
        expected = math.asin(0.5 / 1.486) - math.asin(0.5 / 1.658)
        assert walk_off_angle(math.radians(30), math.pi / 2, calcite) == pytest.approx(expected)

    def test_walk_off_grows_with_birefringence(
        self, calcite: BirefringentMaterial, quartz: BirefringentMaterial
    ) -> None:
        theta_i = math.radians(50)
        assert walk_off_angle(theta_i, math.pi / 2, calcite) > walk_off_angle(
            theta_i, math.pi / 2, quartz
        )

    def test_default_material_is_calcite(self, calcite: BirefringentMaterial) -> None:
        assert walk_off_angle(0.6, 1.0) == walk_off_angle(0.6, 1.0, calcite)


# =============================================================================
# RAY PATHS / DOUBLE IMAGE
# =============================================================================


class TestBirefringenceRayPaths:
    """birefringence_ray_paths"""

    def test_incident_segment(self, calcite: BirefringentMaterial) -> None:
        paths = birefringence_ray_paths(math.radians(30), 0.0, calcite, ray_length=2.0)
        assert paths.incident_end == Vector3.ZERO
        assert paths.incident_start.length == pytest.approx(2.0)
        assert paths.incident_start.y > 0
        assert paths.incident_start.x < 0

    def test_rays_coincide_along_optic_axis(self, calcite: BirefringentMaterial) -> None:
        paths = birefringence_ray_paths(math.radians(30), 0.0, calcite)
        assert paths.e_ray_end.equals(paths.o_ray_end, 1e-12)
        assert paths.walk_off_angle == pytest.approx(0.0, abs=1e-15)

    def test_ordinary_ray_end(self, calcite: BirefringentMaterial) -> None:
        paths = birefringence_ray_paths(math.radians(30), math.pi / 2, calcite)
        assert paths.o_ray_end.length == pytest.approx(3.0)
        assert paths.o_ray_end.y < 0
        assert calcite.n_o * paths.o_ray_end.x / 3.0 == pytest.approx(0.5)

    def test_extraordinary_ray_displacement(self, calcite: BirefringentMaterial) -> None:
        paths = birefringence_ray_paths(math.radians(30), math.pi / 2, calcite, ray_length=1.0)
        assert paths.e_ray_end.z == pytest.approx(0.15)
        assert paths.e_ray_end.x == pytest.approx(math.sin(paths.theta_e) + 0.3)
        assert paths.theta_e - paths.theta_o == pytest.approx(paths.walk_off_angle)

    def test_negative_ray_length(self, calcite: BirefringentMaterial) -> None:
        with pytest.raises(ValueError, match="ray_length"):
            birefringence_ray_paths(0.3, 0.0, calcite, ray_length=-1.0)


class TestDoubleImageOffset:
    """double_image_offset"""

    def test_unrotated_crystal(self) -> None:
        offset = double_image_offset(0.0)
        assert offset.o_ray == pytest.approx(0.4)
        assert offset.e_ray == pytest.approx(-0.4)

    def test_scales_with_distance(self) -> None:
        offset = double_image_offset(math.pi / 2, distance=2.0)
        assert offset.o_ray == pytest.approx(1.0)
        assert offset.e_ray == pytest.approx(-0.6)

    def test_images_are_always_separated(self) -> None:
        for rotation in (0.0, 1.0, 2.5, math.pi, 5.0):
            offset = double_image_offset(rotation)
            assert offset.o_ray > offset.e_ray


# =============================================================================
# RETARDATION
# =============================================================================


class TestCrystalWavePlate:
    """retardance / crystal_wave_plate"""

    def test_quarter_wave_thickness(self, calcite: BirefringentMaterial) -> None:
        thickness = WAVELENGTH / (4 * calcite.birefringence)
        assert retardance(calcite, thickness, WAVELENGTH) == pytest.approx(math.pi / 2)

    def test_zero_thickness(self, calcite: BirefringentMaterial) -> None:
        assert retardance(calcite, 0.0, WAVELENGTH) == 0.0

    @pytest.mark.parametrize("thickness, wavelength", [(-1e-6, WAVELENGTH), (1e-6, 0.0), (1e-6, -1.0)])
    def test_invalid_dimensions(
        self, calcite: BirefringentMaterial, thickness: float, wavelength: float
    ) -> None:
        with pytest.raises(ValueError):
            retardance(calcite, thickness, wavelength)

    def test_calcite_half_wave_plate(self, calcite: BirefringentMaterial) -> None:
        thickness = WAVELENGTH / (2 * calcite.birefringence)
        plate = crystal_wave_plate(calcite, thickness, WAVELENGTH, math.pi / 4)
        assert HORIZONTAL.apply(plate).equals(VERTICAL, 1e-10)

    def test_negative_crystal_fast_axis_is_optic_axis(
        self, calcite: BirefringentMaterial
    ) -> None:
        thickness = 2e-6
        delta = retardance(calcite, thickness, WAVELENGTH)
        plate = crystal_wave_plate(calcite, thickness, WAVELENGTH, 0.3)
        assert plate.equals(jones_wave_plate(delta, 0.3), 1e-12)

    def test_positive_crystal_fast_axis_is_perpendicular(
        self, quartz: BirefringentMaterial
    ) -> None:
        thickness = 20e-6
        delta = retardance(quartz, thickness, WAVELENGTH)
        plate = crystal_wave_plate(quartz, thickness, WAVELENGTH, 0.3)
        assert plate.equals(jones_wave_plate(delta, 0.3 + math.pi / 2), 1e-12)
        assert plate.is_unitary(1e-12)

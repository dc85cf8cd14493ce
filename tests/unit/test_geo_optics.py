"""
Тесты для геометрической оптики

Проверяет:
1. Закон Снеллиуса (скалярный) и ПВО → None
2. Критический угол и угол Брюстера
3. Взаимодействие луча с границей в 3D
4. Базис s/p поляризации
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain import OpticalInterface
from src.core.math import Vector3
from src.optics import (
    brewster_angle,
    critical_angle,
    refraction_angle,
    sp_basis,
    trace_interface,
)


def _incident(degrees: float) -> Vector3:
    """Луч в плоскости XZ, падающий сверху на плоскость z = 0."""
    theta = math.radians(degrees)
    return Vector3(math.sin(theta), 0.0, -math.cos(theta))


# =============================================================================
# SNELL'S LAW
# =============================================================================


class TestRefractionAngle:
    """refraction_angle"""

    def test_normal_incidence(self) -> None:
        assert refraction_angle(0.0, 1.0, 1.5) == 0.0

    def test_snell(self) -> None:
        theta_t = refraction_angle(math.radians(30), 1.0, 1.5)
        assert theta_t is not None
        assert 1.5 * math.sin(theta_t) == pytest.approx(math.sin(math.radians(30)))

    def test_bends_away_from_normal_in_rarer_medium(self) -> None:
        theta_t = refraction_angle(math.radians(20), 1.5, 1.0)
        assert theta_t is not None
        assert theta_t > math.radians(20)

    def test_total_internal_reflection_is_none(self) -> None:
        assert refraction_angle(math.radians(60), 1.5, 1.0) is None

    def test_invalid_index(self) -> None:
        with pytest.raises(ValidationError):
            refraction_angle(0.1, 0.0, 1.5)


class TestSpecialAngles:
    """critical_angle / brewster_angle"""

    def test_critical_angle_glass_air(self) -> None:
        theta_c = critical_angle(1.5, 1.0)
        assert theta_c is not None
        assert math.degrees(theta_c) == pytest.approx(41.81, abs=0.01)

    def test_critical_angle_water_air(self) -> None:
        theta_c = critical_angle(1.333, 1.0)
        assert theta_c is not None
        assert math.degrees(theta_c) == pytest.approx(48.61, abs=0.01)

    def test_no_critical_angle_into_denser_medium(self) -> None:
        assert critical_angle(1.0, 1.5) is None
        assert critical_angle(1.2, 1.2) is None

    def test_just_past_critical_angle_is_tir(self) -> None:
        theta_c = critical_angle(1.5, 1.0)
        assert theta_c is not None
        assert refraction_angle(theta_c - 1e-6, 1.5, 1.0) is not None
        assert refraction_angle(theta_c + 1e-6, 1.5, 1.0) is None

    def test_brewster_angle(self) -> None:
        assert math.degrees(brewster_angle(1.0, 1.5)) == pytest.approx(56.31, abs=0.01)
        assert brewster_angle(1.0, 1.0) == pytest.approx(math.pi / 4)

    def test_brewster_reflected_and_refracted_are_perpendicular(self) -> None:
        """θB + θt = π/2"""
        theta_b = brewster_angle(1.0, 1.5)
        theta_t = refraction_angle(theta_b, 1.0, 1.5)
        assert theta_t is not None
        assert theta_b + theta_t == pytest.approx(math.pi / 2)

    def test_invalid_index(self) -> None:
        with pytest.raises(ValidationError):
            critical_angle(-1.0, 1.0)
        with pytest.raises(ValidationError):
            brewster_angle(1.0, math.inf)


# =============================================================================
# 3D RAY / INTERFACE
# =============================================================================


class TestTraceInterface:
    """trace_interface"""

    @pytest.fixture
    def air_to_glass(self) -> OpticalInterface:
        return OpticalInterface(n1=1.0, n2=1.5)

    def test_reflection_and_refraction(self, air_to_glass: OpticalInterface) -> None:
        result = trace_interface(_incident(30), Vector3.Z, air_to_glass)

        theta = math.radians(30)
        assert result.reflected.equals(Vector3(math.sin(theta), 0.0, math.cos(theta)), 1e-12)
        assert result.refracted is not None
        assert result.refracted.is_normalized(1e-10)
        assert 1.5 * result.refracted.x == pytest.approx(math.sin(theta))
        assert result.incidence_angle == pytest.approx(theta)
        assert not result.total_internal_reflection

    def test_matches_scalar_snell(self, air_to_glass: OpticalInterface) -> None:
        result = trace_interface(_incident(50), Vector3.Z, air_to_glass)
        theta_t = refraction_angle(math.radians(50), 1.0, 1.5)
        assert result.refracted is not None and theta_t is not None
        assert result.refracted.angle_to(Vector3.NEG_Z) == pytest.approx(theta_t)

    def test_normal_orientation_does_not_matter(self, air_to_glass: OpticalInterface) -> None:
        up = trace_interface(_incident(40), Vector3.Z, air_to_glass)
        down = trace_interface(_incident(40), Vector3(0, 0, -3), air_to_glass)
        assert up.reflected.equals(down.reflected, 1e-12)
        assert up.refracted is not None and down.refracted is not None
        assert up.refracted.equals(down.refracted, 1e-12)
        assert up.incidence_angle == pytest.approx(down.incidence_angle)

    def test_total_internal_reflection(self) -> None:
        glass_to_air = OpticalInterface(n1=1.5, n2=1.0)
        result = trace_interface(_incident(60), Vector3.Z, glass_to_air)
        assert result.total_internal_reflection
        assert result.refracted is None
        assert result.reflected.is_normalized(1e-10)

    def test_unnormalized_direction(self, air_to_glass: OpticalInterface) -> None:
        result = trace_interface(_incident(30).scale(7.0), Vector3.Z, air_to_glass)
        assert result.reflected.is_normalized(1e-10)


class TestSpBasis:
    """sp_basis"""

    @pytest.mark.parametrize("degrees", [0.0, 10.0, 45.0, 80.0])
    def test_basis_properties(self, degrees: float) -> None:
        d = _incident(degrees)
        s, p = sp_basis(d, Vector3.Z)
        assert s.is_normalized(1e-10)
        assert p.is_normalized(1e-10)
        assert s.is_perpendicular(p, 1e-10)
        assert s.is_perpendicular(d, 1e-10)
        assert p.is_perpendicular(d, 1e-10)
        # (s, p, direction): правая тройка
        assert s.cross(p).equals(d, 1e-10)

    def test_s_is_perpendicular_to_plane_of_incidence(self) -> None:
        s, p = sp_basis(_incident(30), Vector3.Z)
        assert s.is_parallel(Vector3.Y, 1e-10)
        assert p.is_perpendicular(Vector3.Y, 1e-10)

    def test_normal_incidence_is_defined(self) -> None:
        s, p = sp_basis(Vector3.NEG_Z, Vector3.Z)
        assert not s.is_zero()
        assert s.is_perpendicular(Vector3.Z, 1e-10)
        assert s.cross(p).equals(Vector3.NEG_Z, 1e-10)

"""
Fresnel — амплитудные коэффициенты отражения и пропускания

Комплексные коэффициенты Френеля для плоской границы n1 → n2:

    cos θt = √(1 - (n1/n2)²·sin²θi)          (главная ветвь; мнимый за критическим углом)

    r_s = (n1·cos θi - n2·cos θt) / (n1·cos θi + n2·cos θt)
    r_p = (n2·cos θi - n1·cos θt) / (n2·cos θi + n1·cos θt)
    t_s = 2·n1·cos θi / (n1·cos θi + n2·cos θt)
    t_p = 2·n1·cos θi / (n2·cos θi + n1·cos θt)

За критическим углом подкоренное выражение отрицательно, cos θt становится
чисто мнимым, и |r_s| = |r_p| = 1 (полное внутреннее отражение с фазовым
сдвигом). Знак r_p в конвенции Хехта: при угле Брюстера r_p = 0.

Матрицы Джонса границы записываются в базисе (p, s).
"""

import math
from typing import NamedTuple

from src.core.domain.media import OpticalInterface
from src.core.math.complex_number import Complex
from src.core.math.matrix2x2 import Matrix2x2
from src.core.math.numerical_safeguards import EPSILON


class FresnelCoefficients(NamedTuple):
    """Амплитудные коэффициенты Френеля при заданном угле падения."""

    r_s: Complex
    r_p: Complex
    t_s: Complex
    t_p: Complex
    total_internal_reflection: bool


def _validate_incidence(theta_i: float) -> None:
    if not (0.0 <= theta_i <= math.pi / 2 + EPSILON):
        raise ValueError(f"Incidence angle must be in [0, pi/2], got {theta_i}")


def _transmitted_radicand(interface: OpticalInterface, theta_i: float) -> float:
    """1 - (n1/n2)²·sin²θi; отрицательно за критическим углом."""
    ratio = interface.relative_index * math.sin(theta_i)
    return 1.0 - ratio * ratio


def _cos_transmitted(radicand: float) -> Complex:
    # Главная ветвь без порога SQRT_EPSILON: вблизи критического угла
    # cos θt мал, но не равен нулю
    if radicand >= 0.0:
        return Complex(math.sqrt(radicand))
    return Complex(0.0, math.sqrt(-radicand))


def fresnel_coefficients(interface: OpticalInterface, theta_i: float) -> FresnelCoefficients:
    """
    Коэффициенты Френеля для угла падения theta_i (радианы).

    Raises:
        ValueError: Если theta_i вне [0, π/2]
    """
    _validate_incidence(theta_i)

    n1 = Complex(interface.n1)
    n2 = Complex(interface.n2)
    cos_i = Complex(math.cos(theta_i))
    radicand = _transmitted_radicand(interface, theta_i)
    cos_t = _cos_transmitted(radicand)

    n1_cos_i = n1.mul(cos_i)
    n2_cos_t = n2.mul(cos_t)
    n2_cos_i = n2.mul(cos_i)
    n1_cos_t = n1.mul(cos_t)

    s_denom = n1_cos_i.add(n2_cos_t)
    p_denom = n2_cos_i.add(n1_cos_t)

    return FresnelCoefficients(
        r_s=n1_cos_i.sub(n2_cos_t).div(s_denom),
        r_p=n2_cos_i.sub(n1_cos_t).div(p_denom),
        t_s=n1_cos_i.scale(2.0).div(s_denom),
        t_p=n1_cos_i.scale(2.0).div(p_denom),
        total_internal_reflection=radicand < 0.0,
    )


def reflectance(interface: OpticalInterface, theta_i: float) -> tuple[float, float]:
    """Энергетические коэффициенты отражения (R_s, R_p) = (|r_s|², |r_p|²)."""
    coeffs = fresnel_coefficients(interface, theta_i)
    return coeffs.r_s.magnitude_squared, coeffs.r_p.magnitude_squared


def transmittance(interface: OpticalInterface, theta_i: float) -> tuple[float, float]:
    """
    Энергетические коэффициенты пропускания (T_s, T_p).

    T = (n2·Re(cos θt)) / (n1·cos θi) · |t|²; при ПВО и скользящем падении 0.
    Вне ПВО выполняется R + T = 1.
    """
    coeffs = fresnel_coefficients(interface, theta_i)
    incident_flux = interface.n1 * math.cos(theta_i)
    if coeffs.total_internal_reflection or incident_flux < EPSILON:
        return 0.0, 0.0

    cos_t = _cos_transmitted(_transmitted_radicand(interface, theta_i))
    factor = interface.n2 * cos_t.real / incident_flux
    return factor * coeffs.t_s.magnitude_squared, factor * coeffs.t_p.magnitude_squared


def reflection_jones_matrix(interface: OpticalInterface, theta_i: float) -> Matrix2x2:
    """diag(r_p, r_s) в базисе (p, s)"""
    coeffs = fresnel_coefficients(interface, theta_i)
    return Matrix2x2.diagonal(coeffs.r_p, coeffs.r_s)


def transmission_jones_matrix(interface: OpticalInterface, theta_i: float) -> Matrix2x2:
    """diag(t_p, t_s) в базисе (p, s)"""
    coeffs = fresnel_coefficients(interface, theta_i)
    return Matrix2x2.diagonal(coeffs.t_p, coeffs.t_s)

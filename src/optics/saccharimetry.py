"""
Saccharimetry — оптическое вращение растворов сахарозы

Угол поворота плоскости поляризации: α = [α]λ·c·L (градусы), где
[α]λ: удельное вращение (°·мл/(г·дм)), c: концентрация (г/мл),
L: длина трубки (дм). Удельное вращение зависит от длины волны
(вращательная дисперсия) и слабо от температуры.
"""

import bisect
import math
from typing import Final, NamedTuple

from src.core.domain.solution import SaccharimetryParams
from src.core.math.matrix2x2 import Matrix2x2, jones_rotator


# =============================================================================
# SPECIFIC ROTATION TABLE
# =============================================================================

# Удельное вращение сахарозы при 20 °C, °·мл/(г·дм)
SUCROSE_SPECIFIC_ROTATION: Final[dict[float, float]] = {
    400.0: 115.0,
    450.0: 95.8,
    500.0: 81.5,
    550.0: 71.2,
    589.0: 66.5,  # D-линия натрия
    600.0: 60.8,
    650.0: 52.3,
    700.0: 45.5,
}

SPECTRUM_WAVELENGTHS: Final[tuple[float, ...]] = (700.0, 650.0, 600.0, 550.0, 500.0, 450.0, 400.0)

REFERENCE_TEMPERATURE_C: Final[float] = 20.0
TEMPERATURE_COEFFICIENT: Final[float] = 0.01  # относительное падение [α] на 1 °C

_TABLE_WAVELENGTHS: Final[tuple[float, ...]] = tuple(sorted(SUCROSE_SPECIFIC_ROTATION))


def specific_rotation(
    wavelength_nm: float, temperature_c: float = REFERENCE_TEMPERATURE_C
) -> float:
    """
    Удельное вращение сахарозы [α]λ при заданной температуре.

    Табличное значение при точном совпадении длины волны, иначе линейная
    интерполяция между соседними точками таблицы. Температурная поправка:
    множитель 1 - 0.01·(T - 20).

    Raises:
        ValueError: Если длина волны вне таблицы (400-700 нм) или поправка
            на температуру неположительна
    """
    lowest, highest = _TABLE_WAVELENGTHS[0], _TABLE_WAVELENGTHS[-1]
    if not lowest <= wavelength_nm <= highest:
        raise ValueError(
            f"wavelength_nm must be within [{lowest}, {highest}], got {wavelength_nm}"
        )

    correction = 1.0 - TEMPERATURE_COEFFICIENT * (temperature_c - REFERENCE_TEMPERATURE_C)
    if correction <= 0:
        raise ValueError(f"temperature_c out of range for the linear correction: {temperature_c}")

    if wavelength_nm in SUCROSE_SPECIFIC_ROTATION:
        return SUCROSE_SPECIFIC_ROTATION[wavelength_nm] * correction

    index = bisect.bisect_left(_TABLE_WAVELENGTHS, wavelength_nm)
    lower, upper = _TABLE_WAVELENGTHS[index - 1], _TABLE_WAVELENGTHS[index]
    t = (wavelength_nm - lower) / (upper - lower)
    low_value = SUCROSE_SPECIFIC_ROTATION[lower]
    high_value = SUCROSE_SPECIFIC_ROTATION[upper]
    return (low_value + t * (high_value - low_value)) * correction


# =============================================================================
# ROTATION
# =============================================================================


def optical_rotation(params: SaccharimetryParams) -> float:
    """Угол поворота плоскости поляризации α = [α]λ·c·L (градусы)."""
    return (
        specific_rotation(params.wavelength_nm, params.temperature_c)
        * params.concentration
        * params.path_length_dm
    )


def optical_rotation_matrix(params: SaccharimetryParams) -> Matrix2x2:
    """Матрица Джонса трубки с раствором: поворот на α."""
    return jones_rotator(math.radians(optical_rotation(params)))


def concentration_from_rotation(
    rotation_deg: float,
    wavelength_nm: float,
    path_length_dm: float,
    temperature_c: float = REFERENCE_TEMPERATURE_C,
) -> float:
    """
    Обратная задача: c = α / ([α]λ·L) (г/мл).

    Raises:
        ValueError: Если path_length_dm <= 0 или длина волны вне таблицы
    """
    if path_length_dm <= 0:
        raise ValueError(f"path_length_dm must be positive, got {path_length_dm}")
    return rotation_deg / (specific_rotation(wavelength_nm, temperature_c) * path_length_dm)


def rotation_difference(
    wavelength1_nm: float,
    wavelength2_nm: float,
    concentration: float,
    path_length_dm: float,
) -> float:
    """|α(λ2) - α(λ1)| при 20 °C: мера вращательной дисперсии (градусы)."""
    first = optical_rotation(
        SaccharimetryParams(
            wavelength_nm=wavelength1_nm,
            concentration=concentration,
            path_length_dm=path_length_dm,
        )
    )
    second = optical_rotation(
        SaccharimetryParams(
            wavelength_nm=wavelength2_nm,
            concentration=concentration,
            path_length_dm=path_length_dm,
        )
    )
    return abs(second - first)


class SpectralRotation(NamedTuple):
    wavelength_nm: float
    rotation_deg: float


def spectral_rotations(
    concentration: float,
    path_length_dm: float,
    temperature_c: float = REFERENCE_TEMPERATURE_C,
) -> list[SpectralRotation]:
    """Углы поворота для всех длин волн SPECTRUM_WAVELENGTHS (от красного к фиолетовому)."""
    return [
        SpectralRotation(
            wavelength_nm=wavelength,
            rotation_deg=optical_rotation(
                SaccharimetryParams(
                    wavelength_nm=wavelength,
                    concentration=concentration,
                    path_length_dm=path_length_dm,
                    temperature_c=temperature_c,
                )
            ),
        )
        for wavelength in SPECTRUM_WAVELENGTHS
    ]

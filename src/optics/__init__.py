"""
Optics layer built on the core math primitives.

Polarization states and coherency matrices, Fresnel coefficients,
geometric optics (Snell's law, ray/interface interaction), birefringent
crystals and optical rotation of sugar solutions.
"""

from src.optics.birefringence import (
    BirefringenceRayPaths,
    BirefringentRefraction,
    DoubleImageOffset,
    birefringence_ray_paths,
    birefringent_refraction,
    crystal_wave_plate,
    double_image_offset,
    effective_extraordinary_index,
    retardance,
    walk_off_angle,
)
from src.optics.fresnel import (
    FresnelCoefficients,
    fresnel_coefficients,
    reflectance,
    reflection_jones_matrix,
    transmission_jones_matrix,
    transmittance,
)
from src.optics.geo_optics import (
    RayInteraction,
    brewster_angle,
    critical_angle,
    refraction_angle,
    sp_basis,
    trace_interface,
)
from src.optics.polarization import (
    ANTIDIAGONAL,
    DIAGONAL,
    HORIZONTAL,
    LEFT_CIRCULAR,
    RIGHT_CIRCULAR,
    VERTICAL,
    CoherencyMatrix,
    JonesVector,
    StokesParameters,
    linear_polarization,
    malus_law,
)
from src.optics.saccharimetry import (
    SPECTRUM_WAVELENGTHS,
    SUCROSE_SPECIFIC_ROTATION,
    SpectralRotation,
    concentration_from_rotation,
    optical_rotation,
    optical_rotation_matrix,
    rotation_difference,
    specific_rotation,
    spectral_rotations,
)

__all__ = [
    # Polarization — Types
    "CoherencyMatrix",
    "JonesVector",
    "StokesParameters",
    # Polarization — Named states
    "HORIZONTAL",
    "VERTICAL",
    "DIAGONAL",
    "ANTIDIAGONAL",
    "RIGHT_CIRCULAR",
    "LEFT_CIRCULAR",
    # Polarization — Functions
    "linear_polarization",
    "malus_law",
    # Fresnel
    "FresnelCoefficients",
    "fresnel_coefficients",
    "reflectance",
    "transmittance",
    "reflection_jones_matrix",
    "transmission_jones_matrix",
    # Geometric optics
    "RayInteraction",
    "brewster_angle",
    "critical_angle",
    "refraction_angle",
    "sp_basis",
    "trace_interface",
    # Birefringence
    "BirefringenceRayPaths",
    "BirefringentRefraction",
    "DoubleImageOffset",
    "birefringence_ray_paths",
    "birefringent_refraction",
    "crystal_wave_plate",
    "double_image_offset",
    "effective_extraordinary_index",
    "retardance",
    "walk_off_angle",
    # Saccharimetry
    "SPECTRUM_WAVELENGTHS",
    "SUCROSE_SPECIFIC_ROTATION",
    "SpectralRotation",
    "concentration_from_rotation",
    "optical_rotation",
    "optical_rotation_matrix",
    "rotation_difference",
    "specific_rotation",
    "spectral_rotations",
]

"""
Domain models and value objects.

Contains optical media, interfaces, birefringent crystals and saccharimetry
measurements validated at the system boundary.
"""

from src.core.domain.media import (
    BIREFRINGENT_MATERIALS,
    REFRACTIVE_INDICES,
    BirefringentMaterial,
    Medium,
    OpticalInterface,
    get_birefringent_material,
)
from src.core.domain.solution import SaccharimetryParams

__all__ = [
    # Media module
    "REFRACTIVE_INDICES",
    "Medium",
    "OpticalInterface",
    # Birefringent crystals
    "BIREFRINGENT_MATERIALS",
    "BirefringentMaterial",
    "get_birefringent_material",
    # Solution module
    "SaccharimetryParams",
]

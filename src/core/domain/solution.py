"""
Solution — оптически активный раствор в трубке сахариметра

Immutable Pydantic модель измерения: длина волны, концентрация сахарозы,
длина трубки и температура раствора.
"""

import math

from pydantic import BaseModel, Field, field_validator


class SaccharimetryParams(BaseModel):
    """
    Параметры измерения оптического вращения.

    Единицы сахариметрии: концентрация в г/мл, длина трубки в дециметрах.

    Immutable модель (frozen=True).
    """

    wavelength_nm: float = Field(..., gt=0, description="Длина волны, нм")
    concentration: float = Field(..., ge=0, description="Концентрация, г/мл")
    path_length_dm: float = Field(..., gt=0, description="Длина трубки, дм")
    temperature_c: float = Field(20.0, description="Температура раствора, °C")

    model_config = {"frozen": True}

    @field_validator("wavelength_nm", "concentration", "path_length_dm", "temperature_c")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

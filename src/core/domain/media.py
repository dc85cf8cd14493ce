"""
Media — оптические среды и границы раздела

Immutable Pydantic модели, описывающие среду (показатель преломления) и
плоскую границу между двумя средами. Модели валидируют вход на границе
системы; математическое ядро дальше работает с уже проверенными числами.
"""

import math
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ПОКАЗАТЕЛИ ПРЕЛОМЛЕНИЯ
# =============================================================================

# Показатели преломления при 589 нм (D-линия натрия)
REFRACTIVE_INDICES: Final[dict[str, float]] = {
    # Вакуум/воздух
    "air": 1.0003,
    "vacuum": 1.0,
    # Жидкости и стёкла
    "water": 1.333,
    "crown_glass": 1.52,
    "flint_glass": 1.62,
    "diamond": 2.417,
    # Кристаллы
    "quartz": 1.544,
    "calcite_no": 1.658,  # обыкновенный луч
    "calcite_ne": 1.486,  # необыкновенный луч
    "ice": 1.31,
    # Пластики
    "acrylic": 1.49,
    "polycarbonate": 1.58,
}


# =============================================================================
# MEDIUM
# =============================================================================


class Medium(BaseModel):
    """
    Однородная изотропная среда.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Название среды")
    refractive_index: float = Field(..., gt=0, description="Показатель преломления n")

    model_config = {"frozen": True}

    @field_validator("refractive_index")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"refractive_index must be finite, got {v}")
        return v

    @classmethod
    def from_table(cls, name: str) -> "Medium":
        """
        Среда из таблицы REFRACTIVE_INDICES.

        Raises:
            KeyError: Если среда не найдена в таблице
        """
        if name not in REFRACTIVE_INDICES:
            raise KeyError(f"Unknown medium: {name!r}")
        return cls(name=name, refractive_index=REFRACTIVE_INDICES[name])


# =============================================================================
# OPTICAL INTERFACE
# =============================================================================


class OpticalInterface(BaseModel):
    """
    Плоская граница раздела: свет идёт из среды n1 в среду n2.
    """

    n1: float = Field(..., gt=0, description="Показатель преломления среды падения")
    n2: float = Field(..., gt=0, description="Показатель преломления среды пропускания")

    model_config = {"frozen": True}

    @field_validator("n1", "n2")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"refractive index must be finite, got {v}")
        return v

    @classmethod
    def between(cls, incident: Medium, transmitted: Medium) -> "OpticalInterface":
        return cls(n1=incident.refractive_index, n2=transmitted.refractive_index)

    @property
    def relative_index(self) -> float:
        """eta = n1 / n2 (аргумент Vector3.refract)"""
        return self.n1 / self.n2

    @property
    def allows_total_internal_reflection(self) -> bool:
        """ПВО возможно только при переходе в оптически менее плотную среду."""
        return self.n1 > self.n2

    def critical_angle(self) -> Optional[float]:
        """
        Критический угол ПВО: sin θc = n2 / n1.

        Returns:
            Угол в радианах или None, если ПВО невозможно (n1 <= n2)
        """
        if not self.allows_total_internal_reflection:
            return None
        return math.asin(self.n2 / self.n1)

    def brewster_angle(self) -> float:
        """Угол Брюстера: tan θB = n2 / n1 (радианы)."""
        return math.atan2(self.n2, self.n1)

    def reversed(self) -> "OpticalInterface":
        """Та же граница при обратном ходе луча."""
        return OpticalInterface(n1=self.n2, n2=self.n1)


# =============================================================================
# BIREFRINGENT MATERIAL
# =============================================================================


class BirefringentMaterial(BaseModel):
    """
    Одноосный двулучепреломляющий кристалл.

    n_o: показатель обыкновенного луча. n_e: показатель необыкновенного луча,
    распространяющегося перпендикулярно оптической оси.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Название кристалла")
    n_o: float = Field(..., gt=0, description="Показатель обыкновенного луча")
    n_e: float = Field(..., gt=0, description="Показатель необыкновенного луча")

    model_config = {"frozen": True}

    @field_validator("n_o", "n_e")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"refractive index must be finite, got {v}")
        return v

    @property
    def birefringence(self) -> float:
        """|n_e - n_o|"""
        return abs(self.n_e - self.n_o)

    @property
    def is_positive_uniaxial(self) -> bool:
        """n_e > n_o (кварц, лёд); у кальцита n_e < n_o."""
        return self.n_e > self.n_o

    def ordinary_medium(self) -> Medium:
        return Medium(name=f"{self.name}_o", refractive_index=self.n_o)

    def extraordinary_medium(self) -> Medium:
        return Medium(name=f"{self.name}_e", refractive_index=self.n_e)


BIREFRINGENT_MATERIALS: Final[dict[str, BirefringentMaterial]] = {
    "calcite": BirefringentMaterial(
        name="calcite",
        n_o=REFRACTIVE_INDICES["calcite_no"],
        n_e=REFRACTIVE_INDICES["calcite_ne"],
    ),
    "quartz": BirefringentMaterial(name="quartz", n_o=1.544, n_e=1.553),
    "sodium_nitrate": BirefringentMaterial(name="sodium_nitrate", n_o=1.587, n_e=1.336),
    "ice": BirefringentMaterial(name="ice", n_o=1.309, n_e=1.313),
}


def get_birefringent_material(name: str) -> BirefringentMaterial:
    """
    Кристалл из таблицы BIREFRINGENT_MATERIALS.

    Raises:
        KeyError: Если кристалл не найден в таблице
    """
    if name not in BIREFRINGENT_MATERIALS:
        raise KeyError(f"Unknown birefringent material: {name!r}")
    return BIREFRINGENT_MATERIALS[name]

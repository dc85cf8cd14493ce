"""
Core math modules

Математические примитивы для оптических расчётов:
- Комплексные числа с exp/sqrt/log/pow и скалярным API для горячих циклов
- 2×2 комплексные матрицы для исчисления Джонса
- 3D векторы для трассировки лучей и построения базисов
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPSILON,
    LOG_ZERO_SENTINEL,
    SQRT_EPSILON,
    clamp,
    is_close,
    is_valid_float,
    is_zero,
    validate_non_negative,
)

# Complex
from src.core.math.complex_number import (
    Complex,
    complex_add,
    complex_conj,
    complex_div,
    complex_mag_sq,
    complex_mul,
    complex_scale,
    complex_sub,
)

# Matrix2x2
from src.core.math.matrix2x2 import (
    Matrix2x2,
    jones_linear_polarizer,
    jones_rotator,
    jones_wave_plate,
)

# Vector3
from src.core.math.vector3 import (
    Vector3,
    build_orthonormal_basis,
    rotate_around_axis,
    signed_angle,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPSILON",
    "SQRT_EPSILON",
    "LOG_ZERO_SENTINEL",
    # Numerical Safeguards — Functions
    "clamp",
    "is_close",
    "is_valid_float",
    "is_zero",
    "validate_non_negative",
    # Complex — Types
    "Complex",
    # Complex — Scalar tuple API
    "complex_add",
    "complex_conj",
    "complex_div",
    "complex_mag_sq",
    "complex_mul",
    "complex_scale",
    "complex_sub",
    # Matrix2x2 — Types
    "Matrix2x2",
    # Matrix2x2 — Jones factories
    "jones_linear_polarizer",
    "jones_rotator",
    "jones_wave_plate",
    # Vector3 — Types
    "Vector3",
    # Vector3 — Functions
    "build_orthonormal_basis",
    "rotate_around_axis",
    "signed_angle",
]

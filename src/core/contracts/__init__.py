"""
Contract Validation Module

Валидация и сериализация значений ядра через JSON Schema контракты.
"""

from .serialization import (
    complex_from_payload,
    matrix2x2_from_payload,
    to_payload,
    vector3_from_payload,
)
from .validators import (
    ComplexValidator,
    ContractValidator,
    JonesVectorValidator,
    Matrix2x2Validator,
    SchemaLoader,
    Vector3Validator,
    validate_complex,
    validate_jones_vector,
    validate_matrix2x2,
    validate_vector3,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValidator",
    "Matrix2x2Validator",
    "Vector3Validator",
    "JonesVectorValidator",
    # Functions
    "validate_complex",
    "validate_matrix2x2",
    "validate_vector3",
    "validate_jones_vector",
    # Serialization
    "to_payload",
    "complex_from_payload",
    "matrix2x2_from_payload",
    "vector3_from_payload",
]

"""
Payload serialization for core math types

Преобразование Complex / Matrix2x2 / Vector3 в простые числовые массивы
(payload) и обратно. Декодирование всегда проходит через JSON Schema
контракт: некорректный payload отвергается до создания значения.
"""

from typing import Any, Union

from src.core.contracts.validators import (
    validate_complex,
    validate_matrix2x2,
    validate_vector3,
)
from src.core.math.complex_number import Complex
from src.core.math.matrix2x2 import Matrix2x2
from src.core.math.vector3 import Vector3

CoreValue = Union[Complex, Matrix2x2, Vector3]


def to_payload(value: CoreValue) -> list:
    """
    Сериализация значения ядра в JSON-совместимый вложенный список.

    Raises:
        TypeError: Если тип значения не поддерживается
    """
    if isinstance(value, Complex):
        return value.to_array()
    if isinstance(value, Matrix2x2):
        return [[entry.to_array() for entry in row] for row in value.to_array()]
    if isinstance(value, Vector3):
        return value.to_array()
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def complex_from_payload(data: Any) -> Complex:
    """
    Raises:
        ValidationError: Если payload не соответствует complex.json
    """
    validate_complex(data)
    return Complex.from_array(data)


def matrix2x2_from_payload(data: Any) -> Matrix2x2:
    """
    Raises:
        ValidationError: Если payload не соответствует matrix2x2.json
    """
    validate_matrix2x2(data)
    return Matrix2x2.from_array(data)


def vector3_from_payload(data: Any) -> Vector3:
    """
    Raises:
        ValidationError: Если payload не соответствует vector3.json
    """
    validate_vector3(data)
    return Vector3.from_array(data)

"""
JSON Schema Contract Validators

Модуль для валидации сериализованных значений ядра согласно формальным
JSON Schema контрактам. Через эти контракты рендеринг (canvas/SVG) и
движок симуляции обмениваются состоянием в виде простых числовых массивов.

Схемы (src/core/contracts/schema/):
- complex.json       [real, imag]
- matrix2x2.json     [[[re, im], [re, im]], [[re, im], [re, im]]]
- vector3.json       [x, y, z]
- jones_vector.json  [[re, im], [re, im]]
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'complex')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded contract schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except jsonschema.ValidationError as e:
            logger.warning("Payload rejected by %s contract: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class ComplexValidator(ContractValidator):
    def __init__(self):
        super().__init__("complex")


class Matrix2x2Validator(ContractValidator):
    def __init__(self):
        super().__init__("matrix2x2")


class Vector3Validator(ContractValidator):
    def __init__(self):
        super().__init__("vector3")


class JonesVectorValidator(ContractValidator):
    def __init__(self):
        super().__init__("jones_vector")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex(data: Any) -> None:
    """
    Валидация сериализованного Complex.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexValidator().validate(data)


def validate_matrix2x2(data: Any) -> None:
    """
    Валидация сериализованной Matrix2x2.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Matrix2x2Validator().validate(data)


def validate_vector3(data: Any) -> None:
    """
    Валидация сериализованного Vector3.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Vector3Validator().validate(data)


def validate_jones_vector(data: Any) -> None:
    """
    Валидация сериализованного вектора Джонса.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    JonesVectorValidator().validate(data)

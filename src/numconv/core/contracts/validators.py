"""
JSON Schema контракты границы вызова движка

Схемы лежат в каталоге schema/ рядом с модулем и ставятся вместе с пакетом:
- conversion_request.json: запись числа и два основания
- conversion_response.json: результат или вид ошибки

Валидаторы создаются один раз на имя схемы и переиспользуются.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

CONVERSION_REQUEST: Final[str] = "conversion_request"
CONVERSION_RESPONSE: Final[str] = "conversion_response"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и meta-валидация схем из каталога (по умолчанию schema/)."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя схемы без расширения

        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не является валидной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Проверка dict-данных против одной схемы контракта."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises ValidationError на первом нарушении."""
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)


_VALIDATORS: Dict[str, ContractValidator] = {}


def contract_validator(schema_name: str) -> ContractValidator:
    """Общий валидатор для схемы из пакета (создаётся при первом запросе)."""
    validator = _VALIDATORS.get(schema_name)
    if validator is None:
        validator = _VALIDATORS.setdefault(schema_name, ContractValidator(schema_name))
    return validator


def validate_conversion_request(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если данные не соответствуют conversion_request."""
    contract_validator(CONVERSION_REQUEST).validate(data)


def validate_conversion_response(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если данные не соответствуют conversion_response."""
    contract_validator(CONVERSION_RESPONSE).validate(data)

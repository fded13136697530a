"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints
- Интеграция с Pydantic моделями
"""

import json

import pytest
from jsonschema import ValidationError

from numconv.core.contracts import (
    CONVERSION_REQUEST,
    CONVERSION_RESPONSE,
    ContractValidator,
    SchemaLoader,
    contract_validator,
    validate_conversion_request,
    validate_conversion_response,
)
from numconv.core.domain import ConversionRequest, ConversionResponse
from numconv.core.engine import convert


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный conversion_request."""
    return {"numeral": "FF", "from_radix": 16, "to_radix": 2}


@pytest.fixture
def valid_response():
    """Валидный успешный conversion_response."""
    return {"ok": True, "result": "11111111", "error": None, "message": None}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_loads_and_caches(self) -> None:
        loader = SchemaLoader()
        schema = loader.load_schema("conversion_request")
        assert schema["title"] == "ConversionRequest"
        assert loader.load_schema("conversion_request") is schema

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestContractValidator:
    """Тесты общего валидатора контракта"""

    def test_shared_instance_per_schema(self) -> None:
        """Валидатор создаётся один раз на имя схемы"""
        first = contract_validator(CONVERSION_REQUEST)
        assert contract_validator(CONVERSION_REQUEST) is first
        assert contract_validator(CONVERSION_RESPONSE) is not first
        assert first.schema_name == CONVERSION_REQUEST

    def test_custom_loader(self, tmp_path) -> None:
        schema = {"type": "object", "required": ["x"]}
        (tmp_path / "point.json").write_text(json.dumps(schema), encoding="utf-8")
        validator = ContractValidator("point", SchemaLoader(tmp_path))
        assert validator.is_valid({"x": 1})
        assert not validator.is_valid({})


# =============================================================================
# REQUEST CONTRACT
# =============================================================================


class TestConversionRequestContract:
    """Тесты контракта conversion_request"""

    def test_valid(self, valid_request) -> None:
        validate_conversion_request(valid_request)
        assert contract_validator(CONVERSION_REQUEST).is_valid(valid_request)

    @pytest.mark.parametrize("field", ["numeral", "from_radix", "to_radix"])
    def test_required_fields(self, valid_request, field) -> None:
        del valid_request[field]
        with pytest.raises(ValidationError):
            validate_conversion_request(valid_request)

    def test_types(self, valid_request) -> None:
        validator = contract_validator(CONVERSION_REQUEST)
        assert not validator.is_valid({**valid_request, "from_radix": "16"})
        assert not validator.is_valid({**valid_request, "from_radix": True})
        assert not validator.is_valid({**valid_request, "numeral": 255})

    def test_radix_constraints(self, valid_request) -> None:
        validator = contract_validator(CONVERSION_REQUEST)
        assert validator.is_valid({**valid_request, "to_radix": 37})
        assert not validator.is_valid({**valid_request, "to_radix": 256})
        assert not validator.is_valid({**valid_request, "to_radix": -1})

    def test_additional_properties(self, valid_request) -> None:
        with pytest.raises(ValidationError):
            validate_conversion_request({**valid_request, "sign": "-"})

    def test_iter_errors(self) -> None:
        errors = list(contract_validator(CONVERSION_REQUEST).iter_errors({}))
        assert len(errors) == 3

    def test_pydantic_dump_conforms(self) -> None:
        request = ConversionRequest(numeral="z", from_radix=36, to_radix=10)
        validate_conversion_request(request.model_dump(mode="json"))


# =============================================================================
# RESPONSE CONTRACT
# =============================================================================


class TestConversionResponseContract:
    """Тесты контракта conversion_response"""

    def test_valid_success(self, valid_response) -> None:
        validate_conversion_response(valid_response)

    def test_valid_failure(self) -> None:
        validate_conversion_response(
            {"ok": False, "result": None, "error": "OVERFLOW", "message": "Number too large"}
        )

    def test_unknown_error_kind(self) -> None:
        with pytest.raises(ValidationError):
            validate_conversion_response(
                {"ok": False, "result": None, "error": "DIVIDE", "message": "x"}
            )

    def test_success_with_error_rejected(self, valid_response) -> None:
        assert not contract_validator(CONVERSION_RESPONSE).is_valid({**valid_response, "error": "RANGE"})

    def test_failure_without_error_rejected(self) -> None:
        assert not contract_validator(CONVERSION_RESPONSE).is_valid(
            {"ok": False, "result": None, "error": None, "message": "x"}
        )

    @pytest.mark.parametrize("result", ["00FF", "ff", "", "-1"])
    def test_result_pattern(self, valid_response, result) -> None:
        """Результат: верхний регистр, без ведущих нулей"""
        assert not contract_validator(CONVERSION_RESPONSE).is_valid({**valid_response, "result": result})

    @pytest.mark.parametrize(
        "numeral, from_radix, to_radix",
        [("FF", 16, 2), ("0", 10, 36), ("1", 1, 10), ("G", 16, 10), ("1" * 65, 2, 10)],
    )
    def test_pydantic_dump_conforms(self, numeral, from_radix, to_radix) -> None:
        response = ConversionResponse.from_result(convert(numeral, from_radix, to_radix))
        validate_conversion_response(response.model_dump(mode="json"))

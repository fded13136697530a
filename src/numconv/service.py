"""
Service — Граница вызова для слоя представления

Принимает payload (dict), проверяет его по контракту conversion_request,
выполняет конверсию и возвращает dict по контракту conversion_response.

Ошибки формы payload → PayloadError.
Ошибки конверсии (RANGE / FORMAT / OVERFLOW) → ответ с ok=False.
"""

import logging
from typing import Any, Dict

from jsonschema import ValidationError
from pydantic import ValidationError as ModelValidationError

from numconv.core.contracts import CONVERSION_REQUEST, contract_validator
from numconv.core.domain import ConversionRequest, ConversionResponse
from numconv.core.engine import NumberConverter

logger = logging.getLogger(__name__)

# Валидатор контракта запроса, общий для всех вызовов
_REQUEST_CONTRACT = contract_validator(CONVERSION_REQUEST)


class PayloadError(ValueError):
    """Payload не соответствует контракту conversion_request."""

    pass


def handle_conversion(
    payload: Dict[str, Any],
    converter: NumberConverter | None = None,
) -> Dict[str, Any]:
    """
    Обработка запроса конверсии.

    Args:
        payload: {"numeral": str, "from_radix": int, "to_radix": int}
        converter: движок (опционально, по умолчанию 64-битная граница)

    Returns:
        JSON-совместимый dict по контракту conversion_response

    Raises:
        PayloadError: Если payload не соответствует контракту
    """
    try:
        _REQUEST_CONTRACT.validate(payload)
        request = ConversionRequest.model_validate(payload)
    except (ValidationError, ModelValidationError) as e:
        logger.debug("Rejected conversion payload %r: %s", payload, e)
        raise PayloadError(f"Invalid conversion payload: {e}") from e

    engine = converter or NumberConverter()
    result = engine.convert(request.numeral, request.from_radix, request.to_radix)
    if not result.ok:
        logger.debug(
            "Conversion %r %d->%d failed: %s (%s)",
            request.numeral,
            request.from_radix,
            request.to_radix,
            result.error.value,
            result.details,
        )

    return ConversionResponse.from_result(result).model_dump(mode="json")

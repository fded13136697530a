"""
Contract Validation Module

Валидация JSON контрактов на границе вызова движка конверсии.
"""

from .validators import (
    CONVERSION_REQUEST,
    CONVERSION_RESPONSE,
    ContractValidator,
    SchemaLoader,
    contract_validator,
    validate_conversion_request,
    validate_conversion_response,
)

__all__ = [
    # Schema names
    "CONVERSION_REQUEST",
    "CONVERSION_RESPONSE",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "contract_validator",
    "validate_conversion_request",
    "validate_conversion_response",
]

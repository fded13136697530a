"""
Conversion engine core: digit table, error taxonomy, engine, models, contracts.

Nothing in this package performs I/O or holds mutable shared state.
"""

from numconv.core.digits import (
    DIGITS,
    MAX_RADIX,
    MIN_RADIX,
    DigitRangeError,
    digit_to_value,
    is_valid_radix,
    value_to_digit,
)
from numconv.core.engine import (
    UINT64_MAX,
    ConverterConfig,
    NumberConverter,
    convert,
    convert_unsafe,
    parse_to_decimal,
    parse_to_decimal_string,
    parse_to_decimal_unsafe,
    render_from_decimal,
    render_from_decimal_string,
    render_from_decimal_unsafe,
    validate_numeral,
)
from numconv.core.errors import (
    ERROR_MESSAGES,
    ConversionError,
    ConversionErrorKind,
    ConversionResult,
    NumeralFormatError,
    RadixRangeError,
    ValueOverflowError,
    describe_error,
    exception_for,
)

__all__ = [
    # Digits
    "DIGITS",
    "MAX_RADIX",
    "MIN_RADIX",
    "DigitRangeError",
    "digit_to_value",
    "is_valid_radix",
    "value_to_digit",
    # Engine
    "UINT64_MAX",
    "ConverterConfig",
    "NumberConverter",
    "convert",
    "convert_unsafe",
    "parse_to_decimal",
    "parse_to_decimal_string",
    "parse_to_decimal_unsafe",
    "render_from_decimal",
    "render_from_decimal_string",
    "render_from_decimal_unsafe",
    "validate_numeral",
    # Errors
    "ERROR_MESSAGES",
    "ConversionError",
    "ConversionErrorKind",
    "ConversionResult",
    "NumeralFormatError",
    "RadixRangeError",
    "ValueOverflowError",
    "describe_error",
    "exception_for",
]

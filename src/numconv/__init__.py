"""
numconv: conversion of numerals between radices 2..36 within the 64-bit unsigned range.
"""

from numconv.core import (
    MAX_RADIX,
    MIN_RADIX,
    UINT64_MAX,
    ConversionErrorKind,
    ConversionResult,
    convert,
    parse_to_decimal,
    render_from_decimal,
    validate_numeral,
)

__version__ = "1.0.0"

__all__ = [
    "MAX_RADIX",
    "MIN_RADIX",
    "UINT64_MAX",
    "ConversionErrorKind",
    "ConversionResult",
    "convert",
    "parse_to_decimal",
    "render_from_decimal",
    "validate_numeral",
]

"""
Domain models for the conversion call boundary.
"""

from numconv.core.domain.conversion import (
    RADIX_FIELD_MAX,
    ConversionRequest,
    ConversionResponse,
)

__all__ = [
    "RADIX_FIELD_MAX",
    "ConversionRequest",
    "ConversionResponse",
]

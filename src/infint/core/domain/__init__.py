"""
Domain models and value objects.

Contains the InfInt value model, input normalization and text formatting.
"""

from infint.core.domain.formatting import (
    ExponentialFormatConfig,
    format_canonical,
    format_exponential,
    to_python_int,
)
from infint.core.domain.normalization import (
    CANONICAL_INTEGER_PATTERN,
    FLOAT_EXPONENT_THRESHOLD,
    Source,
    int_to_text,
    is_canonical_text,
    normalize,
    source_to_text,
)
from infint.core.domain.value import InfInt, infint

__all__ = [
    # Value model
    "InfInt",
    "infint",
    # Normalization
    "CANONICAL_INTEGER_PATTERN",
    "FLOAT_EXPONENT_THRESHOLD",
    "Source",
    "int_to_text",
    "is_canonical_text",
    "normalize",
    "source_to_text",
    # Formatting
    "ExponentialFormatConfig",
    "format_canonical",
    "format_exponential",
    "to_python_int",
]

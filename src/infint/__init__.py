"""
infint — целые числа произвольной точности

Знак и десятичная магнитуда, школьные алгоритмы: сложение, вычитание,
умножение, деление, остаток, степень, целочисленный корень, НОД, НОК.

    >>> from infint import infint
    >>> infint("123456789").mul("987654321")
    InfInt('121932631112635269')
"""

from infint.core.domain import ExponentialFormatConfig, InfInt, infint
from infint.core.errors import (
    DivisionByZeroError,
    FormatError,
    InfIntError,
    RangeError,
)

__version__ = "0.1.0"

__all__ = [
    # Value
    "InfInt",
    "infint",
    # Config
    "ExponentialFormatConfig",
    # Errors
    "InfIntError",
    "FormatError",
    "DivisionByZeroError",
    "RangeError",
]

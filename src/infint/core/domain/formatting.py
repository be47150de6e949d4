"""
Formatting — текстовые представления значения

- Каноническая форма: необязательный '-' (по сырому флагу), цифры без
  ведущих нулей, без '+'
- Экспоненциальная форма: d[.ddd]e<length>, где <length> — полное число цифр
  магнитуды; строго отрицательные значения получают префикс '-', которого
  нет в базовой грамматике d[.ddd]e<length>
- Конверсия в int произвольной длины
"""

from dataclasses import dataclass
from typing import Final, Optional

from infint.core.errors import RangeError
from infint.core.math.digits import DIGIT_BASE, SignedDigits, is_zero_digits

# Размер блока цифр при сборке int (обходит лимит int(str) на длину строки)
INT_ASSEMBLY_CHUNK_DIGITS: Final[int] = 1000


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ExponentialFormatConfig:
    """Конфигурация экспоненциальной записи.

    Допустимый диапазон precision (включительно).
    """

    precision_min: int = 0
    precision_max: int = 100


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def digits_to_text(value: SignedDigits) -> str:
    """Цифры магнитуды как строка."""
    return "".join(str(d) for d in value.digits)


def format_canonical(value: SignedDigits) -> str:
    """
    Каноническая текстовая форма.

    Examples:
        >>> format_canonical(SignedDigits(True, (4, 2)))
        '-42'
        >>> format_canonical(SignedDigits(True, (0,)))
        '-0'
    """
    return ("-" if value.negative else "") + digits_to_text(value)


def format_exponential(
    value: SignedDigits,
    precision: Optional[int] = None,
    config: Optional[ExponentialFormatConfig] = None,
) -> str:
    """
    Экспоненциальная форма d[.ddd]e<length>.

    Args:
        value: Значение
        precision: Число цифр после точки (дополняется нулями справа);
            0 — без дробной части; None — все оставшиеся цифры
        config: Допустимый диапазон precision (default: [0, 100])

    Returns:
        Строка вида "1.23e5"; строго отрицательные значения с префиксом '-'

    Raises:
        RangeError: Если precision вне диапазона config

    Examples:
        >>> format_exponential(SignedDigits(False, (1, 2, 3, 4, 5)), 2)
        '1.23e5'
        >>> format_exponential(SignedDigits(False, (5,)), 3)
        '5.000e1'
        >>> format_exponential(SignedDigits(False, (5,)))
        '5e1'
    """
    config = config or ExponentialFormatConfig()

    if precision is not None and not config.precision_min <= precision <= config.precision_max:
        raise RangeError(
            f"InfInt.to_exponential precision must be between "
            f"{config.precision_min} and {config.precision_max}, got {precision}."
        )

    text = digits_to_text(value)
    lead, rest = text[0], text[1:]

    if precision is not None:
        rest = rest[:precision].ljust(precision, "0")

    fraction = f".{rest}" if rest else ""
    sign = "-" if value.negative and not is_zero_digits(value.digits) else ""

    return f"{sign}{lead}{fraction}e{len(text)}"


def to_python_int(value: SignedDigits) -> int:
    """
    Конверсия в встроенный int без ограничения длины строки.

    Examples:
        >>> to_python_int(SignedDigits(True, (1, 2, 3)))
        -123
    """
    result = 0
    digits = value.digits

    for start in range(0, len(digits), INT_ASSEMBLY_CHUNK_DIGITS):
        chunk = digits[start : start + INT_ASSEMBLY_CHUNK_DIGITS]
        chunk_value = 0
        for d in chunk:
            chunk_value = chunk_value * DIGIT_BASE + d
        result = result * DIGIT_BASE ** len(chunk) + chunk_value

    return -result if value.negative else result

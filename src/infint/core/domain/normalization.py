"""
Normalization — приведение источника к каноническому виду

Единственная точка разбора внешнего ввода. Источник (str/int/float/bool/None)
сначала переводится в десятичный текст, затем проверяется грамматикой:

    ^[+-]?(0|[1-9][0-9]*)$

Ведущий '-' выставляет флаг negative, ведущий '+' отбрасывается,
остальные символы становятся цифрами магнитуды.

ВАЖНО: "-0" допустим и даёт отрицательный ноль (флаг сохраняется).
"""

import logging
import re
from typing import Final, Union

from infint.core.errors import FormatError
from infint.core.math.digits import SignedDigits

logger = logging.getLogger(__name__)

Source = Union[str, int, float, bool, None]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Каноническая грамматика целого (совпадает со схемой contracts/schema/infint_text.json)
CANONICAL_INTEGER_PATTERN: Final[str] = r"^[+-]?(0|[1-9][0-9]*)$"

_CANONICAL_INTEGER_RE: Final[re.Pattern[str]] = re.compile(CANONICAL_INTEGER_PATTERN)

# Порог, начиная с которого стандартная десятичная запись float экспоненциальная
FLOAT_EXPONENT_THRESHOLD: Final[float] = 1e21

# str(int) ограничен sys.get_int_max_str_digits(); большие int переводятся блоками
INT_TEXT_CHUNK_DIGITS: Final[int] = 1000


# =============================================================================
# ТЕКСТОВАЯ ФОРМА ИСТОЧНИКА
# =============================================================================


def int_to_text(value: int) -> str:
    """
    Десятичная запись int произвольной длины.

    Examples:
        >>> int_to_text(-120)
        '-120'
    """
    magnitude = abs(value)
    chunk = 10**INT_TEXT_CHUNK_DIGITS
    parts: list[str] = []

    while magnitude >= chunk:
        magnitude, low = divmod(magnitude, chunk)
        parts.append(f"{low:0{INT_TEXT_CHUNK_DIGITS}d}")

    parts.append(str(magnitude))
    parts.reverse()

    return ("-" if value < 0 else "") + "".join(parts)


def source_to_text(source: Source) -> str:
    """
    Перевод источника в десятичный текст.

    - None → "0"
    - True → "1", False → "0"
    - int → десятичная запись
    - float → целая десятичная запись если float целый и |x| < 1e21,
      иначе repr (который не пройдёт грамматику)
    - str → без изменений

    Raises:
        FormatError: Если тип источника не поддерживается
    """
    if source is None:
        return "0"

    # bool проверяется до int (bool — подкласс int)
    if isinstance(source, bool):
        return "1" if source else "0"

    if isinstance(source, int):
        return int_to_text(source)

    if isinstance(source, float):
        if source.is_integer() and abs(source) < FLOAT_EXPONENT_THRESHOLD:
            return int_to_text(int(source))
        return repr(source)

    if isinstance(source, str):
        return source

    raise FormatError(
        f"Attempted to assign InfInt a non-numerical source of type {type(source).__name__}."
    )


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def is_canonical_text(text: str) -> bool:
    """Проверка текста канонической грамматикой (целиком, без хвостового \\n)."""
    return _CANONICAL_INTEGER_RE.fullmatch(text) is not None


def normalize(source: Source = None) -> SignedDigits:
    """
    Нормализация источника в знак и магнитуду.

    Args:
        source: Строка, int, float, bool или None (→ "0")

    Returns:
        SignedDigits с канонической магнитудой

    Raises:
        FormatError: Если текст не соответствует грамматике

    Examples:
        >>> normalize("+42")
        SignedDigits(negative=False, digits=(4, 2))
        >>> normalize(-7)
        SignedDigits(negative=True, digits=(7,))
        >>> normalize()
        SignedDigits(negative=False, digits=(0,))
    """
    text = source_to_text(source)

    if not is_canonical_text(text):
        logger.debug("rejected non-canonical integer text of length %d", len(text))
        raise FormatError(f"Attempted to assign InfInt a non-numerical string: {text[:64]!r}.")

    negative = text.startswith("-")
    body = text[1:] if text[0] in "+-" else text

    return SignedDigits(negative, tuple(int(c) for c in body))

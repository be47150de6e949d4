"""
Digits — рабочее представление магнитуды

Магнитуда хранится как кортеж десятичных цифр (int 0..9), старшая цифра первой.
Движок оперирует парой SignedDigits (negative, digits) без валидации pydantic;
валидация выполняется один раз на границе, в модели InfInt.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Магнитуда никогда не пустая
2. Ведущий ноль допускается только у канонического нуля (0,)
3. Функции не мутируют аргументы, всегда возвращают новые кортежи
"""

from typing import Final, NamedTuple, Sequence

Digits = tuple[int, ...]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (поддерживается только десятичная)
DIGIT_BASE: Final[int] = 10

ZERO_DIGITS: Final[Digits] = (0,)
ONE_DIGITS: Final[Digits] = (1,)
TWO_DIGITS: Final[Digits] = (2,)
TEN_DIGITS: Final[Digits] = (1, 0)


# =============================================================================
# ТИПЫ
# =============================================================================


class SignedDigits(NamedTuple):
    """Знак и магнитуда целого числа."""

    negative: bool
    digits: Digits


ZERO: Final[SignedDigits] = SignedDigits(False, ZERO_DIGITS)
ONE: Final[SignedDigits] = SignedDigits(False, ONE_DIGITS)
TEN: Final[SignedDigits] = SignedDigits(False, TEN_DIGITS)


# =============================================================================
# ОПЕРАЦИИ НАД ЦИФРАМИ
# =============================================================================


def is_zero_digits(digits: Sequence[int]) -> bool:
    """True если магнитуда — канонический ноль."""
    return len(digits) == 1 and digits[0] == 0


def is_canonical(digits: Sequence[int]) -> bool:
    """
    Проверка канонической формы магнитуды.

    Returns:
        True если магнитуда непустая, все цифры в 0..9 и нет ведущих нулей
        (кроме единственного нуля)
    """
    if not digits:
        return False

    if any(not 0 <= d < DIGIT_BASE for d in digits):
        return False

    return len(digits) == 1 or digits[0] != 0


def strip_leading_zeros(digits: Sequence[int]) -> Digits:
    """
    Удаление ведущих нулей.

    Examples:
        >>> strip_leading_zeros([0, 0, 4, 2])
        (4, 2)
        >>> strip_leading_zeros([0, 0])
        (0,)
    """
    start = 0
    last = len(digits) - 1

    while start < last and digits[start] == 0:
        start += 1

    stripped = tuple(digits[start:])
    return stripped or ZERO_DIGITS


def shift_digits(digits: Digits, places: int) -> Digits:
    """Умножение магнитуды на 10^places (дописывание нулей справа)."""
    if places == 0 or is_zero_digits(digits):
        return digits
    return digits + (0,) * places


def is_odd(digits: Digits) -> bool:
    """Чётность по младшей цифре."""
    return digits[-1] % 2 == 1


def digits_from_small_int(value: int) -> Digits:
    """
    Магнитуда из небольшого неотрицательного int.

    Используется для произведений цифр и счётчиков внутри алгоритмов.
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return tuple(int(c) for c in str(value))


def digits_to_small_int(digits: Digits) -> int:
    """Обратная конверсия для магнитуд, используемых как размер (индекс корня)."""
    value = 0
    for d in digits:
        value = value * DIGIT_BASE + d
    return value

"""
Roots — целочисленный корень n-й степени (извлечение по цифрам)

Обобщение ручного извлечения квадратного корня на произвольный индекс n:

1. Магнитуда разбивается на группы по n цифр от младшего конца
   (старшая группа может быть короче)
2. Первая группа: наибольшее y с y^n <= group, r = group - y^n
3. Для каждой следующей группы a:
       target = 10^n·r + a
       b = (первая цифра 0..9 с (10y+b)^n - 10^n·y^n > target) - 1, или 9
       r = target - ((10y+b)^n - 10^n·y^n)
       y = 10y + b
4. Результат — y (корень с округлением вниз, остаток не возвращается)

Используется модуль подкоренного выражения, поэтому результат неотрицательный.
"""

import logging

from infint.core.errors import RangeError
from infint.core.math.additive import add_magnitudes, sub_magnitudes
from infint.core.math.comparison import compare_magnitudes, strict_sign
from infint.core.math.digits import (
    DIGIT_BASE,
    ONE_DIGITS,
    TEN_DIGITS,
    ZERO_DIGITS,
    Digits,
    SignedDigits,
    digits_from_small_int,
    digits_to_small_int,
    shift_digits,
    strip_leading_zeros,
)
from infint.core.math.exponentiation import power_magnitude
from infint.core.math.multiplicative import mul_magnitudes

logger = logging.getLogger(__name__)


def split_digit_groups(digits: Digits, size: int) -> list[Digits]:
    """
    Разбиение магнитуды на группы по size цифр от младшего конца.

    Examples:
        >>> split_digit_groups((1, 2, 3, 4, 5), 2)
        [(1,), (2, 3), (4, 5)]
        >>> split_digit_groups((1, 0, 0, 5), 2)
        [(1, 0), (5,)]
    """
    if size <= 0:
        raise ValueError(f"group size must be positive, got {size}")

    groups: list[Digits] = []
    end = len(digits)

    while end > 0:
        start = max(0, end - size)
        groups.append(strip_leading_zeros(digits[start:end]))
        end = start

    groups.reverse()
    return groups


def _first_root_digit(group: Digits, index: Digits) -> Digits:
    """Наибольшее y с y^n <= group (перебор вверх, затем шаг назад)."""
    y = ZERO_DIGITS

    while compare_magnitudes(power_magnitude(y, index), group) <= 0:
        y = add_magnitudes(y, ONE_DIGITS)

    return sub_magnitudes(y, ONE_DIGITS)


def root_magnitude(radicand: Digits, index: Digits) -> Digits:
    """Целочисленный корень степени index из магнитуды."""
    groups = split_digit_groups(radicand, digits_to_small_int(index))
    logger.debug("root extraction: index %s, %d digit groups", "".join(map(str, index)), len(groups))

    # 10^n
    scale = power_magnitude(TEN_DIGITS, index)

    first, *rest = groups
    y = _first_root_digit(first, index)
    remainder = sub_magnitudes(first, power_magnitude(y, index))

    for group in rest:
        shifted_power = mul_magnitudes(scale, power_magnitude(y, index))
        target = add_magnitudes(mul_magnitudes(scale, remainder), group)
        base = shift_digits(y, 1)

        digit = DIGIT_BASE - 1
        for candidate in range(DIGIT_BASE):
            grown = power_magnitude(add_magnitudes(base, digits_from_small_int(candidate)), index)
            if compare_magnitudes(sub_magnitudes(grown, shifted_power), target) > 0:
                digit = candidate - 1
                break

        next_y = add_magnitudes(base, digits_from_small_int(digit))
        growth = sub_magnitudes(power_magnitude(next_y, index), shifted_power)

        remainder = sub_magnitudes(target, growth)
        y = next_y

    return y


def root(radicand: SignedDigits, index: SignedDigits) -> SignedDigits:
    """
    Целочисленный корень n-й степени.

    Args:
        radicand: Подкоренное выражение (берётся модуль)
        index: Индекс корня (строго положительный)

    Returns:
        floor(|radicand| ** (1/index)), неотрицательный

    Raises:
        RangeError: Если индекс не строго положительный

    Examples:
        >>> root(SignedDigits(False, (2, 7)), SignedDigits(False, (3,)))
        SignedDigits(negative=False, digits=(3,))
    """
    if strict_sign(index) <= 0:
        logger.debug("root index rejected: negative=%s digits=%s", index.negative, index.digits)
        raise RangeError("Root index must be positive.")

    return SignedDigits(False, root_magnitude(radicand.digits, index.digits))

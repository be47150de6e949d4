"""
Exponentiation — возведение в степень (square-and-multiply)

    x^0 = 1
    x^1 = x
    иначе: пока e > 1
        нечётное e: acc *= base, e -= 1
        base *= base, e //= 2
    результат = base * acc

Знак: отрицательное основание в нечётной степени даёт отрицательный
результат, в чётной — положительный. Отрицательная степень запрещена
(результат был бы рациональным).
"""

import logging

from infint.core.errors import RangeError
from infint.core.math.additive import sub_magnitudes
from infint.core.math.comparison import compare_magnitudes, strict_sign
from infint.core.math.digits import (
    ONE,
    ONE_DIGITS,
    TWO_DIGITS,
    Digits,
    SignedDigits,
    is_odd,
    is_zero_digits,
)
from infint.core.math.multiplicative import divmod_magnitudes, mul_magnitudes

logger = logging.getLogger(__name__)


def power_magnitude(base: Digits, exponent: Digits) -> Digits:
    """Возведение магнитуды в неотрицательную степень."""
    if is_zero_digits(exponent):
        return ONE_DIGITS

    if exponent == ONE_DIGITS:
        return base

    n = exponent
    m = base
    accumulator = ONE_DIGITS

    while compare_magnitudes(n, ONE_DIGITS) > 0:
        if is_odd(n):
            accumulator = mul_magnitudes(m, accumulator)
            n = sub_magnitudes(n, ONE_DIGITS)
        m = mul_magnitudes(m, m)
        n, _ = divmod_magnitudes(n, TWO_DIGITS)

    return mul_magnitudes(m, accumulator)


def power(base: SignedDigits, exponent: SignedDigits) -> SignedDigits:
    """
    Возведение в степень целого со знаком.

    Args:
        base: Основание
        exponent: Степень (>= 0)

    Returns:
        base ** exponent

    Raises:
        RangeError: Если степень отрицательная

    Examples:
        >>> power(SignedDigits(False, (2,)), SignedDigits(False, (1, 0)))
        SignedDigits(negative=False, digits=(1, 0, 2, 4))
        >>> power(SignedDigits(True, (3,)), SignedDigits(False, (3,)))
        SignedDigits(negative=True, digits=(2, 7))
    """
    if strict_sign(exponent) < 0:
        logger.debug("negative exponent rejected: %d digits", len(exponent.digits))
        raise RangeError("Exponent must be non-negative.")

    if is_zero_digits(exponent.digits):
        return ONE

    if exponent.digits == ONE_DIGITS:
        return base

    magnitude = power_magnitude(base.digits, exponent.digits)
    negative = base.negative and is_odd(exponent.digits) and not is_zero_digits(magnitude)

    return SignedDigits(negative, magnitude)

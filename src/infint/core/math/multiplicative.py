"""
Multiplicative — умножение, деление и остаток

Умножение: каждая пара ненулевых цифр (d1·10^i, d2·10^j) даёт частичное
произведение d1·d2·10^(i+j); все частичные произведения накапливаются через
add_magnitudes. Корректность полностью опирается на перенос в сложении.

Деление и остаток используют один алгоритм длинного деления над модулями:
- остаток r инициализируется первыми (l-1) цифрами делимого
- для каждой следующей цифры: r = r*10 + digit
- цифра частного b = наибольшая 0..9 с b*divisor <= r, находится
  повторным вычитанием; r -= b*divisor

КОНВЕНЦИЯ ЗНАКОВ (усечение к нулю):
    знак частного  = произведение знаков операндов
    знак остатка   = знак делимого
    y * (x div y) + (x mod y) == x для любых знаков
"""

import logging

from infint.core.errors import DivisionByZeroError
from infint.core.math.additive import add_magnitudes, sub_magnitudes
from infint.core.math.comparison import compare_magnitudes
from infint.core.math.digits import (
    ONE_DIGITS,
    ZERO,
    ZERO_DIGITS,
    Digits,
    SignedDigits,
    digits_from_small_int,
    is_zero_digits,
    shift_digits,
    strip_leading_zeros,
)

logger = logging.getLogger(__name__)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_magnitudes(a: Digits, b: Digits) -> Digits:
    """Школьное умножение O(n·m) как сумма сдвинутых произведений цифр."""
    if is_zero_digits(a) or is_zero_digits(b):
        return ZERO_DIGITS

    accumulator = ZERO_DIGITS

    for i, d1 in enumerate(reversed(a)):
        if d1 == 0:
            continue
        for j, d2 in enumerate(reversed(b)):
            if d2 == 0:
                continue
            partial = shift_digits(digits_from_small_int(d1 * d2), i + j)
            accumulator = add_magnitudes(accumulator, partial)

    return accumulator


def mul(x: SignedDigits, y: SignedDigits) -> SignedDigits:
    """
    Умножение целых со знаком.

    Знак = произведение знаков; если один из операндов ноль — результат ноль.
    """
    if is_zero_digits(x.digits) or is_zero_digits(y.digits):
        return ZERO

    return SignedDigits(x.negative != y.negative, mul_magnitudes(x.digits, y.digits))


# =============================================================================
# ДЛИННОЕ ДЕЛЕНИЕ
# =============================================================================


def _trial_subtract(remainder: Digits, divisor: Digits) -> tuple[int, Digits]:
    """Цифра частного повторным вычитанием делителя из текущего остатка."""
    quotient_digit = 0

    while compare_magnitudes(remainder, divisor) >= 0:
        remainder = sub_magnitudes(remainder, divisor)
        quotient_digit += 1

    return quotient_digit, remainder


def divmod_magnitudes(dividend: Digits, divisor: Digits) -> tuple[Digits, Digits]:
    """
    Длинное деление магнитуд.

    Args:
        dividend: Делимое (k цифр)
        divisor: Делитель (l цифр)

    Returns:
        (частное, остаток), остаток < делителя

    Raises:
        DivisionByZeroError: Если делитель равен нулю
    """
    if is_zero_digits(divisor):
        logger.debug("division by zero requested for dividend of %d digits", len(dividend))
        raise DivisionByZeroError("Cannot divide by zero.")

    order = compare_magnitudes(dividend, divisor)

    if order < 0:
        return ZERO_DIGITS, dividend

    if order == 0:
        return ONE_DIGITS, ZERO_DIGITS

    if divisor == ONE_DIGITS:
        return dividend, ZERO_DIGITS

    width = len(divisor)
    logger.debug("long division: %d-digit dividend by %d-digit divisor", len(dividend), width)

    remainder = strip_leading_zeros(dividend[: width - 1])
    quotient: list[int] = []

    for digit in dividend[width - 1 :]:
        # r = r*10 + digit
        remainder = strip_leading_zeros(remainder + (digit,))
        quotient_digit, remainder = _trial_subtract(remainder, divisor)
        quotient.append(quotient_digit)

    return strip_leading_zeros(quotient), remainder


def divide(x: SignedDigits, y: SignedDigits) -> tuple[SignedDigits, SignedDigits]:
    """
    Деление с остатком для целых со знаком (усечение к нулю).

    Returns:
        (частное, остаток); нулевые результаты всегда без знака

    Raises:
        DivisionByZeroError: Если y == 0

    Examples:
        >>> divide(SignedDigits(False, (1, 0, 0)), SignedDigits(False, (7,)))
        (SignedDigits(negative=False, digits=(1, 4)), SignedDigits(negative=False, digits=(2,)))
    """
    quotient, remainder = divmod_magnitudes(x.digits, y.digits)

    quotient_negative = x.negative != y.negative and not is_zero_digits(quotient)
    remainder_negative = x.negative and not is_zero_digits(remainder)

    return (
        SignedDigits(quotient_negative, quotient),
        SignedDigits(remainder_negative, remainder),
    )


def div(x: SignedDigits, y: SignedDigits) -> SignedDigits:
    """Частное (усечение к нулю)."""
    return divide(x, y)[0]


def mod(x: SignedDigits, y: SignedDigits) -> SignedDigits:
    """Остаток со знаком делимого."""
    return divide(x, y)[1]

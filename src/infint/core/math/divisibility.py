"""
Divisibility — НОД и НОК

gcd: вычитательный алгоритм Евклида над модулями (без остатка от деления):
пока второй операнд ненулевой, из большего вычитается меньший.
lcm: |a·b| / gcd(a, b); lcm с нулём равен нулю.

Оба результата неотрицательные.
"""

import logging

from infint.core.math.additive import sub_magnitudes
from infint.core.math.comparison import compare_magnitudes
from infint.core.math.digits import ZERO, SignedDigits, is_zero_digits
from infint.core.math.multiplicative import divmod_magnitudes, mul_magnitudes

logger = logging.getLogger(__name__)


def gcd(a: SignedDigits, b: SignedDigits) -> SignedDigits:
    """
    Наибольший общий делитель (вычитательный Евклид).

    Examples:
        >>> gcd(SignedDigits(False, (4, 8)), SignedDigits(False, (1, 8)))
        SignedDigits(negative=False, digits=(6,))
    """
    x = a.digits
    y = b.digits

    if is_zero_digits(x):
        return SignedDigits(False, y)

    steps = 0
    while not is_zero_digits(y):
        if compare_magnitudes(x, y) > 0:
            x = sub_magnitudes(x, y)
        else:
            y = sub_magnitudes(y, x)
        steps += 1

    logger.debug("subtractive gcd finished in %d steps", steps)
    return SignedDigits(False, x)


def lcm(a: SignedDigits, b: SignedDigits) -> SignedDigits:
    """
    Наименьшее общее кратное.

    Examples:
        >>> lcm(SignedDigits(False, (4,)), SignedDigits(True, (6,)))
        SignedDigits(negative=False, digits=(1, 2))
    """
    if is_zero_digits(a.digits) or is_zero_digits(b.digits):
        return ZERO

    product = mul_magnitudes(a.digits, b.digits)
    quotient, _ = divmod_magnitudes(product, gcd(a, b).digits)

    return SignedDigits(False, quotient)

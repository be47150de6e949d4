"""
Additive — сложение и вычитание

Школьные алгоритмы над магнитудами (перенос/заём от младшей цифры) и
диспетчеризация по знакам:
- add со смешанными знаками сводится к sub
- sub выбирает большую магнитуду через compare_magnitudes

Четыре случая знаков в sub:
    pos − pos  → разность магнитуд, знак по большей
    neg − neg  → разность магнитуд, знак инвертирован
    pos − neg  → pos + pos
    neg − pos  → −(pos + pos)
"""

from infint.core.math.comparison import compare, compare_magnitudes
from infint.core.math.digits import (
    DIGIT_BASE,
    ZERO,
    Digits,
    SignedDigits,
    strip_leading_zeros,
)


# =============================================================================
# МАГНИТУДЫ
# =============================================================================


def add_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Поразрядное сложение магнитуд.

    digit = sum mod 10, carry = sum div 10; оставшийся перенос
    становится новой старшей цифрой.
    """
    result: list[int] = []
    carry = 0
    i = len(a) - 1
    j = len(b) - 1

    while i >= 0 or j >= 0:
        total = carry
        if i >= 0:
            total += a[i]
        if j >= 0:
            total += b[j]

        result.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE
        i -= 1
        j -= 1

    if carry:
        result.append(carry)

    result.reverse()
    return tuple(result)


def sub_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Поразрядное вычитание магнитуд с заёмом.

    Args:
        a: Уменьшаемое (a >= b)
        b: Вычитаемое

    Returns:
        Магнитуда a - b без ведущих нулей

    Raises:
        ValueError: Если a < b
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("minuend magnitude must not be smaller than subtrahend")

    result: list[int] = []
    borrow = 0
    offset = len(a) - len(b)

    for i in range(len(a) - 1, -1, -1):
        j = i - offset
        diff = a[i] - borrow
        if j >= 0:
            diff -= b[j]

        borrow = 1 if diff < 0 else 0
        if diff < 0:
            diff += DIGIT_BASE

        result.append(diff)

    result.reverse()
    return strip_leading_zeros(result)


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def negate(x: SignedDigits) -> SignedDigits:
    """Инверсия сырого флага знака (negate(0) даёт отрицательный ноль)."""
    return SignedDigits(not x.negative, x.digits)


def add(x: SignedDigits, y: SignedDigits) -> SignedDigits:
    """
    Сложение целых со знаком.

    Examples:
        >>> add(SignedDigits(False, (1, 2, 3)), SignedDigits(False, (4, 5, 6)))
        SignedDigits(negative=False, digits=(5, 7, 9))
        >>> add(SignedDigits(True, (7,)), SignedDigits(False, (3,)))
        SignedDigits(negative=True, digits=(4,))
    """
    if x.negative != y.negative:
        return sub(x, negate(y))

    # Одинаковые знаки: сумма модулей с общим знаком
    return SignedDigits(x.negative, add_magnitudes(x.digits, y.digits))


def sub(x: SignedDigits, y: SignedDigits) -> SignedDigits:
    """
    Вычитание целых со знаком.

    Examples:
        >>> sub(SignedDigits(False, (1, 0, 0, 0)), SignedDigits(False, (9, 9, 9)))
        SignedDigits(negative=False, digits=(1,))
    """
    if compare(x, y) == 0:
        return ZERO

    if x.negative != y.negative:
        # pos − neg ≡ pos + pos, neg − pos ≡ −(pos + pos)
        return SignedDigits(x.negative, add_magnitudes(x.digits, y.digits))

    if compare_magnitudes(x.digits, y.digits) >= 0:
        return SignedDigits(x.negative, sub_magnitudes(x.digits, y.digits))

    return SignedDigits(not x.negative, sub_magnitudes(y.digits, x.digits))

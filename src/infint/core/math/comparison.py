"""
Comparison — полный порядок над целыми со знаком

Алгоритм cmp:
1. Разные знаки решают сразу (отрицательное < положительного)
2. Одинаковый знак: сначала длина магнитуды (больше цифр — больше по модулю,
   для отрицательных отношение инвертируется), затем лексикографически
3. Одинаковые знак и магнитуда → 0

Ноль не имеет знака: отрицательный ноль (флаг negative у магнитуды (0,))
равен нулю. Нестрогий sign() при этом возвращает сырой флаг.
"""

from infint.core.math.digits import Digits, SignedDigits, is_zero_digits


def compare_magnitudes(a: Digits, b: Digits) -> int:
    """
    Сравнение магнитуд без учёта знака.

    Для канонических магнитуд одинаковой длины лексикографическое сравнение
    совпадает с числовым.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    if a == b:
        return 0

    return 1 if a > b else -1


def sign(value: SignedDigits) -> int:
    """Знак по сырому флагу: -1 или +1 (ноль с флагом negative даёт -1)."""
    return -1 if value.negative else 1


def strict_sign(value: SignedDigits) -> int:
    """Строгий знак: 0 только для нуля, иначе ±1."""
    if is_zero_digits(value.digits):
        return 0
    return sign(value)


def compare(x: SignedDigits, y: SignedDigits) -> int:
    """
    Полный порядок над SignedDigits.

    Returns:
        -1 если x < y, 0 если x == y, +1 если x > y

    Examples:
        >>> compare(SignedDigits(True, (5,)), SignedDigits(False, (3,)))
        -1
        >>> compare(SignedDigits(True, (1, 0)), SignedDigits(True, (9,)))
        -1
    """
    sx = strict_sign(x)
    sy = strict_sign(y)

    if sx != sy:
        return 1 if sx > sy else -1

    if sx == 0:
        return 0

    order = compare_magnitudes(x.digits, y.digits)
    return -order if sx < 0 else order


def absolute(value: SignedDigits) -> SignedDigits:
    """Модуль: та же магнитуда, negative=False."""
    return SignedDigits(False, value.digits)

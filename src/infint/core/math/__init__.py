"""
Core math modules для infint

Арифметический движок: школьные алгоритмы над знаком и десятичной магнитудой.
Все функции чистые и работают с SignedDigits; валидация и форматирование
находятся в infint.core.domain.
"""

# Digits (представление)
from infint.core.math.digits import (
    # Constants
    DIGIT_BASE,
    ONE,
    ONE_DIGITS,
    TEN,
    TEN_DIGITS,
    TWO_DIGITS,
    ZERO,
    ZERO_DIGITS,
    # Types
    Digits,
    SignedDigits,
    # Functions
    digits_from_small_int,
    digits_to_small_int,
    is_canonical,
    is_odd,
    is_zero_digits,
    shift_digits,
    strip_leading_zeros,
)

# Comparison
from infint.core.math.comparison import (
    absolute,
    compare,
    compare_magnitudes,
    sign,
    strict_sign,
)

# Additive core
from infint.core.math.additive import (
    add,
    add_magnitudes,
    negate,
    sub,
    sub_magnitudes,
)

# Multiplicative core
from infint.core.math.multiplicative import (
    div,
    divide,
    divmod_magnitudes,
    mod,
    mul,
    mul_magnitudes,
)

# Exponentiation
from infint.core.math.exponentiation import (
    power,
    power_magnitude,
)

# Root extraction
from infint.core.math.roots import (
    root,
    root_magnitude,
    split_digit_groups,
)

# GCD/LCM
from infint.core.math.divisibility import (
    gcd,
    lcm,
)

__all__ = [
    # Digits — Constants
    "DIGIT_BASE",
    "ONE",
    "ONE_DIGITS",
    "TEN",
    "TEN_DIGITS",
    "TWO_DIGITS",
    "ZERO",
    "ZERO_DIGITS",
    # Digits — Types
    "Digits",
    "SignedDigits",
    # Digits — Functions
    "digits_from_small_int",
    "digits_to_small_int",
    "is_canonical",
    "is_odd",
    "is_zero_digits",
    "shift_digits",
    "strip_leading_zeros",
    # Comparison
    "absolute",
    "compare",
    "compare_magnitudes",
    "sign",
    "strict_sign",
    # Additive core
    "add",
    "add_magnitudes",
    "negate",
    "sub",
    "sub_magnitudes",
    # Multiplicative core
    "div",
    "divide",
    "divmod_magnitudes",
    "mod",
    "mul",
    "mul_magnitudes",
    # Exponentiation
    "power",
    "power_magnitude",
    # Root extraction
    "root",
    "root_magnitude",
    "split_digit_groups",
    # GCD/LCM
    "gcd",
    "lcm",
]

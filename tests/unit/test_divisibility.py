"""
Тесты для Divisibility — НОД и НОК

Проверяет:
1. Примеры gcd(48, 18) = 6, lcm(4, 6) = 12
2. Ноль в операндах
3. Отрицательные операнды (результат неотрицательный)
4. Делимость и связь gcd·lcm == |a·b|
"""

import itertools
import math

from infint import infint

OPERANDS = [-84, -18, -7, 1, 6, 12, 18, 35, 48, 97, 120]


# =============================================================================
# ТЕСТЫ GCD
# =============================================================================


class TestGcd:
    """Тесты gcd"""

    def test_example(self) -> None:
        assert infint(48).gcd(18).to_string() == "6"

    def test_zero_operand(self) -> None:
        """gcd(0, b) == |b|, gcd(a, 0) == |a|"""
        assert infint(0).gcd(15).to_string() == "15"
        assert infint(0).gcd(-15).to_string() == "15"
        assert infint(15).gcd(0).to_string() == "15"
        assert infint(0).gcd(0).to_string() == "0"

    def test_negative_operands(self) -> None:
        assert infint(-48).gcd(18).to_string() == "6"
        assert infint(48).gcd(-18).to_string() == "6"
        assert infint(-48).gcd(-18).to_string() == "6"

    def test_coprime(self) -> None:
        assert infint(35).gcd(97).to_string() == "1"

    def test_matches_math_gcd(self) -> None:
        for a, b in itertools.product(OPERANDS, repeat=2):
            result = infint(a).gcd(b)
            assert result.to_int() == math.gcd(a, b), (a, b)
            assert not result.is_negative

    def test_divides_both(self) -> None:
        for a, b in itertools.product(OPERANDS, repeat=2):
            divisor = infint(a).gcd(b)
            assert infint(a).mod(divisor).is_zero
            assert infint(b).mod(divisor).is_zero


# =============================================================================
# ТЕСТЫ LCM
# =============================================================================


class TestLcm:
    """Тесты lcm"""

    def test_example(self) -> None:
        assert infint(4).lcm(6).to_string() == "12"

    def test_zero_operand(self) -> None:
        assert infint(0).lcm(7).to_string() == "0"
        assert infint(7).lcm(0).to_string() == "0"

    def test_negative_operands(self) -> None:
        assert infint(-4).lcm(6).to_string() == "12"
        assert infint(-4).lcm(-6).to_string() == "12"

    def test_gcd_lcm_product(self) -> None:
        """gcd(a, b)·lcm(a, b) == |a·b|"""
        for a, b in itertools.product(OPERANDS, repeat=2):
            x = infint(a)
            assert x.gcd(b).mul(x.lcm(b)) == x.mul(b).abs(), (a, b)

    def test_multiple_of_both(self) -> None:
        for a, b in itertools.product(OPERANDS, repeat=2):
            multiple = infint(a).lcm(b)
            assert multiple.mod(a).is_zero
            assert multiple.mod(b).is_zero

"""
Тесты для Additive — сложение и вычитание

Проверяет:
1. Перенос и заём по разрядам
2. Четыре комбинации знаков
3. Ноль как нейтральный элемент, x - x == 0
4. Коммутативность и ассоциативность сложения
5. Отрицательный ноль (negate(0), -0 + -0)
"""

import itertools

import pytest

from infint import infint
from infint.core.math.additive import add_magnitudes, sub_magnitudes

OPERANDS = [-(10**20) - 1, -1000, -999, -7, -1, 0, 1, 3, 9, 99, 1000, 123456789, 10**20]


# =============================================================================
# ТЕСТЫ МАГНИТУД
# =============================================================================


class TestMagnitudes:
    """Тесты add_magnitudes / sub_magnitudes"""

    def test_add_with_final_carry(self) -> None:
        """Оставшийся перенос добавляет новую старшую цифру"""
        assert add_magnitudes((9, 9, 9), (1,)) == (1, 0, 0, 0)

    def test_add_different_lengths(self) -> None:
        assert add_magnitudes((5,), (1, 2, 3, 4)) == (1, 2, 3, 9)
        assert add_magnitudes((0,), (0,)) == (0,)

    def test_sub_with_borrow_chain(self) -> None:
        """Заём через несколько нулей и удаление ведущих нулей"""
        assert sub_magnitudes((1, 0, 0, 0), (9, 9, 9)) == (1,)
        assert sub_magnitudes((1, 0, 0, 0), (1,)) == (9, 9, 9)
        assert sub_magnitudes((4, 2), (4, 2)) == (0,)

    def test_sub_smaller_minuend_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be smaller"):
            sub_magnitudes((9,), (1, 0))


# =============================================================================
# ТЕСТЫ ADD
# =============================================================================


class TestAdd:
    """Тесты add"""

    def test_examples(self) -> None:
        assert infint(123).add(456).to_string() == "579"
        assert infint("-7").add("3").to_string() == "-4"
        assert infint(999).add(1).to_string() == "1000"

    def test_sign_combinations(self) -> None:
        assert infint(5).add(-3).to_string() == "2"
        assert infint(3).add(-5).to_string() == "-2"
        assert infint(-5).add(3).to_string() == "-2"
        assert infint(-5).add(-3).to_string() == "-8"

    def test_matches_int_on_all_pairs(self) -> None:
        for a, b in itertools.product(OPERANDS, repeat=2):
            assert infint(a).add(b).to_int() == a + b, (a, b)

    def test_zero_is_identity(self) -> None:
        """Инвариант: x + 0 == x"""
        for a in OPERANDS:
            assert infint(a).add(0) == infint(a)
            assert infint(0).add(a) == infint(a)

    def test_commutative(self) -> None:
        for a, b in itertools.product(OPERANDS, repeat=2):
            assert infint(a).add(b) == infint(b).add(a)

    def test_associative(self) -> None:
        for a, b, c in itertools.product([-999, -1, 0, 7, 1000], repeat=3):
            left = infint(a).add(b).add(c)
            right = infint(a).add(infint(b).add(c))
            assert left == right

    def test_both_negative_zero(self) -> None:
        """-0 + -0 сохраняет флаг знака"""
        result = infint("-0").add("-0")
        assert result.is_zero
        assert result.is_negative
        assert result.to_string() == "-0"


# =============================================================================
# ТЕСТЫ SUB
# =============================================================================


class TestSub:
    """Тесты sub"""

    def test_examples(self) -> None:
        assert infint(1000).sub(999).to_string() == "1"
        assert infint(999).sub(1000).to_string() == "-1"

    def test_sign_combinations(self) -> None:
        """pos−pos, neg−neg, pos−neg, neg−pos"""
        assert infint(3).sub(5).to_string() == "-2"
        assert infint(-3).sub(-5).to_string() == "2"
        assert infint(-5).sub(-3).to_string() == "-2"
        assert infint(3).sub(-5).to_string() == "8"
        assert infint(-3).sub(5).to_string() == "-8"

    def test_matches_int_on_all_pairs(self) -> None:
        for a, b in itertools.product(OPERANDS, repeat=2):
            assert infint(a).sub(b).to_int() == a - b, (a, b)

    def test_self_difference_is_zero(self) -> None:
        """Инвариант: x - x == 0, без знака"""
        for a in OPERANDS:
            result = infint(a).sub(a)
            assert result.is_zero
            assert result.is_positive

    def test_negative_zero_operands(self) -> None:
        assert infint("-0").sub(5).to_string() == "-5"
        assert infint("-0").sub(-5).to_string() == "5"
        assert infint(5).sub("-0").to_string() == "5"


# =============================================================================
# ТЕСТЫ NEGATE
# =============================================================================


class TestNegate:
    """Тесты negate"""

    def test_negate_values(self) -> None:
        assert infint(42).negate().to_string() == "-42"
        assert infint(-42).negate().to_string() == "42"

    def test_negate_zero_sets_flag(self) -> None:
        """negate(0) даёт отрицательный ноль: строгие предикаты его не видят"""
        result = infint(0).negate()
        assert result.is_negative
        assert not result.is_strictly_negative
        assert result == 0

    def test_operand_not_mutated(self) -> None:
        value = infint(42)
        value.negate()
        value.add(1)
        assert value.to_string() == "42"

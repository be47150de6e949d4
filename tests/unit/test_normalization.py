"""
Тесты для Normalization — разбор источников в InfInt

Проверяет:
1. Каноническую грамматику ^[+-]?(0|[1-9][0-9]*)$
2. Конверсию bool/int/float/None в текст
3. Отрицательный ноль (флаг сохраняется)
4. FormatError для всех невалидных источников
5. Round-trip: parse(s).to_string() == s
"""

import pytest

from infint import FormatError, InfInt, infint
from infint.core.domain.normalization import (
    CANONICAL_INTEGER_PATTERN,
    int_to_text,
    is_canonical_text,
    normalize,
    source_to_text,
)
from infint.core.math.digits import SignedDigits


# =============================================================================
# ТЕСТЫ ГРАММАТИКИ
# =============================================================================


class TestCanonicalGrammar:
    """Тесты канонической грамматики целого"""

    def test_pattern_constant(self) -> None:
        """Паттерн совпадает с документированной грамматикой"""
        assert CANONICAL_INTEGER_PATTERN == r"^[+-]?(0|[1-9][0-9]*)$"

    def test_valid_texts(self) -> None:
        """Канонические строки принимаются"""
        for text in ["0", "-0", "+0", "7", "-7", "+7", "10", "1234567890", "-900000000000000000001"]:
            assert is_canonical_text(text), text

    def test_invalid_texts(self) -> None:
        """Неканонические строки отклоняются"""
        for text in ["", "-", "+", "007", "00", "-01", "12a", "1.0", "1e5", " 1", "1 ", "--1", "+-1", "12\n", "٣"]:
            assert not is_canonical_text(text), repr(text)


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ ИСТОЧНИКОВ
# =============================================================================


class TestSourceToText:
    """Тесты конверсии источника в десятичный текст"""

    def test_none_is_zero(self) -> None:
        assert source_to_text(None) == "0"

    def test_bool(self) -> None:
        """True → "1", False → "0" (bool проверяется раньше int)"""
        assert source_to_text(True) == "1"
        assert source_to_text(False) == "0"

    def test_int(self) -> None:
        assert source_to_text(0) == "0"
        assert source_to_text(12345) == "12345"
        assert source_to_text(-987) == "-987"

    def test_huge_int_beyond_str_limit(self) -> None:
        """int длиннее лимита str(int) переводится блоками"""
        assert int_to_text(10**5000) == "1" + "0" * 5000
        assert int_to_text(-(10**4500) - 7) == "-1" + "0" * 4499 + "7"

    def test_integral_float(self) -> None:
        """Целый float даёт целую десятичную запись"""
        assert source_to_text(3.0) == "3"
        assert source_to_text(-42.0) == "-42"
        assert source_to_text(-0.0) == "0"
        assert source_to_text(1e20) == "100000000000000000000"

    def test_non_integral_float_keeps_repr(self) -> None:
        """Нецелый или слишком большой float остаётся repr и не проходит грамматику"""
        assert source_to_text(1.5) == "1.5"
        assert source_to_text(1e21) == "1e+21"

    def test_unsupported_type_raises(self) -> None:
        for source in [[1], b"1", {"digits": [1]}, object()]:
            with pytest.raises(FormatError, match="non-numerical source"):
                source_to_text(source)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalize:
    """Тесты normalize → SignedDigits"""

    def test_default_is_zero(self) -> None:
        assert normalize() == SignedDigits(False, (0,))

    def test_plus_sign_stripped(self) -> None:
        assert normalize("+42") == SignedDigits(False, (4, 2))

    def test_minus_sign_sets_flag(self) -> None:
        assert normalize("-42") == SignedDigits(True, (4, 2))

    def test_negative_zero_keeps_flag(self) -> None:
        """Строка "-0" даёт отрицательный ноль, флаг не нормализуется"""
        assert normalize("-0") == SignedDigits(True, (0,))

    def test_invalid_strings_raise(self) -> None:
        """Строки из примеров: "007", "12a" и другие"""
        for text in ["007", "12a", "", "-", "1_000", "0x10", "٣"]:
            with pytest.raises(FormatError, match="non-numerical string"):
                normalize(text)

    def test_invalid_floats_raise(self) -> None:
        for value in [1.5, -0.25, 1e21, float("nan"), float("inf"), float("-inf")]:
            with pytest.raises(FormatError):
                normalize(value)

    def test_format_error_is_value_error(self) -> None:
        """FormatError совместим с обработчиками ValueError"""
        with pytest.raises(ValueError):
            normalize("12a")


# =============================================================================
# ТЕСТЫ ФАБРИКИ
# =============================================================================


class TestFactory:
    """Тесты infint() и InfInt.parse()"""

    def test_round_trip_canonical_strings(self) -> None:
        """Инвариант: parse(s).to_string() == s для канонических s"""
        for text in ["0", "-0", "1", "-1", "579", "-4", "121932631112635269", "-" + "9" * 300]:
            assert infint(text).to_string() == text

    def test_factory_defaults_to_zero(self) -> None:
        value = infint()
        assert value.is_zero
        assert value.is_positive

    def test_parse_equals_factory(self) -> None:
        assert InfInt.parse("-17") == infint("-17")
        assert InfInt.parse(True).to_string() == "1"
        assert InfInt.parse(False).to_string() == "0"

    def test_parse_existing_value(self) -> None:
        """InfInt как источник даёт равное значение с тем же флагом"""
        original = infint("-0")
        copy = infint(original)
        assert copy.digits == original.digits
        assert copy.negative is True

    def test_parse_rejects_leading_zeros(self) -> None:
        with pytest.raises(FormatError):
            infint("007")

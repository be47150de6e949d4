"""
InfInt — целое произвольной точности

Immutable Pydantic модель: знак и десятичная магнитуда (старшая цифра первой).
Каждая операция возвращает новый экземпляр, операнды не изменяются.

ИНВАРИАНТЫ:
1. digits непустой, цифры 0..9, ведущий ноль только у (0,) — проверяется
   валидатором при КАЖДОМ создании, а не только при разборе текста
2. negative может быть True у нуля (отрицательный ноль, например negate(0));
   строгие предикаты считают ноль беззнаковым, нестрогие отдают сырой флаг
3. Равенство и хэш числовые: InfInt("-0") == InfInt("0")
"""

from typing import Annotated, Iterator, Optional, Union

from pydantic import BaseModel, Field, field_validator

from infint.core.domain.formatting import (
    ExponentialFormatConfig,
    format_canonical,
    format_exponential,
    to_python_int,
)
from infint.core.domain.normalization import Source, normalize
from infint.core.errors import FormatError
from infint.core.math import additive, comparison, divisibility, exponentiation, multiplicative, roots
from infint.core.math.digits import SignedDigits, is_zero_digits

Digit = Annotated[int, Field(ge=0, le=9)]


# =============================================================================
# INFINT MODEL
# =============================================================================


class InfInt(BaseModel):
    """
    Целое со знаком произвольной точности.

    Immutable модель (frozen=True). Создание из внешнего источника —
    через InfInt.parse() или фабрику infint(); прямой конструктор
    InfInt(digits=..., negative=...) принимает только каноническую магнитуду.
    """

    digits: tuple[Digit, ...] = Field(
        ..., min_length=1, description="Магнитуда, старшая цифра первой"
    )
    negative: bool = Field(False, description="Флаг знака (допускается у нуля)")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_no_leading_zero(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Ведущий ноль допускается только у канонического нуля."""
        if len(v) > 1 and v[0] == 0:
            raise ValueError(f"digits must not have a leading zero, got {len(v)} digits starting with 0")
        return v

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, source: Union["InfInt", Source] = None) -> "InfInt":
        """
        Создание из строки, int, float, bool или None (→ 0).

        Raises:
            FormatError: Если источник не соответствует грамматике
        """
        if isinstance(source, InfInt):
            return cls(digits=source.digits, negative=source.negative)
        return cls.from_signed(normalize(source))

    @classmethod
    def from_signed(cls, value: SignedDigits) -> "InfInt":
        return cls(digits=value.digits, negative=value.negative)

    @property
    def signed(self) -> SignedDigits:
        """Рабочее представление для арифметического движка."""
        return SignedDigits(self.negative, self.digits)

    # -------------------------------------------------------------------------
    # Предикаты знака
    # -------------------------------------------------------------------------

    @property
    def is_strictly_negative(self) -> bool:
        return False if self.is_zero else self.negative

    @property
    def is_strictly_positive(self) -> bool:
        return False if self.is_zero else not self.negative

    @property
    def is_negative(self) -> bool:
        return self.negative

    @property
    def is_positive(self) -> bool:
        return not self.negative

    @property
    def is_zero(self) -> bool:
        return is_zero_digits(self.digits)

    @property
    def sign(self) -> int:
        """±1 по сырому флагу."""
        return comparison.sign(self.signed)

    @property
    def strict_sign(self) -> int:
        """0 для нуля, иначе ±1."""
        return comparison.strict_sign(self.signed)

    # -------------------------------------------------------------------------
    # Сравнение и знак
    # -------------------------------------------------------------------------

    def cmp(self, other: Union["InfInt", Source]) -> int:
        """Полный порядок: -1, 0 или 1."""
        return comparison.compare(self.signed, _coerce(other).signed)

    def abs(self) -> "InfInt":
        return InfInt.from_signed(comparison.absolute(self.signed))

    def negate(self) -> "InfInt":
        return InfInt.from_signed(additive.negate(self.signed))

    def clone(self) -> "InfInt":
        return InfInt(digits=self.digits, negative=self.negative)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: Union["InfInt", Source]) -> "InfInt":
        return InfInt.from_signed(additive.add(self.signed, _coerce(other).signed))

    def sub(self, other: Union["InfInt", Source]) -> "InfInt":
        return InfInt.from_signed(additive.sub(self.signed, _coerce(other).signed))

    def mul(self, other: Union["InfInt", Source]) -> "InfInt":
        return InfInt.from_signed(multiplicative.mul(self.signed, _coerce(other).signed))

    def div(self, other: Union["InfInt", Source]) -> "InfInt":
        """
        Частное с усечением к нулю.

        Raises:
            DivisionByZeroError: Если делитель равен нулю
        """
        return InfInt.from_signed(multiplicative.div(self.signed, _coerce(other).signed))

    def mod(self, other: Union["InfInt", Source]) -> "InfInt":
        """
        Остаток со знаком делимого.

        Raises:
            DivisionByZeroError: Если делитель равен нулю
        """
        return InfInt.from_signed(multiplicative.mod(self.signed, _coerce(other).signed))

    def divmod(self, other: Union["InfInt", Source]) -> tuple["InfInt", "InfInt"]:
        """Частное и остаток за одно длинное деление."""
        quotient, remainder = multiplicative.divide(self.signed, _coerce(other).signed)
        return InfInt.from_signed(quotient), InfInt.from_signed(remainder)

    def exp(self, exponent: Union["InfInt", Source]) -> "InfInt":
        """
        Возведение в неотрицательную степень.

        Raises:
            RangeError: Если степень отрицательная
        """
        return InfInt.from_signed(exponentiation.power(self.signed, _coerce(exponent).signed))

    def root(self, index: Union["InfInt", Source]) -> "InfInt":
        """
        Целочисленный корень степени index из модуля значения.

        Raises:
            RangeError: Если index не строго положительный
        """
        return InfInt.from_signed(roots.root(self.signed, _coerce(index).signed))

    def gcd(self, other: Union["InfInt", Source]) -> "InfInt":
        return InfInt.from_signed(divisibility.gcd(self.signed, _coerce(other).signed))

    def lcm(self, other: Union["InfInt", Source]) -> "InfInt":
        return InfInt.from_signed(divisibility.lcm(self.signed, _coerce(other).signed))

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return format_canonical(self.signed)

    def to_json(self) -> str:
        """JSON-представление — каноническая строка (см. infint_text.json)."""
        return format_canonical(self.signed)

    def to_exponential(
        self,
        precision: Optional[int] = None,
        config: Optional[ExponentialFormatConfig] = None,
    ) -> str:
        """
        Экспоненциальная форма d[.ddd]e<length>.

        Raises:
            RangeError: Если precision вне [0, 100]
        """
        return format_exponential(self.signed, precision, config)

    def to_int(self) -> int:
        return to_python_int(self.signed)

    def least_significant_digits(self) -> tuple[int, ...]:
        """Снимок цифр от младшей к старшей."""
        return tuple(reversed(self.digits))

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        # каждый обход независим
        return iter(self.least_significant_digits())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"InfInt({self.to_string()!r})"

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero

    def __hash__(self) -> int:
        return hash(self.to_int())

    def __eq__(self, other: object) -> bool:
        # строки не приводятся: hash("5") != hash(5)
        if not isinstance(other, (InfInt, int, float)):
            return NotImplemented
        try:
            return self.cmp(other) == 0
        except FormatError:
            return False

    def __lt__(self, other: Union["InfInt", Source]) -> bool:
        return self.cmp(other) < 0

    def __le__(self, other: Union["InfInt", Source]) -> bool:
        return self.cmp(other) <= 0

    def __gt__(self, other: Union["InfInt", Source]) -> bool:
        return self.cmp(other) > 0

    def __ge__(self, other: Union["InfInt", Source]) -> bool:
        return self.cmp(other) >= 0

    def __neg__(self) -> "InfInt":
        return self.negate()

    def __pos__(self) -> "InfInt":
        return self

    def __abs__(self) -> "InfInt":
        return self.abs()

    def __add__(self, other: Union["InfInt", Source]) -> "InfInt":
        return self.add(other)

    def __radd__(self, other: Union["InfInt", Source]) -> "InfInt":
        return _coerce(other).add(self)

    def __sub__(self, other: Union["InfInt", Source]) -> "InfInt":
        return self.sub(other)

    def __rsub__(self, other: Union["InfInt", Source]) -> "InfInt":
        return _coerce(other).sub(self)

    def __mul__(self, other: Union["InfInt", Source]) -> "InfInt":
        return self.mul(other)

    def __rmul__(self, other: Union["InfInt", Source]) -> "InfInt":
        return _coerce(other).mul(self)

    def __pow__(self, exponent: Union["InfInt", Source]) -> "InfInt":
        return self.exp(exponent)


# =============================================================================
# ФАБРИКА
# =============================================================================


def infint(source: Union[InfInt, Source] = None) -> InfInt:
    """
    Фабрика InfInt из любого поддерживаемого источника.

    Examples:
        >>> infint("123").add(456)
        InfInt('579')
        >>> infint()
        InfInt('0')
    """
    return InfInt.parse(source)


def _coerce(value: Union[InfInt, Source]) -> InfInt:
    if isinstance(value, InfInt):
        return value
    return InfInt.parse(value)

"""
Errors — иерархия исключений InfInt

Все ошибки синхронные и немедленные: это чистая вычислительная библиотека,
любая ошибка означает нарушение контракта вызывающей стороной.

Исключения наследуются от встроенных типов, чтобы существующие обработчики
(`except ValueError`, `except ZeroDivisionError`) продолжали работать.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InfIntError(Exception):
    """Базовое исключение для всех ошибок InfInt."""

    pass


class FormatError(InfIntError, ValueError):
    """
    Источник не соответствует канонической грамматике целого числа.

    Грамматика: ^[+-]?(0|[1-9][0-9]*)$

    Возникает при нормализации (строка с ведущими нулями, посторонние
    символы, нецелый float, неподдерживаемый тип источника).
    """

    pass


class DivisionByZeroError(InfIntError, ZeroDivisionError):
    """Делитель равен нулю (div, mod, divmod)."""

    pass


class RangeError(InfIntError, ValueError):
    """
    Аргумент вне допустимого диапазона.

    - root: индекс корня не строго положительный
    - exp: отрицательная степень
    - to_exponential: precision вне [0, 100]
    """

    pass

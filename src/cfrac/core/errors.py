"""
Errors — иерархия исключений библиотеки цепных дробей

Каждый вид ошибки наследуется от ContinuedFractionError и от
соответствующего встроенного исключения, поэтому вызывающий код может
перехватывать как общий базовый класс, так и привычный builtin:

- InvalidFormatError       (ValueError)        — неверный формат строки/контракта
- ConvergentIndexError     (IndexError)        — индекс подходящей дроби вне диапазона
- InvalidArgumentError     (ValueError)        — недопустимый аргумент фабрики
- DivisionByZeroError      (ZeroDivisionError) — делитель по модулю меньше eps
- CoefficientOverflowError (OverflowError)     — выход за пределы int64

Все ошибки выбрасываются синхронно в точке нарушения, без частичных
результатов и без повторных попыток.
"""


class ContinuedFractionError(Exception):
    """Базовое исключение для всех ошибок цепных дробей."""

    pass


class InvalidFormatError(ContinuedFractionError, ValueError):
    """
    Неверный формат входных данных.

    Возникает при разборе строки вида "[a0; a1; a2]", в том числе когда
    коэффициент не помещается в int64.
    """

    pass


class ConvergentIndexError(ContinuedFractionError, IndexError):
    """
    Индекс подходящей дроби вне допустимого диапазона.

    Для конечной дроби допустимы индексы 0 <= n < size().
    Для периодической — любые n >= 0.
    """

    pass


class InvalidArgumentError(ContinuedFractionError, ValueError):
    """
    Недопустимый аргумент.

    Примеры: нулевой знаменатель в from_rational, отрицательное
    подкоренное выражение в sqrt_continued_fraction, NaN/Inf в from_double.
    """

    pass


class DivisionByZeroError(ContinuedFractionError, ZeroDivisionError):
    """Деление на цепную дробь, значение которой по модулю меньше EPS_DIVISOR."""

    pass


class CoefficientOverflowError(ContinuedFractionError, OverflowError):
    """
    Выход коэффициента или члена подходящей дроби за пределы int64.

    Коэффициенты хранятся как знаковые 64-битные целые; вместо
    молчаливого переполнения выбрасывается это исключение.
    """

    pass

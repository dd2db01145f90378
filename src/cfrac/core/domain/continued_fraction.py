"""
ContinuedFraction — Модель цепной дроби

Цепная дробь — представление числа в виде
    a0 + 1/(a1 + 1/(a2 + 1/(a3 + ...)))
где a_i — целые коэффициенты (знаковые 64-битные).

Модуль обеспечивает:
- Построение из целого, последовательности коэффициентов, строки
- Построение из float (from_double), рационального (from_rational),
  периодической записи (create_periodic)
- Каноническую нормализацию последовательности коэффициентов
- Вычисление значения (to_double) с ленивым кэшированием
- Подходящие дроби по рекуррентному соотношению
- Арифметику и сравнения
- Текстовый формат "[a0; a1, (p1, p2)]"

ОГРАНИЧЕНИЯ АРИФМЕТИКИ:
    Операторы +, -, *, / НЕ являются точной арифметикой цепных дробей.
    Оба операнда переводятся в float (to_double), операция выполняется
    над float, а результат заново раскладывается через from_double с
    лимитом DEFAULT_MAX_TERMS коэффициентов. Точная арифметика требует
    гомографических/бигомографических преобразований и сюда не входит.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность коэффициентов никогда не пуста; ноль — это [0]
2. Не более одного маркера периода, и никогда на первом коэффициенте
3. is_periodic() == наличие маркера, is_finite() == not is_periodic()
4. Кэш значения валиден только до следующего изменения коэффициентов
5. Коэффициенты и члены подходящих дробей не выходят за int64

ФОРМУЛЫ:
    p(-1) = 1, p(0) = a0, p(i) = a(i) * p(i-1) + p(i-2)
    q(-1) = 0, q(0) = 1,  q(i) = a(i) * q(i-1) + q(i-2)
"""

import logging
import operator
import re
from typing import Iterable, List, NamedTuple, Optional, Union

from cfrac.core.domain.coefficient import Coefficient
from cfrac.core.errors import (
    CoefficientOverflowError,
    ConvergentIndexError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidFormatError,
)
from cfrac.core.math.numerical_safeguards import (
    DEFAULT_MAX_TERMS,
    EPS_APPROX_EQUAL,
    EPS_DIVISOR,
    EPS_FRACTIONAL,
    PERIODIC_EVALUATION_TERMS,
    checked_recurrence_step,
    floor_to_int64,
    is_negligible,
    trunc_divmod,
    validate_finite,
    validate_int64,
    validate_term_limit,
)

logger = logging.getLogger(__name__)

# Строка вида "[...]" без вложенных скобок
_BRACKETED_PATTERN = re.compile(r"^\[([^\[\]]+)\]$")

# Одно знаковое целое
_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# Разделители коэффициентов при разборе
_SEPARATOR_PATTERN = re.compile(r"[;,]")


# =============================================================================
# CONVERGENT
# =============================================================================


class Convergent(NamedTuple):
    """Подходящая дробь numerator / denominator."""

    numerator: int
    denominator: int

    def value(self) -> float:
        """Значение подходящей дроби как float."""
        return self.numerator / self.denominator


# =============================================================================
# CONTINUED FRACTION
# =============================================================================


class ContinuedFraction:
    """
    Цепная дробь с поддержкой конечных и периодических разложений.

    Значимый тип: копируется свободно, разделяемого состояния между
    экземплярами нет. Изменяемые операции (set_coefficients,
    add_coefficient, clear, simplify, parse_string, +=, -=, *=, /=)
    нормализуют последовательность и сбрасывают кэш значения.

    Конструктор принимает:
        - int: дробь из одного коэффициента
        - str: строку в формате parse_string
        - Iterable[int]: последовательность коэффициентов (нормализуется)

    Examples:
        >>> ContinuedFraction(42).to_string()
        '[42]'
        >>> ContinuedFraction([3, 7, 16]).to_string()
        '[3; 7, 16]'
        >>> ContinuedFraction("[1; 2; 3]").get_coefficients()
        [1, 2, 3]
    """

    # Мутабельный тип, не хешируется
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union[int, str, Iterable[int]] = 0):
        self._coefficients: List[Coefficient] = [Coefficient.of(0)]
        self._is_finite = True
        self._is_periodic = False
        self._cached_value: Optional[float] = None

        if isinstance(value, str):
            self.parse_string(value)
        elif isinstance(value, int):
            self._coefficients = [Coefficient.of(value)]
            self._cached_value = float(value)
        elif isinstance(value, float):
            raise TypeError(
                "float values must be expanded explicitly via ContinuedFraction.from_double"
            )
        else:
            self.set_coefficients(value)

    # =========================================================================
    # НОРМАЛИЗАЦИЯ И СОСТОЯНИЕ
    # =========================================================================

    @staticmethod
    def _prune_zeros(coefficients: List[Coefficient]) -> List[Coefficient]:
        """Удаление нулевых коэффициентов, кроме первого."""
        if not coefficients:
            return [Coefficient.of(0)]
        return coefficients[:1] + [c for c in coefficients[1:] if c.magnitude != 0]

    @staticmethod
    def _collapse_units(coefficients: List[Coefficient]) -> bool:
        """
        Схлопывание троек [..., a, 1, b, ...] → [..., a + b, ...] на месте.

        Средний коэффициент должен быть ровно +1 и не нести маркер периода.
        Результат занимает позицию a и сохраняет её маркер. После
        схлопывания проверка повторяется с предыдущей позиции, так как
        новое значение само может оказаться единицей между соседями.

        Returns:
            True если было выполнено хотя бы одно схлопывание
        """
        collapsed = False
        i = 0
        while i + 2 < len(coefficients):
            middle = coefficients[i + 1]
            if middle.signed_value == 1 and not middle.is_periodic_marker:
                merged = coefficients[i].signed_value + coefficients[i + 2].signed_value
                coefficients[i : i + 3] = [coefficients[i].with_value(merged)]
                collapsed = True
                i = max(i - 1, 0)
            else:
                i += 1
        return collapsed

    def _normalize(self, collapse: bool = True) -> None:
        """
        Приведение последовательности к канонической форме.

        Шаги:
        1. Удаление нулей с индексом >= 1
        2. Схлопывание [a, 1, b] → [a + b] (если collapse=True)
        3. Повтор 1-2, пока схлопывание порождает новые нули
        4. Обновление флагов и сброс кэша
        """
        coefficients = self._prune_zeros(self._coefficients)
        while collapse and self._collapse_units(coefficients):
            pruned = self._prune_zeros(coefficients)
            if len(pruned) == len(coefficients):
                break
            coefficients = pruned

        self._coefficients = coefficients
        self._update_flags()
        self._invalidate_cache()

    def _update_flags(self) -> None:
        self._is_periodic = any(c.is_periodic_marker for c in self._coefficients)
        self._is_finite = not self._is_periodic

    def _invalidate_cache(self) -> None:
        self._cached_value = None

    def _replace(self, coefficients: List[Coefficient], collapse: bool = True) -> None:
        self._coefficients = coefficients
        self._normalize(collapse=collapse)

    @classmethod
    def _from_coefficients(
        cls, coefficients: List[Coefficient], collapse: bool = True
    ) -> "ContinuedFraction":
        fraction = cls()
        fraction._replace(coefficients, collapse=collapse)
        return fraction

    def _assign(self, other: "ContinuedFraction") -> None:
        """Замена состояния self состоянием other (для +=, -=, *=, /=)."""
        self._coefficients = list(other._coefficients)
        self._update_flags()
        self._invalidate_cache()

    @property
    def periodic_start(self) -> Optional[int]:
        """Индекс коэффициента с маркером периода или None для конечной дроби."""
        for index, coefficient in enumerate(self._coefficients):
            if coefficient.is_periodic_marker:
                return index
        return None

    def _coefficient_at(self, index: int) -> int:
        """
        Знаковый коэффициент с индексом index для рекурренты подходящих дробей.

        Индексы за пределами хранимой последовательности берутся по модулю
        её длины (вся последовательность, включая a0).
        """
        return self._coefficients[index % len(self._coefficients)].signed_value

    def _unrolled_coefficient_at(self, index: int) -> int:
        """
        Знаковый коэффициент развёртки периодической дроби для to_double.

        Индексы за пределами хранимой последовательности берутся циклически
        только из периодической части (от маркера до конца).
        """
        size = len(self._coefficients)
        if index < size:
            return self._coefficients[index].signed_value

        start = self.periodic_start or 0
        period = size - start
        return self._coefficients[start + (index - start) % period].signed_value

    # =========================================================================
    # ОСНОВНЫЕ МЕТОДЫ
    # =========================================================================

    def get_coefficients(self) -> List[int]:
        """Знаковые значения коэффициентов (маркер периода не включается)."""
        return [c.signed_value for c in self._coefficients]

    def set_coefficients(self, coeffs: Iterable[int]) -> None:
        """
        Замена всех коэффициентов с последующей нормализацией.

        Args:
            coeffs: Новые коэффициенты (целые)

        Raises:
            TypeError: Если коэффициент не целый
            CoefficientOverflowError: Если коэффициент вне int64
        """
        self._replace([Coefficient.of(operator.index(c)) for c in coeffs])

    def add_coefficient(self, coeff: int) -> None:
        """Добавление коэффициента в конец с последующей нормализацией."""
        self._replace(self._coefficients + [Coefficient.of(operator.index(coeff))])

    def to_double(self) -> float:
        """
        Числовое значение цепной дроби.

        Вычисляется с конца для численной устойчивости:
            value = a_k
            value = a_{i} + 1 / value   (i = k-1 .. 0)

        Периодическая дробь разворачивается циклически до
        PERIODIC_EVALUATION_TERMS коэффициентов и вычисляется как конечное
        усечение. Результат кэшируется до следующего изменения.

        Returns:
            Значение как float
        """
        if self._cached_value is not None:
            return self._cached_value

        count = len(self._coefficients)
        if self._is_periodic:
            count = max(count, PERIODIC_EVALUATION_TERMS)

        value = 0.0
        for index in reversed(range(count)):
            coefficient = float(self._unrolled_coefficient_at(index))
            if value == 0.0:
                value = coefficient
            else:
                value = coefficient + 1.0 / value

        self._cached_value = value
        return value

    def convergent(self, n: int) -> Convergent:
        """
        n-я подходящая дробь (наилучшее рациональное приближение).

        Args:
            n: Индекс подходящей дроби (n >= 0; для конечной дроби n < size())

        Returns:
            Convergent(numerator, denominator)

        Raises:
            ConvergentIndexError: Если индекс вне диапазона
            CoefficientOverflowError: Если член рекурренты выходит за int64

        Examples:
            >>> ContinuedFraction.from_rational(355, 113).convergent(1)
            Convergent(numerator=22, denominator=7)
        """
        n = operator.index(n)
        if n < 0:
            raise ConvergentIndexError(f"Convergent index must be non-negative, got {n}")
        if self._is_finite and n >= len(self._coefficients):
            raise ConvergentIndexError(
                f"Convergent index {n} out of range for finite fraction "
                f"of size {len(self._coefficients)}"
            )

        prev_num, num = 1, self._coefficients[0].signed_value
        prev_den, den = 0, 1
        for index in range(1, n + 1):
            a = self._coefficient_at(index)
            prev_num, num = num, checked_recurrence_step(a, num, prev_num)
            prev_den, den = den, checked_recurrence_step(a, den, prev_den)

        return Convergent(num, den)

    def simplify(self) -> None:
        """Повторная каноническая нормализация (включая схлопывание единиц)."""
        self._normalize(collapse=True)

    def copy(self) -> "ContinuedFraction":
        """Независимая копия дроби."""
        duplicate = ContinuedFraction()
        duplicate._coefficients = list(self._coefficients)
        duplicate._update_flags()
        duplicate._cached_value = self._cached_value
        return duplicate

    # =========================================================================
    # АРИФМЕТИКА (через float, см. ограничения в docstring модуля)
    # =========================================================================

    @staticmethod
    def _operand_value(other: object) -> Optional[float]:
        if isinstance(other, ContinuedFraction):
            return other.to_double()
        if isinstance(other, (int, float)):
            return float(other)
        return None

    @staticmethod
    def _checked_divisor(value: float) -> float:
        if is_negligible(value, EPS_DIVISOR):
            raise DivisionByZeroError(
                f"Division by zero: divisor magnitude {abs(value):.3e} < {EPS_DIVISOR:.0e}"
            )
        return value

    def __add__(self, other: object) -> "ContinuedFraction":
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return ContinuedFraction.from_double(self.to_double() + value)

    def __radd__(self, other: object) -> "ContinuedFraction":
        return self.__add__(other)

    def __sub__(self, other: object) -> "ContinuedFraction":
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return ContinuedFraction.from_double(self.to_double() - value)

    def __rsub__(self, other: object) -> "ContinuedFraction":
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return ContinuedFraction.from_double(value - self.to_double())

    def __mul__(self, other: object) -> "ContinuedFraction":
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return ContinuedFraction.from_double(self.to_double() * value)

    def __rmul__(self, other: object) -> "ContinuedFraction":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "ContinuedFraction":
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return ContinuedFraction.from_double(self.to_double() / self._checked_divisor(value))

    def __rtruediv__(self, other: object) -> "ContinuedFraction":
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return ContinuedFraction.from_double(value / self._checked_divisor(self.to_double()))

    def __iadd__(self, other: object) -> "ContinuedFraction":
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __isub__(self, other: object) -> "ContinuedFraction":
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __imul__(self, other: object) -> "ContinuedFraction":
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __itruediv__(self, other: object) -> "ContinuedFraction":
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        self._assign(result)
        return self

    def __neg__(self) -> "ContinuedFraction":
        return ContinuedFraction.from_double(-self.to_double())

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        # Структурное равенство: значения и маркеры периода
        if not isinstance(other, ContinuedFraction):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __lt__(self, other: object) -> bool:
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return self.to_double() < value

    def __le__(self, other: object) -> bool:
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return self.to_double() <= value

    def __gt__(self, other: object) -> bool:
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return self.to_double() > value

    def __ge__(self, other: object) -> bool:
        value = self._operand_value(other)
        if value is None:
            return NotImplemented
        return self.to_double() >= value

    # =========================================================================
    # ВВОД / ВЫВОД
    # =========================================================================

    def to_string(self) -> str:
        """
        Текстовое представление.

        Форматы:
            [a0]                   — одиночный коэффициент
            [a0; a1, a2]           — конечная дробь
            [a0; a1, (p1, p2)]     — периодическая, период в скобках

        Examples:
            >>> ContinuedFraction.create_periodic([1], [2]).to_string()
            '[1; (2)]'
        """
        head = str(self._coefficients[0].signed_value)
        if len(self._coefficients) == 1:
            return f"[{head}]"

        terms = []
        for coefficient in self._coefficients[1:]:
            term = str(coefficient.signed_value)
            if coefficient.is_periodic_marker:
                term = "(" + term
            terms.append(term)

        closing = ")]" if self._is_periodic else "]"
        return f"[{head}; {', '.join(terms)}{closing}"

    def parse_string(self, text: str) -> None:
        """
        Разбор строки "[a0; a1; a2; ...]" и замена коэффициентов.

        Разделители — ";" (а также "," для совместимости с to_string).
        Периодическая запись "(...)" при разборе НЕ поддерживается:
        to_string её выводит, а parse_string отвергает.

        При ошибке состояние дроби не изменяется.

        Args:
            text: Строка для разбора

        Raises:
            InvalidFormatError: Если строка не соответствует формату
                или коэффициент вне int64
        """
        if not isinstance(text, str):
            raise InvalidFormatError(f"Expected a string, got {type(text).__name__}")

        match = _BRACKETED_PATTERN.match(text.strip())
        if match is None:
            raise InvalidFormatError(f"Invalid continued fraction format: {text!r}")

        content = match.group(1)
        if "(" in content or ")" in content:
            raise InvalidFormatError(
                f"Periodic notation is not supported by the parser: {text!r}"
            )

        values = []
        for token in _SEPARATOR_PATTERN.split(content):
            token = token.strip()
            if not _INTEGER_PATTERN.match(token):
                raise InvalidFormatError(
                    f"Invalid coefficient {token!r} in continued fraction {text!r}"
                )
            try:
                values.append(validate_int64(int(token)))
            except (CoefficientOverflowError, ValueError) as e:
                raise InvalidFormatError(
                    f"Coefficient {token!r} out of 64-bit range in continued fraction {text!r}"
                ) from e

        self._replace([Coefficient.of(v) for v in values])

    @classmethod
    def from_string(cls, text: str) -> "ContinuedFraction":
        """Построение из строки (см. parse_string)."""
        fraction = cls()
        fraction.parse_string(text)
        return fraction

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ContinuedFraction({self.to_string()!r})"

    def __float__(self) -> float:
        return self.to_double()

    def __len__(self) -> int:
        return len(self._coefficients)

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def from_expansion(cls, terms: Iterable[int]) -> "ContinuedFraction":
        """
        Дробь из точного разложения без схлопывания единиц.

        Используется фабриками, которые сами строят разложение
        (from_double, from_rational, e_continued_fraction): удаляются
        только нулевые коэффициенты, значение и подходящие дроби
        остаются точными. simplify() приводит результат к канонической форме.
        """
        return cls._from_coefficients(
            [Coefficient.of(operator.index(t)) for t in terms], collapse=False
        )

    @classmethod
    def from_double(
        cls,
        value: float,
        max_terms: int = DEFAULT_MAX_TERMS,
        eps: float = EPS_FRACTIONAL,
    ) -> "ContinuedFraction":
        """
        Разложение float в конечную цепную дробь.

        Алгоритм:
            a_i = floor(x); f = x - a_i
            если |f| < eps или достигнут max_terms → стоп
            x = 1 / f

        Периодичность из float никогда не выводится.

        Args:
            value: Конечное float значение
            max_terms: Максимальное число коэффициентов (default: 20)
            eps: Порог дробной части (default: EPS_FRACTIONAL)

        Returns:
            Конечная ContinuedFraction

        Raises:
            InvalidArgumentError: Если value NaN/Inf или max_terms < 1
            CoefficientOverflowError: Если коэффициент вне int64

        Examples:
            >>> ContinuedFraction.from_double(0.75).get_coefficients()
            [0, 1, 3]
        """
        validate_finite(value, "value")
        validate_term_limit(max_terms)

        terms = []
        x = float(value)
        for _ in range(max_terms):
            integer_part = floor_to_int64(x)
            terms.append(integer_part)

            fractional = x - integer_part
            if abs(fractional) < eps:
                break

            x = 1.0 / fractional
        else:
            logger.debug("from_double(%r): term limit %d reached", value, max_terms)

        return cls.from_expansion(terms)

    @classmethod
    def from_rational(cls, numerator: int, denominator: int) -> "ContinuedFraction":
        """
        Разложение рационального числа алгоритмом Евклида.

        На каждом шаге: q = n / d (усечение к нулю), r = n - q * d,
        добавляется q, (n, d) = (d, r); стоп при r == 0.

        Args:
            numerator: Числитель
            denominator: Знаменатель (ненулевой)

        Returns:
            Конечная ContinuedFraction, последняя подходящая дробь которой
            равна numerator / denominator (с точностью до общего знака)

        Raises:
            InvalidArgumentError: Если denominator == 0

        Examples:
            >>> ContinuedFraction.from_rational(355, 113).get_coefficients()
            [3, 7, 16]
        """
        numerator = validate_int64(operator.index(numerator), "numerator")
        denominator = validate_int64(operator.index(denominator), "denominator")
        if denominator == 0:
            raise InvalidArgumentError("Denominator cannot be zero")

        terms = []
        n, d = numerator, denominator
        while d != 0:
            quotient, remainder = trunc_divmod(n, d)
            terms.append(quotient)
            n, d = d, remainder

        return cls.from_expansion(terms)

    @classmethod
    def create_periodic(
        cls, non_periodic: Iterable[int], periodic: Iterable[int]
    ) -> "ContinuedFraction":
        """
        Периодическая дробь [np0; np1, ..., (p0, p1, ...)].

        Первый элемент периодической части получает маркер периода,
        затем последовательность нормализуется.

        Args:
            non_periodic: Непериодическая часть (начиная с a0)
            periodic: Периодическая часть (может быть пустой → конечная дробь)

        Raises:
            InvalidArgumentError: Если периодическая часть задана без
                непериодической (маркер не может стоять на a0)
        """
        prefix = [operator.index(v) for v in non_periodic]
        period = [operator.index(v) for v in periodic]
        if period and not prefix:
            raise InvalidArgumentError(
                "Periodic part requires a non-empty non-periodic prefix"
            )

        coefficients = [Coefficient.of(v) for v in prefix]
        if period:
            coefficients.append(Coefficient.of(period[0], periodic=True))
            coefficients.extend(Coefficient.of(v) for v in period[1:])

        return cls._from_coefficients(coefficients)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    def is_finite(self) -> bool:
        return self._is_finite

    def is_periodic(self) -> bool:
        return self._is_periodic

    def size(self) -> int:
        return len(self._coefficients)

    def is_integer(self) -> bool:
        """True если дробь состоит из одного коэффициента."""
        return len(self._coefficients) == 1

    def clear(self) -> None:
        """Сброс к нулевой дроби [0]."""
        self._replace([Coefficient.of(0)])


# =============================================================================
# СВОБОДНЫЕ ФУНКЦИИ
# =============================================================================


def approximately_equal(
    a: ContinuedFraction,
    b: ContinuedFraction,
    epsilon: float = EPS_APPROX_EQUAL,
) -> bool:
    """
    Приближённое равенство значений двух дробей.

    Args:
        a: Первая дробь
        b: Вторая дробь
        epsilon: Абсолютная толерантность (default: EPS_APPROX_EQUAL)

    Returns:
        True если |a - b| < epsilon
    """
    return abs(a.to_double() - b.to_double()) < epsilon

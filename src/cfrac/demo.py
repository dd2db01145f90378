"""
Демонстрация библиотеки цепных дробей

Примеры использования основных функций:
1. Создание объектов
2. Арифметические операции
3. Подходящие дроби
4. Специальные константы
5. Периодические дроби
6. Операторы сравнения
"""

import argparse
import logging
import sys
from typing import List, Optional

from cfrac.core.domain import (
    ContinuedFraction,
    e_continued_fraction,
    sqrt_continued_fraction,
)
from cfrac.core.errors import ContinuedFractionError, DivisionByZeroError
from cfrac.log_config import setup_logging

logger = logging.getLogger(__name__)


def print_header(title: str) -> None:
    print("\n" + "=" * 60)
    print("  " + title)
    print("=" * 60)


def example_creation() -> None:
    print_header("Пример 1: Создание цепных дробей")

    cf1 = ContinuedFraction(42)
    print(f"1. Из целого числа 42: {cf1}")

    # Приближение π, схлопывание [.., 15, 1, 292] → [.., 307]
    cf2 = ContinuedFraction([3, 7, 15, 1, 292])
    print(f"2. Из списка [3, 7, 15, 1, 292]: {cf2}")
    print(f"   Числовое значение: {cf2.to_double()}")

    cf3 = ContinuedFraction("[1; 2; 3; 4]")
    print(f'3. Из строки "[1; 2; 3; 4]": {cf3}')

    cf4 = ContinuedFraction.from_rational(355, 113)
    print(f"4. Из дроби 355/113: {cf4}")
    print(f"   Значение: {cf4.to_double()} (π ≈ {355 / 113})")

    cf5 = ContinuedFraction.from_double(2.718281828459045, 10)
    print(f"5. Из числа e (10 коэффициентов): {cf5}")
    print(f"   Значение: {cf5.to_double()}")


def example_operations() -> None:
    print_header("Пример 2: Арифметические операции")

    a = ContinuedFraction("[1; 2; 3]")
    b = ContinuedFraction("[2; 4]")
    print(f"a = {a} ≈ {a.to_double()}")
    print(f"b = {b} ≈ {b.to_double()}")

    total = a + b
    print(f"\na + b = {total} ≈ {total.to_double()}")
    difference = a - b
    print(f"a - b = {difference} ≈ {difference.to_double()}")
    product = a * b
    print(f"a * b = {product} ≈ {product.to_double()}")

    try:
        quotient = a / b
        print(f"a / b = {quotient} ≈ {quotient.to_double()}")
    except DivisionByZeroError as e:
        print(f"Ошибка при делении: {e}")


def example_convergents() -> None:
    print_header("Пример 3: Подходящие дроби для π")

    cf = ContinuedFraction.from_rational(355, 113)
    print(f"Цепная дробь для 355/113: {cf}")

    print("\nПодходящие дроби:")
    print(f"{'n':>5}{'Числитель':>15}{'Знаменатель':>15}{'Значение':>20}")
    for i in range(cf.size()):
        num, den = cf.convergent(i)
        print(f"{i:>5}{num:>15}{den:>15}{num / den:>20.10g}")


def example_special_numbers(max_terms: int) -> None:
    print_header("Пример 4: Специальные математические константы")

    phi = ContinuedFraction.from_double(1.618033988749895, max_terms)
    print(f"1. Золотое сечение φ: {phi}")
    print(f"   Значение: {phi.to_double()}")

    sqrt2 = sqrt_continued_fraction(2, max_terms)
    print(f"\n2. √2: {sqrt2}")
    print(f"   Значение: {sqrt2.to_double()}")
    print(f"   Проверка: {sqrt2.to_double() * sqrt2.to_double()}")

    e = e_continued_fraction(max_terms)
    print(f"\n3. Число e: {e}")
    print(f"   Значение: {e.to_double()}")

    sqrt3 = sqrt_continued_fraction(3, max_terms)
    print(f"\n4. √3: {sqrt3}")
    print(f"   Значение: {sqrt3.to_double()}")


def example_periodic() -> None:
    print_header("Пример 5: Периодические цепные дроби")

    sqrt13 = sqrt_continued_fraction(13, 15)
    print(f"√13 как цепная дробь: {sqrt13}")
    print(f"Значение: {sqrt13.to_double()}")
    print(f"Квадрат: {sqrt13.to_double() * sqrt13.to_double()}")

    print("\nСвойства:")
    print(f"Периодическая: {'да' if sqrt13.is_periodic() else 'нет'}")
    print(f"Конечная: {'да' if sqrt13.is_finite() else 'нет'}")
    print(f"Количество коэффициентов: {sqrt13.size()}")


def example_comparison() -> None:
    print_header("Пример 6: Операторы сравнения")

    a = ContinuedFraction("[1; 2; 3]")
    b = ContinuedFraction("[1; 2; 4]")
    c = a.copy()

    for name, cf in (("a", a), ("b", b), ("c", c)):
        print(f"{name} = {cf} ≈ {cf.to_double()}")

    print("\nСравнения:")
    print(f"a == b: {str(a == b).lower()}")
    print(f"a == c: {str(a == c).lower()}")
    print(f"a != b: {str(a != b).lower()}")
    print(f"a < b: {str(a < b).lower()}")
    print(f"a > b: {str(a > b).lower()}")
    print(f"a <= b: {str(a <= b).lower()}")
    print(f"a >= b: {str(a >= b).lower()}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Демонстрация библиотеки цепных дробей")
    parser.add_argument("--max-terms", type=int, default=10, help="лимит коэффициентов констант")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG-логирование")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    print("ДЕМОНСТРАЦИЯ БИБЛИОТЕКИ ЦЕПНЫХ ДРОБЕЙ")
    print("=" * 38)

    try:
        example_creation()
        example_operations()
        example_convergents()
        example_special_numbers(args.max_terms)
        example_periodic()
        example_comparison()
    except ContinuedFractionError as e:
        logger.error("demo failed: %s", e)
        print(f"\nОШИБКА: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print("  Все примеры выполнены успешно!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())

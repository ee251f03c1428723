"""
Numerical Safeguards — точная арифметика над int и Decimal

Модуль обеспечивает точность всех операций векторов и матриц:
- Точный контекст Decimal (EXACT_CONTEXT): prec = MAX_PREC, Inexact в traps
- Точные сложение, вычитание, умножение, отрицание и модуль Decimal
- Скалярные домены (INTEGER_DOMAIN, DECIMAL_DOMAIN) с единым набором операций
- Валидация неотрицательности и конечности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операции над Decimal никогда не округляют молча (Inexact → исключение)
2. int не требует контекста: Python int не ограничен по разрядности
3. Между доменами нет неявного приведения (int ≠ Decimal, bool отклоняется)
4. Все операции детерминированы и воспроизводимы
"""

import decimal
import operator
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Final, Iterable

from exactlinalg.contracts.validators import require_instance

# =============================================================================
# ТОЧНЫЙ КОНТЕКСТ DECIMAL
# =============================================================================

# Контекст без ограничения разрядности.
# Сложение, вычитание и умножение всегда точны; любая операция, которая
# потребовала бы округления, поднимает decimal.Inexact.
EXACT_CONTEXT: Final[decimal.Context] = decimal.Context(
    prec=decimal.MAX_PREC,
    rounding=decimal.ROUND_HALF_EVEN,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[
        decimal.InvalidOperation,
        decimal.DivisionByZero,
        decimal.Overflow,
        decimal.Inexact,
    ],
)

DECIMAL_ZERO: Final[Decimal] = Decimal(0)
DECIMAL_ONE: Final[Decimal] = Decimal(1)


# =============================================================================
# ТОЧНЫЕ ОПЕРАЦИИ DECIMAL
# =============================================================================


def exact_add(augend: Decimal, addend: Decimal) -> Decimal:
    """Точная сумма двух Decimal."""
    return EXACT_CONTEXT.add(augend, addend)


def exact_subtract(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    """Точная разность двух Decimal."""
    return EXACT_CONTEXT.subtract(minuend, subtrahend)


def exact_multiply(multiplicand: Decimal, multiplier: Decimal) -> Decimal:
    """
    Точное произведение двух Decimal.

    Стандартный контекст Decimal (prec=28) округлил бы произведение
    длинных чисел до 28 знаков; EXACT_CONTEXT сохраняет все разряды.

    Examples:
        >>> exact_multiply(Decimal("11111111111111111111111111111.1"), Decimal("3"))
        Decimal('33333333333333333333333333333.3')
    """
    return EXACT_CONTEXT.multiply(multiplicand, multiplier)


def exact_negate(value: Decimal) -> Decimal:
    """Точное отрицание Decimal (-value без округления)."""
    return EXACT_CONTEXT.minus(value)


def exact_abs(value: Decimal) -> Decimal:
    """Точный модуль Decimal."""
    return EXACT_CONTEXT.abs(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_finite(value: int | Decimal) -> bool:
    """
    Проверка, что значение конечно (не NaN, не Infinity).

    int всегда конечен.
    """
    if isinstance(value, Decimal):
        return value.is_finite()
    return True


def validate_non_negative(value: int | Decimal, name: str) -> None:
    """
    Валидация, что значение конечно и неотрицательно.

    Args:
        value: Проверяемое значение (int или Decimal)
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Infinity
    """
    if not is_finite(value):
        raise ValueError(f"{name} must be finite (not NaN/Infinity), got {value}")

    if value < 0:
        raise ValueError(f"expected {name} >= 0 but actual {value}")


# =============================================================================
# СКАЛЯРНЫЕ ДОМЕНЫ
# =============================================================================


@dataclass(frozen=True)
class ScalarDomain:
    """
    Скалярный домен элементов вектора/матрицы.

    Объединяет тип элемента, аддитивную и мультипликативную единицы и
    точные операции. Векторы и матрицы реализуют все алгоритмы один раз,
    а конкретный тип подставляет свой домен.
    """

    name: str
    element_type: type
    zero: Any
    one: Any
    add: Callable[[Any, Any], Any]
    subtract: Callable[[Any, Any], Any]
    multiply: Callable[[Any, Any], Any]
    negate: Callable[[Any], Any]
    absolute: Callable[[Any], Any]

    def check(self, element: Any, name: str = "element") -> None:
        """
        Проверка, что element принадлежит домену.

        Raises:
            ValueError: Если element is None или NaN/Infinity
            TypeError: Если element другого типа (в т.ч. bool)
        """
        require_instance(element, self.element_type, name)

        if not is_finite(element):
            raise ValueError(f"{name} must be finite (not NaN/Infinity), got {element}")

    def sum(self, values: Iterable[Any]) -> Any:
        """Точная сумма; пустая сумма равна zero."""
        result = self.zero
        for value in values:
            result = self.add(result, value)
        return result

    def product(self, values: Iterable[Any]) -> Any:
        """Точное произведение; пустое произведение равно one."""
        result = self.one
        for value in values:
            result = self.multiply(result, value)
        return result

    def is_zero(self, value: Any) -> bool:
        return value == self.zero

    def is_one(self, value: Any) -> bool:
        return value == self.one


INTEGER_DOMAIN: Final[ScalarDomain] = ScalarDomain(
    name="integer",
    element_type=int,
    zero=0,
    one=1,
    add=operator.add,
    subtract=operator.sub,
    multiply=operator.mul,
    negate=operator.neg,
    absolute=abs,
)

DECIMAL_DOMAIN: Final[ScalarDomain] = ScalarDomain(
    name="decimal",
    element_type=Decimal,
    zero=DECIMAL_ZERO,
    one=DECIMAL_ONE,
    add=exact_add,
    subtract=exact_subtract,
    multiply=exact_multiply,
    negate=exact_negate,
    absolute=exact_abs,
)

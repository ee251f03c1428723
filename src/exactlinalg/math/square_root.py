"""
Square Root — метод Герона для int и Decimal

Модуль вычисляет квадратный корень неотрицательного int или Decimal:
- Начальное приближение (seed) по научной записи: value = c × 100^k, 1 ≤ c < 100
- Итерация Герона (Ньютона): x_{n+1} = (x_n² + value) / (2 × x_n)
- Двойной критерий: точность сходимости (precision) и итоговый масштаб
  (scale + rounding_mode), применяемый только к результату
- Проверка полного квадрата и точный целый корень

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательный аргумент → ValueError до начала итераций
2. Параметры калькулятора валидируются при создании (pydantic ValidationError)
3. sqrt(0) == 0 точно, без итераций
4. Если корень точно представим в scale, он возвращается точно при любом rounding_mode
5. RoundingMode.UNNECESSARY при неточном результате → InexactRoundingError

ФОРМУЛЫ:
    seed = 2 × 10^k, если c < 10
    seed = 6 × 10^k, если c ≥ 10
    x_{n+1} = (x_n² + value) / (2 × x_n),  пока |x_{n+1} - x_n| ≥ precision
"""

import decimal
import logging
import math
from decimal import Decimal
from enum import IntEnum
from typing import Final, NamedTuple

from pydantic import BaseModel, Field

from exactlinalg.contracts.validators import require_instance, require_not_none
from exactlinalg.math.numerical_safeguards import (
    DECIMAL_ZERO,
    EXACT_CONTEXT,
    validate_non_negative,
)

_LOG: logging.Logger = logging.getLogger(__name__)


# =============================================================================
# ROUNDING MODES
# =============================================================================


class RoundingMode(IntEnum):
    """
    Режим округления итогового результата (коды 0..7).

    Первые семь режимов соответствуют константам ROUND_* модуля decimal.
    UNNECESSARY требует, чтобы результат был точен в заданном scale.
    """

    UP = 0
    DOWN = 1
    CEILING = 2
    FLOOR = 3
    HALF_UP = 4
    HALF_DOWN = 5
    HALF_EVEN = 6
    UNNECESSARY = 7


_DECIMAL_ROUNDING: Final[dict[RoundingMode, str]] = {
    RoundingMode.UP: decimal.ROUND_UP,
    RoundingMode.DOWN: decimal.ROUND_DOWN,
    RoundingMode.CEILING: decimal.ROUND_CEILING,
    RoundingMode.FLOOR: decimal.ROUND_FLOOR,
    RoundingMode.HALF_UP: decimal.ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: decimal.ROUND_HALF_EVEN,
}


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Критерий остановки: |x_{n+1} - x_n| < precision
DEFAULT_PRECISION: Final[Decimal] = Decimal("1E-10")

# Число знаков после запятой в результате
DEFAULT_SCALE: Final[int] = 10

DEFAULT_ROUNDING_MODE: Final[RoundingMode] = RoundingMode.HALF_UP

# Запас значащих цифр рабочего контекста сверх scale/precision
SQRT_GUARD_DIGITS: Final[int] = 10

# Контекст финального округления: без ограничения разрядности, Inexact не trap
_ROUNDING_CONTEXT: Final[decimal.Context] = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.InvalidOperation],
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NotPerfectSquareError(ArithmeticError):
    """Точный целый корень запрошен для числа, не являющегося полным квадратом."""

    pass


class InexactRoundingError(ArithmeticError):
    """
    RoundingMode.UNNECESSARY, но корень не представим точно в заданном scale.

    Результат не округляется молча: вызывающий код должен выбрать scale
    или другой режим округления.
    """

    pass


# =============================================================================
# SCIENTIFIC NOTATION
# =============================================================================


class ScientificNotation(NamedTuple):
    """
    Научная запись для оценки корня: coefficient × 10^exponent.

    Для ненулевых значений 1 ≤ coefficient < 100 и exponent чётный.
    Ноль представлен как (0, 0).
    """

    coefficient: Decimal
    exponent: int

    def as_string(self) -> str:
        """
        Человекочитаемое представление.

        Examples:
            >>> ScientificNotation(Decimal("12.34"), 2).as_string()
            '12.34 * 10**2'
            >>> ScientificNotation(Decimal("50"), -2).as_string()
            '50 * 10**(-2)'
        """
        coefficient = format(self.coefficient, "f")

        if self.coefficient.is_zero():
            return "0"
        if self.exponent < 0:
            return f"{coefficient} * 10**({self.exponent})"
        if self.exponent == 0:
            return coefficient
        if self.exponent == 1:
            return f"{coefficient} * 10"
        return f"{coefficient} * 10**{self.exponent}"


def _radicand(value: int | Decimal, name: str = "value") -> Decimal:
    """Валидация подкоренного выражения и точное приведение к Decimal."""
    require_not_none(value, name)

    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise TypeError(
            f"expected {name} of type int or Decimal but actual {type(value).__name__}"
        )

    validate_non_negative(value, name)

    if isinstance(value, int):
        return Decimal(value)
    return value


def scientific_notation_for_sqrt(value: int | Decimal) -> ScientificNotation:
    """
    Нормализация value = coefficient × 100^k, 1 ≤ coefficient < 100.

    Значения меньше 1 получают отрицательный k. Масштабирование выполняется
    сдвигом порядка (scaleb), поэтому coefficient точен.

    Args:
        value: Неотрицательное int или Decimal

    Returns:
        ScientificNotation(coefficient, 2k)

    Raises:
        ValueError: Если value < 0

    Examples:
        >>> scientific_notation_for_sqrt(1234)
        ScientificNotation(coefficient=Decimal('12.34'), exponent=2)
        >>> scientific_notation_for_sqrt(Decimal("0.5"))
        ScientificNotation(coefficient=Decimal('5E+1'), exponent=-2)
    """
    radicand = _radicand(value)

    if radicand.is_zero():
        return ScientificNotation(DECIMAL_ZERO, 0)

    # adjusted(): порядок старшей цифры; floor-деление корректно и для < 1
    half_exponent = radicand.adjusted() // 2
    coefficient = radicand.scaleb(-2 * half_exponent, context=EXACT_CONTEXT)

    return ScientificNotation(coefficient, 2 * half_exponent)


def seed_value(value: int | Decimal) -> Decimal:
    """
    Начальное приближение для метода Герона.

    seed = 2 × 10^k при coefficient < 10, иначе 6 × 10^k. Отличается от
    истинного корня не более чем в константу раз, что ограничивает число итераций.
    Для нуля возвращает 0.
    """
    notation = scientific_notation_for_sqrt(value)
    _LOG.debug("scientific notation of %s is %s", value, notation.as_string())

    if notation.coefficient.is_zero():
        return DECIMAL_ZERO

    factor = Decimal(6) if notation.coefficient >= 10 else Decimal(2)
    return factor.scaleb(notation.exponent // 2, context=EXACT_CONTEXT)


# =============================================================================
# ПОЛНЫЕ КВАДРАТЫ
# =============================================================================


def is_perfect_square(integer: int) -> bool:
    """
    Проверка, что integer = k × k для некоторого целого k ≥ 0.

    Совпадает с определением через сумму нечётных чисел
    1 + 3 + ... + (2k - 1) = k², но без перебора: через math.isqrt.

    Args:
        integer: Неотрицательное целое

    Returns:
        True если integer — полный квадрат (0 и 1 — полные квадраты)

    Raises:
        ValueError: Если integer < 0
        TypeError: Если integer не int
    """
    require_instance(integer, int, "integer")
    validate_non_negative(integer, "integer")

    root = math.isqrt(integer)
    return root * root == integer


def sqrt_of_perfect_square(integer: int) -> int:
    """
    Точный целый корень полного квадрата.

    Raises:
        ValueError: Если integer < 0
        NotPerfectSquareError: Если integer не полный квадрат
    """
    if not is_perfect_square(integer):
        raise NotPerfectSquareError(f"expected perfect square but actual {integer}")

    return math.isqrt(integer)


# =============================================================================
# SQUARE ROOT CALCULATOR
# =============================================================================


class SquareRootCalculator(BaseModel):
    """
    Калькулятор квадратного корня с фиксированными параметрами.

    Immutable модель (frozen=True). Все параметры валидируются при создании,
    до любой итерации:
    - precision ∈ (0, 1) — критерий остановки |x_{n+1} - x_n| < precision
    - scale ≥ 0 — число знаков после запятой в результате
    - rounding_mode ∈ [0, 7] — режим округления результата

    Критерий остановки абсолютный: для value < precision² итерация может
    остановиться до сходимости (sqrt(Decimal("1E-30"), scale=20) даёт
    1.25E-15 вместо 1E-15). Для таких value нужен меньший precision.
    """

    precision: Decimal = Field(
        default=DEFAULT_PRECISION, gt=0, lt=1, description="Критерий сходимости"
    )
    scale: int = Field(default=DEFAULT_SCALE, ge=0, description="Масштаб результата")
    rounding_mode: RoundingMode = Field(
        default=DEFAULT_ROUNDING_MODE, description="Режим округления результата"
    )

    model_config = {"frozen": True}  # Immutable

    def sqrt(self, value: int | Decimal) -> Decimal:
        """
        Квадратный корень value с масштабом scale.

        Args:
            value: Неотрицательное int или Decimal

        Returns:
            Decimal с ровно scale знаками после запятой

        Raises:
            ValueError: Если value < 0
            InexactRoundingError: Если rounding_mode = UNNECESSARY и корень неточен

        Examples:
            >>> SquareRootCalculator().sqrt(25)
            Decimal('5.0000000000')
            >>> SquareRootCalculator(scale=4).sqrt(2)
            Decimal('1.4142')
        """
        radicand = _radicand(value)

        if radicand.is_zero():
            return DECIMAL_ZERO.quantize(self._quantum(), context=_ROUNDING_CONTEXT)

        return self._round(self._herons_method(radicand), radicand)

    def is_perfect_square(self, integer: int) -> bool:
        return is_perfect_square(integer)

    def sqrt_of_perfect_square(self, integer: int) -> int:
        return sqrt_of_perfect_square(integer)

    def scientific_notation_for_sqrt(self, value: int | Decimal) -> ScientificNotation:
        return scientific_notation_for_sqrt(value)

    def _quantum(self) -> Decimal:
        # 10^-scale
        return Decimal((0, (1,), -self.scale))

    def _working_precision(self, radicand: Decimal) -> int:
        """Значащие цифры рабочего контекста: целая часть корня + дробная + запас."""
        integer_digits = max(radicand.adjusted() // 2 + 1, 1)
        fraction_digits = max(self.scale, -self.precision.adjusted())
        return integer_digits + fraction_digits + SQRT_GUARD_DIGITS

    def _herons_method(self, radicand: Decimal) -> Decimal:
        context = decimal.Context(
            prec=self._working_precision(radicand),
            rounding=decimal.ROUND_HALF_EVEN,
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
        )
        _LOG.debug(
            "calculating square root of %s with precision = %s (working digits = %d)",
            radicand,
            self.precision,
            context.prec,
        )

        predecessor = seed_value(radicand)
        _LOG.debug("seed value = %s", predecessor)

        successor = self._successor(predecessor, radicand, context)
        iterations = 1
        delta = context.abs(context.subtract(successor, predecessor))
        while delta >= self.precision:
            _LOG.debug("iteration %d: x = %s, delta = %s", iterations, successor, delta)
            predecessor = successor
            successor = self._successor(predecessor, radicand, context)
            delta = context.abs(context.subtract(successor, predecessor))
            iterations += 1

        _LOG.debug("terminated after %d iterations: sqrt(%s) ≈ %s", iterations, radicand, successor)
        return successor

    @staticmethod
    def _successor(
        predecessor: Decimal, radicand: Decimal, context: decimal.Context
    ) -> Decimal:
        # x_{n+1} = (x_n² + value) / (2 × x_n); predecessor > 0 для value > 0
        numerator = context.add(context.multiply(predecessor, predecessor), radicand)
        return context.divide(numerator, context.multiply(Decimal(2), predecessor))

    def _round(self, approximation: Decimal, radicand: Decimal) -> Decimal:
        quantum = self._quantum()

        # Корень, точно представимый в scale, не зависит от режима округления
        candidate = approximation.quantize(
            quantum, rounding=decimal.ROUND_HALF_EVEN, context=_ROUNDING_CONTEXT
        )
        if EXACT_CONTEXT.multiply(candidate, candidate) == radicand:
            return candidate

        if self.rounding_mode is RoundingMode.UNNECESSARY:
            raise InexactRoundingError(
                f"square root of {radicand} is not exact at scale {self.scale}"
            )

        return approximation.quantize(
            quantum,
            rounding=_DECIMAL_ROUNDING[self.rounding_mode],
            context=_ROUNDING_CONTEXT,
        )


DEFAULT_SQUARE_ROOT_CALCULATOR: Final[SquareRootCalculator] = SquareRootCalculator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def square_root_calculator(
    precision: Decimal | None = None,
    scale: int | None = None,
    rounding_mode: RoundingMode | int | None = None,
) -> SquareRootCalculator:
    """
    Калькулятор с переопределёнными параметрами.

    Непереданные параметры берутся по умолчанию. Без переопределений
    возвращается DEFAULT_SQUARE_ROOT_CALCULATOR.

    Raises:
        ValidationError: Если precision ∉ (0, 1), scale < 0 или rounding_mode ∉ [0, 7]
    """
    overrides = {
        name: value
        for name, value in (
            ("precision", precision),
            ("scale", scale),
            ("rounding_mode", rounding_mode),
        )
        if value is not None
    }

    if not overrides:
        return DEFAULT_SQUARE_ROOT_CALCULATOR
    return SquareRootCalculator(**overrides)


def sqrt(
    value: int | Decimal,
    *,
    precision: Decimal | None = None,
    scale: int | None = None,
    rounding_mode: RoundingMode | int | None = None,
) -> Decimal:
    """
    Квадратный корень value.

    Параметры валидируются до проверки value и до начала итераций.

    Examples:
        >>> sqrt(2, scale=3)
        Decimal('1.414')
        >>> sqrt(Decimal("0.25"), scale=2, rounding_mode=RoundingMode.UNNECESSARY)
        Decimal('0.50')
    """
    return square_root_calculator(precision, scale, rounding_mode).sqrt(value)

"""
Vector — контракт immutable вектора

Упорядоченное 1-индексное отображение index → элемент фиксированного размера.
Все алгоритмы реализованы один раз поверх ScalarDomain; конкретный тип
(IntegerVector, DecimalVector) задаёт домен, тип элемента и свой builder.

Операции:
- add / subtract / scalar_multiply / negate
- dot_product, orthogonal_to, dyadic_product (матрица парного типа)
- euclidean_norm_pow2, euclidean_norm (через square_root)
- euclidean_distance_pow2 / euclidean_distance
- taxicab_norm / taxicab_distance (сумма модулей)
- max_norm / max_distance (максимум модулей)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. size ≥ 1, каждый индекс из [1, size] присутствует ровно один раз
2. Immutable после создания (frozen=True); операции возвращают новые векторы
3. Бинарные операции требуют тот же тип и равный размер (проверка до вычислений)
4. Равенство и hash структурные: по типу и кортежу элементов
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, ClassVar

from pydantic import BaseModel, Field

from exactlinalg.contracts.validators import (
    require_equal_sizes,
    require_index_in_range,
    require_instance,
)
from exactlinalg.linear.builders import AbstractVectorBuilder
from exactlinalg.math.numerical_safeguards import ScalarDomain
from exactlinalg.math.square_root import RoundingMode, square_root_calculator


class AbstractVector(BaseModel, ABC):
    """
    Базовый immutable вектор.

    Подклассы переопределяют поле components со строгим типом элемента
    и задают domain и builder().
    """

    domain: ClassVar[ScalarDomain]

    components: tuple[Any, ...] = Field(..., min_length=1, description="Элементы 1..size")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    @abstractmethod
    def builder(cls, size: int) -> AbstractVectorBuilder:
        """Builder вектора этого типа заданного размера."""

    @classmethod
    @abstractmethod
    def matrix_type(cls) -> type:
        """Парный тип матрицы (результат dyadic_product)."""

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{type(self).__name__}{self.components}"

    def size(self) -> int:
        return len(self.components)

    def element(self, index: int) -> Any:
        """
        Элемент по 1-индексу.

        Raises:
            ValueError: Если index вне [1, size]
        """
        require_index_in_range(index, self.size())
        return self.components[index - 1]

    def elements(self) -> tuple[Any, ...]:
        return self.components

    def entries(self) -> tuple[tuple[int, Any], ...]:
        """Пары (index, element) в порядке индексов."""
        return tuple(enumerate(self.components, start=1))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _require_compatible(self, other: "AbstractVector", name: str) -> None:
        require_instance(other, type(self), name)
        require_equal_sizes(self.size(), other.size())

    def _combine(
        self, other: "AbstractVector", operation: Callable[[Any, Any], Any]
    ) -> "AbstractVector":
        builder = self.builder(self.size())
        for index, (left, right) in enumerate(zip(self.components, other.components), start=1):
            builder.put(index, operation(left, right))
        return builder.build()

    def add(self, summand: "AbstractVector") -> "AbstractVector":
        """
        Поэлементная сумма.

        Raises:
            ValueError: Если summand is None или размеры различаются
            TypeError: Если summand другого типа
        """
        self._require_compatible(summand, "summand")
        return self._combine(summand, self.domain.add)

    def subtract(self, subtrahend: "AbstractVector") -> "AbstractVector":
        """Поэлементная разность."""
        self._require_compatible(subtrahend, "subtrahend")
        return self._combine(subtrahend, self.domain.subtract)

    def scalar_multiply(self, scalar: Any) -> "AbstractVector":
        """Умножение каждого элемента на scalar того же домена."""
        self.domain.check(scalar, "scalar")

        builder = self.builder(self.size())
        for index, element in self.entries():
            builder.put(index, self.domain.multiply(scalar, element))
        return builder.build()

    def negate(self) -> "AbstractVector":
        return self.scalar_multiply(self.domain.negate(self.domain.one))

    def dot_product(self, other: "AbstractVector") -> Any:
        """Скалярное произведение: Σ self_i × other_i."""
        self._require_compatible(other, "other")
        return self.domain.sum(
            self.domain.multiply(left, right)
            for left, right in zip(self.components, other.components)
        )

    def orthogonal_to(self, other: "AbstractVector") -> bool:
        """self · other == 0."""
        self._require_compatible(other, "other")
        return self.domain.is_zero(self.dot_product(other))

    def dyadic_product(self, other: "AbstractVector") -> Any:
        """
        Внешнее произведение: матрица size × size с элементами self_i × other_j.

        Raises:
            ValueError: Если other is None или размеры различаются
            TypeError: Если other другого типа
        """
        self._require_compatible(other, "other")

        builder = self.matrix_type().builder(self.size(), other.size())
        for row_index, left in self.entries():
            for column_index, right in other.entries():
                builder.put(row_index, column_index, self.domain.multiply(left, right))
        return builder.build()

    # -------------------------------------------------------------------------
    # Евклидова норма и расстояние
    # -------------------------------------------------------------------------

    def euclidean_norm_pow2(self) -> Any:
        return self.dot_product(self)

    def euclidean_norm(
        self,
        *,
        precision: Decimal | None = None,
        scale: int | None = None,
        rounding_mode: RoundingMode | int | None = None,
    ) -> Decimal:
        """
        Евклидова норма √(self · self).

        Параметры квадратного корня валидируются до вычисления нормы.

        Raises:
            ValidationError: Если precision ∉ (0, 1), scale < 0 или rounding_mode ∉ [0, 7]
        """
        calculator = square_root_calculator(precision, scale, rounding_mode)
        return calculator.sqrt(self.euclidean_norm_pow2())

    def euclidean_distance_pow2(self, other: "AbstractVector") -> Any:
        self._require_compatible(other, "other")
        return self.subtract(other).euclidean_norm_pow2()

    def euclidean_distance(
        self,
        other: "AbstractVector",
        *,
        precision: Decimal | None = None,
        scale: int | None = None,
        rounding_mode: RoundingMode | int | None = None,
    ) -> Decimal:
        """Евклидово расстояние ‖self - other‖."""
        self._require_compatible(other, "other")
        calculator = square_root_calculator(precision, scale, rounding_mode)
        return calculator.sqrt(self.euclidean_distance_pow2(other))

    # -------------------------------------------------------------------------
    # Taxicab и max нормы (без квадратного корня)
    # -------------------------------------------------------------------------

    def taxicab_norm(self) -> Any:
        """Σ |element|."""
        return self.domain.sum(self.domain.absolute(element) for element in self.components)

    def taxicab_distance(self, other: "AbstractVector") -> Any:
        self._require_compatible(other, "other")
        return self.subtract(other).taxicab_norm()

    def max_norm(self) -> Any:
        """max |element| (норма бесконечность)."""
        return max(self.domain.absolute(element) for element in self.components)

    def max_distance(self, other: "AbstractVector") -> Any:
        self._require_compatible(other, "other")
        return self.subtract(other).max_norm()

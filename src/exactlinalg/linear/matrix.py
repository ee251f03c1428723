"""
Matrix — контракт immutable матрицы

Упорядоченное 1-индексное отображение (row, column) → элемент фиксированной
формы row_size × column_size. Алгоритмы реализованы один раз поверх
ScalarDomain; конкретный тип задаёт домен, тип элемента, парный тип вектора
и builder.

Определитель (единая политика для всех доменов):
1. Неквадратная матрица → MatrixNotSquareError
2. 1×1 → сам элемент
3. Треугольная → произведение диагонали
4. 2×2 → a11·a22 - a12·a21
5. 3×3 → правило Саррюса
6. n×n → разложение Лапласа по первой строке:
       det = Σ_k (-1)^(k+1) · a[1,k] · det(minor(1, k))

Разложение Лапласа экспоненциально по n и предназначено для малых матриц.
Вызывающий код, которому нужна ограниченная задержка, ограничивает размер сам.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. row_size ≥ 1, column_size ≥ 1, все строки одной длины
2. Immutable после создания (frozen=True)
3. Структурные предикаты вычисляются по требованию и не кэшируются
4. Равенство и hash структурные: по типу и таблице элементов
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, ClassVar

from pydantic import BaseModel, Field, model_validator

from exactlinalg.contracts.validators import (
    require_equal_shapes,
    require_index_in_range,
    require_instance,
)
from exactlinalg.linear.builders import AbstractMatrixBuilder
from exactlinalg.linear.vector import AbstractVector
from exactlinalg.math.numerical_safeguards import ScalarDomain
from exactlinalg.math.square_root import RoundingMode, square_root_calculator

_LOG: logging.Logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixNotSquareError(Exception):
    """Операция (trace, determinant) требует квадратную матрицу."""

    pass


# =============================================================================
# ABSTRACT MATRIX
# =============================================================================


class AbstractMatrix(BaseModel, ABC):
    """
    Базовая immutable матрица.

    Подклассы переопределяют поле table со строгим типом элемента и задают
    domain, vector_type, builder() и invertible().
    """

    domain: ClassVar[ScalarDomain]
    vector_type: ClassVar[type[AbstractVector]]

    table: tuple[tuple[Any, ...], ...] = Field(..., min_length=1, description="Строки 1..row_size")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_rectangular(self) -> "AbstractMatrix":
        """Все строки непусты и одной длины."""
        column_size = len(self.table[0])
        if column_size == 0:
            raise ValueError("expected column_size > 0 but actual 0")

        for row_index, row in enumerate(self.table, start=1):
            if len(row) != column_size:
                raise ValueError(
                    f"expected row {row_index} of length {column_size} but actual {len(row)}"
                )
        return self

    @classmethod
    @abstractmethod
    def builder(cls, row_size: int, column_size: int) -> AbstractMatrixBuilder:
        """Builder матрицы этого типа заданной формы."""

    @abstractmethod
    def invertible(self) -> bool:
        """Обратимость над доменом элементов."""

    # -------------------------------------------------------------------------
    # Форма и доступ к элементам
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{type(self).__name__}{self.table}"

    def row_size(self) -> int:
        return len(self.table)

    def column_size(self) -> int:
        return len(self.table[0])

    def size(self) -> int:
        """Число ячеек: row_size × column_size."""
        return self.row_size() * self.column_size()

    def row_indexes(self) -> tuple[int, ...]:
        return tuple(range(1, self.row_size() + 1))

    def column_indexes(self) -> tuple[int, ...]:
        return tuple(range(1, self.column_size() + 1))

    def element(self, row_index: int, column_index: int) -> Any:
        """
        Элемент в позиции (row_index, column_index).

        Raises:
            ValueError: Если позиция вне диапазона
        """
        require_index_in_range(row_index, self.row_size(), "row_index")
        require_index_in_range(column_index, self.column_size(), "column_index")
        return self.table[row_index - 1][column_index - 1]

    def row(self, row_index: int) -> AbstractVector:
        """Строка как вектор парного типа."""
        require_index_in_range(row_index, self.row_size(), "row_index")
        return self.vector_type(components=self.table[row_index - 1])

    def column(self, column_index: int) -> AbstractVector:
        """Столбец как вектор парного типа."""
        require_index_in_range(column_index, self.column_size(), "column_index")
        return self.vector_type(components=self._column(column_index))

    def rows(self) -> dict[int, AbstractVector]:
        return {index: self.row(index) for index in self.row_indexes()}

    def columns(self) -> dict[int, AbstractVector]:
        return {index: self.column(index) for index in self.column_indexes()}

    def cells(self) -> tuple[tuple[int, int, Any], ...]:
        """Тройки (row_index, column_index, element) построчно."""
        return tuple(
            (row_index, column_index, element)
            for row_index, row in enumerate(self.table, start=1)
            for column_index, element in enumerate(row, start=1)
        )

    def elements(self) -> tuple[Any, ...]:
        return tuple(element for row in self.table for element in row)

    def _column(self, column_index: int) -> tuple[Any, ...]:
        return tuple(row[column_index - 1] for row in self.table)

    def _diagonal(self) -> tuple[Any, ...]:
        return tuple(self.table[index][index] for index in range(self.row_size()))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _require_same_shape(self, other: "AbstractMatrix", name: str) -> None:
        require_instance(other, type(self), name)
        require_equal_shapes(
            self.row_size(), self.column_size(), other.row_size(), other.column_size()
        )

    def _map_cells(self, operation: Callable[[int, int, Any], Any]) -> "AbstractMatrix":
        builder = self.builder(self.row_size(), self.column_size())
        for row_index, column_index, element in self.cells():
            builder.put(row_index, column_index, operation(row_index, column_index, element))
        return builder.build()

    def add(self, summand: "AbstractMatrix") -> "AbstractMatrix":
        """
        Поэлементная сумма.

        Raises:
            ValueError: Если summand is None или формы различаются
            TypeError: Если summand другого типа
        """
        self._require_same_shape(summand, "summand")
        return self._map_cells(
            lambda row, column, element: self.domain.add(element, summand.table[row - 1][column - 1])
        )

    def subtract(self, subtrahend: "AbstractMatrix") -> "AbstractMatrix":
        self._require_same_shape(subtrahend, "subtrahend")
        return self._map_cells(
            lambda row, column, element: self.domain.subtract(
                element, subtrahend.table[row - 1][column - 1]
            )
        )

    def _multiply_row_with_column(self, row: tuple[Any, ...], column: tuple[Any, ...]) -> Any:
        return self.domain.sum(
            self.domain.multiply(left, right) for left, right in zip(row, column)
        )

    def multiply(self, factor: "AbstractMatrix") -> "AbstractMatrix":
        """
        Матричное произведение self × factor.

        Raises:
            ValueError: Если column_size != factor.row_size
        """
        require_instance(factor, type(self), "factor")
        if self.column_size() != factor.row_size():
            raise ValueError(
                f"expected column_size == factor.row_size but actual "
                f"{self.column_size()} != {factor.row_size()}"
            )

        builder = self.builder(self.row_size(), factor.column_size())
        for row_index, row in enumerate(self.table, start=1):
            for column_index in factor.column_indexes():
                builder.put(
                    row_index,
                    column_index,
                    self._multiply_row_with_column(row, factor._column(column_index)),
                )
        return builder.build()

    def multiply_vector(self, vector: AbstractVector) -> AbstractVector:
        """
        Произведение матрицы на вектор парного типа.

        Raises:
            ValueError: Если column_size != vector.size
            TypeError: Если vector не парного типа
        """
        require_instance(vector, self.vector_type, "vector")
        if self.column_size() != vector.size():
            raise ValueError(
                f"expected column_size == vector.size but actual "
                f"{self.column_size()} != {vector.size()}"
            )

        builder = self.vector_type.builder(self.row_size())
        for row_index, row in enumerate(self.table, start=1):
            builder.put(row_index, self._multiply_row_with_column(row, vector.components))
        return builder.build()

    def scalar_multiply(self, scalar: Any) -> "AbstractMatrix":
        self.domain.check(scalar, "scalar")
        return self._map_cells(lambda row, column, element: self.domain.multiply(scalar, element))

    def negate(self) -> "AbstractMatrix":
        return self.scalar_multiply(self.domain.negate(self.domain.one))

    def transpose(self) -> "AbstractMatrix":
        builder = self.builder(self.column_size(), self.row_size())
        for row_index, column_index, element in self.cells():
            builder.put(column_index, row_index, element)
        return builder.build()

    def minor(self, row_index: int, column_index: int) -> "AbstractMatrix":
        """
        Матрица без строки row_index и столбца column_index.

        Оставшиеся строки и столбцы переиндексируются подряд с 1.

        Raises:
            ValueError: Если позиция вне диапазона или минор был бы пустым
        """
        require_index_in_range(row_index, self.row_size(), "row_index")
        require_index_in_range(column_index, self.column_size(), "column_index")
        if self.row_size() < 2 or self.column_size() < 2:
            raise ValueError(
                f"expected at least 2 x 2 matrix for minor but actual "
                f"{self.row_size()} x {self.column_size()}"
            )

        builder = self.builder(self.row_size() - 1, self.column_size() - 1)
        for current_row, current_column, element in self.cells():
            if current_row == row_index or current_column == column_index:
                continue
            builder.put(
                current_row - 1 if current_row > row_index else current_row,
                current_column - 1 if current_column > column_index else current_column,
                element,
            )
        return builder.build()

    # -------------------------------------------------------------------------
    # Trace и определитель
    # -------------------------------------------------------------------------

    def _require_square(self) -> None:
        if not self.square():
            raise MatrixNotSquareError(
                f"expected square matrix but actual {self.row_size()} x {self.column_size()}"
            )

    def trace(self) -> Any:
        """
        Сумма диагонали.

        Raises:
            MatrixNotSquareError: Если матрица не квадратная
        """
        self._require_square()
        return self.domain.sum(self._diagonal())

    def determinant(self) -> Any:
        """
        Определитель (точный для обоих доменов).

        Raises:
            MatrixNotSquareError: Если матрица не квадратная
        """
        self._require_square()
        size = self.row_size()

        if size == 1:
            return self.table[0][0]

        if self.triangular():
            _LOG.debug("determinant of triangular %d x %d matrix: product of diagonal", size, size)
            return self.domain.product(self._diagonal())

        if size == 2:
            return self.domain.subtract(
                self.domain.multiply(self.table[0][0], self.table[1][1]),
                self.domain.multiply(self.table[0][1], self.table[1][0]),
            )

        if size == 3:
            return self._rule_of_sarrus()

        _LOG.debug("determinant of %d x %d matrix: cofactor expansion along row 1", size, size)
        return self._cofactor_expansion()

    def _rule_of_sarrus(self) -> Any:
        a = self.table
        d = self.domain
        forward = d.sum(
            (
                d.product((a[0][0], a[1][1], a[2][2])),
                d.product((a[0][1], a[1][2], a[2][0])),
                d.product((a[0][2], a[1][0], a[2][1])),
            )
        )
        backward = d.sum(
            (
                d.product((a[0][2], a[1][1], a[2][0])),
                d.product((a[0][0], a[1][2], a[2][1])),
                d.product((a[0][1], a[1][0], a[2][2])),
            )
        )
        return d.subtract(forward, backward)

    def _cofactor_expansion(self) -> Any:
        result = self.domain.zero
        for column_index, element in enumerate(self.table[0], start=1):
            # Нулевой элемент не вносит вклад: минор не вычисляется
            if self.domain.is_zero(element):
                continue

            term = self.domain.multiply(element, self.minor(1, column_index).determinant())
            if column_index % 2 == 1:
                result = self.domain.add(result, term)
            else:
                result = self.domain.subtract(result, term)
        return result

    # -------------------------------------------------------------------------
    # Нормы матрицы
    # -------------------------------------------------------------------------

    def _absolute_sum(self, values: tuple[Any, ...]) -> Any:
        return self.domain.sum(self.domain.absolute(value) for value in values)

    def max_abs_column_sum_norm(self) -> Any:
        """max_j Σ_i |a_ij| (1-норма)."""
        return max(
            self._absolute_sum(self._column(index)) for index in self.column_indexes()
        )

    def max_abs_row_sum_norm(self) -> Any:
        """max_i Σ_j |a_ij| (норма бесконечность)."""
        return max(self._absolute_sum(row) for row in self.table)

    def max_norm(self) -> Any:
        return max(self.domain.absolute(element) for element in self.elements())

    def frobenius_norm_pow2(self) -> Any:
        return self.domain.sum(self.domain.multiply(element, element) for element in self.elements())

    def frobenius_norm(
        self,
        *,
        precision: Decimal | None = None,
        scale: int | None = None,
        rounding_mode: RoundingMode | int | None = None,
    ) -> Decimal:
        """√(Σ a_ij²) через square_root; параметры валидируются до вычисления."""
        calculator = square_root_calculator(precision, scale, rounding_mode)
        return calculator.sqrt(self.frobenius_norm_pow2())

    # -------------------------------------------------------------------------
    # Структурные предикаты
    # -------------------------------------------------------------------------

    def square(self) -> bool:
        return self.row_size() == self.column_size()

    def upper_triangular(self) -> bool:
        """Квадратная и все элементы строго ниже диагонали равны нулю."""
        if not self.square():
            return False
        return all(
            self.domain.is_zero(element)
            for row_index, column_index, element in self.cells()
            if row_index > column_index
        )

    def lower_triangular(self) -> bool:
        """Квадратная и все элементы строго выше диагонали равны нулю."""
        if not self.square():
            return False
        return all(
            self.domain.is_zero(element)
            for row_index, column_index, element in self.cells()
            if row_index < column_index
        )

    def triangular(self) -> bool:
        return self.upper_triangular() or self.lower_triangular()

    def diagonal(self) -> bool:
        return self.upper_triangular() and self.lower_triangular()

    def identity(self) -> bool:
        return self.diagonal() and all(
            self.domain.is_one(element) for element in self._diagonal()
        )

    def symmetric(self) -> bool:
        return self.square() and self == self.transpose()

    def skew_symmetric(self) -> bool:
        return self.square() and self.transpose() == self.negate()

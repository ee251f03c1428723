"""
DecimalMatrix — матрица над произвольными Decimal

Определитель вычисляется точно (EXACT_CONTEXT), поэтому invertible()
сравнивает его с нулём без допуска.
"""

from decimal import Decimal
from typing import ClassVar

from pydantic import Field

from exactlinalg.linear.builders import AbstractMatrixBuilder
from exactlinalg.linear.decimal_vector import DecimalVector, StrictDecimal
from exactlinalg.linear.matrix import AbstractMatrix
from exactlinalg.linear.vector import AbstractVector
from exactlinalg.math.numerical_safeguards import DECIMAL_DOMAIN, ScalarDomain


class DecimalMatrix(AbstractMatrix):
    """Immutable матрица Decimal."""

    domain: ClassVar[ScalarDomain] = DECIMAL_DOMAIN
    vector_type: ClassVar[type[AbstractVector]] = DecimalVector

    table: tuple[tuple[StrictDecimal, ...], ...] = Field(
        ..., min_length=1, description="Строки 1..row_size"
    )

    @classmethod
    def builder(cls, row_size: int, column_size: int) -> "DecimalMatrixBuilder":
        return DecimalMatrixBuilder(row_size, column_size)

    def invertible(self) -> bool:
        if not self.square():
            return False
        return not self.determinant().is_zero()


class DecimalMatrixBuilder(AbstractMatrixBuilder[DecimalMatrix]):
    domain: ClassVar[ScalarDomain] = DECIMAL_DOMAIN

    def _create(self, table: tuple[tuple[Decimal, ...], ...]) -> DecimalMatrix:
        return DecimalMatrix(table=table)

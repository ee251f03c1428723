"""
IntegerMatrix — матрица над произвольными целыми

Обратимость понимается над целыми: обратная матрица тоже целочисленна
тогда и только тогда, когда det ∈ {1, -1}.
"""

from typing import ClassVar

from pydantic import Field, StrictInt

from exactlinalg.linear.builders import AbstractMatrixBuilder
from exactlinalg.linear.integer_vector import IntegerVector
from exactlinalg.linear.matrix import AbstractMatrix
from exactlinalg.linear.vector import AbstractVector
from exactlinalg.math.numerical_safeguards import INTEGER_DOMAIN, ScalarDomain


class IntegerMatrix(AbstractMatrix):
    """
    Immutable матрица целых.

    Examples:
        >>> matrix = IntegerMatrix(table=((1, 2), (3, 4)))
        >>> matrix.determinant()
        -2
        >>> matrix.invertible()
        False
    """

    domain: ClassVar[ScalarDomain] = INTEGER_DOMAIN
    vector_type: ClassVar[type[AbstractVector]] = IntegerVector

    table: tuple[tuple[StrictInt, ...], ...] = Field(
        ..., min_length=1, description="Строки 1..row_size"
    )

    @classmethod
    def builder(cls, row_size: int, column_size: int) -> "IntegerMatrixBuilder":
        return IntegerMatrixBuilder(row_size, column_size)

    def invertible(self) -> bool:
        """Квадратная и det ∈ {1, -1}."""
        if not self.square():
            return False
        return self.determinant() in (1, -1)


class IntegerMatrixBuilder(AbstractMatrixBuilder[IntegerMatrix]):
    """Builder IntegerMatrix фиксированной формы."""

    domain: ClassVar[ScalarDomain] = INTEGER_DOMAIN

    def _create(self, table: tuple[tuple[int, ...], ...]) -> IntegerMatrix:
        return IntegerMatrix(table=table)

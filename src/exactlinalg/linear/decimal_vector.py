"""
DecimalVector — вектор над произвольными Decimal

Элементы строго Decimal и конечны: int, float, str, NaN и Infinity
отклоняются при создании. Арифметика выполняется в EXACT_CONTEXT.
"""

from decimal import Decimal
from typing import Annotated, ClassVar

from pydantic import Field, Strict

from exactlinalg.linear.builders import AbstractVectorBuilder
from exactlinalg.linear.vector import AbstractVector
from exactlinalg.math.numerical_safeguards import DECIMAL_DOMAIN, ScalarDomain

StrictDecimal = Annotated[Decimal, Strict()]


class DecimalVector(AbstractVector):
    """Immutable вектор Decimal."""

    domain: ClassVar[ScalarDomain] = DECIMAL_DOMAIN

    components: tuple[StrictDecimal, ...] = Field(
        ..., min_length=1, description="Элементы 1..size"
    )

    @classmethod
    def builder(cls, size: int) -> "DecimalVectorBuilder":
        return DecimalVectorBuilder(size)

    @classmethod
    def matrix_type(cls) -> type:
        from exactlinalg.linear.decimal_matrix import DecimalMatrix

        return DecimalMatrix


class DecimalVectorBuilder(AbstractVectorBuilder[DecimalVector]):
    domain: ClassVar[ScalarDomain] = DECIMAL_DOMAIN

    def _create(self, components: tuple[Decimal, ...]) -> DecimalVector:
        return DecimalVector(components=components)

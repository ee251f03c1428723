"""
IntegerVector — вектор над произвольными целыми (Python int)

Элементы строго int: bool, float, str и Decimal отклоняются при создании.
"""

from typing import ClassVar

from pydantic import Field, StrictInt

from exactlinalg.linear.builders import AbstractVectorBuilder
from exactlinalg.linear.vector import AbstractVector
from exactlinalg.math.numerical_safeguards import INTEGER_DOMAIN, ScalarDomain


class IntegerVector(AbstractVector):
    """
    Immutable вектор целых.

    Examples:
        >>> vector = IntegerVector(components=(3, 4))
        >>> vector.euclidean_norm_pow2(), vector.taxicab_norm(), vector.max_norm()
        (25, 7, 4)
    """

    domain: ClassVar[ScalarDomain] = INTEGER_DOMAIN

    components: tuple[StrictInt, ...] = Field(..., min_length=1, description="Элементы 1..size")

    @classmethod
    def builder(cls, size: int) -> "IntegerVectorBuilder":
        return IntegerVectorBuilder(size)

    @classmethod
    def matrix_type(cls) -> type:
        # integer_matrix импортирует этот модуль
        from exactlinalg.linear.integer_matrix import IntegerMatrix

        return IntegerMatrix


class IntegerVectorBuilder(AbstractVectorBuilder[IntegerVector]):
    """Builder IntegerVector фиксированного размера."""

    domain: ClassVar[ScalarDomain] = INTEGER_DOMAIN

    def _create(self, components: tuple[int, ...]) -> IntegerVector:
        return IntegerVector(components=components)

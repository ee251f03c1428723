"""
Linear algebra types для exactlinalg

Immutable векторы и матрицы над int и Decimal, их builder'ы и фабрики.
"""

from .builders import (
    AbstractMatrixBuilder,
    AbstractVectorBuilder,
    BuilderFullError,
    IncompleteBuilderError,
)
from .decimal_matrix import DecimalMatrix, DecimalMatrixBuilder
from .decimal_vector import DecimalVector, DecimalVectorBuilder
from .factories import (
    identity_decimal_matrix,
    identity_integer_matrix,
    zero_decimal_matrix,
    zero_decimal_vector,
    zero_integer_matrix,
    zero_integer_vector,
)
from .integer_matrix import IntegerMatrix, IntegerMatrixBuilder
from .integer_vector import IntegerVector, IntegerVectorBuilder
from .matrix import AbstractMatrix, MatrixNotSquareError
from .vector import AbstractVector

__all__ = [
    # Contracts
    "AbstractVector",
    "AbstractMatrix",
    "AbstractVectorBuilder",
    "AbstractMatrixBuilder",
    # Exceptions
    "BuilderFullError",
    "IncompleteBuilderError",
    "MatrixNotSquareError",
    # Integer domain
    "IntegerVector",
    "IntegerVectorBuilder",
    "IntegerMatrix",
    "IntegerMatrixBuilder",
    # Decimal domain
    "DecimalVector",
    "DecimalVectorBuilder",
    "DecimalMatrix",
    "DecimalMatrixBuilder",
    # Factories
    "zero_integer_vector",
    "zero_decimal_vector",
    "zero_integer_matrix",
    "zero_decimal_matrix",
    "identity_integer_matrix",
    "identity_decimal_matrix",
]

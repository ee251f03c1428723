"""
exactlinalg — точная линейная алгебра над int и Decimal.

Immutable векторы и матрицы, определители, структурные предикаты и
квадратный корень методом Герона для норм и расстояний.

Библиотека не настраивает логирование: корневой logger пакета получает
NullHandler, обработчики добавляет приложение.
"""

import logging

from exactlinalg.linear import (
    BuilderFullError,
    DecimalMatrix,
    DecimalVector,
    IncompleteBuilderError,
    IntegerMatrix,
    IntegerVector,
    MatrixNotSquareError,
    identity_decimal_matrix,
    identity_integer_matrix,
    zero_decimal_matrix,
    zero_decimal_vector,
    zero_integer_matrix,
    zero_integer_vector,
)
from exactlinalg.math import (
    InexactRoundingError,
    NotPerfectSquareError,
    RoundingMode,
    SquareRootCalculator,
    sqrt,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BuilderFullError",
    "DecimalMatrix",
    "DecimalVector",
    "IncompleteBuilderError",
    "InexactRoundingError",
    "IntegerMatrix",
    "IntegerVector",
    "MatrixNotSquareError",
    "NotPerfectSquareError",
    "RoundingMode",
    "SquareRootCalculator",
    "identity_decimal_matrix",
    "identity_integer_matrix",
    "sqrt",
    "zero_decimal_matrix",
    "zero_decimal_vector",
    "zero_integer_matrix",
    "zero_integer_vector",
]

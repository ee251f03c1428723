"""
Factories — нулевые векторы/матрицы и единичные матрицы

Все фабрики строят значения через builder соответствующего типа, поэтому
размеры валидируются так же, как при ручном построении.
"""

from exactlinalg.linear.decimal_matrix import DecimalMatrix
from exactlinalg.linear.decimal_vector import DecimalVector
from exactlinalg.linear.integer_matrix import IntegerMatrix
from exactlinalg.linear.integer_vector import IntegerVector
from exactlinalg.linear.matrix import AbstractMatrix
from exactlinalg.linear.vector import AbstractVector


def _zero_vector(vector_type: type[AbstractVector], size: int) -> AbstractVector:
    return vector_type.builder(size).put_all(vector_type.domain.zero).build()


def _zero_matrix(
    matrix_type: type[AbstractMatrix], row_size: int, column_size: int
) -> AbstractMatrix:
    return (
        matrix_type.builder(row_size, column_size)
        .put_all(matrix_type.domain.zero)
        .build()
    )


def _identity_matrix(matrix_type: type[AbstractMatrix], size: int) -> AbstractMatrix:
    builder = matrix_type.builder(size, size)
    for index in range(1, size + 1):
        builder.put(index, index, matrix_type.domain.one)
    return builder.nulls_to_element(matrix_type.domain.zero).build()


def zero_integer_vector(size: int) -> IntegerVector:
    """
    IntegerVector из size нулей.

    Raises:
        ValueError: Если size <= 0
    """
    return _zero_vector(IntegerVector, size)


def zero_decimal_vector(size: int) -> DecimalVector:
    return _zero_vector(DecimalVector, size)


def zero_integer_matrix(row_size: int, column_size: int) -> IntegerMatrix:
    return _zero_matrix(IntegerMatrix, row_size, column_size)


def zero_decimal_matrix(row_size: int, column_size: int) -> DecimalMatrix:
    return _zero_matrix(DecimalMatrix, row_size, column_size)


def identity_integer_matrix(size: int) -> IntegerMatrix:
    """
    Единичная IntegerMatrix size × size: 1 на диагонали, 0 вне её.

    Examples:
        >>> identity_integer_matrix(2).table
        ((1, 0), (0, 1))
    """
    return _identity_matrix(IntegerMatrix, size)


def identity_decimal_matrix(size: int) -> DecimalMatrix:
    return _identity_matrix(DecimalMatrix, size)


"""
Precondition Validators — общие проверки аргументов

Модуль содержит проверки, общие для всех векторов, матриц и builder'ов:
- None-проверки обязательных аргументов
- Проверка типа операнда (без неявного приведения int <-> Decimal)
- Проверка размеров (size > 0, равенство размеров и форм)
- Проверка индексов (1-индексация, диапазон [1, size])

Все проверки выполняются ДО вычислений и не оставляют частичного результата.
Сообщения об ошибках имеют единый формат:
    "expected <условие> but actual <значение>"
"""

from typing import Any


# =============================================================================
# ОБЯЗАТЕЛЬНЫЕ АРГУМЕНТЫ И ТИПЫ
# =============================================================================


def require_not_none(value: Any, name: str) -> None:
    """
    Проверка, что обязательный аргумент передан.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value is None
    """
    if value is None:
        raise ValueError(f"{name} must not be None")


def require_instance(value: Any, expected_type: type, name: str) -> None:
    """
    Проверка, что операнд имеет ожидаемый тип.

    bool отклоняется даже там, где ожидается int: True/False не являются
    элементами векторов и матриц.

    Args:
        value: Проверяемое значение
        expected_type: Ожидаемый тип
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value is None
        TypeError: Если value не является экземпляром expected_type
    """
    require_not_none(value, name)

    if isinstance(value, bool) or not isinstance(value, expected_type):
        raise TypeError(
            f"expected {name} of type {expected_type.__name__} "
            f"but actual {type(value).__name__}"
        )


# =============================================================================
# РАЗМЕРЫ
# =============================================================================


def require_positive_size(size: Any, name: str) -> None:
    """
    Проверка размера при создании builder'а.

    Raises:
        TypeError: Если size не int
        ValueError: Если size <= 0
    """
    require_instance(size, int, name)

    if size <= 0:
        raise ValueError(f"expected {name} > 0 but actual {size}")


def require_equal_sizes(size: int, other_size: int) -> None:
    """
    Проверка равенства размеров двух векторов.

    Raises:
        ValueError: Если size != other_size
    """
    if size != other_size:
        raise ValueError(f"expected equal sizes but actual {size} != {other_size}")


def require_equal_shapes(
    row_size: int,
    column_size: int,
    other_row_size: int,
    other_column_size: int,
) -> None:
    """
    Проверка равенства форм двух матриц.

    Raises:
        ValueError: Если row sizes или column sizes различаются
    """
    if row_size != other_row_size:
        raise ValueError(
            f"expected equal row sizes but actual {row_size} != {other_row_size}"
        )

    if column_size != other_column_size:
        raise ValueError(
            f"expected equal column sizes but actual {column_size} != {other_column_size}"
        )


# =============================================================================
# ИНДЕКСЫ
# =============================================================================


def require_index_in_range(index: Any, size: int, name: str = "index") -> None:
    """
    Проверка 1-индекса: index ∈ [1, size].

    Args:
        index: Проверяемый индекс
        size: Верхняя граница (включительно)
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если index is None или вне диапазона
        TypeError: Если index не int

    Examples:
        >>> require_index_in_range(3, 3)
        >>> require_index_in_range(4, 3)
        Traceback (most recent call last):
            ...
        ValueError: expected index in [1, 3] but actual 4
    """
    require_instance(index, int, name)

    if not 1 <= index <= size:
        raise ValueError(f"expected {name} in [1, {size}] but actual {index}")

"""
Builders — поэтапное построение векторов и матриц

Builder привязан к фиксированному размеру (форме) при создании и накапливает
элементы в изменяемом хранилище. build() выполняет единственную проверку
полноты и возвращает immutable вектор/матрицу, владеющий собственной копией
данных.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. size/row_size/column_size > 0, иначе ValueError при создании
2. Индексы 1-based, вне диапазона → ValueError
3. Элементы проверяются доменом при put (None → ValueError, чужой тип → TypeError)
4. build() при пустой ячейке → IncompleteBuilderError
5. Повторное использование builder'а после build() не меняет уже построенное значение

Builder не потокобезопасен: используется одним владельцем до build().
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from exactlinalg.contracts.validators import require_index_in_range, require_positive_size
from exactlinalg.math.numerical_safeguards import ScalarDomain

V = TypeVar("V")
M = TypeVar("M")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IncompleteBuilderError(Exception):
    """build() вызван, когда хотя бы одна ячейка ещё не заполнена."""

    pass


class BuilderFullError(IndexError):
    """put_next() вызван для полностью заполненного vector builder'а."""

    pass


# =============================================================================
# VECTOR BUILDER
# =============================================================================


class AbstractVectorBuilder(ABC, Generic[V]):
    """
    Builder вектора фиксированного размера.

    Конкретный builder задаёт domain и _create (конструктор целевого типа).
    """

    domain: ClassVar[ScalarDomain]

    def __init__(self, size: int) -> None:
        require_positive_size(size, "size")
        self._size = size
        self._slots: list[Any | None] = [None] * size

    @property
    def size(self) -> int:
        return self._size

    @abstractmethod
    def _create(self, components: tuple[Any, ...]) -> V:
        """Создание immutable вектора из полностью заполненного кортежа."""

    def element(self, index: int) -> Any | None:
        """Элемент по индексу или None, если ячейка ещё пуста."""
        require_index_in_range(index, self._size)
        return self._slots[index - 1]

    def put(self, index: int, element: Any) -> "AbstractVectorBuilder[V]":
        """
        Записать element в позицию index.

        Raises:
            ValueError: Если index вне [1, size] или element is None
            TypeError: Если element не принадлежит домену
        """
        require_index_in_range(index, self._size)
        self.domain.check(element)
        self._slots[index - 1] = element
        return self

    def put_next(self, element: Any) -> "AbstractVectorBuilder[V]":
        """
        Записать element в первую свободную позицию.

        Raises:
            BuilderFullError: Если все позиции уже заполнены
        """
        self.domain.check(element)

        for position, slot in enumerate(self._slots):
            if slot is None:
                self._slots[position] = element
                return self

        raise BuilderFullError(
            f"expected index in [1, {self._size}] but actual {self._size + 1}"
        )

    def put_all(self, element: Any) -> "AbstractVectorBuilder[V]":
        """Записать element во все позиции."""
        self.domain.check(element)
        self._slots = [element] * self._size
        return self

    def nulls_to_element(self, element: Any) -> "AbstractVectorBuilder[V]":
        """Записать element только в пустые позиции."""
        self.domain.check(element)
        self._slots = [element if slot is None else slot for slot in self._slots]
        return self

    def build(self) -> V:
        """
        Проверка полноты и создание immutable вектора.

        Raises:
            IncompleteBuilderError: Если хотя бы одна позиция пуста
        """
        for index, slot in enumerate(self._slots, start=1):
            if slot is None:
                raise IncompleteBuilderError(
                    f"expected element at index {index} of {self._size} but none was put"
                )

        return self._create(tuple(self._slots))


# =============================================================================
# MATRIX BUILDER
# =============================================================================


class AbstractMatrixBuilder(ABC, Generic[M]):
    """Builder матрицы фиксированной формы row_size × column_size."""

    domain: ClassVar[ScalarDomain]

    def __init__(self, row_size: int, column_size: int) -> None:
        require_positive_size(row_size, "row_size")
        require_positive_size(column_size, "column_size")
        self._row_size = row_size
        self._column_size = column_size
        self._slots: list[list[Any | None]] = [
            [None] * column_size for _ in range(row_size)
        ]

    @property
    def row_size(self) -> int:
        return self._row_size

    @property
    def column_size(self) -> int:
        return self._column_size

    @abstractmethod
    def _create(self, table: tuple[tuple[Any, ...], ...]) -> M:
        """Создание immutable матрицы из полностью заполненной таблицы."""

    def _require_position(self, row_index: int, column_index: int) -> None:
        require_index_in_range(row_index, self._row_size, "row_index")
        require_index_in_range(column_index, self._column_size, "column_index")

    def element(self, row_index: int, column_index: int) -> Any | None:
        """Элемент в позиции или None, если ячейка ещё пуста."""
        self._require_position(row_index, column_index)
        return self._slots[row_index - 1][column_index - 1]

    def put(self, row_index: int, column_index: int, element: Any) -> "AbstractMatrixBuilder[M]":
        """
        Записать element в позицию (row_index, column_index).

        Raises:
            ValueError: Если позиция вне диапазона или element is None
            TypeError: Если element не принадлежит домену
        """
        self._require_position(row_index, column_index)
        self.domain.check(element)
        self._slots[row_index - 1][column_index - 1] = element
        return self

    def put_all(self, element: Any) -> "AbstractMatrixBuilder[M]":
        self.domain.check(element)
        self._slots = [[element] * self._column_size for _ in range(self._row_size)]
        return self

    def nulls_to_element(self, element: Any) -> "AbstractMatrixBuilder[M]":
        self.domain.check(element)
        self._slots = [
            [element if slot is None else slot for slot in row] for row in self._slots
        ]
        return self

    def build(self) -> M:
        """
        Проверка полноты и создание immutable матрицы.

        Raises:
            IncompleteBuilderError: Если хотя бы одна ячейка пуста
        """
        for row_index, row in enumerate(self._slots, start=1):
            for column_index, slot in enumerate(row, start=1):
                if slot is None:
                    raise IncompleteBuilderError(
                        f"expected element at ({row_index}, {column_index}) of "
                        f"{self._row_size} x {self._column_size} but none was put"
                    )

        return self._create(tuple(tuple(row) for row in self._slots))

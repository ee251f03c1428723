"""
Тесты для модуля Builders

Проверяет:
1. Заполнение vector builder'а по индексу и последовательно (put_next)
2. Проверку полноты при build()
3. Проверку индексов, размеров и элементов
4. Независимость построенного значения от дальнейшей работы builder'а
"""

from decimal import Decimal

import pytest

from exactlinalg.linear import (
    BuilderFullError,
    DecimalMatrix,
    DecimalVector,
    IncompleteBuilderError,
    IntegerMatrix,
    IntegerMatrixBuilder,
    IntegerVector,
    IntegerVectorBuilder,
)

# =============================================================================
# VECTOR BUILDER
# =============================================================================


class TestVectorBuilder:
    """Тесты для IntegerVectorBuilder и DecimalVectorBuilder"""

    def test_builder_factory(self) -> None:
        builder = IntegerVector.builder(3)
        assert isinstance(builder, IntegerVectorBuilder)
        assert builder.size == 3

    def test_put_by_index(self) -> None:
        vector = IntegerVector.builder(3).put(3, 30).put(1, 10).put(2, 20).build()
        assert vector == IntegerVector(components=(10, 20, 30))

    def test_put_next_fills_in_order(self) -> None:
        vector = IntegerVector.builder(3).put_next(1).put_next(2).put_next(3).build()
        assert vector.components == (1, 2, 3)

    def test_put_next_skips_filled_slots(self) -> None:
        vector = IntegerVector.builder(3).put(1, 7).put(3, 9).put_next(8).build()
        assert vector.components == (7, 8, 9)

    def test_put_next_on_full_builder(self) -> None:
        builder = IntegerVector.builder(2).put_next(1).put_next(2)
        with pytest.raises(BuilderFullError, match=r"expected index in \[1, 2\] but actual 3"):
            builder.put_next(3)

    def test_builder_full_is_index_error(self) -> None:
        assert issubclass(BuilderFullError, IndexError)

    def test_incomplete_build(self) -> None:
        """Size-3 builder без элемента 3 не строится"""
        builder = IntegerVector.builder(3).put(1, 1).put(2, 2)
        with pytest.raises(IncompleteBuilderError, match="expected element at index 3 of 3"):
            builder.build()

    def test_index_out_of_range(self) -> None:
        builder = IntegerVector.builder(3)
        with pytest.raises(ValueError, match=r"expected index in \[1, 3\] but actual 4"):
            builder.put(4, 1)
        with pytest.raises(ValueError, match=r"expected index in \[1, 3\] but actual 0"):
            builder.put(0, 1)

    @pytest.mark.parametrize("size", [0, -2])
    def test_non_positive_size(self, size: int) -> None:
        with pytest.raises(ValueError, match=f"expected size > 0 but actual {size}"):
            IntegerVector.builder(size)

    def test_none_element(self) -> None:
        with pytest.raises(ValueError, match="element must not be None"):
            IntegerVector.builder(1).put(1, None)

    def test_wrong_element_type(self) -> None:
        with pytest.raises(TypeError):
            IntegerVector.builder(1).put(1, Decimal(1))
        with pytest.raises(TypeError):
            DecimalVector.builder(1).put(1, 1)
        with pytest.raises(TypeError):
            IntegerVector.builder(1).put_next(True)

    def test_non_finite_decimal(self) -> None:
        with pytest.raises(ValueError, match="must be finite"):
            DecimalVector.builder(1).put(1, Decimal("NaN"))

    def test_element_read_back(self) -> None:
        builder = IntegerVector.builder(2).put(2, 5)
        assert builder.element(1) is None
        assert builder.element(2) == 5

    def test_put_all_and_nulls_to_element(self) -> None:
        assert IntegerVector.builder(3).put_all(4).build().components == (4, 4, 4)

        builder = DecimalVector.builder(3).put(2, Decimal("1.5"))
        vector = builder.nulls_to_element(Decimal(0)).build()
        assert vector.components == (Decimal(0), Decimal("1.5"), Decimal(0))

    def test_reuse_after_build(self) -> None:
        """Построенный вектор не меняется при дальнейшем put"""
        builder = IntegerVector.builder(2).put_all(1)
        first = builder.build()
        builder.put(1, 9)
        second = builder.build()

        assert first.components == (1, 1)
        assert second.components == (9, 1)


# =============================================================================
# MATRIX BUILDER
# =============================================================================


class TestMatrixBuilder:
    """Тесты для IntegerMatrixBuilder и DecimalMatrixBuilder"""

    def test_builder_factory(self) -> None:
        builder = IntegerMatrix.builder(2, 3)
        assert isinstance(builder, IntegerMatrixBuilder)
        assert (builder.row_size, builder.column_size) == (2, 3)

    def test_put_and_build(self) -> None:
        builder = IntegerMatrix.builder(2, 2)
        builder.put(1, 1, 1).put(1, 2, 2).put(2, 1, 3).put(2, 2, 4)
        assert builder.build() == IntegerMatrix(table=((1, 2), (3, 4)))

    def test_incomplete_build_names_first_empty_cell(self) -> None:
        builder = IntegerMatrix.builder(2, 2).put(1, 1, 1).put(1, 2, 2).put(2, 1, 3)
        with pytest.raises(IncompleteBuilderError, match=r"expected element at \(2, 2\) of 2 x 2"):
            builder.build()

    def test_position_out_of_range(self) -> None:
        builder = IntegerMatrix.builder(2, 3)
        with pytest.raises(ValueError, match=r"expected row_index in \[1, 2\] but actual 3"):
            builder.put(3, 1, 0)
        with pytest.raises(ValueError, match=r"expected column_index in \[1, 3\] but actual 4"):
            builder.put(1, 4, 0)

    @pytest.mark.parametrize(
        "row_size,column_size,message",
        [
            (0, 1, "expected row_size > 0 but actual 0"),
            (1, 0, "expected column_size > 0 but actual 0"),
            (-1, -1, "expected row_size > 0 but actual -1"),
        ],
    )
    def test_non_positive_shape(self, row_size: int, column_size: int, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            IntegerMatrix.builder(row_size, column_size)

    def test_wrong_element_type(self) -> None:
        with pytest.raises(TypeError):
            DecimalMatrix.builder(1, 1).put(1, 1, 1)

    def test_put_all_and_nulls_to_element(self) -> None:
        assert IntegerMatrix.builder(2, 2).put_all(7).build().table == ((7, 7), (7, 7))

        builder = IntegerMatrix.builder(2, 2).put(1, 2, 5)
        assert builder.element(1, 2) == 5
        assert builder.element(2, 1) is None
        assert builder.nulls_to_element(0).build().table == ((0, 5), (0, 0))

    def test_reuse_after_build(self) -> None:
        builder = IntegerMatrix.builder(1, 2).put_all(0)
        first = builder.build()
        builder.put(1, 1, 3)

        assert first.table == ((0, 0),)
        assert builder.build().table == ((3, 0),)

"""
Тесты для IntegerMatrix

Проверяет:
1. Создание, форму и доступ к строкам/столбцам/ячейкам
2. Арифметику: add, subtract, multiply, multiply_vector, scalar_multiply
3. Определитель: 1×1, треугольный, 2×2, Саррюс, разложение Лапласа
4. transpose, minor и структурные предикаты
5. Нормы матрицы
"""

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from exactlinalg.linear import (
    DecimalMatrix,
    DecimalVector,
    IntegerMatrix,
    IntegerVector,
    MatrixNotSquareError,
    identity_integer_matrix,
)

# =============================================================================
# FIXTURES
# =============================================================================


def matrix(*rows: tuple[int, ...]) -> IntegerMatrix:
    return IntegerMatrix(table=rows)


@pytest.fixture
def m_1234() -> IntegerMatrix:
    """[[1, 2], [3, 4]]"""
    return matrix((1, 2), (3, 4))


@pytest.fixture
def m_2x3() -> IntegerMatrix:
    return matrix((1, 2, 3), (4, 5, 6))


@pytest.fixture
def m_3x3() -> IntegerMatrix:
    return matrix((1, 2, 3), (4, 5, 6), (7, 8, 9))


# =============================================================================
# ТЕСТЫ СОЗДАНИЯ И ДОСТУПА
# =============================================================================


class TestCreationAndAccess:
    """Тесты создания и аксессоров"""

    def test_shape(self, m_2x3: IntegerMatrix) -> None:
        assert m_2x3.row_size() == 2
        assert m_2x3.column_size() == 3
        assert m_2x3.size() == 6
        assert m_2x3.row_indexes() == (1, 2)
        assert m_2x3.column_indexes() == (1, 2, 3)
        assert not m_2x3.square()

    def test_element(self, m_2x3: IntegerMatrix) -> None:
        assert m_2x3.element(1, 1) == 1
        assert m_2x3.element(2, 3) == 6

    def test_element_out_of_range(self, m_2x3: IntegerMatrix) -> None:
        with pytest.raises(ValueError, match=r"expected row_index in \[1, 2\] but actual 3"):
            m_2x3.element(3, 1)
        with pytest.raises(ValueError, match=r"expected column_index in \[1, 3\] but actual 0"):
            m_2x3.element(1, 0)

    def test_rows_and_columns_are_integer_vectors(self, m_2x3: IntegerMatrix) -> None:
        assert m_2x3.row(2) == IntegerVector(components=(4, 5, 6))
        assert m_2x3.column(3) == IntegerVector(components=(3, 6))
        assert m_2x3.rows() == {
            1: IntegerVector(components=(1, 2, 3)),
            2: IntegerVector(components=(4, 5, 6)),
        }
        assert list(m_2x3.columns()) == [1, 2, 3]

    def test_cells_and_elements(self, m_1234: IntegerMatrix) -> None:
        assert m_1234.cells() == ((1, 1, 1), (1, 2, 2), (2, 1, 3), (2, 2, 4))
        assert m_1234.elements() == (1, 2, 3, 4)

    @pytest.mark.parametrize(
        "table",
        [
            (),
            ((),),
            ((1, 2), (3,)),
            ((1, True),),
            ((1, Decimal(2)),),
        ],
    )
    def test_invalid_tables_rejected(self, table) -> None:
        with pytest.raises(ValidationError):
            IntegerMatrix(table=table)

    def test_equality_and_hash(self, m_1234: IntegerMatrix) -> None:
        assert m_1234 == matrix((1, 2), (3, 4))
        assert len({m_1234, matrix((1, 2), (3, 4))}) == 1
        assert m_1234 != matrix((1, 2), (3, 5))

    def test_frozen(self, m_1234: IntegerMatrix) -> None:
        with pytest.raises(ValidationError):
            m_1234.table = ((0,),)

    def test_string_representation(self, m_1234: IntegerMatrix) -> None:
        assert str(m_1234) == "IntegerMatrix((1, 2), (3, 4))"


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestArithmetic:
    """Тесты матричной арифметики"""

    def test_add_and_subtract(self, m_1234: IntegerMatrix) -> None:
        other = matrix((10, 20), (30, 40))
        assert m_1234.add(other) == matrix((11, 22), (33, 44))
        assert other.subtract(m_1234) == matrix((9, 18), (27, 36))
        assert m_1234.add(other).subtract(other) == m_1234

    def test_add_commutative(self, m_1234: IntegerMatrix) -> None:
        other = matrix((-5, 0), (7, 1))
        assert m_1234.add(other) == other.add(m_1234)

    def test_shape_mismatch(self, m_1234: IntegerMatrix, m_2x3: IntegerMatrix) -> None:
        with pytest.raises(ValueError, match="expected equal column sizes but actual 2 != 3"):
            m_1234.add(m_2x3)
        with pytest.raises(ValueError, match="expected equal row sizes but actual 2 != 3"):
            m_1234.subtract(matrix((1, 2), (3, 4), (5, 6)))

    def test_mixed_domains_rejected(self, m_1234: IntegerMatrix) -> None:
        decimal_matrix = DecimalMatrix(
            table=((Decimal(1), Decimal(2)), (Decimal(3), Decimal(4)))
        )
        with pytest.raises(TypeError):
            m_1234.add(decimal_matrix)

    def test_none_operand(self, m_1234: IntegerMatrix) -> None:
        with pytest.raises(ValueError, match="factor must not be None"):
            m_1234.multiply(None)

    def test_multiply_square(self, m_1234: IntegerMatrix) -> None:
        assert m_1234.multiply(matrix((5, 6), (7, 8))) == matrix((19, 22), (43, 50))

    def test_multiply_rectangular(self, m_2x3: IntegerMatrix) -> None:
        product = m_2x3.multiply(matrix((7, 8), (9, 10), (11, 12)))
        assert product == matrix((58, 64), (139, 154))

    def test_multiply_shape_mismatch(self, m_2x3: IntegerMatrix) -> None:
        with pytest.raises(
            ValueError, match="expected column_size == factor.row_size but actual 3 != 2"
        ):
            m_2x3.multiply(m_2x3)

    def test_multiply_by_identity(self, m_3x3: IntegerMatrix) -> None:
        identity = identity_integer_matrix(3)
        assert m_3x3.multiply(identity) == m_3x3
        assert identity.multiply(m_3x3) == m_3x3

    def test_multiply_vector(self, m_1234: IntegerMatrix) -> None:
        product = m_1234.multiply_vector(IntegerVector(components=(5, 6)))
        assert product == IntegerVector(components=(17, 39))

    def test_multiply_vector_size_mismatch(self, m_1234: IntegerMatrix) -> None:
        with pytest.raises(ValueError, match="expected column_size == vector.size but actual 2 != 3"):
            m_1234.multiply_vector(IntegerVector(components=(1, 2, 3)))

    def test_multiply_vector_of_other_domain(self, m_1234: IntegerMatrix) -> None:
        with pytest.raises(TypeError):
            m_1234.multiply_vector(DecimalVector(components=(Decimal(1), Decimal(2))))

    def test_scalar_multiply_and_negate(self, m_1234: IntegerMatrix) -> None:
        assert m_1234.scalar_multiply(3) == matrix((3, 6), (9, 12))
        assert m_1234.negate() == matrix((-1, -2), (-3, -4))
        assert m_1234.negate().negate() == m_1234

    def test_scalar_multiply_distributes(self, m_1234: IntegerMatrix) -> None:
        other = matrix((0, -1), (2, 5))
        assert m_1234.add(other).scalar_multiply(4) == m_1234.scalar_multiply(4).add(
            other.scalar_multiply(4)
        )


# =============================================================================
# ТЕСТЫ TRACE И ОПРЕДЕЛИТЕЛЯ
# =============================================================================


class TestDeterminant:
    """Тесты trace и determinant"""

    def test_example_2x2(self, m_1234: IntegerMatrix) -> None:
        """[[1,2],[3,4]]: det = 1*4 - 2*3 = -2"""
        assert m_1234.determinant() == -2
        assert not m_1234.invertible()

    def test_single_element(self) -> None:
        assert matrix((-7,)).determinant() == -7

    def test_triangular_short_circuit(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="exactlinalg.linear.matrix")
        upper = matrix((2, 3, 4, 5), (0, 5, 6, 7), (0, 0, 7, 8), (0, 0, 0, 1))
        assert upper.determinant() == 70
        assert "product of diagonal" in caplog.text

    def test_rule_of_sarrus(self) -> None:
        assert matrix((6, 1, 1), (4, -2, 5), (2, 8, 7)).determinant() == -306

    def test_singular_3x3(self, m_3x3: IntegerMatrix) -> None:
        assert m_3x3.determinant() == 0

    def test_cofactor_expansion_4x4(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="exactlinalg.linear.matrix")
        m = matrix((1, 0, 2, -1), (3, 0, 0, 5), (2, 1, 4, -3), (1, 0, 5, 0))
        assert m.determinant() == 30
        assert "cofactor expansion" in caplog.text

    def test_cofactor_expansion_5x5_permutation(self) -> None:
        """Перестановка строк 1 и 2 единичной матрицы: det = -1"""
        m = matrix(
            (0, 1, 0, 0, 0),
            (1, 0, 0, 0, 0),
            (0, 0, 1, 0, 0),
            (0, 0, 0, 1, 0),
            (0, 0, 0, 0, 1),
        )
        assert not m.triangular()
        assert m.determinant() == -1
        assert m.invertible()

    @pytest.mark.parametrize(
        "rows",
        [
            ((1, 2), (3, 4)),
            ((6, 1, 1), (4, -2, 5), (2, 8, 7)),
            ((1, 0, 2, -1), (3, 0, 0, 5), (2, 1, 4, -3), (1, 0, 5, 0)),
        ],
    )
    def test_determinant_of_transpose(self, rows) -> None:
        m = matrix(*rows)
        assert m.transpose().determinant() == m.determinant()

    def test_non_square(self, m_2x3: IntegerMatrix) -> None:
        with pytest.raises(MatrixNotSquareError, match="expected square matrix but actual 2 x 3"):
            m_2x3.determinant()
        with pytest.raises(MatrixNotSquareError):
            m_2x3.trace()
        assert not m_2x3.invertible()

    def test_trace(self, m_3x3: IntegerMatrix) -> None:
        assert m_3x3.trace() == 15

    def test_invertible_over_integers(self) -> None:
        assert matrix((2, 1), (1, 1)).invertible()
        assert not matrix((2, 0), (0, 2)).invertible()


# =============================================================================
# ТЕСТЫ TRANSPOSE И MINOR
# =============================================================================


class TestTransposeAndMinor:
    """Тесты transpose и minor"""

    def test_example_transpose(self, m_1234: IntegerMatrix) -> None:
        assert m_1234.transpose() == matrix((1, 3), (2, 4))

    def test_transpose_rectangular(self, m_2x3: IntegerMatrix) -> None:
        assert m_2x3.transpose() == matrix((1, 4), (2, 5), (3, 6))
        assert m_2x3.transpose().transpose() == m_2x3

    def test_transpose_distributes_over_add(self, m_1234: IntegerMatrix) -> None:
        other = matrix((9, -8), (7, 0))
        assert m_1234.add(other).transpose() == m_1234.transpose().add(other.transpose())

    @pytest.mark.parametrize(
        "row_index,column_index,expected",
        [
            (1, 1, ((5, 6), (8, 9))),
            (2, 2, ((1, 3), (7, 9))),
            (3, 3, ((1, 2), (4, 5))),
            (1, 3, ((4, 5), (7, 8))),
        ],
    )
    def test_minor(self, m_3x3: IntegerMatrix, row_index: int, column_index: int, expected) -> None:
        assert m_3x3.minor(row_index, column_index) == matrix(*expected)

    def test_minor_rectangular(self, m_2x3: IntegerMatrix) -> None:
        assert m_2x3.minor(1, 2) == matrix((4, 6))

    def test_minor_too_small(self) -> None:
        with pytest.raises(ValueError, match="expected at least 2 x 2 matrix"):
            matrix((1, 2, 3)).minor(1, 1)

    def test_minor_out_of_range(self, m_3x3: IntegerMatrix) -> None:
        with pytest.raises(ValueError, match=r"expected column_index in \[1, 3\] but actual 4"):
            m_3x3.minor(1, 4)


# =============================================================================
# ТЕСТЫ СТРУКТУРНЫХ ПРЕДИКАТОВ
# =============================================================================


class TestPredicates:
    """Тесты структурных предикатов"""

    def test_example_is_not_triangular_nor_symmetric(self, m_1234: IntegerMatrix) -> None:
        assert not m_1234.triangular()
        assert not m_1234.symmetric()

    def test_upper_and_lower(self) -> None:
        upper = matrix((1, 2), (0, 3))
        lower = matrix((1, 0), (2, 3))
        assert upper.upper_triangular() and not upper.lower_triangular()
        assert lower.lower_triangular() and not lower.upper_triangular()
        assert upper.triangular() and lower.triangular()
        assert not upper.diagonal()

    def test_diagonal_implies_both_triangular(self) -> None:
        diagonal = matrix((2, 0, 0), (0, -1, 0), (0, 0, 5))
        assert diagonal.diagonal()
        assert diagonal.upper_triangular() and diagonal.lower_triangular()
        assert not diagonal.identity()

    def test_identity(self) -> None:
        identity = identity_integer_matrix(4)
        assert identity.identity()
        assert identity.symmetric()
        assert identity.determinant() == 1
        assert identity.invertible()

    def test_symmetric(self) -> None:
        assert matrix((1, 7), (7, 2)).symmetric()

    def test_skew_symmetric(self) -> None:
        skew = matrix((0, 2, -1), (-2, 0, 4), (1, -4, 0))
        assert skew.skew_symmetric()
        assert not skew.symmetric()
        assert not matrix((1, 2), (-2, 0)).skew_symmetric()

    def test_non_square_predicates(self, m_2x3: IntegerMatrix) -> None:
        zero_rectangle = matrix((0, 0, 0), (0, 0, 0))
        for m in (m_2x3, zero_rectangle):
            assert not m.upper_triangular()
            assert not m.lower_triangular()
            assert not m.triangular()
            assert not m.diagonal()
            assert not m.identity()
            assert not m.symmetric()
            assert not m.skew_symmetric()


# =============================================================================
# ТЕСТЫ НОРМ
# =============================================================================


class TestNorms:
    """Тесты норм матрицы"""

    def test_norms(self) -> None:
        m = matrix((1, -2), (-3, 4))
        assert m.max_abs_column_sum_norm() == 6
        assert m.max_abs_row_sum_norm() == 7
        assert m.max_norm() == 4
        assert m.frobenius_norm_pow2() == 30
        assert m.frobenius_norm(scale=4) == Decimal("5.4772")

    def test_frobenius_norm_exact(self) -> None:
        assert str(matrix((3, 0), (0, 4)).frobenius_norm()) == "5.0000000000"

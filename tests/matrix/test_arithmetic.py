"""
Tests for Matrix arithmetic.

Expected values for the 2x2 scenario:
    A = [[1, 2], [3, 4]], B = [[5, 6], [7, 8]]
    A + B = [[6, 8], [10, 12]]      A - B = [[-4, -4], [-4, -4]]
    A * B = [[19, 22], [43, 50]]    A^T   = [[1, 3], [2, 4]]
    sum(A) = 10, avg(A) = 2.5,      2A    = [[2, 4], [6, 8]]
"""

from decimal import Decimal
from fractions import Fraction
import logging

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    ValidationError,
)
from pymatrix.matrix import arithmetic


# ═══════════════════════════════════════════════════════════════════════
# Concrete scenario
# ═══════════════════════════════════════════════════════════════════════


class TestScenario:
    """The 2x2 reference scenario, through the operator forms."""

    def test_add(self, a_matrix, b_matrix):
        assert (a_matrix + b_matrix).to_list() == [[6, 8], [10, 12]]

    def test_subtract(self, a_matrix, b_matrix):
        assert (a_matrix - b_matrix).to_list() == [[-4, -4], [-4, -4]]

    def test_multiply(self, a_matrix, b_matrix):
        assert (a_matrix * b_matrix).to_list() == [[19, 22], [43, 50]]

    def test_matmul_operator(self, a_matrix, b_matrix):
        assert (a_matrix @ b_matrix) == (a_matrix * b_matrix)

    def test_transpose(self, a_matrix):
        assert a_matrix.transpose().to_list() == [[1, 3], [2, 4]]

    def test_transpose_property(self, a_matrix):
        assert a_matrix.T == a_matrix.transpose()

    def test_sum(self, a_matrix):
        assert a_matrix.sum() == 10

    def test_avg(self, a_matrix):
        assert a_matrix.avg() == 2.5

    def test_scalar(self, a_matrix):
        assert a_matrix.scalar(2).to_list() == [[2, 4], [6, 8]]


class TestFunctionalForms:
    """The module-level functions agree with the operators."""

    def test_add(self, a_matrix, b_matrix):
        assert arithmetic.add(a_matrix, b_matrix) == a_matrix + b_matrix

    def test_subtract(self, a_matrix, b_matrix):
        assert arithmetic.subtract(a_matrix, b_matrix) == a_matrix - b_matrix

    def test_multiply(self, a_matrix, b_matrix):
        assert arithmetic.multiply(a_matrix, b_matrix) == a_matrix * b_matrix

    def test_scale(self, a_matrix):
        assert arithmetic.scale(a_matrix, 3) == a_matrix.scalar(3)

    def test_transpose(self, a_matrix):
        assert arithmetic.transpose(a_matrix) == a_matrix.transpose()

    def test_total_and_average(self, a_matrix):
        assert arithmetic.total(a_matrix) == 10
        assert arithmetic.average(a_matrix) == 2.5

    def test_non_matrix_operand(self, a_matrix):
        with pytest.raises(TypeError, match="b: expected Matrix, got list"):
            arithmetic.add(a_matrix, [[1, 2], [3, 4]])


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionMismatch:

    def test_add_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="add") as exc_info:
            Matrix(2, 3) + Matrix(3, 2)
        assert exc_info.value.operation == "add"
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (3, 2)

    def test_subtract_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="subtract"):
            Matrix(2, 2) - Matrix(2, 3)

    def test_multiply_inner_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="3 columns but right operand has 2 rows") as exc_info:
            Matrix(2, 3) * Matrix(2, 3)
        assert exc_info.value.operation == "multiply"

    def test_multiply_square_different_sizes(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 2) * Matrix(3, 3)

    def test_empty_vs_nonempty(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(0, 0) + Matrix(1, 1)


class TestOperatorTypes:
    """Operators defer to Python for non-Matrix operands."""

    def test_add_int(self, a_matrix):
        with pytest.raises(TypeError):
            a_matrix + 1

    def test_multiply_int_is_not_scaling(self, a_matrix):
        with pytest.raises(TypeError):
            a_matrix * 2

    def test_subtract_array(self, a_matrix):
        with pytest.raises(TypeError):
            a_matrix - [[1, 1], [1, 1]]


# ═══════════════════════════════════════════════════════════════════════
# Addition / subtraction
# ═══════════════════════════════════════════════════════════════════════


class TestAddSubtract:

    def test_operands_unchanged(self, a_matrix, b_matrix):
        a_matrix + b_matrix
        a_matrix - b_matrix
        assert a_matrix.to_list() == [[1, 2], [3, 4]]
        assert b_matrix.to_list() == [[5, 6], [7, 8]]

    def test_result_not_aliased(self, a_matrix, b_matrix):
        r = a_matrix + b_matrix
        r[0, 0] = 0
        assert a_matrix[0, 0] == 1

    def test_int_plus_float_promotes(self, a_matrix):
        r = a_matrix + Matrix.from_rows([[0.5, 0.5], [0.5, 0.5]])
        assert r.dtype == np.float64
        assert r.to_list() == [[1.5, 2.5], [3.5, 4.5]]

    def test_empty_shapes(self):
        r = Matrix(0, 3) + Matrix(0, 3)
        assert r.shape == (0, 3)

    def test_fractions(self):
        a = Matrix.from_rows([[Fraction(1, 2), Fraction(1, 3)]])
        b = Matrix.from_rows([[Fraction(1, 2), Fraction(2, 3)]])
        assert (a + b).to_list() == [[1, 1]]
        assert (a - b).to_list() == [[0, Fraction(-1, 3)]]

    def test_logged_at_debug(self, a_matrix, b_matrix, caplog):
        caplog.set_level(logging.DEBUG, logger="pymatrix")
        a_matrix + b_matrix
        assert "add (2, 2) + (2, 2)" in caplog.text


# ═══════════════════════════════════════════════════════════════════════
# Matrix product
# ═══════════════════════════════════════════════════════════════════════


class TestMultiply:
    """Full dot product over the shared dimension."""

    def test_rectangular(self):
        a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
        r = a * b
        assert r.shape == (2, 2)
        assert r.to_list() == [[58, 64], [139, 154]]

    def test_result_shape_rows_by_columns(self):
        r = Matrix(4, 2) * Matrix(2, 7)
        assert r.shape == (4, 7)

    def test_uses_every_term_of_the_inner_dimension(self):
        """3x1 times 1x3 has one term per cell; 1x3 times 3x1 has three."""
        col = Matrix.from_rows([[1], [2], [3]])
        row = Matrix.from_rows([[4, 5, 6]])
        assert (col * row).to_list() == [[4, 5, 6], [8, 10, 12], [12, 15, 18]]
        assert (row * col).to_list() == [[32]]

    def test_identity(self, a_matrix):
        eye = Matrix.from_data(np.eye(2, dtype=np.int64), 2, 2)
        assert a_matrix * eye == a_matrix
        assert eye * a_matrix == a_matrix

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((5, 4))
        y = rng.standard_normal((4, 3))
        r = Matrix.from_data(x, 5, 4) * Matrix.from_data(y, 4, 3)
        np.testing.assert_allclose(r.to_numpy(), x @ y, rtol=1e-12)

    def test_empty_inner_dimension_gives_zeros(self):
        r = Matrix(2, 0, dtype=np.int64) * Matrix(0, 3, dtype=np.int64)
        assert r.shape == (2, 3)
        assert r.to_list() == [[0, 0, 0], [0, 0, 0]]

    def test_empty_outer_dimension(self):
        r = Matrix(0, 2) * Matrix(2, 3)
        assert r.shape == (0, 3)

    def test_fractions(self):
        a = Matrix.from_rows([[Fraction(1, 2), Fraction(1, 3)]])
        b = Matrix.from_rows([[3], [6]], dtype=object)
        assert (a * b).to_list() == [[Fraction(7, 2)]]

    def test_operands_unchanged(self, a_matrix, b_matrix):
        a_matrix * b_matrix
        assert a_matrix.to_list() == [[1, 2], [3, 4]]
        assert b_matrix.to_list() == [[5, 6], [7, 8]]


# ═══════════════════════════════════════════════════════════════════════
# Scalar scaling and transpose
# ═══════════════════════════════════════════════════════════════════════


class TestScalar:

    def test_scale_by_one(self, a_matrix):
        assert a_matrix.scalar(1) == a_matrix

    def test_scale_by_zero(self, a_matrix):
        assert a_matrix.scalar(0) == Matrix(2, 2, dtype=np.int64)

    def test_negative_float(self):
        m = Matrix.from_rows([[1.0, -2.0]])
        assert m.scalar(-0.5).to_list() == [[-0.5, 1.0]]

    def test_operand_unchanged(self, a_matrix):
        a_matrix.scalar(10)
        assert a_matrix.to_list() == [[1, 2], [3, 4]]

    def test_fraction_scalar(self):
        m = Matrix.from_rows([[Fraction(1, 2), 2]], dtype=object)
        assert m.scalar(Fraction(2, 3)).to_list() == [[Fraction(1, 3), Fraction(4, 3)]]

    def test_decimal_scalar(self):
        m = Matrix.from_rows([[Decimal("1.5"), Decimal("2")]])
        assert m.scalar(Decimal("2")).to_list() == [[Decimal("3.0"), Decimal("4")]]

    def test_empty(self):
        assert Matrix(0, 4).scalar(3).shape == (0, 4)

    def test_non_numeric_scalar_rejected(self, a_matrix):
        with pytest.raises(ValidationError, match="s: expected a number"):
            a_matrix.scalar("2")

    def test_matrix_scalar_rejected(self, a_matrix):
        with pytest.raises(ValidationError, match="got Matrix"):
            a_matrix.scalar(a_matrix)


class TestTranspose:

    def test_rectangular(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t.to_list() == [[1, 4], [2, 5], [3, 6]]

    def test_element_mapping(self, rng):
        values = rng.integers(0, 100, size=(3, 5))
        m = Matrix.from_data(values, 3, 5)
        t = m.transpose()
        for i in range(t.rows):
            for j in range(t.columns):
                assert t[i, j] == m[j, i]

    def test_row_vector_not_aliased(self):
        row = Matrix.from_rows([[1, 2, 3]])
        col = row.transpose()
        col[0, 0] = 9
        assert row[0, 0] == 1

    def test_empty(self):
        assert Matrix(0, 3).transpose().shape == (3, 0)


# ═══════════════════════════════════════════════════════════════════════
# Sum and average
# ═══════════════════════════════════════════════════════════════════════


class TestSum:

    def test_empty_is_zero(self):
        assert Matrix(0, 0).sum() == 0
        assert Matrix(3, 0, dtype=np.int32).sum() == 0

    def test_keeps_dtype(self):
        m = Matrix.from_rows([[1, 2]], dtype=np.int32)
        assert m.sum().dtype == np.int32

    def test_row_major_sequential_accumulation(self, rng):
        """Bit-for-bit equal to a plain left-to-right loop."""
        values = rng.standard_normal((40, 25)) * 10.0 ** rng.integers(-8, 9, size=(40, 25))
        expected = 0.0
        for row in values.tolist():
            for v in row:
                expected += v
        m = Matrix.from_data(values, 40, 25)
        assert m.sum() == expected

    def test_order_visible_in_floats(self):
        """(1e16 + 1) + -1e16 + 1 evaluates left to right to 1.0."""
        m = Matrix.from_rows([[1e16, 1.0], [-1e16, 1.0]])
        assert m.sum() == 1.0

    def test_fractions_exact(self):
        m = Matrix.from_rows([[Fraction(1, 3), Fraction(1, 6)], [Fraction(1, 2), 0]])
        assert m.sum() == Fraction(1)


class TestAverage:

    def test_all_twos(self):
        m = Matrix.from_rows([[2, 2], [2, 2]])
        assert m.avg() == 2.0

    def test_returns_float(self, a_matrix):
        assert isinstance(a_matrix.avg(), float)

    def test_zero_by_zero(self):
        with pytest.raises(DivisionByZeroError, match="no elements"):
            Matrix(0, 0).avg()

    def test_zero_columns(self):
        with pytest.raises(ZeroDivisionError):
            Matrix(3, 0).avg()

    def test_fraction_average_in_floating_point(self):
        m = Matrix.from_rows([[Fraction(1, 3), Fraction(2, 3)]])
        assert m.avg() == pytest.approx(0.5)

    def test_complex_average(self):
        m = Matrix.from_rows([[1 + 1j, 3 - 1j]])
        assert m.avg() == 2 + 0j

    def test_complex_objects_average(self):
        m = Matrix.from_rows([[1 + 1j, 3 + 3j]], dtype=object)
        result = m.avg()
        assert isinstance(result, complex)
        assert result == 2 + 2j

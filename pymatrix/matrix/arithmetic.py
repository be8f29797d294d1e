"""
Arithmetic on Matrix values.

Every function here is pure: it validates its operands, computes a new
buffer and wraps it in a new Matrix. Operands are never written to, and
nothing is constructed before the shape checks pass.

Mixed element types follow numpy type promotion.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any
import numpy as np

from pymatrix.core.dtypes import zero_of
from pymatrix.core.exceptions import DimensionMismatchError, DivisionByZeroError
from pymatrix.core.validation import check_scalar
from pymatrix.matrix.storage import Matrix

logger = logging.getLogger(__name__)


def _require_matrix(value: Any, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise TypeError(f"{name}: expected Matrix, got {type(value).__name__}")
    return value


def _check_same_shape(a: Matrix, b: Matrix, operation: str) -> None:
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"{operation}: shapes {a.shape} and {b.shape} differ; "
            f"rows and columns must match",
            operation=operation,
            left_shape=a.shape,
            right_shape=b.shape,
        )


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Element-wise sum, r[i][j] = a[i][j] + b[i][j].

    Raises:
        DimensionMismatchError: If a and b differ in shape
    """
    _require_matrix(a, "a")
    _require_matrix(b, "b")
    _check_same_shape(a, b, "add")
    logger.debug("add %s + %s", a.shape, b.shape)
    return Matrix._adopt(np.add(a._storage, b._storage))


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Element-wise difference, r[i][j] = a[i][j] - b[i][j].

    Raises:
        DimensionMismatchError: If a and b differ in shape
    """
    _require_matrix(a, "a")
    _require_matrix(b, "b")
    _check_same_shape(a, b, "subtract")
    logger.debug("subtract %s - %s", a.shape, b.shape)
    return Matrix._adopt(np.subtract(a._storage, b._storage))


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product.

    Computes r[i][j] = sum over k < a.columns of a[i][k] * b[k][j], giving
    an (a.rows x b.columns) result. The reduction always runs over the
    full shared dimension. When that dimension is empty the result is the
    zero matrix.

    Raises:
        DimensionMismatchError: If a.columns != b.rows
    """
    _require_matrix(a, "a")
    _require_matrix(b, "b")
    if a.columns != b.rows:
        raise DimensionMismatchError(
            f"multiply: left operand has {a.columns} columns but right "
            f"operand has {b.rows} rows",
            operation="multiply",
            left_shape=a.shape,
            right_shape=b.shape,
        )
    logger.debug("multiply %s * %s", a.shape, b.shape)

    if a.columns == 0:
        dtype = np.result_type(a.dtype, b.dtype)
        return Matrix(a.rows, b.columns, dtype=dtype)

    return Matrix._adopt(np.matmul(a._storage, b._storage))


def scale(a: Matrix, s: Any) -> Matrix:
    """
    Every element multiplied by the scalar s.

    Raises:
        ValidationError: If s is not a number
    """
    _require_matrix(a, "a")
    check_scalar(s, "s")
    logger.debug("scale %s by scalar", a.shape)
    return Matrix._adopt(np.multiply(a._storage, s))


def transpose(a: Matrix) -> Matrix:
    """Reflection across the main diagonal: shape (columns, rows), r[i][j] = a[j][i]."""
    _require_matrix(a, "a")
    return Matrix._adopt(a._storage.T.copy(order='C'))


def total(a: Matrix) -> Any:
    """
    Sum of every element.

    Accumulation is strictly sequential in row-major order, starting from
    the dtype's zero value, so floating point results do not depend on
    numpy's pairwise summation.
    """
    _require_matrix(a, "a")
    buffer = a._storage
    start = np.array([zero_of(buffer.dtype)], dtype=buffer.dtype)
    terms = np.concatenate((start, buffer.ravel(order='C')))
    return np.add.accumulate(terms, dtype=buffer.dtype)[-1]


def average(a: Matrix) -> float:
    """
    Mean of every element, total(a) / (rows * columns) in floating point.

    A complex total, from a complex dtype or complex objects, gives a
    complex mean.

    Raises:
        DivisionByZeroError: If a has zero rows or zero columns
    """
    _require_matrix(a, "a")
    items = a.rows * a.columns
    if items == 0:
        raise DivisionByZeroError(
            f"average: matrix of shape {a.shape} has no elements"
        )

    s = total(a)
    if isinstance(s, numbers.Complex) and not isinstance(s, numbers.Real):
        return complex(s) / items
    return float(s) / items

"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (strings never become numbers)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
import operator
import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from pymatrix.core.protocols import Numeric


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Proposed dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        n = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e

    if n < 0:
        raise ValidationError(f"{name}: must be non-negative, got {n}")

    return n


def check_array(source: ArrayLike, name: str) -> NDArray[Any]:
    """
    Convert array-like input to a numpy array without coercing its dtype.

    Object results are allowed here (Fraction, Decimal, ...); their
    elements are checked separately by check_numeric_elements.

    Args:
        source: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric or object dtype

    Raises:
        DimensionError: If nested sequences are ragged
        ValidationError: If input has a non-numeric dtype
    """
    try:
        result = np.asarray(source)
    except ValueError as e:
        # numpy refuses inhomogeneous nesting unless dtype=object is given
        raise DimensionError(f"{name}: rows have inconsistent lengths: {e}") from e

    if result.dtype == object:
        return result

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_shape(
    array: NDArray[Any],
    rows: int,
    columns: int,
    name: str,
) -> None:
    """
    Verify array has exactly the declared (rows, columns) shape.

    Args:
        array: 2D array to check
        rows: Declared number of rows
        columns: Declared number of columns
        name: Parameter name for error messages

    Raises:
        DimensionError: If the shape differs
    """
    if array.shape != (rows, columns):
        raise DimensionError(
            f"{name}: expected shape ({rows}, {columns}), got {array.shape}"
        )


def _is_number(value: Any) -> bool:
    # Numeric alone also matches Matrix
    return isinstance(value, (numbers.Number, np.number)) and isinstance(value, Numeric)


def check_numeric_elements(array: NDArray[Any], name: str) -> None:
    """
    Verify every element of an object array is a number.

    Args:
        array: Object-dtype array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any element is not a numbers.Number (or numpy
            number) with arithmetic operators
    """
    for position, value in np.ndenumerate(array):
        if not _is_number(value):
            raise ValidationError(
                f"{name}: element at {position} is {type(value).__name__}, "
                f"expected a number"
            )


def check_scalar(value: Any, name: str) -> None:
    """
    Verify a scaling factor or element value is a number.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a numbers.Number (or numpy number)
    """
    if not _is_number(value):
        raise ValidationError(
            f"{name}: expected a number, got {type(value).__name__}"
        )


def check_lossless(array: ArrayLike, dtype: np.dtype, name: str) -> None:
    """
    Verify values survive conversion to dtype unchanged.

    Object targets store values as given and are not checked. NaN is
    preserved by any inexact target and counts as unchanged.

    Args:
        array: Values to be stored (array or scalar)
        dtype: Target element type
        name: Parameter name for error messages

    Raises:
        ValidationError: If conversion would overflow, truncate, round or
            drop an imaginary part
    """
    if dtype == object:
        return

    source = np.asarray(array)
    try:
        with warnings.catch_warnings(), np.errstate(all='ignore'):
            warnings.simplefilter('ignore')
            converted = source.astype(dtype)
            same = np.asarray(converted == source, dtype=bool)
    except (OverflowError, TypeError, ValueError) as e:
        raise ValidationError(f"{name}: cannot be stored as {dtype}: {e}") from e

    if np.issubdtype(source.dtype, np.inexact) and np.issubdtype(dtype, np.inexact):
        same |= np.isnan(source) & np.isnan(converted)

    for position, ok in np.ndenumerate(same):
        if not ok:
            where = f" at {position}" if position else ""
            raise ValidationError(
                f"{name}: value {source[position]}{where} changes when "
                f"stored as {dtype} (becomes {converted[position]})"
            )


def check_index(row: Any, column: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Validate a (row, column) position against a matrix shape.

    Negative indices are out of range; they never wrap around.

    Args:
        row: Row index
        column: Column index
        shape: (rows, columns) of the matrix

    Returns:
        (row, column) as plain ints

    Raises:
        TypeError: If an index is not an integer
        IndexOutOfRangeError: If the position lies outside the matrix
    """
    r = operator.index(row)
    c = operator.index(column)
    n_rows, n_columns = shape

    if r < 0 or r >= n_rows:
        raise IndexOutOfRangeError(
            f"row index {r} out of range for matrix with {n_rows} rows",
            row=r, column=c, shape=shape,
        )
    if c < 0 or c >= n_columns:
        raise IndexOutOfRangeError(
            f"column index {c} out of range for matrix with {n_columns} columns",
            row=r, column=c, shape=shape,
        )

    return r, c

"""
Matrix: storage and lifecycle.

A Matrix owns a single C-ordered numpy buffer of shape (rows, columns).
Every constructor copies its input and every export copies its output,
so no two Matrix instances (and no caller) ever share the buffer.

The arithmetic operators delegate to pymatrix.matrix.arithmetic.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Generic, TextIO, TypeVar
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.dtypes import is_object_dtype, resolve_dtype, zero_of
from pymatrix.core.exceptions import UninitializedError
from pymatrix.core.protocols import Numeric
from pymatrix.core.tolerances import ToleranceTier, select_tolerance
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_lossless,
    check_numeric_elements,
    check_scalar,
    check_shape,
)

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Numeric)  # Element type


class Matrix(Generic[E]):
    """
    Dense rows x columns matrix over a numeric element type.

    The element type is a numpy dtype. Numeric dtypes are stored natively;
    dtype=object holds Python numbers such as Fraction or Decimal.

    Construction:
        Matrix(rows, columns)                  zero-filled
        Matrix.from_data(source, rows, columns) copy of a rectangular buffer
        Matrix.from_rows([[1, 2], [3, 4]])     shape inferred from the rows

    Arithmetic never mutates an operand; it returns a new Matrix:
        a + b, a - b, a * b (matrix product, also a @ b),
        a.scalar(s), a.transpose(), a.sum(), a.avg()

    Examples:
        >>> a = Matrix.from_rows([[1, 2], [3, 4]])
        >>> (a * a.transpose()).to_list()
        [[5, 11], [11, 25]]
        >>> a.avg()
        2.5
    """

    __slots__ = ('_data',)

    def __init__(self, rows: int, columns: int, dtype: DTypeLike | None = None):
        """
        Allocate a zero-filled matrix.

        Args:
            rows: Number of rows (>= 0)
            columns: Number of columns (>= 0)
            dtype: Element type, default float64

        Raises:
            ValidationError: If a dimension is negative or not an integer,
                or dtype is not numeric
        """
        n_rows = check_dimension(rows, "rows")
        n_columns = check_dimension(columns, "columns")
        resolved = resolve_dtype(dtype)

        self._data: NDArray[Any] | None = np.full(
            (n_rows, n_columns), zero_of(resolved), dtype=resolved
        )
        logger.debug("allocated %dx%d matrix of %s", n_rows, n_columns, resolved)

    @classmethod
    def from_data(
        cls,
        source: ArrayLike,
        rows: int,
        columns: int,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Build a matrix holding a copy of a rectangular buffer.

        Parameters
        ----------
        source : array-like
            Nested sequences or ndarray with exactly `rows` rows of
            `columns` elements each. When rows is 0 an empty sequence is
            accepted for any column count.
        rows, columns : int
            Declared dimensions.
        dtype : dtype-like, optional
            Element type. Defaults to the type numpy infers from `source`.

        Raises
        ------
        DimensionError
            If `source` does not have shape (rows, columns).
        ValidationError
            If `source` holds non-numeric values, or values that
            would change when converted to the element type.
        """
        n_rows = check_dimension(rows, "rows")
        n_columns = check_dimension(columns, "columns")

        array = check_array(source, "source")
        if n_rows == 0 and array.ndim == 1 and array.size == 0:
            array = array.reshape(0, n_columns)
        check_2d(array, "source")
        check_shape(array, n_rows, n_columns, "source")
        if is_object_dtype(array.dtype):
            check_numeric_elements(array, "source")

        resolved = resolve_dtype(array.dtype if dtype is None else dtype)
        check_lossless(array, resolved, "source")
        result = cls(n_rows, n_columns, dtype=resolved)
        result._storage[...] = array
        return result

    @classmethod
    def from_rows(cls, rows: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a matrix from a nested sequence, inferring its shape.

        Every row must have the same length. An empty sequence gives a
        0x0 matrix.
        """
        array = check_array(rows, "rows")
        if array.ndim == 1 and array.size == 0:
            array = array.reshape(0, 0)
        check_2d(array, "rows")
        n_rows, n_columns = array.shape
        return cls.from_data(array, n_rows, n_columns, dtype=dtype)

    @classmethod
    def _adopt(cls, buffer: NDArray[Any]) -> Matrix:
        """Wrap a freshly computed buffer that nothing else references."""
        result = cls.__new__(cls)
        result._data = np.ascontiguousarray(buffer)
        return result

    # --- Storage ---

    @property
    def _storage(self) -> NDArray[Any]:
        if self._data is None:
            raise UninitializedError("Matrix has no backing storage")
        return self._data

    def copy(self) -> Matrix:
        """Independent deep copy with the same shape, dtype and contents."""
        return type(self)._adopt(self._storage.copy(order='C'))

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def assign(self, other: Matrix) -> Matrix:
        """
        Replace this matrix's dimensions, dtype and contents with a copy
        of `other`. Assigning a matrix to itself leaves it unchanged.

        Returns:
            self
        """
        if other is self:
            return self
        if not isinstance(other, Matrix):
            raise TypeError(
                f"can only assign a Matrix, got {type(other).__name__}"
            )
        replacement = other._storage.copy(order='C')
        self._data = replacement
        return self

    # --- Dimensions ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._storage.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._storage.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self.rows, self.columns

    @property
    def size(self) -> int:
        """Number of elements, rows * columns."""
        return self._storage.size

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._storage.dtype

    # --- Element access ---

    def at(self, row: int, column: int) -> E:
        """
        Element at (row, column).

        Raises:
            IndexOutOfRangeError: If row >= rows, column >= columns,
                or either index is negative
        """
        r, c = check_index(row, column, self.shape)
        return self._storage[r, c]

    def set(self, row: int, column: int, value: E) -> None:
        """
        Overwrite the element at (row, column).

        Raises:
            IndexOutOfRangeError: If the position lies outside the matrix
            ValidationError: If value is not a number, or would change when
                stored as the element type
        """
        r, c = check_index(row, column, self.shape)
        check_scalar(value, "value")
        check_lossless(value, self.dtype, "value")
        self._storage[r, c] = value

    @staticmethod
    def _split_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"matrix indices must be a (row, column) pair, got {key!r}"
            )
        return key

    def __getitem__(self, key: tuple[int, int]) -> E:
        return self.at(*self._split_key(key))

    def __setitem__(self, key: tuple[int, int], value: E) -> None:
        self.set(*self._split_key(key), value)

    # --- Export ---

    def to_list(self) -> list[list[Any]]:
        """Contents as nested Python lists (row-major)."""
        return self._storage.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Contents as a new numpy array; writing to it leaves the matrix untouched."""
        return self._storage.copy(order='C')

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._storage, other._storage)
        )

    __hash__ = None  # mutable

    def allclose(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """
        Shape-equal and element-wise close under a tolerance tier.

        Args:
            other: Matrix to compare against
            tier: Tolerances to apply. Defaults to the tier for the
                promoted element dtype (exact for integer and object dtypes).
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"can only compare to a Matrix, got {type(other).__name__}")
        if self.shape != other.shape:
            return False

        left, right = self._storage, other._storage
        if is_object_dtype(left.dtype) or is_object_dtype(right.dtype):
            if tier is None:
                return bool(np.array_equal(left, right))
            left = left.astype(np.float64)
            right = right.astype(np.float64)

        if tier is None:
            tier = select_tolerance(np.result_type(left, right))
        return bool(np.allclose(left, right, rtol=tier.rtol, atol=tier.atol))

    # --- Arithmetic (see pymatrix.matrix.arithmetic) ---

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix import arithmetic
        return arithmetic.add(self, other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix import arithmetic
        return arithmetic.subtract(self, other)

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix import arithmetic
        return arithmetic.multiply(self, other)

    __matmul__ = __mul__

    def scalar(self, s: E) -> Matrix:
        """Every element multiplied by `s`."""
        from pymatrix.matrix import arithmetic
        return arithmetic.scale(self, s)

    def transpose(self) -> Matrix:
        """Matrix reflected across its main diagonal (columns x rows)."""
        from pymatrix.matrix import arithmetic
        return arithmetic.transpose(self)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def sum(self) -> E:
        """Sum of all elements, accumulated row-major from zero."""
        from pymatrix.matrix import arithmetic
        return arithmetic.total(self)

    def avg(self) -> float:
        """
        Mean of all elements.

        Raises:
            DivisionByZeroError: If the matrix holds no elements
        """
        from pymatrix.matrix import arithmetic
        return arithmetic.average(self)

    # --- Display ---

    def __str__(self) -> str:
        # Each element followed by a space, one line per row
        return "".join(
            "".join(str(value) + " " for value in row) + "\n"
            for row in self._storage
        )

    def print(self, file: TextIO | None = None) -> None:
        """Write the grid to `file` (default stdout), one row per line."""
        out = sys.stdout if file is None else file
        out.write(str(self))

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns}, dtype={self.dtype})"

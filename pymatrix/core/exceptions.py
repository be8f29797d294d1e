"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Where a builtin exception already names the
condition (IndexError, ZeroDivisionError) the library exception also
inherits from it, so generic handlers keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (dimensions, dtypes, element values)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when source data does not have the declared shape, or when
    the rows of a nested sequence have different lengths.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for an operation.

    Raised by addition and subtraction when the shapes differ, and by the
    matrix product when the left operand's columns differ from the right
    operand's rows.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: (rows, columns) of the left operand
        right_shape: (rows, columns) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(PyMatrixError, IndexError):
    """
    Element index lies outside the matrix.

    Attributes:
        row: Requested row index
        column: Requested column index
        shape: (rows, columns) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """Average requested on a matrix that holds no elements."""
    pass


class UninitializedError(PyMatrixError):
    """
    Matrix has no backing storage.

    Every constructor establishes storage before returning, so this state
    is not reachable through the public API. The storage accessor still
    checks the invariant.
    """
    pass

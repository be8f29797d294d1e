"""
PyMatrix: a generic dense matrix value type for Python.

Matrices over any numeric numpy dtype (or Python numbers such as
Fraction via dtype=object), with element access, addition, subtraction,
matrix product, scalar scaling, transpose, sum and average.

Submodules:
    matrix: The Matrix type and its arithmetic
    core: Exceptions, validation, element types, tolerances
"""

import logging

__version__ = "0.1.0"

from pymatrix.matrix import Matrix
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    NumericalError,
    DivisionByZeroError,
    UninitializedError,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Matrix",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "DivisionByZeroError",
    "UninitializedError",
]

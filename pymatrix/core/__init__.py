"""
Core infrastructure for PyMatrix.

This module provides the shared abstractions used by the matrix package.

Key components:
    protocols: Numeric element protocol
    exceptions: Exception hierarchy
    validation: Input validators
    dtypes: Element type resolution and zero values
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.protocols import Numeric
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
from pymatrix.core.dtypes import DEFAULT_DTYPE
from pymatrix.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Protocols
    "Numeric",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "DivisionByZeroError",
    "UninitializedError",
    # Configuration
    "DEFAULT_DTYPE",
    "ToleranceTier",
    "select_tolerance",
]

"""
Element type resolution.

The element type parameter of a Matrix is a numpy dtype. Numeric dtypes
(integers, floats, complex) are stored natively; object dtype stores
arbitrary Python numbers such as Fraction or Decimal.

This module is the SINGLE SOURCE OF TRUTH for which dtypes are accepted
and what the zero value of each one is.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import DTypeLike

from pymatrix.core.exceptions import ValidationError


# Element type used when the caller does not give one
DEFAULT_DTYPE = np.dtype(np.float64)


def resolve_dtype(dtype: DTypeLike | None) -> np.dtype:
    """
    Normalize a dtype-like to a supported numpy dtype.

    Args:
        dtype: Anything np.dtype() accepts, or None for DEFAULT_DTYPE

    Returns:
        numpy.dtype

    Raises:
        ValidationError: If the dtype is unknown, boolean, or non-numeric
    """
    if dtype is None:
        return DEFAULT_DTYPE

    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e

    if resolved == object:
        return resolved

    if resolved == np.bool_ or not np.issubdtype(resolved, np.number):
        raise ValidationError(
            f"dtype: non-numeric dtype {resolved}, expected a numeric or object dtype"
        )

    return resolved


def is_object_dtype(dtype: np.dtype) -> bool:
    """True if elements are stored as Python objects."""
    return dtype == object


def zero_of(dtype: np.dtype) -> Any:
    """
    Additive identity for the given dtype.

    Object dtype uses the integer 0, which every Numeric element absorbs
    under addition (0 + Fraction(1, 2) == Fraction(1, 2)).
    """
    if is_object_dtype(dtype):
        return 0
    return dtype.type(0)

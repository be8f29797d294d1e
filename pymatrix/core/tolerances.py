"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations by element type:
- Integer and object dtypes: exact match
- FP64: machine precision
- FP32 / FP16: relaxed for single and half precision arithmetic

Used by Matrix.allclose() and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integers, Fractions: no rounding, so no tolerance
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact element-wise equality',
)

# Double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, agrees to machine precision',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, numerically equivalent',
)

# Half precision
FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision, coarse agreement',
)


def select_tolerance(dtype: np.dtype) -> ToleranceTier:
    """Select appropriate tolerance tier for an element dtype."""
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        return EXACT
    # finfo of a complex dtype describes its real component
    bits = np.finfo(dtype).bits
    if bits <= 16:
        return FP16
    if bits <= 32:
        return FP32
    return FP64

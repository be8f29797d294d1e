"""
Dense matrix module.

Public API:
    Matrix          - Dense matrix value type
    add(a, b)       - Element-wise sum (a + b)
    subtract(a, b)  - Element-wise difference (a - b)
    multiply(a, b)  - Matrix product (a * b, a @ b)
    scale(a, s)     - Scalar scaling (a.scalar(s))
    transpose(a)    - Transpose (a.transpose())
    total(a)        - Sum of all elements (a.sum())
    average(a)      - Mean of all elements (a.avg())
"""

from pymatrix.matrix.storage import Matrix
from pymatrix.matrix.arithmetic import (
    add,
    subtract,
    multiply,
    scale,
    transpose,
    total,
    average,
)

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "scale",
    "transpose",
    "total",
    "average",
]

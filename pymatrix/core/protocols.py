"""
Core protocols for PyMatrix.

These define structural interfaces that element values must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that int, float, Fraction, Decimal and numpy scalars all qualify without
registration.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Numeric(Protocol):
    """
    Minimal protocol for a matrix element.

    An element must support addition, subtraction and multiplication with
    values of its own kind. Compound addition (``+=``) falls back to
    ``__add__`` when the type does not define ``__iadd__``, so it is not
    part of the contract.

    Note:
        runtime_checkable only verifies that the methods exist, not their
        signatures. ``str`` is rejected because it has no ``__sub__``.
    """

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

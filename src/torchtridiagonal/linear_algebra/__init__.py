"""Linear algebra operations on PyTorch tensors.

Submodules
----------
decomposition
    Symmetric tridiagonal decomposition and its unpacking.

Exceptions
----------
ShapeError
    Base class for shape contract violations.
NotSquareError
    A matrix that must be square is not.
LengthMismatchError
    A vector or matrix size does not conform to the matrix size.
"""

from torchtridiagonal.linear_algebra import decomposition
from torchtridiagonal.linear_algebra._exceptions import (
    LengthMismatchError,
    NotSquareError,
    ShapeError,
)

__all__ = [
    "LengthMismatchError",
    "NotSquareError",
    "ShapeError",
    "decomposition",
]

"""Exceptions for linear algebra operations."""

from torchtridiagonal._status import Status


class ShapeError(ValueError):
    """Base exception for matrix and vector shape contract violations.

    Raised before any input or output is written. The ``status`` attribute
    holds the corresponding :class:`~torchtridiagonal.Status` code.
    """

    status = Status.BAD_LENGTH


class NotSquareError(ShapeError):
    """Raised when a matrix that must be square is not."""

    status = Status.NOT_SQUARE


class LengthMismatchError(ShapeError):
    """Raised when a vector or matrix size does not conform to the matrix size.

    This occurs when:
    - tau does not have length n - 1
    - Q is not n x n
    - the diagonal does not have length n
    - the subdiagonal does not have length n - 1
    """

    status = Status.BAD_LENGTH

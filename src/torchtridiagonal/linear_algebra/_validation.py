"""Shape, dtype and device contracts shared by the tridiagonal operations.

Every check raises before anything is written, so a failed call leaves all
of its arguments untouched.
"""

from typing import Optional

import torch
from torch import Tensor

from torchtridiagonal.linear_algebra._exceptions import (
    LengthMismatchError,
    NotSquareError,
    ShapeError,
)


def check_dtype(
    name: str,
    t: Tensor,
    dtype: Optional[torch.dtype] = None,
) -> None:
    """Require a real floating-point tensor, optionally of a given dtype."""
    if not t.is_floating_point():
        raise TypeError(
            f"{name} must be a real floating-point tensor, got {t.dtype}"
        )
    if dtype is not None and t.dtype != dtype:
        raise TypeError(f"{name} must have dtype {dtype}, got {t.dtype}")


def check_like(name: str, t: Tensor, like: Tensor) -> None:
    """Require the dtype and device of the matrix ``like``."""
    check_dtype(name, t, like.dtype)
    if t.device != like.device:
        raise ValueError(
            f"{name} must be on device {like.device}, got {t.device}"
        )


def check_square_matrix(name: str, a: Tensor, message: str) -> int:
    """Require a 2D square matrix and return its size."""
    if a.dim() != 2:
        raise ShapeError(f"{name} must be 2D, got {a.dim()}D")
    if a.shape[0] != a.shape[1]:
        raise NotSquareError(f"{message}, got shape {tuple(a.shape)}")
    check_dtype(name, a)
    return a.shape[0]


def check_vector_length(
    name: str,
    v: Tensor,
    length: int,
    message: str,
    like: Tensor,
) -> None:
    """Require a 1D vector of exactly ``length`` entries."""
    if v.dim() != 1:
        raise LengthMismatchError(f"{name} must be 1D, got {v.dim()}D")
    if v.shape[0] != length:
        raise LengthMismatchError(
            f"{message}, expected {length}, got {v.shape[0]}"
        )
    check_like(name, v, like)


def check_square_output(
    name: str,
    q: Tensor,
    size: int,
    message: str,
    like: Tensor,
) -> None:
    """Require an output matrix of shape ``(size, size)``."""
    if q.dim() != 2 or q.shape[0] != size or q.shape[1] != size:
        raise LengthMismatchError(
            f"{message}, expected {(size, size)}, got {tuple(q.shape)}"
        )
    check_like(name, q, like)

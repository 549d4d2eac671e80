from typing import NamedTuple, Optional

from torch import Tensor

from torchtridiagonal._status import Status


class SymmetricTridiagonalDecompositionResult(NamedTuple):
    """Result of the in-place reduction Q^T A Q = T.

    A holds T on its diagonal and first subdiagonal and the packed reflector
    tails below it. tau holds one reflector coefficient per column.
    """

    A: Tensor  # (n, n) - packed T and reflectors, same storage as the input
    tau: Tensor  # (n - 1,) - reflector coefficients
    info: Status


class SymmetricTridiagonalUnpackResult(NamedTuple):
    """Result of unpacking a reduced matrix into Q, diagonal and subdiagonal."""

    Q: Tensor  # (n, n) - orthogonal factor
    diagonal: Tensor  # (n,)
    subdiagonal: Tensor  # (n - 1,)
    info: Status


class TridiagonalResult(NamedTuple):
    """Diagonal and subdiagonal of a symmetric tridiagonal matrix."""

    diagonal: Tensor  # (n,)
    subdiagonal: Tensor  # (n - 1,)
    info: Status


class SymmetricTridiagonalResult(NamedTuple):
    """Result of symmetric tridiagonal decomposition A = QTQ^T.

    T is represented by its diagonal and subdiagonal. Q is None when it was
    not requested.
    """

    diagonal: Tensor  # (..., n)
    subdiagonal: Tensor  # (..., n - 1)
    Q: Optional[Tensor]  # (..., n, n)
    info: Tensor  # (...) - int, 0 indicates success

"""Symmetric tridiagonal decomposition.

Functions
---------
symmetric_tridiagonal
    Computes the decomposition A = QTQ^T where T is symmetric tridiagonal
    and Q is orthogonal. Batched and out-of-place.

symmetric_tridiagonal_decomposition_
    Reduces a symmetric matrix in place, packing T and the Householder
    reflectors that encode Q into the lower triangle.

symmetric_tridiagonal_unpack
    Rebuilds Q and extracts the diagonal and subdiagonal of T from the
    packed form.

symmetric_tridiagonal_unpack_t
    Extracts the diagonal and subdiagonal of T only.

Result Types
------------
SymmetricTridiagonalResult
    Named tuple with diagonal, subdiagonal, Q, info.

SymmetricTridiagonalDecompositionResult
    Named tuple with A, tau, info.

SymmetricTridiagonalUnpackResult
    Named tuple with Q, diagonal, subdiagonal, info.

TridiagonalResult
    Named tuple with diagonal, subdiagonal, info.
"""

from torchtridiagonal.linear_algebra.decomposition._result_types import (
    SymmetricTridiagonalDecompositionResult,
    SymmetricTridiagonalResult,
    SymmetricTridiagonalUnpackResult,
    TridiagonalResult,
)
from torchtridiagonal.linear_algebra.decomposition._symmetric_tridiagonal import (
    symmetric_tridiagonal,
)
from torchtridiagonal.linear_algebra.decomposition._symmetric_tridiagonal_decomposition import (
    symmetric_tridiagonal_decomposition_,
)
from torchtridiagonal.linear_algebra.decomposition._symmetric_tridiagonal_unpack import (
    symmetric_tridiagonal_unpack,
    symmetric_tridiagonal_unpack_t,
)

__all__ = [
    "SymmetricTridiagonalDecompositionResult",
    "SymmetricTridiagonalResult",
    "SymmetricTridiagonalUnpackResult",
    "TridiagonalResult",
    "symmetric_tridiagonal",
    "symmetric_tridiagonal_decomposition_",
    "symmetric_tridiagonal_unpack",
    "symmetric_tridiagonal_unpack_t",
]

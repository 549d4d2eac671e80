"""Symmetric tridiagonal decomposition."""

import torch
from torch import Tensor

from torchtridiagonal.linear_algebra._exceptions import (
    LengthMismatchError,
    NotSquareError,
    ShapeError,
)
from torchtridiagonal.linear_algebra._validation import check_dtype
from torchtridiagonal.linear_algebra.decomposition._result_types import (
    SymmetricTridiagonalResult,
)
from torchtridiagonal.linear_algebra.decomposition._symmetric_tridiagonal_decomposition import (
    symmetric_tridiagonal_decomposition_,
)
from torchtridiagonal.linear_algebra.decomposition._symmetric_tridiagonal_unpack import (
    symmetric_tridiagonal_unpack,
    symmetric_tridiagonal_unpack_t,
)


def symmetric_tridiagonal(
    a: Tensor,
    *,
    compute_q: bool = True,
) -> SymmetricTridiagonalResult:
    r"""
    Symmetric tridiagonal decomposition.

    Computes the decomposition :math:`A = Q T Q^T` where :math:`T` is
    symmetric tridiagonal and :math:`Q` is orthogonal.

    The tridiagonal form preserves the eigenvalues of :math:`A` and is the
    usual first stage of symmetric eigenvalue solvers.

    Parameters
    ----------
    a : Tensor
        Symmetric matrix of shape (..., n, n) with n >= 1. Must be a real
        floating-point tensor. Only the lower triangular part is used.
    compute_q : bool, optional
        Whether to form :math:`Q`. Default: True.

    Returns
    -------
    SymmetricTridiagonalResult
        A named tuple containing:

        - **diagonal** (*Tensor*) - Diagonal of :math:`T`, shape (..., n).
        - **subdiagonal** (*Tensor*) - Subdiagonal of :math:`T`, shape
          (..., n - 1).
        - **Q** (*Tensor or None*) - Orthogonal matrix of shape (..., n, n),
          or None when ``compute_q`` is False.
        - **info** (*Tensor*) - Integer tensor of shape (...). A value of 0
          indicates successful computation.

    Raises
    ------
    ShapeError
        If input is not at least 2D.
    NotSquareError
        If input is not square.
    LengthMismatchError
        If input is 0 x 0.
    TypeError
        If input is not a real floating-point tensor.

    Notes
    -----
    Each matrix in the batch is copied and reduced with
    :func:`symmetric_tridiagonal_decomposition_`, then unpacked with
    :func:`symmetric_tridiagonal_unpack` (or
    :func:`symmetric_tridiagonal_unpack_t` when ``compute_q`` is False).

    This function does not support gradients; the input is detached.

    Examples
    --------
    >>> import torch
    >>> from torchtridiagonal.linear_algebra.decomposition import (
    ...     symmetric_tridiagonal,
    ... )
    >>> a = torch.tensor(
    ...     [[4.0, 1.0, 2.0], [1.0, 3.0, 0.0], [2.0, 0.0, 5.0]],
    ...     dtype=torch.float64,
    ... )
    >>> result = symmetric_tridiagonal(a)
    >>> t = (
    ...     torch.diag(result.diagonal)
    ...     + torch.diag(result.subdiagonal, -1)
    ...     + torch.diag(result.subdiagonal, 1)
    ... )
    >>> torch.allclose(result.Q @ t @ result.Q.T, a)
    True
    """
    if a.dim() < 2:
        raise ShapeError(f"a must be at least 2D, got {a.dim()}D")
    if a.shape[-2] != a.shape[-1]:
        raise NotSquareError(f"a must be square, got shape {a.shape}")
    if a.shape[-1] == 0:
        raise LengthMismatchError("a must have at least one row")

    check_dtype("a", a)

    n = a.shape[-1]
    batch_shape = a.shape[:-2]

    work = a.detach().reshape(-1, n, n).clone()
    batch_size = work.shape[0]

    diagonal = work.new_empty(batch_size, n)
    subdiagonal = work.new_empty(batch_size, n - 1)
    tau = work.new_empty(n - 1)

    if compute_q:
        q = work.new_empty(batch_size, n, n)
    else:
        q = None

    for k in range(batch_size):
        symmetric_tridiagonal_decomposition_(work[k], tau)

        if compute_q:
            symmetric_tridiagonal_unpack(
                work[k],
                tau,
                out=(q[k], diagonal[k], subdiagonal[k]),
            )
        else:
            symmetric_tridiagonal_unpack_t(
                work[k],
                out=(diagonal[k], subdiagonal[k]),
            )

    info = torch.zeros(batch_shape, dtype=torch.int32, device=a.device)

    return SymmetricTridiagonalResult(
        diagonal=diagonal.reshape(*batch_shape, n),
        subdiagonal=subdiagonal.reshape(*batch_shape, n - 1),
        Q=q.reshape(*batch_shape, n, n) if compute_q else None,
        info=info,
    )

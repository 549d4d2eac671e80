"""Unpacking of the in-place symmetric tridiagonal decomposition."""

from typing import Optional, Tuple

import torch
from torch import Tensor

from torchtridiagonal._status import Status
from torchtridiagonal.linear_algebra._exceptions import LengthMismatchError
from torchtridiagonal.linear_algebra._householder import householder_left_
from torchtridiagonal.linear_algebra._validation import (
    check_square_matrix,
    check_square_output,
    check_vector_length,
)
from torchtridiagonal.linear_algebra.decomposition._result_types import (
    SymmetricTridiagonalUnpackResult,
    TridiagonalResult,
)


def _check_tridiagonal_out(
    n: int,
    a: Tensor,
    diagonal: Tensor,
    subdiagonal: Tensor,
) -> None:
    check_vector_length(
        "diagonal",
        diagonal,
        n,
        "size of diagonal must match size of A",
        a,
    )
    check_vector_length(
        "subdiagonal",
        subdiagonal,
        n - 1,
        "size of subdiagonal must be (matrix size - 1)",
        a,
    )


def _copy_tridiagonal(a: Tensor, diagonal: Tensor, subdiagonal: Tensor):
    diagonal.copy_(a.diagonal())
    subdiagonal.copy_(a.diagonal(-1))


def symmetric_tridiagonal_unpack(
    a: Tensor,
    tau: Tensor,
    *,
    out: Optional[Tuple[Tensor, Tensor, Tensor]] = None,
) -> SymmetricTridiagonalUnpackResult:
    r"""
    Unpack a symmetric tridiagonal decomposition.

    Rebuilds the orthogonal factor :math:`Q` from the reflectors packed in
    ``a`` by :func:`symmetric_tridiagonal_decomposition_` and extracts the
    diagonal and subdiagonal of :math:`T`, so that

    .. math::

        Q^T A_{\text{orig}} Q = T.

    Parameters
    ----------
    a : Tensor
        Packed decomposition of shape ``(n, n)``. Not modified.
    tau : Tensor
        Reflector coefficients of shape ``(n - 1,)``.
    out : tuple of Tensor, optional
        Preallocated ``(Q, diagonal, subdiagonal)`` of shapes ``(n, n)``,
        ``(n,)`` and ``(n - 1,)`` with the dtype of ``a``. Filled in place.

    Returns
    -------
    SymmetricTridiagonalUnpackResult
        A named tuple containing:

        - **Q** (*Tensor*) - Orthogonal matrix of shape ``(n, n)``.
        - **diagonal** (*Tensor*) - Diagonal of :math:`T`, shape ``(n,)``.
        - **subdiagonal** (*Tensor*) - Subdiagonal of :math:`T`, shape
          ``(n - 1,)``.
        - **info** (*Status*) - ``Status.SUCCESS``.

    Raises
    ------
    NotSquareError
        If ``a`` is not square.
    LengthMismatchError
        If ``tau`` or any tensor in ``out`` does not conform to ``a``.
        Nothing in ``out`` is written in that case.
    ValueError
        If ``tau`` or a tensor in ``out`` is on another device than ``a``.

    Notes
    -----
    :math:`Q` starts as the identity and the reflectors are applied from the
    left to its trailing submatrices in reverse order of construction,
    :math:`Q = H_0 (H_1 (\cdots (H_{n-3} I)))`. Reflector :math:`H_i` only
    acts on rows and columns ``i + 1`` onward, so row and column zero of
    :math:`Q` stay those of the identity.
    """
    n = check_square_matrix("a", a, "matrix A must be square")
    check_vector_length(
        "tau", tau, n - 1, "size of tau must be (matrix size - 1)", a
    )

    if out is None:
        q = torch.empty(n, n, dtype=a.dtype, device=a.device)
        diagonal = torch.empty(n, dtype=a.dtype, device=a.device)
        subdiagonal = torch.empty(n - 1, dtype=a.dtype, device=a.device)
    else:
        q, diagonal, subdiagonal = out

        check_square_output("Q", q, n, "size of Q must match size of A", a)
        _check_tridiagonal_out(n, a, diagonal, subdiagonal)

    q.zero_()
    q.diagonal().fill_(1.0)

    for i in reversed(range(n - 2)):
        householder_left_(
            tau[i].item(),
            a[i + 1 :, i],
            q[i + 1 :, i + 1 :],
        )

    _copy_tridiagonal(a, diagonal, subdiagonal)

    return SymmetricTridiagonalUnpackResult(
        Q=q,
        diagonal=diagonal,
        subdiagonal=subdiagonal,
        info=Status.SUCCESS,
    )


def symmetric_tridiagonal_unpack_t(
    a: Tensor,
    *,
    out: Optional[Tuple[Tensor, Tensor]] = None,
) -> TridiagonalResult:
    r"""
    Extract the tridiagonal matrix from a symmetric tridiagonal decomposition.

    Copies the diagonal and first subdiagonal of ``a`` without rebuilding
    :math:`Q`. Works on any square matrix; the result only depends on ``a``.

    Parameters
    ----------
    a : Tensor
        Packed decomposition of shape ``(n, n)``. Not modified.
    out : tuple of Tensor, optional
        Preallocated ``(diagonal, subdiagonal)`` of shapes ``(n,)`` and
        ``(n - 1,)``. Filled in place.

    Returns
    -------
    TridiagonalResult
        Named tuple with ``diagonal``, ``subdiagonal`` and ``info``.

    Raises
    ------
    NotSquareError
        If ``a`` is not square.
    LengthMismatchError
        If a tensor in ``out`` does not conform to ``a``, or ``a`` is
        0 x 0.
    ValueError
        If a tensor in ``out`` is on another device than ``a``.
    """
    n = check_square_matrix("a", a, "matrix A must be square")

    if n == 0:
        raise LengthMismatchError("matrix A must have at least one row")

    if out is None:
        diagonal = torch.empty(n, dtype=a.dtype, device=a.device)
        subdiagonal = torch.empty(n - 1, dtype=a.dtype, device=a.device)
    else:
        diagonal, subdiagonal = out

    _check_tridiagonal_out(n, a, diagonal, subdiagonal)

    _copy_tridiagonal(a, diagonal, subdiagonal)

    return TridiagonalResult(
        diagonal=diagonal,
        subdiagonal=subdiagonal,
        info=Status.SUCCESS,
    )

"""In-place symmetric tridiagonal reduction."""

import contextlib

import torch
from torch import Tensor

from torchtridiagonal._status import Status
from torchtridiagonal.linear_algebra._blas import symv_lower_, syr2_lower_
from torchtridiagonal.linear_algebra._householder import (
    householder_transform_,
)
from torchtridiagonal.linear_algebra._validation import (
    check_square_matrix,
    check_vector_length,
)
from torchtridiagonal.linear_algebra.decomposition._result_types import (
    SymmetricTridiagonalDecompositionResult,
)


@contextlib.contextmanager
def _unit_leading_entry(v: Tensor):
    """Temporarily set ``v[0] = 1``, restoring the stored value on exit."""
    stored = v[0].item()
    v[0] = 1.0
    try:
        yield v
    finally:
        v[0] = stored


def symmetric_tridiagonal_decomposition_(
    a: Tensor,
    tau: Tensor,
) -> SymmetricTridiagonalDecompositionResult:
    r"""
    Symmetric tridiagonal decomposition, in place.

    Reduces a symmetric matrix :math:`A` to tridiagonal form by an orthogonal
    similarity transform

    .. math::

        Q^T A Q = T

    where :math:`Q = H_0 H_1 \cdots H_{n-3}` is a product of Householder
    reflectors. Only the diagonal and lower triangle of ``a`` are read or
    written; the upper triangle is left untouched.

    Parameters
    ----------
    a : Tensor
        Symmetric matrix of shape ``(n, n)``, real floating-point. Overwritten
        with the packed decomposition.
    tau : Tensor
        Vector of shape ``(n - 1,)`` with the dtype of ``a``. Overwritten with
        the reflector coefficients.

    Returns
    -------
    SymmetricTridiagonalDecompositionResult
        A named tuple containing:

        - **A** (*Tensor*) - ``a``. Its diagonal and first subdiagonal hold
          :math:`T`; column ``i`` below the subdiagonal holds the tail of the
          ``i``-th reflector's direction vector (the leading one is implicit).
        - **tau** (*Tensor*) - ``tau``. ``tau[i]`` is the coefficient of the
          reflector eliminating column ``i``; ``tau[n - 2]`` is zero.
        - **info** (*Status*) - ``Status.SUCCESS``.

    Raises
    ------
    NotSquareError
        If ``a`` is not square.
    LengthMismatchError
        If ``tau`` does not have length ``n - 1``.
    ShapeError
        If ``a`` is not 2D.
    TypeError
        If ``a`` is not real floating-point or ``tau`` has another dtype.
    ValueError
        If ``tau`` is on another device than ``a``.

    Notes
    -----
    Step :math:`i` builds the reflector :math:`H_i = I - \tau_i v v^T` that
    zeroes column :math:`i` below its subdiagonal, then applies
    :math:`H_i M H_i` to the trailing submatrix :math:`M` as a symmetric
    rank-2 update:

    .. math::

        x &= \tau_i M v \\
        w &= x - \tfrac{1}{2} \tau_i (x^T v) v \\
        M &\leftarrow M - v w^T - w v^T

    which costs :math:`O(n^2)` per step and :math:`\tfrac{4}{3} n^3` flops in
    total. The vector :math:`x` is kept in the still unused tail of ``tau``.

    Steps with :math:`\tau_i = 0` (column already reduced) skip the update.
    Non-finite values are not checked and propagate into the result.

    The packed layout is the one consumed by
    :func:`symmetric_tridiagonal_unpack` and by
    :func:`torch.linalg.householder_product` applied to ``a[1:, :-1]``.

    Examples
    --------
    >>> import torch
    >>> a = torch.tensor(
    ...     [[4.0, 1.0, 2.0], [1.0, 3.0, 0.0], [2.0, 0.0, 5.0]],
    ...     dtype=torch.float64,
    ... )
    >>> tau = torch.empty(2, dtype=torch.float64)
    >>> result = symmetric_tridiagonal_decomposition_(a, tau)
    >>> result.A.diagonal()
    tensor([4.0000, 4.6000, 3.4000], dtype=torch.float64)
    """
    n = check_square_matrix(
        "a", a, "symmetric tridiagonal decomposition requires square matrix"
    )
    check_vector_length(
        "tau", tau, n - 1, "size of tau must be (matrix size - 1)", a
    )

    for i in range(n - 2):
        v = a[i + 1 :, i]

        tau_i = householder_transform_(v)

        if tau_i != 0.0:
            m = a[i + 1 :, i + 1 :]

            # scratch, overwritten by tau[i] and later steps
            x = tau[i:]

            with _unit_leading_entry(v):
                symv_lower_(tau_i, m, v, 0.0, x)

                xv = torch.dot(x, v).item()

                x.add_(v, alpha=-(tau_i / 2.0) * xv)

                syr2_lower_(-1.0, v, x, m)

        tau[i] = tau_i

    if n >= 2:
        tau[n - 2] = 0.0

    return SymmetricTridiagonalDecompositionResult(
        A=a,
        tau=tau,
        info=Status.SUCCESS,
    )

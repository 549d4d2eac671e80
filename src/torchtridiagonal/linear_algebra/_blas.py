"""Symmetric level-2 primitives that read and write only the lower triangle."""

import torch
from torch import Tensor


def symv_lower_(
    alpha: float,
    m: Tensor,
    x: Tensor,
    beta: float,
    y: Tensor,
) -> Tensor:
    r"""
    Symmetric matrix-vector product, in place.

    Computes :math:`y \leftarrow \alpha S x + \beta y` where :math:`S` is the
    symmetric matrix whose lower triangle (diagonal included) is that of
    ``m``. Entries above the diagonal of ``m`` never contribute.

    When ``beta`` is zero the previous contents of ``y`` are not read, so
    ``y`` may hold uninitialized or non-finite scratch values.

    Returns
    -------
    Tensor
        ``y``.
    """
    lower = torch.tril(m)
    strictly_lower = torch.tril(m, diagonal=-1)

    product = torch.mv(lower, x) + torch.mv(strictly_lower.mT, x)

    if beta == 0.0:
        return y.copy_(product.mul_(alpha))

    return y.mul_(beta).add_(product, alpha=alpha)


def syr2_lower_(alpha: float, x: Tensor, y: Tensor, m: Tensor) -> Tensor:
    r"""
    Symmetric rank-2 update of the lower triangle, in place.

    Computes :math:`M \leftarrow M + \alpha (x y^T + y x^T)` for the entries
    on and below the diagonal of ``m``. Entries above the diagonal are not
    written.

    Returns
    -------
    Tensor
        ``m``.
    """
    n = m.shape[0]

    rows, cols = torch.tril_indices(n, n, device=m.device)

    update = x[rows] * y[cols] + y[rows] * x[cols]

    return m.index_put_((rows, cols), update.mul_(alpha), accumulate=True)

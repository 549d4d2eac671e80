r"""Elementary (Householder) reflectors.

A reflector is stored as a scalar ``tau`` and a vector ``v`` whose leading
entry is implicitly one:

.. math::

    H = I - \tau u u^T, \qquad u = (1, v_1, \ldots, v_{m-1})^T.
"""

import math

import torch
from torch import Tensor


def householder_transform_(v: Tensor) -> float:
    r"""
    Build a reflector that zeroes the tail of ``v``, in place.

    On return ``v[0]`` holds :math:`\beta` and ``v[1:]`` holds the tail of
    the reflector's direction vector, so that :math:`H v_{\text{orig}} =
    \beta e_0` where :math:`\beta = -\operatorname{sign}(v_0) \|v\|`.

    Parameters
    ----------
    v : Tensor
        Vector of shape ``(m,)``. May be a strided view into a matrix.

    Returns
    -------
    float
        The coefficient :math:`\tau`. Zero when ``m == 1`` or the tail is
        already zero, in which case ``v`` is left unchanged.
    """
    if v.shape[0] == 1:
        return 0.0

    tail = v[1:]
    scale = tail.abs().max().item()

    if scale == 0.0:
        return 0.0

    # scaled so the squares neither underflow nor overflow
    xnorm = scale * torch.linalg.vector_norm(tail / scale).item()

    alpha = v[0].item()
    sign = 1.0 if alpha >= 0.0 else -1.0
    beta = -sign * math.hypot(alpha, xnorm)
    tau = (beta - alpha) / beta

    s = alpha - beta
    finfo = torch.finfo(v.dtype)

    if abs(s) > finfo.tiny:
        tail.mul_(1.0 / s)
    else:
        # 1 / s would overflow
        tail.mul_(finfo.eps / s)
        tail.mul_(1.0 / finfo.eps)

    v[0] = beta

    return tau


def householder_left_(tau: float, v: Tensor, m: Tensor) -> Tensor:
    r"""
    Apply the reflector ``(tau, v)`` to ``m`` from the left, in place.

    Computes :math:`M \leftarrow (I - \tau u u^T) M` with ``u[0]`` taken as
    one whatever ``v[0]`` holds, so ``v`` may be a packed column.

    Parameters
    ----------
    tau : float
        Reflector coefficient.
    v : Tensor
        Direction vector of shape ``(m,)``. Not modified.
    m : Tensor
        Matrix of shape ``(m, k)``, updated in place.

    Returns
    -------
    Tensor
        ``m``.
    """
    if tau == 0.0:
        return m

    tail = v[1:]

    # w = u^T M
    w = m[0] + torch.mv(m[1:].mT, tail)

    m[0].add_(w, alpha=-tau)
    m[1:].addr_(tail, w, alpha=-tau)

    return m

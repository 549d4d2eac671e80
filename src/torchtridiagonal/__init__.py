"""torchtridiagonal: symmetric tridiagonal reduction for PyTorch tensors."""

from . import linear_algebra
from ._status import Status, error_message

__all__ = [
    "Status",
    "error_message",
    "linear_algebra",
]

__version__ = "0.1.0"

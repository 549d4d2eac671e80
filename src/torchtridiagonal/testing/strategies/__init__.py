"""Hypothesis strategies for symmetric matrix testing."""

from ._dtypes_with_tolerances import dtypes_with_tolerances
from ._symmetric_matrices import symmetric_matrices

__all__ = [
    "dtypes_with_tolerances",
    "symmetric_matrices",
]

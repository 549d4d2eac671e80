"""Testing helpers for torchtridiagonal.

Example usage:

    import hypothesis

    from torchtridiagonal.testing.strategies import symmetric_matrices

    @hypothesis.given(a=symmetric_matrices(max_size=8))
    def test_my_property(a):
        ...
"""

from . import strategies

__all__ = ["strategies"]

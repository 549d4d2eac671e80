"""Tests for status codes and error messages."""

import pytest

from torchtridiagonal import Status, error_message
from torchtridiagonal.linear_algebra import (
    LengthMismatchError,
    NotSquareError,
    ShapeError,
)


class TestErrorMessage:
    """Tests for error_message."""

    @pytest.mark.parametrize(
        "code, message",
        [
            (Status.SUCCESS, "success"),
            (Status.FAILURE, "failure"),
            (Status.DOMAIN, "input domain error"),
            (Status.INVALID, "invalid argument supplied by user"),
            (Status.BAD_LENGTH, "matrix/vector sizes are not conformant"),
            (Status.NOT_SQUARE, "matrix not square"),
            (
                Status.UNIMPLEMENTED,
                "the requested feature is not (yet) implemented",
            ),
        ],
    )
    def test_known_codes(self, code, message):
        assert error_message(code) == message

    def test_plain_integers(self):
        """Test that plain integers map like the enum members."""
        assert error_message(20) == "matrix not square"
        assert error_message(0) == "success"

    @pytest.mark.parametrize("code", [-2, 22, 25, 1000, -1000])
    def test_unknown_code(self, code):
        assert error_message(code) == "unknown error code"

    def test_every_status_has_message(self):
        for status in Status:
            assert error_message(status) != "unknown error code"

    def test_status_values(self):
        assert Status.SUCCESS == 0
        assert Status.BAD_LENGTH == 19
        assert Status.NOT_SQUARE == 20


class TestShapeErrors:
    """Tests for the shape exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(ShapeError, ValueError)
        assert issubclass(NotSquareError, ShapeError)
        assert issubclass(LengthMismatchError, ShapeError)

    def test_status(self):
        assert NotSquareError("x").status == Status.NOT_SQUARE
        assert LengthMismatchError("x").status == Status.BAD_LENGTH
        assert error_message(NotSquareError.status) == "matrix not square"

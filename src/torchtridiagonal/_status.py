"""Status codes and their fixed error messages."""

from enum import IntEnum


class Status(IntEnum):
    """Status codes reported by torchtridiagonal operations.

    Values follow the classical numerical-library numbering so that codes can
    be exchanged with code that already uses it.
    """

    SUCCESS = 0
    FAILURE = -1
    DOMAIN = 1
    RANGE = 2
    FAULT = 3
    INVALID = 4
    FAILED = 5
    FACTOR = 6
    SANITY = 7
    NO_MEMORY = 8
    BAD_FUNCTION = 9
    RUNAWAY = 10
    MAX_ITERATIONS = 11
    ZERO_DIVISION = 12
    BAD_TOLERANCE = 13
    TOLERANCE = 14
    UNDERFLOW = 15
    OVERFLOW = 16
    LOSS = 17
    ROUND = 18
    BAD_LENGTH = 19
    NOT_SQUARE = 20
    SINGULAR = 21
    UNSUPPORTED = 23
    UNIMPLEMENTED = 24


_MESSAGES = {
    Status.SUCCESS: "success",
    Status.FAILURE: "failure",
    Status.DOMAIN: "input domain error",
    Status.RANGE: "output range error",
    Status.FAULT: "invalid pointer",
    Status.INVALID: "invalid argument supplied by user",
    Status.FAILED: "generic failure",
    Status.FACTOR: "factorization failed",
    Status.SANITY: "sanity check failed - shouldn't happen",
    Status.NO_MEMORY: "malloc failed",
    Status.BAD_FUNCTION: "problem with user-supplied function",
    Status.RUNAWAY: "iterative process is out of control",
    Status.MAX_ITERATIONS: "exceeded max number of iterations",
    Status.ZERO_DIVISION: "tried to divide by zero",
    Status.BAD_TOLERANCE: (
        "specified tolerance is invalid or theoretically unattainable"
    ),
    Status.TOLERANCE: "failed to reach the specified tolerance",
    Status.UNDERFLOW: "underflow",
    Status.OVERFLOW: "overflow",
    Status.LOSS: "loss of accuracy",
    Status.ROUND: "roundoff error",
    Status.BAD_LENGTH: "matrix/vector sizes are not conformant",
    Status.NOT_SQUARE: "matrix not square",
    Status.SINGULAR: "singularity or extremely bad function behavior detected",
    Status.UNSUPPORTED: (
        "the required feature is not supported by this hardware platform"
    ),
    Status.UNIMPLEMENTED: "the requested feature is not (yet) implemented",
}


def error_message(code: int) -> str:
    """Return the fixed message for a status code.

    Parameters
    ----------
    code : int
        A :class:`Status` member or a plain integer.

    Returns
    -------
    str
        The message for ``code``, or ``"unknown error code"`` when ``code``
        is not a known status.

    Examples
    --------
    >>> error_message(Status.NOT_SQUARE)
    'matrix not square'
    >>> error_message(1234)
    'unknown error code'
    """
    return _MESSAGES.get(code, "unknown error code")

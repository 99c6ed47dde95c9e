"""Exception types raised by the drift model and conformance harness."""

from __future__ import annotations


class PathDriftError(Exception):
    """Base class for all pathdrift errors."""


class InvalidArgument(PathDriftError, ValueError):
    """Raised for malformed fixtures, unknown path kinds or out-of-range counts."""


class TransformInvocationError(PathDriftError):
    """The transform under test raised (or returned garbage) during a read."""

    def __init__(self, fixture_id: str, read_index: int, cause: BaseException | str):
        self.fixture_id = fixture_id
        self.read_index = read_index
        self.cause = cause
        if isinstance(cause, BaseException):
            detail = f"{type(cause).__name__}: {cause}"
        else:
            detail = str(cause)
        super().__init__(f"Fixture '{fixture_id}' read {read_index}: {detail}")

"""Unit tests for the error taxonomy."""

import pytest

from solutionFinder.errors import (
    ErrorKind,
    FetchTimeoutError,
    InvalidInputError,
    InvalidRequestError,
    RemoteFailureError,
    RequestCancelledError,
    SolutionFinderError,
    TransportFailureError,
)


class TestErrorKinds:

    def test_base_error_kind_is_unknown(self):
        error = SolutionFinderError("something broke")
        assert error.kind is ErrorKind.UNKNOWN
        assert error.message == "something broke"

    @pytest.mark.parametrize(
        "error, kind",
        [
            (InvalidInputError("empty"), ErrorKind.INVALID_INPUT),
            (InvalidRequestError("bad url"), ErrorKind.INVALID_REQUEST),
            (TransportFailureError("reset"), ErrorKind.TRANSPORT_FAILURE),
            (FetchTimeoutError("https://x.io", 1.0), ErrorKind.TRANSPORT_FAILURE),
            (RemoteFailureError("https://x.io", 503), ErrorKind.REMOTE_FAILURE),
            (RequestCancelledError("stop"), ErrorKind.CANCELLED),
        ],
    )
    def test_subclass_kinds(self, error, kind):
        assert error.kind is kind
        assert isinstance(error, SolutionFinderError)

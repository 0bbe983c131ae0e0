"""Error taxonomy for the solution finder tool."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed lookup, preserved from where it was raised."""

    INVALID_INPUT = "invalid_input"
    INVALID_REQUEST = "invalid_request"
    TRANSPORT_FAILURE = "transport_failure"
    REMOTE_FAILURE = "remote_failure"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class SolutionFinderError(Exception):
    """Base exception for solution finder errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(SolutionFinderError):
    """The challenge name is missing or blank."""

    kind = ErrorKind.INVALID_INPUT


class InvalidRequestError(SolutionFinderError):
    """The fetch request could not be built (malformed URL, bad scheme)."""

    kind = ErrorKind.INVALID_REQUEST


class TransportFailureError(SolutionFinderError):
    """DNS, connection, protocol or body read failure."""

    kind = ErrorKind.TRANSPORT_FAILURE


class FetchTimeoutError(TransportFailureError):
    """The fetch did not finish within the configured bound."""

    def __init__(self, url: str, timeout: float):
        super().__init__(f"GET {url}: timed out after {timeout:g}s")
        self.url = url
        self.timeout = timeout


class RemoteFailureError(SolutionFinderError):
    """The server answered with a non-success status."""

    kind = ErrorKind.REMOTE_FAILURE

    def __init__(self, url: str, status_code: int, reason: str = "", body: str = ""):
        status = f"{status_code} {reason}".strip()
        super().__init__(f"GET {url}: status {status}: {body}")
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.body = body


class RequestCancelledError(SolutionFinderError):
    """The caller aborted the in-flight fetch."""

    kind = ErrorKind.CANCELLED


__all__ = [
    "ErrorKind",
    "SolutionFinderError",
    "InvalidInputError",
    "InvalidRequestError",
    "TransportFailureError",
    "FetchTimeoutError",
    "RemoteFailureError",
    "RequestCancelledError",
]

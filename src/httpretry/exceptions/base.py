"""
Base exception classes for retrying HTTP operations.

Each exception includes a `retryable` flag indicating whether the request
can be safely attempted again with the same parameters.
"""

from typing import Any


class HTTPRetryError(Exception):
    """Base exception for all httpretry errors."""

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.retryable = retryable
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class InvalidStatusError(HTTPRetryError):
    """Raised by a response validator when the status is worth retrying."""

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        *,
        response: Any = None,
    ):
        message = f"invalid status: {status_code} {reason}".rstrip()
        super().__init__(message, retryable=True, status_code=status_code)
        self.reason = reason
        self.response = response


class RetryExhaustedError(HTTPRetryError):
    """Raised when every attempt failed. Not retryable."""

    def __init__(self, attempts: int, last_error: BaseException):
        super().__init__(
            f"after {attempts} attempts: {last_error}",
            status_code=getattr(last_error, "status_code", None),
        )
        self.attempts = attempts
        self.last_error = last_error


class ConfigurationError(HTTPRetryError, ValueError):
    """Raised when retry or client options are invalid."""


class RequestBuildError(HTTPRetryError):
    """Raised by the request builder when one or more steps failed."""

    def __init__(self, errors: list[Exception]):
        super().__init__("\n".join(str(e) for e in errors))
        self.errors = list(errors)


class ContextError(HTTPRetryError):
    """Raised when a request's context is done. Never retried."""


class RequestCancelledError(ContextError):
    """Raised when the request's context was cancelled explicitly."""

    def __init__(self, message: str = "context canceled"):
        super().__init__(message)


class DeadlineExceededError(ContextError):
    """Raised when the request's context deadline passed."""

    def __init__(self, message: str = "context deadline exceeded"):
        super().__init__(message)

"""
httpretry - Exception Hierarchy.

Custom exceptions for retrying HTTP requests with retry-awareness.
"""

from .base import (
    HTTPRetryError,
    InvalidStatusError,
    RetryExhaustedError,
    ConfigurationError,
    RequestBuildError,
    ContextError,
    RequestCancelledError,
    DeadlineExceededError,
)

__all__ = [
    "HTTPRetryError",
    "InvalidStatusError",
    "RetryExhaustedError",
    "ConfigurationError",
    "RequestBuildError",
    "ContextError",
    "RequestCancelledError",
    "DeadlineExceededError",
]

"""
httpretry - Retrying HTTP Requests.

Bounded retries with response classification and jittered backoff on top of httpx.
"""

from .clients import RetryClient, AsyncRetryClient, Transport, AsyncTransport
from .context import Context, attach_context, get_context
from .exceptions import (
    HTTPRetryError,
    InvalidStatusError,
    RetryExhaustedError,
    ConfigurationError,
    RequestBuildError,
    ContextError,
    RequestCancelledError,
    DeadlineExceededError,
)
from .request import RequestBuilder
from .retry import (
    RetryConfig,
    calculate_backoff,
    default_wait_time,
    make_wait_time,
    no_wait,
    is_retriable_status,
    validate_response,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Clients
    "RetryClient",
    "AsyncRetryClient",
    "Transport",
    "AsyncTransport",
    # Context
    "Context",
    "attach_context",
    "get_context",
    # Exceptions
    "HTTPRetryError",
    "InvalidStatusError",
    "RetryExhaustedError",
    "ConfigurationError",
    "RequestBuildError",
    "ContextError",
    "RequestCancelledError",
    "DeadlineExceededError",
    # Requests
    "RequestBuilder",
    # Retry
    "RetryConfig",
    "calculate_backoff",
    "default_wait_time",
    "make_wait_time",
    "no_wait",
    "is_retriable_status",
    "validate_response",
]

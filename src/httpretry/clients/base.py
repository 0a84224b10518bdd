"""
Base retry client.

Defines the transport seam and the pieces of the retry loop shared by the
synchronous and asynchronous clients.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Protocol, runtime_checkable

import httpx

from ..context import Context
from ..exceptions import ConfigurationError, ContextError, HTTPRetryError
from ..retry import RetryConfig

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

# Caller-provided timeouts, kept aside since every attempt overwrites "timeout".
ORIGINAL_TIMEOUT_EXTENSION = "httpretry.timeout"

OnRetry = Callable[[int, Exception, float], None]

# Failures of the transport call itself. Everything else a transport raises
# is a bug on the caller's side and propagates untouched.
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (httpx.TransportError, OSError)


@runtime_checkable
class Transport(Protocol):
    """Anything able to send a request. `httpx.Client` qualifies."""

    def send(self, request: httpx.Request) -> httpx.Response: ...


@runtime_checkable
class AsyncTransport(Protocol):
    """Async counterpart of `Transport`. `httpx.AsyncClient` qualifies."""

    async def send(self, request: httpx.Request) -> httpx.Response: ...


class BaseRetryClient(ABC):
    """
    Abstract base class for retry clients.

    Holds the immutable retry configuration and the transport reference.
    A transport passed in by the caller is never closed by the client.
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        *,
        transport: Any = None,
        timeout: float = DEFAULT_TIMEOUT,
        on_retry: OnRetry | None = None,
    ):
        """
        Initialize the client.

        Args:
            config: Retry configuration (default: RetryConfig())
            transport: Object sending requests (default: a new httpx client)
            timeout: Transport timeout in seconds, per attempt
            on_retry: Optional callback(attempt, exception, delay) called before each wait
        """
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError(f"timeout must be a positive number, got {timeout!r}")

        self.config = config or RetryConfig()
        self.timeout = float(timeout)
        self.on_retry = on_retry
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else self._create_transport()

    @abstractmethod
    def _create_transport(self) -> Any:
        """Create the httpx client used when no transport is given."""
        ...

    @abstractmethod
    def send(self, request: httpx.Request) -> Any:
        """Send a request, retrying transient failures."""
        ...

    def build_request(self, method: str, url: str, **kwargs) -> httpx.Request:
        """Build a request, through the transport when it knows how."""
        build = getattr(self.transport, "build_request", None)
        if callable(build):
            return build(method, url, **kwargs)
        return httpx.Request(method, url, **kwargs)

    def _base_timeout(self, request: httpx.Request) -> dict:
        """The timeouts the request had before any send rewrote them."""
        if ORIGINAL_TIMEOUT_EXTENSION not in request.extensions:
            request.extensions[ORIGINAL_TIMEOUT_EXTENSION] = request.extensions.get("timeout")
        original = request.extensions[ORIGINAL_TIMEOUT_EXTENSION]
        return dict(original or httpx.Timeout(self.timeout).as_dict())

    @staticmethod
    def _apply_timeout(
        request: httpx.Request, base: dict, context: Context | None
    ) -> None:
        """Set the attempt's timeouts, clamped to the context deadline."""
        remaining = context.remaining() if context is not None else None
        if remaining is None:
            request.extensions["timeout"] = dict(base)
            return
        request.extensions["timeout"] = {
            key: remaining if value is None else min(value, remaining)
            for key, value in base.items()
        }

    @staticmethod
    def _should_retry(error: Exception) -> bool:
        if isinstance(error, ContextError):
            return False
        if isinstance(error, HTTPRetryError):
            return error.retryable
        return isinstance(error, TRANSPORT_ERRORS)

    def _notify_retry(self, attempt: int, error: Exception, delay: float) -> None:
        if self.on_retry:
            self.on_retry(attempt, error, delay)
        else:
            logger.warning(
                f"Attempt {attempt}/{self.config.max_attempts} failed: {error}, "
                f"retrying in {delay:.1f}s"
            )

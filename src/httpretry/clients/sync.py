"""
Synchronous retry client.
"""

import logging
import time

import httpx

from .base import BaseRetryClient
from ..context import Context, attach_context, get_context
from ..exceptions import RetryExhaustedError

logger = logging.getLogger(__name__)


class RetryClient(BaseRetryClient):
    """
    Blocking HTTP client with bounded, jittered retries.

    Features:
    - Retries transport failures and 408, 429 and 5xx responses
    - Quadratic backoff with jitter between attempts
    - Cancellation and deadlines through the request's `Context`
    - Pluggable transport, validator and wait-time policy
    """

    def _create_transport(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout)

    def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request, retrying transient failures.

        Args:
            request: A fully built request

        Returns:
            The first response accepted by the validator

        Raises:
            RetryExhaustedError: If every attempt failed
            ContextError: If the request's context was cancelled or expired
        """
        context = get_context(request)
        base_timeout = self._base_timeout(request)
        max_attempts = self.config.max_attempts
        last_error: Exception | None = None

        for attempt in range(1, max_attempts + 1):
            if context is not None:
                context.check()
            self._apply_timeout(request, base_timeout, context)

            try:
                response = self.transport.send(request)
                if context is not None:
                    context.check()
                self.config.validator(response)
                return response
            except Exception as e:
                if context is not None and context.done:
                    logger.debug(f"Attempt {attempt} interrupted: context done")
                    raise context.error() from e
                if not self._should_retry(e):
                    raise
                last_error = e

            if attempt == max_attempts:
                break

            delay = max(0.0, self.config.wait_time(attempt))
            self._notify_retry(attempt, last_error, delay)
            if context is not None:
                context.wait(delay)
            else:
                time.sleep(delay)

        logger.error(f"All {max_attempts} attempts failed: {last_error}")
        raise RetryExhaustedError(max_attempts, last_error) from last_error

    def request(
        self,
        method: str,
        url: str,
        *,
        context: Context | None = None,
        **kwargs,
    ) -> httpx.Response:
        """Build a request from `httpx` arguments and send it with retries."""
        request = self.build_request(method, url, **kwargs)
        if context is not None:
            attach_context(request, context)
        return self.send(request)

    def close(self) -> None:
        """Close the httpx client if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "RetryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

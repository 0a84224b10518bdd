"""
Asynchronous retry client.
"""

import asyncio
import logging

import httpx

from .base import BaseRetryClient
from ..context import Context, attach_context, get_context
from ..exceptions import RetryExhaustedError

logger = logging.getLogger(__name__)


class AsyncRetryClient(BaseRetryClient):
    """
    Async HTTP client with bounded, jittered retries.

    Same policy as `RetryClient`. Cancelling the calling task aborts the
    transport call or the wait and propagates `asyncio.CancelledError`.
    """

    def _create_transport(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout)

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request, retrying transient failures."""
        context = get_context(request)
        base_timeout = self._base_timeout(request)
        max_attempts = self.config.max_attempts
        last_error: Exception | None = None

        for attempt in range(1, max_attempts + 1):
            if context is not None:
                context.check()
            self._apply_timeout(request, base_timeout, context)

            try:
                if context is not None:
                    response = await context.race(self.transport.send(request))
                else:
                    response = await self.transport.send(request)
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
                await context.sleep(delay)
            else:
                await asyncio.sleep(delay)

        logger.error(f"All {max_attempts} attempts failed: {last_error}")
        raise RetryExhaustedError(max_attempts, last_error) from last_error

    async def request(
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
        return await self.send(request)

    async def aclose(self) -> None:
        """Close the httpx client if this client created it."""
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "AsyncRetryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

"""
Request contexts.

A `Context` carries the cancellation signal of a request: an optional
deadline and an explicit `cancel()`. The retry clients check it before every
attempt, abandon an in-flight async call and wake up from the inter-attempt
wait as soon as it is done.
"""

import asyncio
import threading
import time
from typing import Awaitable, TypeVar

import httpx

from .exceptions import ContextError, DeadlineExceededError, RequestCancelledError

CONTEXT_EXTENSION = "httpretry.context"

T = TypeVar("T")


class Context:
    """Cancellation signal shared by everything working on one request."""

    def __init__(self, timeout: float | None = None, *, deadline: float | None = None):
        """
        Create a context.

        Args:
            timeout: Seconds from now until the context expires
            deadline: Absolute `time.monotonic()` value at which it expires
        """
        if timeout is not None:
            expires = time.monotonic() + timeout
            deadline = expires if deadline is None else min(deadline, expires)
        self.deadline = deadline
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._waiters: list[tuple[asyncio.AbstractEventLoop, asyncio.Future]] = []

    @classmethod
    def background(cls) -> "Context":
        """A context that is never done unless cancelled."""
        return cls()

    def cancel(self) -> None:
        """Cancel the context, waking every pending wait."""
        with self._lock:
            self._cancelled.set()
            waiters, self._waiters = self._waiters, []
        for loop, waiter in waiters:
            loop.call_soon_threadsafe(_wake, waiter)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without one."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def done(self) -> bool:
        return self.error() is not None

    def error(self) -> ContextError | None:
        """The error describing why the context is done, if it is."""
        if self._cancelled.is_set():
            return RequestCancelledError()
        if self.deadline is not None and time.monotonic() >= self.deadline:
            return DeadlineExceededError()
        return None

    def check(self) -> None:
        """Raise the context's error if it is done."""
        err = self.error()
        if err is not None:
            raise err

    def wait(self, seconds: float) -> None:
        """
        Block for `seconds` unless the context finishes first.

        Raises:
            RequestCancelledError: If cancelled during the wait
            DeadlineExceededError: If the deadline falls within the wait
        """
        self.check()
        remaining = self.remaining()
        if remaining is not None and remaining <= seconds:
            if not self._cancelled.wait(remaining):
                raise DeadlineExceededError()
        elif not self._cancelled.wait(seconds):
            return
        raise RequestCancelledError()

    async def sleep(self, seconds: float) -> None:
        """Async counterpart of `wait`."""
        self.check()
        loop = asyncio.get_running_loop()
        waiter = loop.create_future()
        with self._lock:
            if self._cancelled.is_set():
                raise RequestCancelledError()
            self._waiters.append((loop, waiter))

        remaining = self.remaining()
        expires = remaining is not None and remaining <= seconds
        try:
            await asyncio.wait({waiter}, timeout=remaining if expires else seconds)
        finally:
            with self._lock:
                if (loop, waiter) in self._waiters:
                    self._waiters.remove((loop, waiter))
            if not waiter.done():
                waiter.cancel()

        if self._cancelled.is_set():
            raise RequestCancelledError()
        if expires:
            raise DeadlineExceededError()

    async def race(self, awaitable: Awaitable[T]) -> T:
        """
        Await `awaitable` unless the context finishes first.

        The awaitable runs as a task that is cancelled as soon as the context
        is cancelled or its deadline passes. A result produced after the
        context is done is discarded.

        Raises:
            RequestCancelledError: If cancelled before the result is used
            DeadlineExceededError: If the deadline passes first
        """
        loop = asyncio.get_running_loop()
        task = asyncio.ensure_future(awaitable)
        waiter = loop.create_future()
        with self._lock:
            err = self.error()
            if err is not None:
                task.cancel()
                raise err
            self._waiters.append((loop, waiter))

        try:
            await asyncio.wait(
                {task, waiter},
                timeout=self.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            with self._lock:
                if (loop, waiter) in self._waiters:
                    self._waiters.remove((loop, waiter))
            if not waiter.done():
                waiter.cancel()
            if not task.done():
                task.cancel()

        if task.done() and not task.cancelled():
            err = self.error()
            if err is None:
                return task.result()
            raise err from task.exception()
        raise self.error() or DeadlineExceededError()


def _wake(waiter: asyncio.Future) -> None:
    if not waiter.done():
        waiter.set_result(None)


def attach_context(request: httpx.Request, context: Context) -> httpx.Request:
    """Attach a context to a request so the retry clients observe it."""
    request.extensions[CONTEXT_EXTENSION] = context
    return request


def get_context(request: httpx.Request) -> Context | None:
    """Return the context attached to a request, if any."""
    return request.extensions.get(CONTEXT_EXTENSION)

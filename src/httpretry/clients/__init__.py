"""
httpretry - Retry Clients.

Blocking and async executors sharing one retry policy.
"""

from .base import BaseRetryClient, Transport, AsyncTransport, DEFAULT_TIMEOUT
from .sync import RetryClient
from .aio import AsyncRetryClient

__all__ = [
    "BaseRetryClient",
    "Transport",
    "AsyncTransport",
    "DEFAULT_TIMEOUT",
    "RetryClient",
    "AsyncRetryClient",
]

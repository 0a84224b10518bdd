"""
httpretry - Retry Logic.

Attempt budgeting, response classification and jittered backoff.
"""

from .config import RetryConfig, DEFAULT_ATTEMPTS
from .backoff import (
    WaitTimeFunc,
    calculate_backoff,
    default_wait_time,
    make_wait_time,
    no_wait,
)
from .classify import ResponseValidator, is_retriable_status, validate_response

__all__ = [
    "RetryConfig",
    "DEFAULT_ATTEMPTS",
    "WaitTimeFunc",
    "calculate_backoff",
    "default_wait_time",
    "make_wait_time",
    "no_wait",
    "ResponseValidator",
    "is_retriable_status",
    "validate_response",
]

"""
Response classification.

A validator accepts a response by returning and asks for another attempt by
raising `InvalidStatusError`.
"""

from typing import Any, Callable

import httpx

from ..exceptions import InvalidStatusError

ResponseValidator = Callable[[Any], None]

RETRIABLE_STATUS_CODES = frozenset({408, 429})


def is_retriable_status(status_code: int) -> bool:
    """Check if the given status code indicates a transient condition."""
    return status_code in RETRIABLE_STATUS_CODES or 500 <= status_code <= 599


def validate_response(response: httpx.Response | None) -> None:
    """
    Default validator.

    Request timeout (408), rate limiting (429) and every 5xx status are
    retried. Any other status, and a missing response, is final.

    Raises:
        InvalidStatusError: If the response should be retried
    """
    if response is None:
        return

    if is_retriable_status(response.status_code):
        raise InvalidStatusError(
            response.status_code,
            response.reason_phrase,
            response=response,
        )

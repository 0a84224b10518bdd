"""
Fluent request builder.

Errors from individual steps are collected and raised together by `build()`,
so a chain never has to be interrupted to check for failures.
"""

import json
from typing import Any, Mapping

import httpx

from ..context import Context, attach_context
from ..exceptions import RequestBuildError


class RequestBuilder:
    """Assembles an `httpx.Request` step by step."""

    def __init__(self, url: str):
        self.url = url
        self._method = "GET"
        self._content: bytes | str | None = None
        self._headers: list[tuple[str, str]] = []
        self._errors: list[Exception] = []

    def method(self, method: str) -> "RequestBuilder":
        """Set the request method (default GET)."""
        self._method = method
        return self

    def post(self) -> "RequestBuilder":
        return self.method("POST")

    def put(self) -> "RequestBuilder":
        return self.method("PUT")

    def patch(self) -> "RequestBuilder":
        return self.method("PATCH")

    def body(self, content: bytes | str) -> "RequestBuilder":
        """Set the raw request body."""
        self._content = content
        return self

    def json(self, value: Any) -> "RequestBuilder":
        """Set the body to `value` encoded as JSON, with JSON content headers."""
        try:
            encoded = json.dumps(value, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as e:
            self._errors.append(e)
            return self

        self._content = encoded.encode("utf-8")
        self._headers.append(("Content-Type", "application/json"))
        self._headers.append(("Accept", "application/json"))
        return self

    def header(self, key: str, value: str) -> "RequestBuilder":
        """Add a request header. Repeated keys are all sent."""
        self._headers.append((key, value))
        return self

    def headers(self, values: Mapping[str, str]) -> "RequestBuilder":
        """Add every header in `values`."""
        self._headers.extend(values.items())
        return self

    def build(self, context: Context | None = None) -> httpx.Request:
        """
        Build the request.

        Args:
            context: Optional context attached to the request

        Raises:
            RequestBuildError: If any step failed or the URL is invalid
        """
        if self._errors:
            raise RequestBuildError(self._errors)

        try:
            request = httpx.Request(
                self._method,
                self.url,
                headers=self._headers,
                content=self._content,
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError) as e:
            raise RequestBuildError([e]) from e

        if context is not None:
            attach_context(request, context)
        return request

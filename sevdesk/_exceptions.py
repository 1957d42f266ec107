"""Typed error hierarchy for sevDesk API failures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from ._types import JSONValue, RateLimitBody

_CODE_PREFIX = "sevdesk"

ErrorKind = Literal["generic", "rate_limit"]


class SevDeskError(Exception):
    """Base exception for all sevdesk SDK errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class AuthenticationError(SevDeskError):
    """No API key could be resolved."""


class RequestTimeoutError(SevDeskError):
    """The request did not complete within its timeout."""

    def __init__(self, message: str = "Request timed out"):
        super().__init__(message)


class ResponseEnvelopeError(SevDeskError):
    """A successful response whose body declares an ``error`` object.

    The fields of the embedded object are copied onto the exception as-is,
    so heterogeneous upstream error shapes pass through untouched.
    """

    def __init__(self, error_fields: dict[str, Any]):
        fields = dict(error_fields)
        message = fields.get("message")
        super().__init__(message if isinstance(message, str) else "")
        self.error_fields = fields
        for key, value in fields.items():
            if key in ("message", "error_fields") or not key.isidentifier():
                continue
            # never shadow Exception internals such as ``args``
            if hasattr(SevDeskError, key):
                continue
            setattr(self, key, value)


class UnknownApiError(SevDeskError):
    """Non-success response from the API.

    Carries the raw response plus enough context (status, normalized headers,
    parsed-or-raw body) for a caller to decide how to react.
    """

    code = f"{_CODE_PREFIX}/UNKNOWN_API_ERROR"
    kind: ErrorKind = "generic"

    def __init__(
        self,
        message: str = "Unknown API error",
        *,
        response: Any = None,
        status: int | None = None,
        status_text: str | None = None,
        headers: dict[str, str] | None = None,
        body: JSONValue = None,
    ):
        super().__init__(message)
        self.response = response
        self.status = status
        self.status_text = status_text
        self.headers = headers
        self.response_body = body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status={self.status})"


class RateLimitError(UnknownApiError):
    """429 with sevDesk's security-block body.

    ``retry_after`` is the number of seconds from the ``Retry-After`` header
    (``None`` when absent or unparseable). ``rate_limit_body`` holds the
    API's ``code``, ``reason``, ``recommendation`` and ``contact``.
    """

    code = f"{_CODE_PREFIX}/RATE_LIMIT_ERROR"
    kind: ErrorKind = "rate_limit"

    def __init__(
        self,
        message: str,
        *,
        retry_after: int | None,
        rate_limit_body: RateLimitBody,
        response: Any = None,
        status: int | None = None,
        status_text: str | None = None,
        headers: dict[str, str] | None = None,
        body: JSONValue = None,
    ):
        super().__init__(
            message,
            response=response,
            status=status,
            status_text=status_text,
            headers=headers,
            body=body,
        )
        self.retry_after = retry_after
        self.rate_limit_body = rate_limit_body


def is_api_error(exc: BaseException) -> bool:
    """True for any classified API failure, rate limits included."""
    return getattr(exc, "kind", None) in ("generic", "rate_limit")


def is_rate_limit_error(exc: BaseException) -> bool:
    return getattr(exc, "kind", None) == "rate_limit"

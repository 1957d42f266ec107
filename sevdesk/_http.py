"""Request executor: auth headers, timeout, body decoding and error mapping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import json as jsonlib
import logging
from typing import Any, cast

import requests
from requests.structures import CaseInsensitiveDict
from urllib3.exceptions import ConnectTimeoutError, ReadTimeoutError

from ._exceptions import RateLimitError, RequestTimeoutError, ResponseEnvelopeError, UnknownApiError
from ._transport import RequestsTransport, Transport
from ._types import JSONValue, RateLimitBody

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0  # seconds

_RATE_LIMIT_FIELDS = ("code", "reason", "recommendation", "contact")


def normalize_headers(headers: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> dict[str, str]:
    """Flatten response headers into a plain dict with lower-cased keys."""
    items = headers.items() if isinstance(headers, Mapping) else headers
    return {str(key).lower(): str(value) for key, value in items}


def is_timeout(exc: BaseException) -> bool:
    """True for a connect or read timeout, including one raised mid-body.

    ``requests`` reports a read timeout during body streaming as a
    ``ConnectionError`` wrapping urllib3's ``ReadTimeoutError``.
    """
    if isinstance(exc, requests.Timeout):
        return True
    if isinstance(exc, requests.ConnectionError) and exc.args:
        return isinstance(exc.args[0], (ReadTimeoutError, ConnectTimeoutError))
    return False


def is_rate_limit_body(body: object) -> bool:
    return isinstance(body, dict) and all(
        isinstance(body.get(field), str) for field in _RATE_LIMIT_FIELDS
    )


def parse_retry_after(value: str | None) -> int | None:
    """Parse a Retry-After header as whole seconds; no bounds are enforced."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        logger.debug("Unparseable Retry-After header: %s", value)
        return None


def _error_message(body: JSONValue, status: int) -> str:
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict) and nested.get("message") is not None:
            return str(nested["message"])
        if body.get("message") is not None:
            return str(body["message"])
    return f"Unknown API error ({status})"


def classify_error_response(
    *,
    status: int,
    status_text: str | None,
    headers: Mapping[str, Any] | Iterable[tuple[str, Any]],
    text: str,
    response: Any = None,
) -> UnknownApiError:
    """Build the typed exception for a non-success response."""
    normalized = normalize_headers(headers)

    body: JSONValue
    try:
        body = jsonlib.loads(text)
    except ValueError:
        body = text

    message = _error_message(body, status)
    context: dict[str, Any] = {
        "response": response,
        "status": status,
        "status_text": status_text,
        "headers": normalized,
        "body": body,
    }

    if status == 429 and isinstance(body, dict) and is_rate_limit_body(body):
        rate_limit_body = cast(RateLimitBody, body)
        retry_after = parse_retry_after(normalized.get("retry-after"))
        logger.warning(
            "Rate limited by sevDesk (code=%s, retry_after=%s)", rate_limit_body["code"], retry_after
        )
        return RateLimitError(
            message, retry_after=retry_after, rate_limit_body=rate_limit_body, **context
        )

    return UnknownApiError(message, **context)


class HTTPClient:
    """Executes single requests against absolute sevDesk URLs.

    Holds no per-call state, so one instance can serve any number of
    concurrent calls.
    """

    def __init__(
        self,
        api_key: str,
        *,
        transport: Transport | None = None,
        timeout: float | None = None,
    ):
        self._api_key = api_key
        self._transport = transport or RequestsTransport()
        self._timeout = timeout

    @property
    def transport(self) -> Transport:
        return self._transport

    def _merge_headers(self, headers: Mapping[str, str] | None) -> CaseInsensitiveDict:
        merged: CaseInsensitiveDict = CaseInsensitiveDict(
            {"Authorization": self._api_key, "Accept": "application/json"}
        )
        if headers:
            merged.update(headers)
        return merged

    def request(
        self,
        url: Any,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Any = None,
        files: Any = None,
        timeout: float | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Args:
            url: Absolute URL (``str`` or anything whose ``str()`` is one)
            method: HTTP method
            headers: Extra headers; override the defaults key by key
            params: Query parameters
            json: JSON-serializable request body
            data: Raw request body
            files: Multipart files
            timeout: Seconds before giving up; defaults to the client timeout

        Returns:
            The decoded body, unvalidated.

        Raises:
            RequestTimeoutError: The transport timed out
            ResponseEnvelopeError: A successful response carried an ``error`` object
            RateLimitError: 429 with sevDesk's rate-limit body
            UnknownApiError: Any other non-success or undecodable response
        """
        if timeout is None:
            timeout = self._timeout if self._timeout is not None else DEFAULT_TIMEOUT
        url = str(url)

        logger.debug("%s %s", method, url)
        try:
            response = self._transport.send(
                method,
                url,
                headers=self._merge_headers(headers),
                params=params,
                json=json,
                data=data,
                files=files,
                timeout=timeout,
            )
        except requests.RequestException as e:
            if not is_timeout(e):
                raise
            logger.debug("%s %s timed out after %ss", method, url, timeout)
            raise RequestTimeoutError() from None
        logger.debug("%s %s -> %s", method, url, response.status_code)

        body: JSONValue = None
        decode_error: ValueError | None = None
        try:
            body = response.json()
        except ValueError as e:
            decode_error = e
            logger.debug("Failed to decode response body: %s", e)

        if response.ok and isinstance(body, dict) and "error" in body:
            embedded = body["error"]
            if embedded is None:
                embedded = {}
            elif not isinstance(embedded, dict):
                embedded = {"message": str(embedded)}
            raise ResponseEnvelopeError(embedded)

        if not response.ok or decode_error is not None:
            raise classify_error_response(
                status=response.status_code,
                status_text=response.reason,
                headers=response.headers,
                text=response.text,
                response=response,
            )

        return body

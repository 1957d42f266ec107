"""Pluggable HTTP transport: the only seam between the client and the network."""

from __future__ import annotations

from collections.abc import Mapping
import logging
import threading
from typing import Any, Protocol

import requests

logger = logging.getLogger(__name__)


class TransportResponse(Protocol):
    """What the executor reads from a response. ``requests.Response`` fits as-is."""

    ok: bool
    status_code: int
    reason: str
    headers: Mapping[str, str]

    @property
    def text(self) -> str: ...

    def json(self, **kwargs: Any) -> Any: ...


class Transport(Protocol):
    """Performs exactly one HTTP exchange.

    The exchange, body included, must finish within ``timeout`` seconds or
    raise ``requests.Timeout``.
    """

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        timeout: float,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Any = None,
        files: Any = None,
    ) -> TransportResponse: ...


class RequestsTransport:
    """Default transport backed by a ``requests.Session``.

    Each exchange runs on a worker thread. The caller waits at most
    ``timeout`` seconds for the complete response, headers and body; past that
    the response is closed and ``requests.Timeout`` is raised.

    No retries are mounted: a failed exchange surfaces to the caller once.
    """

    def __init__(self, session: requests.Session | None = None):
        self._session = session or requests.Session()

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        timeout: float,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Any = None,
        files: Any = None,
    ) -> requests.Response:
        outcome: dict[str, Any] = {}
        done = threading.Event()

        def exchange() -> None:
            try:
                response = self._session.request(
                    method,
                    url,
                    headers=dict(headers),
                    params=params,
                    json=json,
                    data=data,
                    files=files,
                    timeout=timeout,
                    stream=True,
                )
                outcome["response"] = response
                # reading .content buffers the body on this thread
                response.content  # noqa: B018
            except Exception as e:
                outcome["error"] = e
            finally:
                done.set()

        worker = threading.Thread(target=exchange, name="sevdesk-request", daemon=True)
        worker.start()

        if not done.wait(timeout):
            response = outcome.get("response")
            if response is not None:
                response.close()
            logger.debug("%s %s exceeded its %ss deadline", method, url, timeout)
            raise requests.Timeout(f"No complete response within {timeout}s")

        if "error" in outcome:
            raise outcome["error"]
        return outcome["response"]

    def close(self) -> None:
        self._session.close()

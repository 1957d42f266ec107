"""Deadline tests for the requests-backed transport against a local server."""

import time

import pytest
import requests

from sevdesk import RequestTimeoutError, RequestsTransport, SevDeskClient
from tests.utils.servers import paced_server

BODY = b'{"objects": [{"id": "1", "name": "paid"}]}'


@pytest.fixture
def transport():
    session = requests.Session()
    # keep proxy settings from the environment away from 127.0.0.1
    session.trust_env = False
    transport = RequestsTransport(session)
    yield transport
    transport.close()


def _client(base_url, transport, timeout):
    return SevDeskClient(api_key="k", base_url=base_url, timeout=timeout, transport=transport)


@pytest.mark.unit
class TestRequestsTransportDeadline:
    def test_prompt_response_is_returned(self, transport):
        with paced_server(BODY) as base_url:
            client = _client(base_url, transport, timeout=2)
            assert client.tags.list() == {"objects": [{"id": "1", "name": "paid"}]}

    def test_body_stalled_after_headers(self, transport):
        with paced_server(BODY, content_length=100, stall_after=11, stall=2.0) as base_url:
            client = _client(base_url, transport, timeout=0.5)
            started = time.monotonic()
            with pytest.raises(RequestTimeoutError) as exc_info:
                client.tags.list()
            elapsed = time.monotonic() - started

        assert str(exc_info.value) == "Request timed out"
        assert elapsed < 1.5

    def test_trickled_body_is_bounded_by_total_deadline(self, transport):
        with paced_server(BODY, byte_delay=0.1) as base_url:
            client = _client(base_url, transport, timeout=0.5)
            started = time.monotonic()
            with pytest.raises(RequestTimeoutError):
                client.tags.list()
            elapsed = time.monotonic() - started

        # each byte arrives well within the socket timeout; only the total deadline stops it
        assert elapsed < 1.5

    def test_send_raises_requests_timeout(self, transport):
        with paced_server(BODY, byte_delay=0.1) as base_url:
            with pytest.raises(requests.Timeout):
                transport.send("GET", f"{base_url}api/v1/Tag", headers={}, timeout=0.3)

    def test_unreachable_host_is_not_a_timeout(self, transport):
        with paced_server(BODY) as base_url:
            port = base_url.rsplit(":", 1)[1].strip("/")
        # the server is gone, so the port refuses connections
        with pytest.raises(requests.ConnectionError) as exc_info:
            transport.send("GET", f"http://127.0.0.1:{port}/", headers={}, timeout=2)
        assert not isinstance(exc_info.value, requests.Timeout)

"""Unit tests for SevDeskClient and its configuration."""

from unittest.mock import Mock

import pytest
import requests
import responses

from sevdesk import AuthenticationError, ClientConfig, RequestsTransport, SevDeskClient
from sevdesk.urls import DEFAULT_BASE_URL
from tests.utils.mocks import FakeResponse, StubTransport


@pytest.mark.unit
class TestClientConfig:
    def test_defaults(self, api_key):
        config = ClientConfig.resolve(api_key=api_key)
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 5.0

    def test_missing_key(self):
        with pytest.raises(AuthenticationError, match="SEVDESK_API_KEY"):
            ClientConfig.resolve()

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("SEVDESK_API_KEY", "env-key")
        assert ClientConfig.resolve().api_key == "env-key"

    def test_test_token_fallback(self, monkeypatch):
        monkeypatch.setenv("TEST_SEVDESK_API_TOKEN", "token")
        assert ClientConfig.resolve().api_key == "token"

    def test_argument_beats_environment(self, monkeypatch):
        monkeypatch.setenv("SEVDESK_API_KEY", "env-key")
        monkeypatch.setenv("SEVDESK_BASE_URL", "https://env.test/")
        monkeypatch.setenv("SEVDESK_TIMEOUT", "9")
        config = ClientConfig.resolve(api_key="arg", base_url="https://arg.test/", timeout=1)
        assert (config.api_key, config.base_url, config.timeout) == ("arg", "https://arg.test/", 1)

    def test_base_url_and_timeout_from_environment(self, monkeypatch, api_key):
        monkeypatch.setenv("SEVDESK_BASE_URL", "https://env.test/")
        monkeypatch.setenv("SEVDESK_TIMEOUT", "2.5")
        config = ClientConfig.resolve(api_key=api_key)
        assert config.base_url == "https://env.test/"
        assert config.timeout == 2.5

    def test_invalid_timeout(self, monkeypatch, api_key):
        monkeypatch.setenv("SEVDESK_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="SEVDESK_TIMEOUT"):
            ClientConfig.resolve(api_key=api_key)

    def test_repr_hides_key(self, api_key):
        assert api_key not in repr(ClientConfig.resolve(api_key=api_key))


@pytest.mark.unit
class TestSevDeskClient:
    def test_initialization(self, api_key, base_url):
        client = SevDeskClient(api_key=api_key, base_url=base_url, timeout=7)
        assert client.config.timeout == 7
        assert client.urls.base_url == base_url
        assert isinstance(client._http.transport, RequestsTransport)

    def test_repr_hides_key(self, client, api_key):
        assert api_key not in repr(client)

    def test_namespaces_share_executor(self, client):
        for name in ("invoices", "credit_notes", "contacts", "tags", "documents", "tools"):
            assert getattr(client, name)._http is client._http

    def test_injected_transport(self, api_key):
        transport = StubTransport(FakeResponse(json_data={"objects": {"version": "1.0"}}))
        client = SevDeskClient(api_key=api_key, base_url="https://sevdesk.test", transport=transport)

        client.tools.get_bookkeeping_system_version()

        call = transport.last_call
        assert call["url"] == "https://sevdesk.test/api/v1/Tools/bookkeepingSystemVersion"
        assert call["headers"]["Authorization"] == api_key
        assert call["timeout"] == 5.0

    @responses.activate
    def test_raw_request(self, client, api_base):
        responses.add(responses.GET, f"{api_base}/Invoice", json={"objects": []})
        assert client.request(client.urls.api_get_invoices_url(limit=1)) == {"objects": []}

    def test_close_owned_transport(self, api_key):
        session = Mock(spec=requests.Session)
        client = SevDeskClient(api_key=api_key)
        client._http._transport = RequestsTransport(session)

        client.close()

        session.close.assert_called_once()

    def test_close_leaves_injected_transport_open(self, api_key):
        session = Mock(spec=requests.Session)
        with SevDeskClient(api_key=api_key, transport=RequestsTransport(session)):
            pass
        session.close.assert_not_called()


@pytest.mark.unit
class TestRequestsTransport:
    def test_send_delegates_to_session(self):
        session = Mock(spec=requests.Session)
        transport = RequestsTransport(session)

        transport.send("POST", "https://x.test", headers={"A": "1"}, timeout=3, json={"a": 1})

        session.request.assert_called_once_with(
            "POST",
            "https://x.test",
            headers={"A": "1"},
            params=None,
            json={"a": 1},
            data=None,
            files=None,
            timeout=3,
            stream=True,
        )

    def test_session_errors_propagate_unchanged(self):
        original = requests.ConnectionError("refused")
        session = Mock(spec=requests.Session)
        session.request.side_effect = original

        with pytest.raises(requests.ConnectionError) as exc_info:
            RequestsTransport(session).send("GET", "https://x.test", headers={}, timeout=1)
        assert exc_info.value is original

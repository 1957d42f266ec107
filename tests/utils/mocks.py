"""Stub transports and responses for sevdesk tests."""

import json
from typing import Any


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(
        self,
        status_code: int = 200,
        json_data: Any = None,
        text: str | None = None,
        headers: Any = None,
        reason: str = "",
    ):
        self.status_code = status_code
        self.ok = status_code < 400
        self.reason = reason
        self.headers = headers if headers is not None else {}
        self.text = text if text is not None else json.dumps(json_data)

    def json(self, **kwargs: Any) -> Any:
        return json.loads(self.text, **kwargs)


class StubTransport:
    """Transport that records every call and replays a canned outcome.

    ``outcome`` is either a response to return or an exception to raise.
    """

    def __init__(self, outcome: Any = None):
        self.outcome = outcome if outcome is not None else FakeResponse(json_data={"objects": []})
        self.calls: list[dict[str, Any]] = []

    def send(self, method: str, url: str, **kwargs: Any) -> Any:
        self.calls.append({"method": method, "url": url, **kwargs})
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]

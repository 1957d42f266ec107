"""Client configuration resolved from arguments and environment variables."""

from __future__ import annotations

from dataclasses import dataclass, field
import os

from ._exceptions import AuthenticationError
from ._http import DEFAULT_TIMEOUT
from .urls import DEFAULT_BASE_URL

API_KEY_ENV_VARS = ("SEVDESK_API_KEY", "TEST_SEVDESK_API_TOKEN")
BASE_URL_ENV_VAR = "SEVDESK_BASE_URL"
TIMEOUT_ENV_VAR = "SEVDESK_TIMEOUT"


def api_key_from_env() -> str | None:
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings of one client. The api key is kept out of ``repr``."""

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def resolve(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> ClientConfig:
        """Fill unset values from ``SEVDESK_*`` environment variables, then defaults.

        Raises:
            AuthenticationError: If no api key is given or found in the environment
            ValueError: If ``SEVDESK_TIMEOUT`` is not a number
        """
        api_key = api_key or api_key_from_env()
        if not api_key:
            raise AuthenticationError(
                "No API key provided. Pass api_key= or set SEVDESK_API_KEY env var."
            )

        base_url = base_url or os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL

        if timeout is None:
            raw = os.environ.get(TIMEOUT_ENV_VAR)
            try:
                timeout = float(raw) if raw else DEFAULT_TIMEOUT
            except ValueError as e:
                raise ValueError(
                    f"{TIMEOUT_ENV_VAR} must be a number of seconds, got {raw!r}"
                ) from e

        return cls(api_key=api_key, base_url=base_url, timeout=timeout)

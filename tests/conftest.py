"""
Root pytest configuration and fixtures for the sevdesk test suite.
"""

import os
from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.utils.mocks import StubTransport  # noqa: E402


@pytest.fixture
def api_key():
    """Test API key."""
    return "test-api-key-12345"


@pytest.fixture
def base_url():
    """Test base URL."""
    return "https://sevdesk.test/"


@pytest.fixture
def api_base(base_url):
    """Prefix of every v1 API URL under the test base URL."""
    return f"{base_url}api/v1"


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean sevdesk environment variables before each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("SEVDESK_") or key == "TEST_SEVDESK_API_TOKEN":
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def stub_transport():
    return StubTransport()


@pytest.fixture
def client(api_key, base_url):
    """Client wired to the real requests transport (mock it with ``responses``)."""
    from sevdesk import SevDeskClient

    return SevDeskClient(api_key=api_key, base_url=base_url)


@pytest.fixture
def rate_limit_body():
    return {
        "code": "sec_rate_limit_block",
        "contact": "security@sevdesk.de",
        "reason": "Too many requests from your account.",
        "recommendation": "Reduce the request frequency and retry later.",
    }

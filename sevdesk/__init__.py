"""
sevdesk - Python client for the sevDesk accounting API.

Invoices, credit notes, vouchers, contacts, documents and tags over sevDesk's
REST API, with typed errors for rate limits and timeouts.
"""

__version__ = "0.1.0"

from ._client import SevDeskClient
from ._exceptions import (
    AuthenticationError,
    RateLimitError,
    RequestTimeoutError,
    ResponseEnvelopeError,
    SevDeskError,
    UnknownApiError,
    is_api_error,
    is_rate_limit_error,
)
from ._transport import RequestsTransport, Transport, TransportResponse
from .config import ClientConfig
from .urls import SevDeskUrls

__all__ = [
    "AuthenticationError",
    "ClientConfig",
    "RateLimitError",
    "RequestTimeoutError",
    "RequestsTransport",
    "ResponseEnvelopeError",
    # Main client
    "SevDeskClient",
    "SevDeskError",
    "SevDeskUrls",
    "Transport",
    "TransportResponse",
    "UnknownApiError",
    "is_api_error",
    "is_rate_limit_error",
]

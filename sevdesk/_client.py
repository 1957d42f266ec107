"""sevDesk client — entry point wiring configuration, transport and resources."""

from __future__ import annotations

from typing import Any

from ._http import HTTPClient
from ._resources import (
    CommunicationWays,
    ContactAddresses,
    Contacts,
    CreditNotes,
    DocumentFolders,
    Documents,
    Invoices,
    Parts,
    PaymentMethods,
    SevUsers,
    StaticCountries,
    Tags,
    Tools,
    Unities,
    VoucherPositions,
    Vouchers,
)
from ._transport import RequestsTransport, Transport
from .config import ClientConfig
from .urls import SevDeskUrls


class SevDeskClient:
    """Client for the sevDesk REST API.

    Usage:
        client = SevDeskClient(api_key="...")
        invoices = client.invoices.list(limit=10)["objects"]
        tag = client.tags.get_by_name("paid")

    Failures surface as ``UnknownApiError`` / ``RateLimitError`` /
    ``RequestTimeoutError``; nothing is retried.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Transport | None = None,
    ):
        self.config = ClientConfig.resolve(api_key=api_key, base_url=base_url, timeout=timeout)
        self.urls = SevDeskUrls(self.config.base_url)

        self._owns_transport = transport is None
        self._http = HTTPClient(
            self.config.api_key,
            transport=transport or RequestsTransport(),
            timeout=self.config.timeout,
        )

        self.invoices = Invoices(self._http, self.urls)
        self.credit_notes = CreditNotes(self._http, self.urls)
        self.vouchers = Vouchers(self._http, self.urls)
        self.voucher_positions = VoucherPositions(self._http, self.urls)
        self.document_folders = DocumentFolders(self._http, self.urls)
        self.documents = Documents(self._http, self.urls)
        self.contacts = Contacts(self._http, self.urls)
        self.contact_addresses = ContactAddresses(self._http, self.urls)
        self.communication_ways = CommunicationWays(self._http, self.urls)
        self.unities = Unities(self._http, self.urls)
        self.payment_methods = PaymentMethods(self._http, self.urls)
        self.tags = Tags(self._http, self.urls)
        self.sev_users = SevUsers(self._http, self.urls)
        self.static_countries = StaticCountries(self._http, self.urls)
        self.parts = Parts(self._http, self.urls)
        self.tools = Tools(self._http, self.urls)

    def __repr__(self) -> str:
        return f"SevDeskClient(base_url={self.config.base_url!r})"

    def request(self, url: Any, **options: Any) -> Any:
        """Issue a raw request against any API URL; see ``HTTPClient.request``."""
        return self._http.request(url, **options)

    def close(self) -> None:
        """Close the transport if this client created it."""
        transport = self._http.transport
        if self._owns_transport and isinstance(transport, RequestsTransport):
            transport.close()

    def __enter__(self) -> SevDeskClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

"""Invoices resource — list, create, render, send and cancel invoices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, cast

from .._types import Invoice, JSONValue, ListResponse, ObjectResponse, SavedInvoice
from ..urls import collection_query, tag_query
from ._utils import _require_id, _Resource

_list = list  # preserve builtin; shadowed by .list() method


class Invoices(_Resource):
    """client.invoices — the Invoice endpoints."""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[Invoice]:
        """List invoices. Extra keyword arguments become query filters (e.g. ``status=200``)."""
        url = self._urls.api_get_invoices_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[Invoice]", self._http.request(url, method="GET"))

    def get(self, invoice_id: str | int, **query: Any) -> ObjectResponse[_list[Invoice]]:
        url = self._urls.api_get_invoice_url(invoice_id, **query)
        return cast("ObjectResponse[_list[Invoice]]", self._http.request(url, method="GET"))

    def get_next_number(self, *, invoice_type: str, use_next_number: bool) -> ObjectResponse[str]:
        """Get the next free invoice number for ``invoice_type``."""
        url = self._urls.api_get_next_invoice_number_url(
            invoice_type=invoice_type, use_next_number=use_next_number
        )
        return cast("ObjectResponse[str]", self._http.request(url, method="GET"))

    def save(self, body: dict[str, Any]) -> ObjectResponse[SavedInvoice]:
        """Create an invoice with positions via ``Invoice/Factory/saveInvoice``."""
        url = self._urls.api_save_invoice_url()
        return cast(
            "ObjectResponse[SavedInvoice]", self._http.request(url, method="POST", json=body)
        )

    def update(self, invoice: Invoice) -> ObjectResponse[Invoice]:
        url = self._urls.api_update_invoice_url(_require_id(invoice))
        return cast("ObjectResponse[Invoice]", self._http.request(url, method="PUT", json=invoice))

    def render(self, invoice_id: str | int) -> JSONValue:
        """Render the invoice PDF server-side."""
        url = self._urls.api_render_invoice_url(invoice_id)
        return cast(JSONValue, self._http.request(url, method="POST"))

    def delete(self, invoice_id: str | int) -> ObjectResponse[_list[None]]:
        url = self._urls.api_delete_invoice_url(invoice_id)
        return cast("ObjectResponse[_list[None]]", self._http.request(url, method="DELETE"))

    def cancel(self, invoice_id: str | int) -> ObjectResponse[Invoice]:
        url = self._urls.api_cancel_invoice_url(invoice_id)
        return cast("ObjectResponse[Invoice]", self._http.request(url, method="POST"))

    def mark_as_sent(
        self, invoice_id: str | int, *, send_type: str, send_draft: bool
    ) -> ObjectResponse[Invoice]:
        """Mark the invoice as sent (``send_type`` e.g. ``"VPR"``, ``"VM"``, ``"VP"``)."""
        url = self._urls.api_invoice_send_by_url(invoice_id)
        return cast(
            "ObjectResponse[Invoice]",
            self._http.request(
                url, method="PUT", json={"sendType": send_type, "sendDraft": send_draft}
            ),
        )

    def get_xml(self, invoice_id: str | int) -> ObjectResponse[str]:
        """Fetch the e-invoice XML."""
        url = self._urls.api_get_invoice_xml_url(invoice_id)
        return cast("ObjectResponse[str]", self._http.request(url, method="GET"))

    def list_with_tags(self, tag_ids: Iterable[str | int]) -> ListResponse[Invoice]:
        """List invoices carrying any of the given tags."""
        return self.list(**tag_query(tag_ids))

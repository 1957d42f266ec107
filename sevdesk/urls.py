"""URL builder for sevDesk REST endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlencode, urljoin

DEFAULT_BASE_URL = "https://my.sevdesk.de/"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def tag_query(tag_ids: Iterable[str | int]) -> dict[str, str]:
    """Query filter selecting objects carrying any of the given tags."""
    query: dict[str, str] = {}
    for index, tag_id in enumerate(tag_ids):
        query[f"tags[{index}][id]"] = str(tag_id)
        query[f"tags[{index}][objectName]"] = "Tag"
    return query


def collection_query(
    *,
    limit: int | None = None,
    offset: int | None = None,
    embed: list[str] | None = None,
    count_all: bool | None = None,
    **query: Any,
) -> dict[str, Any]:
    """Merge the common collection parameters into a query dict, omitting None values."""
    common = {"limit": limit, "offset": offset, "embed": embed, "countAll": count_all}
    return {k: v for k, v in {**common, **query}.items() if v is not None}


class SevDeskUrls:
    """Builds absolute API URLs; pure string assembly, no I/O."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        self.base_url = base_url.rstrip("/") + "/"

    def api_url(self, path: str, query: dict[str, Any] | None = None, version: int = 1) -> str:
        """Join ``path`` onto ``<base>/api/v<version>/`` and append the query.

        List values are appended once per item; ``None`` values are dropped.
        """
        url = urljoin(f"{self.base_url}api/v{version}/", path)
        pairs: list[tuple[str, str]] = []
        for key, value in (query or {}).items():
            values = value if isinstance(value, (list, tuple)) else [value]
            pairs.extend((key, _query_value(v)) for v in values if v is not None)
        if pairs:
            url = f"{url}?{urlencode(pairs)}"
        return url

    # ── Invoice ──────────────────────────────────────────────────────

    def api_get_invoices_url(self, **query: Any) -> str:
        return self.api_url("Invoice", query)

    def api_get_invoice_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"Invoice/{id}", query)

    def api_get_next_invoice_number_url(
        self, *, invoice_type: str, use_next_number: bool, **query: Any
    ) -> str:
        return self.api_url(
            "Invoice/Factory/getNextInvoiceNumber",
            {"invoiceType": invoice_type, "useNextNumber": use_next_number, **query},
        )

    def api_save_invoice_url(self, **query: Any) -> str:
        return self.api_url("Invoice/Factory/saveInvoice", query)

    def api_update_invoice_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"Invoice/{id}", query)

    def api_render_invoice_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"Invoice/{id}/render", query)

    def api_delete_invoice_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"Invoice/{id}", query)

    def api_invoice_send_by_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"Invoice/{id}/sendBy", query)

    def api_get_invoice_xml_url(self, id: str | int) -> str:
        return self.api_url(f"Invoice/{id}/getXml")

    def api_cancel_invoice_url(self, id: str | int) -> str:
        return self.api_url(f"Invoice/{id}/cancelInvoice")

    def view_invoice_url(self, id: str | int) -> str:
        """Link to the invoice in the sevDesk web app."""
        return f"{self.base_url}#/fi/edit/type/RE/id/{id}"

    # ── Credit note ──────────────────────────────────────────────────

    def api_get_credit_notes_url(self, **query: Any) -> str:
        return self.api_url("CreditNote", query)

    def api_get_credit_note_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"CreditNote/{id}", query)

    def api_get_next_credit_note_number_url(
        self, *, credit_note_type: str, use_next_number: bool, **query: Any
    ) -> str:
        return self.api_url(
            "CreditNote/Factory/getNextCreditNoteNumber",
            {"creditNoteType": credit_note_type, "useNextNumber": use_next_number, **query},
        )

    def api_save_credit_note_url(self, **query: Any) -> str:
        return self.api_url("CreditNote/Factory/saveCreditNote", query)

    def api_update_credit_note_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"CreditNote/{id}", query)

    def api_delete_credit_note_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"CreditNote/{id}", query)

    def api_render_credit_note_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"CreditNote/{id}/render", query)

    def api_get_credit_note_xml_url(self, id: str | int) -> str:
        return self.api_url(f"CreditNote/{id}/getXml")

    def api_credit_note_send_by_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"CreditNote/{id}/sendBy", query)

    # ── Voucher ──────────────────────────────────────────────────────

    def api_voucher_url(self, **query: Any) -> str:
        return self.api_url("Voucher", query)

    def api_voucher_pos_url(self, voucher_id: int | str | None = None, **query: Any) -> str:
        voucher = (
            {"voucher[id]": voucher_id, "voucher[objectName]": "Voucher"} if voucher_id else {}
        )
        return self.api_url("VoucherPos", {**voucher, **query})

    # ── Documents ────────────────────────────────────────────────────

    def api_get_document_folders_url(self, **query: Any) -> str:
        return self.api_url("DocumentFolder", query)

    def api_get_documents_url(self, **query: Any) -> str:
        return self.api_url("Document", query)

    def api_file_upload_url(self, folder: str = "null", **query: Any) -> str:
        # sevDesk addresses the root folder as the literal string "null"
        return self.api_url("Document/Factory/fileUpload", {"folder": folder, **query})

    # ── Contact ──────────────────────────────────────────────────────

    def api_get_contact_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"Contact/{id}", query)

    def api_create_contact_url(self, **query: Any) -> str:
        return self.api_url("Contact", query)

    def api_update_contact_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"Contact/{id}", query)

    def api_get_contacts_url(self, **query: Any) -> str:
        return self.api_url("Contact", query)

    # ── ContactAddress ───────────────────────────────────────────────

    def api_create_contact_address_url(self, **query: Any) -> str:
        return self.api_url("ContactAddress", query)

    def api_update_contact_address_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"ContactAddress/{id}", query)

    def api_get_contact_addresses_url(self, contact_id: str | int | None = None, **query: Any) -> str:
        if contact_id:
            return self.api_url(f"Contact/{contact_id}/getAddresses", query)
        return self.api_url("ContactAddress", query)

    # ── CommunicationWay ─────────────────────────────────────────────

    def api_create_communication_way_url(self, **query: Any) -> str:
        return self.api_url("CommunicationWay", query)

    def api_update_communication_way_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"CommunicationWay/{id}", query)

    def api_delete_communication_way_url(self, id: str | int, **query: Any) -> str:
        return self.api_url(f"CommunicationWay/{id}", query)

    def api_get_communication_ways_url(self, **query: Any) -> str:
        return self.api_url("CommunicationWay", query)

    # ── Lookups ──────────────────────────────────────────────────────

    def api_get_unities_url(self, **query: Any) -> str:
        return self.api_url("Unity", query)

    def api_get_payment_methods_url(self, **query: Any) -> str:
        return self.api_url("PaymentMethod", query)

    def api_get_sev_users_url(self, **query: Any) -> str:
        return self.api_url("SevUser", query)

    def api_get_static_countries_url(self, **query: Any) -> str:
        return self.api_url("StaticCountry", query)

    def api_get_parts_url(self, **query: Any) -> str:
        return self.api_url("Part", query)

    # ── Tag ──────────────────────────────────────────────────────────

    def api_get_tags_url(self, **query: Any) -> str:
        return self.api_url("Tag", query)

    def api_create_tag_url(self, **query: Any) -> str:
        return self.api_url("Tag/Factory/create", query)

    # ── Tools ────────────────────────────────────────────────────────

    def api_get_bookkeeping_system_version_url(self) -> str:
        return self.api_url("Tools/bookkeepingSystemVersion")

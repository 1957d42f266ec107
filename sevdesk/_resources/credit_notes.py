"""Credit notes resource."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, cast

from .._types import CreditNote, JSONValue, ListResponse, ObjectResponse, SavedCreditNote
from ..urls import collection_query, tag_query
from ._utils import _require_id, _Resource

_list = list  # preserve builtin; shadowed by .list() method


class CreditNotes(_Resource):
    """client.credit_notes — the CreditNote endpoints."""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[CreditNote]:
        url = self._urls.api_get_credit_notes_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[CreditNote]", self._http.request(url, method="GET"))

    def get(self, credit_note_id: str | int, **query: Any) -> ObjectResponse[_list[CreditNote]]:
        url = self._urls.api_get_credit_note_url(credit_note_id, **query)
        return cast("ObjectResponse[_list[CreditNote]]", self._http.request(url, method="GET"))

    def get_next_number(
        self, *, credit_note_type: str, use_next_number: bool
    ) -> ObjectResponse[str]:
        url = self._urls.api_get_next_credit_note_number_url(
            credit_note_type=credit_note_type, use_next_number=use_next_number
        )
        return cast("ObjectResponse[str]", self._http.request(url, method="GET"))

    def save(self, body: dict[str, Any]) -> ObjectResponse[SavedCreditNote]:
        url = self._urls.api_save_credit_note_url()
        return cast(
            "ObjectResponse[SavedCreditNote]", self._http.request(url, method="POST", json=body)
        )

    def update(self, credit_note: CreditNote) -> ObjectResponse[CreditNote]:
        url = self._urls.api_update_credit_note_url(_require_id(credit_note))
        return cast(
            "ObjectResponse[CreditNote]", self._http.request(url, method="PUT", json=credit_note)
        )

    def delete(self, credit_note_id: str | int) -> ObjectResponse[_list[None]]:
        url = self._urls.api_delete_credit_note_url(credit_note_id)
        return cast("ObjectResponse[_list[None]]", self._http.request(url, method="DELETE"))

    def render(self, credit_note_id: str | int) -> JSONValue:
        url = self._urls.api_render_credit_note_url(credit_note_id)
        return cast(JSONValue, self._http.request(url, method="POST"))

    def get_xml(self, credit_note_id: str | int) -> ObjectResponse[str]:
        url = self._urls.api_get_credit_note_xml_url(credit_note_id)
        return cast("ObjectResponse[str]", self._http.request(url, method="GET"))

    def mark_as_sent(
        self, credit_note_id: str | int, *, send_type: str, send_draft: bool
    ) -> ObjectResponse[CreditNote]:
        url = self._urls.api_credit_note_send_by_url(credit_note_id)
        return cast(
            "ObjectResponse[CreditNote]",
            self._http.request(
                url, method="PUT", json={"sendType": send_type, "sendDraft": send_draft}
            ),
        )

    def list_with_tags(self, tag_ids: Iterable[str | int]) -> ListResponse[CreditNote]:
        return self.list(**tag_query(tag_ids))

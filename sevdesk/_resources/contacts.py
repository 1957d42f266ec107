"""Contacts, their addresses and communication ways."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, cast

from .._types import CommunicationWay, Contact, ContactAddress, ListResponse, ObjectResponse
from ..urls import collection_query, tag_query
from ._utils import _require_id, _Resource

_list = list  # preserve builtin; shadowed by .list() method


class Contacts(_Resource):
    """client.contacts"""

    def get(self, contact_id: str | int, **query: Any) -> ObjectResponse[_list[Contact]]:
        url = self._urls.api_get_contact_url(contact_id, **query)
        return cast("ObjectResponse[_list[Contact]]", self._http.request(url, method="GET"))

    def create(self, contact: Contact) -> ObjectResponse[Contact]:
        url = self._urls.api_create_contact_url()
        return cast("ObjectResponse[Contact]", self._http.request(url, method="POST", json=contact))

    def update(self, contact: Contact) -> ObjectResponse[Contact]:
        url = self._urls.api_update_contact_url(_require_id(contact))
        return cast("ObjectResponse[Contact]", self._http.request(url, method="PUT", json=contact))

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[Contact]:
        url = self._urls.api_get_contacts_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[Contact]", self._http.request(url, method="GET"))

    def list_with_tags(self, tag_ids: Iterable[str | int]) -> ListResponse[Contact]:
        return self.list(**tag_query(tag_ids))


class ContactAddresses(_Resource):
    """client.contact_addresses"""

    def create(self, address: ContactAddress) -> ObjectResponse[ContactAddress]:
        url = self._urls.api_create_contact_address_url()
        return cast(
            "ObjectResponse[ContactAddress]", self._http.request(url, method="POST", json=address)
        )

    def update(self, address: ContactAddress) -> ObjectResponse[ContactAddress]:
        url = self._urls.api_update_contact_address_url(_require_id(address))
        return cast(
            "ObjectResponse[ContactAddress]", self._http.request(url, method="PUT", json=address)
        )

    def list(
        self,
        *,
        contact_id: str | int | None = None,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[ContactAddress]:
        """List addresses; with ``contact_id`` only that contact's addresses."""
        url = self._urls.api_get_contact_addresses_url(
            contact_id,
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query),
        )
        return cast("ListResponse[ContactAddress]", self._http.request(url, method="GET"))


class CommunicationWays(_Resource):
    """client.communication_ways — phone numbers, emails and websites of contacts."""

    def create(self, communication_way: CommunicationWay) -> ObjectResponse[CommunicationWay]:
        url = self._urls.api_create_communication_way_url()
        return cast(
            "ObjectResponse[CommunicationWay]",
            self._http.request(url, method="POST", json=communication_way),
        )

    def update(self, communication_way: CommunicationWay) -> ObjectResponse[CommunicationWay]:
        url = self._urls.api_update_communication_way_url(_require_id(communication_way))
        return cast(
            "ObjectResponse[CommunicationWay]",
            self._http.request(url, method="PUT", json=communication_way),
        )

    def delete(self, communication_way_id: str | int) -> ObjectResponse[_list[None]]:
        url = self._urls.api_delete_communication_way_url(communication_way_id)
        return cast("ObjectResponse[_list[None]]", self._http.request(url, method="DELETE"))

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[CommunicationWay]:
        url = self._urls.api_get_communication_ways_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[CommunicationWay]", self._http.request(url, method="GET"))

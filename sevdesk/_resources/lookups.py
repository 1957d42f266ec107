"""Read-only reference collections: units, payment methods, users, countries, parts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, cast

from .._types import ListResponse, Part, PaymentMethod, SevUser, StaticCountry, Unity
from ..urls import collection_query
from ._utils import _Resource


class Unities(_Resource):
    """client.unities"""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[Unity]:
        url = self._urls.api_get_unities_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[Unity]", self._http.request(url, method="GET"))


class PaymentMethods(_Resource):
    """client.payment_methods"""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[PaymentMethod]:
        url = self._urls.api_get_payment_methods_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[PaymentMethod]", self._http.request(url, method="GET"))


class SevUsers(_Resource):
    """client.sev_users — users of the sevDesk account."""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[SevUser]:
        url = self._urls.api_get_sev_users_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[SevUser]", self._http.request(url, method="GET"))


class StaticCountries(_Resource):
    """client.static_countries"""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[StaticCountry]:
        url = self._urls.api_get_static_countries_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[StaticCountry]", self._http.request(url, method="GET"))


class Parts(_Resource):
    """client.parts — products and services in the inventory."""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[Part]:
        url = self._urls.api_get_parts_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[Part]", self._http.request(url, method="GET"))

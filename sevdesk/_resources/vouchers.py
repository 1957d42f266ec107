"""Vouchers and voucher positions (read-only)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, cast

from .._types import ListResponse, Voucher, VoucherPos
from ..urls import collection_query
from ._utils import _Resource


class Vouchers(_Resource):
    """client.vouchers"""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[Voucher]:
        url = self._urls.api_voucher_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[Voucher]", self._http.request(url, method="GET"))


class VoucherPositions(_Resource):
    """client.voucher_positions"""

    def list(
        self,
        *,
        voucher_id: int | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[VoucherPos]:
        """List voucher positions, optionally only those of ``voucher_id``."""
        url = self._urls.api_voucher_pos_url(
            voucher_id,
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query),
        )
        return cast("ListResponse[VoucherPos]", self._http.request(url, method="GET"))

"""Tags resource — list, look up by name and attach tags."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, cast

from .._types import ListResponse, ObjectRef, ObjectResponse, Tag, TagRelation
from ..urls import collection_query
from ._utils import _Resource


class Tags(_Resource):
    """client.tags"""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[Tag]:
        url = self._urls.api_get_tags_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[Tag]", self._http.request(url, method="GET"))

    def get_by_name(self, name: str) -> Tag | None:
        """Return the tag named exactly ``name``, or None.

        The API only offers a prefix search, so the exact match is picked
        client-side.
        """
        result = self.list(nameStartsWith=name)
        return next((tag for tag in result["objects"] if tag.get("name") == name), None)

    def create(self, name: str, obj: ObjectRef) -> ObjectResponse[TagRelation]:
        """Tag ``obj`` (e.g. ``{"id": 1, "objectName": "Invoice"}``), creating the tag if needed."""
        url = self._urls.api_create_tag_url()
        return cast(
            "ObjectResponse[TagRelation]",
            self._http.request(url, method="POST", json={"name": name, "object": obj}),
        )

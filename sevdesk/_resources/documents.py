"""Documents resource — browse folders, list and upload documents."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, cast

from .._types import Document, DocumentFolder, ListResponse, ObjectResponse
from ..urls import collection_query
from ._utils import _Resource

_list = list  # preserve builtin; shadowed by .list() method


class DocumentFolders(_Resource):
    """client.document_folders"""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[DocumentFolder]:
        url = self._urls.api_get_document_folders_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[DocumentFolder]", self._http.request(url, method="GET"))


class Documents(_Resource):
    """client.documents"""

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        embed: Sequence[str] | None = None,
        count_all: bool | None = None,
        **query: Any,
    ) -> ListResponse[Document]:
        url = self._urls.api_get_documents_url(
            **collection_query(limit=limit, offset=offset, embed=embed, count_all=count_all, **query)
        )
        return cast("ListResponse[Document]", self._http.request(url, method="GET"))

    def add(
        self, file: Any, *, folder: str = "null", **query: Any
    ) -> ObjectResponse[_list[Document]]:
        """Upload a file, creating a document.

        Args:
            file: Anything ``requests`` accepts as a multipart file: an open
                binary file, bytes, or a ``(filename, fileobj, content_type)`` tuple
            folder: Target folder id; ``"null"`` is the root folder
            **query: Extra query parameters, e.g. ``object`` to attach the document

        Returns:
            The created document
        """
        url = self._urls.api_file_upload_url(folder, **query)
        return cast(
            "ObjectResponse[_list[Document]]",
            self._http.request(url, method="POST", files={"files": file}),
        )

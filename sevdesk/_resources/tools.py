"""Tools resource."""

from __future__ import annotations

from typing import cast

from .._types import BookkeepingSystemVersion, ObjectResponse
from ._utils import _Resource


class Tools(_Resource):
    """client.tools"""

    def get_bookkeeping_system_version(self) -> ObjectResponse[BookkeepingSystemVersion]:
        """Which bookkeeping system version (``"1.0"`` or ``"2.0"``) the account runs on."""
        url = self._urls.api_get_bookkeeping_system_version_url()
        return cast(
            "ObjectResponse[BookkeepingSystemVersion]", self._http.request(url, method="GET")
        )

"""Shared helpers for resource modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .._http import HTTPClient
    from ..urls import SevDeskUrls


class _Resource:
    def __init__(self, http: HTTPClient, urls: SevDeskUrls):
        self._http = http
        self._urls = urls


def _require_id(model: Mapping[str, Any]) -> Any:
    """Return the model's id, refusing to build an update URL without one."""
    model_id = model.get("id")
    if not model_id:
        raise ValueError("id is required")
    return model_id

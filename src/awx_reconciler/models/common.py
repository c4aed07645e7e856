"""Common response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ListResponse(BaseModel):
    """One page of an AWX list endpoint.

    Format: ``{"count": N, "next": "/api/v2/...?page=2", "previous": null, "results": [...]}``
    """

    results: list[dict[str, Any]]
    count: int | None = None
    next: str | None = None
    previous: str | None = None


class CreatedRecord(BaseModel):
    """The part of a create or launch response every kind must carry."""

    model_config = ConfigDict(strict=True)

    id: float

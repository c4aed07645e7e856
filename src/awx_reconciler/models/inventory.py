"""Inventory and host models."""

from __future__ import annotations

from pydantic import BaseModel


class InventoryRecord(BaseModel):
    """An inventory as returned by ``/inventories/{id}/``."""

    id: float | None = None
    name: str | None = None
    description: str | None = None
    organization: float | None = None
    kind: str | None = None
    host_filter: str | None = None
    variables: str | None = None
    prevent_instance_group_fallback: bool | None = None


class HostRecord(BaseModel):
    """A host as returned by ``/hosts/{id}/``."""

    id: float | None = None
    name: str | None = None
    description: str | None = None
    inventory: float | None = None
    enabled: bool | None = None
    instance_id: str | None = None
    variables: str | None = None

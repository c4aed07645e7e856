"""Declared resource state."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ResourceState(BaseModel):
    """What the caller wants to exist, plus the identifier once it does.

    An empty ``id`` means the resource is believed absent remotely.
    """

    kind: str
    id: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)

    @property
    def exists(self) -> bool:
        return self.id != ""

    def mark_absent(self) -> None:
        self.id = ""

    def get(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

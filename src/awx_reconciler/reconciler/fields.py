"""Declarative field tables that parameterize the reconciler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel


class FieldType(Enum):
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    MAP = "map"
    ID = "id"


class Variant(Enum):
    """How a kind maps onto the API."""

    STANDARD = "standard"
    ASSOCIATION = "association"
    ACTION = "action"


@dataclass(frozen=True)
class FieldSpec:
    """One declared attribute and how it travels to and from the API.

    ``send=False`` marks a path-only field. ``read=False`` marks a write-only
    field that the API does not echo back verbatim.
    """

    name: str
    type: FieldType = FieldType.STRING
    remote: str | None = None
    required: bool = False
    default: Any = None
    omit_if_empty: bool = False
    send: bool = True
    read: bool = True

    @property
    def remote_name(self) -> str:
        return self.remote or self.name


@dataclass(frozen=True)
class ResourceKind:
    """A resource kind: its endpoints, field table and remote record model.

    ``collection`` and ``singular`` are ``str.format`` templates filled from the
    declared attributes plus ``id``. For association kinds ``collection`` is
    the owner's sub-collection and ``owner_field``/``related_field`` name the
    two halves of the composite id.
    """

    name: str
    collection: str
    fields: tuple[FieldSpec, ...]
    record: type[BaseModel] | None = None
    singular: str | None = None
    variant: Variant = Variant.STANDARD
    description: str = ""
    owner_field: str | None = None
    related_field: str | None = None
    field_index: dict[str, FieldSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_index", {f.name: f for f in self.fields})

    def get_field(self, name: str) -> FieldSpec | None:
        return self.field_index.get(name)

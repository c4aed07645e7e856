"""Conversions between declared attribute values and AWX JSON values.

AWX encodes every object id as a JSON number, while declared state keeps ids
as strings so that "unset" (``""``) stays distinct from ``0``. Every id-bearing
field goes through this module in both directions.
"""

from __future__ import annotations

from typing import Any

from awx_reconciler.client.errors import ValidationError
from awx_reconciler.reconciler.fields import FieldSpec, FieldType


def to_integer(value: Any) -> int:
    """Parse a string-encoded integer, yielding 0 when it does not parse.

    Only call this on values that already passed :func:`validate_id`.
    """
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def float_id_to_string(value: float | int) -> str:
    """Format a JSON-number id as a zero-decimal string (``42.0 -> "42"``)."""
    return f"{value:.0f}"


def is_id_string(value: Any) -> bool:
    return isinstance(value, str) and value.isascii() and value.isdigit()


def validate_id(name: str, value: Any) -> None:
    """Reject a non-empty id-typed value that is not a string of digits."""
    if value in ("", None):
        return
    if not is_id_string(value):
        raise ValidationError(
            f"expected {name!r} to contain an integer ID, got {value!r}"
        )


def is_empty(value: Any) -> bool:
    return value is None or value == "" or value == {}


def local_to_remote(field: FieldSpec, value: Any) -> Any:
    """Convert a declared value into its payload representation.

    An unset id is sent as JSON null, never as 0.
    """
    if field.type is FieldType.ID:
        return None if value in ("", None) else to_integer(value)
    return value


def remote_to_local(field: FieldSpec, value: Any) -> Any:
    """Convert a remote record value into its declared representation.

    A JSON null becomes ``""`` for id and string fields; other null values
    come back as ``None`` and are left alone by the caller.
    """
    if value is None:
        return "" if field.type in (FieldType.ID, FieldType.STRING) else None
    if field.type is FieldType.ID:
        return float_id_to_string(value)
    return value

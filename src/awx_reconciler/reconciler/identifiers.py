"""Local identifiers derived from remote data."""

from __future__ import annotations

from awx_reconciler.client.errors import ValidationError

ID_DELIMITER = "_"


def compose_id(owner_id: str, related_id: str) -> str:
    """Build the composite id of an association, e.g. ``("5", "9") -> "5_9"``."""
    return f"{owner_id}{ID_DELIMITER}{related_id}"


def split_id(composite: str) -> tuple[str, str]:
    """Split a composite association id into (owner id, related id)."""
    parts = composite.split(ID_DELIMITER)
    if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
        raise ValidationError(
            f"expected an association id of the form <owner>{ID_DELIMITER}<related>, "
            f"got {composite!r}"
        )
    return parts[0], parts[1]

"""Credential and credential type models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, StrictStr


class CredentialRecord(BaseModel):
    """A credential as returned by ``/credentials/{id}/``."""

    id: float | None = None
    name: str | None = None
    description: str | None = None
    organization: float | None = None
    credential_type: float | None = None
    inputs: dict[str, Any] | None = None


class CredentialType(BaseModel):
    """One entry of ``/credential_types/``; both fields are mandatory."""

    id: int
    name: StrictStr

"""Credential type catalog: human-readable type name to type id."""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from awx_reconciler.client.errors import DecodeError
from awx_reconciler.client.executor import RequestExecutor
from awx_reconciler.config.constants import DEFAULT_PAGE_SIZE
from awx_reconciler.models.credential import CredentialType

logger = logging.getLogger(__name__)

CREDENTIAL_TYPES_PATH = "/credential_types/"


class CredentialTypeCatalog:
    """Read-only view of ``/credential_types/``."""

    def __init__(self, executor: RequestExecutor, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.executor = executor
        self.page_size = page_size

    def list_types(self) -> dict[str, int]:
        """Return every credential type as ``{name: id}``.

        A record without a usable ``name`` or ``id`` is a decode error, never
        skipped.
        """
        records = self.executor.list_records(CREDENTIAL_TYPES_PATH, page_size=self.page_size)
        types: dict[str, int] = {}
        for record in records:
            try:
                ct = CredentialType.model_validate(record)
            except PydanticValidationError as exc:
                raise DecodeError(f"Malformed credential type {record}: {exc}") from exc
            types[ct.name] = ct.id
        logger.debug("loaded %d credential types", len(types))
        return types

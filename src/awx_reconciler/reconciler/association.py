"""Association kinds: a many-to-many link with no record of its own."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from awx_reconciler.client.errors import (
    DecodeError,
    NotFoundError,
    RemoteError,
    ValidationError,
)
from awx_reconciler.coercion import float_id_to_string, to_integer
from awx_reconciler.models.job_template import AssociatedRecord
from awx_reconciler.reconciler.engine import Reconciler
from awx_reconciler.reconciler.identifiers import compose_id, split_id
from awx_reconciler.reconciler.state import ResourceState

logger = logging.getLogger(__name__)


class AssociationReconciler(Reconciler):
    """Links a related record into an owner's sub-collection.

    The local id is ``{owner}_{related}``; membership is re-derived on every
    read by scanning the owner's sub-collection.
    """

    @property
    def owner_field(self) -> str:
        if not self.kind.owner_field:
            raise ValidationError(f"{self.kind.name} has no owner field")
        return self.kind.owner_field

    @property
    def related_field(self) -> str:
        if not self.kind.related_field:
            raise ValidationError(f"{self.kind.name} has no related field")
        return self.kind.related_field

    def _components(self, state: ResourceState) -> tuple[str, str]:
        owner, related = split_id(state.id)
        state.attributes.setdefault(self.owner_field, owner)
        state.attributes.setdefault(self.related_field, related)
        return owner, related

    def _link_payload(self, state: ResourceState) -> dict[str, Any]:
        return {"id": to_integer(state.attributes[self.related_field])}

    def _associate(self, operation: str, state: ResourceState) -> ResourceState:
        with self._operation(operation):
            self.validate(state)
            self.executor.post(self.collection_path(state), self._link_payload(state))
            state.id = compose_id(
                state.attributes[self.owner_field], state.attributes[self.related_field],
            )
        self._log("associated", state)
        return self.read(state)

    def create(self, state: ResourceState) -> ResourceState:
        return self._associate("create", state)

    def update(self, state: ResourceState) -> ResourceState:
        return self._associate("update", state)

    def read(self, state: ResourceState) -> ResourceState:
        if not state.exists:
            return state
        with self._operation("read"):
            owner, related = self._components(state)
            path = self.kind.collection.format_map({self.owner_field: owner})
            try:
                records = self.executor.list_records(path)
            except NotFoundError:
                state.mark_absent()
                return state
            try:
                linked = {
                    float_id_to_string(AssociatedRecord.model_validate(r).id)
                    for r in records
                }
            except PydanticValidationError as exc:
                raise DecodeError(f"Malformed entry in {path}: {exc}") from exc
            if related not in linked:
                logger.warning(
                    "%s %s is no longer linked, marking absent",
                    self.kind.name, state.id,
                    extra={"resource_type": self.kind.name, "operation": "read"},
                )
                state.mark_absent()
        return state

    def delete(self, state: ResourceState) -> ResourceState:
        if not state.exists:
            return state
        with self._operation("delete"):
            # The link to remove is the one named by the id, not the declared attributes
            owner, related = self._components(state)
            path = self.kind.collection.format_map({self.owner_field: owner})
            payload = {"id": to_integer(related), "disassociate": True}
            try:
                self.executor.post(path, payload)
            except RemoteError as exc:
                logger.warning(
                    "disassociating %s %s returned an error, clearing anyway: %s",
                    self.kind.name, state.id, exc,
                    extra={"resource_type": self.kind.name, "operation": "delete"},
                )
        self._log("disassociated", state)
        state.mark_absent()
        return state

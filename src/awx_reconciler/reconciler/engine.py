"""Generic create/read/update/delete engine for AWX resource kinds.

One :class:`Reconciler` serves every standard kind; the kind's field table
decides what goes into payloads and what comes back from remote records.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from awx_reconciler.client.errors import (
    DecodeError,
    NotFoundError,
    ReconcileError,
    ReconcilerError,
    ValidationError,
)
from awx_reconciler.client.executor import RequestExecutor
from awx_reconciler.coercion import (
    float_id_to_string,
    is_empty,
    local_to_remote,
    remote_to_local,
    validate_id,
)
from awx_reconciler.models.common import CreatedRecord
from awx_reconciler.reconciler.fields import FieldSpec, FieldType, ResourceKind
from awx_reconciler.reconciler.state import ResourceState

logger = logging.getLogger(__name__)

_ZERO_VALUES: dict[FieldType, Any] = {
    FieldType.STRING: "",
    FieldType.INTEGER: 0,
    FieldType.BOOLEAN: False,
    FieldType.MAP: {},
    FieldType.ID: "",
}


def _check_type(field: FieldSpec, value: Any) -> None:
    if field.type is FieldType.ID:
        if not isinstance(value, str):
            raise ValidationError(f"expected {field.name!r} to be a string ID, got {value!r}")
        validate_id(field.name, value)
    elif field.type is FieldType.STRING:
        if not isinstance(value, str):
            raise ValidationError(f"expected {field.name!r} to be a string, got {value!r}")
    elif field.type is FieldType.INTEGER:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"expected {field.name!r} to be an integer, got {value!r}")
    elif field.type is FieldType.BOOLEAN:
        if not isinstance(value, bool):
            raise ValidationError(f"expected {field.name!r} to be a boolean, got {value!r}")
    elif field.type is FieldType.MAP:
        if not isinstance(value, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in value.items()
        ):
            raise ValidationError(f"expected {field.name!r} to be a map of strings, got {value!r}")


class Reconciler:
    """CRUD state machine for one standard resource kind."""

    def __init__(self, executor: RequestExecutor, kind: ResourceKind) -> None:
        self.executor = executor
        self.kind = kind

    @contextmanager
    def _operation(self, operation: str) -> Iterator[None]:
        try:
            yield
        except ReconcileError:
            raise
        except ReconcilerError as exc:
            logger.debug(
                "%s %s failed: %s", operation, self.kind.name, exc,
                extra={"resource_type": self.kind.name, "operation": operation},
            )
            raise ReconcileError(operation, self.kind.name, exc) from exc

    def _log(self, operation: str, state: ResourceState) -> None:
        logger.info(
            "%s %s id=%s", operation, self.kind.name, state.id or "-",
            extra={"resource_type": self.kind.name, "operation": operation},
        )

    # Declared side

    def validate(self, state: ResourceState) -> None:
        """Apply defaults and check declared attributes before any request."""
        unknown = sorted(set(state.attributes) - set(self.kind.field_index))
        if unknown:
            raise ValidationError(
                f"unknown attribute(s) for {self.kind.name}: {', '.join(unknown)}"
            )
        for field in self.kind.fields:
            value = state.attributes.get(field.name)
            if value is None and field.default is not None:
                state.attributes[field.name] = value = field.default
            if field.required and is_empty(value):
                raise ValidationError(f"{field.name!r} is required for {self.kind.name}")
            if value is not None:
                _check_type(field, value)

    def build_payload(self, state: ResourceState) -> dict[str, Any]:
        """Map every sendable declared field onto its remote name."""
        payload: dict[str, Any] = {}
        for field in self.kind.fields:
            if not field.send:
                continue
            value = state.attributes.get(field.name)
            if field.omit_if_empty and is_empty(value):
                continue
            if value is None:
                value = _ZERO_VALUES[field.type]
            payload[field.remote_name] = local_to_remote(field, value)
        return payload

    def format_path(self, template: str, state: ResourceState) -> str:
        try:
            return template.format_map({**state.attributes, "id": state.id})
        except KeyError as exc:
            raise ValidationError(
                f"{self.kind.name} needs {exc.args[0]!r} to build its API path"
            ) from exc

    def collection_path(self, state: ResourceState) -> str:
        return self.format_path(self.kind.collection, state)

    def singular_path(self, state: ResourceState) -> str:
        if self.kind.singular is None:
            raise ValidationError(f"{self.kind.name} has no singular endpoint")
        return self.format_path(self.kind.singular, state)

    # Remote side

    def extract_id(self, data: dict[str, Any], model: type[BaseModel] = CreatedRecord) -> str:
        """Return the zero-decimal id of a create response."""
        try:
            created = model.model_validate(data)
        except PydanticValidationError as exc:
            raise DecodeError(f"AWX API did not return an id: {data}") from exc
        return float_id_to_string(created.id)  # type: ignore[attr-defined]

    def decode_record(self, data: dict[str, Any]) -> BaseModel:
        if self.kind.record is None:
            raise DecodeError(f"{self.kind.name} has no record model")
        try:
            return self.kind.record.model_validate(data)
        except PydanticValidationError as exc:
            raise DecodeError(f"Malformed {self.kind.name} record: {exc}") from exc

    def apply_record(self, state: ResourceState, record: BaseModel) -> None:
        """Copy remote values into declared state; absent fields stay as they are."""
        for field in self.kind.fields:
            if not field.read or field.remote_name not in record.model_fields_set:
                continue
            value = remote_to_local(field, getattr(record, field.remote_name))
            if value is not None:
                state.attributes[field.name] = value

    # Lifecycle

    def create(self, state: ResourceState) -> ResourceState:
        with self._operation("create"):
            self.validate(state)
            payload = self.build_payload(state)
            logger.debug("create %s payload: %s", self.kind.name, payload)
            data = self.executor.post(self.collection_path(state), payload)
            state.id = self.extract_id(data)
        self._log("created", state)
        return self.read(state)

    def read(self, state: ResourceState) -> ResourceState:
        if not state.exists:
            return state
        with self._operation("read"):
            try:
                data = self.executor.get(self.singular_path(state))
            except NotFoundError:
                logger.warning(
                    "%s %s no longer exists remotely, marking absent",
                    self.kind.name, state.id,
                    extra={"resource_type": self.kind.name, "operation": "read"},
                )
                state.mark_absent()
                return state
            self.apply_record(state, self.decode_record(data))
        return state

    def update(self, state: ResourceState) -> ResourceState:
        with self._operation("update"):
            if not state.exists:
                raise ValidationError(f"cannot update a {self.kind.name} without an id")
            self.validate(state)
            payload = self.build_payload(state)
            logger.debug("update %s payload: %s", self.kind.name, payload)
            self.executor.put(self.singular_path(state), payload)
        self._log("updated", state)
        return self.read(state)

    def delete(self, state: ResourceState) -> ResourceState:
        if not state.exists:
            return state
        with self._operation("delete"):
            try:
                self.executor.delete(self.singular_path(state))
            except NotFoundError:
                logger.info("%s %s was already gone", self.kind.name, state.id)
        self._log("deleted", state)
        state.mark_absent()
        return state

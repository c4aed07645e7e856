"""Tests for error_handler and custom exceptions."""

from __future__ import annotations

import pytest

from awx_reconciler.client.errors import (
    ConfigurationError,
    DecodeError,
    NotFoundError,
    ReconcileError,
    ReconcilerError,
    RemoteError,
    TransportError,
    ValidationError,
    error_handler,
    is_not_found,
)


class TestExceptionHierarchy:
    def test_base_error(self):
        exc = ReconcilerError("test")
        assert str(exc) == "test"
        assert exc.exit_code == 1

    def test_transport_error(self):
        exc = TransportError("cannot connect")
        assert isinstance(exc, ReconcilerError)
        assert exc.exit_code == 2

    def test_remote_error_carries_status_and_body(self):
        exc = RemoteError(500, "server error")
        assert exc.status_code == 500
        assert exc.body == "server error"
        assert str(exc) == "HTTP 500: server error"

    def test_not_found_is_a_remote_error(self):
        exc = NotFoundError('{"detail": "Not found."}')
        assert isinstance(exc, RemoteError)
        assert exc.status_code == 404
        assert "HTTP 404" in str(exc)
        assert exc.exit_code == 4

    def test_decode_and_configuration_errors(self):
        assert DecodeError("bad json").exit_code == 5
        assert ConfigurationError("no host").exit_code == 6

    def test_validation_error(self):
        exc = ValidationError("name is required")
        assert exc.exit_code == 7
        assert "name is required" in str(exc)

    def test_validation_error_empty(self):
        assert "Validation error" in str(ValidationError())

    def test_reconcile_error_message(self):
        cause = RemoteError(400, "bad request")
        exc = ReconcileError("create", "credential", cause)
        assert str(exc) == "failed to create credential: HTTP 400: bad request"
        assert exc.cause is cause
        assert exc.operation == "create"
        assert exc.kind == "credential"


class TestIsNotFound:
    def test_direct(self):
        assert is_not_found(NotFoundError())

    def test_wrapped(self):
        assert is_not_found(ReconcileError("update", "inventory", NotFoundError()))

    def test_other_errors(self):
        assert not is_not_found(RemoteError(500))
        assert not is_not_found(ValueError("x"))
        assert not is_not_found(None)


class TestErrorHandler:
    def test_catches_reconciler_error(self):
        @error_handler
        def raises_remote():
            raise RemoteError(503, "unavailable")

        with pytest.raises(SystemExit) as exc_info:
            raises_remote()
        assert exc_info.value.code == 3

    def test_catches_reconcile_error(self):
        @error_handler
        def raises_reconcile():
            raise ReconcileError("read", "project", TransportError("timeout"))

        with pytest.raises(SystemExit) as exc_info:
            raises_reconcile()
        assert exc_info.value.code == 8

    def test_passes_through_normal_return(self):
        @error_handler
        def returns_value():
            return 42

        assert returns_value() == 42

    def test_does_not_catch_other_exceptions(self):
        @error_handler
        def raises_type_error():
            raise TypeError("bad type")

        with pytest.raises(TypeError):
            raises_type_error()

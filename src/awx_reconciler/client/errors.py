"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class ReconcilerError(Exception):
    """Base exception for awx-reconciler."""

    exit_code: int = 1


class TransportError(ReconcilerError):
    """The request could not be sent or the response could not be read."""

    exit_code = 2


class RemoteError(ReconcilerError):
    """The API answered with a non-success status code."""

    exit_code = 3

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class NotFoundError(RemoteError):
    """The API answered 404."""

    exit_code = 4

    def __init__(self, body: str = "") -> None:
        super().__init__(404, body)


class DecodeError(ReconcilerError):
    """Malformed JSON, or an expected field is missing or wrongly typed."""

    exit_code = 5


class ConfigurationError(ReconcilerError):
    """Missing or invalid connection configuration."""

    exit_code = 6


class ValidationError(ReconcilerError):
    """A declared attribute failed a pre-submission check."""

    exit_code = 7

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "Validation error")


class ReconcileError(ReconcilerError):
    """A lifecycle operation failed for one resource."""

    exit_code = 8

    def __init__(self, operation: str, kind: str, cause: Exception) -> None:
        self.operation = operation
        self.kind = kind
        self.cause = cause
        super().__init__(f"failed to {operation} {kind}: {cause}")


def is_not_found(exc: BaseException | None) -> bool:
    """Return True if *exc* means the remote record does not exist."""
    if isinstance(exc, ReconcileError):
        exc = exc.cause
    return isinstance(exc, NotFoundError)


def error_handler(func: F) -> F:
    """Decorator that catches ReconcilerError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ReconcilerError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]

"""Shared helpers for CLI commands: executor factory, options, attribute parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from awx_reconciler.client.executor import RequestExecutor
from awx_reconciler.config.manager import ConfigManager
from awx_reconciler.reconciler.state import ResourceState

_console = Console()

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Connection profile"),
]
HostOpt = Annotated[
    str | None,
    typer.Option("--host", help="AWX host override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="AWX token override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml)"),
]
AttrsOpt = Annotated[
    str | None,
    typer.Option("--attrs", "-a", help="Declared attributes as a JSON string or @file path"),
]


def make_executor(
    profile: str | None,
    host: str | None,
    token: str | None,
) -> RequestExecutor:
    """Create a RequestExecutor from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    connection = mgr.resolve_connection(profile_name=profile, host=host, token=token)
    return RequestExecutor(connection)


def parse_attributes(attrs: str | None) -> dict[str, Any]:
    """Parse declared attributes from a JSON string or @file reference."""
    if not attrs:
        return {}
    if attrs.startswith("@"):
        file_path = Path(attrs[1:])
        if not file_path.exists():
            _console.print(f"[red]Attributes file not found: {file_path}[/]")
            raise typer.Exit(1)
        text = file_path.read_text()
    else:
        text = attrs
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        _console.print("[red]Invalid JSON attributes.[/]")
        raise typer.Exit(1) from None
    if not isinstance(data, dict):
        _console.print("[red]Attributes must be a JSON object.[/]")
        raise typer.Exit(1)
    return data


def state_view(state: ResourceState) -> dict[str, Any]:
    """Flatten a state for display: id first, then the attributes."""
    return {
        "kind": state.kind,
        "id": state.id or "(absent)",
        **state.attributes,
    }

"""Config commands: manage AWX connection profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from awx_reconciler.client.errors import error_handler
from awx_reconciler.client.executor import RequestExecutor
from awx_reconciler.config.manager import ConfigManager
from awx_reconciler.config.models import ConnectionProfile
from awx_reconciler.output.formatter import output

app = typer.Typer(name="config", help="Manage AWX connection profiles.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    host: Annotated[str, typer.Option("--host", "-H", help="AWX base URL")],
    token: Annotated[Optional[str], typer.Option("--token", "-t", help="OAuth2 token")] = None,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a connection profile."""
    mgr = _get_manager()
    profile = ConnectionProfile(
        name=name,
        host=host,
        token=token,
        verify_ssl=not no_verify_ssl,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'awx-reconciler config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "Host", "Token", "Default"]
    rows = [
        [name, p.host, "yes" if p.auth_configured else "no", "*" if name == default else ""]
        for name, p in profiles.items()
    ]
    output(
        {"profiles": [p.model_dump(exclude={"token"}, exclude_none=True) for p in profiles.values()]},
        fmt,
        columns=columns,
        rows=rows,
        title="AWX Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(exclude_none=True)
    if "token" in data:
        data["token"] = data["token"][:4] + "..." if len(data["token"]) > 8 else "***"
    output(data, fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default connection profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Test connectivity to AWX."""
    mgr = _get_manager()
    profile = mgr.resolve_connection(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.host}[/]...")

    with RequestExecutor(profile) as executor:
        info = executor.get("/ping/")
        console.print(f"[green]Connected![/] AWX version {info.get('version', '?')}")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a connection profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")

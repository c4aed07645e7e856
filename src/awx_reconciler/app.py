"""Root Typer app: global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from awx_reconciler import __version__
from awx_reconciler.commands import config_cmd, credential_type, resource
from awx_reconciler.utils.logging import setup_logging

app = typer.Typer(
    name="awx-reconciler",
    help="Reconcile declared AWX resources against the AWX REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"awx-reconciler {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and payloads."),
) -> None:
    """AWX reconciler: create, refresh, update and delete AWX resources."""
    setup_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(resource.app, name="resource")
app.add_typer(credential_type.app, name="credential-type")


def main() -> None:
    app()

"""Credential type commands."""

from __future__ import annotations

import typer

from awx_reconciler.catalog import CredentialTypeCatalog
from awx_reconciler.client.errors import error_handler
from awx_reconciler.commands._common import (
    FormatOpt,
    HostOpt,
    ProfileOpt,
    TokenOpt,
    make_executor,
)
from awx_reconciler.output.formatter import output

app = typer.Typer(name="credential-type", help="Inspect AWX credential types.")


@app.command("list")
@error_handler
def list_types(
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List credential types by name with their ids."""
    with make_executor(profile, host, token) as executor:
        types = CredentialTypeCatalog(executor).list_types()
    rows = [[name, type_id] for name, type_id in sorted(types.items())]
    output(types, fmt, columns=["Name", "ID"], rows=rows, title="Credential types")

"""Resource commands: run one lifecycle operation against any resource kind.

Kinds are named like ``credential``, ``inventory_host`` or
``job_template_launch``; use ``resource kinds`` to list them with their fields.
Attributes are passed as JSON, inline or from a file::

    awx-reconciler resource create credential -a '{"name": "ssh-key", ...}'
    awx-reconciler resource update inventory 12 -a @inventory.json
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from awx_reconciler.client.errors import error_handler
from awx_reconciler.commands._common import (
    AttrsOpt,
    FormatOpt,
    HostOpt,
    ProfileOpt,
    TokenOpt,
    make_executor,
    parse_attributes,
    state_view,
)
from awx_reconciler.output.formatter import output
from awx_reconciler.reconciler.factory import reconciler_for
from awx_reconciler.reconciler.state import ResourceState
from awx_reconciler.resources import get_kind, list_kinds

app = typer.Typer(
    name="resource",
    help="Create, read, update and delete AWX resources.",
)
console = Console()

KindArg = Annotated[
    str,
    typer.Argument(help="Resource kind (e.g. credential, job_template)"),
]
IdArg = Annotated[
    str,
    typer.Argument(help="Resource id (owner_related for association kinds)"),
]


@app.command("kinds")
@error_handler
def kinds(fmt: FormatOpt = "table") -> None:
    """List the supported resource kinds and their fields."""
    registered = list_kinds()
    columns = ["Kind", "Variant", "Fields", "Description"]
    rows = [
        [
            k.name,
            k.variant.value,
            ", ".join(f"{f.name}*" if f.required else f.name for f in k.fields),
            k.description,
        ]
        for k in registered
    ]
    data = {
        k.name: {
            "variant": k.variant.value,
            "fields": {f.name: f.type.value for f in k.fields},
        }
        for k in registered
    }
    output(data, fmt, columns=columns, rows=rows, title="Resource kinds (* = required)")


@app.command()
@error_handler
def create(
    kind: KindArg,
    attrs: AttrsOpt = None,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create a resource from declared attributes."""
    state = ResourceState(kind=get_kind(kind).name, attributes=parse_attributes(attrs))
    with make_executor(profile, host, token) as executor:
        reconciler_for(executor, kind).create(state)
    output(state_view(state), fmt, title=f"{kind} created")


@app.command()
@error_handler
def read(
    kind: KindArg,
    resource_id: IdArg,
    attrs: AttrsOpt = None,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Refresh a resource from AWX; reports it absent if it no longer exists."""
    state = ResourceState(
        kind=get_kind(kind).name, id=resource_id, attributes=parse_attributes(attrs),
    )
    with make_executor(profile, host, token) as executor:
        reconciler_for(executor, kind).read(state)
    if not state.exists:
        console.print(f"[yellow]{kind} {resource_id} is absent.[/]")
        return
    output(state_view(state), fmt, title=f"{kind}/{state.id}")


@app.command()
@error_handler
def update(
    kind: KindArg,
    resource_id: IdArg,
    attrs: AttrsOpt = None,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Overwrite every declared attribute of a resource."""
    state = ResourceState(
        kind=get_kind(kind).name, id=resource_id, attributes=parse_attributes(attrs),
    )
    with make_executor(profile, host, token) as executor:
        reconciler_for(executor, kind).update(state)
    output(state_view(state), fmt, title=f"{kind} updated")


@app.command()
@error_handler
def delete(
    kind: KindArg,
    resource_id: IdArg,
    attrs: AttrsOpt = None,
    force: Annotated[
        bool, typer.Option("--force", help="Skip confirmation"),
    ] = False,
    profile: ProfileOpt = None,
    host: HostOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a resource (disassociate for association kinds)."""
    state = ResourceState(
        kind=get_kind(kind).name, id=resource_id, attributes=parse_attributes(attrs),
    )
    if not force and not Confirm.ask(f"Delete {kind} {resource_id}?"):
        console.print("Cancelled.")
        return
    with make_executor(profile, host, token) as executor:
        reconciler_for(executor, kind).delete(state)
    console.print(f"[green]{kind} {resource_id} deleted.[/]")

"""Integration tests for credential type commands."""

from __future__ import annotations

import json

import httpx
import respx
from typer.testing import CliRunner

from awx_reconciler.app import app

runner = CliRunner()

BASE = "https://awx.test/api/v2"
COMMON_OPTS = ["--host", "https://awx.test", "--token", "t"]


@respx.mock
def test_list_json():
    respx.get(f"{BASE}/credential_types/").mock(
        return_value=httpx.Response(200, json={"count": 2, "next": None, "results": [
            {"id": 1, "name": "Machine"},
            {"id": 2, "name": "Source Control"},
        ]})
    )
    result = runner.invoke(app, ["credential-type", "list", "--format", "json", *COMMON_OPTS])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"Machine": 1, "Source Control": 2}


@respx.mock
def test_list_table():
    respx.get(f"{BASE}/credential_types/").mock(
        return_value=httpx.Response(200, json={"count": 1, "next": None, "results": [
            {"id": 1, "name": "Machine"},
        ]})
    )
    result = runner.invoke(app, ["credential-type", "list", *COMMON_OPTS])
    assert result.exit_code == 0
    assert "Machine" in result.output


@respx.mock
def test_malformed_entry():
    respx.get(f"{BASE}/credential_types/").mock(
        return_value=httpx.Response(200, json={"count": 1, "next": None, "results": [{"id": 1}]})
    )
    result = runner.invoke(app, ["credential-type", "list", *COMMON_OPTS])
    assert result.exit_code == 5

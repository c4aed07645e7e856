"""Tests for the credential type catalog."""

from __future__ import annotations

import httpx
import pytest
import respx

from awx_reconciler.catalog import CredentialTypeCatalog
from awx_reconciler.client.errors import DecodeError, NotFoundError, RemoteError

BASE = "https://awx.test/api/v2"
TYPES = f"{BASE}/credential_types/"


def _page(results: list[dict], next_url: str | None = None) -> dict:
    return {"count": len(results), "next": next_url, "previous": None, "results": results}


@respx.mock
def test_maps_name_to_id(executor):
    route = respx.get(TYPES).mock(return_value=httpx.Response(200, json=_page([
        {"id": 1, "name": "Machine", "kind": "ssh"},
        {"id": 2, "name": "Source Control", "kind": "scm"},
    ])))
    assert CredentialTypeCatalog(executor).list_types() == {"Machine": 1, "Source Control": 2}
    assert route.calls.last.request.url.params["page_size"] == "100"


@respx.mock
def test_follows_pagination(executor):
    respx.get(TYPES).mock(side_effect=[
        httpx.Response(200, json=_page([{"id": 1, "name": "Machine"}],
                                       "/api/v2/credential_types/?page=2")),
        httpx.Response(200, json=_page([{"id": 18, "name": "Vault"}])),
    ])
    assert CredentialTypeCatalog(executor).list_types() == {"Machine": 1, "Vault": 18}


@respx.mock
def test_custom_page_size(executor):
    route = respx.get(TYPES).mock(return_value=httpx.Response(200, json=_page([])))
    assert CredentialTypeCatalog(executor, page_size=10).list_types() == {}
    assert route.calls.last.request.url.params["page_size"] == "10"


@respx.mock
def test_missing_name_is_decode_error(executor):
    respx.get(TYPES).mock(return_value=httpx.Response(200, json=_page([{"id": 1}])))
    with pytest.raises(DecodeError, match="Malformed credential type"):
        CredentialTypeCatalog(executor).list_types()


@respx.mock
def test_missing_results_is_decode_error(executor):
    respx.get(TYPES).mock(return_value=httpx.Response(200, json={"count": 0}))
    with pytest.raises(DecodeError):
        CredentialTypeCatalog(executor).list_types()


@respx.mock
def test_remote_error(executor):
    respx.get(TYPES).mock(return_value=httpx.Response(403, json={"detail": "forbidden"}))
    with pytest.raises(RemoteError) as exc_info:
        CredentialTypeCatalog(executor).list_types()
    assert exc_info.value.status_code == 403


@respx.mock
def test_missing_endpoint_is_an_error(executor):
    respx.get(TYPES).mock(return_value=httpx.Response(404, json={"detail": "Not found."}))
    with pytest.raises(NotFoundError):
        CredentialTypeCatalog(executor).list_types()

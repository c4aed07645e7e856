"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from awx_reconciler.client.executor import RequestExecutor
from awx_reconciler.config.manager import ConfigManager
from awx_reconciler.config.models import ConnectionProfile

HOST = "https://awx.test"
BASE = f"{HOST}/api/v2"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep AWX_* variables from the developer's shell out of the tests."""
    for var in ("AWX_HOST", "AWX_TOKEN", "AWX_PROFILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ConnectionProfile:
    """Return a sample connection profile for testing."""
    return ConnectionProfile(name="test-awx", host=HOST, token="s3cr3t-token")


@pytest.fixture
def executor(sample_profile: ConnectionProfile) -> Iterator[RequestExecutor]:
    with RequestExecutor(sample_profile) as ex:
        yield ex


@pytest.fixture
def credential_record() -> dict:
    """Sample credential as AWX returns it (ids are JSON numbers)."""
    return {
        "id": 17.0,
        "type": "credential",
        "name": "ssh-key",
        "description": "",
        "organization": None,
        "credential_type": 1,
        "inputs": {"username": "a"},
    }


@pytest.fixture
def inventory_record() -> dict:
    return {
        "id": 12,
        "name": "prod",
        "description": "production hosts",
        "organization": 3,
        "kind": "",
        "host_filter": None,
        "variables": "---\nenv: prod",
        "prevent_instance_group_fallback": False,
    }

"""Configuration manager: read/write TOML config, resolve connection profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from awx_reconciler.client.errors import ConfigurationError
from awx_reconciler.config.constants import (
    CONFIG_FILE,
    DEFAULT_TIMEOUT,
    ENV_HOST,
    ENV_PROFILE,
    ENV_TOKEN,
)
from awx_reconciler.config.models import CLIConfig, ConnectionProfile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves connection profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        data = tomllib.loads(self.config_path.read_bytes().decode())
        profiles = {
            name: ConnectionProfile(name=name, **prof_data)
            for name, prof_data in data.get("profiles", {}).items()
        }
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Tokens live in this file, keep the directory owner-only
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"}, exclude_none=True)
                if prof_dict.get("verify_ssl") is True:
                    del prof_dict["verify_ssl"]
                if prof_dict.get("timeout") == DEFAULT_TIMEOUT:
                    del prof_dict["timeout"]
                data["profiles"][name] = prof_dict
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: ConnectionProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ConnectionProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_connection(
        self,
        profile_name: str | None = None,
        host: str | None = None,
        token: str | None = None,
    ) -> ConnectionProfile:
        """Resolve the AWX connection.

        Precedence: CLI flags > env vars > config profile. Both a host and a
        token are required.
        """
        env_profile = os.environ.get(ENV_PROFILE)
        profile = self.get_profile(profile_name or env_profile)

        resolved_host = host or os.environ.get(ENV_HOST) or (profile.host if profile else None)
        resolved_token = token or os.environ.get(ENV_TOKEN) or (profile.token if profile else None)

        if not resolved_host:
            raise ConfigurationError(
                "No AWX host configured. Use 'awx-reconciler config add' or set "
                f"{ENV_HOST} or pass --host."
            )
        if not resolved_token:
            raise ConfigurationError(
                f"No AWX token configured. Set {ENV_TOKEN} or pass --token."
            )

        return ConnectionProfile(
            name=profile.name if profile else "cli",
            host=resolved_host.rstrip("/"),
            token=resolved_token,
            verify_ssl=profile.verify_ssl if profile else True,
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
        )

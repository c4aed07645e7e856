"""Pydantic models for connection configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from awx_reconciler.config.constants import DEFAULT_TIMEOUT


class ConnectionProfile(BaseModel):
    """A named AWX connection profile."""

    name: str
    host: str = Field(description="AWX base URL, e.g. https://awx.example.com")
    token: str | None = Field(default=None, description="OAuth2 access token")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Host must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth_configured(self) -> bool:
        return bool(self.token)


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, ConnectionProfile] = Field(default_factory=dict)

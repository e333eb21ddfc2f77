"""Pydantic models for hubspot-mcp configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HubSpotConfig(BaseModel):
    """Credentials and origin for the HubSpot CRM API."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    api_key_env: str = "HUBSPOT_API_KEY"
    base_url: str = "https://api.hubapi.com"


class HttpConfig(BaseModel):
    """HTTP transport settings."""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: str = ""


class ServerConfig(BaseModel):
    """Top-level configuration for hubspot-mcp."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["stdio", "http"] = "stdio"
    hubspot: HubSpotConfig = Field(default_factory=HubSpotConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

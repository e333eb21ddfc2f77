"""Configuration loading and validation."""

from hubspot_mcp.config.loader import load_config
from hubspot_mcp.config.schema import (
    HttpConfig,
    HubSpotConfig,
    LoggingConfig,
    ServerConfig,
)

__all__ = [
    "HttpConfig",
    "HubSpotConfig",
    "LoggingConfig",
    "ServerConfig",
    "load_config",
]

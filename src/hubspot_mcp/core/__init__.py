"""Core errors and shared utilities."""

from hubspot_mcp.core.errors import (
    ConfigError,
    HubSpotMCPError,
    ToolArgumentError,
    ToolError,
    UnknownToolError,
    UpstreamError,
)

__all__ = [
    "ConfigError",
    "HubSpotMCPError",
    "ToolArgumentError",
    "ToolError",
    "UnknownToolError",
    "UpstreamError",
]

"""Exception hierarchy for hubspot-mcp.

Every module imports from here. The hierarchy is:

    HubSpotMCPError
    ├── ConfigError
    ├── ToolError
    │   ├── UnknownToolError(name)
    │   └── ToolArgumentError(tool, missing)
    └── UpstreamError(status, body)

Only ``ConfigError`` is fatal. Everything else is caught by the
dispatcher and turned into a failed ``ToolResult``.
"""

from __future__ import annotations


class HubSpotMCPError(Exception):
    """Base exception for all hubspot-mcp errors."""


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(HubSpotMCPError):
    """Invalid or incomplete configuration."""


# ─── Tool Errors ──────────────────────────────────────────────


class ToolError(HubSpotMCPError):
    """Base for errors raised while resolving or invoking a tool."""


class UnknownToolError(ToolError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolArgumentError(ToolError):
    """Required arguments are missing from a tool invocation."""

    def __init__(self, tool: str, missing: list[str]) -> None:
        self.tool = tool
        self.missing = missing
        super().__init__(
            f"Missing required argument(s) for {tool}: {', '.join(missing)}"
        )


# ─── Upstream Errors ──────────────────────────────────────────


class UpstreamError(HubSpotMCPError):
    """The HubSpot API call failed.

    ``status`` is the HTTP status code, or ``None`` when no response
    was received at all (DNS failure, connection reset, timeout).
    """

    def __init__(self, status: int | None, body: str) -> None:
        self.status = status
        self.body = body
        if status is None:
            msg = f"HubSpot API request failed: {body}"
        else:
            msg = f"HubSpot API error: {status} - {body}"
        super().__init__(msg)

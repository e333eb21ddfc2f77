"""HubSpot CRM tools, their registry, and the dispatcher that runs them."""

from hubspot_mcp.tools.base import ToolDefinition, ToolResult, ToolSpec
from hubspot_mcp.tools.dispatcher import Dispatcher
from hubspot_mcp.tools.registry import ToolRegistry, default_registry

__all__ = [
    "Dispatcher",
    "ToolDefinition",
    "ToolRegistry",
    "ToolResult",
    "ToolSpec",
    "default_registry",
]

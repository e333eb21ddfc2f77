"""MCP server exposing the HubSpot tools over stdio."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from hubspot_mcp import __version__
from hubspot_mcp.core.errors import HubSpotMCPError

if TYPE_CHECKING:
    from hubspot_mcp.tools.base import ToolDefinition, ToolResult
    from hubspot_mcp.tools.dispatcher import Dispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "hubspot-mcp-server"


class ToolCallError(HubSpotMCPError):
    """Failed tool call; the MCP SDK reports it as ``isError: true``."""


def _to_mcp_tool(definition: ToolDefinition) -> Tool:
    return Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema,
    )


def render_result(result: ToolResult) -> str:
    """Text content for a tool result, as sent in ``content[0].text``."""
    if result.is_error:
        return f"Error: {result.error}"
    return json.dumps(result.payload, indent=2, ensure_ascii=False)


def create_server(dispatcher: Dispatcher) -> Server:
    """Build an MCP server bound to ``dispatcher``."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
    async def list_tools() -> list[Tool]:
        """List available MCP tools."""
        return [_to_mcp_tool(d) for d in dispatcher.list_tools()]

    @server.call_tool(validate_input=False)  # type: ignore[untyped-decorator]
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Dispatch a tool call and wrap the outcome as text content."""
        result = await dispatcher.dispatch(name, arguments or {})
        text = render_result(result)
        if result.is_error:
            # The SDK turns handler exceptions into isError results.
            raise ToolCallError(text)
        return [TextContent(type="text", text=text)]

    return server


async def run_stdio(dispatcher: Dispatcher) -> None:
    """Serve ``dispatcher`` over stdin/stdout until the client disconnects."""
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("HubSpot MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )

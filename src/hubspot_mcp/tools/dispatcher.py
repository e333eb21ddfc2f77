"""Transport-agnostic tool dispatcher.

The single place where tool failures are isolated: every exception
raised while resolving or running a tool is turned into a failed
:class:`ToolResult`, so neither transport's serving loop can be taken
down by one bad call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from hubspot_mcp.core.errors import HubSpotMCPError
from hubspot_mcp.tools.base import ToolResult

if TYPE_CHECKING:
    from hubspot_mcp.providers.hubspot import HubSpotClient
    from hubspot_mcp.tools.base import ToolDefinition
    from hubspot_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class Dispatcher:
    """Resolve tool names to handlers and normalize their outcomes."""

    def __init__(self, registry: ToolRegistry, client: HubSpotClient) -> None:
        self._registry = registry
        self._client = client

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> list[ToolDefinition]:
        return self._registry.list()

    async def dispatch(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> ToolResult:
        """Invoke tool ``name`` with ``arguments``.

        Never raises ``Exception``; failures come back as
        ``ToolResult.failure`` carrying the exception message.
        """
        args = arguments if arguments is not None else {}
        try:
            tool = self._registry.get(name)
            tool.check_arguments(args)
            payload = await tool.handler(self._client, args)
        except HubSpotMCPError as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return ToolResult.failure(str(exc))
        except Exception as exc:
            logger.exception("Unexpected error in tool %s", name)
            return ToolResult.failure(str(exc) or type(exc).__name__)
        logger.debug("Tool %s succeeded", name)
        return ToolResult.success(payload)

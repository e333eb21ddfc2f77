"""Tool registry: fixed, ordered lookup of tools by name.

The registry is populated once at construction and exposes no way to
add or remove tools afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hubspot_mcp.core.errors import UnknownToolError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hubspot_mcp.tools.base import ToolDefinition, ToolSpec


class ToolRegistry:
    """Immutable registry of tool specs, kept in declaration order."""

    def __init__(self, specs: Iterable[ToolSpec]) -> None:
        tools: dict[str, ToolSpec] = {}
        for spec in specs:
            if spec.name in tools:
                msg = f"Tool already registered: {spec.name}"
                raise ValueError(msg)
            tools[spec.name] = spec
        self._tools = tools

    def get(self, name: str) -> ToolSpec:
        """Get a tool by exact name.

        Raises:
            UnknownToolError: If no tool has that name.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def list(self) -> list[ToolDefinition]:
        """Return every tool definition in declaration order."""
        return [spec.definition for spec in self._tools.values()]

    def names(self) -> list[str]:
        """Return names of all registered tools."""
        return list(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools


def default_registry() -> ToolRegistry:
    """Registry holding the eight HubSpot CRM tools."""
    from hubspot_mcp.tools.hubspot import HUBSPOT_TOOLS

    return ToolRegistry(HUBSPOT_TOOLS)

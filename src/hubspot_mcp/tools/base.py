"""Tool data types.

Defines the immutable tool definition advertised to callers, the
handler-bearing :class:`ToolSpec`, and the :class:`ToolResult`
outcome returned by the dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from hubspot_mcp.core.errors import ToolArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Name, description and JSON Schema of a tool."""

    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Wire form, as advertised by both transports."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


class ToolHandler(Protocol):
    async def __call__(self, client: Any, arguments: dict[str, Any]) -> Any: ...


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """A tool definition bound to the coroutine that executes it."""

    definition: ToolDefinition
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.definition.name

    def check_arguments(self, arguments: Mapping[str, Any]) -> None:
        """Check that every argument the schema marks required is present.

        Only presence is checked; types and extra keys are left to the
        upstream API.

        Raises:
            ToolArgumentError: If any required argument is missing or null.
        """
        required = self.definition.input_schema.get("required", [])
        missing = [key for key in required if arguments.get(key) is None]
        if missing:
            raise ToolArgumentError(self.name, missing)


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Outcome of a tool invocation: a payload or an error, never both."""

    payload: Any = None
    error: str | None = field(default=None)

    def __post_init__(self) -> None:
        if self.error is not None and self.payload is not None:
            msg = "ToolResult cannot carry both a payload and an error"
            raise ValueError(msg)

    @classmethod
    def success(cls, payload: Any) -> ToolResult:
        return cls(payload=payload)

    @classmethod
    def failure(cls, message: str) -> ToolResult:
        return cls(error=message)

    @property
    def is_error(self) -> bool:
        return self.error is not None

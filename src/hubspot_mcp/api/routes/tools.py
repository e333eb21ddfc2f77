"""Tool routes: listing, synchronous execution, and SSE execution."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse, StreamingResponse

from hubspot_mcp.api.streaming import SSE_HEADERS, stream_error_events, stream_tool_events
from hubspot_mcp.core.errors import ConfigError
from hubspot_mcp.tools.dispatcher import Dispatcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


def _dispatcher(request: Request) -> Dispatcher:
    """Return the app's dispatcher.

    Raises:
        ConfigError: The app started without a HubSpot API key.
    """
    dispatcher: Dispatcher | None = request.app.state.dispatcher
    if dispatcher is None:
        env = request.app.state.config.hubspot.api_key_env
        msg = f"{env} environment variable is required"
        raise ConfigError(msg)
    return dispatcher


@router.get("")
async def list_tools(request: Request) -> JSONResponse:
    """List every tool with its input schema."""
    try:
        tools = [d.to_dict() for d in _dispatcher(request).list_tools()]
    except Exception as exc:
        logger.exception("Failed to list tools")
        return JSONResponse(status_code=500, content={"error": str(exc)})
    return JSONResponse(content={"tools": tools})


@router.post("/{tool_name}/execute")
async def execute_tool_streaming(
    tool_name: str,
    request: Request,
    arguments: dict[str, Any] | None = Body(default=None),
) -> StreamingResponse:
    """Run a tool and stream its result as server-sent events."""
    arguments = arguments or {}
    try:
        events = stream_tool_events(_dispatcher(request), tool_name, arguments)
    except ConfigError as exc:
        logger.warning("Cannot execute %s: %s", tool_name, exc)
        events = stream_error_events(tool_name, arguments, str(exc))
    return StreamingResponse(
        events,
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.post("/{tool_name}")
async def execute_tool(
    tool_name: str,
    request: Request,
    arguments: dict[str, Any] | None = Body(default=None),
) -> JSONResponse:
    """Run a tool and return its result in one JSON response."""
    try:
        dispatcher = _dispatcher(request)
    except ConfigError as exc:
        logger.warning("Cannot execute %s: %s", tool_name, exc)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(exc)},
        )
    result = await dispatcher.dispatch(tool_name, arguments or {})
    if result.is_error:
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": result.error},
        )
    return JSONResponse(content={"success": True, "result": result.payload})

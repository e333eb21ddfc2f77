"""FastAPI application factory for the HTTP transport."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from hubspot_mcp import __version__

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from hubspot_mcp.config.schema import ServerConfig
    from hubspot_mcp.tools.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the HubSpot client on startup unless one was injected.

    Without an API key the app still starts so ``/health`` answers; the
    tool routes then report the missing credential.
    """
    if getattr(app.state, "dispatcher", None) is not None:
        yield
        return

    config: ServerConfig = app.state.config
    if not config.hubspot.api_key:
        logger.warning(
            "%s is not set; tool routes are unavailable", config.hubspot.api_key_env
        )
        yield
        return

    from hubspot_mcp.providers.hubspot import HubSpotClient
    from hubspot_mcp.tools.dispatcher import Dispatcher
    from hubspot_mcp.tools.registry import default_registry

    async with HubSpotClient.from_config(config.hubspot) as client:
        app.state.dispatcher = Dispatcher(default_registry(), client)
        yield
        app.state.dispatcher = None


def create_app(
    config: ServerConfig,
    dispatcher: Dispatcher | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Validated server configuration.
        dispatcher: Pre-built dispatcher. When omitted, one is created
            from ``config`` for the lifetime of the app.
    """
    app = FastAPI(
        title="hubspot-mcp",
        description="HubSpot CRM tools over HTTP with SSE streaming",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.dispatcher = dispatcher

    from hubspot_mcp.api.health import router as health_router
    from hubspot_mcp.api.routes.tools import router as tools_router

    app.include_router(health_router)
    app.include_router(tools_router)

    return app


def log_routes(host: str, port: int) -> None:
    """Log where the HTTP transport is listening."""
    base = f"http://{host}:{port}"
    logger.info("HubSpot MCP HTTP Server listening on port %d", port)
    logger.info("Health check: %s/health", base)
    logger.info("List tools: %s/tools", base)
    logger.info("Execute tool (streaming): POST %s/tools/:toolName/execute", base)
    logger.info("Execute tool (regular): POST %s/tools/:toolName", base)

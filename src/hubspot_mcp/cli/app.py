"""Main CLI application.

Click commands for hubspot-mcp: stdio, serve, tools. Running the group
without a subcommand starts the transport selected by ``mode``.
"""

from __future__ import annotations

import asyncio
import sys
from typing import TYPE_CHECKING, Any

import click

from hubspot_mcp import __version__
from hubspot_mcp.config.loader import load_config
from hubspot_mcp.core.errors import ConfigError
from hubspot_mcp.core.logging import setup_logging

if TYPE_CHECKING:
    from hubspot_mcp.config.schema import ServerConfig


# ── Helpers ──────────────────────────────────────────────────────


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(
    config_path: str | None,
    overrides: dict[str, Any] | None = None,
) -> ServerConfig:
    """Load config with user-friendly error handling."""
    try:
        config = load_config(path=config_path, overrides=overrides)
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy
    setup_logging(config.logging)
    return config


async def _run_stdio(config: ServerConfig) -> None:
    from hubspot_mcp.mcp.server import run_stdio
    from hubspot_mcp.providers.hubspot import HubSpotClient
    from hubspot_mcp.tools.dispatcher import Dispatcher
    from hubspot_mcp.tools.registry import default_registry

    async with HubSpotClient.from_config(config.hubspot) as client:
        await run_stdio(Dispatcher(default_registry(), client))


def _run_http(config: ServerConfig) -> None:
    import uvicorn

    from hubspot_mcp.api.app import create_app, log_routes

    app = create_app(config)
    log_routes(config.http.host, config.http.port)
    uvicorn.run(
        app,
        host=config.http.host,
        port=config.http.port,
        log_level=config.logging.level.lower(),
    )


# ── CLI group ────────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hubspot-mcp")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """hubspot-mcp - HubSpot CRM tools over MCP stdio and HTTP.

    Without a subcommand, starts the transport chosen by MODE
    (stdio by default).
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        config = _load_config(config_path)
        if config.mode == "http":
            _run_http(config)
        else:
            asyncio.run(_run_stdio(config))


# ── stdio ────────────────────────────────────────────────────────


@cli.command()
@click.pass_context
def stdio(ctx: click.Context) -> None:
    """Start the MCP server on stdin/stdout."""
    config = _load_config(ctx.obj["config_path"])
    asyncio.run(_run_stdio(config))


# ── serve ────────────────────────────────────────────────────────


@cli.command()
@click.option("--host", default=None, help="Host to bind to (overrides config).")
@click.option(
    "--port", type=int, default=None, help="Port to bind to (overrides config)."
)
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the HTTP server with SSE streaming."""
    http: dict[str, Any] = {}
    if host is not None:
        http["host"] = host
    if port is not None:
        http["port"] = port
    config = _load_config(ctx.obj["config_path"], {"http": http} if http else None)
    _run_http(config)


# ── tools ────────────────────────────────────────────────────────


@cli.command()
def tools() -> None:
    """List the available tools."""
    from hubspot_mcp.tools.registry import default_registry

    for definition in default_registry().list():
        click.echo(f"{definition.name}: {definition.description}")

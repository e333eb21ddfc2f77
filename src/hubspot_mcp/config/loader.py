"""Configuration loading: TOML files, env var overrides, merge logic.

Discovery order (later overrides earlier):
    1. Built-in defaults (Pydantic model defaults)
    2. User config: ``~/.config/hubspot-mcp/config.toml``
    3. Project-local config: ``./hubspot-mcp.toml``
    4. ``$HUBSPOT_MCP_CONFIG`` environment variable (explicit path)
    5. Explicit ``path`` argument
    6. Environment variables: ``MODE``, ``HTTP_PORT`` and the API key
       variable named by ``hubspot.api_key_env`` (``HUBSPOT_API_KEY``)
    7. Programmatic overrides (passed to ``load_config``)

The result is frozen; it is built once at startup and handed to the
client, dispatcher and transports.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from hubspot_mcp.core.errors import ConfigError

from .schema import HubSpotConfig, ServerConfig


def _config_files(path: str | Path | None) -> list[Path]:
    """Return the config files to merge, lowest priority first.

    The user and project files are optional. A file named by
    ``$HUBSPOT_MCP_CONFIG`` or by ``path`` must exist.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    config_home = Path(xdg) if xdg else Path.home() / ".config"
    optional = (
        config_home / "hubspot-mcp" / "config.toml",
        Path.cwd() / "hubspot-mcp.toml",
    )
    files = [p for p in optional if p.is_file()]

    named = (
        (
            "HUBSPOT_MCP_CONFIG points to non-existent file",
            os.environ.get("HUBSPOT_MCP_CONFIG"),
        ),
        ("Config file not found", path),
    )
    for problem, name in named:
        if name is None or name == "":
            continue
        candidate = Path(name)
        if not candidate.is_file():
            msg = f"{problem}: {name}"
            raise ConfigError(msg)
        files.append(candidate)

    return files


def _parse_file(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigError(msg) from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated by ``override``; nested tables merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged


def _env_overrides(merged: dict[str, Any]) -> dict[str, Any]:
    """Collect overrides from environment variables."""
    env: dict[str, Any] = {}

    mode = os.environ.get("MODE")
    if mode:
        env["mode"] = mode

    port = os.environ.get("HTTP_PORT")
    if port:
        env["http"] = {"port": port}

    hubspot = merged.get("hubspot", {})
    key_env = hubspot.get("api_key_env") or HubSpotConfig().api_key_env
    if hubspot.get("api_key") is None:
        api_key = os.environ.get(key_env)
        if api_key:
            env["hubspot"] = {"api_key": api_key}

    return env


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    *,
    require_api_key: bool = True,
) -> ServerConfig:
    """Load and validate configuration.

    Args:
        path: Explicit config file path (highest file priority).
        overrides: Dict of overrides merged last (highest overall priority).
        require_api_key: Fail when no HubSpot API key can be resolved.

    Returns:
        Validated, frozen ServerConfig instance.

    Raises:
        ConfigError: On invalid TOML, missing files, validation failure,
            or a missing API key when one is required.
    """
    merged: dict[str, Any] = {}

    for config_file in _config_files(path):
        merged = _deep_merge(merged, _parse_file(config_file))

    merged = _deep_merge(merged, _env_overrides(merged))

    if overrides:
        merged = _deep_merge(merged, overrides)

    try:
        config = ServerConfig.model_validate(merged)
    except Exception as e:
        msg = f"Configuration validation failed: {e}"
        raise ConfigError(msg) from e

    if require_api_key and not config.hubspot.api_key:
        msg = f"{config.hubspot.api_key_env} environment variable is required"
        raise ConfigError(msg)

    return config

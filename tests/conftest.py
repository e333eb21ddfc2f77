"""Shared test fixtures for hubspot-mcp."""

from __future__ import annotations

from typing import Any

import pytest

from hubspot_mcp.config.schema import HubSpotConfig, ServerConfig
from hubspot_mcp.tools.dispatcher import Dispatcher
from hubspot_mcp.tools.registry import default_registry
from tests.fixtures.upstream import StubHubSpotClient


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(hubspot=HubSpotConfig(api_key="test-key"))


@pytest.fixture
def stub_client() -> StubHubSpotClient:
    return StubHubSpotClient()


@pytest.fixture
def dispatcher(stub_client: StubHubSpotClient) -> Dispatcher:
    return Dispatcher(default_registry(), stub_client)  # type: ignore[arg-type]


@pytest.fixture
def make_dispatcher() -> Any:
    """Factory fixture: dispatcher over a stub with a given response or error."""

    def _make(response: Any = None, *, error: Exception | None = None) -> Dispatcher:
        client = StubHubSpotClient(response, error=error)
        return Dispatcher(default_registry(), client)  # type: ignore[arg-type]

    return _make

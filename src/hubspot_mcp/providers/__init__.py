"""Upstream API clients."""

from hubspot_mcp.providers.hubspot import HubSpotClient

__all__ = ["HubSpotClient"]

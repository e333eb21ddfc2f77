"""hubspot-mcp: HubSpot CRM tools over MCP stdio and HTTP."""

__version__ = "1.0.0"

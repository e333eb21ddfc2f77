"""HubSpot CRM tools: schemas and handlers.

Each handler maps its arguments onto exactly one HubSpot API call and
returns the response payload untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hubspot_mcp.tools.base import ToolDefinition, ToolSpec

if TYPE_CHECKING:
    from hubspot_mcp.providers.hubspot import HubSpotClient

DEFAULT_LIMIT = 10

CONTACTS_PATH = "/crm/v3/objects/contacts"
DEALS_PATH = "/crm/v3/objects/deals"
COMPANIES_PATH = "/crm/v3/objects/companies"


def _limit(arguments: dict[str, Any]) -> Any:
    limit = arguments.get("limit")
    return DEFAULT_LIMIT if limit is None else limit


def _query_value(value: Any) -> str:
    """Render a JSON scalar the way it reads in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_contact_search(query: str, limit: Any = DEFAULT_LIMIT) -> dict[str, Any]:
    """Build the search body matching contacts whose email contains ``query``."""
    return {
        "filterGroups": [
            {
                "filters": [
                    {
                        "propertyName": "email",
                        "operator": "CONTAINS_TOKEN",
                        "value": query,
                    }
                ]
            }
        ],
        "limit": limit,
    }


# ── Handlers ─────────────────────────────────────────────────────


async def search_contacts(client: HubSpotClient, arguments: dict[str, Any]) -> Any:
    body = build_contact_search(arguments["query"], _limit(arguments))
    return await client.request(f"{CONTACTS_PATH}/search", method="POST", body=body)


async def get_contact(client: HubSpotClient, arguments: dict[str, Any]) -> Any:
    return await client.request(f"{CONTACTS_PATH}/{arguments['contactId']}")


async def create_contact(client: HubSpotClient, arguments: dict[str, Any]) -> Any:
    return await client.request(
        CONTACTS_PATH, method="POST", body={"properties": arguments}
    )


async def update_contact(client: HubSpotClient, arguments: dict[str, Any]) -> Any:
    return await client.request(
        f"{CONTACTS_PATH}/{arguments['contactId']}",
        method="PATCH",
        body={"properties": arguments["properties"]},
    )


async def list_deals(client: HubSpotClient, arguments: dict[str, Any]) -> Any:
    limit = _query_value(_limit(arguments))
    return await client.request(f"{DEALS_PATH}?limit={limit}")


async def create_deal(client: HubSpotClient, arguments: dict[str, Any]) -> Any:
    return await client.request(DEALS_PATH, method="POST", body={"properties": arguments})


async def list_companies(client: HubSpotClient, arguments: dict[str, Any]) -> Any:
    limit = _query_value(_limit(arguments))
    return await client.request(f"{COMPANIES_PATH}?limit={limit}")


async def create_company(client: HubSpotClient, arguments: dict[str, Any]) -> Any:
    return await client.request(
        COMPANIES_PATH, method="POST", body={"properties": arguments}
    )


# ── Definitions ──────────────────────────────────────────────────


def _string(description: str) -> dict[str, str]:
    return {"type": "string", "description": description}


def _limit_schema(noun: str) -> dict[str, Any]:
    return {
        "type": "number",
        "description": f"Maximum number of {noun} to return (default: {DEFAULT_LIMIT})",
        "default": DEFAULT_LIMIT,
    }


HUBSPOT_TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        ToolDefinition(
            name="search_contacts",
            description=(
                "Search for contacts in HubSpot by email, name, or other properties"
            ),
            input_schema={
                "type": "object",
                "properties": {
                    "query": _string("Search query (email, name, etc.)"),
                    "limit": _limit_schema("results"),
                },
                "required": ["query"],
            },
        ),
        search_contacts,
    ),
    ToolSpec(
        ToolDefinition(
            name="get_contact",
            description="Get a contact by ID",
            input_schema={
                "type": "object",
                "properties": {
                    "contactId": _string("The HubSpot contact ID"),
                },
                "required": ["contactId"],
            },
        ),
        get_contact,
    ),
    ToolSpec(
        ToolDefinition(
            name="create_contact",
            description="Create a new contact in HubSpot",
            input_schema={
                "type": "object",
                "properties": {
                    "email": _string("Contact email address"),
                    "firstname": _string("First name"),
                    "lastname": _string("Last name"),
                    "phone": _string("Phone number"),
                    "company": _string("Company name"),
                },
                "required": ["email"],
            },
        ),
        create_contact,
    ),
    ToolSpec(
        ToolDefinition(
            name="update_contact",
            description="Update an existing contact",
            input_schema={
                "type": "object",
                "properties": {
                    "contactId": _string("The HubSpot contact ID"),
                    "properties": {
                        "type": "object",
                        "description": (
                            "Properties to update "
                            "(e.g., {firstname: 'John', lastname: 'Doe'})"
                        ),
                    },
                },
                "required": ["contactId", "properties"],
            },
        ),
        update_contact,
    ),
    ToolSpec(
        ToolDefinition(
            name="list_deals",
            description="List deals in HubSpot",
            input_schema={
                "type": "object",
                "properties": {"limit": _limit_schema("deals")},
            },
        ),
        list_deals,
    ),
    ToolSpec(
        ToolDefinition(
            name="create_deal",
            description="Create a new deal in HubSpot",
            input_schema={
                "type": "object",
                "properties": {
                    "dealname": _string("Name of the deal"),
                    "amount": _string("Deal amount"),
                    "dealstage": _string("Deal stage ID"),
                    "pipeline": _string("Pipeline ID"),
                },
                "required": ["dealname"],
            },
        ),
        create_deal,
    ),
    ToolSpec(
        ToolDefinition(
            name="list_companies",
            description="List companies in HubSpot",
            input_schema={
                "type": "object",
                "properties": {"limit": _limit_schema("companies")},
            },
        ),
        list_companies,
    ),
    ToolSpec(
        ToolDefinition(
            name="create_company",
            description="Create a new company in HubSpot",
            input_schema={
                "type": "object",
                "properties": {
                    "name": _string("Company name"),
                    "domain": _string("Company domain"),
                    "city": _string("City"),
                    "industry": _string("Industry"),
                },
                "required": ["name"],
            },
        ),
        create_company,
    ),
)

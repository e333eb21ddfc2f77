"""Tests for argument → HubSpot request mapping of each tool handler."""

from __future__ import annotations

import pytest

from hubspot_mcp.tools import hubspot
from hubspot_mcp.tools.hubspot import build_contact_search
from tests.fixtures.upstream import StubHubSpotClient


@pytest.fixture
def client() -> StubHubSpotClient:
    return StubHubSpotClient({"results": []})


class TestSearchContacts:
    async def test_default_limit(self, client: StubHubSpotClient) -> None:
        await hubspot.search_contacts(client, {"query": "a@b.com"})  # type: ignore[arg-type]
        call = client.last_call
        assert call["path"] == "/crm/v3/objects/contacts/search"
        assert call["method"] == "POST"
        body = call["body"]
        assert body["limit"] == 10
        assert len(body["filterGroups"]) == 1
        filters = body["filterGroups"][0]["filters"]
        assert filters == [
            {"propertyName": "email", "operator": "CONTAINS_TOKEN", "value": "a@b.com"}
        ]

    async def test_explicit_limit(self, client: StubHubSpotClient) -> None:
        await hubspot.search_contacts(client, {"query": "x", "limit": 3})  # type: ignore[arg-type]
        assert client.last_call["body"]["limit"] == 3

    def test_build_contact_search(self) -> None:
        body = build_contact_search("q")
        assert body["limit"] == 10
        assert body["filterGroups"][0]["filters"][0]["value"] == "q"


class TestContacts:
    async def test_get_contact(self, client: StubHubSpotClient) -> None:
        await hubspot.get_contact(client, {"contactId": "123"})  # type: ignore[arg-type]
        assert client.last_call["path"] == "/crm/v3/objects/contacts/123"
        assert client.last_call["method"] == "GET"
        assert client.last_call["body"] is None

    async def test_create_contact_passes_all_arguments(
        self, client: StubHubSpotClient
    ) -> None:
        args = {"email": "e@x.com", "firstname": "Ada", "custom_prop": "kept"}
        await hubspot.create_contact(client, args)  # type: ignore[arg-type]
        assert client.last_call["path"] == "/crm/v3/objects/contacts"
        assert client.last_call["method"] == "POST"
        assert client.last_call["body"] == {"properties": args}

    async def test_update_contact(self, client: StubHubSpotClient) -> None:
        await hubspot.update_contact(
            client,  # type: ignore[arg-type]
            {"contactId": "9", "properties": {"lastname": "Lovelace"}},
        )
        assert client.last_call["path"] == "/crm/v3/objects/contacts/9"
        assert client.last_call["method"] == "PATCH"
        assert client.last_call["body"] == {"properties": {"lastname": "Lovelace"}}


class TestDealsAndCompanies:
    @pytest.mark.parametrize(
        ("handler", "path"),
        [
            (hubspot.list_deals, "/crm/v3/objects/deals"),
            (hubspot.list_companies, "/crm/v3/objects/companies"),
        ],
    )
    async def test_list_limits(self, client: StubHubSpotClient, handler, path) -> None:  # type: ignore[no-untyped-def]
        await handler(client, {"limit": 5})
        assert client.last_call["path"] == f"{path}?limit=5"
        assert client.last_call["method"] == "GET"
        await handler(client, {})
        assert client.last_call["path"] == f"{path}?limit=10"

    @pytest.mark.parametrize(
        ("limit", "rendered"),
        [(5.0, "5"), (2.5, "2.5"), (True, "true"), (False, "false"), ("7", "7")],
    )
    async def test_limit_rendered_as_json_scalar(
        self, client: StubHubSpotClient, limit: object, rendered: str
    ) -> None:
        await hubspot.list_deals(client, {"limit": limit})  # type: ignore[arg-type]
        assert client.last_call["path"] == f"/crm/v3/objects/deals?limit={rendered}"
        await hubspot.list_companies(client, {"limit": limit})  # type: ignore[arg-type]
        assert client.last_call["path"] == f"/crm/v3/objects/companies?limit={rendered}"

    @pytest.mark.parametrize(
        ("handler", "path", "args"),
        [
            (hubspot.create_deal, "/crm/v3/objects/deals", {"dealname": "D", "amount": "10"}),
            (hubspot.create_company, "/crm/v3/objects/companies", {"name": "Acme"}),
        ],
    )
    async def test_create(self, client: StubHubSpotClient, handler, path, args) -> None:  # type: ignore[no-untyped-def]
        result = await handler(client, args)
        assert result == {"results": []}
        assert client.last_call["path"] == path
        assert client.last_call["method"] == "POST"
        assert client.last_call["body"] == {"properties": args}

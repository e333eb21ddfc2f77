"""HubSpot CRM API client.

Thin async wrapper over ``httpx.AsyncClient`` that pins the base URL
and bearer credential and maps failures onto :class:`UpstreamError`.
No retries; the httpx default timeout applies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from hubspot_mcp.core.errors import UpstreamError

if TYPE_CHECKING:
    from hubspot_mcp.config.schema import HubSpotConfig

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.hubapi.com"


class HubSpotClient:
    """Client for the HubSpot REST API.

    Usage::

        async with HubSpotClient(api_key) as client:
            contact = await client.request("/crm/v3/objects/contacts/123")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self._base_url, transport=transport)

    @classmethod
    def from_config(
        cls,
        config: HubSpotConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HubSpotClient:
        if not config.api_key:
            msg = "HubSpotClient requires an API key"
            raise ValueError(msg)
        return cls(config.api_key, config.base_url, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> HubSpotClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self, extra: dict[str, str] | None) -> dict[str, str]:
        # Fixed headers win over caller-supplied ones, whatever their case.
        headers = {
            key: value
            for key, value in (extra or {}).items()
            if key.lower() not in ("authorization", "content-type")
        }
        headers["Authorization"] = f"Bearer {self._api_key}"
        headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request to ``base_url + path`` and return decoded JSON.

        Args:
            path: Absolute API path, including any query string.
            method: HTTP method.
            body: JSON-serializable request body, or ``None`` for none.
            headers: Extra headers. Cannot replace the auth or
                content-type headers.

        Returns:
            The decoded JSON body, or ``None`` for an empty response.

        Raises:
            UpstreamError: On a non-2xx status or a transport failure.
        """
        try:
            response = await self._client.request(
                method,
                path,
                json=body,
                headers=self._headers(headers),
            )
        except httpx.RequestError as e:
            logger.warning("HubSpot %s %s failed: %s", method, path, e)
            raise UpstreamError(None, str(e) or type(e).__name__) from e

        logger.debug("HubSpot %s %s -> %d", method, path, response.status_code)

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        if not response.content:
            return None
        return response.json()

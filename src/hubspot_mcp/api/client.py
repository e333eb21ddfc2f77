"""ToolsAPIClient -- async client for the HTTP transport."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import httpx

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@dataclass(frozen=True)
class StreamEvent:
    kind: str
    data: Any


class ToolsAPIError(Exception):
    """Error response from the HTTP transport."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


def parse_events(buffer: str) -> tuple[list[StreamEvent], str]:
    """Parse complete SSE events out of ``buffer``.

    Returns the parsed events and the unconsumed tail, which should be
    prepended to the next read.
    """
    *blocks, rest = buffer.split("\n\n")
    events: list[StreamEvent] = []
    for block in blocks:
        kind = "message"
        data_lines: list[str] = []
        for line in block.split("\n"):
            if line.startswith("event:"):
                kind = line[len("event:") :].strip()
            elif line.startswith("data:"):
                data_lines.append(line[len("data:") :].lstrip())
        if data_lines:
            events.append(StreamEvent(kind, json.loads("\n".join(data_lines))))
    return events, rest


class ToolsAPIClient:
    """Client for the hubspot-mcp HTTP transport.

    Usage::

        async with ToolsAPIClient("http://localhost:3000") as client:
            async for event in client.stream("list_deals", {"limit": 5}):
                print(event.kind, event.data)
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        *,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> ToolsAPIClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.status_code >= 400:
            try:
                body = response.json()
                detail = body.get("error") or body.get("detail") or response.text
            except Exception:
                detail = response.text
            raise ToolsAPIError(response.status_code, str(detail))

    async def health(self) -> dict[str, Any]:
        resp = await self._client.get("/health")
        self._raise_for_status(resp)
        return cast("dict[str, Any]", resp.json())

    async def list_tools(self) -> list[dict[str, Any]]:
        resp = await self._client.get("/tools")
        self._raise_for_status(resp)
        return cast("list[dict[str, Any]]", resp.json()["tools"])

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        """Run a tool synchronously and return its result payload."""
        resp = await self._client.post(f"/tools/{name}", json=arguments or {})
        self._raise_for_status(resp)
        return resp.json()["result"]

    async def stream(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> AsyncIterator[StreamEvent]:
        """Run a tool and yield its events as they arrive."""
        async with self._client.stream(
            "POST", f"/tools/{name}/execute", json=arguments or {}
        ) as resp:
            if resp.status_code >= 400:
                await resp.aread()
                self._raise_for_status(resp)
            buffer = ""
            async for text in resp.aiter_text():
                events, buffer = parse_events(buffer + text)
                for event in events:
                    yield event

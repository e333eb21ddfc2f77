"""Server-sent-event framing for streamed tool execution.

The tool result is computed in full before the first chunk goes out;
chunking and the per-chunk delay only pace delivery of the serialized
text. Both constants are part of the wire contract.
"""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from hubspot_mcp.tools.dispatcher import Dispatcher

CHUNK_SIZE = 1000
CHUNK_DELAY = 0.01  # seconds

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def dumps_compact(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def serialize_result(payload: Any) -> str:
    """Pretty-printed result text, the form that gets chunked."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def format_event(kind: str, data: Any) -> str:
    """Frame one SSE event: ``event: {kind}\\ndata: {json}\\n\\n``."""
    return f"event: {kind}\ndata: {dumps_compact(data)}\n\n"


def split_chunks(text: str, size: int = CHUNK_SIZE) -> list[str]:
    """Split ``text`` into consecutive slices of at most ``size`` characters."""
    if size <= 0:
        msg = f"chunk size must be positive, got {size}"
        raise ValueError(msg)
    return [text[i : i + size] for i in range(0, len(text), size)]


def progress(offset: int, size: int, total: int) -> float:
    """Percentage delivered once the slice starting at ``offset`` is sent."""
    if total <= 0:
        return 100.0
    return min(100.0, (offset + size) / total * 100)


async def stream_error_events(
    name: str, arguments: dict[str, Any], message: str
) -> AsyncIterator[str]:
    """Yield ``start`` then ``error`` for a call that cannot be dispatched."""
    yield format_event("start", {"tool": name, "args": arguments})
    yield format_event("error", {"error": message})


async def stream_tool_events(
    dispatcher: Dispatcher,
    name: str,
    arguments: dict[str, Any],
    *,
    chunk_size: int = CHUNK_SIZE,
    delay: float = CHUNK_DELAY,
) -> AsyncIterator[str]:
    """Yield framed events for one tool execution.

    Order is ``start``, then either ``chunk``... ``complete`` or a
    single ``error``. Nothing is yielded after the terminal event.
    """
    yield format_event("start", {"tool": name, "args": arguments})

    result = await dispatcher.dispatch(name, arguments)
    if result.is_error:
        yield format_event("error", {"error": result.error})
        return

    text = serialize_result(result.payload)
    for index, chunk in enumerate(split_chunks(text, chunk_size)):
        yield format_event(
            "chunk",
            {"data": chunk, "progress": progress(index * chunk_size, chunk_size, len(text))},
        )
        await asyncio.sleep(delay)

    yield format_event("complete", {"result": result.payload})

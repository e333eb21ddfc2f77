"""Health check endpoint."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

router = APIRouter(tags=["health"])


def _timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health")
async def health() -> dict[str, str]:
    """Always healthy; touches neither HubSpot nor the credential."""
    return {"status": "healthy", "timestamp": _timestamp()}

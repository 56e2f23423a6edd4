"""Backend endpoint detection — current session endpoint and probe diagnostics."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wayfinder.application.use_cases.endpoint_session import EndpointSession
from wayfinder.domain.value_objects.endpoint import ResolvedEndpoint
from wayfinder.infrastructure.api.dependencies import get_endpoint_session

router = APIRouter(prefix="/endpoint", tags=["endpoint"])


@router.get("")
async def get_endpoint(session: EndpointSession = Depends(get_endpoint_session)):
    """Resolved backend for this session (detected on first call)."""
    return _serialize_endpoint(await session.current())


@router.post("/refresh")
async def refresh_endpoint(session: EndpointSession = Depends(get_endpoint_session)):
    """Force a new detection pass, e.g. after switching Wi-Fi."""
    return _serialize_endpoint(await session.refresh())


def _serialize_endpoint(resolved: ResolvedEndpoint) -> dict:
    return {
        "base_url": resolved.base_url,
        "host": resolved.host,
        "port": resolved.port,
        "secure": resolved.secure,
        "fallback_used": resolved.fallback_used,
        "attempts": [
            {
                "host": a.host,
                "url": a.url,
                "ok": a.ok,
                "status_code": a.status_code,
                "failure": a.failure.value if a.failure else None,
                "elapsed_ms": a.elapsed_ms,
            }
            for a in resolved.attempts
        ],
    }

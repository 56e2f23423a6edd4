"""Health check endpoint — the liveness target clients probe during endpoint detection."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    return {"status": "OK", "service": "Wayfinder Resolver"}

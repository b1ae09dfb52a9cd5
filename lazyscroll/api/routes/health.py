"""Health route."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["system"])


@router.get("/health")
def health(request: Request) -> dict:
    """Simple liveness check, plus which delivery strategy is wired in."""
    return {"status": "ok", "strategy": request.app.state.strategy.name}

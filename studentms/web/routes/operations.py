"""Operations endpoints (liveness for load balancers and container probes)."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

operations_router = APIRouter(tags=["Operations"])


@operations_router.get("/health")
async def health() -> JSONResponse:
    """Public liveness probe. Does not contact the records backend."""
    return JSONResponse({"status": "healthy"}, headers={"Cache-Control": "no-store"})

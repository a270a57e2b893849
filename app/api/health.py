from __future__ import annotations

from fastapi import APIRouter

from app.core.contracts import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True)

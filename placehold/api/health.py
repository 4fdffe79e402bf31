"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from placehold.config import Settings
from placehold.dependencies import get_settings
from placehold.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", env=settings.placehold_env)

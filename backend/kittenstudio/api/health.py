"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from kittenstudio import __version__
from kittenstudio.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(ok=True, version=__version__)

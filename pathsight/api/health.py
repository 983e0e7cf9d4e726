"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from pathsight.engine import get_registry
from pathsight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        converters_registered=get_registry().count,
    )


@router.get("/converters")
async def converters() -> dict[str, str]:
    return {spec.name: spec.description for spec in get_registry().all()}

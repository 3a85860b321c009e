"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from feynsight import __version__
from feynsight.config import Settings
from feynsight.dependencies import get_settings
from feynsight.engine.layouts import DRAWABLE_TOPOLOGIES
from feynsight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        topologies=list(DRAWABLE_TOPOLOGIES),
        llm_configured=bool(settings.anthropic_api_key),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from feynsight.llm.prompts import get_all_templates

    return get_all_templates()

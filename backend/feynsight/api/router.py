"""Master API router. Mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from feynsight.api import diagram, health, query

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(diagram.router)
api_router.include_router(query.router)

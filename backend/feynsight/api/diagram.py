"""POST /api/diagram: draw a process description."""

from __future__ import annotations

from fastapi import APIRouter

from feynsight.engine.renderer import render_diagram
from feynsight.models.requests import DiagramRequest
from feynsight.models.responses import DiagramResponse
from feynsight.svg.parser import inspect_svg

router = APIRouter()


@router.post("/diagram", response_model=DiagramResponse)
def diagram(req: DiagramRequest) -> DiagramResponse:
    result = render_diagram(req.visual_data)
    return DiagramResponse(
        svg=result.svg,
        topology=result.topology,
        template=result.template,
        supported=result.supported,
        summary=inspect_svg(result.svg),
    )

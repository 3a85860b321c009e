"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from feynsight.models.diagram import VisualData
from feynsight.models.svg_document import DiagramSummary


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    topologies: list[str] = Field(default_factory=list)
    llm_configured: bool = False


class DiagramResponse(BaseModel):
    svg: str
    topology: str = ""
    template: str | None = None
    supported: bool = True
    summary: DiagramSummary = Field(default_factory=DiagramSummary)


class QueryResponse(BaseModel):
    task: str
    status: str = "valid"
    physics_description: str = ""
    explanation: str = ""
    visual_data: VisualData | None = None
    svg: str | None = None

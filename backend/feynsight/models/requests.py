"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from feynsight.models.diagram import VisualData


class DiagramRequest(BaseModel):
    visual_data: VisualData = Field(..., description="Process description to draw")


class QueryRequest(BaseModel):
    query: str = Field(..., description="User's physics query or process, e.g. 'e- e+ -> mu- mu+'")
    context: str | None = Field(
        default=None,
        description="Physics description from the previous turn, for follow-up questions",
    )

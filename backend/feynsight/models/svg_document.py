"""SVG element and inspected-document models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SvgElement(BaseModel):
    """One drawing primitive. Attribute order is preserved on output."""

    model_config = ConfigDict(frozen=True)

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str | None = None  # character content (text elements only)


class DiagramSummary(BaseModel):
    """What an inspected SVG document contains."""

    view_box: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    element_count: int = 0
    tag_counts: dict[str, int] = Field(default_factory=dict)
    labels: list[str] = Field(default_factory=list)
    stroke_colors: list[str] = Field(default_factory=list)
    path_length: float = 0.0
    all_finite: bool = True

"""FeynSight diagram rendering engine."""

from feynsight.engine.labels import infer_charge, normalize_label
from feynsight.engine.paths import curly_path, wavy_path
from feynsight.engine.renderer import RenderResult, render, render_diagram

__all__ = [
    "render",
    "render_diagram",
    "RenderResult",
    "normalize_label",
    "infer_charge",
    "wavy_path",
    "curly_path",
]

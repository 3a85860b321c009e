"""SVG inspector, a facade over ElementTree + svgpathtools.

Reads a rendered diagram back into a DiagramSummary: what was drawn, in which
colours, and whether every path coordinate is finite.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from collections import Counter

from svgpathtools import parse_path

from feynsight.models.svg_document import DiagramSummary

logger = logging.getLogger(__name__)

_NUMERIC_ATTRS = ("x", "y", "x1", "y1", "x2", "y2", "cx", "cy", "r")


class SvgInspectionError(ValueError):
    """Raised when a document is not a well-formed SVG root."""


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def inspect_svg(svg_text: str) -> DiagramSummary:
    """Parse an SVG document into a DiagramSummary."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as exc:
        raise SvgInspectionError(f"Malformed SVG: {exc}") from exc
    if _local_name(root.tag) != "svg":
        raise SvgInspectionError(f"Root element is <{_local_name(root.tag)}>, expected <svg>")

    summary = DiagramSummary(view_box=_view_box(root.get("viewBox", "")))
    tags: Counter[str] = Counter()
    strokes: list[str] = []

    for elem in root.iter():
        if elem is root:
            continue
        tag = _local_name(elem.tag)
        tags[tag] += 1

        stroke = elem.get("stroke")
        if stroke and stroke not in strokes:
            strokes.append(stroke)

        if tag == "text":
            summary.labels.append("".join(elem.itertext()))

        for attr in _NUMERIC_ATTRS:
            value = elem.get(attr)
            if value is not None and not _is_finite_number(value):
                summary.all_finite = False

        d = elem.get("d")
        if tag == "path" and d:
            length, finite = _measure_path(d)
            summary.path_length += length
            summary.all_finite = summary.all_finite and finite

    summary.element_count = sum(tags.values())
    summary.tag_counts = dict(tags)
    summary.stroke_colors = strokes
    logger.info(
        "Inspected SVG: %d elements, %d labels, path length %.0f",
        summary.element_count,
        len(summary.labels),
        summary.path_length,
    )
    return summary


def _view_box(value: str) -> tuple[float, float, float, float]:
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return (0.0, 0.0, 0.0, 0.0)
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        return (0.0, 0.0, 0.0, 0.0)
    return (x, y, w, h)


def _is_finite_number(value: str) -> bool:
    try:
        return math.isfinite(float(value))
    except ValueError:
        return False


def _measure_path(d: str) -> tuple[float, bool]:
    """Total length of a path and whether all of its control points are finite."""
    try:
        path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path: %s", e)
        return 0.0, False

    finite = True
    for seg in path:
        for attr in ("start", "control1", "control2", "control", "end"):
            pt = getattr(seg, attr, None)
            if pt is not None and not (math.isfinite(pt.real) and math.isfinite(pt.imag)):
                finite = False
    if not finite:
        return 0.0, False

    return float(sum(seg.length() for seg in path)), True

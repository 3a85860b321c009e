"""Drawing marks: external legs, propagators, vertices, arrowheads and labels.

Each function returns SvgElement models; nothing here knows about topologies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal, Sequence

from feynsight.engine.constants import (
    AXIS_TOLERANCE,
    CANVAS_MIDLINE_Y,
    FERMION_COLOR,
    GLUON_COLOR,
    LABEL_FONT,
    LEG_LABEL_NUDGE_Y,
    LEG_LABEL_OFFSET_X,
    LEG_LABEL_SIZE,
    NEUTRAL_CHARGE_TOLERANCE,
    PHOTON_COLOR,
    PROPAGATOR_LABEL_SIZE,
    SCALAR_DASH,
    STROKE_WIDTH,
    TEXT_COLOR,
    VERTEX_RADIUS,
    WEAK_COLOR,
)
from feynsight.engine.paths import Point, curly_path, fmt, wavy_path
from feynsight.engine.styles import StyledLeg, Stroke
from feynsight.models.diagram import PropagatorKind
from feynsight.models.svg_document import SvgElement

LabelEnd = Literal["start", "end"]


@dataclass(frozen=True)
class PropagatorMark:
    """Internal line markup plus the colour and text its annotation should use."""

    elements: list[SvgElement] = field(default_factory=list)
    color: str = TEXT_COLOR
    label: str = ""


def stroked_path(d: str, color: str, dash: str = "") -> SvgElement:
    attrs = {"d": d, "stroke": color, "stroke-width": STROKE_WIDTH, "fill": "none"}
    if dash:
        attrs["stroke-dasharray"] = dash
    return SvgElement(tag="path", attributes=attrs)


def straight_line(start: Point, end: Point, color: str, dash: str = "") -> SvgElement:
    attrs = {
        "x1": fmt(start[0]),
        "y1": fmt(start[1]),
        "x2": fmt(end[0]),
        "y2": fmt(end[1]),
        "stroke": color,
        "stroke-width": STROKE_WIDTH,
    }
    if dash:
        attrs["stroke-dasharray"] = dash
    return SvgElement(tag="line", attributes=attrs)


def wavy_line(start: Point, end: Point, color: str) -> SvgElement:
    return stroked_path(wavy_path(start, end), color)


def curly_line(start: Point, end: Point, color: str) -> SvgElement:
    return stroked_path(curly_path(start, end), color)


def arrow(start: Point, end: Point, color: str, reverse: bool = False) -> SvgElement:
    """Triangular arrowhead at the segment midpoint, pointing start → end."""
    angle = math.degrees(math.atan2(end[1] - start[1], end[0] - start[0]))
    if reverse:
        angle += 180
    mid_x = (start[0] + end[0]) / 2
    mid_y = (start[1] + end[1]) / 2
    return SvgElement(
        tag="path",
        attributes={
            "d": "M-8,-5 L8,0 L-8,5 z",
            "fill": color,
            "transform": f"translate({fmt(mid_x)},{fmt(mid_y)}) rotate({fmt(angle)})",
        },
    )


def fermion_line(start: Point, end: Point, color: str = FERMION_COLOR, reverse: bool = False) -> list[SvgElement]:
    return [straight_line(start, end, color), arrow(start, end, color, reverse)]


def label_text(
    x: float,
    y: float,
    text: str,
    *,
    fill: str = TEXT_COLOR,
    size: str = PROPAGATOR_LABEL_SIZE,
    **extra: str,
) -> SvgElement:
    """Text annotation; ``extra`` keys use underscores for dashes (text_anchor=...)."""
    attrs = {"x": fmt(x), "y": fmt(y), "fill": fill, "font-size": size}
    attrs.update({k.replace("_", "-"): v for k, v in extra.items()})
    return SvgElement(tag="text", attributes=attrs, text=text)


def render_vertex(point: Point, color: str = GLUON_COLOR) -> SvgElement:
    return SvgElement(
        tag="circle",
        attributes={"cx": fmt(point[0]), "cy": fmt(point[1]), "r": str(VERTEX_RADIUS), "fill": color},
    )


def render_leg(start: Point, end: Point, leg: StyledLeg, label_at: LabelEnd) -> list[SvgElement]:
    """One external particle line with its label beyond the free end."""
    style = leg.style
    if style.stroke is Stroke.CURLY:
        elements = [curly_line(start, end, style.color)]
    elif style.stroke is Stroke.WAVY:
        elements = [wavy_line(start, end, style.color)]
    elif style.stroke is Stroke.DASHED:
        elements = [straight_line(start, end, style.color, dash=SCALAR_DASH)]
    else:
        elements = fermion_line(start, end, style.color, reverse=leg.is_antiparticle)

    if label_at == "start":
        anchor_x, anchor_y = start[0] - LEG_LABEL_OFFSET_X, start[1]
    else:
        anchor_x, anchor_y = end[0] + LEG_LABEL_OFFSET_X, end[1]
    # Nudge follows where the segment starts, whichever end is labelled.
    nudge = LEG_LABEL_NUDGE_Y if start[1] > CANVAS_MIDLINE_Y else -LEG_LABEL_NUDGE_Y

    elements.append(
        label_text(
            anchor_x,
            anchor_y,
            leg.label,
            size=LEG_LABEL_SIZE,
            dy=str(nudge),
            font_family=LABEL_FONT,
            text_anchor="middle",
            font_weight="bold",
        )
    )
    return elements


def weak_boson_label(incoming: Sequence[StyledLeg]) -> str:
    """Z for a neutral incoming state, otherwise W⁺/W⁻ by the sign of the net charge."""
    net = sum(leg.signed_charge for leg in incoming)
    if abs(net) < NEUTRAL_CHARGE_TOLERANCE:
        return "Z"
    return "W⁺" if net > 0 else "W⁻"


def render_propagator(
    start: Point,
    end: Point,
    kind: str,
    incoming: Sequence[StyledLeg] = (),
) -> PropagatorMark:
    """Internal line between two vertices, styled by the propagator kind."""
    if kind == PropagatorKind.WEAK.value:
        return PropagatorMark([wavy_line(start, end, WEAK_COLOR)], WEAK_COLOR, weak_boson_label(incoming))
    if kind == PropagatorKind.GLUON.value:
        return PropagatorMark([curly_line(start, end, GLUON_COLOR)], GLUON_COLOR, "g")
    if kind == PropagatorKind.PHOTON.value:
        return PropagatorMark([wavy_line(start, end, PHOTON_COLOR)], PHOTON_COLOR, "γ")
    if kind == PropagatorKind.SCALAR.value:
        return PropagatorMark([straight_line(start, end, WEAK_COLOR, dash=SCALAR_DASH)], WEAK_COLOR, "H")
    # straight, none and anything unrecognised
    return PropagatorMark(fermion_line(start, end), FERMION_COLOR, "f")


def propagator_label_position(start: Point, end: Point) -> Point:
    """Midpoint nudged off the line: right of vertical, above horizontal, up-right otherwise."""
    x = (start[0] + end[0]) / 2
    y = (start[1] + end[1]) / 2
    if abs(start[0] - end[0]) < AXIS_TOLERANCE:
        return x + 30, y
    if abs(start[1] - end[1]) < AXIS_TOLERANCE:
        return x, y - 20
    return x + 20, y - 20

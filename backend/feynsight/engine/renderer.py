"""Feynman diagram renderer: VisualData in, one SVG document out.

Pure and synchronous: the same VisualData always yields byte-identical output
and no state survives a call. Short leg lists, unrecognised propagator kinds
and unsupported topologies never raise; they fall back to placeholder legs, a
plain fermion line, or an empty document respectively.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from feynsight.engine.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    FERMION_COLOR,
    GLUON_COLOR,
    LOOP_DASH,
    PHOTON_COLOR,
    PROPAGATOR_LABEL_SIZE,
    SCALAR_DASH,
    TEXT_COLOR,
    WEAK_COLOR,
)
from feynsight.engine.layouts import DECAY_CASCADE, Layout, select_template
from feynsight.engine.marks import (
    fermion_line,
    label_text,
    propagator_label_position,
    render_leg,
    render_propagator,
    render_vertex,
    straight_line,
    stroked_path,
    wavy_line,
)
from feynsight.engine.paths import fmt
from feynsight.engine.styles import ParticleStyle, StyledLeg, leg_at, style_leg
from feynsight.models.diagram import ExternalLeg, LegRole, PropagatorKind, Topology, VisualData
from feynsight.models.svg_document import SvgElement
from feynsight.svg.serializer import assemble_svg

logger = logging.getLogger(__name__)

_KNOWN_TOPOLOGIES = frozenset(t.value for t in Topology)

_VERTEX_COLOR_BY_PROPAGATOR = {
    PropagatorKind.GLUON.value: GLUON_COLOR,
    PropagatorKind.PHOTON.value: PHOTON_COLOR,
    PropagatorKind.WEAK.value: WEAK_COLOR,
    PropagatorKind.SCALAR.value: WEAK_COLOR,
}

_VERTEX_COLOR_BY_STYLE = {
    ParticleStyle.GLUON: GLUON_COLOR,
    ParticleStyle.PHOTON: PHOTON_COLOR,
    ParticleStyle.WEAK: WEAK_COLOR,
    ParticleStyle.HIGGS: WEAK_COLOR,
    ParticleStyle.FERMION: FERMION_COLOR,
}

# Outgoing quark lines in the associated (vector-boson fusion) layout.
_SPECTATOR_QUARK = style_leg(
    ExternalLeg(role=LegRole.OUTGOING, canonical_name="quark", display_label="q′")
)


@dataclass(frozen=True)
class RenderResult:
    svg: str
    topology: str
    template: str | None
    supported: bool


@dataclass(frozen=True)
class _Legs:
    incoming: list[StyledLeg]
    outgoing: list[StyledLeg]

    def slot(self, role: LegRole, index: int) -> StyledLeg:
        return leg_at(self.incoming if role == LegRole.INCOMING else self.outgoing, index)


def render(data: VisualData) -> str:
    """Draw ``data`` as an 800x500 SVG document string."""
    return render_diagram(data).svg


def render_diagram(data: VisualData) -> RenderResult:
    """Draw ``data`` and report which template, if any, was used.

    ``supported`` is False only for topology tags outside the known set, so a
    caller can tell an unsupported tag from a deliberate ``unknown``.
    """
    legs = _Legs(
        incoming=[style_leg(leg) for leg in data.incoming()],
        outgoing=[style_leg(leg) for leg in data.outgoing()],
    )
    layout = select_template(data.topology, len(legs.outgoing))
    supported = data.topology in _KNOWN_TOPOLOGIES

    if layout is None:
        if supported:
            logger.debug("No diagram for topology %r", data.topology)
        else:
            logger.warning("Unsupported topology %r, rendering empty diagram", data.topology)
        empty = assemble_svg([], CANVAS_WIDTH, CANVAS_HEIGHT)
        return RenderResult(empty, data.topology, None, supported)

    logger.debug(
        "Rendering %s template (%d in, %d out, propagator %r)",
        layout.name,
        len(legs.incoming),
        len(legs.outgoing),
        data.propagator_kind,
    )
    elements = _COMPOSERS[layout.name](layout, legs, data.propagator_kind)
    return RenderResult(
        assemble_svg(elements, CANVAS_WIDTH, CANVAS_HEIGHT), data.topology, layout.name, True
    )


def _draw_slots(layout: Layout, legs: _Legs, role: LegRole | None = None) -> list[SvgElement]:
    elements: list[SvgElement] = []
    for slot in layout.legs:
        if role is None or slot.role == role:
            elements += render_leg(slot.start, slot.end, legs.slot(slot.role, slot.index), slot.label_at)
    return elements


def _compose_contact(layout: Layout, legs: _Legs, propagator_kind: str) -> list[SvgElement]:
    # Four-point interaction: every leg meets the one vertex, no internal line.
    elements = _draw_slots(layout, legs)
    elements.append(render_vertex(layout.vertices[0], GLUON_COLOR))
    return elements


def _compose_exchange(layout: Layout, legs: _Legs, propagator_kind: str) -> list[SvgElement]:
    """s- and t-channel: two legs in, one internal line, two legs out."""
    vertex_color = _VERTEX_COLOR_BY_PROPAGATOR.get(propagator_kind, FERMION_COLOR)
    start, end = layout.propagator
    mark = render_propagator(start, end, propagator_kind, legs.incoming)

    elements = _draw_slots(layout, legs, LegRole.INCOMING)
    elements += mark.elements
    elements += [render_vertex(v, vertex_color) for v in layout.vertices]
    elements += _draw_slots(layout, legs, LegRole.OUTGOING)

    if mark.label:
        x, y = propagator_label_position(start, end)
        elements.append(
            label_text(x, y, mark.label, fill=mark.color, font_weight="bold", dominant_baseline="middle")
        )
    return elements


def _compose_decay(layout: Layout, legs: _Legs, propagator_kind: str) -> list[SvgElement]:
    """Two-body decay at a single vertex, tinted by the emitted boson if any."""
    boson = next((leg for leg in legs.outgoing if leg.is_boson), None)
    vertex_color = _VERTEX_COLOR_BY_STYLE[boson.style] if boson else FERMION_COLOR

    elements = _draw_slots(layout, legs, LegRole.INCOMING)
    elements.append(render_vertex(layout.vertices[0], vertex_color))
    for slot in layout.legs:
        if slot.role == LegRole.OUTGOING and slot.index < len(legs.outgoing):
            elements += render_leg(slot.start, slot.end, legs.outgoing[slot.index], slot.label_at)
    return elements


def _compose_decay_cascade(layout: Layout, legs: _Legs, propagator_kind: str) -> list[SvgElement]:
    """Three-body decay: the first product leaves the upper vertex, a W carries the rest."""
    upper, lower = layout.vertices
    elements = _draw_slots(layout, legs, LegRole.INCOMING)
    elements.append(render_vertex(upper, WEAK_COLOR))
    elements.append(wavy_line(*layout.propagator, WEAK_COLOR))
    elements.append(render_vertex(lower, WEAK_COLOR))
    elements += _draw_slots(layout, legs, LegRole.OUTGOING)

    # The virtual W carries whatever charge the first product does not.
    transferred = legs.slot(LegRole.INCOMING, 0).charge - legs.slot(LegRole.OUTGOING, 0).charge
    x, y = layout.anchors["boson_label"]
    elements.append(
        label_text(
            x, y, "W⁺" if transferred > 0 else "W⁻",
            fill=WEAK_COLOR, font_weight="bold", text_anchor="end",
        )
    )
    return elements


def _compose_associated(layout: Layout, legs: _Legs, propagator_kind: str) -> list[SvgElement]:
    """Vector-boson fusion: W/Z exchanged between quark lines radiates a Higgs."""
    top, bottom = layout.vertices
    higgs_start, higgs_end = layout.anchors["higgs"]

    elements = _draw_slots(layout, legs, LegRole.INCOMING)
    elements.append(wavy_line(*layout.propagator, WEAK_COLOR))
    elements += [render_vertex(top, WEAK_COLOR), render_vertex(bottom, WEAK_COLOR)]
    elements.append(render_vertex(higgs_start, TEXT_COLOR))
    for name in ("quark_top", "quark_bottom"):
        start, end = layout.anchors[name]
        elements += render_leg(start, end, _SPECTATOR_QUARK, "end")
    elements.append(straight_line(higgs_start, higgs_end, WEAK_COLOR, dash=SCALAR_DASH))

    hx, hy = layout.anchors["higgs_label"]
    elements.append(label_text(hx, hy, "H", dy="5", font_weight="bold"))
    bx, by = layout.anchors["boson_label"]
    elements.append(
        label_text(
            bx, by, "W/Z",
            fill=WEAK_COLOR, font_weight="bold", text_anchor="end", dominant_baseline="middle",
        )
    )
    return elements


def _compose_triangle(layout: Layout, legs: _Legs, propagator_kind: str) -> list[SvgElement]:
    """Gluon fusion through a closed top-quark loop."""
    corners = layout.vertices
    elements = _draw_slots(layout, legs, LegRole.INCOMING)
    for i, start in enumerate(corners):
        elements += fermion_line(start, corners[(i + 1) % len(corners)])

    elements += [render_vertex(corners[0], GLUON_COLOR), render_vertex(corners[1], GLUON_COLOR)]
    elements.append(render_vertex(corners[2], TEXT_COLOR))

    lx, ly = layout.anchors["loop_label"]
    elements.append(label_text(lx, ly, "t", size="12", text_anchor="middle"))
    higgs_start, higgs_end = layout.anchors["higgs"]
    elements.append(straight_line(higgs_start, higgs_end, WEAK_COLOR, dash=SCALAR_DASH))
    hx, hy = layout.anchors["higgs_label"]
    elements.append(label_text(hx, hy, "H", dy="5", font_weight="bold"))
    return elements


def _compose_self_energy(layout: Layout, legs: _Legs, propagator_kind: str) -> list[SvgElement]:
    """Fermion line with a virtual photon looping over it."""
    start, end = layout.propagator
    radius = fmt(layout.anchors["loop_radius"])

    elements = _draw_slots(layout, legs)
    elements += fermion_line(start, end)
    arc = f"M {fmt(start[0])} {fmt(start[1])} A {radius} {radius} 0 0 1 {fmt(end[0])} {fmt(end[1])}"
    elements.append(stroked_path(arc, PHOTON_COLOR, dash=LOOP_DASH))

    lx, ly = layout.anchors["loop_label"]
    elements.append(label_text(lx, ly, "γ", fill=PHOTON_COLOR, size=PROPAGATOR_LABEL_SIZE))
    elements += [render_vertex(v, PHOTON_COLOR) for v in layout.vertices]
    return elements


_COMPOSERS: dict[str, Callable[[Layout, _Legs, str], list[SvgElement]]] = {
    Topology.CONTACT.value: _compose_contact,
    Topology.T_CHANNEL.value: _compose_exchange,
    Topology.S_CHANNEL.value: _compose_exchange,
    Topology.DECAY.value: _compose_decay,
    DECAY_CASCADE: _compose_decay_cascade,
    Topology.ASSOCIATED.value: _compose_associated,
    Topology.TRIANGLE.value: _compose_triangle,
    Topology.SELF_ENERGY.value: _compose_self_energy,
}

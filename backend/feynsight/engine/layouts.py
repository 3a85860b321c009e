"""Hand-authored anchor layouts, one per drawable topology.

Geometry only: which leg goes where, where the vertices sit and where the
internal line runs. How each layout is drawn lives in the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from feynsight.engine.marks import LabelEnd
from feynsight.engine.paths import Point
from feynsight.models.diagram import LegRole, Topology


@dataclass(frozen=True)
class LegSlot:
    role: LegRole
    index: int  # position among legs of the same role
    start: Point
    end: Point
    label_at: LabelEnd


@dataclass(frozen=True)
class Layout:
    name: str
    legs: tuple[LegSlot, ...] = ()
    vertices: tuple[Point, ...] = ()
    propagator: tuple[Point, Point] | None = None
    # Extra named anchors used by template-specific artwork.
    anchors: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


def _in(index: int, start: Point, end: Point) -> LegSlot:
    return LegSlot(LegRole.INCOMING, index, start, end, "start")


def _out(index: int, start: Point, end: Point) -> LegSlot:
    return LegSlot(LegRole.OUTGOING, index, start, end, "end")


DECAY_CASCADE = "decay-cascade"

TEMPLATES: MappingProxyType = MappingProxyType({
    Topology.CONTACT.value: Layout(
        name=Topology.CONTACT.value,
        legs=(
            _in(0, (100, 100), (400, 250)),
            _in(1, (100, 400), (400, 250)),
            _out(0, (400, 250), (700, 100)),
            _out(1, (400, 250), (700, 400)),
        ),
        vertices=((400, 250),),
    ),
    Topology.T_CHANNEL.value: Layout(
        name=Topology.T_CHANNEL.value,
        legs=(
            _in(0, (50, 50), (350, 150)),
            _in(1, (50, 450), (350, 350)),
            _out(0, (350, 150), (750, 50)),
            _out(1, (350, 350), (750, 450)),
        ),
        vertices=((350, 150), (350, 350)),
        propagator=((350, 150), (350, 350)),
    ),
    Topology.S_CHANNEL.value: Layout(
        name=Topology.S_CHANNEL.value,
        legs=(
            _in(0, (50, 50), (300, 250)),
            _in(1, (50, 450), (300, 250)),
            _out(0, (500, 250), (750, 50)),
            _out(1, (500, 250), (750, 450)),
        ),
        vertices=((300, 250), (500, 250)),
        propagator=((300, 250), (500, 250)),
    ),
    # Two-body decay: one vertex, outgoing legs drawn only when present.
    Topology.DECAY.value: Layout(
        name=Topology.DECAY.value,
        legs=(
            _in(0, (50, 250), (350, 250)),
            _out(0, (350, 250), (650, 100)),
            _out(1, (350, 250), (650, 400)),
        ),
        vertices=((350, 250),),
    ),
    # Three-body decay through a virtual W.
    DECAY_CASCADE: Layout(
        name=DECAY_CASCADE,
        legs=(
            _in(0, (100, 150), (350, 150)),
            _out(0, (350, 150), (700, 50)),
            _out(1, (350, 350), (700, 300)),
            _out(2, (350, 350), (700, 450)),
        ),
        vertices=((350, 150), (350, 350)),
        propagator=((350, 150), (350, 350)),
        anchors=MappingProxyType({"boson_label": (320, 250)}),
    ),
    Topology.ASSOCIATED.value: Layout(
        name=Topology.ASSOCIATED.value,
        legs=(
            _in(0, (50, 50), (300, 150)),
            _in(1, (50, 450), (300, 350)),
        ),
        vertices=((300, 150), (300, 350)),
        propagator=((300, 150), (300, 350)),
        anchors=MappingProxyType({
            "quark_top": ((300, 150), (750, 50)),
            "quark_bottom": ((300, 350), (750, 450)),
            "higgs": ((300, 250), (600, 250)),
            "higgs_label": (620, 250),
            "boson_label": (270, 250),
        }),
    ),
    Topology.TRIANGLE.value: Layout(
        name=Topology.TRIANGLE.value,
        legs=(
            _in(0, (50, 100), (250, 150)),
            _in(1, (50, 400), (250, 350)),
        ),
        # Loop corners in arrow order; the last one emits the Higgs.
        vertices=((250, 150), (250, 350), (450, 250)),
        anchors=MappingProxyType({
            "loop_label": (300, 250),
            "higgs": ((450, 250), (750, 250)),
            "higgs_label": (770, 250),
        }),
    ),
    Topology.SELF_ENERGY.value: Layout(
        name=Topology.SELF_ENERGY.value,
        legs=(
            _in(0, (50, 250), (250, 250)),
            _out(0, (550, 250), (750, 250)),
        ),
        vertices=((250, 250), (550, 250)),
        propagator=((250, 250), (550, 250)),
        anchors=MappingProxyType({"loop_radius": 150, "loop_label": (400, 150)}),
    ),
})

# Topologies the renderer draws; "unknown" is deliberately absent.
DRAWABLE_TOPOLOGIES = tuple(t.value for t in Topology if t is not Topology.UNKNOWN)


def select_template(topology: str, outgoing_count: int) -> Layout | None:
    """Layout for a topology tag, applying the decay sub-rule; None draws nothing."""
    if topology == Topology.DECAY.value and outgoing_count >= 3:
        return TEMPLATES[DECAY_CASCADE]
    return TEMPLATES.get(topology)

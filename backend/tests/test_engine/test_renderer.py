"""Tests for the diagram renderer: one SVG per topology, never an exception."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from feynsight.engine.constants import FERMION_COLOR, GLUON_COLOR, PHOTON_COLOR, WEAK_COLOR
from feynsight.engine.layouts import DECAY_CASCADE, DRAWABLE_TOPOLOGIES
from feynsight.engine.renderer import render, render_diagram
from feynsight.models.diagram import ExternalLeg, LegRole, ParticleKind, VisualData
from feynsight.svg.parser import inspect_svg

NS = "{http://www.w3.org/2000/svg}"

EMPTY_SVG = '<svg viewBox="0 0 800 500" xmlns="http://www.w3.org/2000/svg">\n</svg>'


def _root(svg: str) -> ET.Element:
    root = ET.fromstring(svg)
    assert root.tag == f"{NS}svg"
    assert root.get("viewBox") == "0 0 800 500"
    return root


def _find(root: ET.Element, tag: str, **attrs: str) -> list[ET.Element]:
    return [
        e for e in root.iter(f"{NS}{tag}")
        if all(e.get(k.replace("_", "-")) == v for k, v in attrs.items())
    ]


def _texts(root: ET.Element) -> list[str]:
    return [e.text or "" for e in root.iter(f"{NS}text")]


def _with(data: VisualData, **changes) -> VisualData:
    return data.model_copy(update=changes)


def _leg(role: str, name: str, label: str, anti: bool = False) -> ExternalLeg:
    return ExternalLeg(role=LegRole(role), canonical_name=name, display_label=label, is_antiparticle=anti)


@pytest.mark.parametrize("topology", DRAWABLE_TOPOLOGIES)
def test_every_topology_renders_well_formed(ee_to_mumu, topology):
    result = render_diagram(_with(ee_to_mumu, topology=topology))
    root = _root(result.svg)
    assert len(root) > 0
    assert result.supported
    assert inspect_svg(result.svg).all_finite


def test_s_channel_photon(ee_to_mumu):
    root = _root(render(ee_to_mumu))
    propagators = _find(root, "path", stroke=PHOTON_COLOR)
    assert len(propagators) == 1
    assert propagators[0].get("d").startswith("M 300 250")

    labels = _find(root, "text", x="400", y="230")
    assert [e.text for e in labels] == ["γ"]
    assert labels[0].get("fill") == PHOTON_COLOR

    vertices = _find(root, "circle")
    assert {(v.get("cx"), v.get("cy")) for v in vertices} == {("300", "250"), ("500", "250")}
    assert all(v.get("fill") == PHOTON_COLOR for v in vertices)


def test_contact_has_single_vertex_and_no_propagator(gg_contact):
    root = _root(render(gg_contact))
    vertices = _find(root, "circle")
    assert len(vertices) == 1
    assert (vertices[0].get("cx"), vertices[0].get("cy")) == ("400", "250")
    # four curly legs and nothing else stroked
    assert len(_find(root, "path")) == 4
    assert _find(root, "line") == []
    assert _texts(root) == ["g", "g", "g", "g"]


def test_three_body_decay_positive_transfer(top_decay):
    result = render_diagram(top_decay)
    assert result.template == DECAY_CASCADE
    root = _root(result.svg)
    assert "W⁺" in _texts(root)
    assert "W⁻" not in _texts(root)
    assert len(_find(root, "path", stroke=WEAK_COLOR)) == 1


def test_three_body_decay_negative_transfer(neutral_decay):
    root = _root(render(neutral_decay))
    assert "W⁻" in _texts(root)
    assert _find(root, "text", x="320", y="250", text_anchor="end")


def test_two_body_decay_draws_only_present_legs():
    data = VisualData(
        topology="decay",
        external_legs=(
            _leg("incoming", "H", "H"),
            _leg("outgoing", "photon", "\\gamma"),
        ),
    )
    root = _root(render(data))
    assert _texts(root) == ["H", "γ"]
    vertex = _find(root, "circle")
    assert len(vertex) == 1
    assert vertex[0].get("fill") == FERMION_COLOR  # leg kind defaults to fermion


def test_two_body_decay_vertex_takes_boson_colour():
    data = VisualData(
        topology="decay",
        external_legs=(
            _leg("incoming", "u", "u"),
            _leg("outgoing", "u", "u"),
            ExternalLeg(role=LegRole.OUTGOING, kind=ParticleKind.GAUGE_BOSON, canonical_name="gluon", display_label="g"),
        ),
    )
    root = _root(render(data))
    assert _find(root, "circle", fill=GLUON_COLOR)


def test_unknown_topology_is_empty(ee_to_mumu):
    result = render_diagram(_with(ee_to_mumu, topology="unknown"))
    assert result.svg == EMPTY_SVG
    assert len(_root(result.svg)) == 0
    assert result.supported
    assert result.template is None


def test_unsupported_topology_is_flagged(ee_to_mumu, caplog):
    with caplog.at_level("WARNING", logger="feynsight.engine.renderer"):
        result = render_diagram(_with(ee_to_mumu, topology="penguin"))
    assert result.svg == EMPTY_SVG
    assert not result.supported
    assert "penguin" in caplog.text


def test_missing_legs_use_placeholders():
    root = _root(render(VisualData(topology="s-channel", propagator_kind="gluon")))
    assert _texts(root).count("?") == 4
    assert "g" in _texts(root)


def test_unrecognised_propagator_is_fermion_line(ee_to_mumu):
    root = _root(render(_with(ee_to_mumu, propagator_kind="graviton")))
    assert "f" in _texts(root)
    assert _find(root, "line", x1="300", y1="250", x2="500", y2="250")


def test_t_channel_gluon_label_right_of_line(ee_to_mumu):
    root = _root(render(_with(ee_to_mumu, topology="t-channel", propagator_kind="gluon")))
    assert len(_find(root, "path", stroke=GLUON_COLOR)) == 1
    assert [e.text for e in _find(root, "text", x="380", y="250")] == ["g"]


@pytest.mark.parametrize(
    "incoming, label",
    [
        ((_leg("incoming", "u", "u"), _leg("incoming", "d", "\\bar{d}", anti=True)), "W⁺"),
        ((_leg("incoming", "e-", "e^-"), _leg("incoming", "nu_e", "\\bar{\\nu}_e", anti=True)), "W⁻"),
        ((_leg("incoming", "nu_e", "\\nu_e"), _leg("incoming", "nu_e", "\\bar{\\nu}_e", anti=True)), "Z"),
    ],
)
def test_weak_propagator_label_from_net_charge(incoming, label):
    data = VisualData(
        topology="s-channel",
        propagator_kind="weak",
        external_legs=incoming + (_leg("outgoing", "mu-", "mu-"), _leg("outgoing", "nu_mu", "\\nu_\\mu")),
    )
    root = _root(render(data))
    assert [e.text for e in _find(root, "text", x="400", y="230")] == [label]


def test_leg_label_placement(ee_to_mumu):
    root = _root(render(ee_to_mumu))
    electron = _find(root, "text", x="20", y="50")
    assert [e.text for e in electron] == ["e⁻"]
    assert electron[0].get("dy") == "-10"
    muon = _find(root, "text", x="780", y="450")
    assert [e.text for e in muon] == ["μ⁺"]
    # outgoing legs start at the vertex on the midline
    assert muon[0].get("dy") == "-10"
    positron = _find(root, "text", x="20", y="450")
    assert positron[0].get("dy") == "10"


@pytest.mark.parametrize(
    "topology, x, y",
    [("s-channel", "780", "450"), ("contact", "730", "400"), ("decay", "680", "400")],
)
def test_lower_outgoing_label_nudged_up(ee_to_mumu, topology, x, y):
    root = _root(render(_with(ee_to_mumu, topology=topology)))
    labels = _find(root, "text", x=x, y=y)
    assert [e.get("dy") for e in labels] == ["-10"]


def test_antiparticle_arrow_reversed(ee_to_mumu):
    root = _root(render(ee_to_mumu))
    transforms = [e.get("transform") for e in root.iter(f"{NS}path") if e.get("transform")]
    assert "translate(175,150) rotate(38.66)" in transforms
    # e+ runs against the line direction
    assert "translate(175,350) rotate(141.34)" in transforms
    assert "translate(175,350) rotate(-38.66)" not in transforms


def test_triangle_loop(gg_to_h):
    root = _root(render(gg_to_h))
    texts = _texts(root)
    assert "t" in texts and "H" in texts
    assert len(_find(root, "line", stroke=FERMION_COLOR)) == 3
    assert len(_find(root, "line", stroke_dasharray="6,4")) == 1


def test_self_energy_arc(ee_to_mumu):
    root = _root(render(_with(ee_to_mumu, topology="self-energy")))
    arcs = [e for e in _find(root, "path", stroke=PHOTON_COLOR) if " A 150 150 " in e.get("d")]
    assert len(arcs) == 1
    assert arcs[0].get("stroke-dasharray") == "5,3"


def test_associated_spectator_quarks(ee_to_mumu):
    root = _root(render(_with(ee_to_mumu, topology="associated")))
    texts = _texts(root)
    assert texts.count("q′") == 2
    assert "W/Z" in texts and "H" in texts


def test_render_is_idempotent(ee_to_mumu, top_decay):
    for data in (ee_to_mumu, top_decay):
        assert render(data) == render(data)

"""Shared test fixtures."""

from __future__ import annotations

import pytest

from feynsight.config import settings
from feynsight.models.diagram import ExternalLeg, LegRole, ParticleKind, VisualData


def leg(role: str, name: str, label: str | None = None, kind: str = "fermion", anti: bool = False) -> ExternalLeg:
    return ExternalLeg(
        role=LegRole(role),
        kind=ParticleKind(kind),
        is_antiparticle=anti,
        canonical_name=name,
        display_label=name if label is None else label,
    )


# e- e+ -> mu- mu+ through a virtual photon
EE_TO_MUMU = VisualData(
    topology="s-channel",
    propagator_kind="photon",
    external_legs=(
        leg("incoming", "e-", "e^-"),
        leg("incoming", "e+", "e^+", anti=True),
        leg("outgoing", "mu-", "\\mu^-"),
        leg("outgoing", "mu+", "\\mu^+", anti=True),
    ),
)

# g g -> g g as a four-point vertex
GG_CONTACT = VisualData(
    topology="contact",
    propagator_kind="none",
    external_legs=(
        leg("incoming", "gluon", "g", kind="gauge_boson"),
        leg("incoming", "gluon", "g", kind="gauge_boson"),
        leg("outgoing", "gluon", "g", kind="gauge_boson"),
        leg("outgoing", "gluon", "g", kind="gauge_boson"),
    ),
)

# t -> b e+ nu_e: +1 in, first product -1
TOP_DECAY = VisualData(
    topology="decay",
    propagator_kind="weak",
    external_legs=(
        leg("incoming", "t"),
        leg("outgoing", "b"),
        leg("outgoing", "e+", "e^+", anti=True),
        leg("outgoing", "nu_e", "\\nu_e"),
    ),
)

# neutral in, first product +1
NEUTRAL_DECAY = VisualData(
    topology="decay",
    propagator_kind="weak",
    external_legs=(
        leg("incoming", "X", "X^0"),
        leg("outgoing", "e+", "e^+", anti=True),
        leg("outgoing", "e-", "e^-"),
        leg("outgoing", "nu_e", "\\bar{\\nu}_e", anti=True),
    ),
)

GG_TO_H = VisualData(
    topology="triangle",
    propagator_kind="none",
    external_legs=(
        leg("incoming", "gluon", "g", kind="gauge_boson"),
        leg("incoming", "gluon", "g", kind="gauge_boson"),
        leg("outgoing", "H", "H", kind="scalar"),
    ),
)


@pytest.fixture
def ee_to_mumu() -> VisualData:
    return EE_TO_MUMU


@pytest.fixture
def gg_contact() -> VisualData:
    return GG_CONTACT


@pytest.fixture
def top_decay() -> VisualData:
    return TOP_DECAY


@pytest.fixture
def neutral_decay() -> VisualData:
    return NEUTRAL_DECAY


@pytest.fixture
def gg_to_h() -> VisualData:
    return GG_TO_H


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Tests never reach a real model; agents run in local mode."""
    monkeypatch.setattr(settings, "anthropic_api_key", "")

"""Deterministic stand-in for the theorist agent.

Used when no model is configured or the model is unavailable: parses a process
written as ``a b -> c d`` and guesses a topology from the particle count.
"""

from __future__ import annotations

import re

from feynsight.engine.labels import COMBINING_OVERLINE
from feynsight.models.diagram import (
    ExternalLeg,
    LegRole,
    ParticleKind,
    PropagatorKind,
    TheoristResult,
    Topology,
    VisualData,
)

LOCAL_DESCRIPTION = "Running in local mode (model unavailable). Approximated physics topology."

_ARROW_RE = re.compile(r"\\to|->|→| to ")
_ANTI_PREFIX_RE = re.compile(r"^\\bar\s?|^anti-")
_BAR_SPACE_RE = re.compile(r"\\bar\s+")

_PARTICLE_MAP = {
    "\\gamma": "photon", "gamma": "photon", "γ": "photon", "photon": "photon",
    "g": "gluon", "gluon": "gluon",
    "e": "e-", "e-": "e-", "e+": "e+",
    "mu": "mu-", "mu-": "mu-", "mu+": "mu+",
    "tau": "tau-", "tau-": "tau-", "tau+": "tau+",
    "u": "u", "d": "d", "s": "s", "c": "c", "b": "b", "t": "t",
    "w": "W", "w+": "W+", "w-": "W-", "z": "Z",
    "h": "H", "higgs": "H",
}

# Charge conjugates that are written with a sign rather than an anti- prefix.
_CONJUGATES = {
    "e-": "e+", "e+": "e-",
    "mu-": "mu+", "mu+": "mu-",
    "tau-": "tau+", "tau+": "tau-",
    "W+": "W-", "W-": "W+",
}

_GAUGE_BOSONS = frozenset({"gluon", "photon", "W", "W+", "W-", "Z"})
_POSITIVE_LEPTONS = frozenset({"e+", "mu+", "tau+"})

_DISPLAY = {
    "photon": "γ",
    "gluon": "g",
    "e-": "e⁻", "e+": "e⁺",
    "mu-": "μ⁻", "mu+": "μ⁺",
    "tau-": "τ⁻", "tau+": "τ⁺",
    "W+": "W⁺", "W-": "W⁻",
}


def normalize_token(token: str) -> str:
    """Canonical particle name for one query token."""
    name = token.replace("{", "").replace("}", "")
    is_anti = bool(_ANTI_PREFIX_RE.match(name))
    if is_anti:
        name = _ANTI_PREFIX_RE.sub("", name)
    name = _PARTICLE_MAP.get(name, name)
    if not is_anti:
        return name
    if name in _CONJUGATES:
        return _CONJUGATES[name]
    if name.startswith("anti-") or name in _GAUGE_BOSONS or name == "H":
        return name
    return f"anti-{name}"


def leg_for(name: str, role: LegRole) -> ExternalLeg:
    core = name.removeprefix("anti-")
    if core in _GAUGE_BOSONS:
        kind = ParticleKind.GAUGE_BOSON
    elif core == "H":
        kind = ParticleKind.SCALAR
    else:
        kind = ParticleKind.FERMION

    if name in _DISPLAY:
        label = _DISPLAY[name]
    elif name.startswith("anti-"):
        label = f"{core}{COMBINING_OVERLINE}"
    else:
        label = name

    return ExternalLeg(
        role=role,
        kind=kind,
        is_antiparticle=name.startswith("anti-") or name in _POSITIVE_LEPTONS,
        canonical_name=name,
        display_label=label,
    )


def run_local_theorist(query: str) -> TheoristResult:
    """Approximate VisualData for ``query`` without any remote call."""
    text = _BAR_SPACE_RE.sub(r"\\bar", query.lower())
    sides = _ARROW_RE.sub(" TO ", text).split(" TO ")
    incoming = [normalize_token(t) for t in sides[0].split()] if sides else []
    outgoing = [normalize_token(t) for t in sides[1].split()] if len(sides) > 1 else []

    legs = [leg_for(n, LegRole.INCOMING) for n in incoming]
    legs += [leg_for(n, LegRole.OUTGOING) for n in outgoing]

    topology = Topology.DECAY if len(incoming) == 1 else Topology.S_CHANNEL
    return TheoristResult(
        status="valid",
        physics_description=LOCAL_DESCRIPTION,
        visual_data=VisualData(
            topology=topology.value,
            propagator_kind=PropagatorKind.STRAIGHT.value,
            incoming_names=tuple(incoming),
            outgoing_names=tuple(outgoing),
            external_legs=tuple(legs),
        ),
    )

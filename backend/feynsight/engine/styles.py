"""Particle line styles, resolved once per leg.

Style dispatch is driven by the canonical name only; the leg's kind does not
change how it is drawn.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from feynsight.engine.constants import FERMION_COLOR, GLUON_COLOR, PHOTON_COLOR, WEAK_COLOR
from feynsight.engine.labels import infer_charge, normalize_label
from feynsight.models.diagram import ExternalLeg, LegRole, ParticleKind


class Stroke(enum.Enum):
    CURLY = "curly"
    WAVY = "wavy"
    DASHED = "dashed"
    ARROW = "arrow"  # straight line with a mid-segment arrowhead


class ParticleStyle(enum.Enum):
    GLUON = (Stroke.CURLY, GLUON_COLOR)
    PHOTON = (Stroke.WAVY, PHOTON_COLOR)
    WEAK = (Stroke.WAVY, WEAK_COLOR)
    HIGGS = (Stroke.DASHED, WEAK_COLOR)
    FERMION = (Stroke.ARROW, FERMION_COLOR)

    def __init__(self, stroke: Stroke, color: str) -> None:
        self.stroke = stroke
        self.color = color


def resolve_style(canonical_name: str) -> ParticleStyle:
    """Map a canonical particle name to its line style (first match wins)."""
    name = canonical_name
    if name in ("gluon", "g"):
        return ParticleStyle.GLUON
    if name in ("photon", "gamma"):
        return ParticleStyle.PHOTON
    if "W" in name or "Z" in name:
        return ParticleStyle.WEAK
    if "Higgs" in name or name == "H":
        return ParticleStyle.HIGGS
    return ParticleStyle.FERMION


@dataclass(frozen=True)
class StyledLeg:
    """An external leg with its style, display label and charge worked out."""

    leg: ExternalLeg
    style: ParticleStyle
    label: str
    charge: int

    @property
    def is_antiparticle(self) -> bool:
        return self.leg.is_antiparticle

    @property
    def is_boson(self) -> bool:
        return self.leg.kind in (ParticleKind.GAUGE_BOSON, ParticleKind.SCALAR)

    @property
    def signed_charge(self) -> int:
        """Charge with antiparticles counted negated."""
        return -self.charge if self.leg.is_antiparticle else self.charge


def style_leg(leg: ExternalLeg) -> StyledLeg:
    label = normalize_label(leg.display_label or "?")
    return StyledLeg(
        leg=leg,
        style=resolve_style(leg.canonical_name),
        label=label,
        charge=infer_charge(label, leg.canonical_name),
    )


PLACEHOLDER_LEG = ExternalLeg(role=LegRole.INCOMING, display_label="?")
PLACEHOLDER = style_leg(PLACEHOLDER_LEG)


def leg_at(legs: Sequence[StyledLeg], index: int) -> StyledLeg:
    """Leg at ``index``, or the placeholder fermion leg when the list is short."""
    if 0 <= index < len(legs):
        return legs[index]
    return PLACEHOLDER

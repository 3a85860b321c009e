"""Diagram input model: the structured process description handed to the renderer."""

from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LegRole(str, enum.Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"


class ParticleKind(str, enum.Enum):
    FERMION = "fermion"
    GAUGE_BOSON = "gauge_boson"
    SCALAR = "scalar"


class Topology(str, enum.Enum):
    DECAY = "decay"
    S_CHANNEL = "s-channel"
    T_CHANNEL = "t-channel"
    CONTACT = "contact"
    ASSOCIATED = "associated"
    SELF_ENERGY = "self-energy"
    TRIANGLE = "triangle"
    UNKNOWN = "unknown"


class PropagatorKind(str, enum.Enum):
    GLUON = "gluon"
    PHOTON = "photon"
    WEAK = "weak"
    SCALAR = "scalar"
    STRAIGHT = "straight"
    NONE = "none"


# Names that the legacy name lists promote to gauge bosons.
_LEGACY_BOSON_NAMES = frozenset({"gluon", "photon"})


class ExternalLeg(BaseModel):
    """One particle entering or leaving the interaction."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role: LegRole
    kind: ParticleKind = Field(default=ParticleKind.FERMION, alias="type")
    is_antiparticle: bool = Field(default=False, alias="isAntiparticle")
    canonical_name: str = Field(default="", alias="name")  # e.g. "gluon", "u", "e-"
    display_label: str = Field(default="", alias="displayLabel")  # may be LaTeX-like


class VisualData(BaseModel):
    """Renderer input. Topology and propagator kind stay plain strings so
    unsupported values reach the renderer's fallback paths."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    topology: str = Topology.UNKNOWN.value
    propagator_kind: str = Field(default=PropagatorKind.STRAIGHT.value, alias="propagator_type")
    incoming_names: tuple[str, ...] = Field(default=(), alias="incoming")
    outgoing_names: tuple[str, ...] = Field(default=(), alias="outgoing")
    external_legs: tuple[ExternalLeg, ...] = ()

    def legs(self) -> tuple[ExternalLeg, ...]:
        if self.external_legs:
            return self.external_legs
        return tuple(
            [_legacy_leg(LegRole.INCOMING, n) for n in self.incoming_names]
            + [_legacy_leg(LegRole.OUTGOING, n) for n in self.outgoing_names]
        )

    def incoming(self) -> list[ExternalLeg]:
        return [leg for leg in self.legs() if leg.role == LegRole.INCOMING]

    def outgoing(self) -> list[ExternalLeg]:
        return [leg for leg in self.legs() if leg.role == LegRole.OUTGOING]


def _legacy_leg(role: LegRole, name: str) -> ExternalLeg:
    kind = ParticleKind.GAUGE_BOSON if name in _LEGACY_BOSON_NAMES else ParticleKind.FERMION
    return ExternalLeg(role=role, kind=kind, canonical_name=name, display_label=name)


class TheoristResult(BaseModel):
    """Physics validity verdict plus the visual description of the process."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["valid", "invalid"] = "valid"
    physics_description: str = ""
    visual_data: VisualData = Field(default_factory=VisualData)

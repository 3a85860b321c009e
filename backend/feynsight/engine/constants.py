"""Fixed drawing constants for the diagram renderer.

Every value here is immutable configuration, built once at import time.
"""

from __future__ import annotations

from types import MappingProxyType

# Canvas frame. Every template anchor lies inside it.
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 500
CANVAS_MIDLINE_Y = CANVAS_HEIGHT / 2

# Palette
FERMION_COLOR = "#f8fafc"
GLUON_COLOR = "#ef4444"
PHOTON_COLOR = "#3b82f6"
WEAK_COLOR = "#10b981"  # W/Z bosons and the Higgs scalar
TEXT_COLOR = "#94a3b8"

STROKE_WIDTH = "2"
SCALAR_DASH = "6,4"
LOOP_DASH = "5,3"
VERTEX_RADIUS = 5

# Wavy line: amplitude in canvas units, frequency in cycles per unit length.
WAVE_AMPLITUDE = 5.0
WAVE_FREQUENCY = 0.15
MIN_WAVE_SAMPLES = 20

# Curly line: one coil per this many units; control-point offsets either side.
CURL_PITCH = 10.0
CURL_LEAD_OFFSET = 10.0
CURL_TRAIL_OFFSET = 7.0

# Label placement heuristics (not font-metric aware).
LEG_LABEL_OFFSET_X = 30
LEG_LABEL_NUDGE_Y = 10
AXIS_TOLERANCE = 10  # |delta| below this counts as axis-aligned

LABEL_FONT = "sans-serif"
LEG_LABEL_SIZE = "14"
PROPAGATOR_LABEL_SIZE = "16"

# Electric charge table keyed by lower-cased canonical name.
CHARGE_TABLE = MappingProxyType({
    **dict.fromkeys(("p", "u", "c", "t", "w+", "w⁺", "e+", "mu+", "tau+"), 1),
    **dict.fromkeys(
        ("e", "e-", "mu", "mu-", "μ", "tau", "tau-", "τ", "d", "s", "b", "w-", "w⁻"), -1
    ),
})

# |net charge| below this labels a weak propagator as Z.
NEUTRAL_CHARGE_TOLERANCE = 0.1

"""Parametric boson line generators: sinusoidal (photon, W/Z) and coiled (gluon).

Both take two canvas points and return SVG path data. Coincident endpoints and
segments too short for a single coil degrade to a point or a straight stub so
no non-finite coordinate ever reaches the output.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from feynsight.engine.constants import (
    CURL_LEAD_OFFSET,
    CURL_PITCH,
    CURL_TRAIL_OFFSET,
    MIN_WAVE_SAMPLES,
    WAVE_AMPLITUDE,
    WAVE_FREQUENCY,
)

Point = tuple[float, float]


def fmt(value: float) -> str:
    """Compact, deterministic coordinate text: at most two decimals."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _frame(start: Point, end: Point) -> tuple[float, NDArray[np.float64], NDArray[np.float64]]:
    """Segment length, unit direction and its left-hand perpendicular."""
    delta = np.subtract(end, start, dtype=np.float64)
    distance = float(np.hypot(delta[0], delta[1]))
    if distance == 0.0:
        zero = np.zeros(2)
        return 0.0, zero, zero
    unit = delta / distance
    return distance, unit, np.array([-unit[1], unit[0]])


def wavy_sample_count(distance: float) -> int:
    return max(MIN_WAVE_SAMPLES, math.floor(distance))


def curl_count(distance: float) -> int:
    return math.floor(distance / CURL_PITCH)


def wavy_points(
    start: Point,
    end: Point,
    amplitude: float = WAVE_AMPLITUDE,
    frequency: float = WAVE_FREQUENCY,
) -> NDArray[np.float64]:
    """Sampled wave as an (N+1)x2 array, start point included."""
    distance, unit, normal = _frame(start, end)
    origin = np.asarray(start, dtype=np.float64)
    if distance == 0.0:
        return origin.reshape(1, 2)

    positions = np.linspace(0.0, distance, wavy_sample_count(distance) + 1)
    wave = amplitude * np.sin(2 * np.pi * frequency * positions)
    return origin + np.outer(positions, unit) + np.outer(wave, normal)


def wavy_path(
    start: Point,
    end: Point,
    amplitude: float = WAVE_AMPLITUDE,
    frequency: float = WAVE_FREQUENCY,
) -> str:
    pts = wavy_points(start, end, amplitude, frequency)
    d = f"M {fmt(pts[0, 0])} {fmt(pts[0, 1])}"
    for x, y in pts[1:]:
        d += f" L {fmt(x)} {fmt(y)}"
    return d


def curly_path(start: Point, end: Point) -> str:
    """Chain of cubic Béziers alternating either side of the segment."""
    distance, unit, normal = _frame(start, end)
    origin = np.asarray(start, dtype=np.float64)
    d = f"M {fmt(origin[0])} {fmt(origin[1])}"
    if distance == 0.0:
        return d

    loops = curl_count(distance)
    if loops == 0:
        return d + f" L {fmt(end[0])} {fmt(end[1])}"

    step = distance / loops
    for i in range(loops):
        t = i * step
        cp1 = origin + (t + step * 0.3) * unit + CURL_LEAD_OFFSET * normal
        cp2 = origin + (t + step * 0.7) * unit - CURL_TRAIL_OFFSET * normal
        tip = origin + (t + step) * unit
        d += (
            f" C {fmt(cp1[0])} {fmt(cp1[1])}, {fmt(cp2[0])} {fmt(cp2[1])},"
            f" {fmt(tip[0])} {fmt(tip[1])}"
        )
    return d

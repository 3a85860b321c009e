"""Tests for wavy and curly path generation."""

from __future__ import annotations

import math
import re

import pytest

from feynsight.engine.paths import curl_count, curly_path, fmt, wavy_path, wavy_points, wavy_sample_count

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?|nan|inf", re.IGNORECASE)


def _numbers(d: str) -> list[float]:
    return [float(n) for n in _NUMBER_RE.findall(d)]


@pytest.mark.parametrize("value, expected", [(1.0, "1"), (2.5, "2.5"), (3.14159, "3.14"), (-0.001, "0"), (250.0, "250")])
def test_fmt(value, expected):
    assert fmt(value) == expected


def test_wavy_sample_count():
    assert wavy_sample_count(5) == 20
    assert wavy_sample_count(200) == 200
    assert wavy_sample_count(200.9) == 200


def test_wavy_path_segment_count():
    d = wavy_path((300, 250), (500, 250))
    assert d.startswith("M 300 250")
    assert d.count(" L ") == 200


def test_wavy_path_ends_on_endpoint():
    # sin(2π · 0.15 · 200) = sin(60π) = 0
    d = wavy_path((300, 250), (500, 250))
    assert d.endswith("L 500 250")


def test_wavy_amplitude_bounded():
    pts = wavy_points((100, 100), (100, 400))
    assert pts.shape == (301, 2)
    assert abs(pts[:, 0] - 100).max() <= 5.0 + 1e-9


def test_wavy_short_segment_uses_minimum_samples():
    d = wavy_path((0, 0), (3, 4))
    assert d.count(" L ") == 20


def test_wavy_coincident_endpoints():
    assert wavy_path((400, 250), (400, 250)) == "M 400 250"


def test_curl_count():
    assert curl_count(200) == 20
    assert curl_count(9.9) == 0


def test_curly_path_loop_count():
    d = curly_path((350, 150), (350, 350))
    assert d.startswith("M 350 150")
    assert d.count(" C ") == 20
    assert d.endswith("350 350")


def test_curly_short_segment_is_straight():
    assert curly_path((0, 0), (3, 4)) == "M 0 0 L 3 4"


def test_curly_coincident_endpoints():
    assert curly_path((10, 10), (10, 10)) == "M 10 10"


@pytest.mark.parametrize(
    "start, end",
    [((0, 0), (0, 0)), ((0, 0), (1e-9, 0)), ((50, 50), (750, 450)), ((750, 450), (50, 50)), ((0, 0), (9.99, 0))],
)
def test_paths_always_finite(start, end):
    for d in (wavy_path(start, end), curly_path(start, end)):
        values = _numbers(d)
        assert values
        assert all(math.isfinite(v) for v in values)

"""Tests for the SVG inspector."""

from __future__ import annotations

import pytest

from feynsight.engine.constants import FERMION_COLOR, PHOTON_COLOR
from feynsight.engine.renderer import render
from feynsight.svg.parser import SvgInspectionError, inspect_svg

SIMPLE_SVG = '''<svg viewBox="0 0 100 50" xmlns="http://www.w3.org/2000/svg">
  <line x1="0" y1="0" x2="30" y2="40" stroke="#fff" />
  <path d="M 0 0 L 10 0" stroke="#000" />
  <text x="5" y="5">γ</text>
</svg>'''


def test_inspect_simple():
    summary = inspect_svg(SIMPLE_SVG)
    assert summary.view_box == (0.0, 0.0, 100.0, 50.0)
    assert summary.element_count == 3
    assert summary.tag_counts == {"line": 1, "path": 1, "text": 1}
    assert summary.labels == ["γ"]
    assert summary.stroke_colors == ["#fff", "#000"]
    assert summary.path_length == pytest.approx(10.0)
    assert summary.all_finite


def test_inspect_rendered_diagram(ee_to_mumu):
    summary = inspect_svg(render(ee_to_mumu))
    assert summary.view_box == (0.0, 0.0, 800.0, 500.0)
    assert summary.tag_counts["circle"] == 2
    assert "γ" in summary.labels
    assert PHOTON_COLOR in summary.stroke_colors
    assert FERMION_COLOR in summary.stroke_colors
    assert summary.path_length > 200
    assert summary.all_finite


def test_non_finite_attribute_detected():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><circle cx="nan" cy="1" r="5" /></svg>'
    assert not inspect_svg(svg).all_finite


def test_missing_view_box():
    summary = inspect_svg('<svg xmlns="http://www.w3.org/2000/svg"></svg>')
    assert summary.view_box == (0.0, 0.0, 0.0, 0.0)
    assert summary.element_count == 0


def test_malformed_svg_raises():
    with pytest.raises(SvgInspectionError):
        inspect_svg("<svg><path></svg>")


def test_wrong_root_raises():
    with pytest.raises(SvgInspectionError, match="expected <svg>"):
        inspect_svg("<html></html>")

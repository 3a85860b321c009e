"""Write SVG markup from drawing elements."""

from __future__ import annotations

from typing import Iterable
from xml.sax.saxutils import escape, quoteattr

from feynsight.models.svg_document import SvgElement

SVG_NS = "http://www.w3.org/2000/svg"


def serialize_element(elem: SvgElement) -> str:
    attr_str = " ".join(f"{k}={quoteattr(v)}" for k, v in elem.attributes.items())
    if elem.text is None:
        return f"<{elem.tag} {attr_str} />"
    return f"<{elem.tag} {attr_str}>{escape(elem.text)}</{elem.tag}>"


def assemble_svg(elements: Iterable[SvgElement], width: float, height: float) -> str:
    """One root ``<svg>`` holding every element, one per line.

    No XML declaration: the document is embedded verbatim in a page.
    """
    lines = [f'<svg viewBox="0 0 {width} {height}" xmlns="{SVG_NS}">']
    for elem in elements:
        lines.append(f"  {serialize_element(elem)}")
    lines.append("</svg>")
    return "\n".join(lines)

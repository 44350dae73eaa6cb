"""
SVG render target - mounts charts as <svg> subtrees in a Document.

The markup mirrors d3's axis conventions: a margin-shifted <g>, axis groups
with a "domain" path and one "tick" group per tick, and rect.binBar bars.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from barchart.adapters.dom.document import Document
from barchart.components.chart.models import ChartScene

SVG_NS = "http://www.w3.org/2000/svg"
TICK_SIZE = 6
TICK_PADDING = 3


def _num(value: float) -> str:
    """Compact number formatting for attributes."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _x_axis(parent: ET.Element, scene: ChartScene) -> None:
    plot_w = scene.geometry.plot_width
    axis = ET.SubElement(
        parent,
        "g",
        {"class": "x-axis", "transform": f"translate(0,{_num(scene.geometry.plot_height)})"},
    )
    ET.SubElement(
        axis, "path", {"class": "domain", "d": f"M0,{TICK_SIZE}V0H{_num(plot_w)}V{TICK_SIZE}"}
    )
    for tick in scene.x_ticks:
        g = ET.SubElement(axis, "g", {"class": "tick", "transform": f"translate({_num(tick.position)},0)"})
        ET.SubElement(g, "line", {"y2": str(TICK_SIZE)})
        text = ET.SubElement(g, "text", {"y": str(TICK_SIZE + TICK_PADDING), "dy": "0.71em"})
        text.text = tick.label


def _y_axis(parent: ET.Element, scene: ChartScene) -> None:
    plot_h = scene.geometry.plot_height
    axis = ET.SubElement(parent, "g", {"class": "y-axis"})
    ET.SubElement(
        axis, "path", {"class": "domain", "d": f"M-{TICK_SIZE},{_num(plot_h)}H0V0H-{TICK_SIZE}"}
    )
    for tick in scene.y_ticks:
        g = ET.SubElement(axis, "g", {"class": "tick", "transform": f"translate(0,{_num(tick.position)})"})
        ET.SubElement(g, "line", {"x2": str(-TICK_SIZE)})
        text = ET.SubElement(
            g, "text", {"x": str(-(TICK_SIZE + TICK_PADDING)), "dy": "0.32em", "text-anchor": "end"}
        )
        text.text = tick.label


def build_svg(scene: ChartScene) -> ET.Element:
    """Build the <svg> element for a scene."""
    m = scene.geometry.margins
    svg = ET.Element(
        "svg",
        {"xmlns": SVG_NS, "width": str(scene.width), "height": str(scene.height)},
    )
    group = ET.SubElement(svg, "g", {"transform": f"translate({m.left},{m.top})"})

    _x_axis(group, scene)
    _y_axis(group, scene)

    for bar in scene.bars:
        ET.SubElement(
            group,
            "rect",
            {
                "class": "binBar",
                "data-name": bar.name,
                "x": _num(bar.x),
                "y": _num(bar.y),
                "width": _num(bar.width),
                "height": _num(bar.height),
            },
        )

    for label in scene.labels:
        attrs = {"text-anchor": label.anchor}
        if label.rotation:
            # Rotated labels are positioned in the rotated frame
            attrs["transform"] = f"rotate({_num(label.rotation)})"
            attrs["x"] = _num(-label.y)
            attrs["y"] = _num(label.x)
        else:
            attrs["x"] = _num(label.x)
            attrs["y"] = _num(label.y)
        text = ET.SubElement(group, "text", {"class": "axis-label", **attrs})
        text.text = label.text

    return svg


class SvgRenderTarget:
    """RenderTargetPort that appends <svg> elements to Document host elements."""

    def __init__(self, document: Document) -> None:
        self._document = document

    def find_chart(self, selector: str) -> ET.Element | None:
        host = self._document.query(selector)
        if host is None:
            return None
        for child in host.children:
            if isinstance(child, ET.Element) and child.tag == "svg":
                return child
        return None

    def remove_chart(self, selector: str, mounted: object | None = None) -> bool:
        host = self._document.query(selector)
        if host is None:
            return False
        if mounted is not None and any(child is mounted for child in host.children):
            chart = mounted
        else:
            # Stale or missing handle
            chart = self.find_chart(selector)
        if chart is None:
            return False
        host.children.remove(chart)
        return True

    def mount_chart(self, selector: str, scene: ChartScene) -> ET.Element:
        host = self._document.query(selector)
        if host is None:
            raise LookupError(f"No element matches {selector}")
        svg = build_svg(scene)
        host.children.append(svg)
        return svg

    def to_markup(self, selector: str) -> str:
        """Serialise the mounted chart; empty string when nothing is mounted."""
        chart = self.find_chart(selector)
        if chart is None:
            return ""
        return ET.tostring(chart, encoding="unicode")

"""
In-memory document - headless stand-in for a browser page.

Host elements are addressed by "#id" selectors and carry a computed style
mapping, the way the chart container is queried in a browser. The viewport
height is a property of the document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from barchart.domain.geometry import parse_pixel_length


@dataclass
class HostElement:
    """A container element with a computed style and child nodes."""

    element_id: str
    style: dict[str, str] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)


class Document:
    def __init__(self, viewport_height: int = 0) -> None:
        self.viewport_height = viewport_height
        self._elements: dict[str, HostElement] = {}

    def add_element(self, element_id: str, width: str | int | None = None) -> HostElement:
        element = HostElement(element_id=element_id)
        if width is not None:
            element.style["width"] = width if isinstance(width, str) else f"{width}px"
        self._elements[element_id] = element
        return element

    def remove_element(self, element_id: str) -> None:
        self._elements.pop(element_id, None)

    def query(self, selector: str) -> HostElement | None:
        """Resolve an "#id" selector; anything else matches nothing."""
        if not selector.startswith("#"):
            return None
        return self._elements.get(selector[1:])

    def set_width(self, selector: str, width: str | int) -> None:
        element = self.query(selector)
        if element is None:
            raise LookupError(f"No element matches {selector}")
        element.style["width"] = width if isinstance(width, str) else f"{width}px"


class DocumentProbe:
    """ContainerProbePort over a Document."""

    def __init__(self, document: Document) -> None:
        self._document = document

    def get_container_width(self, selector: str) -> int:
        element = self._document.query(selector)
        if element is None:
            return 0
        return parse_pixel_length(element.style.get("width"))

    def get_viewport_height(self) -> int:
        return max(0, int(self._document.viewport_height))

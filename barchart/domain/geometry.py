"""
Chart geometry - margin convention and container measurements.

The plot area is the total canvas minus fixed margins reserved for axes and
labels. Plot dimensions never go negative; a zero-sized plot is valid but
not drawable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_LEADING_NUMBER = re.compile(r"^\s*([+-]?\d+(?:\.\d*)?|[+-]?\.\d+)")


@dataclass(frozen=True)
class Margins:
    """Pixel insets around the plot area."""

    top: int = 10
    right: int = 10
    bottom: int = 40
    left: int = 60


@dataclass(frozen=True)
class ChartGeometry:
    """Derived canvas and plot-area dimensions for one render."""

    total_width: int
    total_height: int
    margins: Margins = field(default_factory=Margins)

    @property
    def plot_width(self) -> int:
        return max(0, self.total_width - self.margins.left - self.margins.right)

    @property
    def plot_height(self) -> int:
        return max(0, self.total_height - self.margins.top - self.margins.bottom)

    @property
    def is_drawable(self) -> bool:
        return self.plot_width > 0 and self.plot_height > 0


def compute_geometry(width: int, height: int, margins: Margins | None = None) -> ChartGeometry:
    return ChartGeometry(
        total_width=max(0, int(width)),
        total_height=max(0, int(height)),
        margins=margins or Margins(),
    )


def parse_pixel_length(value: str | int | float | None) -> int:
    """
    Parse a computed CSS length such as "600px" into whole pixels.

    Mirrors parseInt semantics: units are stripped and fractions truncated.
    Anything unparseable (None, "", "auto") yields 0.
    """
    if value is None:
        return 0
    if isinstance(value, int | float):
        return max(0, int(value))

    match = _LEADING_NUMBER.match(value)
    if not match:
        return 0
    return max(0, int(float(match.group(1))))

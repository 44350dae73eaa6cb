"""
Chart component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from barchart.domain.geometry import ChartGeometry

# --- Validation Error ---


@dataclass(frozen=True)
class ChartValidationError:
    """Reason a render was skipped."""

    code: str
    message: str
    field: str | None = None


# --- Render State ---


@dataclass(frozen=True)
class RenderState:
    """
    Outcome of the last render, threaded through render and resize calls.

    last_width is the container width the chart was last drawn for;
    mounted is the chart element handle returned by the render target.
    """

    last_width: int | None = None
    mounted: object | None = None


# --- Scene Models ---


@dataclass(frozen=True)
class Bar:
    """A bar rectangle in plot-area coordinates."""

    name: str
    count: int
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Tick:
    """An axis tick: label text and offset along its axis."""

    label: str
    position: float


@dataclass(frozen=True)
class AxisLabel:
    """A static text label in plot-area coordinates."""

    text: str
    x: float
    y: float
    rotation: float = 0.0
    anchor: str = "middle"


@dataclass(frozen=True)
class ChartScene:
    """Everything a render target needs to draw one chart."""

    geometry: ChartGeometry
    bars: tuple[Bar, ...]
    x_ticks: tuple[Tick, ...]
    y_ticks: tuple[Tick, ...]
    labels: tuple[AxisLabel, ...]

    @property
    def width(self) -> int:
        return self.geometry.total_width

    @property
    def height(self) -> int:
        return self.geometry.total_height

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the scene, stable for hashing and JSON."""
        m = self.geometry.margins
        return {
            "width": self.width,
            "height": self.height,
            "margins": [m.top, m.right, m.bottom, m.left],
            "bars": [[b.name, b.count, b.x, b.y, b.width, b.height] for b in self.bars],
            "x_ticks": [[t.label, t.position] for t in self.x_ticks],
            "y_ticks": [[t.label, t.position] for t in self.y_ticks],
            "labels": [[lb.text, lb.x, lb.y, lb.rotation, lb.anchor] for lb in self.labels],
        }


# --- Input Models ---


@dataclass(frozen=True)
class MeasureInput:
    """Input for measuring the hosting container."""

    pass


@dataclass(frozen=True)
class RenderInput:
    """Input for drawing the chart."""

    data: Sequence[Any]
    state: RenderState = field(default_factory=RenderState)


@dataclass(frozen=True)
class ResizeInput:
    """Input for handling a resize event."""

    state: RenderState


# --- Output Models ---


@dataclass(frozen=True)
class MeasureOutput:
    """Measured container size in pixels."""

    width: int
    height: int


@dataclass(frozen=True)
class RenderOutput:
    """Output for a render; skipped renders leave nothing mounted."""

    state: RenderState
    scene: ChartScene | None = None
    skipped: bool = False
    errors: list[ChartValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ResizeOutput:
    """Output for a resize event; render is None when nothing was redrawn."""

    state: RenderState
    redrawn: bool
    render: RenderOutput | None = None
    errors: list[ChartValidationError] = field(default_factory=list)
    success: bool = True

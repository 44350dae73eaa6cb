"""
ChartRenderer - responsive bar chart drawing.

Turns an ordered sequence of (name, count) records plus the current
container size into a ChartScene, mounts it on a render target, and decides
whether a resize event warrants a redraw.

Key behaviors:
- Any previously mounted chart is removed before drawing (idempotent)
- Geometry follows the margin convention; zero-sized plots are skipped
- Bars grow upward: y = linear(count), height = plot_height - y
- Resize redraws only when the container width actually changed
- Nothing raises out of render/resize; failures become skipped renders
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from barchart.domain.entities import DataPoint, coerce_data_points
from barchart.domain.geometry import ChartGeometry, Margins, compute_geometry

from ._scales import BandScale, LinearScale, format_tick, tick_step
from .models import (
    AxisLabel,
    Bar,
    ChartScene,
    ChartValidationError,
    MeasureOutput,
    RenderOutput,
    RenderState,
    ResizeOutput,
    Tick,
)
from .ports import ContainerProbePort, DataSourcePort, RenderTargetPort

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class ChartConfig:
    """Chart configuration from rules."""

    selector: str = "#barchart"
    height_ratio: float = 0.5
    margins: Margins = field(default_factory=Margins)

    # Scales
    band_padding: float = 0.1
    y_tick_count: int = 10

    # Labels
    x_label: str = "Bin ID"
    y_label: str = "Count in Bin"
    x_label_offset: int = 35
    y_label_offset: int = 15


DEFAULT_CONFIG = ChartConfig()


# --- Validation ---


def validate_data(
    data: Sequence[Any],
) -> tuple[list[DataPoint], list[ChartValidationError]]:
    """Coerce raw records into DataPoints, collecting errors instead of raising."""
    try:
        points = coerce_data_points(data)
    except ValidationError as e:
        errors = [
            ChartValidationError(
                code="invalid_data",
                message=err["msg"],
                field=".".join(str(part) for part in err["loc"]) or None,
            )
            for err in e.errors()
        ]
        return [], errors

    duplicates = [name for name, n in Counter(p.name for p in points).items() if n > 1]
    if duplicates:
        logger.warning("Duplicate category names overdraw earlier bars: %s", duplicates)

    return points, []


# --- Scene Building ---


def build_scene(
    points: Sequence[DataPoint],
    geometry: ChartGeometry,
    config: ChartConfig = DEFAULT_CONFIG,
) -> ChartScene:
    """Map data onto plot-area coordinates. Pure function of its inputs."""
    plot_w = geometry.plot_width
    plot_h = geometry.plot_height

    x_scale = BandScale(
        domain=tuple(p.name for p in points),
        range_width=plot_w,
        padding=config.band_padding,
    )
    max_count = max((p.count for p in points), default=0)
    y_scale = LinearScale(domain_max=max_count, range_height=plot_h)

    bars = tuple(
        Bar(
            name=p.name,
            count=p.count,
            x=x_scale(p.name),
            y=y_scale(p.count),
            width=x_scale.bandwidth,
            height=plot_h - y_scale(p.count),
        )
        for p in points
    )

    # One tick per distinct category, in input order
    seen: dict[str, None] = dict.fromkeys(p.name for p in points)
    x_ticks = tuple(Tick(label=name, position=x_scale.center(name)) for name in seen)

    tick_values = y_scale.ticks(config.y_tick_count)
    step = tick_step(0, max_count, config.y_tick_count)
    y_ticks = tuple(Tick(label=format_tick(v, step), position=y_scale(v)) for v in tick_values)

    labels = (
        AxisLabel(
            text=config.x_label,
            x=plot_w / 2,
            y=plot_h + config.x_label_offset,
        ),
        AxisLabel(
            text=config.y_label,
            x=-geometry.margins.left + config.y_label_offset,
            y=plot_h / 2,
            rotation=-90.0,
        ),
    )

    return ChartScene(
        geometry=geometry,
        bars=bars,
        x_ticks=x_ticks,
        y_ticks=y_ticks,
        labels=labels,
    )


# --- Service ---


class ChartRenderer:
    """
    Chart renderer bound to a container probe and a render target.

    Holds no render state of its own; callers pass the RenderState returned
    by the previous call back in.
    """

    def __init__(
        self,
        probe: ContainerProbePort,
        target: RenderTargetPort,
        config: ChartConfig | None = None,
    ) -> None:
        self._probe = probe
        self._target = target
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> ChartConfig:
        return self._config

    def measure(self) -> MeasureOutput:
        """Container width and chart height; an unmounted container measures 0 wide."""
        try:
            width = int(self._probe.get_container_width(self._config.selector))
        except LookupError:
            logger.warning("Chart container %s is not mounted", self._config.selector)
            width = 0

        viewport = self._probe.get_viewport_height()
        height = int(viewport * self._config.height_ratio)
        return MeasureOutput(width=max(0, width), height=max(0, height))

    def render(self, data: Sequence[Any], state: RenderState) -> RenderOutput:
        selector = self._config.selector

        # 1. Remove existing chart
        if self._target.remove_chart(selector, state.mounted):
            logger.debug("Removed previous chart from %s", selector)

        # 2. Geometry
        size = self.measure()
        geometry = compute_geometry(size.width, size.height, self._config.margins)
        skipped_state = RenderState(last_width=size.width, mounted=None)

        if not geometry.is_drawable:
            logger.warning(
                "Skipping chart render: plot area %sx%s is empty",
                geometry.plot_width,
                geometry.plot_height,
            )
            return RenderOutput(
                state=skipped_state,
                skipped=True,
                errors=[
                    ChartValidationError(
                        code="degenerate_geometry",
                        message=(
                            f"Container {size.width}x{size.height} leaves no room "
                            "inside the margins"
                        ),
                    )
                ],
                success=False,
            )

        # 3. Data
        points, errors = validate_data(data)
        if errors:
            logger.warning("Skipping chart render: %d invalid data records", len(errors))
            return RenderOutput(state=skipped_state, skipped=True, errors=errors, success=False)

        # 4. Scales and draw calls
        scene = build_scene(points, geometry, self._config)

        # 5. Mount
        try:
            mounted = self._target.mount_chart(selector, scene)
        except LookupError:
            logger.warning("Skipping chart render: container %s not found", selector)
            return RenderOutput(
                state=skipped_state,
                skipped=True,
                errors=[
                    ChartValidationError(
                        code="container_missing",
                        message=f"Container {selector} not found",
                        field="selector",
                    )
                ],
                success=False,
            )

        logger.info(
            "Rendered %d bars at %sx%s", len(scene.bars), geometry.total_width, geometry.total_height
        )
        return RenderOutput(
            state=RenderState(last_width=size.width, mounted=mounted),
            scene=scene,
        )

    def on_resize(self, state: RenderState, source: DataSourcePort) -> ResizeOutput:
        width = self.measure().width
        if state.last_width == width:
            logger.debug("Resize ignored: width unchanged at %s", width)
            return ResizeOutput(state=state, redrawn=False)

        logger.info("Container width changed %s -> %s; redrawing", state.last_width, width)
        try:
            data = source.get_data()
        except (OSError, ValueError) as e:
            logger.warning("Resize redraw skipped: data source failed: %s", e)
            return ResizeOutput(
                state=state,
                redrawn=False,
                errors=[ChartValidationError(code="data_unavailable", message=str(e))],
                success=False,
            )

        result = self.render(data, state)
        return ResizeOutput(
            state=result.state,
            redrawn=True,
            render=result,
            errors=list(result.errors),
            success=result.success,
        )


# --- Factory ---


def create_chart_renderer(
    probe: ContainerProbePort,
    target: RenderTargetPort,
    config: ChartConfig | None = None,
) -> ChartRenderer:
    """Create a ChartRenderer."""
    return ChartRenderer(probe=probe, target=target, config=config)

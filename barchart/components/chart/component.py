"""
Chart component - responsive bar chart rendering.

Draws a bar chart for an ordered sequence of (name, count) records into
the container addressed by the configured selector, and redraws it when the
container width changes.

Invariants:
- I1: At most one chart element is mounted per container
- I2: Plot dimensions are never negative; empty plots are not drawn
- I3: Larger counts draw taller bars; an all-zero dataset draws zero-height bars
- I4: A resize with unchanged width leaves the mounted chart untouched
"""

from __future__ import annotations

from barchart.domain.geometry import Margins

from ._impl import ChartConfig, ChartRenderer
from .models import (
    MeasureInput,
    MeasureOutput,
    RenderInput,
    RenderOutput,
    ResizeInput,
    ResizeOutput,
)
from .ports import ContainerProbePort, DataSourcePort, RenderTargetPort, RulesPort


def _build_config(rules: RulesPort | None) -> ChartConfig:
    """Build chart config from rules port."""
    if rules is None:
        return ChartConfig()

    top, right, bottom, left = rules.get_margins()
    x_label, y_label = rules.get_axis_labels()
    return ChartConfig(
        selector=rules.get_selector(),
        height_ratio=rules.get_height_ratio(),
        margins=Margins(top=top, right=right, bottom=bottom, left=left),
        band_padding=rules.get_band_padding(),
        y_tick_count=rules.get_y_tick_count(),
        x_label=x_label,
        y_label=y_label,
    )


def _create_renderer(
    probe: ContainerProbePort,
    target: RenderTargetPort,
    rules: RulesPort | None,
) -> ChartRenderer:
    """Create chart renderer from ports."""
    return ChartRenderer(probe=probe, target=target, config=_build_config(rules))


# --- Component Entry Points ---


def run_measure(
    inp: MeasureInput,
    *,
    probe: ContainerProbePort,
    target: RenderTargetPort,
    rules: RulesPort | None = None,
) -> MeasureOutput:
    """
    Measure the hosting container.

    Args:
        inp: Input (empty).
        probe: Container probe port.
        target: Render target port.
        rules: Optional rules port for configuration.

    Returns:
        MeasureOutput with container width and chart height in pixels.
    """
    return _create_renderer(probe, target, rules).measure()


def run_render(
    inp: RenderInput,
    *,
    probe: ContainerProbePort,
    target: RenderTargetPort,
    rules: RulesPort | None = None,
) -> RenderOutput:
    """
    Draw the chart, replacing any chart already mounted.

    Args:
        inp: Input containing the data and the previous render state.
        probe: Container probe port.
        target: Render target port.
        rules: Optional rules port for configuration.

    Returns:
        RenderOutput with the new state and drawn scene, or a skipped render.
    """
    return _create_renderer(probe, target, rules).render(inp.data, inp.state)


def run_resize(
    inp: ResizeInput,
    *,
    probe: ContainerProbePort,
    target: RenderTargetPort,
    source: DataSourcePort,
    rules: RulesPort | None = None,
) -> ResizeOutput:
    """
    Handle a resize event.

    Redraws with freshly fetched data only when the container width differs
    from the width recorded in the input state.

    Args:
        inp: Input containing the current render state.
        probe: Container probe port.
        target: Render target port.
        source: Data source port, queried only on redraw.
        rules: Optional rules port for configuration.

    Returns:
        ResizeOutput with redrawn flag and the resulting state.
    """
    return _create_renderer(probe, target, rules).on_resize(inp.state, source)


def run(
    inp: MeasureInput | RenderInput | ResizeInput,
    *,
    probe: ContainerProbePort,
    target: RenderTargetPort,
    source: DataSourcePort | None = None,
    rules: RulesPort | None = None,
) -> MeasureOutput | RenderOutput | ResizeOutput:
    """
    Main entry point for the chart component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, MeasureInput):
        return run_measure(inp, probe=probe, target=target, rules=rules)
    elif isinstance(inp, RenderInput):
        return run_render(inp, probe=probe, target=target, rules=rules)
    elif isinstance(inp, ResizeInput):
        if source is None:
            raise ValueError("Resize handling requires a data source")
        return run_resize(inp, probe=probe, target=target, source=source, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

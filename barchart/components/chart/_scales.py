"""
Scales - map data values onto pixel coordinates.

Key behaviors:
- BandScale: ordered categories to evenly spaced bands with padding
- LinearScale: [0, max] to an inverted pixel range (SVG y grows downward)
- linear_ticks: "nice" 1/2/5 x 10^k tick values for the value axis
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


@dataclass(frozen=True)
class BandScale:
    """
    Categorical position scale over [0, range_width].

    Padding applies both between bands and at the outer edges, and the bands
    are centred in the range. Duplicate names take the slot of their last
    occurrence, so the earlier bar is overdrawn and its own slot stays empty.
    """

    domain: tuple[str, ...]
    range_width: float
    padding: float = 0.1
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {name: i for i, name in enumerate(self.domain)})

    @property
    def step(self) -> float:
        n = len(self.domain)
        return self.range_width / max(1.0, n - self.padding + self.padding * 2)

    @property
    def bandwidth(self) -> float:
        return self.step * (1 - self.padding)

    @property
    def offset(self) -> float:
        n = len(self.domain)
        return (self.range_width - self.step * (n - self.padding)) * 0.5

    def __call__(self, name: str) -> float:
        try:
            index = self._index[name]
        except KeyError:
            raise KeyError(f"Unknown category: {name!r}") from None
        return self.offset + self.step * index

    def center(self, name: str) -> float:
        return self(name) + self.bandwidth / 2


@dataclass(frozen=True)
class LinearScale:
    """
    Maps [0, domain_max] onto [range_height, 0].

    A degenerate domain (domain_max <= 0) maps every value to range_height
    instead of dividing by zero.
    """

    domain_max: float
    range_height: float

    @property
    def is_degenerate(self) -> bool:
        return self.domain_max <= 0

    def __call__(self, value: float) -> float:
        if self.is_degenerate:
            return self.range_height
        return self.range_height - (value / self.domain_max) * self.range_height

    def ticks(self, count: int = 10) -> list[float]:
        return linear_ticks(0, max(0.0, self.domain_max), count)


def tick_step(start: float, stop: float, count: int) -> float:
    """Step between nice ticks covering [start, stop] in roughly count intervals."""
    raw = abs(stop - start) / max(1, count)
    if raw == 0:
        return 0.0
    power = math.floor(math.log10(raw))
    base = 10.0**power
    error = raw / base
    if error >= _E10:
        base *= 10
    elif error >= _E5:
        base *= 5
    elif error >= _E2:
        base *= 2
    return base


def linear_ticks(start: float, stop: float, count: int = 10) -> list[float]:
    if count <= 0:
        return []
    if start == stop:
        return [float(start)]

    lo, hi = min(start, stop), max(start, stop)
    step = tick_step(lo, hi, count)
    first = math.ceil(lo / step - 1e-9)
    last = math.floor(hi / step + 1e-9)
    values = [round(i * step, 12) for i in range(first, last + 1)]
    return values if start < stop else values[::-1]


def format_tick(value: float, step: float) -> str:
    """Format a tick with thousands separators and just enough decimals for step."""
    decimals = 0
    if 0 < step < 1:
        decimals = max(0, -math.floor(math.log10(step) + 1e-9))
    return f"{value:,.{decimals}f}"

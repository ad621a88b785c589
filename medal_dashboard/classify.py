"""
Map color scale.

Threshold classes over the global quantile breakpoints when there are any;
otherwise a continuous sqrt scale over [0, max_total]. Either way the domain
comes from GlobalStats, so colors do not shift with the selected filter.
"""

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Optional, Sequence

from plotly.colors import sample_colorscale

from .aggregate import AggregatedCountry
from .config import FALLBACK_SCHEME
from .stats import GlobalStats


@dataclass(frozen=True)
class LegendEntry:
    color: str
    lower: int
    upper: Optional[int]  # None: open-ended top class


@dataclass(frozen=True)
class MapRow:
    country: str
    gold: int
    silver: int
    bronze: int
    total: int
    color: str
    status: str


class ColorScale:
    def __init__(self, stats: GlobalStats, scheme: str = FALLBACK_SCHEME):
        self.stats = stats
        self.scheme = scheme

    @property
    def is_threshold(self) -> bool:
        return len(self.stats.breakpoints) > 0

    def class_index(self, total) -> Optional[int]:
        """Number of breakpoints <= total, or None on the continuous fallback."""
        if not self.is_threshold:
            return None
        return bisect_right(self.stats.breakpoints, total)

    def position(self, total) -> float:
        """Clamped sqrt position of ``total`` in [0, 1] on the continuous scale."""
        hi = self.stats.max_total
        if hi <= 0:
            return 0.0
        v = min(max(total, 0), hi)
        return math.sqrt(v) / math.sqrt(hi)

    def __call__(self, total) -> str:
        if self.is_threshold:
            return self.stats.class_colors[self.class_index(total)]
        return sample_colorscale(self.scheme, [self.position(total)])[0]

    def legend(self, ticks: int = 6) -> List[LegendEntry]:
        if self.is_threshold:
            bps = self.stats.breakpoints
            bounds = [0] + list(bps)
            return [LegendEntry(self.stats.class_colors[k], bounds[k], bps[k] if k < len(bps) else None)
                    for k in range(len(bps) + 1)]
        if ticks < 2:
            raise ValueError(f"ticks must be >= 2, got {ticks}")
        hi = self.stats.max_total
        values = sorted({round(hi * i / (ticks - 1)) for i in range(ticks)})
        return [LegendEntry(self(v), v, v) for v in values]


def build_color_scale(stats: GlobalStats) -> ColorScale:
    return ColorScale(stats)


def medal_status(c: AggregatedCountry) -> str:
    return f"Gold: {c.gold}, Silver: {c.silver}, Bronze: {c.bronze}, Total: {c.total}"


def classify_countries(aggregated: Sequence[AggregatedCountry], scale: ColorScale) -> List[MapRow]:
    """Map rows keyed by country name, ready for a choropleth renderer."""
    return [MapRow(c.country, c.gold, c.silver, c.bronze, c.total, scale(c.total), medal_status(c))
            for c in aggregated]

"""
Global statistics over the whole medal table.

Computed once per dataset load so the map legend keeps a fixed domain while
the user moves through years and seasons.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .config import YLORRD_6
from .records import MedalRecord, medal_frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlobalStats:
    max_total: int
    breakpoints: Tuple[int, ...]
    class_colors: Tuple[str, ...]


def group_totals(records: Sequence[MedalRecord]) -> np.ndarray:
    """Sorted medal totals, one per (year, season, country) group."""
    df = medal_frame(records)
    totals = df.groupby(["year", "season", "country"], sort=False)["total"].sum()
    return np.sort(totals.to_numpy(dtype="int64"))


def quantile_breakpoints(totals: np.ndarray, num_classes: int) -> Tuple[int, ...]:
    """Nearest-rank breakpoints at i/num_classes, each strictly above the last.

    ``totals`` must be sorted ascending. The smallest total seeds the
    comparison, so a boundary equal to the minimum is dropped as well.
    """
    if len(totals) == 0:
        return ()
    n = len(totals) - 1
    out = []
    prev = totals[0]
    for i in range(1, num_classes):
        v = totals[int(np.floor(i / num_classes * n))]
        if v > prev:
            out.append(int(v))
            prev = v
    return tuple(out)


def class_colors(num_classes: int, palette: Sequence[str] = YLORRD_6) -> Tuple[str, ...]:
    # nearest stop, no interpolation
    last = len(palette) - 1
    span = max(1, num_classes - 1)
    return tuple(palette[int(np.floor(i / span * last))] for i in range(num_classes))


def compute_global_stats(records: Sequence[MedalRecord], num_classes: int = 6) -> GlobalStats:
    if num_classes < 2:
        raise ValueError(f"num_classes must be >= 2, got {num_classes}")
    if not records:
        return GlobalStats(0, (), ())

    totals = group_totals(records)
    stats = GlobalStats(
        max_total=int(totals[-1]),
        breakpoints=quantile_breakpoints(totals, num_classes),
        class_colors=class_colors(num_classes),
    )
    logger.info("Global stats over %d groups: max=%d, breakpoints=%s",
                len(totals), stats.max_total, list(stats.breakpoints))
    return stats

"""
Dashboard session: load once, recompute on every filter change.

The record store and global stats are fixed for the session. Each call to
``select`` builds a fresh ``Selection`` and replaces the previous one.
"""

import copy
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .aggregate import AggregatedCountry, aggregate_by_country
from .classify import ColorScale, MapRow, build_color_scale, classify_countries
from .config import DashboardConfig
from .per_capita import PerCapitaRecord, compute_per_capita, top_per_capita
from .records import DatasetError, RecordStore, load_medals, load_population
from .stats import GlobalStats, compute_global_stats
from .views import (CompositionBreakdown, RankedView, ShareBreakdown, composition_breakdown,
                    host_share, ranked_top_n, top_share)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    year: int
    season: str
    aggregated: Tuple[AggregatedCountry, ...]
    hosts: Tuple[str, ...]

    @property
    def empty(self) -> bool:
        return not self.aggregated


class MedalSession:
    def __init__(self, store: RecordStore, cfg: Optional[DashboardConfig] = None):
        self.cfg = cfg or DashboardConfig()
        self.store = store
        self.stats: GlobalStats = compute_global_stats(store.medals, self.cfg.num_classes)
        self.scale: ColorScale = build_color_scale(self.stats)
        self.selection: Optional[Selection] = None

    @classmethod
    def from_config(cls, cfg: DashboardConfig) -> "MedalSession":
        medals = load_medals(cfg.medal_csv)
        population = None
        if cfg.population_csv:
            try:
                population = load_population(cfg.population_csv, cfg)
            except DatasetError as e:
                logger.warning("Population data unavailable, per-capita view disabled: %s", e)
        return cls(RecordStore(medals, population), cfg)

    def fork(self) -> "MedalSession":
        """A session sharing this one's tables and stats, with its own selection."""
        other = copy.copy(self)
        other.selection = None
        return other

    # ── Filter options ──────────────────────────
    def years(self) -> List[int]:
        return self.store.years()

    def seasons_for(self, year) -> List[str]:
        return self.store.seasons_for(year)

    def default_selection(self) -> Optional[Tuple[int, Optional[str]]]:
        """Latest year and its first season, or None for an empty dataset."""
        yrs = self.years()
        if not yrs:
            return None
        seasons = self.seasons_for(yrs[-1])
        return yrs[-1], seasons[0] if seasons else None

    # ── Recompute ───────────────────────────────
    def select(self, year, season) -> Selection:
        sel = Selection(
            year=year,
            season=season,
            aggregated=aggregate_by_country(self.store.medals, year, season),
            hosts=tuple(self.store.host_countries(year, season)),
        )
        logger.debug("Selected %s %s: %d countries", year, season, len(sel.aggregated))
        self.selection = sel
        return sel

    def _current(self) -> Selection:
        if self.selection is None:
            raise RuntimeError("No selection yet; call select() first")
        return self.selection

    # ── Views over the current selection ────────
    def map_rows(self) -> List[MapRow]:
        return classify_countries(self._current().aggregated, self.scale)

    def ranked(self, n: Optional[int] = None) -> RankedView:
        return ranked_top_n(self._current().aggregated, self.cfg.top_n if n is None else n)

    def composition(self, country: Optional[str] = None) -> Optional[CompositionBreakdown]:
        return composition_breakdown(self._current().aggregated, country)

    def host_share(self) -> ShareBreakdown:
        sel = self._current()
        return host_share(sel.aggregated, sel.hosts)

    def top_share(self, n: Optional[int] = None) -> ShareBreakdown:
        return top_share(self._current().aggregated, self.cfg.top_share_n if n is None else n)

    @property
    def has_population(self) -> bool:
        return self.store.population is not None

    def per_capita(self, n: Optional[int] = None) -> Optional[List[PerCapitaRecord]]:
        """Top countries by medals per million, or None without population data."""
        if not self.has_population:
            return None
        sel = self._current()
        rows = compute_per_capita(sel.aggregated, self.store.population, sel.year)
        return top_per_capita(rows, self.cfg.per_capita_top_n if n is None else n)

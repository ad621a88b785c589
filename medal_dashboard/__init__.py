"""Aggregation and classification pipeline behind the Olympic medal dashboard."""

from .aggregate import AggregatedCountry, aggregate_by_country
from .classify import ColorScale, build_color_scale, classify_countries
from .config import DashboardConfig
from .per_capita import PerCapitaRecord, compute_per_capita, top_per_capita
from .records import DatasetError, MedalRecord, PopulationRecord, RecordStore
from .session import MedalSession, Selection
from .stats import GlobalStats, compute_global_stats
from .views import composition_breakdown, host_share, ranked_top_n, share_breakdown, top_share

"""Dashboard settings: dataset paths, class count and view sizes."""

from dataclasses import dataclass, field
from typing import List, Optional

# ColorBrewer YlOrRd, 6 classes
YLORRD_6 = ["#ffffb2", "#fecc5c", "#fd8d3c", "#f03b20", "#bd0026", "#800026"]

# Continuous fallback when no usable breakpoints exist
FALLBACK_SCHEME = "Inferno"

MEDAL_COLUMNS = ["gold", "silver", "bronze"]

# Medal colors (same as the donut/bar charts use)
MC = {"Gold": "#ffd700", "Silver": "#c0c0c0", "Bronze": "#cd7f32"}


@dataclass
class DashboardConfig:
    medal_csv: str = "data/olympic_games.csv"
    population_csv: Optional[str] = "data/population.csv"
    num_classes: int = 6
    top_n: int = 10
    per_capita_top_n: int = 10
    top_share_n: int = 5
    year_col_candidates: List[str] = field(default_factory=lambda: ["Year", "year"])
    country_col_candidates: List[str] = field(default_factory=lambda: ["Country Name", "country"])
    value_col_candidates: List[str] = field(default_factory=lambda: ["Value", "value"])

    def __post_init__(self):
        if self.num_classes < 2:
            raise ValueError(f"num_classes must be >= 2, got {self.num_classes}")

"""Per-country medal sums for one (year, season) selection."""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .records import MedalRecord, medal_frame


@dataclass(frozen=True)
class AggregatedCountry:
    country: str
    gold: int
    silver: int
    bronze: int
    total: int


def aggregate_by_country(records: Sequence[MedalRecord], year, season) -> Tuple[AggregatedCountry, ...]:
    """One row per country seen in the filtered records, in first-sighting order.

    Countries with zero medals are kept. Year and season must match exactly.
    """
    df = medal_frame(r for r in records if r.year == year and r.season == season)
    if df.empty:
        return ()
    g = df.groupby("country", sort=False)[["gold", "silver", "bronze", "total"]].sum()
    return tuple(
        AggregatedCountry(country, int(row.gold), int(row.silver), int(row.bronze), int(row.total))
        for country, row in g.iterrows()
    )

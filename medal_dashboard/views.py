"""Summaries for the bar and donut charts, built from one aggregated selection."""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from .aggregate import AggregatedCountry


@dataclass(frozen=True)
class RankedView:
    rows: Tuple[AggregatedCountry, ...]
    mean_total: Optional[float]


def ranked_top_n(aggregated: Sequence[AggregatedCountry], n: int) -> RankedView:
    """Top ``n`` by total (ties keep input order) and the mean total of that slice."""
    top = tuple(sorted(aggregated, key=lambda c: c.total, reverse=True)[:n])
    mean = sum(c.total for c in top) / len(top) if top else None
    return RankedView(top, mean)


@dataclass(frozen=True)
class CompositionBreakdown:
    gold: int
    silver: int
    bronze: int

    @property
    def no_medals(self) -> bool:
        return self.gold == 0 and self.silver == 0 and self.bronze == 0

    def items(self):
        return [("Gold", self.gold), ("Silver", self.silver), ("Bronze", self.bronze)]


def composition_breakdown(aggregated: Sequence[AggregatedCountry],
                          country: Optional[str] = None) -> Optional[CompositionBreakdown]:
    """Gold/Silver/Bronze for one country, or summed over all when ``country`` is None.

    Returns None when there is nothing to show (empty selection or the country
    did not take part); a country present with zero medals gives a breakdown
    whose ``no_medals`` is True.
    """
    rows = [c for c in aggregated if country is None or c.country == country]
    if not rows:
        return None
    return CompositionBreakdown(
        gold=sum(c.gold for c in rows),
        silver=sum(c.silver for c in rows),
        bronze=sum(c.bronze for c in rows),
    )


@dataclass(frozen=True)
class ShareBreakdown:
    label: str
    total: int
    rest_label: str
    rest_total: int

    @property
    def combined(self) -> int:
        return self.total + self.rest_total

    @property
    def pct(self) -> Optional[float]:
        return self.total / self.combined * 100 if self.combined else None

    @property
    def rest_pct(self) -> Optional[float]:
        return self.rest_total / self.combined * 100 if self.combined else None

    def items(self):
        return [(self.label, self.total), (self.rest_label, self.rest_total)]


def share_breakdown(aggregated: Iterable[AggregatedCountry], predicate: Callable[[AggregatedCountry], bool],
                    label: str, rest_label: str = "Rest of world") -> ShareBreakdown:
    inside = outside = 0
    for c in aggregated:
        if predicate(c):
            inside += c.total
        else:
            outside += c.total
    return ShareBreakdown(label, inside, rest_label, outside)


def host_share(aggregated: Sequence[AggregatedCountry], hosts: Iterable[str]) -> ShareBreakdown:
    hosts = set(hosts)
    label = ", ".join(sorted(hosts)) if hosts else "Host"
    return share_breakdown(aggregated, lambda c: c.country in hosts, label)


def top_share(aggregated: Sequence[AggregatedCountry], n: int = 5) -> ShareBreakdown:
    top = {c.country for c in ranked_top_n(aggregated, n).rows}
    return share_breakdown(aggregated, lambda c: c.country in top, f"Top {n}", "Others")

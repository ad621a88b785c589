"""
Medals per million inhabitants.

The population table uses World Bank style country names while the medal
table uses Olympic delegation names, so a name is tried as-is first and then
through ``COUNTRY_ALIASES``. Countries that resolve to nothing are left out.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .aggregate import AggregatedCountry
from .records import PopulationRecord

logger = logging.getLogger(__name__)

# medal table name -> population table names, tried in order
COUNTRY_ALIASES = {
    "Great Britain": ("United Kingdom",),
    "United States of America": ("United States",),
    "USA": ("United States",),
    "People's Republic of China": ("China",),
    "ROC": ("Russian Federation", "Russia"),
    "Russia": ("Russian Federation",),
    "Republic of Korea": ("Korea, Rep.", "South Korea"),
    "South Korea": ("Korea, Rep.",),
    "Democratic People's Republic of Korea": ("Korea, Dem. People's Rep.", "North Korea"),
    "Islamic Republic of Iran": ("Iran, Islamic Rep.", "Iran"),
    "Iran": ("Iran, Islamic Rep.",),
    "Czech Republic": ("Czechia",),
    "Slovakia": ("Slovak Republic",),
    "Turkey": ("Turkiye",),
    "Türkiye": ("Turkiye",),
    "Egypt": ("Egypt, Arab Rep.",),
    "Venezuela": ("Venezuela, RB",),
    "Kyrgyzstan": ("Kyrgyz Republic",),
    "Bahamas": ("Bahamas, The",),
    "Hong Kong, China": ("Hong Kong SAR, China",),
    "Republic of Moldova": ("Moldova",),
    "Syrian Arab Republic": ("Syria",),
    "Côte d'Ivoire": ("Cote d'Ivoire",),
}


@dataclass(frozen=True)
class PerCapitaRecord:
    country: str
    total: int
    population: float
    medals_per_million: float


def population_lookup(population: Sequence[PopulationRecord], year) -> Dict[str, float]:
    """Country name -> population for ``year``, positive values only."""
    key = str(year).strip()
    return {p.country_name: p.population for p in population
            if str(p.year).strip() == key and p.population > 0}


def resolve_population(country: str, lookup: Dict[str, float]):
    if country in lookup:
        return lookup[country]
    for alias in COUNTRY_ALIASES.get(country, ()):
        if alias in lookup:
            return lookup[alias]
    return None


def compute_per_capita(aggregated: Sequence[AggregatedCountry], population: Sequence[PopulationRecord],
                       year) -> Tuple[PerCapitaRecord, ...]:
    lookup = population_lookup(population, year)
    out = []
    for c in aggregated:
        pop = resolve_population(c.country, lookup)
        if pop is None:
            logger.debug("No %s population for %s", year, c.country)
            continue
        out.append(PerCapitaRecord(c.country, c.total, pop, c.total / pop * 1_000_000))
    return tuple(out)


def top_per_capita(records: Sequence[PerCapitaRecord], n: int) -> List[PerCapitaRecord]:
    return sorted(records, key=lambda r: r.medals_per_million, reverse=True)[:n]

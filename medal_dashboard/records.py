"""
Typed records and the CSV loading boundary.

Raw CSV fields are coerced here, once, with pandas. Everything downstream
works on the frozen record types and never sees untyped cells.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .config import MEDAL_COLUMNS, DashboardConfig

logger = logging.getLogger(__name__)

MEDAL_CSV_COLUMNS = ["year", "games_type", "country"] + MEDAL_COLUMNS


class DatasetError(Exception):
    """A dataset could not be read or lacks the columns the pipeline needs."""


@dataclass(frozen=True)
class MedalRecord:
    year: int
    season: str
    country: str
    host_country: Optional[str]
    gold: int
    silver: int
    bronze: int

    @property
    def total(self) -> int:
        return self.gold + self.silver + self.bronze


@dataclass(frozen=True)
class PopulationRecord:
    year: int
    country_name: str
    population: float


def medal_frame(records: Iterable[MedalRecord]) -> pd.DataFrame:
    """Records as a DataFrame with a derived ``total`` column."""
    cols = ["year", "season", "country", "host_country"] + MEDAL_COLUMNS
    df = pd.DataFrame([asdict(r) for r in records], columns=cols)
    for c in MEDAL_COLUMNS:
        df[c] = df[c].astype("int64")
    df["total"] = df[MEDAL_COLUMNS].sum(axis=1).astype("int64")
    return df


def _read_csv(path) -> pd.DataFrame:
    try:
        try:
            return pd.read_csv(path)
        except UnicodeDecodeError:
            logger.info("%s is not UTF-8, reading it as ISO-8859-1", path)
            return pd.read_csv(path, encoding="ISO-8859-1")
    except (OSError, ValueError) as e:
        raise DatasetError(f"Cannot read {path}: {e}") from e


def _finite(s: pd.Series) -> pd.Series:
    """Numeric view of ``s`` with unparseable, infinite and out-of-range cells as NaN."""
    v = pd.to_numeric(s, errors="coerce").astype("float64")
    return v.where(np.isfinite(v) & (v.abs() < 2 ** 53))


def _text(v) -> Optional[str]:
    if pd.isna(v):
        return None
    s = str(v).strip()
    return s or None


def parse_medal_frame(df: pd.DataFrame) -> Tuple[MedalRecord, ...]:
    missing = [c for c in MEDAL_CSV_COLUMNS if c not in df.columns]
    if missing:
        raise DatasetError(f"Missing expected columns: {missing}")

    df = df.assign(year=_finite(df["year"]))
    counts = df[MEDAL_COLUMNS].apply(_finite).fillna(0).clip(lower=0).astype("int64")
    hosts = df["host_country"] if "host_country" in df.columns else pd.Series(None, index=df.index)

    out: List[MedalRecord] = []
    dropped = 0
    for idx, year, season, country in zip(df.index, df["year"], df["games_type"], df["country"]):
        season, country = _text(season), _text(country)
        if pd.isna(year) or season is None or country is None:
            dropped += 1
            continue
        g, s, b = (int(counts.at[idx, c]) for c in MEDAL_COLUMNS)
        out.append(MedalRecord(int(year), season, country, _text(hosts.at[idx]), g, s, b))
    if dropped:
        logger.warning("Dropped %d medal rows without year, season or country", dropped)
    return tuple(out)


def _pick(df: pd.DataFrame, candidates: Sequence[str]) -> Optional[str]:
    return next((c for c in candidates if c in df.columns), None)


def parse_population_frame(df: pd.DataFrame, cfg: DashboardConfig) -> Tuple[PopulationRecord, ...]:
    year_col = _pick(df, cfg.year_col_candidates)
    country_col = _pick(df, cfg.country_col_candidates)
    value_col = _pick(df, cfg.value_col_candidates)
    if not (year_col and country_col and value_col):
        raise DatasetError(f"Population data needs year/country/value columns, got {list(df.columns)}")

    pf = pd.DataFrame({
        "year": _finite(df[year_col]),
        "country_name": df[country_col].map(_text),
        "population": _finite(df[value_col]).fillna(0),
    })
    ok = pf["year"].notna() & pf["country_name"].notna() & (pf["population"] > 0)
    if (~ok).any():
        logger.debug("Skipped %d population rows without a usable year, name or value", int((~ok).sum()))
    pf = pf[ok]
    return tuple(PopulationRecord(int(y), n, float(v))
                 for y, n, v in zip(pf["year"], pf["country_name"], pf["population"]))


def load_medals(path) -> Tuple[MedalRecord, ...]:
    records = parse_medal_frame(_read_csv(path))
    logger.info("Loaded %d medal records from %s", len(records), path)
    return records


def load_population(path, cfg: DashboardConfig) -> Tuple[PopulationRecord, ...]:
    records = parse_population_frame(_read_csv(path), cfg)
    logger.info("Loaded %d population records from %s", len(records), path)
    return records


@dataclass(frozen=True)
class RecordStore:
    """Both input tables for one session. ``population`` is None when unavailable."""
    medals: Tuple[MedalRecord, ...]
    population: Optional[Tuple[PopulationRecord, ...]] = None

    def years(self) -> List[int]:
        return sorted({r.year for r in self.medals})

    def seasons_for(self, year) -> List[str]:
        return sorted({r.season for r in self.medals if r.year == year})

    def host_countries(self, year, season) -> List[str]:
        return sorted({r.host_country for r in self.medals
                       if r.year == year and r.season == season and r.host_country})

import pandas as pd
import pytest

from medal_dashboard.config import DashboardConfig
from medal_dashboard.records import (DatasetError, RecordStore, load_medals, load_population,
                                     parse_medal_frame, parse_population_frame)


def test_load_medals_coerces_bad_counts_to_zero(medal_csv):
    records = load_medals(medal_csv)
    chad = next(r for r in records if r.country == "Chad")
    assert (chad.gold, chad.silver, chad.bronze) == (0, 0, 0)
    assert chad.total == 0
    assert chad.host_country == "Japan"


def test_load_medals_drops_rows_without_year(medal_csv):
    records = load_medals(medal_csv)
    assert len(records) == 5
    assert "Nowhere" not in {r.country for r in records}
    assert all(isinstance(r.year, int) for r in records)


def test_negative_counts_clip_to_zero():
    df = pd.DataFrame({"year": ["2000"], "games_type": ["Summer"], "country": ["X"],
                       "gold": ["-2"], "silver": ["1"], "bronze": [None]})
    (r,) = parse_medal_frame(df)
    assert (r.gold, r.silver, r.bronze) == (0, 1, 0)
    assert r.host_country is None


def test_missing_medal_columns_raise():
    with pytest.raises(DatasetError):
        parse_medal_frame(pd.DataFrame({"year": [2000], "country": ["X"]}))


def test_unreadable_medal_file_raises(tmp_path):
    with pytest.raises(DatasetError):
        load_medals(tmp_path / "missing.csv")


def test_load_population_picks_candidate_columns(population_csv):
    records = load_population(population_csv, DashboardConfig())
    names = {r.country_name for r in records}
    assert names == {"Norway", "United Kingdom", "United States"}
    assert all(r.population > 0 for r in records)


def test_population_lowercase_columns():
    df = pd.DataFrame({"year": ["2020"], "country": ["Chad"], "value": ["16000000"]})
    (r,) = parse_population_frame(df, DashboardConfig())
    assert (r.year, r.country_name, r.population) == (2020, "Chad", 16_000_000.0)


def test_population_without_value_column_raises():
    with pytest.raises(DatasetError):
        parse_population_frame(pd.DataFrame({"Year": [2020], "Country Name": ["Chad"]}), DashboardConfig())


def test_store_filter_options(medals):
    store = RecordStore(medals)
    assert store.years() == [2018, 2021, 2022]
    assert store.seasons_for(2021) == ["Summer"]
    assert store.seasons_for(1900) == []
    assert store.host_countries(2021, "Summer") == ["Japan"]
    assert store.host_countries(2018, "Winter") == []


def test_latin1_files_are_read(tmp_path):
    m = tmp_path / "medals.csv"
    m.write_bytes("year,games_type,country,host_country,gold,silver,bronze\n"
                  "2021,Summer,Côte d'Ivoire,Japan,0,0,1\n".encode("latin-1"))
    p = tmp_path / "population.csv"
    p.write_bytes("Country Name,Year,Value\nCôte d'Ivoire,2021,27000000\n".encode("latin-1"))
    (r,) = load_medals(m)
    assert r.country == "Côte d'Ivoire"
    (pr,) = load_population(p, DashboardConfig())
    assert pr.country_name == "Côte d'Ivoire"


def test_malformed_medal_file_raises_dataset_error(tmp_path):
    m = tmp_path / "medals.csv"
    m.write_text('year,games_type,country,gold,silver,bronze\n2021,Summer,"USA,1,1,1\n')
    with pytest.raises(DatasetError):
        load_medals(m)


def test_non_finite_cells_do_not_abort_load(tmp_path):
    m = tmp_path / "medals.csv"
    m.write_text("year,games_type,country,host_country,gold,silver,bronze\n"
                 "2021,Summer,X,Japan,inf,0,0\n"
                 "2021,Summer,Y,Japan,1e30,-inf,2\n"
                 "inf,Summer,Z,Japan,1,1,1\n"
                 "2021,Summer,USA,Japan,3,2,1\n")
    records = {r.country: r for r in load_medals(m)}
    assert set(records) == {"X", "Y", "USA"}
    assert records["X"].total == 0
    assert (records["Y"].gold, records["Y"].silver, records["Y"].bronze) == (0, 0, 2)
    assert records["USA"].total == 6


def test_non_finite_population_rows_skipped():
    df = pd.DataFrame({"Year": ["inf", "2020", "2020"], "Country Name": ["A", "B", "C"],
                       "Value": ["10", "inf", "5"]})
    (r,) = parse_population_frame(df, DashboardConfig())
    assert (r.year, r.country_name) == (2020, "C")

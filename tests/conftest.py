import pytest

from medal_dashboard.records import MedalRecord, PopulationRecord


def rec(year, season, country, gold=0, silver=0, bronze=0, host=None):
    return MedalRecord(year, season, country, host, gold, silver, bronze)


@pytest.fixture
def medals():
    return (
        rec(2021, "Summer", "USA", 3, 2, 1, host="Japan"),
        rec(2021, "Summer", "China", 1, 1, 1, host="Japan"),
        rec(2021, "Summer", "Japan", 2, 0, 0, host="Japan"),
        rec(2021, "Summer", "USA", 1, 0, 0, host="Japan"),
        rec(2021, "Summer", "Chad", host="Japan"),
        rec(2022, "Winter", "Norway", 16, 8, 13, host="China"),
        rec(2022, "Winter", "Great Britain", 1, 1, 0, host="China"),
        rec(2018, "Winter", "Norway", 14, 14, 11),
    )


@pytest.fixture
def population():
    return (
        PopulationRecord(2022, "Norway", 5_400_000.0),
        PopulationRecord(2022, "United Kingdom", 67_000_000.0),
        PopulationRecord(2021, "Norway", 5_380_000.0),
        PopulationRecord(2021, "United States", 332_000_000.0),
    )


@pytest.fixture
def medal_csv(tmp_path):
    p = tmp_path / "olympic_games.csv"
    p.write_text(
        "year,games_type,country,host_country,gold,silver,bronze\n"
        "2021,Summer,USA,Japan,3,2,1\n"
        "2021,Summer,China,Japan,1,1,1\n"
        "2021,Summer,Chad,Japan,,n/a,0\n"
        "2022,Winter,Norway,China,16,8,13\n"
        "2022,Winter,Great Britain,China,1,1,0\n"
        ",Winter,Nowhere,China,1,1,1\n"
    )
    return p


@pytest.fixture
def population_csv(tmp_path):
    p = tmp_path / "population.csv"
    p.write_text(
        "Country Name,Year,Value\n"
        "Norway,2022,5400000\n"
        "United Kingdom,2022,67000000\n"
        "United States,2021,332000000\n"
        "Atlantis,2022,\n"
    )
    return p

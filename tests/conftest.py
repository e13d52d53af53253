import pytest

from covid_tracker.models.country_table import CountryTable
from covid_tracker.pipeline.aggregator import add_summary, aggregate, merge, parse_csv

CONFIRMED_CSV = """Province/State,Country/Region,Lat,Long,1/22/20,1/23/20
Hubei,China,30.97,112.27,1,2
Beijing,China,40.18,116.41,3,4
,Italy,43.0,12.0,0,5
,Spain,40.0,-4.0,2,3
"""

DEATHS_CSV = """Province/State,Country/Region,Lat,Long,1/22/20,1/23/20
Hubei,China,30.97,112.27,0,1
Beijing,China,40.18,116.41,0,0
,Italy,43.0,12.0,0,2
,Spain,40.0,-4.0,0,0
"""

RECOVERED_CSV = """Province/State,Country/Region,Lat,Long,1/22/20,1/23/20
Hubei,China,30.97,112.27,0,1
Beijing,China,40.18,116.41,1,1
,Italy,43.0,12.0,0,0
,Spain,40.0,-4.0,1,2
"""


def build_countries(confirmed_csv=CONFIRMED_CSV, deaths_csv=DEATHS_CSV, recovered_csv=RECOVERED_CSV):
    frame_conf, date_headers = parse_csv(confirmed_csv)
    frame_deaths, _ = parse_csv(deaths_csv, date_headers)
    frame_recov, _ = parse_csv(recovered_csv, date_headers)
    countries = merge(
        aggregate(frame_conf, date_headers),
        aggregate(frame_deaths, date_headers),
        aggregate(frame_recov, date_headers),
        date_headers,
    )
    return add_summary(countries, date_headers)


@pytest.fixture
def countries():
    return build_countries()


@pytest.fixture
def country_table(countries):
    return CountryTable(countries)


@pytest.fixture
def csv_texts():
    return CONFIRMED_CSV, DEATHS_CSV, RECOVERED_CSV

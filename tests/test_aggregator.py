import random

import pytest

from covid_tracker.exceptions import DataParseError
from covid_tracker.models.schemas import TOTAL_KEY, Country
from covid_tracker.pipeline.aggregator import add_summary, aggregate, merge, parse_csv

HEADER = 'Province/State,Country/Region,Lat,Long,1/22/20,1/23/20,1/24/20'
ROWS = [
    'Hubei,China,30.97,112.27,1,2,3',
    'Beijing,China,40.18,116.41,3,4,5',
    'Guangdong,China,23.34,113.42,0,7,9',
    ',Italy,43.0,12.0,0,5,6',
    'British Columbia,Canada,49.28,-123.12,1,1,2',
    'Ontario,Canada,51.25,-85.32,0,2,2',
    ',Spain,40.0,-4.0,2,3,3',
]


def _csv(rows):
    return '\n'.join([HEADER, *rows]) + '\n'


def test_parse_csv_finds_date_headers():
    frame, date_headers = parse_csv(_csv(ROWS))

    assert date_headers == ['1/22/20', '1/23/20', '1/24/20']
    assert len(frame) == len(ROWS)


def test_duplicate_country_rows_are_summed():
    content = 'Province/State,Country/Region,Lat,Long,1/22/20,1/23/20\nA,China,0,0,1,2\nB,China,0,0,3,4\n'
    frame, date_headers = parse_csv(content)

    assert aggregate(frame, date_headers) == {'China': [4, 6]}


def test_fold_is_order_independent():
    frame, date_headers = parse_csv(_csv(ROWS))
    expected = aggregate(frame, date_headers)

    rng = random.Random(2020)
    for _ in range(10):
        shuffled = ROWS[:]
        rng.shuffle(shuffled)
        frame, _ = parse_csv(_csv(shuffled))
        assert aggregate(frame, date_headers) == expected

    assert expected['China'] == [4, 13, 17]
    assert expected['Canada'] == [1, 3, 4]


def test_given_date_headers_must_exist():
    with pytest.raises(DataParseError, match='1/25/20'):
        parse_csv(_csv(ROWS), ['1/24/20', '1/25/20'])


def test_missing_country_column():
    with pytest.raises(DataParseError, match='Country/Region'):
        parse_csv('Province/State,Country,Lat,Long,1/22/20\nA,China,0,0,1\n')


@pytest.mark.parametrize('value', ['', 'abc', '-1', '2.5', '5.0', '1e3', ' 7', '+3'])
def test_invalid_count_is_rejected(value):
    content = f'Province/State,Country/Region,Lat,Long,1/22/20,1/23/20\nA,China,0,0,1,{value}\n'
    frame, date_headers = parse_csv(content)

    with pytest.raises(DataParseError, match='China on 1/23/20'):
        aggregate(frame, date_headers)


def test_large_counts_keep_precision():
    content = ('Province/State,Country/Region,Lat,Long,1/22/20\n'
               'A,China,0,0,99999999999999999999\n'
               'B,China,0,0,1\n')
    frame, date_headers = parse_csv(content)

    counts = aggregate(frame, date_headers)
    countries = merge(counts, {}, {}, date_headers)

    assert counts == {'China': [100000000000000000000]}
    assert countries['China'].confirmed == 100000000000000000000


def test_no_date_columns():
    frame, date_headers = parse_csv('Province/State,Country/Region,Lat,Long\nA,China,0,0\n')

    assert date_headers == []
    assert aggregate(frame, date_headers) == {'China': []}


def test_merge_counters_are_last_values(countries):
    china = countries['China']

    assert china.confirmed_series == [4, 6]
    assert china.confirmed == 6
    assert china.deaths_series == [0, 1]
    assert china.deaths == 1
    assert china.recovered_series == [1, 2]
    assert china.recovered == 2


def test_merge_fills_missing_country_with_zeros():
    countries = merge({'China': [1, 2]}, {}, {'Italy': [0, 3]}, ['1/22/20', '1/23/20'])

    assert countries['China'].deaths_series == [0, 0]
    assert countries['China'].recovered_series == [0, 0]
    assert countries['Italy'].confirmed_series == [0, 0]
    assert countries['Italy'].recovered == 3


def test_series_match_date_header_length(countries):
    for country in countries.values():
        assert len(country.confirmed_series) == 2
        assert len(country.deaths_series) == 2
        assert len(country.recovered_series) == 2


def test_total_is_sum_of_countries(countries):
    total = countries[TOTAL_KEY]
    others = [c for name, c in countries.items() if name != TOTAL_KEY]

    assert total.confirmed == sum(c.confirmed for c in others) == 14
    assert total.deaths == sum(c.deaths for c in others) == 3
    assert total.recovered == sum(c.recovered for c in others) == 4
    assert total.confirmed_series == [6, 14]
    assert total.headers == ['1/22/20', '1/23/20']
    assert all(c.headers == [] for c in others)


def test_total_replaces_source_country_named_total():
    source = Country(country=TOTAL_KEY, confirmed=99, deaths=0, recovered=0,
                     confirmed_series=[99], deaths_series=[0], recovered_series=[0])
    italy = Country(country='Italy', confirmed=5, deaths=1, recovered=0,
                    confirmed_series=[5], deaths_series=[1], recovered_series=[0])

    summary = add_summary({TOTAL_KEY: source, 'Italy': italy}, ['1/22/20'])

    assert summary[TOTAL_KEY].confirmed == 5
    assert summary[TOTAL_KEY].confirmed_series == [5]


def test_add_summary_without_countries():
    summary = add_summary({}, ['1/22/20', '1/23/20'])

    assert summary[TOTAL_KEY].confirmed == 0
    assert summary[TOTAL_KEY].confirmed_series == [0, 0]

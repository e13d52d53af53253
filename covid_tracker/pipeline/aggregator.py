import io
import logging
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from covid_tracker.exceptions import DataParseError
from covid_tracker.models.schemas import TOTAL_KEY, Country
from covid_tracker.utils.date_utils import get_date_headers

COUNTRY_COLUMN = 'Country/Region'
COUNT_PATTERN = r'[0-9]+'


def parse_csv(content: str, date_headers: Optional[List[str]] = None) -> Tuple[pd.DataFrame, List[str]]:
    """
    Parses a time series CSV: Province/State, Country/Region, Lat, Long, then one column per date.

    Args:
        content (str): CSV text.
        date_headers (List[str], optional): Date columns to use. Defaults to the date columns found in the header.

    Raises:
        DataParseError: If the CSV is malformed or a required column is missing.

    Returns:
        Tuple[pd.DataFrame, List[str]]: Raw frame (all cells as strings) and the date headers.
    """
    try:
        frame = pd.read_csv(io.StringIO(content), dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DataParseError(f'Unreadable CSV: {e}') from e

    if COUNTRY_COLUMN not in frame.columns:
        raise DataParseError(f'Missing column: {COUNTRY_COLUMN}')

    if date_headers is None:
        date_headers = get_date_headers(frame.columns)
    else:
        missing = [h for h in date_headers if h not in frame.columns]
        if missing:
            raise DataParseError(f'Missing date columns: {missing}')

    return frame, list(date_headers)


def _to_counts(frame: pd.DataFrame, date_headers: List[str]) -> pd.DataFrame:
    cells = frame[date_headers]
    # Plain non-negative integer literals only
    invalid = ~cells.apply(lambda s: s.str.fullmatch(COUNT_PATTERN)).to_numpy(dtype=bool)

    if invalid.any():
        rows, cols = np.nonzero(invalid)
        row, col = rows[0], cols[0]
        raise DataParseError(
            f'Invalid count {frame.iloc[row][date_headers[col]]!r} '
            f'for {frame.iloc[row][COUNTRY_COLUMN]} on {date_headers[col]} (row {row + 1})'
        )

    # Python ints so large counts neither overflow nor lose precision
    return cells.apply(lambda s: s.map(int)).astype(object)


def aggregate(frame: pd.DataFrame, date_headers: List[str]) -> Dict[str, List[int]]:
    """
    Sums the rows of each country (one row per province/state) into a single time series.

    Args:
        frame (pd.DataFrame): Frame returned by parse_csv.
        date_headers (List[str]): Date columns to sum.

    Raises:
        DataParseError: If a count is missing, negative or not an integer.

    Returns:
        Dict[str, List[int]]: Country name to one count per date.
    """
    if not date_headers:
        return {country: [] for country in frame[COUNTRY_COLUMN].unique()}

    counts = _to_counts(frame, date_headers)
    counts[COUNTRY_COLUMN] = frame[COUNTRY_COLUMN]
    grouped = counts.groupby(COUNTRY_COLUMN, sort=False)[date_headers].sum()

    return {
        country: [int(v) for v in values]
        for country, values in zip(grouped.index, grouped.to_numpy())
    }


def merge(confirmed: Dict[str, List[int]], deaths: Dict[str, List[int]], recovered: Dict[str, List[int]],
          date_headers: List[str]) -> Dict[str, Country]:
    """
    Merges the three per-country accumulators into Country records keyed by country name.

    A country missing from one of the datasets gets an all-zero series for that metric.

    Returns:
        Dict[str, Country]: Country name to record.
    """
    empty = [0] * len(date_headers)
    countries = {}

    for name in dict.fromkeys([*confirmed, *deaths, *recovered]):
        confirmed_series = confirmed.get(name, empty)
        deaths_series = deaths.get(name, empty)
        recovered_series = recovered.get(name, empty)

        countries[name] = Country(
            country=name,
            confirmed=confirmed_series[-1] if confirmed_series else 0,
            deaths=deaths_series[-1] if deaths_series else 0,
            recovered=recovered_series[-1] if recovered_series else 0,
            confirmed_series=list(confirmed_series),
            deaths_series=list(deaths_series),
            recovered_series=list(recovered_series),
        )

    return countries


def _sum_series(series: List[List[int]], length: int) -> List[int]:
    total = [0] * length
    for s in series:
        total = [a + b for a, b in zip(total, s)]
    return total


def add_summary(countries: Dict[str, Country], date_headers: List[str]) -> Dict[str, Country]:
    """
    Adds the synthetic TOTAL record summing every country.

    Args:
        countries (Dict[str, Country]): Country records.
        date_headers (List[str]): Date labels, kept on the TOTAL record.

    Returns:
        Dict[str, Country]: Copy of countries with the TOTAL record added.
    """
    if TOTAL_KEY in countries:
        logging.warning(f'Source data has a country named {TOTAL_KEY}; it is replaced by the summary row')

    records = [c for name, c in countries.items() if name != TOTAL_KEY]
    length = len(date_headers)

    total = Country(
        country=TOTAL_KEY,
        confirmed=sum(c.confirmed for c in records),
        deaths=sum(c.deaths for c in records),
        recovered=sum(c.recovered for c in records),
        confirmed_series=_sum_series([c.confirmed_series for c in records], length),
        deaths_series=_sum_series([c.deaths_series for c in records], length),
        recovered_series=_sum_series([c.recovered_series for c in records], length),
        headers=list(date_headers),
    )

    summary = {name: c for name, c in countries.items() if name != TOTAL_KEY}
    summary[TOTAL_KEY] = total
    return summary

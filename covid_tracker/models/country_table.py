from types import MappingProxyType
from typing import Dict, List, Tuple

from covid_tracker.models.schemas import TOTAL_KEY, Country, DataType

Points = List[Tuple[float, float]]


class CountryTable():
    def __init__(self, countries: Dict[str, Country]):
        """Read-only view over the aggregated country records, including TOTAL.

        Args:
            countries (Dict[str, Country]): Country name to record.
        """
        if TOTAL_KEY not in countries:
            raise KeyError(f'Country table has no {TOTAL_KEY} record')
        self.countries = MappingProxyType(dict(countries))

    def __len__(self) -> int:
        return len(self.countries)

    def __getitem__(self, country: str) -> Country:
        return self.countries[country]

    @property
    def total(self) -> Country:
        return self.countries[TOTAL_KEY]

    @property
    def date_headers(self) -> List[str]:
        return self.total.headers

    def sorted_countries(self, sort_by: DataType) -> List[Country]:
        """
        Records sorted by the chosen metric, largest first. Ties are ordered by country name.

        Args:
            sort_by (DataType): Metric to sort by.

        Returns:
            List[Country]: Sorted records.
        """
        return sorted(self.countries.values(), key=lambda c: (-c.count(sort_by), c.country))

    def get_table_rows(self, sort_by: DataType) -> List[List[str]]:
        return [c.get_row() for c in self.sorted_countries(sort_by)]

    def chart_points(self, country: str) -> Tuple[Points, Points, Points]:
        """
        (index, value) points of the confirmed, deaths and recovered series of a country.
        """
        selected = self.countries[country]
        return tuple(
            [(float(i), float(v)) for i, v in enumerate(selected.series(data_type))]
            for data_type in DataType
        )

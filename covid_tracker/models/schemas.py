from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

TOTAL_KEY = 'TOTAL'


class DataType(Enum):
    CONFIRMED = 'confirmed'
    DEATHS = 'deaths'
    RECOVERED = 'recovered'

    @property
    def key(self) -> str:
        """Keyboard key that sorts the table by this metric."""
        return self.value[0]


def get_percentage(part: int, total: int) -> float:
    if total == 0:
        return 0.0
    return 100 * (part / total)


def format_percentage(part: int, total: int) -> str:
    return f'{get_percentage(part, total):.2f}%'


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str
    confirmed: int = Field(ge=0)
    deaths: int = Field(ge=0)
    recovered: int = Field(ge=0)
    confirmed_series: List[int]
    deaths_series: List[int]
    recovered_series: List[int]
    headers: List[str] = Field(default_factory=list)

    @model_validator(mode='after')
    def check_series_alignment(self) -> 'Country':
        lengths = {len(self.confirmed_series), len(self.deaths_series), len(self.recovered_series)}
        if len(lengths) != 1:
            raise ValueError(f'Time series of {self.country} are not aligned: {sorted(lengths)}')
        return self

    def count(self, data_type: DataType) -> int:
        return getattr(self, data_type.value)

    def series(self, data_type: DataType) -> List[int]:
        return getattr(self, f'{data_type.value}_series')

    def get_row(self) -> List[str]:
        """
        Table row for this country.

        Returns:
            List[str]: Country, confirmed, deaths, deaths (%), recovered, recovered (%).
        """
        return [
            self.country,
            str(self.confirmed),
            str(self.deaths),
            format_percentage(self.deaths, self.confirmed),
            str(self.recovered),
            format_percentage(self.recovered, self.confirmed),
        ]

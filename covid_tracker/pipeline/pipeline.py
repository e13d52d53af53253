import logging

from covid_tracker.models.country_table import CountryTable
from covid_tracker.pipeline.aggregator import add_summary, aggregate, merge, parse_csv
from covid_tracker.pipeline.api.api_reader import CsvReader
from covid_tracker.pipeline.pipeline_config import PipelineConfig


class Pipeline():
    def __init__(self, config: PipelineConfig, confirmed_reader: CsvReader, deaths_reader: CsvReader, recovered_reader: CsvReader):
        """Extract and aggregate pipeline for the three time series datasets.

        Args:
            config (PipelineConfig): Endpoints and request timeout.
            confirmed_reader (CsvReader): Reader of the confirmed cases CSV.
            deaths_reader (CsvReader): Reader of the deaths CSV.
            recovered_reader (CsvReader): Reader of the recoveries CSV.
        """
        self.config = config
        self.confirmed_reader = confirmed_reader
        self.deaths_reader = deaths_reader
        self.recovered_reader = recovered_reader

    @classmethod
    def from_config(cls, config: PipelineConfig) -> 'Pipeline':
        return cls(
            config=config,
            confirmed_reader=CsvReader(url=config.confirmed_url, timeout=config.timeout),
            deaths_reader=CsvReader(url=config.deaths_url, timeout=config.timeout),
            recovered_reader=CsvReader(url=config.recovered_url, timeout=config.timeout),
        )

    def run(self) -> CountryTable:
        """
        Download the three CSV files, sum each country's rows and merge them into one table with a TOTAL row.

        Raises:
            DataFetchError: If a dataset cannot be downloaded.
            DataParseError: If a dataset has a missing column or an invalid count.

        Returns:
            CountryTable: Aggregated country records.
        """
        content_conf = self.confirmed_reader.read()
        content_deaths = self.deaths_reader.read()
        content_recov = self.recovered_reader.read()

        # The confirmed dataset defines the reporting dates for all three
        frame_conf, date_headers = parse_csv(content_conf)
        frame_deaths, _ = parse_csv(content_deaths, date_headers)
        frame_recov, _ = parse_csv(content_recov, date_headers)
        logging.info(f'Found {len(date_headers)} reporting dates')

        confirmed = aggregate(frame_conf, date_headers)
        deaths = aggregate(frame_deaths, date_headers)
        recovered = aggregate(frame_recov, date_headers)

        countries = add_summary(merge(confirmed, deaths, recovered, date_headers), date_headers)
        logging.info(f'Aggregated {len(countries) - 1} countries')

        return CountryTable(countries)

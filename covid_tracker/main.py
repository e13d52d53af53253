import logging
import sys

from covid_tracker.dashboard.dashboard import Dashboard
from covid_tracker.exceptions import CovidTrackerError
from covid_tracker.pipeline.pipeline import Pipeline
from covid_tracker.pipeline.pipeline_config import PipelineConfig

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'


def main() -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    # Define pipeline config obj here
    config = PipelineConfig()
    covid_pipeline = Pipeline.from_config(config)

    logging.info('Loading CSV data...')
    try:
        table = covid_pipeline.run()
    except CovidTrackerError as e:
        logging.error(f'Could not load the COVID-19 data: {e}')
        return 1

    # The full-screen UI owns the terminal from here on
    logging.getLogger().setLevel(logging.WARNING)
    Dashboard(table).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())

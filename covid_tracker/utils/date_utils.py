import re
from typing import Iterable, List

import pendulum

DATE_HEADER_PATTERN = re.compile(r'^\d{1,2}/\d{1,2}/\d{2}$')


def get_date_headers(columns: Iterable[str]) -> List[str]:
    """
    Filters the CSV header down to the reporting date columns (M/D/YY), keeping their order.

    Args:
        columns (Iterable[str]): Column names of the CSV header.

    Returns:
        list[str]: Date labels in the order they appear in the header.
    """
    return [c for c in columns if DATE_HEADER_PATTERN.match(str(c))]


def parse_date_header(label: str) -> pendulum.Date:
    """
    Parses a M/D/YY date header into a date.

    Args:
        label (str): Date header, ex. '3/14/20'

    Returns:
        pendulum.Date: Parsed date.
    """
    return pendulum.from_format(label, 'M/D/YY').date()


def format_update_label(labels: List[str]) -> str:
    # Last reporting date is the "Updated" date of the dataset
    if not labels:
        return 'n/a'
    try:
        return parse_date_header(labels[-1]).format('YYYY-MM-DD')
    except ValueError:
        # Impossible dates such as 2/30/20 are shown as they appear in the header
        return labels[-1]

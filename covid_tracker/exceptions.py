class CovidTrackerError(Exception):
    """Base class for errors raised while loading the dashboard data."""


class DataFetchError(CovidTrackerError):
    def __init__(self, url: str, status_code: int = None, reason: str = None):
        """Raised when a CSV endpoint cannot be downloaded.

        Args:
            url (str): URL of the endpoint.
            status_code (int, optional): HTTP status code, if a response was received. Defaults to None.
            reason (str, optional): Transport error message. Defaults to None.
        """
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f'{url} returned status code {status_code}'
        else:
            message = f'{url} is not reachable: {reason}'
        super().__init__(message)


class DataParseError(CovidTrackerError):
    """Raised when a CSV dataset has a missing column or a non-integer value."""

import logging

from covid_tracker.exceptions import DataParseError
from .api_client import ApiClient

class CsvReader(ApiClient):
    def __init__(self, url:str, timeout:float=None):
        """Reader class to download a CSV dataset. Inherits from ApiClient parent class.

        Args:
            url (str): URL of the CSV file.
            timeout (float, optional): Seconds to wait for the server. Defaults to None.
        """
        ApiClient.__init__(self, url, timeout=timeout)

    def read(self) -> str:
        """
        Downloads the CSV file and decodes it.

        Raises:
            DataFetchError: If the server is not reachable or does not answer with status code 200.
            DataParseError: If the body is not UTF-8.

        Returns:
            str: Decoded CSV content.
        """
        response = self.get()

        logging.info(f'Downloaded {len(response.content)} bytes from {self.url}')
        try:
            return response.content.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DataParseError(f'{self.url} is not valid UTF-8: {e}') from e

import requests

from covid_tracker.exceptions import DataFetchError


class ApiClient():
    def __init__(self, url:str, timeout:float=None):
        """Simple HTTP client for GET-based endpoints.

        Args:
            url (str): URL of the endpoint
            timeout (float, optional): Seconds to wait for the server. Defaults to None (wait forever).
        """
        self.url = url
        self.timeout = timeout

    def get(self) -> requests.Response:
        """
        Single blocking GET on the endpoint.

        Raises:
            DataFetchError: If the server is not reachable or does not answer with status code 200.

        Returns:
            requests.Response: The 200 response.
        """
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DataFetchError(self.url, reason=str(e)) from e

        if response.status_code != 200:
            raise DataFetchError(self.url, status_code=response.status_code)
        return response

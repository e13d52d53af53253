CONFIRMED_URL = 'https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/csse_covid_19_data/csse_covid_19_time_series/time_series_19-covid-Confirmed.csv'
DEATHS_URL = 'https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/csse_covid_19_data/csse_covid_19_time_series/time_series_19-covid-Deaths.csv'
RECOVERED_URL = 'https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/csse_covid_19_data/csse_covid_19_time_series/time_series_19-covid-Recovered.csv'


class PipelineConfig():
    def __init__(self, confirmed_url: str = CONFIRMED_URL, deaths_url: str = DEATHS_URL,
                 recovered_url: str = RECOVERED_URL, timeout: float = 30.0):
        """Pipeline configuration object. Parameters for the Pipeline Class components.

        Args:
            confirmed_url (str): URL of the confirmed cases time series CSV.
            deaths_url (str): URL of the deaths time series CSV.
            recovered_url (str): URL of the recoveries time series CSV.
            timeout (float): Seconds to wait for each download.
        """
        self.confirmed_url = confirmed_url
        self.deaths_url = deaths_url
        self.recovered_url = recovered_url
        self.timeout = timeout

import httpx
import pytest

GEOCODING_HOST = "geocoding-api.open-meteo.com"

KOLKATA = {
    "id": 1275004,
    "name": "Kolkata",
    "latitude": 22.56263,
    "longitude": 88.36304,
    "country_code": "IN",
    "country": "India",
    "timezone": "Asia/Kolkata",
    "admin1": "West Bengal",
}

def forecast_body(current_code=0, daily=None, timezone="Asia/Kolkata"):
    return {
        "latitude": 22.5,
        "longitude": 88.375,
        "timezone": timezone,
        "current": {
            "time": "2025-10-20T09:15",
            "interval": 900,
            "temperature_2m": 29.6,
            "relative_humidity_2m": 78,
            "wind_speed_10m": 7.4,
            "weather_code": current_code,
        },
        "daily": daily or {
            "time": ["2025-10-20", "2025-10-21", "2025-10-22"],
            "weather_code": [0, 61, 95],
            "temperature_2m_max": [31.2, 30.1, 29.5],
            "temperature_2m_min": [24.8, 24.1, 23.9],
        },
    }

class FakeOpenMeteo:
    """Answers geocoding and forecast calls and records every request it sees."""

    def __init__(self):
        self.geocode_status = 200
        self.geocode_body = {"results": [KOLKATA], "generationtime_ms": 0.5}
        self.forecast_status = 200
        self.forecast_body = forecast_body()
        self.raise_on_geocode = None
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == GEOCODING_HOST:
            if self.raise_on_geocode is not None:
                raise self.raise_on_geocode
            return httpx.Response(self.geocode_status, json=self.geocode_body)
        return httpx.Response(self.forecast_status, json=self.forecast_body)

    @property
    def geocode_requests(self):
        return [r for r in self.requests if r.url.host == GEOCODING_HOST]

    @property
    def forecast_requests(self):
        return [r for r in self.requests if r.url.host != GEOCODING_HOST]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

@pytest.fixture
def open_meteo():
    return FakeOpenMeteo()

@pytest.fixture
def make_forecast():
    return forecast_body

import httpx
import logging
from typing import Optional
from pydantic import ValidationError
from weathernow.core.config import settings
from weathernow.core.logger import logs
from weathernow.models.weather_model import ForecastPayload
from weathernow.models.result_model import Result, Ok, Err, SearchError, ErrorKind

CURRENT_FIELDS = ["temperature_2m", "relative_humidity_2m", "wind_speed_10m", "weather_code"]
DAILY_FIELDS = ["weather_code", "temperature_2m_max", "temperature_2m_min"]

class ForecastService:
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client
        self.base_url = settings.FORECAST_URL

    async def fetch_forecast(self, latitude: float, longitude: float) -> Result[ForecastPayload, SearchError]:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "timezone": "auto",  # server infers the local zone for the coordinates
            "current": ",".join(CURRENT_FIELDS),
            "daily": ",".join(DAILY_FIELDS)
        }
        logs.log(logging.INFO, f"Fetching forecast for {round(latitude, 2)}, {round(longitude, 2)}")
        try:
            raw_data = await self._get(params)
        except (httpx.HTTPError, ValueError) as e:
            logs.log(logging.WARNING, f"Forecast request failed: {e}")
            return Err(SearchError(kind=ErrorKind.FORECAST_FAILED, message="Weather fetch failed."))

        try:
            payload = ForecastPayload.model_validate(raw_data)
        except ValidationError as e:
            logs.log(logging.WARNING, f"Forecast payload rejected: {e.error_count()} validation error(s)", extra={"errors": e.errors()[:3]})
            return Err(SearchError(kind=ErrorKind.MALFORMED_FORECAST, message="Weather data was incomplete."))

        logs.log(logging.INFO, f"Forecast received: {len(payload.daily)} day(s), timezone {payload.timezone}")
        return Ok(payload)

    async def _get(self, params: dict) -> dict:
        if self.client is not None:
            resp = await self.client.get(self.base_url, params=params, timeout=settings.HTTP_TIMEOUT)
            resp.raise_for_status()
            return resp.json()

        async with httpx.AsyncClient() as client:
            resp = await client.get(self.base_url, params=params, timeout=settings.HTTP_TIMEOUT)
            resp.raise_for_status()
            return resp.json()

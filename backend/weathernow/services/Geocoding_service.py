import httpx
import logging
from typing import Optional
from pydantic import ValidationError
from weathernow.core.config import settings
from weathernow.core.logger import logs
from weathernow.models.weather_model import Location
from weathernow.models.result_model import Result, Ok, Err, SearchError, ErrorKind

class GeocodingService:
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client
        self.base_url = settings.GEOCODING_URL
        self.language = settings.GEOCODING_LANGUAGE

    async def resolve(self, query: str) -> Result[Location, SearchError]:
        """Looks up the single best match for a place name."""
        if not query or not query.strip():
            raise ValueError("query must be a non-empty place name")

        params = {
            "name": query,
            "count": 1,
            "language": self.language,
            "format": "json"
        }
        logs.log(logging.INFO, f"Geocoding '{query}'")
        try:
            data = await self._get(params)
        except (httpx.HTTPError, ValueError) as e:
            logs.log(logging.WARNING, f"Geocoding request failed for '{query}': {e}")
            return Err(SearchError(kind=ErrorKind.LOOKUP_FAILED, message="Geocoding failed."))

        results = (data.get("results") if isinstance(data, dict) else None) or []
        if not results:
            logs.log(logging.INFO, f"No geocoding results for '{query}'")
            return Err(SearchError(kind=ErrorKind.NOT_FOUND, message="City not found."))

        try:
            top = results[0]
            location = Location(
                name=top["name"],
                country_code=top.get("country_code") or top.get("country") or "",
                latitude=top["latitude"],
                longitude=top["longitude"],
                timezone=top.get("timezone")
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            logs.log(logging.WARNING, f"Unusable geocoding result for '{query}': {e!r}")
            return Err(SearchError(kind=ErrorKind.LOOKUP_FAILED, message="Geocoding failed."))
        logs.log(logging.INFO, f"Resolved '{query}' to {location.display_name} ({location.latitude}, {location.longitude})")
        return Ok(location)

    async def _get(self, params: dict) -> dict:
        if self.client is not None:
            resp = await self.client.get(self.base_url, params=params, timeout=settings.HTTP_TIMEOUT)
            resp.raise_for_status()
            return resp.json()

        async with httpx.AsyncClient() as client:
            resp = await client.get(self.base_url, params=params, timeout=settings.HTTP_TIMEOUT)
            resp.raise_for_status()
            return resp.json()

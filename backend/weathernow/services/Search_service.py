import logging
from typing import Optional
from weathernow.core.logger import logs
from weathernow.models.weather_model import SearchState
from weathernow.models.result_model import Err, SearchError
from weathernow.services.Geocoding_service import GeocodingService
from weathernow.services.Forecast_service import ForecastService
from weathernow.services.Render_service import RenderService

LOADING_MESSAGE = "Loading…"
FALLBACK_ERROR_MESSAGE = "Something went wrong."

class SearchOrchestrator:
    """
    Runs one search: geocode -> forecast -> render.

    States move IDLE/SUCCESS/ERROR -> LOADING -> SUCCESS or ERROR. A search
    that is already in flight is not cancelled by a newer one, so whichever
    finishes last owns the view.
    """

    def __init__(self, geocoder: GeocodingService, forecaster: ForecastService, renderer: RenderService):
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.renderer = renderer
        self.state = SearchState.IDLE
        self.status = ""

    async def submit(self, raw_input: Optional[str]) -> SearchState:
        """Form handler: blank input is ignored."""
        query = (raw_input or "").strip()
        if not query:
            return self.state
        return await self.search(query)

    async def search(self, query: str) -> SearchState:
        self._transition(SearchState.LOADING, LOADING_MESSAGE)

        geocoded = await self.geocoder.resolve(query)
        if isinstance(geocoded, Err):
            return self._fail(query, geocoded.error)
        location = geocoded.value

        forecast = await self.forecaster.fetch_forecast(location.latitude, location.longitude)
        if isinstance(forecast, Err):
            return self._fail(query, forecast.error)
        payload = forecast.value

        self.renderer.render_current(
            location.display_name,
            location.latitude,
            location.longitude,
            payload.current,
            location.timezone or payload.timezone or "local"
        )
        self.renderer.render_daily(payload.daily)
        return self._transition(SearchState.SUCCESS, f"Showing weather for “{location.name}”")

    def _fail(self, query: str, error: SearchError) -> SearchState:
        logs.log(logging.ERROR, f"Search for '{query}' failed: {error.kind.value}", extra={"message": error.message})
        self.renderer.clear()
        return self._transition(SearchState.ERROR, f"⚠️ {error.message or FALLBACK_ERROR_MESSAGE}")

    def _transition(self, state: SearchState, status: str) -> SearchState:
        logs.log(logging.INFO, f"Search state {self.state.value} -> {state.value}")
        self.state = state
        self.status = status
        self.renderer.view.show_status(status)
        return state

from fastapi import APIRouter, Depends, HTTPException, Query

from weathernow.core.config import settings
from weathernow.models.weather_model import SearchResponse, PresetsResponse
from weathernow.services.Geocoding_service import GeocodingService
from weathernow.services.Forecast_service import ForecastService
from weathernow.services.Render_service import RenderService
from weathernow.services.Search_service import SearchOrchestrator
from weathernow.views.weather_view import DisplayView

router = APIRouter(prefix="/weather")

# --- Dependency Injection ---
def get_geocoding_service() -> GeocodingService:
    return GeocodingService()

def get_forecast_service() -> ForecastService:
    return ForecastService()

@router.get("/search", response_model=SearchResponse)
async def search_endpoint(
    city: str = Query(..., description="Free-text place name"),
    geocoder: GeocodingService = Depends(get_geocoding_service),
    forecaster: ForecastService = Depends(get_forecast_service)
):
    """
    Runs one search and returns what the page should show.
    Lookup failures come back as state=ERROR, not as HTTP errors.
    """
    query = city.strip()
    if not query:
        raise HTTPException(status_code=422, detail="city must not be blank")

    view = DisplayView()
    orchestrator = SearchOrchestrator(geocoder, forecaster, RenderService(view))
    state = await orchestrator.search(query)
    return SearchResponse(query=query, state=state, status=view.status, display=view.display)

@router.get("/presets", response_model=PresetsResponse)
async def presets_endpoint():
    return PresetsResponse(default_city=settings.DEFAULT_CITY, presets=settings.PRESET_CITIES)

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Iterator, List, Optional, Tuple
from datetime import date, datetime
from enum import Enum

PLACEHOLDER = "—"

# --- Enums ---
class SearchState(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"

# --- Domain Models ---
class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    country_code: str = ""  # code, else full country name, else empty
    latitude: float
    longitude: float
    timezone: Optional[str] = None

    @property
    def display_name(self) -> str:
        if not self.country_code:
            return self.name
        return f"{self.name}, {self.country_code}"

class WeatherCodeInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    icon: str

class CurrentConditions(BaseModel):
    temperature_2m: float
    relative_humidity_2m: float
    wind_speed_10m: float
    weather_code: Optional[int] = None

class DailyForecast(BaseModel):
    time: List[date]
    weather_code: List[Optional[int]]
    temperature_2m_min: List[Optional[float]]
    temperature_2m_max: List[Optional[float]]

    @model_validator(mode="after")
    def check_co_indexed(self):
        lengths = {
            len(self.time),
            len(self.weather_code),
            len(self.temperature_2m_min),
            len(self.temperature_2m_max),
        }
        if len(lengths) != 1:
            raise ValueError("daily arrays must all have the same length")
        return self

    def __len__(self) -> int:
        return len(self.time)

    def days(self) -> Iterator[Tuple[date, Optional[int], Optional[float], Optional[float]]]:
        """Yields (date, weather code, min, max) rows in payload order."""
        return zip(self.time, self.weather_code, self.temperature_2m_min, self.temperature_2m_max)

class ForecastPayload(BaseModel):
    current: CurrentConditions
    daily: DailyForecast
    timezone: Optional[str] = None

# --- View Models ---
class CurrentView(BaseModel):
    place: str = PLACEHOLDER
    coords: str = PLACEHOLDER
    temperature: str = PLACEHOLDER
    icon: str = PLACEHOLDER
    summary: str = PLACEHOLDER
    humidity: str = PLACEHOLDER
    wind: str = PLACEHOLDER
    updated_at: Optional[datetime] = None
    updated: str = PLACEHOLDER

class DayCard(BaseModel):
    date: date
    day_label: str
    icon: str
    summary: str
    temperature: str

class WeatherDisplay(BaseModel):
    current: CurrentView = Field(default_factory=CurrentView)
    daily: List[DayCard] = []

# --- API Response Models ---
class SearchResponse(BaseModel):
    query: str
    state: SearchState
    status: str
    display: WeatherDisplay

class PresetsResponse(BaseModel):
    default_city: str
    presets: List[str]

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Open-Meteo endpoints (no API key required)
    GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
    FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"
    GEOCODING_LANGUAGE: str = "en"

    # Page defaults
    DEFAULT_CITY: str = "Kolkata"
    PRESET_CITIES: List[str] = ["Kolkata", "Delhi", "Mumbai", "London", "New York", "Tokyo"]

    # Seconds; None leaves outbound requests without a timeout
    HTTP_TIMEOUT: Optional[float] = None

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()

from typing import Optional, Tuple, FrozenSet
from weathernow.models.weather_model import WeatherCodeInfo, PLACEHOLDER

# Open-Meteo WMO weather codes, see https://open-meteo.com/en/docs
# Checked in order, first match wins; the code sets never overlap.
WEATHER_CODES: Tuple[Tuple[FrozenSet[int], WeatherCodeInfo], ...] = (
    (frozenset({0}), WeatherCodeInfo(label="Clear sky", icon="☀️")),
    (frozenset({1, 2}), WeatherCodeInfo(label="Mostly clear", icon="🌤️")),
    (frozenset({3}), WeatherCodeInfo(label="Overcast", icon="☁️")),
    (frozenset({45, 48}), WeatherCodeInfo(label="Fog", icon="🌫️")),
    (frozenset({51, 53, 55}), WeatherCodeInfo(label="Drizzle", icon="🌦️")),
    (frozenset({56, 57}), WeatherCodeInfo(label="Freezing drizzle", icon="🌧️")),
    (frozenset({61, 63, 65}), WeatherCodeInfo(label="Rain", icon="🌧️")),
    (frozenset({66, 67}), WeatherCodeInfo(label="Freezing rain", icon="🌧️")),
    (frozenset({71, 73, 75, 77}), WeatherCodeInfo(label="Snow", icon="❄️")),
    (frozenset({80, 81, 82}), WeatherCodeInfo(label="Rain showers", icon="🌦️")),
    (frozenset({85, 86}), WeatherCodeInfo(label="Snow showers", icon="❄️")),
    (frozenset({95}), WeatherCodeInfo(label="Thunderstorm", icon="⛈️")),
    (frozenset({96, 99}), WeatherCodeInfo(label="Thunderstorm w/ hail", icon="🌩️")),
)

UNKNOWN_CODE = WeatherCodeInfo(label=PLACEHOLDER, icon="⛅")

def classify(code: Optional[int]) -> WeatherCodeInfo:
    """Maps a WMO weather code to its label and icon. Unmapped codes get a neutral placeholder."""
    if isinstance(code, bool) or not isinstance(code, int):
        return UNKNOWN_CODE
    for codes, info in WEATHER_CODES:
        if code in codes:
            return info
    return UNKNOWN_CODE

import math
import logging
from datetime import date, datetime
from typing import List, Optional
from weathernow.core.logger import logs
from weathernow.models.weather_model import CurrentConditions, CurrentView, DailyForecast, DayCard, PLACEHOLDER
from weathernow.services.Classifier_service import classify
from weathernow.views.weather_view import WeatherView

def round_half_up(value: float) -> int:
    """Rounds halves towards +inf, as Math.round does; round() rounds them to even."""
    return math.floor(value + 0.5)

def format_number(value: float) -> str:
    return f"{value:g}"

def day_label(day: date) -> str:
    """Short weekday, day and month, e.g. 'Mon 20 Oct', in the current locale."""
    return f"{day:%a} {day.day} {day:%b}"

def format_temperature(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{round_half_up(value)}°C"

def temperature_range(min_temp: Optional[float], max_temp: Optional[float]) -> str:
    return f"{format_temperature(min_temp)} — {format_temperature(max_temp)}"

class RenderService:
    def __init__(self, view: WeatherView):
        self.view = view

    def render_current(
        self,
        place: str,
        latitude: float,
        longitude: float,
        current: CurrentConditions,
        timezone: str,
        now: Optional[datetime] = None
    ) -> CurrentView:
        """
        Overwrites the current-conditions card.
        The timestamp is the moment of rendering, not the forecast time.
        """
        info = classify(current.weather_code)
        updated_at = now or datetime.now().astimezone()
        current_view = CurrentView(
            place=place,
            coords=f"Lat {latitude:.2f}, Lon {longitude:.2f} · {timezone}",
            temperature=format_temperature(current.temperature_2m),
            icon=info.icon,
            summary=info.label,
            humidity=f"Humidity: {format_number(current.relative_humidity_2m)}%",
            wind=f"Wind: {round_half_up(current.wind_speed_10m)} km/h",
            updated_at=updated_at,
            updated=f"As of {updated_at:%x, %X}"
        )
        self.view.show_current(current_view)
        return current_view

    def render_daily(self, daily: DailyForecast) -> List[DayCard]:
        """Rebuilds the daily list, one card per day in payload order."""
        self.view.show_daily([])
        cards = []
        for day, code, min_temp, max_temp in daily.days():
            info = classify(code)
            cards.append(DayCard(
                date=day,
                day_label=day_label(day),
                icon=info.icon,
                summary=info.label,
                temperature=temperature_range(min_temp, max_temp)
            ))
        self.view.show_daily(cards)
        logs.log(logging.DEBUG, f"Rendered {len(cards)} daily card(s)")
        return cards

    def clear(self) -> None:
        """Resets every field to the placeholder and empties the daily list."""
        self.view.show_current(CurrentView())
        self.view.show_daily([])

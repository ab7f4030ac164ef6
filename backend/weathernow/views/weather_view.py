from abc import ABC, abstractmethod
from typing import List
from weathernow.models.weather_model import CurrentView, DayCard, WeatherDisplay

class WeatherView(ABC):
    """
    Output surface the render pipeline writes to.
    Implementations decide how the view-models are presented.
    """

    @abstractmethod
    def show_current(self, current: CurrentView) -> None:
        pass

    @abstractmethod
    def show_daily(self, cards: List[DayCard]) -> None:
        pass

    @abstractmethod
    def show_status(self, message: str) -> None:
        pass

class DisplayView(WeatherView):
    """Keeps the latest rendered state in memory; used by the API and in tests."""

    def __init__(self):
        self.display = WeatherDisplay()
        self.status = ""

    def show_current(self, current: CurrentView) -> None:
        self.display = self.display.model_copy(update={"current": current})

    def show_daily(self, cards: List[DayCard]) -> None:
        self.display = self.display.model_copy(update={"daily": list(cards)})

    def show_status(self, message: str) -> None:
        self.status = message or ""

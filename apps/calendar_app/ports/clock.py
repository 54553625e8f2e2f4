# apps/calendar_app/ports/clock.py
from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Zwraca bieżący moment (najlepiej z informacją o strefie)."""
        pass

# apps/calendar_app/ports/availability.py
from abc import ABC, abstractmethod
from typing import List

from apps.calendar_app.domain.entities import BlockedDates, TimeIntervalEntity


class UserNotFound(LookupError):
    pass


class IBlockedDatesProvider(ABC):
    @abstractmethod
    def get_blocked_dates(self, username: str, year: int, month: int) -> BlockedDates:
        """Zwraca zablokowane dni tygodnia dla usera w danym miesiącu."""
        pass


class ITimeIntervalRepository(ABC):
    @abstractmethod
    def get_for_user(self, user_id: int) -> List[TimeIntervalEntity]:
        pass

    @abstractmethod
    def replace_for_user(self, user_id: int, intervals: List[TimeIntervalEntity]) -> List[TimeIntervalEntity]:
        """Usuwa stare przedziały usera i zapisuje nowe."""
        pass

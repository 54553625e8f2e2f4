# apps/calendar_app/domain/entities.py
from dataclasses import dataclass, field
from datetime import time
from typing import FrozenSet, Iterable

WEEK_DAYS = range(7)  # 0 = niedziela ... 6 = sobota


@dataclass(frozen=True)
class BlockedDates:
    """Dni tygodnia niedostępne do rezerwacji w danym miesiącu."""
    blocked_week_days: FrozenSet[int] = field(default_factory=frozenset)

    @classmethod
    def from_week_days(cls, week_days: Iterable[int]) -> "BlockedDates":
        return cls(blocked_week_days=frozenset(int(d) for d in week_days))

    def to_dict(self) -> dict:
        return {'blockedWeekDays': sorted(self.blocked_week_days)}


@dataclass
class TimeIntervalEntity:
    week_day: int
    start_time: time
    end_time: time

    @property
    def start_in_minutes(self) -> int:
        return self.start_time.hour * 60 + self.start_time.minute

    @property
    def end_in_minutes(self) -> int:
        return self.end_time.hour * 60 + self.end_time.minute

# apps/calendar_app/domain/calendar_grid.py
import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterator, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from apps.calendar_app.domain.entities import BlockedDates
from apps.calendar_app.ports.clock import IClock

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7


class InvalidReferenceMonth(ValueError):
    pass


@dataclass(frozen=True)
class DayCell:
    date: date
    disabled: bool


@dataclass(frozen=True)
class WeekRow:
    week_index: int  # 1, 2, 3...
    days: Tuple[DayCell, ...]


@dataclass(frozen=True)
class CalendarGrid:
    reference_month: date  # zawsze dzień 1
    weeks: Tuple[WeekRow, ...]

    def __iter__(self) -> Iterator[WeekRow]:
        return iter(self.weeks)

    def __len__(self) -> int:
        return len(self.weeks)

    @property
    def days(self) -> List[DayCell]:
        """Płaska lista komórek, tydzień po tygodniu."""
        return [cell for week in self.weeks for cell in week.days]


def sunday_based_weekday(day: date) -> int:
    """0 = niedziela ... 6 = sobota (Python liczy od poniedziałku)."""
    return (day.weekday() + 1) % 7


def reference_month_from(year, month) -> date:
    """
    Waliduje parę (rok, miesiąc) i zwraca pierwszy dzień miesiąca.
    Miesiące liczymy od 1. Miesiąc przed i po musi istnieć (padding).
    """
    # 2.7 nie może po cichu stać się lutym
    if any(isinstance(v, float) and not v.is_integer() for v in (year, month)):
        raise InvalidReferenceMonth(f"Invalid year/month: {year!r}/{month!r}")

    try:
        year = int(year)
        month = int(month)
    except (TypeError, ValueError, OverflowError):
        raise InvalidReferenceMonth(f"Invalid year/month: {year!r}/{month!r}")

    if not 1 <= month <= 12:
        raise InvalidReferenceMonth(f"Month must be between 1 and 12, got {month}")
    if (year, month) <= (1, 1) or (year, month) >= (9999, 12):
        raise InvalidReferenceMonth(f"Year/month out of range: {year}-{month:02d}")

    return date(year, month, 1)


def previous_month(day: date) -> date:
    return day.replace(day=1) - relativedelta(months=1)


def next_month(day: date) -> date:
    return day.replace(day=1) + relativedelta(months=1)


class CalendarGridBuilder:
    """
    Buduje siatkę miesiąca: tygodnie po 7 dni (niedziela - sobota),
    z dopełnieniem z sąsiednich miesięcy.
    """

    def __init__(self, clock: IClock):
        self.clock = clock

    def build(self, reference_month: date, blocked_dates: Optional[BlockedDates] = None) -> CalendarGrid:
        if isinstance(reference_month, datetime):
            reference_month = reference_month.date()
        first_day = reference_month_from(reference_month.year, reference_month.month)

        now = self.clock.now()
        cells = self.build_days(first_day, blocked_dates, now)
        weeks = self.chunk_weeks(cells)

        logger.debug(
            "Calendar grid %s: %d weeks, %d blocked week days",
            first_day.strftime("%Y-%m"),
            len(weeks),
            len(blocked_dates.blocked_week_days) if blocked_dates else 0,
        )
        return CalendarGrid(reference_month=first_day, weeks=tuple(weeks))

    def build_days(self, first_day: date, blocked_dates: Optional[BlockedDates], now: datetime) -> List[DayCell]:
        """Krok 1: płaska, chronologiczna lista komórek."""
        days_in_month = calendar.monthrange(first_day.year, first_day.month)[1]
        last_day = first_day.replace(day=days_in_month)

        month_days = [first_day + timedelta(days=i) for i in range(days_in_month)]

        # Dopełnienie z poprzedniego miesiąca (idziemy wstecz i odwracamy)
        leading = [first_day - timedelta(days=i + 1) for i in range(sunday_based_weekday(first_day))]
        leading.reverse()

        # Dopełnienie z następnego miesiąca (sobota = brak dopełnienia)
        trailing_count = DAYS_IN_WEEK - (sunday_based_weekday(last_day) + 1)
        trailing = [last_day + timedelta(days=i + 1) for i in range(trailing_count)]

        return (
            [DayCell(date=d, disabled=True) for d in leading]
            + [DayCell(date=d, disabled=self.is_disabled(d, blocked_dates, now)) for d in month_days]
            + [DayCell(date=d, disabled=True) for d in trailing]
        )

    def is_disabled(self, day: date, blocked_dates: Optional[BlockedDates], now: datetime) -> bool:
        # Koniec dnia porównujemy w strefie czasowej zegara (czas ścienny)
        end_of_day = datetime.combine(day, time.max)
        if end_of_day < now.replace(tzinfo=None):
            return True

        if blocked_dates is not None:
            return sunday_based_weekday(day) in blocked_dates.blocked_week_days
        return False

    @staticmethod
    def chunk_weeks(cells: List[DayCell]) -> List[WeekRow]:
        """Krok 2: dzieli płaską listę na tygodnie po 7 dni."""
        if len(cells) % DAYS_IN_WEEK != 0:
            raise ValueError(f"Cannot split {len(cells)} days into whole weeks")

        return [
            WeekRow(week_index=i // DAYS_IN_WEEK + 1, days=tuple(cells[i:i + DAYS_IN_WEEK]))
            for i in range(0, len(cells), DAYS_IN_WEEK)
        ]

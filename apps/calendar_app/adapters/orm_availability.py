# apps/calendar_app/adapters/orm_availability.py
from datetime import time
from typing import List

from django.contrib.auth.models import User
from django.db import transaction

from apps.calendar_app.domain.entities import WEEK_DAYS, BlockedDates, TimeIntervalEntity
from apps.calendar_app.models import MAX_MINUTES, UserTimeInterval
from apps.calendar_app.ports.availability import IBlockedDatesProvider, ITimeIntervalRepository, UserNotFound


def minutes_to_time(minutes: int) -> time:
    if not 0 <= minutes <= MAX_MINUTES:
        raise ValueError(f"Minutes out of range: {minutes}")
    return time(minutes // 60, minutes % 60)


class DjangoTimeIntervalRepository(ITimeIntervalRepository):
    def to_entity(self, model: UserTimeInterval) -> TimeIntervalEntity:
        return TimeIntervalEntity(
            week_day=model.week_day,
            start_time=minutes_to_time(model.time_start_in_minutes),
            end_time=minutes_to_time(model.time_end_in_minutes),
        )

    def get_for_user(self, user_id: int) -> List[TimeIntervalEntity]:
        qs = UserTimeInterval.objects.filter(user_id=user_id)
        return [self.to_entity(i) for i in qs]

    def replace_for_user(self, user_id: int, intervals: List[TimeIntervalEntity]) -> List[TimeIntervalEntity]:
        with transaction.atomic():
            UserTimeInterval.objects.filter(user_id=user_id).delete()
            UserTimeInterval.objects.bulk_create([
                UserTimeInterval(
                    user_id=user_id,
                    week_day=i.week_day,
                    time_start_in_minutes=i.start_in_minutes,
                    time_end_in_minutes=i.end_in_minutes,
                )
                for i in intervals
            ])
        return self.get_for_user(user_id)


class DjangoBlockedDatesProvider(IBlockedDatesProvider):
    def get_blocked_dates(self, username: str, year: int, month: int) -> BlockedDates:
        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            raise UserNotFound(f"User '{username}' does not exist")

        # Dzień zablokowany = brak jakiegokolwiek przedziału dostępności.
        # Dostępność jest tygodniowa, więc rok/miesiąc nie zmieniają wyniku.
        available = set(
            UserTimeInterval.objects.filter(user=user).values_list('week_day', flat=True)
        )
        return BlockedDates.from_week_days(d for d in WEEK_DAYS if d not in available)

from datetime import time

import pytest
from django.core.exceptions import ValidationError

from apps.calendar_app.adapters.orm_availability import (
    DjangoBlockedDatesProvider,
    DjangoTimeIntervalRepository,
    minutes_to_time,
)
from apps.calendar_app.application.use_cases import SaveTimeIntervalsUseCase
from apps.calendar_app.domain.entities import BlockedDates, TimeIntervalEntity
from apps.calendar_app.models import MAX_MINUTES, UserTimeInterval
from apps.calendar_app.ports.availability import UserNotFound

pytestmark = pytest.mark.django_db


class TestBlockedDatesProvider:
    def test_weekdays_available_blocks_weekend(self, weekday_intervals):
        blocked = DjangoBlockedDatesProvider().get_blocked_dates('jane-doe', 2024, 2)

        assert blocked == BlockedDates.from_week_days([0, 6])
        assert blocked.to_dict() == {'blockedWeekDays': [0, 6]}

    def test_user_without_intervals_has_every_day_blocked(self, user):
        blocked = DjangoBlockedDatesProvider().get_blocked_dates('jane-doe', 2024, 2)

        assert blocked.blocked_week_days == frozenset(range(7))

    def test_unknown_user(self, db):
        with pytest.raises(UserNotFound):
            DjangoBlockedDatesProvider().get_blocked_dates('nobody', 2024, 2)

    def test_other_users_intervals_are_ignored(self, user, django_user_model):
        other = django_user_model.objects.create_user(username='john')
        UserTimeInterval.objects.create(user=other, week_day=3, time_start_in_minutes=480, time_end_in_minutes=600)

        blocked = DjangoBlockedDatesProvider().get_blocked_dates('jane-doe', 2024, 2)

        assert 3 in blocked.blocked_week_days


class TestTimeIntervalRepository:
    def test_replace_for_user(self, weekday_intervals):
        repo = DjangoTimeIntervalRepository()

        saved = repo.replace_for_user(weekday_intervals.id, [
            TimeIntervalEntity(week_day=6, start_time=time(10, 0), end_time=time(14, 30)),
        ])

        assert saved == [TimeIntervalEntity(week_day=6, start_time=time(10, 0), end_time=time(14, 30))]
        row = UserTimeInterval.objects.get(user=weekday_intervals)
        assert (row.time_start_in_minutes, row.time_end_in_minutes) == (600, 870)

    def test_minutes_to_time(self):
        assert minutes_to_time(0) == time(0, 0)
        assert minutes_to_time(8 * 60 + 15) == time(8, 15)
        assert minutes_to_time(23 * 60 + 59) == time(23, 59)

    def test_minutes_to_time_out_of_range(self):
        with pytest.raises(ValueError):
            minutes_to_time(24 * 60)

    def test_late_interval_survives_round_trip(self, user):
        repo = DjangoTimeIntervalRepository()
        late = TimeIntervalEntity(week_day=5, start_time=time(18, 0), end_time=time(23, 59))

        repo.replace_for_user(user.id, repo.replace_for_user(user.id, [late]))

        row = UserTimeInterval.objects.get(user=user)
        assert row.time_end_in_minutes == MAX_MINUTES
        assert repo.get_for_user(user.id) == [late]

    def test_model_rejects_end_of_day_past_midnight(self, user):
        interval = UserTimeInterval(user=user, week_day=1, time_start_in_minutes=480, time_end_in_minutes=24 * 60)

        with pytest.raises(ValidationError):
            interval.full_clean()


class TestSaveTimeIntervalsUseCase:
    def test_rejects_empty_selection(self, user):
        use_case = SaveTimeIntervalsUseCase(DjangoTimeIntervalRepository())

        with pytest.raises(ValueError, match="At least one day"):
            use_case.execute(user.id, [])

    def test_rejects_interval_shorter_than_one_hour(self, user):
        use_case = SaveTimeIntervalsUseCase(DjangoTimeIntervalRepository())

        with pytest.raises(ValueError, match="1 hour"):
            use_case.execute(user.id, [TimeIntervalEntity(week_day=1, start_time=time(9, 0), end_time=time(9, 30))])

        assert not UserTimeInterval.objects.exists()

    def test_saves_intervals(self, user):
        use_case = SaveTimeIntervalsUseCase(DjangoTimeIntervalRepository())

        saved = use_case.execute(user.id, [
            TimeIntervalEntity(week_day=1, start_time=time(8, 0), end_time=time(12, 0)),
            TimeIntervalEntity(week_day=3, start_time=time(13, 0), end_time=time(18, 0)),
        ])

        assert [i.week_day for i in saved] == [1, 3]
        assert DjangoBlockedDatesProvider().get_blocked_dates(user.username, 2024, 2).blocked_week_days == {0, 2, 4, 5, 6}

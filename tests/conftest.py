from datetime import datetime

import pytest

from apps.calendar_app.adapters.fixed_clock import FixedClock
from apps.calendar_app.models import UserTimeInterval


@pytest.fixture
def clock_at():
    """Fabryka zegarów zamrożonych w podanym momencie (UTC)."""
    def make(*args, tz_name='UTC'):
        return FixedClock(datetime(*args), tz_name=tz_name)
    return make


@pytest.fixture
def user(django_user_model):
    user = django_user_model.objects.create_user(username='jane-doe')
    user.profile.name = 'Jane Doe'
    user.profile.bio = 'Product designer'
    user.profile.save()
    return user


@pytest.fixture
def weekday_intervals(user):
    """Dostępność poniedziałek - piątek, 08:00 - 18:00."""
    for week_day in range(1, 6):
        UserTimeInterval.objects.create(
            user=user, week_day=week_day, time_start_in_minutes=8 * 60, time_end_in_minutes=18 * 60
        )
    return user

# apps/calendar_app/adapters/fixed_clock.py
from datetime import datetime

import pytz

from apps.calendar_app.ports.clock import IClock


class FixedClock(IClock):
    """Zegar "zamrożony" w jednym momencie (testy, podgląd)."""

    def __init__(self, moment: datetime, tz_name: str = 'UTC'):
        tz = pytz.timezone(tz_name)
        if moment.tzinfo is None:
            moment = tz.localize(moment)
        self.moment = moment.astimezone(tz)

    def now(self) -> datetime:
        return self.moment

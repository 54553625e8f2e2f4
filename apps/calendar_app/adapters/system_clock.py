# apps/calendar_app/adapters/system_clock.py
from datetime import datetime
from typing import Optional

import pytz
from django.utils import timezone

from apps.calendar_app.ports.clock import IClock


class SystemClock(IClock):
    def __init__(self, tz_name: Optional[str] = None):
        self.tz = pytz.timezone(tz_name) if tz_name else None

    def now(self) -> datetime:
        if self.tz is not None:
            return datetime.now(self.tz)
        # Strefa z ustawień Django (TIME_ZONE lub aktywna)
        return timezone.localtime()

# apps/calendar_app/application/use_cases.py
import logging
from typing import List

from apps.calendar_app.domain.entities import TimeIntervalEntity
from apps.calendar_app.ports.availability import ITimeIntervalRepository

logger = logging.getLogger(__name__)


class SaveTimeIntervalsUseCase:
    def __init__(self, repository: ITimeIntervalRepository):
        self.repository = repository

    def execute(self, user_id: int, intervals: List[TimeIntervalEntity]) -> List[TimeIntervalEntity]:
        if not intervals:
            raise ValueError("At least one day must be selected")

        for interval in intervals:
            if interval.end_in_minutes - interval.start_in_minutes < 60:
                raise ValueError("End time must be at least 1 hour after start time")

        saved = self.repository.replace_for_user(user_id, intervals)
        logger.info("Saved %d time intervals for user %s", len(saved), user_id)
        return saved

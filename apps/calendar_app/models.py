# apps/calendar_app/models.py
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

WEEK_DAY_CHOICES = [
    (0, 'Sunday'), (1, 'Monday'), (2, 'Tuesday'), (3, 'Wednesday'),
    (4, 'Thursday'), (5, 'Friday'), (6, 'Saturday'),
]

MAX_MINUTES = 24 * 60 - 1  # 23:59


class UserTimeInterval(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='time_intervals')

    # 0 = niedziela ... 6 = sobota (tak jak w siatce kalendarza)
    week_day = models.PositiveSmallIntegerField(choices=WEEK_DAY_CHOICES, validators=[MaxValueValidator(6)])

    # Minuty od północy (np. 08:00 -> 480), najpóźniej 23:59
    time_start_in_minutes = models.PositiveIntegerField(validators=[MaxValueValidator(MAX_MINUTES)])
    time_end_in_minutes = models.PositiveIntegerField(validators=[MinValueValidator(1), MaxValueValidator(MAX_MINUTES)])

    class Meta:
        ordering = ['week_day', 'time_start_in_minutes']

    def __str__(self):
        return f"{self.get_week_day_display()} {self.time_start_in_minutes}-{self.time_end_in_minutes}"

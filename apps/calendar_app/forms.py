# apps/calendar_app/forms.py
from datetime import time
from typing import List

from django import forms

from apps.calendar_app.domain.entities import TimeIntervalEntity
from apps.calendar_app.models import WEEK_DAY_CHOICES


class TimeIntervalForm(forms.Form):
    week_day = forms.TypedChoiceField(choices=WEEK_DAY_CHOICES, coerce=int, widget=forms.HiddenInput)
    enabled = forms.BooleanField(required=False)
    start_time = forms.TimeField(
        required=False,
        widget=forms.TimeInput(attrs={'type': 'time', 'step': 3600, 'class': 'form-control'})
    )
    end_time = forms.TimeField(
        required=False,
        widget=forms.TimeInput(attrs={'type': 'time', 'step': 3600, 'class': 'form-control'})
    )

    def clean(self):
        cleaned = super().clean()
        if not cleaned.get('enabled'):
            return cleaned

        start, end = cleaned.get('start_time'), cleaned.get('end_time')
        if start is None or end is None:
            raise forms.ValidationError("Start and end time are required for enabled days.")

        start_minutes = start.hour * 60 + start.minute
        end_minutes = end.hour * 60 + end.minute
        if end_minutes - start_minutes < 60:
            raise forms.ValidationError("End time must be at least 1 hour after start time.")
        return cleaned

    @property
    def week_day_label(self):
        value = self.initial.get('week_day', self.data.get(self.add_prefix('week_day')))
        return dict(WEEK_DAY_CHOICES).get(int(value)) if value is not None else ''


TimeIntervalFormSet = forms.formset_factory(TimeIntervalForm, extra=0, min_num=7, max_num=7, validate_max=True)


def default_intervals_initial() -> List[dict]:
    """Domyślnie: poniedziałek - piątek, 08:00 - 18:00."""
    return [
        {
            'week_day': day,
            'enabled': day not in (0, 6),
            'start_time': time(8, 0),
            'end_time': time(18, 0),
        }
        for day, _ in WEEK_DAY_CHOICES
    ]


def intervals_from_formset(formset) -> List[TimeIntervalEntity]:
    return [
        TimeIntervalEntity(
            week_day=form.cleaned_data['week_day'],
            start_time=form.cleaned_data['start_time'],
            end_time=form.cleaned_data['end_time'],
        )
        for form in formset.forms
        if form.cleaned_data.get('enabled')
    ]

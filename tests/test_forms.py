from datetime import date, time

import pytest

from apps.calendar_app.domain.calendar_grid import DayCell
from apps.calendar_app.domain.entities import TimeIntervalEntity
from apps.calendar_app.forms import (
    TimeIntervalFormSet,
    default_intervals_initial,
    intervals_from_formset,
)
from apps.core.forms import ClaimUsernameForm, RegisterForm
from apps.core.templatetags.core_extras import cell_state, step_range


class TestClaimUsernameForm:
    def test_lowercases_username(self):
        form = ClaimUsernameForm({'username': 'Jane-Doe'})

        assert form.is_valid()
        assert form.cleaned_data['username'] == 'jane-doe'

    @pytest.mark.parametrize('username, message', [
        ('ab', "Username must have at least 3 letters."),
        ('jane1', "Username may only contain letters and hyphens."),
        ('jane doe', "Username may only contain letters and hyphens."),
        ('jane_doe', "Username may only contain letters and hyphens."),
    ])
    def test_rejects_invalid_usernames(self, username, message):
        form = ClaimUsernameForm({'username': username})

        assert not form.is_valid()
        assert message in form.errors['username']

    def test_username_is_required(self):
        assert not ClaimUsernameForm({'username': ''}).is_valid()


class TestRegisterForm:
    def test_valid(self):
        form = RegisterForm({'username': 'JOHN', 'name': 'John Smith'})

        assert form.is_valid()
        assert form.cleaned_data == {'username': 'john', 'name': 'John Smith'}

    def test_short_name(self):
        form = RegisterForm({'username': 'john', 'name': 'Jo'})

        assert not form.is_valid()
        assert form.errors['name'] == ["Name must have at least 3 letters."]


def formset_data(rows):
    data = {
        'form-TOTAL_FORMS': str(len(rows)),
        'form-INITIAL_FORMS': '0',
        'form-MIN_NUM_FORMS': '7',
        'form-MAX_NUM_FORMS': '7',
    }
    for i, (week_day, enabled, start, end) in enumerate(rows):
        data[f'form-{i}-week_day'] = str(week_day)
        if enabled:
            data[f'form-{i}-enabled'] = 'on'
        data[f'form-{i}-start_time'] = start
        data[f'form-{i}-end_time'] = end
    return data


class TestTimeIntervalFormSet:
    def test_only_enabled_days_become_intervals(self):
        rows = [(d, d in (1, 2), '08:00', '18:00') for d in range(7)]
        formset = TimeIntervalFormSet(formset_data(rows))

        assert formset.is_valid(), formset.errors
        assert intervals_from_formset(formset) == [
            TimeIntervalEntity(week_day=1, start_time=time(8, 0), end_time=time(18, 0)),
            TimeIntervalEntity(week_day=2, start_time=time(8, 0), end_time=time(18, 0)),
        ]

    def test_end_must_be_an_hour_after_start(self):
        rows = [(d, d == 1, '08:00', '08:30') for d in range(7)]
        formset = TimeIntervalFormSet(formset_data(rows))

        assert not formset.is_valid()
        assert "End time must be at least 1 hour after start time." in formset.forms[1].non_field_errors()

    def test_disabled_day_ignores_times(self):
        rows = [(d, False, '', '') for d in range(7)]
        formset = TimeIntervalFormSet(formset_data(rows))

        assert formset.is_valid()
        assert intervals_from_formset(formset) == []

    def test_default_initial_is_monday_to_friday(self):
        initial = default_intervals_initial()

        assert [row['week_day'] for row in initial if row['enabled']] == [1, 2, 3, 4, 5]
        assert TimeIntervalFormSet(initial=initial).forms[0].week_day_label == 'Sunday'


class TestTemplateTags:
    def test_cell_state(self):
        selected = date(2024, 2, 20)

        assert cell_state(DayCell(date=selected, disabled=True), selected) == 'disabled'
        assert cell_state(DayCell(date=selected, disabled=False), selected) == 'selected'
        assert cell_state(DayCell(date=date(2024, 2, 21), disabled=False), selected) == 'available'

    def test_step_range(self):
        assert list(step_range(4)) == [1, 2, 3, 4]

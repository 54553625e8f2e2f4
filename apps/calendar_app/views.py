# apps/calendar_app/views.py
import logging
from datetime import date

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.models import User
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET

from apps.calendar_app.adapters.orm_availability import DjangoBlockedDatesProvider, DjangoTimeIntervalRepository
from apps.calendar_app.adapters.system_clock import SystemClock
from apps.calendar_app.application.use_cases import SaveTimeIntervalsUseCase
from apps.calendar_app.domain.calendar_grid import (
    CalendarGridBuilder,
    InvalidReferenceMonth,
    next_month,
    previous_month,
    reference_month_from,
)
from apps.calendar_app.forms import TimeIntervalFormSet, default_intervals_initial, intervals_from_formset
from apps.calendar_app.ports.availability import UserNotFound

logger = logging.getLogger(__name__)

SHORT_WEEK_DAYS = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']


def serialize_grid(grid) -> dict:
    return {
        'year': grid.reference_month.year,
        'month': grid.reference_month.month,
        'weeks': [
            {
                'week': week.week_index,
                'days': [{'date': cell.date.isoformat(), 'disabled': cell.disabled} for cell in week.days],
            }
            for week in grid
        ],
    }


def _month_params(day: date) -> str:
    return f"?year={day.year}&month={day.month}"


@require_GET
def schedule_view(request, username):
    """Publiczna strona rezerwacji: profil + kalendarz miesiąca."""
    user = get_object_or_404(User.objects.select_related('profile'), username=username)
    clock = SystemClock()

    # 1. Ustal miesiąc (domyślnie bieżący)
    try:
        current_month = reference_month_from(request.GET['year'], request.GET['month'])
    except (KeyError, InvalidReferenceMonth):
        current_month = clock.now().date().replace(day=1)

    # 2. Zablokowane dni tygodnia + siatka
    blocked_dates = DjangoBlockedDatesProvider().get_blocked_dates(
        username, current_month.year, current_month.month
    )
    grid = CalendarGridBuilder(clock).build(current_month, blocked_dates)

    # 3. Wybrany dzień (tylko jeśli jest aktywny w siatce)
    selected_date = None
    raw_date = request.GET.get('date')
    if raw_date:
        try:
            candidate = date.fromisoformat(raw_date)
        except ValueError:
            candidate = None
        if any(cell.date == candidate and not cell.disabled for cell in grid.days):
            selected_date = candidate

    if request.headers.get('HX-Request'):
        base_template = 'base_htmx.html'
    else:
        base_template = 'base.html'

    return render(request, 'calendar/schedule.html', {
        'schedule_user': user,
        'profile': user.profile,
        'grid': grid,
        'short_week_days': SHORT_WEEK_DAYS,
        'current_date': current_month,
        'selected_date': selected_date,
        'month_params': _month_params(current_month),
        'prev_date': _month_params(previous_month(current_month)),
        'next_date': _month_params(next_month(current_month)),
        'base_template': base_template,
    })


def _parse_month_or_error(request):
    try:
        return reference_month_from(request.GET.get('year'), request.GET.get('month')), None
    except InvalidReferenceMonth as e:
        return None, JsonResponse({'message': str(e)}, status=400)


@require_GET
def blocked_dates_api(request, username):
    month, error = _parse_month_or_error(request)
    if error:
        return error

    try:
        blocked_dates = DjangoBlockedDatesProvider().get_blocked_dates(username, month.year, month.month)
    except UserNotFound:
        return JsonResponse({'message': 'User does not exist.'}, status=404)

    return JsonResponse(blocked_dates.to_dict())


@require_GET
def calendar_api(request, username):
    month, error = _parse_month_or_error(request)
    if error:
        return error

    try:
        blocked_dates = DjangoBlockedDatesProvider().get_blocked_dates(username, month.year, month.month)
    except UserNotFound:
        return JsonResponse({'message': 'User does not exist.'}, status=404)

    grid = CalendarGridBuilder(SystemClock()).build(month, blocked_dates)
    return JsonResponse(serialize_grid(grid))


@login_required
def time_intervals_view(request):
    """Krok 3 rejestracji: tygodniowa dostępność."""
    repository = DjangoTimeIntervalRepository()

    if request.method == 'POST':
        formset = TimeIntervalFormSet(request.POST)
        if formset.is_valid():
            try:
                SaveTimeIntervalsUseCase(repository).execute(request.user.id, intervals_from_formset(formset))
            except ValueError as e:
                messages.error(request, str(e))
            else:
                return redirect('update_profile')
    else:
        existing = repository.get_for_user(request.user.id)
        initial = default_intervals_initial()
        if existing:
            by_day = {i.week_day: i for i in existing}
            for row in initial:
                interval = by_day.get(row['week_day'])
                row['enabled'] = interval is not None
                if interval:
                    row['start_time'] = interval.start_time
                    row['end_time'] = interval.end_time
        formset = TimeIntervalFormSet(initial=initial)

    return render(request, 'calendar/time_intervals.html', {'formset': formset})

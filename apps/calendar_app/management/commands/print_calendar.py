from django.core.management.base import BaseCommand, CommandError

from apps.calendar_app.adapters.orm_availability import DjangoBlockedDatesProvider
from apps.calendar_app.adapters.system_clock import SystemClock
from apps.calendar_app.domain.calendar_grid import CalendarGridBuilder, InvalidReferenceMonth, reference_month_from
from apps.calendar_app.ports.availability import UserNotFound


class Command(BaseCommand):
    help = 'Wypisuje siatkę kalendarza dla miesiąca (opcjonalnie z blokadami usera)'

    def add_arguments(self, parser):
        parser.add_argument('year', type=int)
        parser.add_argument('month', type=int)
        parser.add_argument('--username', help='Uwzględnij zablokowane dni tygodnia tego usera')
        parser.add_argument('--tz', dest='tz_name', help='Strefa czasowa dla "dzisiaj" (np. Europe/Warsaw)')

    def handle(self, *args, **options):
        try:
            month = reference_month_from(options['year'], options['month'])
        except InvalidReferenceMonth as e:
            raise CommandError(str(e))

        blocked_dates = None
        if options['username']:
            try:
                blocked_dates = DjangoBlockedDatesProvider().get_blocked_dates(
                    options['username'], month.year, month.month
                )
            except UserNotFound as e:
                raise CommandError(str(e))

        grid = CalendarGridBuilder(SystemClock(options['tz_name'])).build(month, blocked_dates)

        self.stdout.write(self.style.SUCCESS(month.strftime('%B %Y')))
        self.stdout.write(' Sun  Mon  Tue  Wed  Thu  Fri  Sat')
        for week in grid:
            # Dni niedostępne w nawiasach
            line = ''.join(
                f"({cell.date.day:2d})" if cell.disabled else f" {cell.date.day:2d} "
                for cell in week.days
            )
            self.stdout.write(' '.join(line[i:i + 4] for i in range(0, len(line), 4)))

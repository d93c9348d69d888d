"""
Convert dates and format numbers from the command line
Usage:
    python manage.py bsdate
    python manage.py bsdate --to-ad 2072-01-12T11:56:25
    python manage.py bsdate --to-bs 2015-04-25
    python manage.py bsdate --number 123456789.6548 --words --monetary --language nepali
"""
from datetime import datetime

from django.core.management.base import BaseCommand, CommandError

from bs_calendar.calendar_data import get_nepali_month_name
from bs_calendar.exceptions import BsCalendarError
from bs_calendar.nepali_datetime import NepaliDateTime
from bs_calendar.number_format import NepaliNumberFormat
from bs_calendar.utils import get_fiscal_year, get_fiscal_year_summary

WEEKDAYS = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']


class Command(BaseCommand):
    help = 'Convert between BS and AD dates, or format a number the Nepali way'

    def add_arguments(self, parser):
        action = parser.add_mutually_exclusive_group()
        action.add_argument('--to-ad', metavar='BS_DATE', help='BS date/time to convert, e.g. 2072-01-12T11:56:25')
        action.add_argument('--to-bs', metavar='AD_DATE', help='AD date/time to convert, e.g. 2015-04-25')
        action.add_argument('--number', help='Number to format')
        parser.add_argument('--words', action='store_true', help='Format the number in words')
        parser.add_argument('--monetary', action='store_true', help='Format the number as money')
        parser.add_argument('--decimal-digits', type=int, default=None)
        parser.add_argument('--symbol', default=None, help='Currency symbol used with --monetary, e.g. Rs.')
        parser.add_argument(
            '--language',
            choices=['english', 'nepali'],
            default=None,
            help='Output language (default: BS_CALENDAR["LANGUAGE"])'
        )

    def handle(self, *args, **options):
        try:
            if options['to_ad']:
                self._show(NepaliDateTime.parse(options['to_ad']))
            elif options['to_bs']:
                try:
                    ad_value = datetime.fromisoformat(options['to_bs'])
                except ValueError as e:
                    raise CommandError(f'Invalid AD date {options["to_bs"]!r}: {e}')
                self._show(NepaliDateTime.from_datetime(ad_value))
            elif options['number'] is not None:
                number_format = NepaliNumberFormat(
                    in_words=options['words'],
                    is_monetary=options['monetary'],
                    decimal_digits=options['decimal_digits'],
                    symbol=options['symbol'],
                    language=options['language'],
                )
                self.stdout.write(number_format.format(options['number']))
            else:
                self._show_today()
        except BsCalendarError as e:
            raise CommandError(str(e))

    def _show(self, bs_value):
        self.stdout.write(f'BS: {bs_value}')
        self.stdout.write(f'AD: {bs_value.to_datetime()}')
        self.stdout.write(
            f'{WEEKDAYS[bs_value.weekday - 1]}, '
            f'{get_nepali_month_name(bs_value.month)} {bs_value.day}, {bs_value.year}'
        )

    def _show_today(self):
        now = NepaliDateTime.now()
        self._show(now)

        fiscal_year = get_fiscal_year(now)
        summary = get_fiscal_year_summary(fiscal_year)
        self.stdout.write(
            self.style.SUCCESS(
                f'\nCurrent Fiscal Year: {fiscal_year} (AD: {summary["fiscal_year_english"]})\n'
                f'Period: {summary["ad_start_date"]} to {summary["ad_end_date"]} '
                f'({summary["total_days"]} days)'
            )
        )

"""
Materialise the BS month table into NepaliCalendar rows
Usage: python manage.py populate_calendar [--start-year 2070 --end-year 2090] [--clear]
"""
from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from bs_calendar.calendar_data import MAX_YEAR, MIN_YEAR, SUPPORTED_YEARS, epoch_anchor, month_lengths
from bs_calendar.models import NepaliCalendar


def calendar_rows(year):
    """One unsaved NepaliCalendar per month of a BS year, AD starts chained from the year's anchor"""
    ad_start = epoch_anchor(year)
    for month, days in enumerate(month_lengths(year), start=1):
        yield NepaliCalendar(bs_year=year, month=month, days_in_month=days, ad_start_date=ad_start)
        ad_start += timedelta(days=days)


class Command(BaseCommand):
    help = f'Store the BS month table ({MIN_YEAR}-{MAX_YEAR}) as NepaliCalendar rows'

    def add_arguments(self, parser):
        parser.add_argument('--start-year', type=int, default=MIN_YEAR, help=f'First BS year (default: {MIN_YEAR})')
        parser.add_argument('--end-year', type=int, default=MAX_YEAR, help=f'Last BS year (default: {MAX_YEAR})')
        parser.add_argument('--clear', action='store_true', help='Delete all stored rows first')

    def handle(self, *args, **options):
        start_year, end_year = options['start_year'], options['end_year']
        if start_year > end_year:
            raise CommandError(f'--start-year ({start_year}) is after --end-year ({end_year})')

        years = []
        for year in range(start_year, end_year + 1):
            if year in SUPPORTED_YEARS:
                years.append(year)
            else:
                self.stdout.write(self.style.WARNING(f'Skipping year {year} - outside the calendar table'))

        rows = [row for year in years for row in calendar_rows(year)]

        with transaction.atomic():
            if options['clear']:
                deleted, _ = NepaliCalendar.objects.all().delete()
                self.stdout.write(self.style.WARNING(f'Deleted {deleted} existing rows'))

            stored = {
                (entry.bs_year, entry.month): entry
                for entry in NepaliCalendar.objects.filter(bs_year__in=years)
            }
            to_create, to_update = [], []
            for row in rows:
                existing = stored.get((row.bs_year, row.month))
                if existing is None:
                    to_create.append(row)
                    continue
                existing.days_in_month = row.days_in_month
                existing.ad_start_date = row.ad_start_date
                to_update.append(existing)

            NepaliCalendar.objects.bulk_create(to_create)
            NepaliCalendar.objects.bulk_update(to_update, ['days_in_month', 'ad_start_date'])

        self.stdout.write(
            self.style.SUCCESS(
                f'Created: {len(to_create)} entries\n'
                f'Updated: {len(to_update)} entries'
            )
        )
        if rows:
            first, last = rows[0], rows[-1]
            self.stdout.write(
                f'BS {first.bs_year}-{last.bs_year} covers AD {first.ad_start_date} to {last.ad_end_date}'
            )

from datetime import timedelta

from django.core.exceptions import ValidationError
from django.db import models

from .calendar_data import NEPALI_MONTHS


class NepaliCalendar(models.Model):
    """Store Nepali calendar data for BS to AD conversion"""

    MONTH_CHOICES = [(number, name) for number, name in enumerate(NEPALI_MONTHS, start=1)]

    bs_year = models.IntegerField(db_index=True, help_text="Bikram Sambat Year")
    month = models.IntegerField(choices=MONTH_CHOICES, db_index=True)
    days_in_month = models.IntegerField(help_text="Number of days in this month")
    ad_start_date = models.DateField(help_text="Gregorian date when this BS month starts")

    class Meta:
        ordering = ['bs_year', 'month']
        unique_together = [['bs_year', 'month']]
        verbose_name = "Nepali Calendar Entry"
        verbose_name_plural = "Nepali Calendar"

    def __str__(self):
        return f"{self.get_month_display()} {self.bs_year} ({self.days_in_month} days)"

    def clean(self):
        if self.month < 1 or self.month > 12:
            raise ValidationError("Month must be between 1 and 12")
        if self.days_in_month < 29 or self.days_in_month > 32:
            raise ValidationError("Days in month must be between 29 and 32")

    @property
    def month_name(self):
        return self.get_month_display()

    @property
    def ad_end_date(self):
        return self.ad_start_date + timedelta(days=self.days_in_month - 1)

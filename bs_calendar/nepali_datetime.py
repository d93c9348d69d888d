"""
NepaliDateTime: an immutable Bikram Sambat date and time of day
"""
import dataclasses
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

from .calendar_data import month_length
from .conf import get_setting
from .exceptions import NepaliDateFormatError
from .utils import ad_to_bs, bs_to_ad

# BS 2000/01/01 fell on a Wednesday
WEEKDAY_REFERENCE = (2000, 1, 1)
WEEKDAY_REFERENCE_ISO = 3

# BS 2026/09/17 is AD 1970/01/01. Weekdays after it used to be shifted by a
# day to make up for an epoch artifact in an older converter. Only applied
# when BS_CALENDAR['LEGACY_WEEKDAY_SHIFT'] is on.
LEGACY_WEEKDAY_CUTOFF = (2026, 9, 17)

_PARSE_FORMAT = re.compile(
    r'([+-]?\d{4,6})-?(\d\d)-?(\d\d)'  # Day part.
    r'(?:[ T](\d\d)(?::?(\d\d)(?::?(\d\d)(?:[.,](\d{1,6}))?)?)?'  # Time part.
    r'( ?[zZ]| ?([-+])(\d\d)(?::?(\d\d))?)?)?'  # Timezone part, ignored.
)

_FIELD_RANGES = (
    ('month', 1, 12),
    ('day', 1, 32),
    ('hour', 0, 23),
    ('minute', 0, 59),
    ('second', 0, 59),
)


def _four_digits(n: int) -> str:
    sign = '-' if n < 0 else ''
    return f"{sign}{abs(n):04d}"


def _six_digits(n: int) -> str:
    sign = '-' if n < 0 else '+'
    return f"{sign}{abs(n):06d}"


@dataclass(frozen=True)
class NepaliDateTime:
    """
    A date in the Bikram Sambat calendar plus a naive time of day.

    Fields are not range checked on construction, so a day past the end of
    its month is accepted; converting such a value rolls the extra days over
    into the following month(s).
    """

    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    microsecond: int = 0

    @classmethod
    def now(cls) -> 'NepaliDateTime':
        return cls.from_datetime(datetime.now())

    @classmethod
    def from_datetime(cls, value: Union[date, datetime]) -> 'NepaliDateTime':
        """Convert an AD date or datetime; the time of day is copied as is"""
        year, month, day = ad_to_bs(value)
        if not isinstance(value, datetime):
            return cls(year, month, day)
        return cls(
            year, month, day,
            value.hour, value.minute, value.second,
            value.microsecond // 1000, value.microsecond % 1000,
        )

    def to_date(self) -> date:
        """AD date for the BS date part"""
        return bs_to_ad(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        ad_date = self.to_date()
        return datetime(
            ad_date.year, ad_date.month, ad_date.day,
            self.hour, self.minute, self.second,
            self.millisecond * 1000 + self.microsecond,
        )

    @property
    def days_in_month(self) -> int:
        return month_length(self.year, self.month)

    @property
    def weekday(self) -> int:
        """Day of the week, 1 = Monday ... 7 = Sunday"""
        difference = (self.to_date() - bs_to_ad(*WEEKDAY_REFERENCE)).days
        if get_setting('LEGACY_WEEKDAY_SHIFT') and self.is_after(NepaliDateTime(*LEGACY_WEEKDAY_CUTOFF)):
            difference += 1
        weekday = (WEEKDAY_REFERENCE_ISO + difference % 7) % 7
        return 7 if weekday == 0 else weekday

    # Date-only comparison. The time of day plays no part here, unlike in
    # difference(), which is why NepaliDateTime defines no ordering operators.

    def compare_date_only(self, other: 'NepaliDateTime') -> int:
        this_date, other_date = self.to_date(), other.to_date()
        if this_date < other_date:
            return -1
        if this_date > other_date:
            return 1
        return 0

    def is_after(self, other: 'NepaliDateTime') -> bool:
        return self.compare_date_only(other) > 0

    def is_before(self, other: 'NepaliDateTime') -> bool:
        return self.compare_date_only(other) < 0

    def is_same_date(self, other: 'NepaliDateTime') -> bool:
        return self.compare_date_only(other) == 0

    def difference(self, other: 'NepaliDateTime') -> timedelta:
        """Time elapsed from ``other`` to this value, time of day included"""
        return self.to_datetime() - other.to_datetime()

    def __add__(self, other):
        if not isinstance(other, timedelta):
            return NotImplemented
        return NepaliDateTime.from_datetime(self.to_datetime() + other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, timedelta):
            return NepaliDateTime.from_datetime(self.to_datetime() - other)
        if isinstance(other, NepaliDateTime):
            return self.difference(other)
        return NotImplemented

    def replace(self, **changes) -> 'NepaliDateTime':
        return dataclasses.replace(self, **changes)

    def merge_time(self, hour: int, minute: int, second: int) -> 'NepaliDateTime':
        """Same date with the given time; milliseconds and microseconds are reset"""
        return NepaliDateTime(self.year, self.month, self.day, hour, minute, second)

    @classmethod
    def parse(cls, formatted_string: str) -> 'NepaliDateTime':
        """
        Construct a NepaliDateTime from an ISO 8601 like string.

        Accepted input is a signed four-to-six digit year, two digit month and
        two digit day, optionally separated by ``-``. An optional time part
        follows after ``T`` or a space: a two digit hour, then optionally
        minutes and seconds (each optionally preceded by ``:``), then
        optionally ``.`` or ``,`` and one to six digits of second fraction.
        A trailing timezone (``Z``, ``+05:45``, ``-0500``...) is accepted and
        ignored.

        Examples: ``"2076-02-32 13:27:00"``, ``"2076-02-32T13:27:00.123456"``,
        ``"20760232"``, ``"+20760232"``, ``"2076-02-32T14+05:45"``.

        Raises:
            NepaliDateFormatError: when the text does not match or a field is
                out of range.
        """
        if not isinstance(formatted_string, str):
            raise TypeError(f"Expected str, got {type(formatted_string).__name__}")
        match = _PARSE_FORMAT.fullmatch(formatted_string)
        if match is None:
            raise NepaliDateFormatError("Invalid date format", formatted_string)

        def parse_int_or_zero(matched: Optional[str]) -> int:
            return int(matched) if matched else 0

        # '.123' -> 123000 microseconds, '.1234' -> 123400
        fraction = match.group(7)
        milli_and_microseconds = int(fraction.ljust(6, '0')) if fraction else 0

        fields = {
            'year': int(match.group(1)),
            'month': int(match.group(2)),
            'day': int(match.group(3)),
            'hour': parse_int_or_zero(match.group(4)),
            'minute': parse_int_or_zero(match.group(5)),
            'second': parse_int_or_zero(match.group(6)),
            'millisecond': milli_and_microseconds // 1000,
            'microsecond': milli_and_microseconds % 1000,
        }
        for name, low, high in _FIELD_RANGES:
            if not low <= fields[name] <= high:
                raise NepaliDateFormatError(f"Invalid date format ({name} out of range)", formatted_string)

        return cls(**fields)

    @classmethod
    def try_parse(cls, formatted_string: str) -> Optional['NepaliDateTime']:
        try:
            return cls.parse(formatted_string)
        except NepaliDateFormatError:
            return None

    def _format(self, year: str, separator: str) -> str:
        ms = f"{self.millisecond:03d}"
        us = '' if self.microsecond == 0 else f"{self.microsecond:03d}"
        return (
            f"{year}-{self.month:02d}-{self.day:02d}{separator}"
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{ms}{us}"
        )

    def __str__(self) -> str:
        """``yyyy-MM-dd HH:mm:ss.mmm[uuu]``; can be read back with parse()"""
        return self._format(_four_digits(self.year), ' ')

    def isoformat(self) -> str:
        """
        ISO 8601 full precision extended format, ``yyyy-MM-ddTHH:mm:ss.mmm[uuu]``.

        The year is four digits (with a ``-`` when negative) inside
        -9999..9999 and a signed six digit number outside it. The microsecond
        part is left out when it is zero.
        """
        if -9999 <= self.year <= 9999:
            year = _four_digits(self.year)
        else:
            year = _six_digits(self.year)
        return self._format(year, 'T')


def to_ad(value: NepaliDateTime) -> datetime:
    return value.to_datetime()


def to_bs(value: Union[date, datetime]) -> NepaliDateTime:
    return NepaliDateTime.from_datetime(value)

"""
Utility functions for Nepali-English date conversion and fiscal year operations
"""
import logging
import re
from bisect import bisect_right
from datetime import date, datetime, timedelta
from typing import Dict, Tuple, Union

from django.core.cache import cache

from .calendar_data import (
    MAX_AD_DATE,
    MIN_AD_DATE,
    YEAR_START_AD,
    epoch_anchor,
    month_length,
    month_lengths,
)
from .conf import cache_enabled, get_setting
from .exceptions import ConversionError

logger = logging.getLogger(__name__)

_ANCHOR_YEARS = sorted(YEAR_START_AD)
_ANCHOR_DATES = [YEAR_START_AD[year] for year in _ANCHOR_YEARS]

_FISCAL_YEAR_RE = re.compile(r'^(\d{4})/(\d{2})$')

BsTuple = Tuple[int, int, int]


def count_days_in_bs_year(year: int, month: int, day: int) -> int:
    """Days elapsed from Baisakh 1 of ``year`` to the given month/day"""
    total_days = 0
    for m in range(1, month):
        total_days += month_length(year, m)
    # validates the month itself
    month_length(year, month)
    return total_days + day - 1


def bs_to_ad(year: int, month: int, day: int) -> date:
    """
    Convert Bikram Sambat (BS) date to Anno Domini (AD) date

    Args:
        year: BS year
        month: BS month (1-12)
        day: BS day. Days past the end of the month roll over into
            the following months.

    Returns:
        date object representing the AD date

    Raises:
        ConversionError: If the year is not covered by the calendar table
    """
    use_cache = cache_enabled()
    cache_key = f"bs_to_ad_{year}_{month}_{day}"
    if use_cache:
        cached_result = cache.get(cache_key)
        if cached_result:
            return cached_result

    try:
        days_diff = count_days_in_bs_year(year, month, day)
        result_date = epoch_anchor(year) + timedelta(days=days_diff)
    except ConversionError:
        logger.warning("Cannot convert BS %s/%s/%s to AD", year, month, day)
        raise

    if use_cache:
        logger.debug("Caching BS %s/%s/%s -> AD %s", year, month, day, result_date)
        cache.set(cache_key, result_date, get_setting('CACHE_TIMEOUT'))

    return result_date


def _as_date(ad_date: Union[date, datetime, str]) -> date:
    if isinstance(ad_date, str):
        return datetime.strptime(ad_date, '%Y-%m-%d').date()
    if isinstance(ad_date, datetime):
        return ad_date.date()
    if isinstance(ad_date, date):
        return ad_date
    raise TypeError(f"Expected date, datetime or 'YYYY-MM-DD' string, got {type(ad_date).__name__}")


def ad_to_bs(ad_date: Union[date, datetime, str]) -> BsTuple:
    """
    Convert Anno Domini (AD) date to Bikram Sambat (BS) date

    Args:
        ad_date: date, datetime or 'YYYY-MM-DD' string

    Returns:
        Tuple of (year, month, day)

    Raises:
        ConversionError: If the date is outside the calendar table coverage
    """
    ad_date = _as_date(ad_date)

    use_cache = cache_enabled()
    cache_key = f"ad_to_bs_{ad_date.isoformat()}"
    if use_cache:
        cached_result = cache.get(cache_key)
        if cached_result:
            return cached_result

    if ad_date < MIN_AD_DATE or ad_date > MAX_AD_DATE:
        logger.warning("AD %s is outside the supported calendar range", ad_date)
        raise ConversionError(
            f"Date must be between {MIN_AD_DATE.isoformat()} and {MAX_AD_DATE.isoformat()}, "
            f"got {ad_date.isoformat()}"
        )

    # Find the year
    index = bisect_right(_ANCHOR_DATES, ad_date) - 1
    year = _ANCHOR_YEARS[index]
    remaining_days = (ad_date - _ANCHOR_DATES[index]).days

    # Find the month
    month = 1
    for days_in_month in month_lengths(year):
        if remaining_days < days_in_month:
            break
        remaining_days -= days_in_month
        month += 1

    result = (year, month, remaining_days + 1)

    if use_cache:
        logger.debug("Caching AD %s -> BS %s/%s/%s", ad_date, *result)
        cache.set(cache_key, result, get_setting('CACHE_TIMEOUT'))

    return result


def _bs_year_month(value) -> Tuple[int, int]:
    if isinstance(value, (date, datetime, str)):
        year, month, _ = ad_to_bs(value)
        return year, month
    if isinstance(value, dict):
        return value['year'], value['month']
    if isinstance(value, (tuple, list)):
        return value[0], value[1]
    # NepaliDateTime or anything shaped like it
    return value.year, value.month


def get_fiscal_year(value, format='string'):
    """
    Get fiscal year for a given date
    Nepal fiscal year: Shrawan 1 to Ashadh end (approximately July to July)

    Args:
        value: NepaliDateTime, (year, month, day) BS tuple, BS dict,
            or an AD date/datetime
        format: 'string' returns "2080/81", 'dict' returns {'start_year': 2080, 'end_year': 2081}

    Returns:
        Fiscal year string or dict
    """
    bs_year, bs_month = _bs_year_month(value)

    # Fiscal year starts from Shrawan (month 4)
    if bs_month >= 4:
        start_year = bs_year
        end_year = bs_year + 1
    else:
        start_year = bs_year - 1
        end_year = bs_year

    if format == 'dict':
        return {'start_year': start_year, 'end_year': end_year}
    return f"{start_year}/{str(end_year)[-2:]}"


def get_fiscal_year_dates(fiscal_year_string: str) -> Tuple[date, date]:
    """
    Get AD start and end dates for a fiscal year

    Args:
        fiscal_year_string: String like "2080/81"

    Returns:
        Tuple of (start_date, end_date)
    """
    match = _FISCAL_YEAR_RE.match(fiscal_year_string.strip())
    if not match:
        raise ValueError(f"Invalid fiscal year: {fiscal_year_string!r}. Expected format like '2080/81'")
    start_year = int(match.group(1))
    end_year = start_year + 1
    if str(end_year)[-2:] != match.group(2):
        raise ValueError(f"Invalid fiscal year: {fiscal_year_string!r}. Years must be consecutive")

    # Shrawan 1 to the last day of Ashadh
    start_date = bs_to_ad(start_year, 4, 1)
    end_date = bs_to_ad(end_year, 3, month_length(end_year, 3))

    return start_date, end_date


def get_current_fiscal_year() -> str:
    """Get current fiscal year based on today's date"""
    return get_fiscal_year(date.today())


def get_fiscal_year_summary(fiscal_year_string: str) -> Dict:
    """AD period, English fiscal year label and length of a fiscal year"""
    start_date, end_date = get_fiscal_year_dates(fiscal_year_string)
    if start_date.year == end_date.year:
        fiscal_year_english = str(start_date.year)
    else:
        fiscal_year_english = f"{start_date.year}/{str(end_date.year)[-2:]}"
    return {
        'fiscal_year': fiscal_year_string,
        'fiscal_year_english': fiscal_year_english,
        'ad_start_date': start_date,
        'ad_end_date': end_date,
        'total_days': (end_date - start_date).days + 1,
    }

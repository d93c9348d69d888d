"""
BS Calendar - Bikram Sambat date conversion and Nepali number formatting
"""

__version__ = '1.0.0'
__author__ = 'bs-calendar contributors'

# Import commonly used functions for easy access
from .calendar_data import (
    MAX_YEAR,
    MIN_YEAR,
    NEPALI_MONTHS,
    SUPPORTED_YEARS,
    epoch_anchor,
    get_nepali_month_name,
    is_valid_nepali_date,
    month_length,
)
from .exceptions import (
    BoundsError,
    BsCalendarError,
    ConversionError,
    InvalidNumberError,
    NepaliDateFormatError,
)
from .language import Language, get_language, set_language
from .nepali_datetime import NepaliDateTime, to_ad, to_bs
from .number_format import NepaliNumberFormat, format_number
from .unicode import to_english_digits, to_nepali_digits
from .utils import (
    ad_to_bs,
    bs_to_ad,
    get_current_fiscal_year,
    get_fiscal_year,
    get_fiscal_year_dates,
)

__all__ = [
    'MAX_YEAR',
    'MIN_YEAR',
    'NEPALI_MONTHS',
    'SUPPORTED_YEARS',
    'epoch_anchor',
    'get_nepali_month_name',
    'is_valid_nepali_date',
    'month_length',
    'BoundsError',
    'BsCalendarError',
    'ConversionError',
    'InvalidNumberError',
    'NepaliDateFormatError',
    'Language',
    'get_language',
    'set_language',
    'NepaliDateTime',
    'to_ad',
    'to_bs',
    'NepaliNumberFormat',
    'format_number',
    'to_english_digits',
    'to_nepali_digits',
    'ad_to_bs',
    'bs_to_ad',
    'get_current_fiscal_year',
    'get_fiscal_year',
    'get_fiscal_year_dates',
]

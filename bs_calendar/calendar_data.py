"""
Bikram Sambat calendar table: month lengths and the AD start date of every
supported BS year.
"""
from datetime import date, timedelta
from typing import List

from .exceptions import BoundsError


# Days in each month, Baisakh..Chaitra (2000-2090 BS)
NEPALI_CALENDAR_DATA = {
    2000: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2001: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2002: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2003: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2004: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2005: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2006: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2007: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2008: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31],
    2009: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2010: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2011: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2012: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2013: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2014: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2015: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2016: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2017: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2018: [31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2019: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2020: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2021: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2022: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2023: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2024: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2025: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2026: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2027: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2028: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2029: [31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30],
    2030: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2031: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2032: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2033: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2034: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2035: [30, 32, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31],
    2036: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2037: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2038: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2039: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2040: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2041: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2042: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2043: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2044: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2045: [31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2046: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2047: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2048: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2049: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2050: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2051: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2052: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2053: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2054: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2055: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2056: [31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30],
    2057: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2058: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2059: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2060: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2061: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2062: [30, 32, 31, 32, 31, 31, 29, 30, 29, 30, 29, 31],
    2063: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2064: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2065: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2066: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31],
    2067: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2068: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2069: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2070: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2071: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2072: [31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2073: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2074: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2075: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2076: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2077: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2078: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2079: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2080: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2081: [31, 31, 32, 32, 31, 30, 30, 30, 29, 30, 30, 30],
    2082: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30],
    2083: [31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30],
    2084: [31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30],
    2085: [31, 32, 31, 32, 30, 31, 30, 30, 29, 30, 30, 30],
    2086: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30],
    2087: [31, 31, 32, 31, 31, 31, 30, 30, 29, 30, 30, 30],
    2088: [30, 31, 32, 32, 30, 31, 30, 30, 29, 30, 30, 30],
    2089: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30],
    2090: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30],
}

# AD date of Baisakh 1 for each BS year
YEAR_START_AD = {
    2000: date(1943, 4, 14),
    2001: date(1944, 4, 13),
    2002: date(1945, 4, 13),
    2003: date(1946, 4, 13),
    2004: date(1947, 4, 14),
    2005: date(1948, 4, 13),
    2006: date(1949, 4, 13),
    2007: date(1950, 4, 13),
    2008: date(1951, 4, 14),
    2009: date(1952, 4, 13),
    2010: date(1953, 4, 13),
    2011: date(1954, 4, 13),
    2012: date(1955, 4, 14),
    2013: date(1956, 4, 13),
    2014: date(1957, 4, 13),
    2015: date(1958, 4, 13),
    2016: date(1959, 4, 14),
    2017: date(1960, 4, 13),
    2018: date(1961, 4, 13),
    2019: date(1962, 4, 13),
    2020: date(1963, 4, 14),
    2021: date(1964, 4, 13),
    2022: date(1965, 4, 13),
    2023: date(1966, 4, 13),
    2024: date(1967, 4, 14),
    2025: date(1968, 4, 13),
    2026: date(1969, 4, 13),
    2027: date(1970, 4, 14),
    2028: date(1971, 4, 14),
    2029: date(1972, 4, 13),
    2030: date(1973, 4, 13),
    2031: date(1974, 4, 14),
    2032: date(1975, 4, 14),
    2033: date(1976, 4, 13),
    2034: date(1977, 4, 13),
    2035: date(1978, 4, 14),
    2036: date(1979, 4, 14),
    2037: date(1980, 4, 13),
    2038: date(1981, 4, 13),
    2039: date(1982, 4, 14),
    2040: date(1983, 4, 14),
    2041: date(1984, 4, 13),
    2042: date(1985, 4, 13),
    2043: date(1986, 4, 14),
    2044: date(1987, 4, 14),
    2045: date(1988, 4, 13),
    2046: date(1989, 4, 13),
    2047: date(1990, 4, 14),
    2048: date(1991, 4, 14),
    2049: date(1992, 4, 13),
    2050: date(1993, 4, 13),
    2051: date(1994, 4, 14),
    2052: date(1995, 4, 14),
    2053: date(1996, 4, 13),
    2054: date(1997, 4, 13),
    2055: date(1998, 4, 14),
    2056: date(1999, 4, 14),
    2057: date(2000, 4, 13),
    2058: date(2001, 4, 14),
    2059: date(2002, 4, 14),
    2060: date(2003, 4, 14),
    2061: date(2004, 4, 13),
    2062: date(2005, 4, 14),
    2063: date(2006, 4, 14),
    2064: date(2007, 4, 14),
    2065: date(2008, 4, 13),
    2066: date(2009, 4, 14),
    2067: date(2010, 4, 14),
    2068: date(2011, 4, 14),
    2069: date(2012, 4, 13),
    2070: date(2013, 4, 14),
    2071: date(2014, 4, 14),
    2072: date(2015, 4, 14),
    2073: date(2016, 4, 13),
    2074: date(2017, 4, 14),
    2075: date(2018, 4, 14),
    2076: date(2019, 4, 14),
    2077: date(2020, 4, 13),
    2078: date(2021, 4, 14),
    2079: date(2022, 4, 14),
    2080: date(2023, 4, 14),
    2081: date(2024, 4, 13),
    2082: date(2025, 4, 14),
    2083: date(2026, 4, 14),
    2084: date(2027, 4, 14),
    2085: date(2028, 4, 13),
    2086: date(2029, 4, 14),
    2087: date(2030, 4, 14),
    2088: date(2031, 4, 15),
    2089: date(2032, 4, 14),
    2090: date(2033, 4, 14),
}

NEPALI_MONTHS = [
    'Baisakh', 'Jestha', 'Ashadh', 'Shrawan', 'Bhadra', 'Ashwin',
    'Kartik', 'Mangsir', 'Poush', 'Magh', 'Falgun', 'Chaitra'
]

MIN_YEAR = min(NEPALI_CALENDAR_DATA)
MAX_YEAR = max(NEPALI_CALENDAR_DATA)
SUPPORTED_YEARS = range(MIN_YEAR, MAX_YEAR + 1)

MIN_AD_DATE = YEAR_START_AD[MIN_YEAR]
MAX_AD_DATE = YEAR_START_AD[MAX_YEAR] + timedelta(days=sum(NEPALI_CALENDAR_DATA[MAX_YEAR]) - 1)


def _check_year(year: int) -> None:
    if year not in NEPALI_CALENDAR_DATA:
        raise BoundsError(
            f"BS year {year} is not supported. "
            f"Supported years: {MIN_YEAR}-{MAX_YEAR}"
        )


def month_lengths(year: int) -> List[int]:
    """Day counts of the 12 months of a BS year"""
    _check_year(year)
    return list(NEPALI_CALENDAR_DATA[year])


def month_length(year: int, month: int) -> int:
    """Number of days in a BS month"""
    _check_year(year)
    if month < 1 or month > 12:
        raise BoundsError(f"Invalid month: {month}")
    return NEPALI_CALENDAR_DATA[year][month - 1]


def epoch_anchor(year: int) -> date:
    """AD date on which the given BS year starts"""
    _check_year(year)
    return YEAR_START_AD[year]


def days_in_year(year: int) -> int:
    _check_year(year)
    return sum(NEPALI_CALENDAR_DATA[year])


def get_nepali_month_name(month: int) -> str:
    """Get Nepali month name from month number (1-12)"""
    if 1 <= month <= 12:
        return NEPALI_MONTHS[month - 1]
    raise ValueError(f"Invalid month: {month}")


def is_valid_nepali_date(year: int, month: int, day: int) -> bool:
    """Validate if a Nepali date is valid"""
    if year not in NEPALI_CALENDAR_DATA:
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > NEPALI_CALENDAR_DATA[year][month - 1]:
        return False
    return True

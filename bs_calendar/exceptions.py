"""
Exceptions raised by the BS calendar utilities
"""


class BsCalendarError(Exception):
    """Base class for every error raised by bs_calendar"""


class ConversionError(BsCalendarError, ValueError):
    """A date falls outside the calendar table coverage"""


class BoundsError(ConversionError):
    """Calendar table lookup outside the supported year/month range"""


class NepaliDateFormatError(BsCalendarError, ValueError):
    """Date/time text that does not follow the ISO-like BS grammar"""

    def __init__(self, message, source=None):
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self):
        if self.source is None:
            return self.message
        return f"{self.message}: {self.source!r}"


class InvalidNumberError(BsCalendarError, ValueError):
    """Numeric formatter input that is not a plain decimal number"""

    def __init__(self, value):
        super().__init__(f"Unexpected input: {value}")
        self.value = value

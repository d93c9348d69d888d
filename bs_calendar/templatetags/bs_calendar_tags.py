from datetime import date

from django import template

from ..nepali_datetime import NepaliDateTime
from ..number_format import NepaliNumberFormat
from ..unicode import to_nepali_digits

register = template.Library()


@register.filter
def nepali_digits(value):
    """{{ value|nepali_digits }} -> same text with Devanagari numerals"""
    return to_nepali_digits(value)


@register.filter
def nepali_number(value, options=''):
    """
    Lakh/crore grouped number in the default language.
    Options: "words", "money", or both comma separated: {{ amount|nepali_number:"words,money" }}
    """
    flags = {option.strip() for option in options.split(',') if option.strip()}
    number_format = NepaliNumberFormat(in_words='words' in flags, is_monetary='money' in flags)
    return number_format.format(value)


@register.filter
def to_bs(value):
    """AD date/datetime -> NepaliDateTime; empty values pass through"""
    if not isinstance(value, date):
        return value
    return NepaliDateTime.from_datetime(value)


@register.filter
def to_ad(value):
    if not isinstance(value, NepaliDateTime):
        return value
    return value.to_datetime()

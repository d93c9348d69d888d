"""
Digit transliteration between ASCII and Devanagari numerals
"""

NEPALI_DIGITS = '०१२३४५६७८९'
ENGLISH_DIGITS = '0123456789'

_TO_NEPALI = str.maketrans(ENGLISH_DIGITS, NEPALI_DIGITS)
_TO_ENGLISH = str.maketrans(NEPALI_DIGITS, ENGLISH_DIGITS)


def to_nepali_digits(text) -> str:
    """Replace 0-9 with Devanagari numerals, leaving everything else untouched"""
    return str(text).translate(_TO_NEPALI)


def to_english_digits(text) -> str:
    return str(text).translate(_TO_ENGLISH)

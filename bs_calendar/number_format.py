"""
Format numbers the Nepali way: lakh/crore comma grouping, Devanagari
digits, and number-in-words with an optional rupees/paisa suffix.
"""
import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from .exceptions import InvalidNumberError
from .language import Language, resolve_language
from .unicode import to_nepali_digits

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r'^(\d*)\.?(\d*)$')
_ALL_ZEROS_RE = re.compile(r'^0+$')

NEPALI_WORDS = {
    'rupees': 'रुपैया',
    'paisa': 'पैसा',
    'hundred': 'सय',
    'thousand': 'हजार',
    'lakh': 'लाख',
    'crore': 'करोड',
    'arab': 'अर्ब',
    'kharab': 'खर्ब',
    'nil': 'नील',
    'padam': 'पद्म',
    'sankha': 'शंख',
}

# Scale words for the comma groups left of the last three digits,
# counted from the right
SCALE_WORDS = ['thousand', 'lakh', 'crore', 'arab', 'kharab', 'nil', 'padam', 'sankha']


class NumberKind(Enum):
    INTEGER = 'integer'
    DECIMAL = 'decimal'
    DECIMAL_STRING = 'decimal_string'


@dataclass(frozen=True)
class NumberInput:
    """A number to format, reduced to its text form and where it came from"""

    kind: NumberKind
    text: str

    @classmethod
    def from_value(cls, value: Union[int, float, Decimal, str]) -> 'NumberInput':
        if isinstance(value, bool):
            raise TypeError('number should be either "str" or a number, not bool')
        if isinstance(value, int):
            return cls(NumberKind.INTEGER, str(value))
        if isinstance(value, float):
            # shortest repr, written out without an exponent
            return cls(NumberKind.DECIMAL, format(Decimal(repr(value)), 'f'))
        if isinstance(value, Decimal):
            return cls(NumberKind.DECIMAL, format(value, 'f'))
        if isinstance(value, str):
            return cls(NumberKind.DECIMAL_STRING, value)
        raise TypeError(f'number should be either "str" or a number, not {type(value).__name__}')

    @property
    def default_decimal_digits(self) -> int:
        return 0 if self.kind is NumberKind.INTEGER else 2


@dataclass(frozen=True)
class _SplitNumber:
    integer: str
    fraction: str
    show_fraction: bool


class NepaliNumberFormat:
    """
    Provides the ability to format a number in a Nepali way.

    The configuration is fixed at construction and the formatter can be
    reused for any number of ``format`` calls. When ``language`` is omitted
    the process default (see ``bs_calendar.language``) at construction time
    is used.

    Args:
        in_words: format the number in words. Default False.
        is_monetary: treat the number as an amount of money; the word form
            gets a rupees/paisa suffix. Default False.
        decimal_digits: decimal places to keep. Defaults to 0 for int input
            and 2 for anything else.
        symbol: currency symbol placed next to the formatted number. Only
            used when is_monetary is set.
        symbol_on_left: place the symbol on the left. Default True.
        hide_comma: leave out the commas. Default False.
        space_between_amount_and_symbol: Default True.
        include_decimal_if_zero: keep the decimals even if they are all 0,
            otherwise 2.00 -> 2 while 2.01 -> 2.01. Default True.
        language: Language.ENGLISH or Language.NEPALI (or their names).
    """

    def __init__(
        self,
        in_words: bool = False,
        is_monetary: bool = False,
        decimal_digits: Optional[int] = None,
        symbol: Optional[str] = None,
        symbol_on_left: bool = True,
        hide_comma: bool = False,
        space_between_amount_and_symbol: bool = True,
        include_decimal_if_zero: bool = True,
        language: Union[Language, str, None] = None,
    ):
        if decimal_digits is not None and decimal_digits < 0:
            raise ValueError(f"decimal_digits must not be negative, got {decimal_digits}")
        self.in_words = in_words
        self.is_monetary = is_monetary
        self.decimal_digits = decimal_digits
        self.symbol = symbol
        self.symbol_on_left = symbol_on_left
        self.hide_comma = hide_comma
        self.space_between_amount_and_symbol = space_between_amount_and_symbol
        self.include_decimal_if_zero = include_decimal_if_zero
        self.language = resolve_language(language)
        logger.debug("Created %r", self)

    def __repr__(self):
        return (
            f"NepaliNumberFormat(in_words={self.in_words}, is_monetary={self.is_monetary}, "
            f"decimal_digits={self.decimal_digits}, symbol={self.symbol!r}, "
            f"language={self.language.value})"
        )

    @property
    def is_english(self) -> bool:
        return self.language is Language.ENGLISH

    def format(self, number) -> str:
        """Format number according to the configuration"""
        if number is None:
            return ''
        number_input = NumberInput.from_value(number)
        if self.in_words:
            formatted = self._format_in_words(number_input)
        else:
            formatted = self._format_with_comma(number_input, self.hide_comma)
        return self._place_symbol(formatted) if self.is_monetary else formatted

    __call__ = format

    def _place_symbol(self, number: str) -> str:
        if not self.symbol:
            return number
        space = ' ' if self.space_between_amount_and_symbol else ''
        if self.symbol_on_left:
            return f"{self.symbol}{space}{number}"
        return f"{number}{space}{self.symbol}"

    def _localize(self, text: str) -> str:
        return text if self.is_english else to_nepali_digits(text)

    def _word(self, word: str) -> str:
        return word if self.is_english else NEPALI_WORDS[word]

    def _split(self, number_input: NumberInput) -> _SplitNumber:
        decimal_digits = self.decimal_digits
        if decimal_digits is None:
            decimal_digits = number_input.default_decimal_digits

        match = _NUMBER_RE.match(number_input.text)
        if match is None:
            raise InvalidNumberError(number_input.text)
        integer, fraction = match.group(1), match.group(2)

        fraction = fraction.ljust(decimal_digits, '0')[:decimal_digits]
        hide_decimal = not self.include_decimal_if_zero and bool(_ALL_ZEROS_RE.match(fraction))
        return _SplitNumber(integer, fraction, decimal_digits > 0 and not hide_decimal)

    @staticmethod
    def _group(integer: str) -> str:
        # 1234567 -> 12,34,567
        if len(integer) <= 3:
            return integer
        if len(integer) == 4:
            return f"{integer[0]},{integer[1:]}"
        padded = integer if len(integer) % 2 else '0' + integer
        pairs = [padded[i:i + 2] for i in range(0, len(padded), 2)]
        grouped = ','.join(pairs[:-2]) + ',' + integer[-3:]
        return grouped[1:] if grouped[0] == '0' else grouped

    def _format_with_comma(self, number_input: NumberInput, hide_comma: bool) -> str:
        split = self._split(number_input)
        if not hide_comma:
            formatted = self._group(split.integer)
        elif len(split.integer) >= 5 and split.integer[0] == '0':
            formatted = split.integer[1:]
        else:
            formatted = split.integer
        if split.show_fraction:
            formatted = f"{formatted}.{split.fraction}"
        return self._localize(formatted)

    def _format_in_words(self, number_input: NumberInput) -> str:
        comma_formatted = self._format_with_comma(number_input, hide_comma=False)
        digit_groups = comma_formatted.split(',')

        last_group, _, decimal = digit_groups[-1].partition('.')
        leading_groups = digit_groups[:-1]

        words = []
        for i, group in enumerate(leading_groups):
            scale = len(leading_groups) - i - 1
            if scale < len(SCALE_WORDS):
                words.append(f"{group} {self._word(SCALE_WORDS[scale])}")

        if len(last_group) == 3:
            words.append(f"{last_group[0]} {self._word('hundred')} {last_group[1:]}")
        else:
            words.append(last_group)

        number_in_words = ' '.join(words).rstrip()
        if not self.is_monetary:
            return number_in_words
        if not decimal:
            return f"{number_in_words} {self._word('rupees')}"
        return f"{number_in_words} {self._word('rupees')} {decimal} {self._word('paisa')}"


def format_number(number, **options) -> str:
    """One-off formatting with NepaliNumberFormat(**options)"""
    return NepaliNumberFormat(**options).format(number)

import dataclasses
from datetime import date, datetime, timedelta

import pytest

from bs_calendar.exceptions import ConversionError, NepaliDateFormatError
from bs_calendar.nepali_datetime import NepaliDateTime, to_ad, to_bs


class TestConstruction:
    def test_defaults(self):
        value = NepaliDateTime(2080)
        assert (value.month, value.day, value.hour, value.minute, value.second) == (1, 1, 0, 0, 0)
        assert (value.millisecond, value.microsecond) == (0, 0)

    def test_is_immutable(self):
        value = NepaliDateTime(2080, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.day = 2

    def test_equality_and_hash(self):
        assert NepaliDateTime(2080, 1, 1, 10) == NepaliDateTime(2080, 1, 1, 10)
        assert NepaliDateTime(2080, 1, 1, 10) != NepaliDateTime(2080, 1, 1, 11)
        assert len({NepaliDateTime(2080, 1, 1), NepaliDateTime(2080, 1, 1)}) == 1

    def test_out_of_range_day_is_accepted(self):
        value = NepaliDateTime(2080, 1, 35)
        assert value.to_date() == NepaliDateTime(2080, 2, 4).to_date()

    def test_days_in_month(self):
        assert NepaliDateTime(2081, 3, 1).days_in_month == 32


class TestConversion:
    def test_to_datetime_keeps_time(self, gorkha_earthquake):
        assert gorkha_earthquake.to_datetime() == datetime(2015, 4, 25, 11, 56, 25)
        assert to_ad(gorkha_earthquake) == datetime(2015, 4, 25, 11, 56, 25)

    def test_from_datetime_splits_microseconds(self):
        value = NepaliDateTime.from_datetime(datetime(2015, 4, 25, 11, 56, 25, 123456))
        assert value == NepaliDateTime(2072, 1, 12, 11, 56, 25, 123, 456)
        assert value.to_datetime().microsecond == 123456

    def test_from_date(self):
        assert to_bs(date(2024, 4, 13)) == NepaliDateTime(2081, 1, 1)

    def test_now_converts_the_local_clock(self):
        before = datetime.now()
        value = NepaliDateTime.now()
        after = datetime.now()
        assert before <= value.to_datetime() <= after

    def test_conversion_outside_coverage(self):
        with pytest.raises(ConversionError):
            NepaliDateTime(1990, 1, 1).to_datetime()
        with pytest.raises(ConversionError):
            NepaliDateTime.from_datetime(datetime(1916, 8, 5, 14, 30, 15))


class TestWeekday:
    def test_reference_date_is_wednesday(self):
        assert NepaliDateTime(2000, 1, 1).weekday == 3

    def test_known_dates(self, gorkha_earthquake):
        assert gorkha_earthquake.weekday == 6
        assert NepaliDateTime(2081, 1, 1).weekday == 6
        assert NepaliDateTime(2080, 1, 1).weekday == 5

    @pytest.mark.parametrize('bs', [
        (2000, 1, 2), (2000, 1, 5), (2026, 9, 17), (2026, 9, 18), (2050, 6, 15), (2090, 12, 30),
    ])
    def test_matches_ad_weekday(self, bs):
        value = NepaliDateTime(*bs)
        assert value.weekday == value.to_datetime().isoweekday()

    def test_weekday_range(self):
        start = NepaliDateTime(2080, 1, 1)
        weekdays = {(start + timedelta(days=offset)).weekday for offset in range(14)}
        assert weekdays == set(range(1, 8))

    def test_legacy_shift_only_after_cutoff(self, settings):
        settings.BS_CALENDAR = {'LEGACY_WEEKDAY_SHIFT': True}
        cutoff = NepaliDateTime(2026, 9, 17)
        after = NepaliDateTime(2026, 9, 18)
        assert cutoff.weekday == cutoff.to_datetime().isoweekday()
        # 1970-01-02 was a Friday
        assert after.weekday == 6
        assert NepaliDateTime(2000, 1, 1).weekday == 3


class TestComparison:
    def test_date_only_comparison_ignores_time(self):
        late = NepaliDateTime(2080, 1, 1, 23, 0)
        early = NepaliDateTime(2080, 1, 1, 1, 0)
        assert not late.is_after(early)
        assert not late.is_before(early)
        assert late.is_same_date(early)
        assert late.compare_date_only(early) == 0

    def test_difference_includes_time(self):
        late = NepaliDateTime(2080, 1, 1, 23, 0)
        early = NepaliDateTime(2080, 1, 1, 1, 0)
        assert late.difference(early) == timedelta(hours=22)
        assert early.difference(late) == timedelta(hours=-22)
        assert late - early == timedelta(hours=22)

    def test_across_days(self):
        a = NepaliDateTime(2080, 12, 30)
        b = NepaliDateTime(2081, 1, 1)
        assert b.is_after(a)
        assert a.is_before(b)
        assert a.compare_date_only(b) == -1
        assert b.compare_date_only(a) == 1
        assert b.difference(a) == timedelta(days=1)

    def test_no_ordering_operators(self):
        with pytest.raises(TypeError):
            NepaliDateTime(2080) < NepaliDateTime(2081)


class TestArithmetic:
    def test_add_timedelta(self):
        assert NepaliDateTime(2080, 12, 30) + timedelta(days=1) == NepaliDateTime(2081, 1, 1)
        assert timedelta(hours=1) + NepaliDateTime(2080, 1, 1, 23) == NepaliDateTime(2080, 1, 2, 0)

    def test_subtract_timedelta(self):
        assert NepaliDateTime(2081, 1, 1) - timedelta(days=1) == NepaliDateTime(2080, 12, 30)
        assert NepaliDateTime(2081, 1, 1) - timedelta(microseconds=1) == NepaliDateTime(
            2080, 12, 30, 23, 59, 59, 999, 999
        )

    def test_unsupported_operands(self):
        with pytest.raises(TypeError):
            NepaliDateTime(2080) + 1
        with pytest.raises(TypeError):
            NepaliDateTime(2080) - 1

    def test_merge_time_resets_fraction(self):
        value = NepaliDateTime(2072, 1, 12, 11, 56, 25, 123, 456)
        assert value.merge_time(10, 20, 30) == NepaliDateTime(2072, 1, 12, 10, 20, 30)

    def test_replace(self, gorkha_earthquake):
        assert gorkha_earthquake.replace(day=13, hour=0) == NepaliDateTime(2072, 1, 13, 0, 56, 25)


class TestParse:
    @pytest.mark.parametrize('text, expected', [
        ('2072-01-12T11:56:25', NepaliDateTime(2072, 1, 12, 11, 56, 25)),
        ('2076-02-32 13:27:00', NepaliDateTime(2076, 2, 32, 13, 27)),
        ('2076-02-32 13:27:00.123456', NepaliDateTime(2076, 2, 32, 13, 27, 0, 123, 456)),
        ('2076-02-32 13:27:00,123456', NepaliDateTime(2076, 2, 32, 13, 27, 0, 123, 456)),
        ('2076-02-32 13:27:00.5', NepaliDateTime(2076, 2, 32, 13, 27, 0, 500)),
        ('2076-02-32 13:27:00.0001', NepaliDateTime(2076, 2, 32, 13, 27, 0, 0, 100)),
        ('20760232 13:27:00', NepaliDateTime(2076, 2, 32, 13, 27)),
        ('20760232T132700', NepaliDateTime(2076, 2, 32, 13, 27)),
        ('20760232', NepaliDateTime(2076, 2, 32)),
        ('+20760232', NepaliDateTime(2076, 2, 32)),
        ('-0004-12-24', NepaliDateTime(-4, 12, 24)),
        ('081030-04-01', NepaliDateTime(81030, 4, 1)),
        ('2076-02-32T14', NepaliDateTime(2076, 2, 32, 14)),
        ('2076-02-32T14+05:45', NepaliDateTime(2076, 2, 32, 14)),
        ('2076-02-32T14:00:00-0500', NepaliDateTime(2076, 2, 32, 14)),
        ('2076-02-32T14:00:00Z', NepaliDateTime(2076, 2, 32, 14)),
        ('2076-02-32 14:00:00 +05', NepaliDateTime(2076, 2, 32, 14)),
    ])
    def test_accepted_formats(self, text, expected):
        assert NepaliDateTime.parse(text) == expected

    @pytest.mark.parametrize('text', [
        '',
        '2076-13-40',
        '2076-00-10',
        '2076-01-00',
        '2076-01-33',
        '2076-1-1',
        '12a3',
        '2076-01-01T24:00',
        '2076-01-01T12:60',
        '2076-01-01T12:00:60',
        '2076-01-01T12:00:00.1234567',
        '2076-01-01\n',
        '2076/01/01',
    ])
    def test_rejected_formats(self, text):
        with pytest.raises(NepaliDateFormatError) as excinfo:
            NepaliDateTime.parse(text)
        assert excinfo.value.source == text
        assert NepaliDateTime.try_parse(text) is None

    def test_error_message_names_the_source(self):
        with pytest.raises(NepaliDateFormatError, match='2076-13-40'):
            NepaliDateTime.parse('2076-13-40')

    def test_format_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            NepaliDateTime.parse('not a date')

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            NepaliDateTime.parse(20760232)


class TestFormat:
    def test_str(self):
        assert str(NepaliDateTime(2076, 2, 32, 13, 27)) == '2076-02-32 13:27:00.000'
        assert str(NepaliDateTime(2076, 2, 32, 13, 27, 5, 12, 3)) == '2076-02-32 13:27:05.012003'

    def test_isoformat(self, gorkha_earthquake):
        assert gorkha_earthquake.isoformat() == '2072-01-12T11:56:25.000'
        assert NepaliDateTime(2072, 1, 12, 0, 0, 0, 0, 1).isoformat() == '2072-01-12T00:00:00.000001'

    @pytest.mark.parametrize('year, iso_year, str_year', [
        (5, '0005', '0005'),
        (-5, '-0005', '-0005'),
        (9999, '9999', '9999'),
        (-9999, '-9999', '-9999'),
        (12345, '+012345', '12345'),
        (-123456, '-123456', '-123456'),
    ])
    def test_year_padding(self, year, iso_year, str_year):
        value = NepaliDateTime(year, 1, 1)
        assert value.isoformat() == f'{iso_year}-01-01T00:00:00.000'
        assert str(value) == f'{str_year}-01-01 00:00:00.000'

    def test_output_parses_back(self):
        value = NepaliDateTime(2076, 2, 32, 13, 27, 5, 12, 3)
        assert NepaliDateTime.parse(str(value)) == value
        assert NepaliDateTime.parse(value.isoformat()) == value

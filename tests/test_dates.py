"""Tests for pure date arithmetic."""

import pytest

from gridcal.adapters.gregorian import GregorianDateProvider
from gridcal.core.dates import (
    DayDate,
    date_range,
    month_key,
    next_day,
    previous_day,
    shift_days,
    split_month_key,
    weekday_of,
)


class ThirtyDayProvider:
    """Every month has 30 days; weekdays count from 0001-01-01."""

    def parse(self, text: str) -> DayDate:
        year, month, day = (int(p) for p in text.split("-"))
        return DayDate(year, month, day)

    def format(self, day: DayDate) -> str:
        return f"{day.year}-{day.month}-{day.day}"

    def days_in_month(self, year: int, month: int) -> int:
        return 30

    def weekday(self, year: int, month: int, day: int) -> int:
        return ((year - 1) * 360 + (month - 1) * 30 + (day - 1)) % 7


@pytest.fixture
def provider():
    return GregorianDateProvider()


class TestDayDate:
    def test_ordering_is_chronological(self):
        assert DayDate(2012, 11, 30) < DayDate(2012, 12, 1)
        assert DayDate(2012, 12, 31) < DayDate(2013, 1, 1)

    def test_key(self):
        assert DayDate(2012, 3, 9).key == "2012-03"


class TestMonthKey:
    def test_zero_padded(self):
        assert month_key(2012, 1) == "2012-01"
        assert month_key(987, 12) == "0987-12"

    def test_split_accepts_short_month(self):
        assert split_month_key("2012-1") == (2012, 1)
        assert split_month_key("2012-12") == (2012, 12)

    def test_split_accepts_tuple(self):
        assert split_month_key((2012, 12)) == (2012, 12)

    @pytest.mark.parametrize("key", ["2012-13", "2012-00", "2012", "december", ""])
    def test_split_rejects_garbage(self, key):
        with pytest.raises(ValueError):
            split_month_key(key)


class TestNextDay:
    def test_within_month(self, provider):
        assert next_day(DayDate(2012, 12, 3), provider) == DayDate(2012, 12, 4)

    def test_month_rollover(self, provider):
        assert next_day(DayDate(2012, 10, 31), provider) == DayDate(2012, 11, 1)
        assert next_day(DayDate(2012, 11, 30), provider) == DayDate(2012, 12, 1)

    def test_year_rollover(self, provider):
        assert next_day(DayDate(2012, 12, 31), provider) == DayDate(2013, 1, 1)

    def test_leap_february(self, provider):
        assert next_day(DayDate(2012, 2, 28), provider) == DayDate(2012, 2, 29)
        assert next_day(DayDate(2013, 2, 28), provider) == DayDate(2013, 3, 1)

    def test_uses_provider_month_length(self):
        assert next_day(DayDate(2012, 1, 30), ThirtyDayProvider()) == DayDate(2012, 2, 1)


class TestPreviousDay:
    def test_month_rollback(self, provider):
        assert previous_day(DayDate(2012, 12, 1), provider) == DayDate(2012, 11, 30)
        assert previous_day(DayDate(2012, 3, 1), provider) == DayDate(2012, 2, 29)

    def test_year_rollback(self, provider):
        assert previous_day(DayDate(2013, 1, 1), provider) == DayDate(2012, 12, 31)

    def test_uses_provider_month_length(self):
        assert previous_day(DayDate(2012, 3, 1), ThirtyDayProvider()) == DayDate(2012, 2, 30)


class TestShiftDays:
    def test_forward_and_back(self, provider):
        start = DayDate(2012, 12, 3)
        assert shift_days(start, 6, provider) == DayDate(2012, 12, 9)
        assert shift_days(start, -6, provider) == DayDate(2012, 11, 27)

    def test_zero(self, provider):
        assert shift_days(DayDate(2012, 12, 3), 0, provider) == DayDate(2012, 12, 3)


class TestDateRange:
    def test_crosses_month(self, provider):
        days = date_range(DayDate(2012, 10, 30), 3, provider)
        assert days == [DayDate(2012, 10, 30), DayDate(2012, 10, 31), DayDate(2012, 11, 1)]

    def test_empty(self, provider):
        assert date_range(DayDate(2012, 10, 30), 0, provider) == []

    def test_never_exceeds_month_length(self, provider):
        days = date_range(DayDate(2013, 2, 1), 60, provider)
        for d in days:
            assert d.day <= provider.days_in_month(d.year, d.month)
        assert days[-1] == DayDate(2013, 4, 1)


def test_weekday_of(provider):
    assert weekday_of(DayDate(2012, 12, 2), provider) == 0
    assert weekday_of(DayDate(2012, 12, 3), provider) == 1

"""Pure date arithmetic over (year, month, day) values - no I/O dependencies."""

import re
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from gridcal.ports.date_provider import DateProvider

_MONTH_KEY_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


class DayDate(NamedTuple):
    """A calendar date. Tuple ordering is chronological."""

    year: int
    month: int
    day: int

    @property
    def key(self) -> str:
        """Key of the month this day belongs to."""
        return month_key(self.year, self.month)


def month_key(year: int, month: int) -> str:
    """Format a (year, month) pair as a "YYYY-MM" key."""
    return f"{year:04d}-{month:02d}"


def split_month_key(key: str | tuple[int, int]) -> tuple[int, int]:
    """
    Parse a month key back into (year, month).

    Accepts "YYYY-MM", "YYYY-M" or an already split tuple.
    Raises ValueError for anything else.
    """
    if isinstance(key, tuple):
        year, month = key
    else:
        match = _MONTH_KEY_PATTERN.match(str(key))
        if not match:
            raise ValueError(f"Invalid month key: {key!r}")
        year, month = int(match.group(1)), int(match.group(2))

    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month key: {key!r}")
    return year, month


def next_day(d: DayDate, provider: "DateProvider") -> DayDate:
    """The day after d, rolling over month and year ends."""
    year, month, day = d.year, d.month, d.day + 1
    if day > provider.days_in_month(year, month):
        day = 1
        month += 1
        if month > 12:
            month = 1
            year += 1
    return DayDate(year, month, day)


def previous_day(d: DayDate, provider: "DateProvider") -> DayDate:
    """The day before d, rolling back over month and year starts."""
    year, month, day = d.year, d.month, d.day - 1
    if day < 1:
        month -= 1
        if month < 1:
            month = 12
            year -= 1
        day = provider.days_in_month(year, month)
    return DayDate(year, month, day)


def shift_days(d: DayDate, count: int, provider: "DateProvider") -> DayDate:
    """Move count days forward (or backward when negative)."""
    step = next_day if count >= 0 else previous_day
    for _ in range(abs(count)):
        d = step(d, provider)
    return d


def date_range(start: DayDate, count: int, provider: "DateProvider") -> list[DayDate]:
    """count consecutive days beginning at start."""
    days = []
    current = start
    for _ in range(count):
        days.append(current)
        current = next_day(current, provider)
    return days


def weekday_of(d: DayDate, provider: "DateProvider") -> int:
    return provider.weekday(d.year, d.month, d.day)

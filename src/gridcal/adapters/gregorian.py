"""Gregorian date provider backed by the standard library."""

import calendar
import re
from datetime import date

from gridcal.core.dates import DayDate

_DATE_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})(?:-(\d{1,2}))?\s*$")


class GregorianDateProvider:
    """
    Proleptic Gregorian calendar arithmetic.

    Implements DateProvider protocol.
    """

    def parse(self, text: str) -> DayDate:
        """Parse "YYYY-MM-DD" or "YYYY-MM" (day 1). Raises ValueError."""
        match = _DATE_PATTERN.match(text)
        if not match:
            raise ValueError(f"Unrecognized date: {text!r}")

        year, month = int(match.group(1)), int(match.group(2))
        day = int(match.group(3)) if match.group(3) else 1

        # Rejects month 13, Feb 30 and friends
        date(year, month, day)
        return DayDate(year, month, day)

    def format(self, day: DayDate) -> str:
        return date(day.year, day.month, day.day).isoformat()

    def days_in_month(self, year: int, month: int) -> int:
        return calendar.monthrange(year, month)[1]

    def weekday(self, year: int, month: int, day: int) -> int:
        # date.weekday() is Monday=0; shift so Sunday=0
        return (date(year, month, day).weekday() + 1) % 7

"""Date arithmetic interface."""

from typing import Protocol

from gridcal.core.dates import DayDate


class DateProvider(Protocol):
    """Interface for the calendar arithmetic the grid relies on.

    Weekdays are numbered 0-6 with 0 = Sunday.
    """

    def parse(self, text: str) -> DayDate:
        """Parse "YYYY-MM-DD" or "YYYY-MM" (day 1). Raises ValueError."""
        ...

    def format(self, day: DayDate) -> str:
        """Format a date back to a string."""
        ...

    def days_in_month(self, year: int, month: int) -> int:
        """Number of days in the given month."""
        ...

    def weekday(self, year: int, month: int, day: int) -> int:
        """Day of week of the given date."""
        ...

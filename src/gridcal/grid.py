"""Calendar grids wired to the Gregorian date provider."""

from typing import Any

from .adapters.gregorian import GregorianDateProvider
from .core import grid as core
from .core.validation import ValidationFailure, validate_settings
from .ports.date_provider import DateProvider


class CalendarGrid(core.CalendarGrid):
    """CalendarGrid that defaults to Gregorian arithmetic."""

    def __init__(
        self,
        start_date: Any = None,
        duration: Any = 0,
        first_day_of_week: Any = 0,
        prefill: bool = True,
        postfill: bool = True,
        *,
        provider: DateProvider | None = None,
    ):
        super().__init__(
            start_date,
            duration,
            first_day_of_week,
            prefill,
            postfill,
            provider=provider or GregorianDateProvider(),
        )


def build_grid(
    start_date: Any = None,
    duration: Any = 0,
    first_day_of_week: Any = 0,
    prefill: bool = True,
    postfill: bool = True,
    provider: DateProvider | None = None,
) -> CalendarGrid | ValidationFailure:
    """Validate first; build a grid only from settings that passed."""
    provider = provider or GregorianDateProvider()
    outcome = validate_settings(
        start_date,
        duration,
        first_day_of_week,
        provider,
        prefill=prefill,
        postfill=postfill,
    )
    if isinstance(outcome, ValidationFailure):
        return outcome
    return CalendarGrid.from_settings(outcome, provider)

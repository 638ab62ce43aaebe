"""Functional core - pure calendar grid logic with no I/O."""

from .dates import DayDate, month_key, split_month_key
from .validation import FieldError, GridSettings, ValidationFailure, validate_settings
from .grid import (
    WEEKDAY_LABELS,
    CalendarGrid,
    DayCell,
    GridStatus,
    MonthBucket,
)

__all__ = [
    # Dates
    "DayDate",
    "month_key",
    "split_month_key",
    # Validation
    "FieldError",
    "GridSettings",
    "ValidationFailure",
    "validate_settings",
    # Grid
    "WEEKDAY_LABELS",
    "CalendarGrid",
    "DayCell",
    "GridStatus",
    "MonthBucket",
]

"""Week-aligned calendar grids with per-day events."""

from .core import (
    WEEKDAY_LABELS,
    DayCell,
    DayDate,
    GridStatus,
    MonthBucket,
    ValidationFailure,
)
from .grid import CalendarGrid, build_grid

__all__ = [
    "WEEKDAY_LABELS",
    "CalendarGrid",
    "DayCell",
    "DayDate",
    "GridStatus",
    "MonthBucket",
    "ValidationFailure",
    "build_grid",
]

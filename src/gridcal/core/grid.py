"""Calendar grid domain logic - no I/O dependencies."""

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator

from .dates import (
    DayDate,
    date_range,
    month_key,
    next_day,
    previous_day,
    shift_days,
    split_month_key,
    weekday_of,
)
from .validation import (
    FieldError,
    GridSettings,
    ValidationFailure,
    check_duration,
    check_first_day_of_week,
    check_start_date,
    coerce_date,
    resolve_duration,
    validate_settings,
)

if TYPE_CHECKING:
    from gridcal.ports.date_provider import DateProvider

logger = logging.getLogger(__name__)

# Index 0 is weekday 0
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass
class DayCell:
    """One day in the grid."""

    is_extra: bool = False
    has_event: bool = False
    events: list[Any] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)

    def merge(self, properties: dict[str, Any]) -> None:
        """
        Merge caller metadata into the cell. Caller values win.

        The typed fields can be overridden by name; every other key
        lands in the open properties map.
        """
        for key, value in properties.items():
            if key == "is_extra":
                self.is_extra = bool(value)
            elif key == "has_event":
                self.has_event = bool(value)
            elif key == "events":
                self.events = list(value)
                if "has_event" not in properties:
                    self.has_event = bool(self.events)
            else:
                self.properties[key] = value

    def add_event(self, event: Any) -> None:
        self.events.append(event)
        self.has_event = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_extra": self.is_extra,
            "has_event": self.has_event,
            "events": list(self.events),
            **self.properties,
        }


@dataclass
class MonthBucket:
    """One calendar month of the grid, keyed by day of month."""

    year: int
    month: int
    days: dict[int, DayCell] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return month_key(self.year, self.month)

    def sort(self) -> None:
        self.days = dict(sorted(self.days.items()))

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "days": {day: cell.to_dict() for day, cell in self.days.items()},
        }


class GridStatus(Enum):
    VALID = "valid"
    INVALID = "invalid"


class CalendarGrid:
    """
    A run of days grouped into month buckets, padded to whole weeks.

    Mutations (add, fill) work in place and may leave the edges
    misaligned. adjust() restores week alignment; get(), filter() and
    weeks() call it before handing data back.

    Invalid settings are recorded rather than raised. Once a setting has
    been rejected the grid stays invalid: get() returns a
    ValidationFailure and mutations do nothing.

    All calendar arithmetic goes through the given DateProvider.
    """

    def __init__(
        self,
        start_date: Any = None,
        duration: Any = 0,
        first_day_of_week: Any = 0,
        prefill: bool = True,
        postfill: bool = True,
        *,
        provider: "DateProvider",
    ):
        self.provider = provider
        self.months: dict[str, MonthBucket] = {}
        self.start_date: DayDate | None = None
        self.duration = 0
        self.first_day_of_week = 0
        self.prefill = bool(prefill)
        self.postfill = bool(postfill)
        self._errors: list[FieldError] = []

        outcome = validate_settings(
            start_date,
            duration,
            first_day_of_week,
            self.provider,
            prefill=prefill,
            postfill=postfill,
        )
        if isinstance(outcome, ValidationFailure):
            self._record(*outcome.errors)
            # Keep the header usable even when the range is not
            fdow = check_first_day_of_week(first_day_of_week)
            if not isinstance(fdow, FieldError):
                self.first_day_of_week = fdow
            return

        self.start_date = outcome.start_date
        self.duration = outcome.duration
        self.first_day_of_week = outcome.first_day_of_week
        self.initialize()

    @classmethod
    def from_settings(cls, settings: GridSettings, provider: "DateProvider") -> "CalendarGrid":
        return cls(
            start_date=settings.start_date,
            duration=settings.duration,
            first_day_of_week=settings.first_day_of_week,
            prefill=settings.prefill,
            postfill=settings.postfill,
            provider=provider,
        )

    # ============== Status ==============

    @property
    def status(self) -> GridStatus:
        return GridStatus.INVALID if self._errors else GridStatus.VALID

    @property
    def is_valid(self) -> bool:
        return self.status is GridStatus.VALID

    @property
    def failure(self) -> ValidationFailure:
        return ValidationFailure(tuple(self._errors))

    def _record(self, *errors: FieldError) -> None:
        for error in errors:
            logger.warning(f"Rejected calendar setting {error.format()}")
            self._errors.append(error)

    # ============== Settings ==============

    def set_start_date(self, value: Any) -> bool:
        """Takes effect on the next initialize()."""
        start = check_start_date(value, self.provider)
        if isinstance(start, FieldError):
            self._record(start)
            return False
        self.start_date = start
        return True

    def set_duration(self, value: Any) -> bool:
        """Takes effect on the next initialize(). Zero means the whole start month."""
        days = check_duration(value)
        if isinstance(days, FieldError):
            self._record(days)
            return False
        if self.start_date is not None:
            days = resolve_duration(days, self.start_date, self.provider)
            if isinstance(days, FieldError):
                self._record(days)
                return False
        self.duration = days
        return True

    def set_first_day_of_week(self, value: Any) -> bool:
        fdow = check_first_day_of_week(value)
        if isinstance(fdow, FieldError):
            self._record(fdow)
            return False
        self.first_day_of_week = fdow
        return True

    def get_first_day_of_week(self) -> int:
        return self.first_day_of_week

    def get_header(self) -> list[str]:
        """Weekday labels starting from the first day of week."""
        k = self.first_day_of_week
        return list(WEEKDAY_LABELS[k:] + WEEKDAY_LABELS[:k])

    # ============== Building ==============

    def initialize(self) -> None:
        """Rebuild the grid from start_date and duration, then pad it."""
        if not self.is_valid or self.start_date is None:
            return

        self.months = {}
        for day in date_range(self.start_date, self.duration, self.provider):
            self.add(day)
        self.adjust()

    def add(
        self,
        day: Any,
        event: Any = None,
        properties: dict[str, Any] | None = None,
    ) -> DayCell | None:
        """
        Ensure a cell exists for day and attach event/properties to it.

        An event on a padding day turns it into a real day unless the
        caller passes is_extra explicitly.

        Raises ValueError if day is not a real calendar date.
        """
        if not self.is_valid:
            return None

        d = coerce_date(day, self.provider)
        bucket = self.months.get(d.key)
        if bucket is None:
            bucket = self.months[d.key] = MonthBucket(d.year, d.month)
        cell = bucket.days.get(d.day)
        if cell is None:
            cell = bucket.days[d.day] = DayCell()

        if event and cell.is_extra:
            cell.is_extra = False
        if properties:
            cell.merge(properties)
        if event:
            cell.add_event(event)
        return cell

    def fill(
        self,
        event: Any,
        properties: dict[str, Any] | None = None,
        include_extra: bool = False,
    ) -> None:
        """Add event to every real day, and to padding days if include_extra."""
        if not self.is_valid:
            return

        for d, cell in list(self.iter_days()):
            if cell.is_extra and not include_extra:
                continue
            self.add(d, event, {"is_extra": cell.is_extra, **(properties or {})})

    # ============== Normalizing ==============

    def sort(self) -> None:
        """Months chronologically, days ascending within each month."""
        ordered = sorted(self.months.values(), key=lambda b: (b.year, b.month))
        for bucket in ordered:
            bucket.sort()
        self.months = {bucket.key: bucket for bucket in ordered}

    def adjust(self, first_day_of_week: Any = None) -> None:
        """
        Re-align both edges of the grid to whole weeks.

        Padding beyond the week boundary is trimmed, missing padding is
        added, empty months are dropped and the grid is sorted. Calling
        it again with the same first day of week changes nothing.
        """
        if first_day_of_week is not None and not self.set_first_day_of_week(first_day_of_week):
            return
        if not self.is_valid or not self.months:
            return

        self.sort()
        days = list(self.iter_days())
        if days:
            self._align_leading(days)
            self._align_trailing(days)
        self._drop_empty_months()
        self.sort()

    @staticmethod
    def _anchor(days: list[tuple[DayDate, DayCell]], latest: bool) -> DayDate:
        """First (or last) real day; falls back to padding if there is nothing else."""
        ordered = reversed(days) if latest else iter(days)
        for d, cell in ordered:
            if not cell.is_extra:
                return d
        return days[-1][0] if latest else days[0][0]

    def _align_leading(self, days: list[tuple[DayDate, DayCell]]) -> None:
        anchor = self._anchor(days, latest=False)

        steps = 0
        if self.prefill:
            steps = (weekday_of(anchor, self.provider) - self.first_day_of_week) % 7
        target = shift_days(anchor, -steps, self.provider)

        # Everything before the anchor is padding
        removed = 0
        for d, _ in days:
            if d >= target:
                break
            self._remove(d)
            removed += 1

        current = anchor
        for _ in range(steps):
            current = previous_day(current, self.provider)
            self._pad(current)

        if removed or steps:
            logger.debug(f"Leading edge: trimmed {removed}, padded back to {target} from {anchor}")

    def _align_trailing(self, days: list[tuple[DayDate, DayCell]]) -> None:
        anchor = self._anchor(days, latest=True)

        steps = 0
        if self.postfill:
            last_weekday = (self.first_day_of_week + 6) % 7
            steps = (last_weekday - weekday_of(anchor, self.provider)) % 7
        target = shift_days(anchor, steps, self.provider)

        removed = 0
        for d, _ in reversed(days):
            if d <= target:
                break
            self._remove(d)
            removed += 1

        current = anchor
        for _ in range(steps):
            current = next_day(current, self.provider)
            self._pad(current)

        if removed or steps:
            logger.debug(f"Trailing edge: trimmed {removed}, padded forward to {target} from {anchor}")

    def _pad(self, d: DayDate) -> None:
        """Insert a padding cell unless the day already exists."""
        bucket = self.months.get(d.key)
        if bucket is None:
            bucket = self.months[d.key] = MonthBucket(d.year, d.month)
        if d.day not in bucket.days:
            bucket.days[d.day] = DayCell(is_extra=True)

    def _remove(self, d: DayDate) -> None:
        bucket = self.months.get(d.key)
        if bucket is not None:
            bucket.days.pop(d.day, None)

    def _drop_empty_months(self) -> None:
        self.months = {key: bucket for key, bucket in self.months.items() if bucket.days}

    # ============== Reading ==============

    def get(self) -> dict[str, MonthBucket] | ValidationFailure:
        """The normalized grid, or the ValidationFailure if invalid."""
        if not self.is_valid:
            return self.failure
        self.adjust()
        return self.months

    def filter(self, key: str | tuple[int, int]) -> "CalendarGrid":
        """
        Independent copy holding only one month, re-padded on its own.

        Unknown or malformed keys return this grid unchanged.
        """
        if not self.is_valid:
            return self
        try:
            wanted = month_key(*split_month_key(key))
        except (ValueError, TypeError):
            return self
        if wanted not in self.months:
            return self

        clone = copy.deepcopy(self)
        clone.months = {wanted: clone.months[wanted]}
        clone.adjust()
        return clone

    def iter_days(self) -> Iterator[tuple[DayDate, DayCell]]:
        """All cells in stored order; chronological once sort() or adjust() has run."""
        for bucket in self.months.values():
            for day, cell in bucket.days.items():
                yield DayDate(bucket.year, bucket.month, day), cell

    def weeks(self) -> list[list[tuple[DayDate, DayCell]]]:
        """Normalized cells in rows of seven."""
        if not self.is_valid:
            return []
        self.adjust()
        days = list(self.iter_days())
        return [days[i : i + 7] for i in range(0, len(days), 7)]

    def to_dict(self) -> dict[str, Any]:
        result = self.get()
        if isinstance(result, ValidationFailure):
            return result.to_dict()
        return {key: bucket.to_dict() for key, bucket in result.items()}

    def __len__(self) -> int:
        return sum(len(bucket.days) for bucket in self.months.values())

"""Grid settings validation - no I/O dependencies.

Validation runs as a dedicated step before a grid is built. Each check
returns either the cleaned value or a FieldError; validate_settings()
collects them into GridSettings or a ValidationFailure.
"""

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from .dates import DayDate

if TYPE_CHECKING:
    from gridcal.ports.date_provider import DateProvider


@dataclass(frozen=True)
class FieldError:
    """A single rejected setting."""

    field: str
    value: Any
    reason: str

    def format(self) -> str:
        return f"{self.field}: {self.reason} (got {self.value!r})"


@dataclass(frozen=True)
class ValidationFailure:
    """
    Outcome of a failed validation.

    Falsy, so it can stand in for a grid in boolean checks. Returned by
    CalendarGrid.get() when the grid is invalid.
    """

    errors: tuple[FieldError, ...] = ()

    def __bool__(self) -> bool:
        return False

    @property
    def message(self) -> str:
        if not self.errors:
            return "Invalid calendar grid"
        return "; ".join(e.format() for e in self.errors)

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "errors": [
                {"field": e.field, "value": repr(e.value), "reason": e.reason}
                for e in self.errors
            ],
        }


@dataclass
class GridSettings:
    """Validated, fully resolved grid settings."""

    start_date: DayDate
    duration: int
    first_day_of_week: int
    prefill: bool = True
    postfill: bool = True


def coerce_date(value: Any, provider: "DateProvider") -> DayDate:
    """
    Turn a DayDate, datetime.date or date string into a DayDate.

    Raises ValueError if the value does not name a real calendar day.
    """
    if isinstance(value, DayDate):
        candidate = value
    elif isinstance(value, tuple) and len(value) == 3:
        candidate = DayDate(*value)
    elif isinstance(value, date):
        return DayDate(value.year, value.month, value.day)
    elif isinstance(value, str):
        return provider.parse(value)
    else:
        raise ValueError(f"Unsupported date value: {value!r}")

    if not all(isinstance(part, int) and not isinstance(part, bool) for part in candidate):
        raise ValueError(f"Date parts must be integers: {candidate!r}")
    if not 1 <= candidate.month <= 12:
        raise ValueError(f"Month out of range: {candidate!r}")
    if not 1 <= candidate.day <= provider.days_in_month(candidate.year, candidate.month):
        raise ValueError(f"Day out of range: {candidate!r}")
    return candidate


def check_start_date(value: Any, provider: "DateProvider") -> DayDate | FieldError:
    """None means the first day of the current month."""
    if value is None:
        today = date.today()
        return DayDate(today.year, today.month, 1)
    try:
        return coerce_date(value, provider)
    except ValueError as e:
        return FieldError("start_date", value, str(e))


def _as_int(value: Any) -> int | None:
    """Accept ints, integral floats and numeric strings; bools are not numbers here."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def check_duration(value: Any) -> int | FieldError:
    number = _as_int(value)
    if number is None:
        return FieldError("duration", value, "must be an integer")
    if number < 0:
        return FieldError("duration", value, "must not be negative")
    return number


def check_first_day_of_week(value: Any) -> int | FieldError:
    number = _as_int(value)
    if number is None:
        return FieldError("first_day_of_week", value, "must be an integer")
    if not 0 <= number <= 6:
        return FieldError("first_day_of_week", value, "must be between 0 and 6")
    return number


def resolve_duration(
    duration: int, start_date: DayDate, provider: "DateProvider"
) -> int | FieldError:
    """A zero duration means the whole month containing start_date."""
    if duration:
        return duration
    try:
        return provider.days_in_month(start_date.year, start_date.month)
    except (ValueError, OverflowError) as e:
        return FieldError("duration", duration, f"cannot derive month length: {e}")


def validate_settings(
    start_date: Any,
    duration: Any,
    first_day_of_week: Any,
    provider: "DateProvider",
    prefill: bool = True,
    postfill: bool = True,
) -> GridSettings | ValidationFailure:
    """Validate raw construction arguments in one pass."""
    errors: list[FieldError] = []

    start = check_start_date(start_date, provider)
    if isinstance(start, FieldError):
        errors.append(start)

    days = check_duration(duration)
    if isinstance(days, FieldError):
        errors.append(days)

    fdow = check_first_day_of_week(first_day_of_week)
    if isinstance(fdow, FieldError):
        errors.append(fdow)

    if errors:
        return ValidationFailure(tuple(errors))

    days = resolve_duration(days, start, provider)
    if isinstance(days, FieldError):
        return ValidationFailure((days,))

    return GridSettings(
        start_date=start,
        duration=days,
        first_day_of_week=fdow,
        prefill=bool(prefill),
        postfill=bool(postfill),
    )

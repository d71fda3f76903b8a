"""CalendarPolicy — working days against weekends and a holiday set.

Not used by the assignment flow; exposed through the calendar endpoint.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from datetime import date, datetime, timedelta, timezone

# date.weekday() numbering: Monday=0 ... Sunday=6
SATURDAY_SUNDAY = frozenset({5, 6})

MAX_LOOKAHEAD_DAYS = 3660

Holidays = Mapping[str, str] | Collection[str]


def _calendar_day(day: date | datetime) -> date:
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone(timezone.utc)
        return day.date()
    return day


def is_holiday(day: date | datetime, holidays: Holidays) -> bool:
    """Holidays are keyed by ISO date (YYYY-MM-DD), no time component."""
    return _calendar_day(day).isoformat() in holidays


def is_working_day(
    day: date | datetime,
    holidays: Holidays,
    weekend_days: Collection[int] = SATURDAY_SUNDAY,
) -> bool:
    calendar_day = _calendar_day(day)
    return calendar_day.weekday() not in weekend_days and not is_holiday(calendar_day, holidays)


def next_working_day(
    day: date | datetime,
    holidays: Holidays,
    weekend_days: Collection[int] = SATURDAY_SUNDAY,
) -> date:
    """Smallest working day strictly after *day*.

    Raises:
        ValueError: if no working day exists within MAX_LOOKAHEAD_DAYS.
    """
    candidate = _calendar_day(day)
    for _ in range(MAX_LOOKAHEAD_DAYS):
        candidate += timedelta(days=1)
        if is_working_day(candidate, holidays, weekend_days):
            return candidate
    raise ValueError(
        f"No working day within {MAX_LOOKAHEAD_DAYS} days after {_calendar_day(day).isoformat()}"
    )

"""
Date helpers used by the seed data and the vaccination summary.

All timestamps handled by the API are timezone aware and in UTC.
"""

from datetime import date, datetime, time, timezone
from typing import TypeVar, Union

D = TypeVar("D", date, datetime)


def now() -> datetime:
    """Current time as a UTC timezone‑aware datetime."""
    return datetime.now(timezone.utc)


def today() -> date:
    return now().date()


def shift_years(value: D, years: int) -> D:
    """Move ``value`` by whole calendar years.

    February 29th rolls over to March 1st when the target year has no
    leap day, so the result is never clamped backwards.
    """
    target_year = value.year + years
    try:
        return value.replace(year=target_year)
    except ValueError:
        return value.replace(year=target_year, month=3, day=1)


def start_of_day(value: Union[date, datetime]) -> datetime:
    """Midnight UTC of the given calendar day."""
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, time.min, tzinfo=timezone.utc)

# src/calendrics/calendar/_exceptions.py
"""
Error taxonomy shared by every calendrics sub-package.

Arithmetic functions with expected failure modes return one of these as a
value instead of raising it, so callers can ``match`` on the kind of error.
``unwrap`` converts such a result back into ordinary raise-on-error form.
"""

from __future__ import annotations

from typing import TypeVar, Union

T = TypeVar("T")


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidDateError(CalendarError):
    """A (year, period, day) triple is not a date of the calendar."""


class ConfigError(CalendarError, ValueError):
    """A calendar configuration failed validation."""


class IncompatibleCalendarError(CalendarError):
    """Two dates that must share a calendar do not."""


class IncompatibleTimeZoneError(CalendarError):
    """Two datetimes that must share a UTC offset do not."""


class InvalidDateOrderError(CalendarError):
    """A ``from`` date is later than its ``to`` date."""


Result = Union[T, CalendarError]


def is_error(result: object) -> bool:
    """True when *result* holds an error instead of a value."""
    return isinstance(result, CalendarError)


def unwrap(result: Result[T]) -> T:
    """Return *result*, raising it instead when it is an error."""
    if isinstance(result, CalendarError):
        raise result
    return result

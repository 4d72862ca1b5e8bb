# src/calendrics/calendar/__init__.py
"""
calendrics.calendar
~~~~~~~~~~~~~~~~~~~

Configurable calendars.  A calendar is either month-based (twelve
Gregorian-aligned months, the year starting in any month) or week-based
(52 or 53 whole weeks anchored on a weekday of a given month).  Both kinds
convert ``(year, period, day)`` triples to and from ordinal days, where
ordinal 0 is 0000-01-01 of the proleptic Gregorian calendar.

Basic usage::

    from calendrics.calendar import Calendar, get_calendar

    nrf = get_calendar("nrf")
    nrf.first_day_of_year(2017).to_date()     # → date(2017, 1, 29)
    nrf.leap_year(2017)                       # → True (53 weeks)

    retail = Calendar.new(
        "retail", base="week", anchor_day=6, anchor_month=7,
        anchor_edge="ends", anchor_position="last",
    )
    q1 = retail.quarter(2019, 1)
    retail.next(q1, "quarters")

Invalid dates are returned rather than raised::

    result = nrf.date(2018, 53, 1)
    if isinstance(result, InvalidDateError):
        ...

Public API
----------
Calendar            Named calendar: configuration plus engine.
CalendarConfig      Immutable, validated calendar shape.
validate_config     Build a CalendarConfig from raw options.
CalendarDate        A date of one calendar.
CalendarDateTime    A date with a time of day and UTC offset.
PeriodRange         Closed range of dates.
Unit                Period units: years, quarters, months, weeks, days.
CalendarRegistry    Thread-safe name → Calendar map.
get_calendar        Look a calendar up in the default registry.
CalendarError       Base exception for all calendar-related errors.
is_error            True when a tagged result holds an error.
unwrap              Return a tagged result or raise its error.
"""

from __future__ import annotations

from calendrics.calendar._exceptions import (
    CalendarError,
    ConfigError,
    IncompatibleCalendarError,
    IncompatibleTimeZoneError,
    InvalidDateError,
    InvalidDateOrderError,
    is_error,
    unwrap,
)
from calendrics.calendar.base import Unit
from calendrics.calendar.calendar import Calendar
from calendrics.calendar.config import (
    AnchorEdge,
    AnchorPosition,
    CalendarBase,
    CalendarConfig,
    WeekPreferences,
    YearAttribution,
    validate_config,
)
from calendrics.calendar.registry import (
    CalendarRegistry,
    default_registry,
    get_calendar,
)
from calendrics.calendar.types import CalendarDate, CalendarDateTime, PeriodRange

__all__ = [
    "AnchorEdge",
    "AnchorPosition",
    "Calendar",
    "CalendarBase",
    "CalendarConfig",
    "CalendarDate",
    "CalendarDateTime",
    "CalendarError",
    "CalendarRegistry",
    "ConfigError",
    "IncompatibleCalendarError",
    "IncompatibleTimeZoneError",
    "InvalidDateError",
    "InvalidDateOrderError",
    "PeriodRange",
    "Unit",
    "WeekPreferences",
    "YearAttribution",
    "default_registry",
    "get_calendar",
    "is_error",
    "unwrap",
    "validate_config",
]

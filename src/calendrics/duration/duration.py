# src/calendrics/duration/duration.py
"""
Calendar differences.

A ``Duration`` counts whole calendar units between two dates of the same
calendar: years, then months (weeks for week-based calendars), then days,
plus a time-of-day remainder for datetimes.  Because months differ in
length, applying a duration to its start date does not always land exactly
on its end date.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Union

from calendrics.calendar._exceptions import (
    CalendarError,
    IncompatibleCalendarError,
    IncompatibleTimeZoneError,
    InvalidDateOrderError,
)
from calendrics.calendar.base import Unit
from calendrics.calendar.calendar import Calendar
from calendrics.calendar.types import MICROSECONDS_PER_DAY, CalendarDate, CalendarDateTime

logger = logging.getLogger(__name__)

DateLike = Union[CalendarDate, CalendarDateTime]

_MICROSECONDS_PER_SECOND: int = 1_000_000
_MICROSECONDS_PER_MINUTE: int = 60 * _MICROSECONDS_PER_SECOND
_MICROSECONDS_PER_HOUR: int = 60 * _MICROSECONDS_PER_MINUTE

_LABELS: dict[str, str] = {
    "years": "year",
    "months": "month",
    "days": "day",
    "hours": "hour",
    "minutes": "minute",
    "seconds": "second",
    "microseconds": "microsecond",
}


def _split(value: DateLike) -> tuple[CalendarDate, int, Union[int, None]]:
    """``(date, time_of_day, utc_offset)``; pure dates have no offset."""
    if isinstance(value, CalendarDateTime):
        return value.date, value.time_of_day, value.utc_offset
    return value, 0, None


def _period_unit(calendar: Calendar) -> Unit:
    return Unit.MONTHS if calendar.config.month_based else Unit.WEEKS


@dataclass(frozen=True, slots=True)
class Duration:
    """Difference between two dates in calendar units."""

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    microseconds: int = 0

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def new(cls, start: DateLike, end: DateLike) -> Union["Duration", CalendarError]:
        """
        Duration from *start* to *end*.

        Returns ``IncompatibleCalendarError`` when the two are in different
        calendars, ``IncompatibleTimeZoneError`` for datetimes with different
        UTC offsets, and ``InvalidDateOrderError`` when *start* is after *end*.
        """
        date1, time1, offset1 = _split(start)
        date2, time2, offset2 = _split(end)

        if date1.calendar != date2.calendar:
            return IncompatibleCalendarError(
                f"Dates of calendars {date1.calendar.name!r} and "
                f"{date2.calendar.name!r} have no common duration."
            )
        if offset1 is not None and offset2 is not None and offset1 != offset2:
            return IncompatibleTimeZoneError(
                f"UTC offsets {offset1} and {offset2} differ."
            )
        if (date1.ordinal, time1) > (date2.ordinal, time2):
            return InvalidDateOrderError(f"{start} is after {end}.")

        years, months, days = cls._date_difference(date1, date2)
        time_diff = time2 - time1
        if time_diff < 0:
            years, months, days = cls._back_one_day(date2, years, months, days)
            time_diff += MICROSECONDS_PER_DAY
        return cls._merge(years, months, days, time_diff)

    @staticmethod
    def _date_difference(start: CalendarDate, end: CalendarDate) -> tuple[int, int, int]:
        calendar = start.calendar
        year1, month1, day1 = start.year, start.period, start.day
        year2, month2, day2 = end.year, end.period, end.day

        day_adjustment = 1 if day2 < day1 else 0
        year_adjustment = 1 if month2 < month1 or (month2 == month1 and day2 < day1) else 0
        years = year2 - year1 - year_adjustment

        if month2 > month1 or (month2 == month1 and not day_adjustment):
            months = month2 - month1 - day_adjustment
        else:
            months = calendar.periods_in_year(year1) - month1 + month2 - day_adjustment

        if day2 >= day1:
            days = day2 - day1
        else:
            days = calendar.days_in_period(year1, month1) - day1 + day2
        return years, months, days

    @staticmethod
    def _back_one_day(
        end: CalendarDate, years: int, months: int, days: int
    ) -> tuple[int, int, int]:
        calendar = end.calendar
        days -= 1
        if days < 0:
            # Borrow the period that precedes the end date's period.
            if end.period > 1:
                year, period = end.year, end.period - 1
            else:
                year = end.year - 1
                period = calendar.periods_in_year(year)
            days += calendar.days_in_period(year, period)
            months -= 1
            if months < 0:
                months += calendar.periods_in_year(year)
                years -= 1
        logger.debug("Borrowed a day: %s years, %s months, %s days", years, months, days)
        return years, months, days

    @classmethod
    def _merge(cls, years: int, months: int, days: int, microseconds: int) -> "Duration":
        hours, microseconds = divmod(microseconds, _MICROSECONDS_PER_HOUR)
        minutes, microseconds = divmod(microseconds, _MICROSECONDS_PER_MINUTE)
        seconds, microseconds = divmod(microseconds, _MICROSECONDS_PER_SECOND)
        return cls(years, months, days, hours, minutes, seconds, microseconds)

    # ── application ──────────────────────────────────────────────────────

    @property
    def time_microseconds(self) -> int:
        return (
            self.hours * _MICROSECONDS_PER_HOUR
            + self.minutes * _MICROSECONDS_PER_MINUTE
            + self.seconds * _MICROSECONDS_PER_SECOND
            + self.microseconds
        )

    @staticmethod
    def apply(value: DateLike, duration: "Duration") -> DateLike:
        """
        Add *duration* to *value*: years first, then months (weeks for
        week-based calendars), then days, then the time of day.  A day that
        does not exist in the target month is clamped to the month's end.
        """
        date, time_of_day, utc_offset = _split(value)
        calendar = date.calendar

        date = calendar.plus(date, Unit.YEARS, duration.years, coerce=True)
        date = calendar.plus(date, _period_unit(calendar), duration.months, coerce=True)

        total_time = time_of_day + duration.time_microseconds
        carry_days, time_of_day = divmod(total_time, MICROSECONDS_PER_DAY)
        date = calendar.plus(date, Unit.DAYS, duration.days + carry_days)

        if utc_offset is None and time_of_day == 0:
            return date
        hours, rest = divmod(time_of_day, _MICROSECONDS_PER_HOUR)
        minutes, rest = divmod(rest, _MICROSECONDS_PER_MINUTE)
        seconds, microseconds = divmod(rest, _MICROSECONDS_PER_SECOND)
        return CalendarDateTime(date, hours, minutes, seconds, microseconds, utc_offset or 0)

    plus = apply

    def __radd__(self, other: object) -> DateLike:
        if isinstance(other, (CalendarDate, CalendarDateTime)):
            return Duration.apply(other, self)
        return NotImplemented

    # ── rendering ────────────────────────────────────────────────────────

    def __str__(self) -> str:
        parts = []
        for field in fields(self):
            value = getattr(self, field.name)
            if value:
                label = _LABELS[field.name]
                parts.append(f"{value} {label}s" if value > 1 else f"{value} {label}")
        return ", ".join(parts) or "0 days"

# src/calendrics/calendar/types.py
"""
Value types produced by calendar arithmetic: dates, datetimes and closed
period ranges.  All of them are immutable.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Iterator

from ._exceptions import IncompatibleCalendarError, InvalidDateError

if TYPE_CHECKING:
    from .calendar import Calendar

# datetime.date.toordinal() counts from 0001-01-01 == 1; ordinal 0 is 0000-01-01.
PYTHON_ORDINAL_OFFSET: int = 365

MICROSECONDS_PER_DAY: int = 86_400_000_000


@total_ordering
@dataclass(frozen=True, slots=True)
class CalendarDate:
    """
    A date of one calendar.  ``period`` is the month of the year for
    month-based calendars and the week of the year for week-based ones, in
    which case ``day`` is the day of the week (1..7).

    Construction validates the triple, so an instance is always a real date.
    """

    year: int
    period: int
    day: int
    calendar: "Calendar"

    def __post_init__(self) -> None:
        if not self.calendar.valid_date(self.year, self.period, self.day):
            raise InvalidDateError(
                f"{self.year}-{self.period}-{self.day} is not a valid date "
                f"of calendar {self.calendar.name!r}."
            )

    # ── conversion ───────────────────────────────────────────────────────

    @property
    def ordinal(self) -> int:
        return self.calendar.engine.to_ordinal(self.year, self.period, self.day)

    @property
    def month(self) -> int:
        return self.calendar.month_of_year(self)

    @property
    def week(self) -> int:
        return self.calendar.week_of_year(self)[1]

    def convert(self, calendar: "Calendar") -> "CalendarDate":
        return calendar.from_ordinal(self.ordinal)

    def to_date(self) -> datetime.date:
        return datetime.date.fromordinal(self.ordinal - PYTHON_ORDINAL_OFFSET)

    # ── ordering ─────────────────────────────────────────────────────────

    def _check_calendar(self, other: "CalendarDate") -> None:
        if other.calendar != self.calendar:
            raise IncompatibleCalendarError(
                f"Cannot compare dates of calendars {self.calendar.name!r} "
                f"and {other.calendar.name!r}."
            )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        self._check_calendar(other)
        return (self.year, self.period, self.day) < (other.year, other.period, other.day)

    def __str__(self) -> str:
        if self.calendar.config.week_based:
            return f"{self.year:04d}-W{self.period:02d}-{self.day}"
        return f"{self.year:04d}-{self.period:02d}-{self.day:02d}"

    def __repr__(self) -> str:
        return f"CalendarDate({self}, calendar={self.calendar.name!r})"


@dataclass(frozen=True, slots=True)
class CalendarDateTime:
    """A ``CalendarDate`` with a time of day and a UTC offset in seconds."""

    date: CalendarDate
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0
    utc_offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour < 24:
            raise ValueError(f"hour must be in 0..23; got {self.hour}.")
        if not 0 <= self.minute < 60:
            raise ValueError(f"minute must be in 0..59; got {self.minute}.")
        if not 0 <= self.second < 60:
            raise ValueError(f"second must be in 0..59; got {self.second}.")
        if not 0 <= self.microsecond < 1_000_000:
            raise ValueError(f"microsecond must be in 0..999999; got {self.microsecond}.")

    @property
    def calendar(self) -> "Calendar":
        return self.date.calendar

    @property
    def time_of_day(self) -> int:
        """Microseconds since midnight."""
        return (
            ((self.hour * 60 + self.minute) * 60 + self.second) * 1_000_000
            + self.microsecond
        )

    def __str__(self) -> str:
        return (
            f"{self.date} {self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f".{self.microsecond:06d}"
        )


@dataclass(frozen=True, slots=True)
class PeriodRange:
    """
    Closed span of dates ``[first, last]`` of one calendar: a year, quarter,
    month, week or day.
    """

    first: CalendarDate
    last: CalendarDate

    def __post_init__(self) -> None:
        if self.first.calendar != self.last.calendar:
            raise IncompatibleCalendarError(
                "A period range must start and end in the same calendar."
            )
        if self.first_ordinal > self.last_ordinal:
            raise ValueError(f"Range first {self.first} is after last {self.last}.")

    @property
    def calendar(self) -> "Calendar":
        return self.first.calendar

    @property
    def first_ordinal(self) -> int:
        return self.first.ordinal

    @property
    def last_ordinal(self) -> int:
        return self.last.ordinal

    def __len__(self) -> int:
        return self.last_ordinal - self.first_ordinal + 1

    def __iter__(self) -> Iterator[CalendarDate]:
        calendar = self.calendar
        for ordinal in range(self.first_ordinal, self.last_ordinal + 1):
            yield calendar.from_ordinal(ordinal)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, CalendarDate):
            return False
        return self.first_ordinal <= item.ordinal <= self.last_ordinal

    def __str__(self) -> str:
        return f"{self.first}..{self.last}"

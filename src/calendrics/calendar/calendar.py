# src/calendrics/calendar/calendar.py
"""
The ``Calendar`` facade: a named configuration plus the engine it selects.

Every calendar exposes the same API whether it is month-based or
week-based.  Operations with expected failure modes return the error as a
value (see ``calendrics.calendar._exceptions``) rather than raising it.
"""

from __future__ import annotations

import datetime
from typing import Any, Mapping, Optional, Union

from . import gregorian
from ._exceptions import IncompatibleCalendarError, InvalidDateError
from .base import Bounds, CalendarEngine, Unit
from .config import CalendarBase, CalendarConfig, PreferenceLookup, validate_config
from .month import MonthEngine
from .week import WeekEngine
from .types import PYTHON_ORDINAL_OFFSET, CalendarDate, CalendarDateTime, PeriodRange

_ENGINES: dict[CalendarBase, type[CalendarEngine]] = {
    CalendarBase.MONTH: MonthEngine,
    CalendarBase.WEEK: WeekEngine,
}

DateOrRange = Union[CalendarDate, PeriodRange]


class Calendar:
    """
    A named calendar.

    >>> fiscal = Calendar.new("fiscal_us", anchor_month=10)
    >>> fiscal.date(2021, 1, 1).to_date()
    datetime.date(2020, 10, 1)
    """

    def __init__(self, name: str, config: Optional[CalendarConfig] = None) -> None:
        if not name:
            raise ValueError("Calendar name must not be empty.")
        self.name: str = name
        self.config: CalendarConfig = config if config is not None else CalendarConfig()
        self.engine: CalendarEngine = _ENGINES[self.config.base](self.config)

    @classmethod
    def new(
        cls,
        name: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        preferences: Optional[PreferenceLookup] = None,
        **kwargs: Any,
    ) -> "Calendar":
        """Validate *options* (raising ``ConfigError``) and build a calendar."""
        merged = dict(options or {}, **kwargs)
        return cls(name, validate_config(merged, preferences=preferences))

    # ── identity ─────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.name == other.name and self.config == other.config

    def __hash__(self) -> int:
        return hash((self.name, self.config))

    def __repr__(self) -> str:
        return f"Calendar({self.name!r}, base={self.config.base.value!r})"

    # ── construction and conversion ──────────────────────────────────────

    def valid_date(self, year: int, period: int, day: int) -> bool:
        return self.engine.valid_date(year, period, day)

    def date(self, year: int, period: int, day: int) -> Union[CalendarDate, InvalidDateError]:
        if not self.engine.valid_date(year, period, day):
            return InvalidDateError(
                f"{year}-{period}-{day} is not a valid date of calendar {self.name!r}."
            )
        return CalendarDate(year, period, day, self)

    def date_time(
        self,
        year: int,
        period: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        utc_offset: int = 0,
    ) -> Union[CalendarDateTime, InvalidDateError]:
        date = self.date(year, period, day)
        if isinstance(date, InvalidDateError):
            return date
        return CalendarDateTime(date, hour, minute, second, microsecond, utc_offset)

    def to_ordinal(self, year: int, period: int, day: int) -> Union[int, InvalidDateError]:
        date = self.date(year, period, day)
        if isinstance(date, InvalidDateError):
            return date
        return self.engine.to_ordinal(year, period, day)

    def from_ordinal(self, ordinal: int) -> CalendarDate:
        return CalendarDate(*self.engine.from_ordinal(int(ordinal)), self)

    def from_date(self, value: datetime.date) -> CalendarDate:
        return self.from_ordinal(value.toordinal() + PYTHON_ORDINAL_OFFSET)

    def convert(self, date: CalendarDate) -> CalendarDate:
        """Express a date of any calendar in this one."""
        if date.calendar == self:
            return date
        return self.from_ordinal(date.ordinal)

    def _own(self, date: CalendarDate) -> CalendarDate:
        if date.calendar != self:
            raise IncompatibleCalendarError(
                f"Date {date!r} does not belong to calendar {self.name!r}."
            )
        return date

    # ── year shape ───────────────────────────────────────────────────────

    def days_in_year(self, year: int) -> int:
        return self.engine.days_in_year(year)

    def days_in_month(self, year: int, month: int) -> Union[int, InvalidDateError]:
        months = self.engine.months_in_year(year)
        if not 1 <= month <= months:
            return InvalidDateError(f"Month must be in 1..{months}; got {month}.")
        return self.engine.days_in_month(year, month)

    def days_in_period(self, year: int, period: int) -> int:
        return self.engine.days_in_period(year, period)

    def days_in_week(self) -> int:
        return self.config.days_per_week

    def periods_in_year(self, year: int) -> int:
        return self.engine.periods_in_year(year)

    def months_in_year(self, year: int) -> int:
        return self.engine.months_in_year(year)

    def weeks_in_year(self, year: int) -> int:
        return self.engine.weeks_in_year(year)

    def leap_year(self, year: int) -> bool:
        """Leap year for month-based calendars, 53-week year for week-based."""
        return self.engine.long_year(year)

    long_year = leap_year

    def first_day_of_year(self, year: int) -> CalendarDate:
        return self.from_ordinal(self.engine.first_day_of_year(year))

    def last_day_of_year(self, year: int) -> CalendarDate:
        return self.from_ordinal(self.engine.last_day_of_year(year))

    # ── positions of a date ──────────────────────────────────────────────

    def _fields(self, date: CalendarDate) -> tuple[int, int, int]:
        date = self._own(date)
        return date.year, date.period, date.day

    def quarter_of_year(self, date: CalendarDate) -> int:
        return self.engine.quarter_of_year(*self._fields(date))

    def month_of_year(self, date: CalendarDate) -> int:
        return self.engine.month_of_year(*self._fields(date))

    def week_of_year(self, date: CalendarDate) -> tuple[int, int]:
        return self.engine.week_of_year(*self._fields(date))

    def iso_week_of_year(self, date: CalendarDate) -> tuple[int, int]:
        return gregorian.iso_week_of_year(date.ordinal)

    def week_of_month(self, date: CalendarDate) -> tuple[int, int]:
        return self.engine.week_of_month(*self._fields(date))

    def day_of_year(self, date: CalendarDate) -> int:
        return self.engine.day_of_year(*self._fields(date))

    def day_of_week(self, date: CalendarDate) -> int:
        """ISO weekday of the date: 1 == Monday .. 7 == Sunday."""
        return gregorian.day_of_week(date.ordinal)

    def year_of_era(self, date: CalendarDate) -> tuple[int, int]:
        """``(year_of_era, era)``; era 1 counts up from year 1, era 0 backwards."""
        year = self._own(date).year
        if year >= 1:
            return year, 1
        return 1 - year, 0

    # ── periods ──────────────────────────────────────────────────────────

    def _range(self, bounds: Bounds) -> PeriodRange:
        first, last = bounds
        return PeriodRange(self.from_ordinal(first), self.from_ordinal(last))

    def year(self, year: int) -> PeriodRange:
        return self._range(self.engine.year_bounds(year))

    def quarter(self, year: int, quarter: int) -> Union[PeriodRange, InvalidDateError]:
        try:
            return self._range(self.engine.quarter_bounds(year, quarter))
        except InvalidDateError as exc:
            return exc

    def month(self, year: int, month: int) -> Union[PeriodRange, InvalidDateError]:
        try:
            return self._range(self.engine.month_bounds(year, month))
        except InvalidDateError as exc:
            return exc

    def week(self, year: int, week: int) -> Union[PeriodRange, InvalidDateError]:
        try:
            return self._range(self.engine.week_bounds(year, week))
        except InvalidDateError as exc:
            return exc

    def day(self, year: int, day_of_year: int) -> Union[PeriodRange, InvalidDateError]:
        """The single date at 1-based *day_of_year* of *year*."""
        days = self.days_in_year(year)
        if not 1 <= day_of_year <= days:
            return InvalidDateError(
                f"Day {day_of_year} is not in year {year}, which has {days} days."
            )
        date = self.from_ordinal(self.engine.first_day_of_year(year) + day_of_year - 1)
        return PeriodRange(date, date)

    def period_of(self, date: CalendarDate, unit: Union[Unit, str]) -> PeriodRange:
        """The period of size *unit* that contains *date*."""
        date = self._own(date)
        unit = Unit.parse(unit)
        if unit is Unit.YEARS:
            return self.year(date.year)
        if unit is Unit.QUARTERS:
            return self._range(
                self.engine.quarter_bounds(date.year, self.quarter_of_year(date))
            )
        if unit is Unit.MONTHS:
            return self._range(self.engine.month_bounds(date.year, self.month_of_year(date)))
        if unit is Unit.WEEKS:
            week_year, week = self.week_of_year(date)
            return self._range(self.engine.week_bounds(week_year, week))
        return PeriodRange(date, date)

    # ── navigation ───────────────────────────────────────────────────────

    def plus(
        self,
        date: CalendarDate,
        unit: Union[Unit, str],
        amount: int,
        coerce: bool = False,
    ) -> Union[CalendarDate, InvalidDateError]:
        """
        Shift *date* by *amount* units.  Years, quarters and months keep the
        position within the period; when that position does not exist in the
        target period the result is an ``InvalidDateError`` unless *coerce* is
        set, in which case it is clamped to the period's last valid position.
        """
        year, period, day = self._fields(date)
        result = self.engine.plus(year, period, day, Unit.parse(unit), amount, coerce)
        if isinstance(result, InvalidDateError):
            return result
        return CalendarDate(*result, self)

    def _step(
        self, value: DateOrRange, unit: Union[Unit, str], amount: int, coerce: bool
    ) -> Union[DateOrRange, InvalidDateError]:
        unit = Unit.parse(unit)
        if isinstance(value, PeriodRange):
            shifted = self.plus(value.first, unit, amount, coerce)
            if isinstance(shifted, InvalidDateError):
                return shifted
            return self.period_of(shifted, unit)
        return self.plus(value, unit, amount, coerce)

    def next(
        self, value: DateOrRange, unit: Union[Unit, str], coerce: bool = False
    ) -> Union[DateOrRange, InvalidDateError]:
        """The period (or date) one *unit* after *value*."""
        return self._step(value, unit, 1, coerce)

    def previous(
        self, value: DateOrRange, unit: Union[Unit, str], coerce: bool = False
    ) -> Union[DateOrRange, InvalidDateError]:
        """The period (or date) one *unit* before *value*."""
        return self._step(value, unit, -1, coerce)

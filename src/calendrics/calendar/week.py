# src/calendrics/calendar/week.py
"""
Week-based engine: years of 52 or 53 complete weeks, anchored on a weekday
in a given Gregorian month.  Months are groups of weeks following the
configured period layout, and quarters are 13 weeks, the fourth quarter
taking week 53 in a long year.
"""

from __future__ import annotations

import logging
from typing import Union

from . import gregorian
from ._exceptions import InvalidDateError
from .base import (
    DAYS_IN_WEEK,
    MONTHS_IN_QUARTER,
    QUARTERS_IN_YEAR,
    WEEKS_IN_QUARTER,
    Bounds,
    CalendarEngine,
    Triple,
    Unit,
    check_quarter,
    shift_months,
    week_year_bounds,
    weeks_between,
)
from .config import CalendarConfig

logger = logging.getLogger(__name__)

LONG_YEAR_WEEKS: int = 53


class WeekEngine(CalendarEngine):
    """``(year, week, day_of_week)`` conversions for week-based calendars."""

    def __init__(self, config: CalendarConfig) -> None:
        super().__init__(config)
        self._first_month: int = config.first_month
        self._year_offset: int = config.gregorian_years(0)[0]

        # Offset of the first week of each month within its quarter.
        layout = config.period_layout
        self._month_start_in_quarter: tuple[int, ...] = (0, layout[0], layout[0] + layout[1])

    # ── conversions ──────────────────────────────────────────────────────

    def valid_date(self, year: int, week: int, day: int) -> bool:
        return 1 <= week <= self.weeks_in_year(year) and 1 <= day <= DAYS_IN_WEEK

    def to_ordinal(self, year: int, week: int, day: int) -> int:
        return self.first_day_of_year(year) + (week - 1) * DAYS_IN_WEEK + (day - 1)

    def from_ordinal(self, ordinal: int) -> Triple:
        gregorian_year, gregorian_month, _ = gregorian.ordinal_to_date(ordinal)
        year = gregorian_year - self._year_offset - (gregorian_month < self._first_month)

        first, last = week_year_bounds(self.config, year)
        if ordinal < first:
            year -= 1
            first = self.first_day_of_year(year)
        elif ordinal > last:
            year += 1
            first = last + 1

        offset = ordinal - first
        return year, offset // DAYS_IN_WEEK + 1, offset % DAYS_IN_WEEK + 1

    # ── year shape ───────────────────────────────────────────────────────

    def first_day_of_year(self, year: int) -> int:
        return week_year_bounds(self.config, year)[0]

    def last_day_of_year(self, year: int) -> int:
        return week_year_bounds(self.config, year)[1]

    def weeks_in_year(self, year: int) -> int:
        return weeks_between(*week_year_bounds(self.config, year))

    def long_year(self, year: int) -> bool:
        return self.weeks_in_year(year) == LONG_YEAR_WEEKS

    def periods_in_year(self, year: int) -> int:
        return self.weeks_in_year(year)

    def days_in_period(self, year: int, week: int) -> int:
        return DAYS_IN_WEEK

    def weeks_in_month(self, year: int, month: int) -> int:
        weeks = self.config.period_layout[(month - 1) % MONTHS_IN_QUARTER]
        if month == gregorian.MONTHS_IN_YEAR and self.long_year(year):
            weeks += 1
        return weeks

    def days_in_month(self, year: int, month: int) -> int:
        return self.weeks_in_month(year, month) * DAYS_IN_WEEK

    # ── week grouping ────────────────────────────────────────────────────

    def first_week_of_quarter(self, quarter: int) -> int:
        return (quarter - 1) * WEEKS_IN_QUARTER + 1

    def last_week_of_quarter(self, year: int, quarter: int) -> int:
        if quarter == QUARTERS_IN_YEAR:
            return self.weeks_in_year(year)
        return quarter * WEEKS_IN_QUARTER

    def first_week_of_month(self, month: int) -> int:
        quarter = (month - 1) // MONTHS_IN_QUARTER + 1
        return (
            self.first_week_of_quarter(quarter)
            + self._month_start_in_quarter[(month - 1) % MONTHS_IN_QUARTER]
        )

    def last_week_of_month(self, year: int, month: int) -> int:
        return self.first_week_of_month(month) + self.weeks_in_month(year, month) - 1

    # ── positions ────────────────────────────────────────────────────────

    def quarter_of_year(self, year: int, week: int, day: int = 1) -> int:
        if week == LONG_YEAR_WEEKS:
            return QUARTERS_IN_YEAR
        return (week - 1) // WEEKS_IN_QUARTER + 1

    def month_of_year(self, year: int, week: int, day: int = 1) -> int:
        if week == LONG_YEAR_WEEKS:
            return gregorian.MONTHS_IN_YEAR
        quarter = self.quarter_of_year(year, week)
        week_in_quarter = week - self.first_week_of_quarter(quarter)
        month_in_quarter = sum(
            1 for start in self._month_start_in_quarter if start <= week_in_quarter
        )
        return (quarter - 1) * MONTHS_IN_QUARTER + month_in_quarter

    def week_of_year(self, year: int, week: int, day: int) -> tuple[int, int]:
        return year, week

    def week_of_month(self, year: int, week: int, day: int) -> tuple[int, int]:
        month = self.month_of_year(year, week)
        return month, week - self.first_week_of_month(month) + 1

    # ── ranges ───────────────────────────────────────────────────────────

    def _weeks_to_bounds(self, year: int, first_week: int, last_week: int) -> Bounds:
        first_day = self.first_day_of_year(year)
        return (
            first_day + (first_week - 1) * DAYS_IN_WEEK,
            first_day + last_week * DAYS_IN_WEEK - 1,
        )

    def quarter_bounds(self, year: int, quarter: int) -> Bounds:
        check_quarter(quarter)
        return self._weeks_to_bounds(
            year, self.first_week_of_quarter(quarter), self.last_week_of_quarter(year, quarter)
        )

    def month_bounds(self, year: int, month: int) -> Bounds:
        if not 1 <= month <= gregorian.MONTHS_IN_YEAR:
            raise InvalidDateError(f"Month must be in 1..12; got {month}.")
        return self._weeks_to_bounds(
            year, self.first_week_of_month(month), self.last_week_of_month(year, month)
        )

    def week_bounds(self, year: int, week: int) -> Bounds:
        weeks = self.weeks_in_year(year)
        if not 1 <= week <= weeks:
            raise InvalidDateError(f"Week must be in 1..{weeks} for year {year}; got {week}.")
        return self._weeks_to_bounds(year, week, week)

    # ── arithmetic ───────────────────────────────────────────────────────

    def plus_fields(
        self, year: int, week: int, day: int, unit: Unit, amount: int, coerce: bool
    ) -> Union[Triple, InvalidDateError]:
        # The week keeps its offset within the enclosing period.
        if unit is Unit.YEARS:
            new_year, new_week = year + amount, week
            last_week = self.weeks_in_year(new_year)
        elif unit is Unit.QUARTERS:
            quarter = self.quarter_of_year(year, week)
            offset = week - self.first_week_of_quarter(quarter)
            new_year, new_quarter = shift_months(year, quarter, amount, QUARTERS_IN_YEAR)
            new_week = self.first_week_of_quarter(new_quarter) + offset
            last_week = self.last_week_of_quarter(new_year, new_quarter)
        elif unit is Unit.MONTHS:
            month = self.month_of_year(year, week)
            offset = week - self.first_week_of_month(month)
            new_year, new_month = shift_months(year, month, amount)
            new_week = self.first_week_of_month(new_month) + offset
            last_week = self.last_week_of_month(new_year, new_month)
        else:
            raise ValueError(f"Unsupported unit for field arithmetic: {unit!r}.")

        if new_week > last_week:
            if not coerce:
                return InvalidDateError(
                    f"Week {new_week} does not exist in the target period of year {new_year}."
                )
            logger.debug("Coercing week %s to %s in year %s", new_week, last_week, new_year)
            new_week = last_week
        return new_year, new_week, day

# src/calendrics/calendar/month.py
"""
Month-based engine: twelve months aligned to Gregorian month boundaries,
with a year that may begin in any Gregorian month.
"""

from __future__ import annotations

import logging
from typing import Union

from . import gregorian
from ._exceptions import InvalidDateError
from .base import (
    DAYS_IN_WEEK,
    MONTHS_IN_QUARTER,
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


class MonthEngine(CalendarEngine):
    """``(year, month, day)`` conversions for month-based calendars."""

    def __init__(self, config: CalendarConfig) -> None:
        super().__init__(config)
        self._first_month: int = config.first_month
        # Calendar year Y starts in Gregorian year Y + offset.
        self._year_offset: int = config.gregorian_years(0)[0]

    # ── Gregorian mapping ────────────────────────────────────────────────

    def to_gregorian(self, year: int, month: int) -> tuple[int, int]:
        gregorian_month = (month - 1 + self._first_month - 1) % 12 + 1
        gregorian_year = year + self._year_offset + (gregorian_month < self._first_month)
        return gregorian_year, gregorian_month

    def from_gregorian(self, gregorian_year: int, gregorian_month: int) -> tuple[int, int]:
        month = (gregorian_month - self._first_month) % 12 + 1
        year = gregorian_year - self._year_offset - (gregorian_month < self._first_month)
        return year, month

    # ── conversions ──────────────────────────────────────────────────────

    def valid_date(self, year: int, month: int, day: int) -> bool:
        if not 1 <= month <= gregorian.MONTHS_IN_YEAR:
            return False
        return 1 <= day <= self.days_in_month(year, month)

    def to_ordinal(self, year: int, month: int, day: int) -> int:
        gregorian_year, gregorian_month = self.to_gregorian(year, month)
        return gregorian.date_to_ordinal(gregorian_year, gregorian_month, day)

    def from_ordinal(self, ordinal: int) -> Triple:
        gregorian_year, gregorian_month, day = gregorian.ordinal_to_date(ordinal)
        year, month = self.from_gregorian(gregorian_year, gregorian_month)
        return year, month, day

    # ── year shape ───────────────────────────────────────────────────────

    def first_day_of_year(self, year: int) -> int:
        return self.to_ordinal(year, 1, 1)

    def last_day_of_year(self, year: int) -> int:
        return self.first_day_of_year(year + 1) - 1

    def periods_in_year(self, year: int) -> int:
        return gregorian.MONTHS_IN_YEAR

    def days_in_period(self, year: int, month: int) -> int:
        return self.days_in_month(year, month)

    def days_in_month(self, year: int, month: int) -> int:
        return gregorian.days_in_month(*self.to_gregorian(year, month))

    def long_year(self, year: int) -> bool:
        return self.days_in_year(year) == 366

    # ── weeks ────────────────────────────────────────────────────────────

    def week_year_bounds(self, year: int) -> Bounds:
        """
        Ordinal span covered by the weeks of *year*.  When weeks start on the
        first day of the year this is the year itself, and its last week is
        shorter than seven days.
        """
        if self.config.weeks_starting_first_day:
            return self.year_bounds(year)
        return week_year_bounds(self.config, year)

    def weeks_in_year(self, year: int) -> int:
        first, last = self.week_year_bounds(year)
        if self.config.weeks_starting_first_day:
            return -(-(last - first + 1) // DAYS_IN_WEEK)
        return weeks_between(first, last)

    def week_of_year(self, year: int, month: int, day: int) -> tuple[int, int]:
        ordinal = self.to_ordinal(year, month, day)
        first, last = self.week_year_bounds(year)
        if ordinal < first:
            year -= 1
            first, _ = self.week_year_bounds(year)
        elif ordinal > last:
            year += 1
            first = last + 1
        return year, (ordinal - first) // DAYS_IN_WEEK + 1

    def _week_start(self, ordinal: int) -> int:
        if self.config.weeks_starting_first_day:
            year, _, _ = self.from_ordinal(ordinal)
            first = self.first_day_of_year(year)
            return first + (ordinal - first) // DAYS_IN_WEEK * DAYS_IN_WEEK
        return gregorian.kday_on_or_before(ordinal, self.config.anchor_day)

    def week_of_month(self, year: int, month: int, day: int) -> tuple[int, int]:
        first_week_start = self._week_start(self.to_ordinal(year, month, 1))
        ordinal = self.to_ordinal(year, month, day)
        return month, (ordinal - first_week_start) // DAYS_IN_WEEK + 1

    # ── positions ────────────────────────────────────────────────────────

    def quarter_of_year(self, year: int, month: int, day: int) -> int:
        return (month - 1) // MONTHS_IN_QUARTER + 1

    def month_of_year(self, year: int, month: int, day: int) -> int:
        return month

    # ── ranges ───────────────────────────────────────────────────────────

    def quarter_bounds(self, year: int, quarter: int) -> Bounds:
        check_quarter(quarter)
        first_month = (quarter - 1) * MONTHS_IN_QUARTER + 1
        last_month = quarter * MONTHS_IN_QUARTER
        return (
            self.to_ordinal(year, first_month, 1),
            self.to_ordinal(year, last_month, self.days_in_month(year, last_month)),
        )

    def month_bounds(self, year: int, month: int) -> Bounds:
        if not 1 <= month <= gregorian.MONTHS_IN_YEAR:
            raise InvalidDateError(f"Month must be in 1..12; got {month}.")
        return (
            self.to_ordinal(year, month, 1),
            self.to_ordinal(year, month, self.days_in_month(year, month)),
        )

    def week_bounds(self, year: int, week: int) -> Bounds:
        weeks = self.weeks_in_year(year)
        if not 1 <= week <= weeks:
            raise InvalidDateError(f"Week must be in 1..{weeks} for year {year}; got {week}.")
        first_day, last_day = self.week_year_bounds(year)
        first = first_day + (week - 1) * DAYS_IN_WEEK
        return first, min(first + DAYS_IN_WEEK - 1, last_day)

    # ── arithmetic ───────────────────────────────────────────────────────

    def plus_fields(
        self, year: int, month: int, day: int, unit: Unit, amount: int, coerce: bool
    ) -> Union[Triple, InvalidDateError]:
        if unit is Unit.YEARS:
            new_year, new_month = year + amount, month
        elif unit is Unit.QUARTERS:
            new_year, new_month = shift_months(year, month, amount * MONTHS_IN_QUARTER)
        elif unit is Unit.MONTHS:
            new_year, new_month = shift_months(year, month, amount)
        else:
            raise ValueError(f"Unsupported unit for field arithmetic: {unit!r}.")

        month_length = self.days_in_month(new_year, new_month)
        if day > month_length:
            if not coerce:
                return InvalidDateError(
                    f"{new_year}-{new_month}-{day} is not a valid date; "
                    f"the month has {month_length} days."
                )
            logger.debug(
                "Coercing day %s to %s in %s-%s", day, month_length, new_year, new_month
            )
            day = month_length
        return new_year, new_month, day

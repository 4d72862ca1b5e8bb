# src/calendrics/calendar/base.py
"""
Engine interface shared by month-based and week-based calendars.

An engine works on plain integers: ``(year, period, day)`` triples and
ordinal days.  The ``Calendar`` facade wraps its results into
``CalendarDate`` and ``PeriodRange`` values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from functools import lru_cache
from typing import Union

from . import gregorian
from ._exceptions import InvalidDateError
from .config import AnchorEdge, AnchorPosition, CalendarConfig

Triple = tuple[int, int, int]
Bounds = tuple[int, int]

DAYS_IN_WEEK: int = gregorian.DAYS_IN_WEEK
QUARTERS_IN_YEAR: int = 4
MONTHS_IN_QUARTER: int = 3
WEEKS_IN_QUARTER: int = 13


class Unit(str, Enum):
    """Period units understood by ``plus``, ``next`` and ``previous``."""

    YEARS = "years"
    QUARTERS = "quarters"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"

    @classmethod
    def parse(cls, value: Union["Unit", str]) -> "Unit":
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(unit.value for unit in cls)
            raise ValueError(f"Unknown period unit {value!r}; expected one of {valid}.") from None


# ── week-year boundaries ─────────────────────────────────────────────────────

def anchor_ordinal(config: CalendarConfig, gregorian_year: int) -> int:
    """
    Ordinal of the anchor day in *gregorian_year*: the first day of the year
    for a "begins" edge, the last day for an "ends" edge.
    """
    month = config.anchor_month
    weekday = config.anchor_day
    min_days = config.min_days_in_first_week
    month_length = gregorian.days_in_month(gregorian_year, month)

    if config.anchor_position is AnchorPosition.FIRST:
        return gregorian.kday_on_or_after(
            gregorian.date_to_ordinal(gregorian_year, month, 1), weekday
        )
    if config.anchor_position is AnchorPosition.LAST:
        return gregorian.kday_on_or_before(
            gregorian.date_to_ordinal(gregorian_year, month, month_length), weekday
        )
    # Nearest: the week holding the anchor keeps at least min_days of the
    # anchor month on the calendar-year side of the boundary.
    if config.anchor_edge is AnchorEdge.BEGINS:
        return gregorian.kday_on_or_before(
            gregorian.date_to_ordinal(gregorian_year, month, min_days), weekday
        )
    return gregorian.kday_on_or_after(
        gregorian.date_to_ordinal(gregorian_year, month, month_length - min_days + 1),
        weekday,
    )


@lru_cache(maxsize=8192)
def week_year_bounds(config: CalendarConfig, year: int) -> Bounds:
    """First and last ordinal of week-numbered year *year*."""
    start_year, end_year = config.gregorian_years(year)
    if config.anchor_edge is AnchorEdge.BEGINS:
        first = anchor_ordinal(config, start_year)
        next_start_year = config.gregorian_years(year + 1)[0]
        last = anchor_ordinal(config, next_start_year) - 1
    else:
        last = anchor_ordinal(config, end_year)
        previous_end_year = config.gregorian_years(year - 1)[1]
        first = anchor_ordinal(config, previous_end_year) + 1
    return first, last


def weeks_between(first: int, last: int) -> int:
    return (last - first + 1) // DAYS_IN_WEEK


# ── engine interface ─────────────────────────────────────────────────────────

class CalendarEngine(ABC):
    """Integer-level conversions for one ``CalendarConfig``."""

    def __init__(self, config: CalendarConfig) -> None:
        self.config = config

    # ── conversions ──────────────────────────────────────────────────────

    @abstractmethod
    def valid_date(self, year: int, period: int, day: int) -> bool: ...

    @abstractmethod
    def to_ordinal(self, year: int, period: int, day: int) -> int: ...

    @abstractmethod
    def from_ordinal(self, ordinal: int) -> Triple: ...

    # ── year shape ───────────────────────────────────────────────────────

    @abstractmethod
    def first_day_of_year(self, year: int) -> int: ...

    @abstractmethod
    def last_day_of_year(self, year: int) -> int: ...

    @abstractmethod
    def periods_in_year(self, year: int) -> int: ...

    @abstractmethod
    def days_in_period(self, year: int, period: int) -> int: ...

    @abstractmethod
    def days_in_month(self, year: int, month: int) -> int: ...

    @abstractmethod
    def weeks_in_year(self, year: int) -> int: ...

    @abstractmethod
    def long_year(self, year: int) -> bool: ...

    def months_in_year(self, year: int) -> int:
        return gregorian.MONTHS_IN_YEAR

    def days_in_year(self, year: int) -> int:
        return self.last_day_of_year(year) - self.first_day_of_year(year) + 1

    # ── positions ────────────────────────────────────────────────────────

    @abstractmethod
    def quarter_of_year(self, year: int, period: int, day: int) -> int: ...

    @abstractmethod
    def month_of_year(self, year: int, period: int, day: int) -> int: ...

    @abstractmethod
    def week_of_year(self, year: int, period: int, day: int) -> tuple[int, int]: ...

    @abstractmethod
    def week_of_month(self, year: int, period: int, day: int) -> tuple[int, int]: ...

    def day_of_year(self, year: int, period: int, day: int) -> int:
        return self.to_ordinal(year, period, day) - self.first_day_of_year(year) + 1

    # ── ranges ───────────────────────────────────────────────────────────

    def year_bounds(self, year: int) -> Bounds:
        return self.first_day_of_year(year), self.last_day_of_year(year)

    @abstractmethod
    def quarter_bounds(self, year: int, quarter: int) -> Bounds: ...

    @abstractmethod
    def month_bounds(self, year: int, month: int) -> Bounds: ...

    @abstractmethod
    def week_bounds(self, year: int, week: int) -> Bounds: ...

    # ── arithmetic ───────────────────────────────────────────────────────

    @abstractmethod
    def plus_fields(
        self, year: int, period: int, day: int, unit: Unit, amount: int, coerce: bool
    ) -> Union[Triple, InvalidDateError]:
        """Shift a date by whole years, quarters or months."""

    def plus(
        self, year: int, period: int, day: int, unit: Unit, amount: int, coerce: bool = False
    ) -> Union[Triple, InvalidDateError]:
        if unit is Unit.DAYS:
            return self.from_ordinal(self.to_ordinal(year, period, day) + amount)
        if unit is Unit.WEEKS:
            return self.from_ordinal(
                self.to_ordinal(year, period, day) + amount * DAYS_IN_WEEK
            )
        return self.plus_fields(year, period, day, unit, amount, coerce)


def check_quarter(quarter: int) -> None:
    if not 1 <= quarter <= QUARTERS_IN_YEAR:
        raise InvalidDateError(f"Quarter must be in 1..4; got {quarter}.")


def shift_months(year: int, month: int, amount: int, months_in_year: int = 12) -> tuple[int, int]:
    """Add *amount* months to ``(year, month)``, carrying into the year."""
    index = year * months_in_year + (month - 1) + amount
    return index // months_in_year, index % months_in_year + 1

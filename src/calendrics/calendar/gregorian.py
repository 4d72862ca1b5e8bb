# src/calendrics/calendar/gregorian.py
"""
Proleptic Gregorian reference calendar over ordinal day numbers.

Ordinal day 0 is 0000-01-01, so ``ordinal == datetime.date.toordinal() + 365``
for every date Python itself can represent.  The conversions are closed-form
(no iteration over years) and only use ``+ - * // %``, which lets the same code
run on Python ints and on NumPy ``int64`` arrays.
"""

from __future__ import annotations

from typing import Union

import numpy as np

IntLike = Union[int, "np.ndarray"]

# Days from 0000-01-01 to 0000-03-01; the computation below counts from March
# so the leap day is the last day of its "year".
_MARCH_OFFSET: int = 60
_DAYS_PER_ERA: int = 146_097

_DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_NP_DAYS_IN_MONTH: np.ndarray = np.array(_DAYS_IN_MONTH, dtype=np.int64)

MONTHS_IN_YEAR: int = 12
DAYS_IN_WEEK: int = 7


def _prepare(*values):
    scalar = all(np.ndim(v) == 0 for v in values)
    if scalar:
        return True, tuple(int(v) for v in values)
    return False, tuple(np.asarray(v, dtype=np.int64) for v in values)


# ── year and month lengths ───────────────────────────────────────────────────

def is_leap_year(year: IntLike):
    scalar, (y,) = _prepare(year)
    leap = (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))
    return bool(leap) if scalar else leap


def days_in_year(year: IntLike):
    scalar, (y,) = _prepare(year)
    result = 365 + is_leap_year(y)
    return int(result) if scalar else result.astype(np.int64)


def days_in_month(year: IntLike, month: IntLike):
    scalar, (y, m) = _prepare(year, month)
    if np.any((m < 1) | (m > MONTHS_IN_YEAR)):
        raise ValueError(f"Month must be in 1..12; got {month!r}.")
    if scalar:
        return _DAYS_IN_MONTH[m - 1] + int(m == 2 and is_leap_year(y))
    return _NP_DAYS_IN_MONTH[m - 1] + ((m == 2) & is_leap_year(y))


def valid_date(year: int, month: int, day: int) -> bool:
    return 1 <= month <= MONTHS_IN_YEAR and 1 <= day <= days_in_month(year, month)


# ── ordinal conversion ───────────────────────────────────────────────────────

def date_to_ordinal(year: IntLike, month: IntLike, day: IntLike):
    """
    Ordinal day of a Gregorian date.  The date is not validated; callers that
    accept user input check it with ``valid_date`` first.
    """
    scalar, (y, m, d) = _prepare(year, month, day)

    jan_feb = (14 - m) // 12              # 1 for January and February, else 0
    y = y - jan_feb
    shifted_month = m + 12 * jan_feb - 3  # March == 0 .. February == 11

    era = y // 400
    year_of_era = y - era * 400
    day_of_year = (153 * shifted_month + 2) // 5 + d - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    result = era * _DAYS_PER_ERA + day_of_era + _MARCH_OFFSET
    return int(result) if scalar else result


def ordinal_to_date(ordinal: IntLike):
    """Inverse of ``date_to_ordinal``: returns ``(year, month, day)``."""
    scalar, (n,) = _prepare(ordinal)

    z = n - _MARCH_OFFSET
    era = z // _DAYS_PER_ERA
    day_of_era = z - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36_524
        - day_of_era // 146_096
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153

    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 - 12 * (shifted_month // 10)
    year = year_of_era + era * 400 + (14 - month) // 12

    if scalar:
        return int(year), int(month), int(day)
    return year, month, day


def day_of_week(ordinal: IntLike):
    """ISO weekday of an ordinal day: 1 == Monday .. 7 == Sunday."""
    scalar, (n,) = _prepare(ordinal)
    # 0000-01-01 is a Saturday.
    result = (n + 5) % DAYS_IN_WEEK + 1
    return int(result) if scalar else result


def kday_on_or_before(ordinal: IntLike, k: int):
    """Latest ordinal day on or before *ordinal* whose ISO weekday is *k*."""
    scalar, (n,) = _prepare(ordinal)
    result = n - (n + 6 - k) % DAYS_IN_WEEK
    return int(result) if scalar else result


def kday_on_or_after(ordinal: IntLike, k: int):
    """Earliest ordinal day on or after *ordinal* whose ISO weekday is *k*."""
    _, (n,) = _prepare(ordinal)
    return kday_on_or_before(n + DAYS_IN_WEEK - 1, k)


def day_of_year(ordinal: IntLike):
    scalar, (n,) = _prepare(ordinal)
    year, _, _ = ordinal_to_date(n)
    result = n - date_to_ordinal(year, 1, 1) + 1
    return int(result) if scalar else result


# ── ISO 8601 week numbering ──────────────────────────────────────────────────

def iso_week_of_year(ordinal: int) -> tuple[int, int]:
    """ISO 8601 ``(week_year, week)`` of an ordinal day."""
    # The ISO week containing a day is numbered by the year of its Thursday.
    thursday = ordinal - day_of_week(ordinal) + 4
    week_year, _, _ = ordinal_to_date(thursday)
    week = (thursday - date_to_ordinal(week_year, 1, 1)) // DAYS_IN_WEEK + 1
    return week_year, week

# src/calendrics/kday/kday.py
"""
Weekday ("k-day") searches on ordinal days.

``k`` is an ISO weekday, 1 == Monday .. 7 == Sunday.  Every function accepts
an ordinal day, a NumPy array of ordinal days, or a ``CalendarDate``; a date
in gives a date of the same calendar out.
"""

from __future__ import annotations

from typing import Callable, Union

import numpy as np

from calendrics.calendar import gregorian
from calendrics.calendar.types import CalendarDate

DayLike = Union[int, "np.ndarray", CalendarDate]


def _check_weekday(k: int) -> None:
    if not 1 <= k <= gregorian.DAYS_IN_WEEK:
        raise ValueError(f"Weekday must be in 1..7; got {k}.")


def _apply(value: DayLike, fn: Callable[[Union[int, np.ndarray]], Union[int, np.ndarray]]) -> DayLike:
    if isinstance(value, CalendarDate):
        return value.calendar.from_ordinal(fn(value.ordinal))
    return fn(value)


def kday_on_or_before(value: DayLike, k: int) -> DayLike:
    """The latest day with weekday *k* that is not after *value*."""
    _check_weekday(k)
    return _apply(value, lambda n: gregorian.kday_on_or_before(n, k))


def kday_on_or_after(value: DayLike, k: int) -> DayLike:
    """The earliest day with weekday *k* that is not before *value*."""
    _check_weekday(k)
    return _apply(value, lambda n: gregorian.kday_on_or_after(n, k))


def kday_nearest(value: DayLike, k: int) -> DayLike:
    """The day with weekday *k* nearest to *value* (at most 3 days away)."""
    _check_weekday(k)
    return _apply(value, lambda n: gregorian.kday_on_or_before(np.add(n, 3), k))


def kday_before(value: DayLike, k: int) -> DayLike:
    """The latest day with weekday *k* strictly before *value*."""
    _check_weekday(k)
    return _apply(value, lambda n: gregorian.kday_on_or_before(np.subtract(n, 1), k))


def kday_after(value: DayLike, k: int) -> DayLike:
    """The earliest day with weekday *k* strictly after *value*."""
    _check_weekday(k)
    return _apply(value, lambda n: gregorian.kday_on_or_after(np.add(n, 1), k))


def nth_kday(value: DayLike, n: int, k: int) -> DayLike:
    """
    The *n*-th day with weekday *k* counted from *value*: forwards and
    including *value* for ``n > 0``, backwards and including it for ``n < 0``.

    >>> thanksgiving = nth_kday(gregorian.date_to_ordinal(2017, 11, 1), 4, 4)
    >>> gregorian.ordinal_to_date(thanksgiving)
    (2017, 11, 23)
    """
    _check_weekday(k)
    if n == 0:
        raise ValueError("n must be a non-zero integer.")

    def fn(ordinal):
        if n > 0:
            return gregorian.kday_on_or_after(ordinal, k) + 7 * (n - 1)
        return gregorian.kday_on_or_before(ordinal, k) + 7 * (n + 1)

    return _apply(value, fn)


def first_kday(value: DayLike, k: int) -> DayLike:
    return nth_kday(value, 1, k)


def last_kday(value: DayLike, k: int) -> DayLike:
    return nth_kday(value, -1, k)

# src/calendrics/kday/__init__.py
"""
calendrics.kday
~~~~~~~~~~~~~~~

Weekday searches: the Monday on or before a day, the fourth Thursday of
November, the last Saturday of July.  Weekdays are ISO numbered,
1 == Monday .. 7 == Sunday.

Basic usage::

    from calendrics.calendar import get_calendar
    from calendrics.kday import nth_kday, kday_on_or_before

    gregorian = get_calendar("gregorian")
    thanksgiving = nth_kday(gregorian.date(2017, 11, 1), 4, 4)   # → 2017-11-23
    kday_on_or_before(gregorian.date(2016, 2, 29), 2)             # → 2016-02-23

Raw ordinal days and NumPy arrays of them are accepted too::

    import numpy as np
    kday_after(np.array([736_000, 736_001]), 7)

Public API
----------
kday_on_or_before   Latest weekday k not after the day.
kday_on_or_after    Earliest weekday k not before the day.
kday_nearest        Weekday k nearest to the day.
kday_before         Latest weekday k strictly before the day.
kday_after          Earliest weekday k strictly after the day.
nth_kday            n-th weekday k counted from the day.
first_kday          nth_kday with n == 1.
last_kday           nth_kday with n == -1.
"""

from __future__ import annotations

from calendrics.kday.kday import (
    first_kday,
    kday_after,
    kday_before,
    kday_nearest,
    kday_on_or_after,
    kday_on_or_before,
    last_kday,
    nth_kday,
)

__all__ = [
    "first_kday",
    "kday_after",
    "kday_before",
    "kday_nearest",
    "kday_on_or_after",
    "kday_on_or_before",
    "last_kday",
    "nth_kday",
]

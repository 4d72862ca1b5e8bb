# src/calendrics/duration/__init__.py
"""
calendrics.duration
~~~~~~~~~~~~~~~~~~~

Differences between dates in calendar units.

Basic usage::

    from calendrics.calendar import get_calendar
    from calendrics.duration import Duration

    cal = get_calendar("gregorian")
    d = Duration.new(cal.date(2019, 1, 1), cal.date(2019, 12, 31))
    str(d)                                   # → "11 months, 30 days"
    Duration.apply(cal.date(2019, 1, 31), Duration(months=1))   # → 2019-02-28

``Duration.new`` returns an error value instead of raising when the dates
are in different calendars, in different UTC offsets, or out of order.

Public API
----------
Duration   Calendar difference between two dates or datetimes.
"""

from __future__ import annotations

from calendrics.duration.duration import Duration

__all__ = [
    "Duration",
]

# src/calendrics/interval/__init__.py
"""
calendrics.interval
~~~~~~~~~~~~~~~~~~~

Allen's interval algebra for period ranges.

Basic usage::

    from calendrics.calendar import get_calendar
    from calendrics.interval import compare, Relation

    cal = get_calendar("gregorian")
    compare(cal.day(2019, 1), cal.day(2019, 2))         # → Relation.MEETS
    compare(cal.month(2019, 1), cal.year(2019))         # → Relation.STARTS

Plain ``(first_ordinal, last_ordinal)`` tuples are accepted as well.

Public API
----------
Relation   The thirteen interval relations, each with its converse.
compare    Relation of one range to another.
"""

from __future__ import annotations

from calendrics.interval.interval import Relation, compare

__all__ = [
    "Relation",
    "compare",
]

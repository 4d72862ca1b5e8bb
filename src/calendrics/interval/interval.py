# src/calendrics/interval/interval.py
"""
Allen's interval algebra over closed day ranges.

Ranges are compared as ``[first_ordinal, last_ordinal]`` pairs of whole
days, so two ranges "meet" when one ends the day before the other starts.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from calendrics.calendar.types import PeriodRange

RangeLike = Union[PeriodRange, tuple[int, int]]


class Relation(str, Enum):
    """The thirteen mutually exclusive relations between two ranges."""

    PRECEDES = "precedes"
    PRECEDED_BY = "preceded_by"
    MEETS = "meets"
    MET_BY = "met_by"
    OVERLAPS = "overlaps"
    OVERLAPPED_BY = "overlapped_by"
    STARTS = "starts"
    STARTED_BY = "started_by"
    FINISHES = "finishes"
    FINISHED_BY = "finished_by"
    DURING = "during"
    CONTAINS = "contains"
    EQUALS = "equals"

    @property
    def converse(self) -> "Relation":
        """The relation that holds with the arguments swapped."""
        return _CONVERSE[self]


_CONVERSE: dict[Relation, Relation] = {
    Relation.PRECEDES: Relation.PRECEDED_BY,
    Relation.MEETS: Relation.MET_BY,
    Relation.OVERLAPS: Relation.OVERLAPPED_BY,
    Relation.STARTS: Relation.STARTED_BY,
    Relation.FINISHES: Relation.FINISHED_BY,
    Relation.DURING: Relation.CONTAINS,
    Relation.EQUALS: Relation.EQUALS,
}
_CONVERSE.update({v: k for k, v in list(_CONVERSE.items())})


def to_bounds(value: RangeLike) -> tuple[int, int]:
    if isinstance(value, PeriodRange):
        return value.first_ordinal, value.last_ordinal
    first, last = value
    if first > last:
        raise ValueError(f"Range first {first} is after last {last}.")
    return int(first), int(last)


def compare(r1: RangeLike, r2: RangeLike) -> Relation:
    """
    Relation of *r1* to *r2*.  Exactly one relation holds for every pair of
    ranges, and ``compare(r2, r1)`` is always ``compare(r1, r2).converse``.

    >>> compare((10, 10), (11, 11))
    <Relation.MEETS: 'meets'>
    """
    first1, last1 = to_bounds(r1)
    first2, last2 = to_bounds(r2)

    if first1 == first2 and last1 == last2:
        return Relation.EQUALS
    if last1 < first2 - 1:
        return Relation.PRECEDES
    if last1 == first2 - 1:
        return Relation.MEETS
    if first1 < first2 and last1 > last2:
        return Relation.CONTAINS
    if last1 == last2 and first1 < first2:
        return Relation.FINISHED_BY
    if first1 < first2 and first2 <= last1 < last2:
        return Relation.OVERLAPS
    if first1 == first2 and last1 < last2:
        return Relation.STARTS

    if last2 < first1 - 1:
        return Relation.PRECEDED_BY
    if last2 == first1 - 1:
        return Relation.MET_BY
    if last1 == last2 and first2 < first1:
        return Relation.FINISHES
    if first2 < first1 and last2 > last1:
        return Relation.DURING
    if first1 == first2 and last2 < last1:
        return Relation.STARTED_BY
    return Relation.OVERLAPPED_BY

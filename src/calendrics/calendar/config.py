# src/calendrics/calendar/config.py
"""
Immutable calendar configuration and its validation.

A ``CalendarConfig`` fully determines every conversion of the calendar it
describes; no conversion consults anything else.  Configurations are built
through ``validate_config`` which turns every kind of bad input (unknown
options, renamed options, out-of-range values) into a ``ConfigError``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Literal, Mapping, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ._exceptions import ConfigError

logger = logging.getLogger(__name__)


class CalendarBase(str, Enum):
    """Whether a year is divided into months or into weeks."""

    MONTH = "month"
    WEEK = "week"


class AnchorEdge(str, Enum):
    """Whether the anchor day marks the start or the end of the year."""

    BEGINS = "begins"
    ENDS = "ends"


class AnchorPosition(str, Enum):
    """Which occurrence of the anchor weekday in the anchor month is used."""

    FIRST = "first"
    LAST = "last"
    NEAREST = "nearest"


class YearAttribution(str, Enum):
    """Which Gregorian year labels a year that spans two of them."""

    MAJORITY = "majority"
    BEGINNING = "beginning"
    ENDING = "ending"


FIRST_DAY_OF_YEAR = "first"

PERIOD_LAYOUTS: tuple[tuple[int, int, int], ...] = ((4, 4, 5), (4, 5, 4), (5, 4, 4))

RENAMED_OPTIONS: dict[str, str] = {
    "day": "anchor_day",
    "day_of_week": "anchor_day",
    "first_day": "anchor_day",
    "month": "anchor_month",
    "month_of_year": "anchor_month",
    "first_month": "anchor_month",
    "min_days": "min_days_in_first_week",
    "first_or_last": "anchor_edge",
    "begins_or_ends": "anchor_edge",
    "anchor": "anchor_position",
    "weeks_in_month": "period_layout",
    "year": "year_attribution",
}


class WeekPreferences(NamedTuple):
    """A locale's preferred first weekday and minimal days in the first week."""

    first_day: int
    min_days: int


PreferenceLookup = Callable[[str], WeekPreferences]


class CalendarConfig(BaseModel):
    """
    Shape of one calendar.

    ``anchor_day`` is an ISO weekday (1 == Monday .. 7 == Sunday), or
    ``"first"`` for month-based calendars whose weeks start on the first day
    of the year.  ``anchor_month`` is the Gregorian month in which the year
    begins or ends, according to ``anchor_edge``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    base: CalendarBase = CalendarBase.MONTH
    anchor_day: Union[int, Literal["first"]] = 1
    anchor_month: int = Field(1, ge=1, le=12)
    anchor_edge: AnchorEdge = AnchorEdge.BEGINS
    anchor_position: AnchorPosition = AnchorPosition.NEAREST
    year_attribution: YearAttribution = YearAttribution.MAJORITY
    min_days_in_first_week: int = Field(1, ge=1, le=7)
    period_layout: tuple[int, int, int] = (4, 5, 4)
    days_per_week: int = 7
    locale: Optional[str] = None
    backend: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _default_edge_for_last(cls, data: Any) -> Any:
        # A year anchored on the last weekday of a month ends on that day.
        if isinstance(data, Mapping) and "anchor_edge" not in data:
            if data.get("anchor_position") == AnchorPosition.LAST:
                data = {**data, "anchor_edge": AnchorEdge.ENDS}
        return data

    @field_validator("anchor_day")
    @classmethod
    def _validate_anchor_day(cls, value: Union[int, str]) -> Union[int, str]:
        if isinstance(value, int) and not 1 <= value <= 7:
            msg = f"anchor_day must be in the range 1..7 or 'first'. Found {value!r}."
            raise ValueError(msg)
        return value

    @field_validator("period_layout")
    @classmethod
    def _validate_period_layout(cls, value: tuple[int, int, int]) -> tuple[int, int, int]:
        if tuple(value) not in PERIOD_LAYOUTS:
            msg = f"period_layout must be (4, 4, 5), (4, 5, 4) or (5, 4, 4). Found {value!r}."
            raise ValueError(msg)
        return tuple(value)

    @field_validator("days_per_week")
    @classmethod
    def _validate_days_per_week(cls, value: int) -> int:
        if value != 7:
            msg = f"days_per_week must be 7. Found {value!r}."
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _validate_anchor_day_for_base(self) -> "CalendarConfig":
        if self.anchor_day == FIRST_DAY_OF_YEAR and self.base is not CalendarBase.MONTH:
            msg = "anchor_day 'first' is only valid for month-based calendars."
            raise ValueError(msg)
        return self

    # ── derived properties ───────────────────────────────────────────────

    @property
    def month_based(self) -> bool:
        return self.base is CalendarBase.MONTH

    @property
    def week_based(self) -> bool:
        return self.base is CalendarBase.WEEK

    @property
    def first_month(self) -> int:
        """Gregorian month in which the calendar year begins."""
        if self.anchor_edge is AnchorEdge.BEGINS:
            return self.anchor_month
        return self.anchor_month % 12 + 1

    @property
    def last_month(self) -> int:
        """Gregorian month in which the calendar year ends."""
        if self.anchor_edge is AnchorEdge.ENDS:
            return self.anchor_month
        return (self.anchor_month + 10) % 12 + 1

    @property
    def weeks_starting_first_day(self) -> bool:
        return self.anchor_day == FIRST_DAY_OF_YEAR

    def gregorian_years(self, year: int) -> tuple[int, int]:
        """
        Gregorian years in which calendar year *year* starts and ends.

        Years that begin in January or end in December coincide with a
        Gregorian year.  Otherwise the year attribution decides: a majority
        year is labelled with whichever Gregorian year holds more of its
        months.
        """
        if self.first_month == 1:
            return year, year

        attribution = self.year_attribution
        if attribution is YearAttribution.BEGINNING:
            return year, year + 1
        if attribution is YearAttribution.ENDING:
            return year - 1, year
        # The anchor month is compared as given: an "ends" edge in June and a
        # "begins" edge in July describe the same months but label them
        # differently.
        if self.anchor_month > 6:
            return year - 1, year
        return year, year + 1


# ── validation ───────────────────────────────────────────────────────────────

VALID_OPTIONS: tuple[str, ...] = tuple(CalendarConfig.model_fields)


def _check_option_names(options: Mapping[str, Any]) -> None:
    for key in options:
        if key in RENAMED_OPTIONS:
            raise ConfigError(f"Option {key!r} is replaced with {RENAMED_OPTIONS[key]!r}.")
        if key not in VALID_OPTIONS:
            valid = ", ".join(VALID_OPTIONS)
            raise ConfigError(f"Unknown option {key!r}. Valid options are: {valid}.")


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "config"
        parts.append(f"{location}: {error['msg']}")
    return "Invalid calendar configuration. " + "; ".join(parts)


def validate_config(
    options: Optional[Mapping[str, Any]] = None,
    *,
    preferences: Optional[PreferenceLookup] = None,
) -> CalendarConfig:
    """
    Build a ``CalendarConfig`` from raw options, raising ``ConfigError``.

    When a ``locale`` is configured and a *preferences* lookup is supplied,
    ``anchor_day`` and ``min_days_in_first_week`` default to the locale's
    preferences instead of the built-in defaults.
    """
    options = dict(options or {})
    _check_option_names(options)

    locale = options.get("locale")
    if locale is not None and preferences is not None:
        preferred = preferences(locale)
        options.setdefault("anchor_day", preferred.first_day)
        options.setdefault("min_days_in_first_week", preferred.min_days)

    try:
        return CalendarConfig(**options)
    except ValidationError as exc:
        message = _format_validation_error(exc)
        logger.debug("Rejected calendar options %r: %s", options, message)
        raise ConfigError(message) from exc

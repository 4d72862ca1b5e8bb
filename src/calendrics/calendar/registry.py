# src/calendrics/calendar/registry.py
"""
Named calendars.

A registry maps calendar names to ``Calendar`` values.  Defining a name that
already exists returns the existing calendar instead of replacing it, and all
mutations are serialized through one lock.  Arithmetic never touches the
registry, so lookups are the only shared access.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, Mapping, Optional

from ._exceptions import CalendarError
from .calendar import Calendar
from .config import PreferenceLookup, validate_config

logger = logging.getLogger(__name__)


# Name -> options of the calendars every default registry starts with.
PREDEFINED_CALENDARS: dict[str, dict[str, Any]] = {
    "gregorian": {"base": "month"},
    "iso_week": {
        "base": "week",
        "anchor_day": 1,
        "anchor_month": 1,
        "anchor_edge": "begins",
        "anchor_position": "nearest",
        "min_days_in_first_week": 4,
    },
    "nrf": {
        "base": "week",
        "anchor_day": 6,
        "anchor_month": 1,
        "anchor_edge": "ends",
        "anchor_position": "nearest",
        "min_days_in_first_week": 4,
        "period_layout": (4, 5, 4),
    },
    "fiscal_us": {"base": "month", "anchor_month": 10},
    "fiscal_uk": {"base": "month", "anchor_month": 4},
    "fiscal_au": {"base": "month", "anchor_month": 7},
}


class CalendarRegistry:
    """Thread-safe name -> ``Calendar`` map with idempotent definition."""

    def __init__(
        self,
        calendars: Iterable[Calendar] = (),
        *,
        preferences: Optional[PreferenceLookup] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._preferences = preferences
        self._calendars: dict[str, Calendar] = {c.name: c for c in calendars}

    @classmethod
    def with_defaults(cls, *, preferences: Optional[PreferenceLookup] = None) -> "CalendarRegistry":
        registry = cls(preferences=preferences)
        for name, options in PREDEFINED_CALENDARS.items():
            registry.define(name, options)
        return registry

    # ── mutation ─────────────────────────────────────────────────────────

    def define(self, name: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Calendar:
        """
        Return the calendar registered as *name*, creating it from the given
        options if it does not exist yet.  Invalid options raise
        ``ConfigError`` even when the name is already taken.
        """
        config = validate_config(dict(options or {}, **kwargs), preferences=self._preferences)
        with self._lock:
            existing = self._calendars.get(name)
            if existing is not None:
                if existing.config != config:
                    logger.warning(
                        "Calendar %r is already defined with a different configuration; "
                        "keeping the existing definition.",
                        name,
                    )
                return existing
            calendar = Calendar(name, config)
            self._calendars[name] = calendar
        logger.info("Defined calendar %r (%s-based)", name, config.base.value)
        return calendar

    def remove(self, name: str) -> Optional[Calendar]:
        with self._lock:
            return self._calendars.pop(name, None)

    # ── lookup ───────────────────────────────────────────────────────────

    def get(self, name: str) -> Calendar:
        try:
            return self._calendars[name]
        except KeyError:
            raise CalendarError(f"No calendar named {name!r} is defined.") from None

    def names(self) -> list[str]:
        return sorted(self._calendars)

    def __contains__(self, name: object) -> bool:
        return name in self._calendars

    def __len__(self) -> int:
        return len(self._calendars)

    def __repr__(self) -> str:
        return f"CalendarRegistry({self.names()!r})"


default_registry: CalendarRegistry = CalendarRegistry.with_defaults()


def get_calendar(name: str) -> Calendar:
    """Look up *name* in the default registry."""
    return default_registry.get(name)

"""
tests/calendar/test_config.py

Covers:
  - Defaults and immutability
  - Range validation of every field
  - Unknown and renamed options
  - "first" anchor day only for month-based calendars
  - Locale preferences threaded through validation
  - Gregorian year attribution for every edge and attribution rule
"""

import pytest
from pydantic import ValidationError

from calendrics.calendar import (
    AnchorEdge,
    AnchorPosition,
    CalendarBase,
    CalendarConfig,
    ConfigError,
    WeekPreferences,
    YearAttribution,
    validate_config,
)


# ── Defaults ──────────────────────────────────────────────────────────────────

class TestDefaults:

    def test_defaults(self):
        config = validate_config({})
        assert config.base is CalendarBase.MONTH
        assert config.anchor_day == 1
        assert config.anchor_month == 1
        assert config.anchor_edge is AnchorEdge.BEGINS
        assert config.anchor_position is AnchorPosition.NEAREST
        assert config.year_attribution is YearAttribution.MAJORITY
        assert config.min_days_in_first_week == 1
        assert config.period_layout == (4, 5, 4)
        assert config.days_per_week == 7

    def test_frozen(self):
        config = validate_config({})
        with pytest.raises(ValidationError):
            config.anchor_month = 4

    def test_hashable_and_equal_by_value(self):
        a = validate_config({"base": "week", "anchor_month": 2})
        b = validate_config({"anchor_month": 2, "base": "week"})
        assert a == b
        assert hash(a) == hash(b)

    def test_enum_values_from_strings(self):
        config = validate_config({"anchor_edge": "ends", "anchor_position": "last"})
        assert config.anchor_edge is AnchorEdge.ENDS
        assert config.anchor_position is AnchorPosition.LAST

    def test_last_position_defaults_to_ends(self):
        config = validate_config({"anchor_position": "last"})
        assert config.anchor_edge is AnchorEdge.ENDS

    def test_last_position_keeps_explicit_begins(self):
        config = validate_config({"anchor_position": "last", "anchor_edge": "begins"})
        assert config.anchor_edge is AnchorEdge.BEGINS

    def test_layout_from_list(self):
        assert validate_config({"period_layout": [4, 4, 5]}).period_layout == (4, 4, 5)

    def test_none_options(self):
        assert validate_config(None) == CalendarConfig()


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:

    @pytest.mark.parametrize("options", [
        {"anchor_day": 0},
        {"anchor_day": 8},
        {"anchor_month": 0},
        {"anchor_month": 13},
        {"min_days_in_first_week": 0},
        {"min_days_in_first_week": 8},
        {"period_layout": (4, 4, 4)},
        {"period_layout": (5, 5, 3)},
        {"year_attribution": "middle"},
        {"anchor_edge": "middle"},
        {"anchor_position": "second"},
        {"base": "lunar"},
        {"days_per_week": 5},
    ])
    def test_out_of_range_raises(self, options):
        with pytest.raises(ConfigError):
            validate_config(options)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_config({"anchor_month": 13})

    def test_message_names_field(self):
        with pytest.raises(ConfigError, match="anchor_month"):
            validate_config({"anchor_month": 13})

    def test_unknown_option(self):
        with pytest.raises(ConfigError, match="Unknown option 'anchor_dya'"):
            validate_config({"anchor_dya": 1})

    def test_unknown_option_lists_valid_options(self):
        with pytest.raises(ConfigError, match="min_days_in_first_week"):
            validate_config({"colour": "blue"})

    @pytest.mark.parametrize("old, new", [
        ("day", "anchor_day"),
        ("day_of_week", "anchor_day"),
        ("month", "anchor_month"),
        ("month_of_year", "anchor_month"),
        ("min_days", "min_days_in_first_week"),
        ("first_or_last", "anchor_edge"),
        ("weeks_in_month", "period_layout"),
        ("year", "year_attribution"),
    ])
    def test_renamed_option(self, old, new):
        with pytest.raises(ConfigError, match=f"'{old}' is replaced with '{new}'"):
            validate_config({old: 1})

    def test_first_anchor_day_for_month_calendar(self):
        assert validate_config({"anchor_day": "first"}).weeks_starting_first_day

    def test_first_anchor_day_rejected_for_week_calendar(self):
        with pytest.raises(ConfigError, match="month-based"):
            validate_config({"base": "week", "anchor_day": "first"})

    def test_direct_construction_forbids_extra(self):
        with pytest.raises(ValidationError):
            CalendarConfig(colour="blue")


# ── Locale preferences ────────────────────────────────────────────────────────

class TestPreferences:

    @staticmethod
    def us_preferences(locale):
        return WeekPreferences(first_day=7, min_days=1)

    def test_locale_fills_defaults(self):
        config = validate_config({"locale": "en-US"}, preferences=self.us_preferences)
        assert config.anchor_day == 7
        assert config.min_days_in_first_week == 1
        assert config.locale == "en-US"

    def test_explicit_options_win(self):
        config = validate_config(
            {"locale": "en-US", "anchor_day": 1}, preferences=self.us_preferences
        )
        assert config.anchor_day == 1

    def test_no_lookup_without_locale(self):
        def fail(locale):
            raise AssertionError("lookup must not be called")

        assert validate_config({}, preferences=fail).anchor_day == 1

    def test_locale_without_lookup_passes_through(self):
        config = validate_config({"locale": "de", "backend": "default"})
        assert (config.locale, config.backend) == ("de", "default")


# ── Gregorian year attribution ────────────────────────────────────────────────

class TestGregorianYears:

    @pytest.mark.parametrize("month, expected", [
        (1, (2019, 2019)),
        (2, (2019, 2020)),
        (4, (2019, 2020)),
        (6, (2019, 2020)),
        (7, (2018, 2019)),
        (10, (2018, 2019)),
        (12, (2018, 2019)),
    ])
    def test_begins_majority(self, month, expected):
        config = validate_config({"anchor_month": month})
        assert config.gregorian_years(2019) == expected

    @pytest.mark.parametrize("month, expected", [
        (12, (2019, 2019)),
        (1, (2019, 2020)),
        (6, (2019, 2020)),
        (7, (2018, 2019)),
        (8, (2018, 2019)),
    ])
    def test_ends_majority(self, month, expected):
        config = validate_config({"anchor_month": month, "anchor_edge": "ends"})
        assert config.gregorian_years(2019) == expected

    @pytest.mark.parametrize("attribution, expected", [
        ("beginning", (2019, 2020)),
        ("ending", (2018, 2019)),
    ])
    def test_explicit_attribution(self, attribution, expected):
        for month in (2, 10):
            config = validate_config({"anchor_month": month, "year_attribution": attribution})
            assert config.gregorian_years(2019) == expected

    def test_first_and_last_month(self):
        begins = validate_config({"anchor_month": 4})
        ends = validate_config({"anchor_month": 3, "anchor_edge": "ends"})
        assert (begins.first_month, begins.last_month) == (4, 3)
        assert (ends.first_month, ends.last_month) == (4, 3)

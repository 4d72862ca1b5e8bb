"""
tests/calendar/test_week_calendar.py

Covers:
  - ISO week calendar against datetime.isocalendar
  - NRF retail calendar year boundaries and 53-week years
  - Nearest, first and last anchor positions for both edges
  - Month and quarter layout, week 53 in the last month and quarter
  - Long-year consistency with the year boundaries
  - Invalid week dates
"""

import datetime

import pytest

from calendrics.calendar import Calendar, InvalidDateError, get_calendar, unwrap


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def iso_week():
    return get_calendar("iso_week")


@pytest.fixture
def nrf():
    return get_calendar("nrf")


@pytest.fixture
def nearest_august():
    """Year ends on the Saturday nearest the end of August."""
    return Calendar.new(
        "nearest_august", base="week", anchor_day=6, anchor_month=8,
        anchor_edge="ends", anchor_position="nearest", min_days_in_first_week=4,
    )


@pytest.fixture
def last_august():
    """Year ends on the last Saturday of August."""
    return Calendar.new(
        "last_august", base="week", anchor_day=6, anchor_month=8,
        anchor_edge="ends", anchor_position="last",
    )


@pytest.fixture
def last_july():
    """Year ends on the last Saturday of July."""
    return Calendar.new(
        "last_july", base="week", anchor_day=6, anchor_month=7,
        anchor_edge="ends", anchor_position="last",
    )


@pytest.fixture
def sunday_april():
    """Weeks start on Sunday, the year on the first Sunday of April, 4-4-5 layout."""
    return Calendar.new(
        "sunday_april", base="week", anchor_day=7, anchor_month=4,
        min_days_in_first_week=7, period_layout=(4, 4, 5),
    )


def first_day(calendar, year):
    return calendar.first_day_of_year(year).to_date()


def last_day(calendar, year):
    return calendar.last_day_of_year(year).to_date()


# ── ISO week calendar ─────────────────────────────────────────────────────────

class TestIsoWeek:

    def test_first_day_of_2019(self, iso_week):
        assert first_day(iso_week, 2019) == datetime.date(2018, 12, 31)

    def test_matches_isocalendar(self, iso_week):
        start = datetime.date(2014, 12, 1)
        for offset in range(0, 3000, 3):
            day = start + datetime.timedelta(days=offset)
            date = iso_week.from_date(day)
            iso = day.isocalendar()
            assert (date.year, date.period, date.day) == (iso[0], iso[1], iso[2])

    def test_long_years(self, iso_week):
        assert iso_week.leap_year(2015)
        assert iso_week.leap_year(2020)
        assert not iso_week.leap_year(2019)
        assert iso_week.weeks_in_year(2015) == 53

    def test_december_length(self, iso_week):
        assert iso_week.days_in_month(2015, 12) == 35
        assert iso_week.days_in_month(2016, 12) == 28

    def test_invalid_week_53(self, iso_week):
        assert isinstance(iso_week.date(2019, 53, 1), InvalidDateError)
        assert isinstance(iso_week.date(2019, 1, 8), InvalidDateError)
        assert iso_week.valid_date(2020, 53, 7)

    def test_day_of_week_is_real_weekday(self, iso_week):
        date = unwrap(iso_week.date(2019, 1, 3))
        assert iso_week.day_of_week(date) == 3

    def test_str(self, iso_week):
        assert str(unwrap(iso_week.date(2019, 5, 2))) == "2019-W05-2"


# ── NRF retail calendar ───────────────────────────────────────────────────────

class TestNrf:

    @pytest.mark.parametrize("year, first, last", [
        (2016, datetime.date(2016, 1, 31), datetime.date(2017, 1, 28)),
        (2017, datetime.date(2017, 1, 29), datetime.date(2018, 2, 3)),
        (2018, datetime.date(2018, 2, 4), datetime.date(2019, 2, 2)),
        (2019, datetime.date(2019, 2, 3), datetime.date(2020, 2, 1)),
        (2020, datetime.date(2020, 2, 2), datetime.date(2021, 1, 30)),
        (2021, datetime.date(2021, 1, 31), datetime.date(2022, 1, 29)),
        (2022, datetime.date(2022, 1, 30), datetime.date(2023, 1, 28)),
        (2023, datetime.date(2023, 1, 29), datetime.date(2024, 2, 3)),
    ])
    def test_year_bounds(self, nrf, year, first, last):
        assert first_day(nrf, year) == first
        assert last_day(nrf, year) == last

    def test_long_years(self, nrf):
        assert nrf.leap_year(2017)
        assert nrf.leap_year(2023)
        assert not nrf.leap_year(2022)

    def test_days_in_december(self, nrf):
        assert nrf.days_in_month(2012, 12) == 35
        assert nrf.days_in_month(2013, 12) == 28

    @pytest.mark.parametrize("month", [0, 13, 14])
    def test_days_in_month_rejects_invalid_month(self, nrf, month):
        assert isinstance(nrf.days_in_month(2019, month), InvalidDateError)

    def test_454_months(self, nrf):
        assert [nrf.days_in_month(2019, m) // 7 for m in range(1, 13)] == [
            4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4,
        ]

    def test_days_in_year(self, nrf):
        assert nrf.days_in_year(2017) == 371
        assert nrf.days_in_year(2018) == 364


# ── Anchor positions ──────────────────────────────────────────────────────────

class TestAnchorPositions:

    @pytest.mark.parametrize("year, last", [
        (2014, datetime.date(2014, 8, 30)), (2015, datetime.date(2015, 8, 29)),
        (2016, datetime.date(2016, 9, 3)), (2017, datetime.date(2017, 9, 2)),
        (2018, datetime.date(2018, 9, 1)), (2019, datetime.date(2019, 8, 31)),
        (2020, datetime.date(2020, 8, 29)), (2021, datetime.date(2021, 8, 28)),
        (2022, datetime.date(2022, 9, 3)), (2023, datetime.date(2023, 9, 2)),
        (2024, datetime.date(2024, 8, 31)), (2025, datetime.date(2025, 8, 30)),
        (2026, datetime.date(2026, 8, 29)), (2027, datetime.date(2027, 8, 28)),
        (2028, datetime.date(2028, 9, 2)), (2029, datetime.date(2029, 9, 1)),
    ])
    def test_nearest_end_of_august(self, nearest_august, year, last):
        assert last_day(nearest_august, year) == last

    @pytest.mark.parametrize("year, last", [
        (2014, datetime.date(2014, 8, 30)), (2015, datetime.date(2015, 8, 29)),
        (2016, datetime.date(2016, 8, 27)), (2017, datetime.date(2017, 8, 26)),
        (2018, datetime.date(2018, 8, 25)), (2019, datetime.date(2019, 8, 31)),
        (2020, datetime.date(2020, 8, 29)), (2021, datetime.date(2021, 8, 28)),
        (2022, datetime.date(2022, 8, 27)), (2023, datetime.date(2023, 8, 26)),
        (2024, datetime.date(2024, 8, 31)), (2025, datetime.date(2025, 8, 30)),
        (2026, datetime.date(2026, 8, 29)), (2027, datetime.date(2027, 8, 28)),
        (2028, datetime.date(2028, 8, 26)), (2029, datetime.date(2029, 8, 25)),
    ])
    def test_last_saturday_of_august(self, last_august, year, last):
        assert last_day(last_august, year) == last

    def test_last_saturday_of_july(self, last_july):
        assert first_day(last_july, 2019) == datetime.date(2018, 7, 29)
        assert last_day(last_july, 2018) == datetime.date(2018, 7, 28)

    def test_last_position_ends_the_year_without_explicit_edge(self):
        calendar = Calendar.new(
            "last_july_default_edge", base="week", anchor_day=6, anchor_month=7,
            anchor_position="last",
        )
        assert first_day(calendar, 2019) == datetime.date(2018, 7, 29)
        assert last_day(calendar, 2019) == datetime.date(2019, 7, 27)

    @pytest.mark.parametrize("weekday, first", [
        (4, datetime.date(2019, 2, 7)),
        (5, datetime.date(2019, 2, 1)),
        (6, datetime.date(2019, 2, 2)),
        (7, datetime.date(2019, 2, 3)),
        (1, datetime.date(2019, 2, 4)),
        (2, datetime.date(2019, 2, 5)),
        (3, datetime.date(2019, 2, 6)),
    ])
    def test_first_weekday_of_february(self, weekday, first):
        calendar = Calendar.new(
            f"starts_{weekday}", base="week", anchor_day=weekday, anchor_month=2,
            anchor_position="first",
        )
        assert first_day(calendar, 2019) == first

    @pytest.mark.parametrize("year, first", [
        (2000, datetime.date(2000, 2, 7)),
        (1954, datetime.date(1954, 2, 1)),
        (1949, datetime.date(1949, 2, 7)),
    ])
    def test_first_monday_of_february(self, year, first):
        calendar = Calendar.new(
            "starts_monday", base="week", anchor_day=1, anchor_month=2,
            anchor_position="first",
        )
        assert first_day(calendar, year) == first

    def test_years_are_contiguous(self, nearest_august, last_august, nrf):
        for calendar in (nearest_august, last_august, nrf):
            for year in range(1990, 2040):
                assert (
                    calendar.engine.first_day_of_year(year + 1)
                    == calendar.engine.last_day_of_year(year) + 1
                )

    def test_long_year_consistency(self, nearest_august, last_august, nrf, sunday_april):
        for calendar in (nearest_august, last_august, nrf, sunday_april):
            for year in range(1900, 2100):
                span = (
                    calendar.engine.last_day_of_year(year)
                    - calendar.engine.first_day_of_year(year) + 1
                )
                assert span in (364, 371)
                assert calendar.leap_year(year) == (span == 53 * 7)


# ── Months and quarters ───────────────────────────────────────────────────────

class TestLayout:

    def test_sunday_december_lengths(self, sunday_april):
        assert sunday_april.days_in_month(2012, 12) == 42
        assert sunday_april.days_in_month(2013, 12) == 35

    def test_month_of_week(self, sunday_april):
        months = [sunday_april.month_of_year(unwrap(sunday_april.date(2013, w, 1)))
                  for w in (1, 4, 5, 8, 9, 13, 14, 26, 27, 39, 40, 48, 52)]
        assert months == [1, 1, 2, 2, 3, 3, 4, 6, 7, 9, 10, 12, 12]

    def test_week_53_is_in_last_month_and_quarter(self, sunday_april):
        assert sunday_april.leap_year(2012)
        date = unwrap(sunday_april.date(2012, 53, 1))
        assert sunday_april.month_of_year(date) == 12
        assert sunday_april.quarter_of_year(date) == 4
        assert sunday_april.week_of_month(date) == (12, 6)

    def test_quarter_ranges(self, nrf):
        q4 = unwrap(nrf.quarter(2017, 4))
        assert len(q4) == 14 * 7
        q1 = unwrap(nrf.quarter(2017, 1))
        assert q1.first == nrf.first_day_of_year(2017)
        assert len(q1) == 13 * 7

    def test_month_range(self, nrf):
        month = unwrap(nrf.month(2019, 2))
        assert month.first.to_date() == datetime.date(2019, 3, 3)
        assert len(month) == 35

    def test_week_range(self, nrf):
        week = unwrap(nrf.week(2019, 1))
        assert week.first.to_date() == datetime.date(2019, 2, 3)
        assert week.last.to_date() == datetime.date(2019, 2, 9)

    def test_invalid_ranges(self, nrf):
        assert isinstance(nrf.quarter(2019, 5), InvalidDateError)
        assert isinstance(nrf.month(2019, 13), InvalidDateError)
        assert isinstance(nrf.week(2018, 53), InvalidDateError)

    def test_week_of_year_is_identity(self, nrf):
        date = unwrap(nrf.date(2019, 17, 4))
        assert nrf.week_of_year(date) == (2019, 17)
        assert date.week == 17
        assert date.month == 4

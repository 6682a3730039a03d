"""Tests for date and age helpers."""

import re
from datetime import date

from baby_tracker.domain.dates import (
    age_group,
    baby_age,
    current_date,
    current_time,
    format_date,
    format_date_short,
    format_day_short,
    format_time,
    last_seven_days,
    months_between,
)

TODAY = date(2024, 6, 15)


def test_months_between_counts_partial_month_as_previous() -> None:
    assert months_between(date(2024, 1, 15), TODAY) == 5
    assert months_between(date(2024, 1, 16), TODAY) == 4
    assert months_between(date(2023, 6, 15), TODAY) == 12


def test_age_group_boundaries() -> None:
    assert age_group(TODAY, TODAY) == "0-6 months"
    assert age_group(date(2024, 1, 16), TODAY) == "0-6 months"
    assert age_group(date(2023, 12, 15), TODAY) == "6-12 months"
    assert age_group(date(2023, 4, 15), TODAY) == "12-24 months"
    assert age_group(date(2022, 6, 16), TODAY) == "12-24 months"
    assert age_group(date(2022, 6, 15), TODAY) == "2+ years"


def test_age_group_defaults_to_now() -> None:
    assert age_group(date.today()) == "0-6 months"


def test_baby_age_in_days_months_and_years() -> None:
    assert baby_age(date(2024, 6, 1), TODAY) == "14 days old"
    assert baby_age(date(2024, 3, 15), TODAY) == "3 months old"
    assert baby_age(date(2023, 6, 15), TODAY) == "12 months old"
    assert baby_age(date(2022, 5, 15), TODAY) == "2 years, 1 month old"
    assert baby_age(date(2021, 6, 15), TODAY) == "3 years, 0 months old"
    assert baby_age(date(2021, 4, 15), TODAY) == "3 years, 2 months old"


def test_format_helpers() -> None:
    assert format_date("2024-01-05") == "Jan 5, 2024"
    assert format_date_short(date(2024, 1, 5)) == "Jan 5"
    assert format_day_short("2024-01-05") == "1/5"
    assert format_date("") == ""
    assert format_date_short(None) == ""


def test_format_time_uses_twelve_hour_clock() -> None:
    assert format_time("00:15") == "12:15 AM"
    assert format_time("09:05") == "9:05 AM"
    assert format_time("12:00") == "12:00 PM"
    assert format_time("23:45") == "11:45 PM"
    assert format_time("") == ""


def test_last_seven_days_ends_today() -> None:
    days = last_seven_days(TODAY)

    assert len(days) == 7
    assert days[0] == date(2024, 6, 9)
    assert days[-1] == TODAY


def test_current_date_and_time_shapes() -> None:
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", current_date("UTC"))
    assert re.fullmatch(r"\d{2}:\d{2}", current_time("UTC"))


def test_baby_age_never_negative() -> None:
    assert baby_age(date(2024, 6, 20), TODAY) == "0 days old"
    assert age_group(date(2024, 6, 20), TODAY) == "0-6 months"

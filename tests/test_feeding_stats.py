"""Tests for feeding statistics and guidance tables."""

from datetime import date

from baby_tracker.domain.feeding import (
    average_time_between_feedings,
    daily_feeding_counts,
    feeding_count_for_day,
    feeding_schedule,
    filter_feeding_logs,
    latest_feeding,
    most_common_food,
    nutritionist_note,
    today_feeding_count,
)
from baby_tracker.domain.models import FeedingLog


def make_log(
    log_id: int,
    food_name: str = "Apple",
    day: date = date(2024, 1, 1),
    time: str = "08:00",
    food_type: str = "Puree",
) -> FeedingLog:
    return FeedingLog(
        id=log_id,
        date=day,
        time=time,
        food_type=food_type,
        food_name=food_name,
        amount="50 g",
        notes=None,
        baby_id=1,
    )


def test_most_common_food_counts_names() -> None:
    logs = [make_log(1, "Apple"), make_log(2, "Pear"), make_log(3, "Apple")]

    assert most_common_food(logs) == "Apple"


def test_most_common_food_tie_goes_to_first_seen() -> None:
    logs = [
        make_log(1, "Pear"),
        make_log(2, "Apple"),
        make_log(3, "Apple"),
        make_log(4, "Pear"),
    ]

    assert most_common_food(logs) == "Pear"


def test_most_common_food_empty() -> None:
    assert most_common_food([]) is None


def test_feeding_count_for_day() -> None:
    logs = [
        make_log(1, day=date(2024, 1, 1)),
        make_log(2, day=date(2024, 1, 1)),
        make_log(3, day=date(2024, 1, 2)),
    ]

    assert feeding_count_for_day(logs, date(2024, 1, 1)) == 2
    assert feeding_count_for_day(logs, date(2024, 1, 3)) == 0
    assert today_feeding_count(logs, date(2024, 1, 2)) == 1


def test_daily_feeding_counts_follow_given_days() -> None:
    logs = [make_log(1, day=date(2024, 1, 2)), make_log(2, day=date(2024, 1, 2))]
    days = [date(2024, 1, 1), date(2024, 1, 2)]

    assert daily_feeding_counts(logs, days) == [
        (date(2024, 1, 1), 0),
        (date(2024, 1, 2), 2),
    ]


def test_average_time_between_feedings() -> None:
    logs = [
        make_log(1, time="12:00"),
        make_log(2, time="06:00"),
        make_log(3, time="09:00"),
    ]

    assert average_time_between_feedings(logs) == "3.0 hours"
    assert average_time_between_feedings(logs[:1]) is None


def test_average_time_spans_midnight() -> None:
    logs = [
        make_log(1, day=date(2024, 1, 1), time="22:00"),
        make_log(2, day=date(2024, 1, 2), time="01:30"),
    ]

    assert average_time_between_feedings(logs) == "3.5 hours"


def test_latest_feeding_orders_by_date_then_time() -> None:
    newest = make_log(2, day=date(2024, 1, 2), time="07:00")
    logs = [make_log(1, day=date(2024, 1, 1), time="23:00"), newest]

    assert latest_feeding(logs) == newest
    assert latest_feeding([]) is None


def test_filter_feeding_logs() -> None:
    logs = [
        make_log(1, day=date(2024, 1, 1), food_type="Formula"),
        make_log(2, day=date(2024, 1, 1), food_type="Puree"),
        make_log(3, day=date(2024, 1, 2), food_type="Puree"),
    ]

    assert [log.id for log in filter_feeding_logs(logs)] == [1, 2, 3]
    assert [log.id for log in filter_feeding_logs(logs, day=date(2024, 1, 1))] == [
        1,
        2,
    ]
    assert [
        log.id
        for log in filter_feeding_logs(logs, day=date(2024, 1, 1), food_type="Puree")
    ] == [2]


def test_schedule_and_note_by_age_group() -> None:
    newborn = feeding_schedule("0-6 months")
    infant = feeding_schedule("6-12 months")

    assert len(newborn) == 7
    assert newborn[0].title == "Morning Feeding"
    assert len(infant) == 6
    assert infant[0].description == "Breast milk or formula + infant cereal"
    assert feeding_schedule("12-24 months") == feeding_schedule("2+ years")
    assert feeding_schedule("2+ years")[0].time == "7:30 AM"
    assert nutritionist_note("0-6 months").startswith("Breast milk or formula")
    assert nutritionist_note("6-12 months").startswith("Continue breast milk")
    assert nutritionist_note("2+ years").startswith("Offer a wide variety")

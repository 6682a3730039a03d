"""Feeding statistics and age-based feeding guidance."""

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime

from baby_tracker.domain.dates import AGE_GROUP_INFANT, AGE_GROUP_NEWBORN
from baby_tracker.domain.models import FeedingLog

SECONDS_PER_HOUR = 3600


@dataclass(frozen=True)
class ScheduleEntry:
    """One slot of a daily feeding schedule."""

    time: str
    title: str
    description: str


_NEWBORN_SCHEDULE = (
    ScheduleEntry("6:00 AM", "Morning Feeding", "Breast milk or formula"),
    ScheduleEntry("9:00 AM", "Mid-morning Feeding", "Breast milk or formula"),
    ScheduleEntry("12:00 PM", "Noon Feeding", "Breast milk or formula"),
    ScheduleEntry("3:00 PM", "Afternoon Feeding", "Breast milk or formula"),
    ScheduleEntry("6:00 PM", "Evening Feeding", "Breast milk or formula"),
    ScheduleEntry("9:00 PM", "Night Feeding", "Breast milk or formula"),
    ScheduleEntry(
        "12:00 AM", "Midnight Feeding", "Breast milk or formula (if needed)"
    ),
)

_INFANT_SCHEDULE = (
    ScheduleEntry(
        "7:00 AM", "Breakfast", "Breast milk or formula + infant cereal"
    ),
    ScheduleEntry("10:00 AM", "Mid-morning Snack", "Fruit puree"),
    ScheduleEntry("1:00 PM", "Lunch", "Vegetable puree + protein"),
    ScheduleEntry("4:00 PM", "Afternoon Snack", "Yogurt or mashed fruit"),
    ScheduleEntry("7:00 PM", "Dinner", "Mixed vegetable and protein puree"),
    ScheduleEntry("9:30 PM", "Before Bed", "Breast milk or formula"),
)

_TODDLER_SCHEDULE = (
    ScheduleEntry("7:30 AM", "Breakfast", "Cereal with milk + fruit pieces"),
    ScheduleEntry("10:30 AM", "Morning Snack", "Cheese or yogurt + crackers"),
    ScheduleEntry("1:00 PM", "Lunch", "Protein + vegetables + grains"),
    ScheduleEntry("4:00 PM", "Afternoon Snack", "Fruit pieces + small sandwich"),
    ScheduleEntry("7:00 PM", "Dinner", "Protein + vegetables + grains"),
    ScheduleEntry("8:30 PM", "Before Bed", "Milk or formula (if needed)"),
)

_NEWBORN_NOTE = (
    "Breast milk or formula provides all the nutrition your baby needs at this "
    "stage. Solid foods should generally be introduced around 6 months when "
    "baby shows signs of readiness."
)
_INFANT_NOTE = (
    "Continue breast milk or formula as the primary source of nutrition, but "
    "begin introducing a variety of pureed foods. Start with single-ingredient "
    "foods and wait 3-5 days between new foods to watch for allergies."
)
_TODDLER_NOTE = (
    "Offer a wide variety of foods from all food groups. Focus on "
    "nutrient-dense options and limit added sugars and salt. Encourage "
    "self-feeding and development of fine motor skills."
)


def feeding_schedule(group: str) -> list[ScheduleEntry]:
    """Return the suggested daily schedule for an age group."""
    if group == AGE_GROUP_NEWBORN:
        return list(_NEWBORN_SCHEDULE)
    if group == AGE_GROUP_INFANT:
        return list(_INFANT_SCHEDULE)
    return list(_TODDLER_SCHEDULE)


def nutritionist_note(group: str) -> str:
    """Return the nutrition advice for an age group."""
    if group == AGE_GROUP_NEWBORN:
        return _NEWBORN_NOTE
    if group == AGE_GROUP_INFANT:
        return _INFANT_NOTE
    return _TODDLER_NOTE


def most_common_food(logs: list[FeedingLog]) -> str | None:
    """Return the most frequently logged food name.

    Ties go to the food that appears first in ``logs``.
    """
    if not logs:
        return None
    counts = Counter(log.food_name for log in logs)
    return counts.most_common(1)[0][0]


def feeding_count_for_day(logs: list[FeedingLog], day: date) -> int:
    """Count feedings logged on a specific day."""
    return sum(1 for log in logs if log.date == day)


def today_feeding_count(logs: list[FeedingLog], today: date) -> int:
    """Count feedings logged today."""
    return feeding_count_for_day(logs, today)


def daily_feeding_counts(
    logs: list[FeedingLog], days: list[date]
) -> list[tuple[date, int]]:
    """Return per-day feeding counts for the given days, in order."""
    return [(day, feeding_count_for_day(logs, day)) for day in days]


def average_time_between_feedings(logs: list[FeedingLog]) -> str | None:
    """Return the mean gap between consecutive feedings, e.g. '3.5 hours'."""
    if len(logs) < 2:  # noqa: PLR2004
        return None
    moments = sorted(_logged_at(log) for log in logs)
    gaps = [
        (later - earlier).total_seconds()
        for earlier, later in zip(moments, moments[1:], strict=False)
    ]
    hours = sum(gaps) / len(gaps) / SECONDS_PER_HOUR
    return f"{hours:.1f} hours"


def latest_feeding(logs: list[FeedingLog]) -> FeedingLog | None:
    """Return the most recent feeding by date and time."""
    if not logs:
        return None
    return max(logs, key=_logged_at)


def filter_feeding_logs(
    logs: list[FeedingLog],
    day: date | None = None,
    food_type: str | None = None,
) -> list[FeedingLog]:
    """Filter logs by exact day and food type, preserving order."""
    return [
        log
        for log in logs
        if (day is None or log.date == day)
        and (not food_type or log.food_type == food_type)
    ]


def _logged_at(log: FeedingLog) -> datetime:
    return datetime.combine(log.date, datetime.strptime(log.time, "%H:%M").time())

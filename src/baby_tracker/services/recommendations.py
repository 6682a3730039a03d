"""Age-based feeding recommendations."""

from dataclasses import dataclass
from datetime import date

from baby_tracker.domain.dates import age_group, baby_age, local_now
from baby_tracker.domain.feeding import (
    ScheduleEntry,
    feeding_schedule,
    nutritionist_note,
)
from baby_tracker.domain.foods import ALL_CATEGORIES, Food, filter_foods, get_food
from baby_tracker.domain.models import Baby


@dataclass(frozen=True)
class Recommendations:
    """Feeding guidance tailored to a baby's age."""

    baby_id: int
    age: str
    age_group: str
    schedule: list[ScheduleEntry]
    nutritionist_note: str


@dataclass
class RecommendationService:
    """Derives schedules and food suggestions from static tables."""

    timezone_name: str = "UTC"

    def for_baby(self, baby: Baby, today: date | None = None) -> Recommendations:
        """Return recommendations for a baby's current age group."""
        resolved_today = today or local_now(self.timezone_name).date()
        group = age_group(baby.birthday, resolved_today)
        return Recommendations(
            baby_id=baby.id,
            age=baby_age(baby.birthday, resolved_today),
            age_group=group,
            schedule=feeding_schedule(group),
            nutritionist_note=nutritionist_note(group),
        )

    def foods(self, category: str = ALL_CATEGORIES) -> list[Food]:
        """Return suggested foods, optionally limited to a category."""
        return filter_foods(category)

    def food(self, food_id: str) -> Food | None:
        """Return a suggested food by id."""
        return get_food(food_id)

"""Response models for the JSON API."""

from datetime import date

from pydantic import ConfigDict

from baby_tracker.domain.schemas import CamelModel


class ApiModel(CamelModel):
    """Response base serialized with camelCase keys."""

    model_config = ConfigDict(from_attributes=True)


class BabyResponse(ApiModel):
    id: int
    name: str
    birthday: date
    weight: str
    height: str
    feeding_type: str
    restrictions: list[str]
    user_id: int


class FeedingLogResponse(ApiModel):
    id: int
    date: date
    time: str
    food_type: str
    food_name: str
    amount: str
    notes: str | None
    baby_id: int


class GrowthRecordResponse(ApiModel):
    id: int
    date: date
    weight: str
    height: str
    notes: str | None
    baby_id: int


class MilestoneResponse(ApiModel):
    id: int
    name: str
    age_range: str
    description: str
    completed: bool
    completed_date: date | None
    baby_id: int


class DailyFeedingCountResponse(ApiModel):
    day: date
    label: str
    count: int


class FeedingSummaryResponse(ApiModel):
    """Feeding statistics shown on the feeding log page."""

    today_count: int
    most_common_food: str | None
    average_gap: str | None
    last_feeding: str | None
    last_seven_days: list[DailyFeedingCountResponse]


class ChartBarResponse(ApiModel):
    date: date
    label: str
    value: float
    percent: float


class ScheduleEntryResponse(ApiModel):
    time: str
    title: str
    description: str


class RecommendationsResponse(ApiModel):
    """Age-based feeding guidance for a baby."""

    baby_id: int
    age: str
    age_group: str
    schedule: list[ScheduleEntryResponse]
    nutritionist_note: str


class FoodResponse(ApiModel):
    id: str
    name: str
    description: str
    category: str
    age_range: str
    nutrients: list[str]
    image: str


class VocabularyResponse(ApiModel):
    """Suggested values for free-text form fields."""

    feeding_types: list[str]
    dietary_restrictions: list[str]
    amount_units: list[str]
    food_categories: list[str]

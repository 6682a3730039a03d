"""Domain models for the baby tracker."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class User:
    """Represents a household account."""

    id: int
    username: str
    password: str


@dataclass(frozen=True)
class Baby:
    """Represents a child's profile."""

    id: int
    name: str
    birthday: date
    weight: str
    height: str
    feeding_type: str
    restrictions: tuple[str, ...]
    user_id: int


@dataclass(frozen=True)
class FeedingLog:
    """A single feeding event."""

    id: int
    date: date
    time: str
    food_type: str
    food_name: str
    amount: str
    notes: str | None
    baby_id: int


@dataclass(frozen=True)
class GrowthRecord:
    """A weight and height measurement."""

    id: int
    date: date
    weight: str
    height: str
    notes: str | None
    baby_id: int


@dataclass(frozen=True)
class Milestone:
    """A developmental milestone tracked for a baby."""

    id: int
    name: str
    age_range: str
    description: str
    completed: bool
    completed_date: date | None
    baby_id: int

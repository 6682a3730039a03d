"""Validation schemas for incoming records."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DECIMAL_PATTERN = r"^\d+(\.\d+)?$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

FEEDING_TYPES = ("Breast Milk", "Formula", "Puree", "Solid Food")
DIETARY_RESTRICTIONS = ("Dairy", "Gluten", "Eggs", "Nuts", "Soy")
AMOUNT_UNITS = ("ml", "oz", "g", "tbsp")


class CamelModel(BaseModel):
    """Base model accepting camelCase keys as well as field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(CamelModel):
    """Payload for creating a user."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class BabyCreate(CamelModel):
    """Payload for creating a baby profile."""

    name: str = Field(min_length=1)
    birthday: date
    weight: str = Field(pattern=DECIMAL_PATTERN)
    height: str = Field(pattern=DECIMAL_PATTERN)
    feeding_type: str = Field(min_length=1)
    restrictions: tuple[str, ...] = ()
    user_id: int = Field(gt=0)

    @field_validator("restrictions")
    @classmethod
    def _collapse_duplicates(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))


class BabyUpdate(CamelModel):
    """Partial update of a baby profile."""

    name: str | None = Field(default=None, min_length=1)
    birthday: date | None = None
    weight: str | None = Field(default=None, pattern=DECIMAL_PATTERN)
    height: str | None = Field(default=None, pattern=DECIMAL_PATTERN)
    feeding_type: str | None = Field(default=None, min_length=1)
    restrictions: tuple[str, ...] | None = None

    @field_validator("restrictions")
    @classmethod
    def _collapse_duplicates(
        cls, value: tuple[str, ...] | None
    ) -> tuple[str, ...] | None:
        if value is None:
            return None
        return tuple(dict.fromkeys(value))

    def changes(self) -> dict[str, object]:
        """Return only the fields supplied by the caller."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class FeedingLogCreate(CamelModel):
    """Payload for logging a feeding."""

    date: date
    time: str = Field(pattern=TIME_PATTERN)
    food_type: str = Field(min_length=1)
    food_name: str = Field(min_length=1)
    amount: str = Field(min_length=1)
    notes: str | None = None
    baby_id: int = Field(gt=0)


class GrowthRecordCreate(CamelModel):
    """Payload for recording a growth measurement."""

    date: date
    weight: str = Field(pattern=DECIMAL_PATTERN)
    height: str = Field(pattern=DECIMAL_PATTERN)
    notes: str | None = None
    baby_id: int = Field(gt=0)


class MilestoneCreate(CamelModel):
    """Payload for creating a milestone."""

    name: str = Field(min_length=1)
    age_range: str = Field(min_length=1)
    description: str
    completed: bool = False
    completed_date: date | None = None
    baby_id: int = Field(gt=0)


class MilestoneUpdate(CamelModel):
    """Partial update of a milestone."""

    completed: bool | None = None
    completed_date: date | None = None

    def changes(self) -> dict[str, object]:
        """Return the fields supplied with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)

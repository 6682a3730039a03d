"""Shared test fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from baby_tracker.adapters.memory_storage import InMemoryStorage
from baby_tracker.api.app import create_app
from baby_tracker.config import Settings
from baby_tracker.containers import AppContainer, build_container
from baby_tracker.domain.models import Baby, User
from baby_tracker.domain.schemas import (
    BabyCreate,
    FeedingLogCreate,
    GrowthRecordCreate,
    UserCreate,
)


def baby_payload(**overrides: object) -> dict[str, object]:
    """Return a valid baby profile body in wire format."""
    payload: dict[str, object] = {
        "name": "Mia",
        "birthday": "2024-01-15",
        "weight": "7.5",
        "height": "65",
        "feedingType": "Breast Milk",
        "restrictions": ["Dairy"],
    }
    payload.update(overrides)
    return payload


def feeding_payload(**overrides: object) -> dict[str, object]:
    """Return a valid feeding log body in wire format."""
    payload: dict[str, object] = {
        "date": "2024-06-01",
        "time": "08:30",
        "foodType": "Puree",
        "foodName": "Apple Sauce",
        "amount": "60 ml",
    }
    payload.update(overrides)
    return payload


def new_baby(user_id: int, **overrides: object) -> BabyCreate:
    return BabyCreate.model_validate(baby_payload(userId=user_id, **overrides))


def new_feeding(baby_id: int, **overrides: object) -> FeedingLogCreate:
    return FeedingLogCreate.model_validate(feeding_payload(babyId=baby_id, **overrides))


def new_growth(baby_id: int, weight: str = "8.2", height: str = "68") -> GrowthRecordCreate:
    return GrowthRecordCreate(
        date=date(2024, 6, 1), weight=weight, height=height, baby_id=baby_id
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        storage_backend="memory",
        timezone="UTC",
        environment="test",
    )


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def parent(storage: InMemoryStorage) -> User:
    return storage.create_user(UserCreate(username="parent", password="secret"))


@pytest.fixture
def baby(storage: InMemoryStorage, parent: User) -> Baby:
    return storage.create_baby(new_baby(parent.id))


@pytest.fixture
def container(settings: Settings, storage: InMemoryStorage) -> AppContainer:
    return build_container(settings, storage)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))

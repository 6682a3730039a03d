"""Dependency container wiring for the application."""

from dataclasses import dataclass
from typing import Protocol

from supabase import create_client

from baby_tracker.adapters.memory_storage import InMemoryStorage
from baby_tracker.adapters.supabase_storage import SupabaseStorage
from baby_tracker.config import Settings, parse_storage_backend
from baby_tracker.domain.models import User
from baby_tracker.services.babies import BabyRepository, BabyService
from baby_tracker.services.feeding import FeedingLogRepository, FeedingLogService
from baby_tracker.services.growth import GrowthRecordRepository, GrowthService
from baby_tracker.services.milestones import MilestoneRepository, MilestoneService
from baby_tracker.services.recommendations import RecommendationService
from baby_tracker.services.users import UserRepository, UserService


class TrackerStorage(
    UserRepository,
    BabyRepository,
    FeedingLogRepository,
    GrowthRecordRepository,
    MilestoneRepository,
    Protocol,
):
    """A single store implementing every repository port."""


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: TrackerStorage
    household_user: User
    user_service: UserService
    baby_service: BabyService
    feeding_log_service: FeedingLogService
    growth_service: GrowthService
    milestone_service: MilestoneService
    recommendation_service: RecommendationService


def build_storage(settings: Settings) -> TrackerStorage:
    """Create the storage engine selected by settings."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "Supabase storage requires SUPABASE_URL and SUPABASE_SERVICE_KEY"
            )
        return SupabaseStorage(
            create_client(settings.supabase_url, settings.supabase_service_key)
        )
    return InMemoryStorage()


def build_container(
    settings: Settings | None = None, storage: TrackerStorage | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_storage = storage or build_storage(resolved_settings)
    timezone_name = resolved_settings.timezone
    user_service = UserService(resolved_storage)
    household_user = user_service.ensure_user(
        resolved_settings.household_username, resolved_settings.household_password
    )
    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        household_user=household_user,
        user_service=user_service,
        baby_service=BabyService(resolved_storage),
        feeding_log_service=FeedingLogService(resolved_storage, timezone_name),
        growth_service=GrowthService(resolved_storage),
        milestone_service=MilestoneService(resolved_storage, timezone_name),
        recommendation_service=RecommendationService(timezone_name),
    )

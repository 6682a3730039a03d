"""Feeding log service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from baby_tracker.domain.dates import (
    format_date,
    format_day_short,
    format_time,
    last_seven_days,
    local_now,
)
from baby_tracker.domain.feeding import (
    average_time_between_feedings,
    daily_feeding_counts,
    filter_feeding_logs,
    latest_feeding,
    most_common_food,
    today_feeding_count,
)
from baby_tracker.domain.models import FeedingLog
from baby_tracker.domain.schemas import FeedingLogCreate

logger = logging.getLogger(__name__)


class FeedingLogRepository(Protocol):
    """Persistence interface for feeding logs."""

    def get_feeding_log(self, log_id: int) -> FeedingLog | None:
        """Return a feeding log by id, if present."""

    def list_feeding_logs_by_baby(self, baby_id: int) -> list[FeedingLog]:
        """Return a baby's feeding logs in creation order."""

    def create_feeding_log(self, data: FeedingLogCreate) -> FeedingLog:
        """Create and return a feeding log."""

    def delete_feeding_log(self, log_id: int) -> bool:
        """Delete a feeding log; return whether one was removed."""


@dataclass(frozen=True)
class DailyFeedingCount:
    """Number of feedings on one day."""

    day: date
    label: str
    count: int


@dataclass(frozen=True)
class FeedingSummary:
    """Derived feeding statistics for a baby."""

    today_count: int
    most_common_food: str | None
    average_gap: str | None
    last_feeding: str | None
    last_seven_days: list[DailyFeedingCount]


@dataclass
class FeedingLogService:
    """Application service for feeding logs."""

    repository: FeedingLogRepository
    timezone_name: str = "UTC"

    def list_logs(
        self,
        baby_id: int,
        day: date | None = None,
        food_type: str | None = None,
    ) -> list[FeedingLog]:
        """Return a baby's feeding logs, optionally filtered."""
        logs = self.repository.list_feeding_logs_by_baby(baby_id)
        return filter_feeding_logs(logs, day=day, food_type=food_type)

    def get_log(self, log_id: int) -> FeedingLog | None:
        """Return a feeding log by id."""
        return self.repository.get_feeding_log(log_id)

    def log_feeding(self, data: FeedingLogCreate) -> FeedingLog:
        """Persist a feeding event."""
        log = self.repository.create_feeding_log(data)
        logger.info(
            "Logged feeding", extra={"feeding_log_id": log.id, "baby_id": log.baby_id}
        )
        return log

    def delete_log(self, log_id: int) -> bool:
        """Delete a feeding log."""
        deleted = self.repository.delete_feeding_log(log_id)
        if deleted:
            logger.info("Deleted feeding log", extra={"feeding_log_id": log_id})
        return deleted

    def summarize(self, baby_id: int, today: date | None = None) -> FeedingSummary:
        """Compute feeding statistics for a baby."""
        resolved_today = today or local_now(self.timezone_name).date()
        logs = self.repository.list_feeding_logs_by_baby(baby_id)
        latest = latest_feeding(logs)
        daily = daily_feeding_counts(logs, last_seven_days(resolved_today))
        return FeedingSummary(
            today_count=today_feeding_count(logs, resolved_today),
            most_common_food=most_common_food(logs),
            average_gap=average_time_between_feedings(logs),
            last_feeding=(
                f"{format_date(latest.date)} at {format_time(latest.time)}"
                if latest
                else None
            ),
            last_seven_days=[
                DailyFeedingCount(day=day, label=format_day_short(day), count=count)
                for day, count in daily
            ],
        )

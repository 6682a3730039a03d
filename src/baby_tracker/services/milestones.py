"""Milestone tracking service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from baby_tracker.domain.dates import local_now
from baby_tracker.domain.models import Milestone
from baby_tracker.domain.schemas import MilestoneCreate, MilestoneUpdate


class MilestoneRepository(Protocol):
    """Persistence interface for milestones."""

    def get_milestone(self, milestone_id: int) -> Milestone | None:
        """Return a milestone by id, if present."""

    def list_milestones_by_baby(self, baby_id: int) -> list[Milestone]:
        """Return a baby's milestones in creation order."""

    def create_milestone(self, data: MilestoneCreate) -> Milestone:
        """Create and return a milestone."""

    def update_milestone(
        self, milestone_id: int, changes: dict[str, object]
    ) -> Milestone | None:
        """Merge changes into a milestone and return it, if present."""


@dataclass
class MilestoneService:
    """Application service for milestones."""

    repository: MilestoneRepository
    timezone_name: str = "UTC"

    def list_milestones(self, baby_id: int) -> list[Milestone]:
        """Return a baby's milestones."""
        return self.repository.list_milestones_by_baby(baby_id)

    def update_milestone(
        self, milestone_id: int, update: MilestoneUpdate, today: date | None = None
    ) -> Milestone | None:
        """Toggle completion, keeping ``completed`` and its date in step.

        A date on its own marks the milestone complete. Completing an open
        milestone without a date stamps today; re-completing keeps the date
        already recorded. Reopening clears the date.
        """
        current = self.repository.get_milestone(milestone_id)
        if current is None:
            return None
        changes = update.changes()
        supplied_date = changes.get("completed_date")
        completed = changes.get("completed")
        if completed is None:
            completed = current.completed or supplied_date is not None
        if not completed:
            return self.repository.update_milestone(
                milestone_id, {"completed": False, "completed_date": None}
            )
        completed_date = (
            supplied_date
            or current.completed_date
            or today
            or local_now(self.timezone_name).date()
        )
        return self.repository.update_milestone(
            milestone_id, {"completed": True, "completed_date": completed_date}
        )

"""Baby profile service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from baby_tracker.domain.models import Baby
from baby_tracker.domain.schemas import BabyCreate, BabyUpdate

logger = logging.getLogger(__name__)


class BabyRepository(Protocol):
    """Persistence interface for baby profiles."""

    def get_baby(self, baby_id: int) -> Baby | None:
        """Return a baby by id, if present."""

    def list_babies_by_user(self, user_id: int) -> list[Baby]:
        """Return a user's babies in creation order."""

    def create_baby(self, data: BabyCreate) -> Baby:
        """Create a baby together with its default milestones."""

    def update_baby(self, baby_id: int, changes: dict[str, object]) -> Baby | None:
        """Merge changes into a baby and return it, if present."""


@dataclass
class BabyService:
    """Application service for baby profiles."""

    repository: BabyRepository

    def list_babies(self, user_id: int) -> list[Baby]:
        """Return the babies belonging to a user."""
        return self.repository.list_babies_by_user(user_id)

    def get_baby(self, baby_id: int) -> Baby | None:
        """Return a baby by id."""
        return self.repository.get_baby(baby_id)

    def create_baby(self, data: BabyCreate) -> Baby:
        """Create a baby profile."""
        baby = self.repository.create_baby(data)
        logger.info(
            "Created baby profile", extra={"baby_id": baby.id, "user_id": baby.user_id}
        )
        return baby

    def update_baby(self, baby_id: int, update: BabyUpdate) -> Baby | None:
        """Apply a partial profile update."""
        return self.repository.update_baby(baby_id, update.changes())

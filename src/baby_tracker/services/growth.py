"""Growth tracking service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from baby_tracker.domain.growth import ChartBar, growth_chart
from baby_tracker.domain.models import GrowthRecord
from baby_tracker.domain.schemas import GrowthRecordCreate

logger = logging.getLogger(__name__)


class GrowthRecordRepository(Protocol):
    """Persistence interface for growth records."""

    def get_growth_record(self, record_id: int) -> GrowthRecord | None:
        """Return a growth record by id, if present."""

    def list_growth_records_by_baby(self, baby_id: int) -> list[GrowthRecord]:
        """Return a baby's growth records in creation order."""

    def create_growth_record(self, data: GrowthRecordCreate) -> GrowthRecord:
        """Create a record and copy its weight and height onto the baby."""

    def delete_growth_record(self, record_id: int) -> bool:
        """Delete a growth record; return whether one was removed."""


@dataclass
class GrowthService:
    """Application service for growth measurements."""

    repository: GrowthRecordRepository

    def list_records(self, baby_id: int) -> list[GrowthRecord]:
        """Return a baby's growth records."""
        return self.repository.list_growth_records_by_baby(baby_id)

    def record_growth(self, data: GrowthRecordCreate) -> GrowthRecord:
        """Persist a measurement and refresh the baby's current size."""
        record = self.repository.create_growth_record(data)
        logger.info(
            "Recorded growth",
            extra={"growth_record_id": record.id, "baby_id": record.baby_id},
        )
        return record

    def delete_record(self, record_id: int) -> bool:
        """Delete a growth record."""
        deleted = self.repository.delete_growth_record(record_id)
        if deleted:
            logger.info("Deleted growth record", extra={"growth_record_id": record_id})
        return deleted

    def chart(self, baby_id: int, metric: str) -> list[ChartBar]:
        """Return chart bars for a baby's weight or height history."""
        return growth_chart(self.list_records(baby_id), metric)

"""Supabase-backed storage engine."""

import logging
from dataclasses import dataclass
from datetime import date

from supabase import Client

from baby_tracker.domain.errors import ParentNotFoundError, UsernameTakenError
from baby_tracker.domain.milestones import default_milestones
from baby_tracker.domain.models import Baby, FeedingLog, GrowthRecord, Milestone, User
from baby_tracker.domain.schemas import (
    BabyCreate,
    FeedingLogCreate,
    GrowthRecordCreate,
    MilestoneCreate,
    UserCreate,
)
from baby_tracker.services.babies import BabyRepository
from baby_tracker.services.feeding import FeedingLogRepository
from baby_tracker.services.growth import GrowthRecordRepository
from baby_tracker.services.milestones import MilestoneRepository
from baby_tracker.services.users import UserRepository

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, username, password"
BABY_COLUMNS = "id, name, birthday, weight, height, feeding_type, restrictions, user_id"
FEEDING_LOG_COLUMNS = (
    "id, date, time, food_type, food_name, amount, notes, baby_id"
)
GROWTH_RECORD_COLUMNS = "id, date, weight, height, notes, baby_id"
MILESTONE_COLUMNS = (
    "id, name, age_range, description, completed, completed_date, baby_id"
)


@dataclass
class SupabaseStorage(
    UserRepository,
    BabyRepository,
    FeedingLogRepository,
    GrowthRecordRepository,
    MilestoneRepository,
):
    """Supabase implementation of the tracker storage engine.

    Two-step flows undo their first insert when the second step fails.
    """

    client: Client

    def get_user(self, user_id: int) -> User | None:
        """Return a user by id."""
        row = self._fetch_one("users", USER_COLUMNS, "id", user_id)
        return _parse_user(row) if row else None

    def get_user_by_username(self, username: str) -> User | None:
        """Return a user by username."""
        row = self._fetch_one("users", USER_COLUMNS, "username", username)
        return _parse_user(row) if row else None

    def create_user(self, data: UserCreate) -> User:
        """Insert a user row; usernames are unique."""
        if self.get_user_by_username(data.username) is not None:
            raise UsernameTakenError(data.username)
        row = self._insert_one("users", data.model_dump(mode="json"))
        return _parse_user(row)

    def get_baby(self, baby_id: int) -> Baby | None:
        """Return a baby by id."""
        row = self._fetch_one("babies", BABY_COLUMNS, "id", baby_id)
        return _parse_baby(row) if row else None

    def list_babies_by_user(self, user_id: int) -> list[Baby]:
        """Return babies for a user ordered by id."""
        rows = self._fetch_many("babies", BABY_COLUMNS, "user_id", user_id)
        return [_parse_baby(row) for row in rows]

    def create_baby(self, data: BabyCreate) -> Baby:
        """Insert a baby and its default milestones."""
        if self.get_user(data.user_id) is None:
            raise ParentNotFoundError("User", data.user_id)
        baby = _parse_baby(self._insert_one("babies", data.model_dump(mode="json")))
        try:
            response = (
                self.client.table("milestones")
                .insert(
                    [
                        milestone.model_dump(mode="json")
                        for milestone in default_milestones(baby.id)
                    ]
                )
                .execute()
            )
            if not response.data:
                raise RuntimeError("Failed to create default milestones")
        except Exception:
            logger.exception(
                "Removing baby after milestone creation failed",
                extra={"baby_id": baby.id},
            )
            self.client.table("babies").delete().eq("id", baby.id).execute()
            raise
        return baby

    def update_baby(self, baby_id: int, changes: dict[str, object]) -> Baby | None:
        """Update baby columns and return the merged row."""
        if not changes:
            return self.get_baby(baby_id)
        response = (
            self.client.table("babies")
            .update(_serialize(changes))
            .eq("id", baby_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_baby(response.data[0])

    def get_feeding_log(self, log_id: int) -> FeedingLog | None:
        """Return a feeding log by id."""
        row = self._fetch_one("feeding_logs", FEEDING_LOG_COLUMNS, "id", log_id)
        return _parse_feeding_log(row) if row else None

    def list_feeding_logs_by_baby(self, baby_id: int) -> list[FeedingLog]:
        """Return feeding logs for a baby ordered by id."""
        rows = self._fetch_many("feeding_logs", FEEDING_LOG_COLUMNS, "baby_id", baby_id)
        return [_parse_feeding_log(row) for row in rows]

    def create_feeding_log(self, data: FeedingLogCreate) -> FeedingLog:
        """Insert a feeding log for an existing baby."""
        self._require_baby(data.baby_id)
        row = self._insert_one("feeding_logs", data.model_dump(mode="json"))
        return _parse_feeding_log(row)

    def delete_feeding_log(self, log_id: int) -> bool:
        """Delete a feeding log row."""
        return self._delete("feeding_logs", log_id)

    def get_growth_record(self, record_id: int) -> GrowthRecord | None:
        """Return a growth record by id."""
        row = self._fetch_one("growth_records", GROWTH_RECORD_COLUMNS, "id", record_id)
        return _parse_growth_record(row) if row else None

    def list_growth_records_by_baby(self, baby_id: int) -> list[GrowthRecord]:
        """Return growth records for a baby ordered by id."""
        rows = self._fetch_many(
            "growth_records", GROWTH_RECORD_COLUMNS, "baby_id", baby_id
        )
        return [_parse_growth_record(row) for row in rows]

    def create_growth_record(self, data: GrowthRecordCreate) -> GrowthRecord:
        """Insert a growth record and copy its size onto the baby."""
        self._require_baby(data.baby_id)
        record = _parse_growth_record(
            self._insert_one("growth_records", data.model_dump(mode="json"))
        )
        try:
            updated = self.update_baby(
                record.baby_id, {"weight": record.weight, "height": record.height}
            )
            if updated is None:
                raise RuntimeError("Failed to update baby measurements")
        except Exception:
            logger.exception(
                "Removing growth record after baby update failed",
                extra={"growth_record_id": record.id},
            )
            self._delete("growth_records", record.id)
            raise
        return record

    def delete_growth_record(self, record_id: int) -> bool:
        """Delete a growth record row."""
        return self._delete("growth_records", record_id)

    def get_milestone(self, milestone_id: int) -> Milestone | None:
        """Return a milestone by id."""
        row = self._fetch_one("milestones", MILESTONE_COLUMNS, "id", milestone_id)
        return _parse_milestone(row) if row else None

    def list_milestones_by_baby(self, baby_id: int) -> list[Milestone]:
        """Return milestones for a baby ordered by id."""
        rows = self._fetch_many("milestones", MILESTONE_COLUMNS, "baby_id", baby_id)
        return [_parse_milestone(row) for row in rows]

    def create_milestone(self, data: MilestoneCreate) -> Milestone:
        """Insert a milestone for an existing baby."""
        self._require_baby(data.baby_id)
        row = self._insert_one("milestones", data.model_dump(mode="json"))
        return _parse_milestone(row)

    def update_milestone(
        self, milestone_id: int, changes: dict[str, object]
    ) -> Milestone | None:
        """Update milestone columns and return the merged row."""
        if not changes:
            return self.get_milestone(milestone_id)
        response = (
            self.client.table("milestones")
            .update(_serialize(changes))
            .eq("id", milestone_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_milestone(response.data[0])

    def _require_baby(self, baby_id: int) -> None:
        if self.get_baby(baby_id) is None:
            raise ParentNotFoundError("Baby", baby_id)

    def _fetch_one(
        self, table: str, columns: str, column: str, value: object
    ) -> dict[str, object] | None:
        response = (
            self.client.table(table)
            .select(columns)
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]

    def _fetch_many(
        self, table: str, columns: str, column: str, value: object
    ) -> list[dict[str, object]]:
        response = (
            self.client.table(table)
            .select(columns)
            .eq(column, value)
            .order("id", desc=False)
            .execute()
        )
        return response.data or []

    def _insert_one(self, table: str, payload: dict[str, object]) -> dict[str, object]:
        response = self.client.table(table).insert(payload).execute()
        if not response.data:
            raise RuntimeError(f"Failed to insert into {table}")
        return response.data[0]

    def _delete(self, table: str, record_id: int) -> bool:
        response = self.client.table(table).delete().eq("id", record_id).execute()
        return bool(response.data)


def _serialize(changes: dict[str, object]) -> dict[str, object]:
    return {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in changes.items()
    }


def _optional_date(value: object) -> date | None:
    return date.fromisoformat(str(value)) if value else None


def _parse_user(row: dict[str, object]) -> User:
    return User(
        id=int(row["id"]),
        username=str(row["username"]),
        password=str(row["password"]),
    )


def _parse_baby(row: dict[str, object]) -> Baby:
    return Baby(
        id=int(row["id"]),
        name=str(row["name"]),
        birthday=date.fromisoformat(str(row["birthday"])),
        weight=str(row["weight"]),
        height=str(row["height"]),
        feeding_type=str(row["feeding_type"]),
        restrictions=tuple(row.get("restrictions") or ()),
        user_id=int(row["user_id"]),
    )


def _parse_feeding_log(row: dict[str, object]) -> FeedingLog:
    return FeedingLog(
        id=int(row["id"]),
        date=date.fromisoformat(str(row["date"])),
        time=str(row["time"]),
        food_type=str(row["food_type"]),
        food_name=str(row["food_name"]),
        amount=str(row["amount"]),
        notes=row.get("notes"),
        baby_id=int(row["baby_id"]),
    )


def _parse_growth_record(row: dict[str, object]) -> GrowthRecord:
    return GrowthRecord(
        id=int(row["id"]),
        date=date.fromisoformat(str(row["date"])),
        weight=str(row["weight"]),
        height=str(row["height"]),
        notes=row.get("notes"),
        baby_id=int(row["baby_id"]),
    )


def _parse_milestone(row: dict[str, object]) -> Milestone:
    return Milestone(
        id=int(row["id"]),
        name=str(row["name"]),
        age_range=str(row["age_range"]),
        description=str(row["description"]),
        completed=bool(row.get("completed") or False),
        completed_date=_optional_date(row.get("completed_date")),
        baby_id=int(row["baby_id"]),
    )

"""In-memory storage engine for all tracker records."""

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

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

RecordT = TypeVar("RecordT")


@dataclass
class _Collection(Generic[RecordT]):
    """Records of one type keyed by id, with a monotonic id counter."""

    rows: dict[int, RecordT] = field(default_factory=dict)
    next_id: int = 1

    def insert(self, build: Callable[[int], RecordT]) -> RecordT:
        record_id = self.next_id
        record = build(record_id)
        self.rows[record_id] = record
        self.next_id = record_id + 1
        return record

    def snapshot(self) -> tuple[dict[int, RecordT], int]:
        return dict(self.rows), self.next_id

    def restore(self, snapshot: tuple[dict[int, RecordT], int]) -> None:
        self.rows, self.next_id = dict(snapshot[0]), snapshot[1]


class InMemoryStorage(
    UserRepository,
    BabyRepository,
    FeedingLogRepository,
    GrowthRecordRepository,
    MilestoneRepository,
):
    """Process-lifetime store holding one collection per record type.

    Every operation runs under a single re-entrant lock. Baby creation (with
    its default milestones) and growth record creation (with the baby size
    refresh) either fully apply or leave the store untouched.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: _Collection[User] = _Collection()
        self._babies: _Collection[Baby] = _Collection()
        self._feeding_logs: _Collection[FeedingLog] = _Collection()
        self._growth_records: _Collection[GrowthRecord] = _Collection()
        self._milestones: _Collection[Milestone] = _Collection()

    # Users

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.rows.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            for user in self._users.rows.values():
                if user.username == username:
                    return user
            return None

    def create_user(self, data: UserCreate) -> User:
        with self._lock:
            if self.get_user_by_username(data.username) is not None:
                raise UsernameTakenError(data.username)
            payload = data.model_dump()
            return self._users.insert(lambda user_id: User(id=user_id, **payload))

    # Babies

    def get_baby(self, baby_id: int) -> Baby | None:
        with self._lock:
            return self._babies.rows.get(baby_id)

    def list_babies_by_user(self, user_id: int) -> list[Baby]:
        with self._lock:
            return [baby for baby in self._babies.rows.values() if baby.user_id == user_id]

    def create_baby(self, data: BabyCreate) -> Baby:
        with self._lock, self._atomic(self._babies, self._milestones):
            if data.user_id not in self._users.rows:
                raise ParentNotFoundError("User", data.user_id)
            payload = data.model_dump()
            baby = self._babies.insert(lambda baby_id: Baby(id=baby_id, **payload))
            for milestone in default_milestones(baby.id):
                self.create_milestone(milestone)
            return baby

    def update_baby(self, baby_id: int, changes: dict[str, object]) -> Baby | None:
        with self._lock:
            baby = self._babies.rows.get(baby_id)
            if baby is None:
                return None
            if "restrictions" in changes:
                changes = {**changes, "restrictions": tuple(changes["restrictions"])}
            updated = replace(baby, **changes)
            self._babies.rows[baby_id] = updated
            return updated

    # Feeding logs

    def get_feeding_log(self, log_id: int) -> FeedingLog | None:
        with self._lock:
            return self._feeding_logs.rows.get(log_id)

    def list_feeding_logs_by_baby(self, baby_id: int) -> list[FeedingLog]:
        with self._lock:
            return [
                log for log in self._feeding_logs.rows.values() if log.baby_id == baby_id
            ]

    def create_feeding_log(self, data: FeedingLogCreate) -> FeedingLog:
        with self._lock:
            self._require_baby(data.baby_id)
            payload = data.model_dump()
            return self._feeding_logs.insert(
                lambda log_id: FeedingLog(id=log_id, **payload)
            )

    def delete_feeding_log(self, log_id: int) -> bool:
        with self._lock:
            return self._feeding_logs.rows.pop(log_id, None) is not None

    # Growth records

    def get_growth_record(self, record_id: int) -> GrowthRecord | None:
        with self._lock:
            return self._growth_records.rows.get(record_id)

    def list_growth_records_by_baby(self, baby_id: int) -> list[GrowthRecord]:
        with self._lock:
            return [
                record
                for record in self._growth_records.rows.values()
                if record.baby_id == baby_id
            ]

    def create_growth_record(self, data: GrowthRecordCreate) -> GrowthRecord:
        with self._lock, self._atomic(self._growth_records, self._babies):
            self._require_baby(data.baby_id)
            payload = data.model_dump()
            record = self._growth_records.insert(
                lambda record_id: GrowthRecord(id=record_id, **payload)
            )
            self.update_baby(
                record.baby_id, {"weight": record.weight, "height": record.height}
            )
            return record

    def delete_growth_record(self, record_id: int) -> bool:
        with self._lock:
            return self._growth_records.rows.pop(record_id, None) is not None

    # Milestones

    def get_milestone(self, milestone_id: int) -> Milestone | None:
        with self._lock:
            return self._milestones.rows.get(milestone_id)

    def list_milestones_by_baby(self, baby_id: int) -> list[Milestone]:
        with self._lock:
            return [
                milestone
                for milestone in self._milestones.rows.values()
                if milestone.baby_id == baby_id
            ]

    def create_milestone(self, data: MilestoneCreate) -> Milestone:
        with self._lock:
            self._require_baby(data.baby_id)
            payload = data.model_dump()
            return self._milestones.insert(
                lambda milestone_id: Milestone(id=milestone_id, **payload)
            )

    def update_milestone(
        self, milestone_id: int, changes: dict[str, object]
    ) -> Milestone | None:
        with self._lock:
            milestone = self._milestones.rows.get(milestone_id)
            if milestone is None:
                return None
            updated = replace(milestone, **changes)
            self._milestones.rows[milestone_id] = updated
            return updated

    def _require_baby(self, baby_id: int) -> Baby:
        baby = self._babies.rows.get(baby_id)
        if baby is None:
            raise ParentNotFoundError("Baby", baby_id)
        return baby

    @contextmanager
    def _atomic(self, *collections: _Collection) -> Iterator[None]:
        snapshots = [collection.snapshot() for collection in collections]
        try:
            yield
        except Exception:
            for collection, snapshot in zip(collections, snapshots, strict=True):
                collection.restore(snapshot)
            raise

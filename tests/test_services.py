"""Tests for the application services."""

from datetime import date

import pytest

from baby_tracker.adapters.memory_storage import InMemoryStorage
from baby_tracker.domain.errors import UsernameTakenError
from baby_tracker.domain.models import Baby
from baby_tracker.domain.schemas import BabyUpdate, MilestoneUpdate
from baby_tracker.services.babies import BabyService
from baby_tracker.services.feeding import FeedingLogService
from baby_tracker.services.growth import GrowthService
from baby_tracker.services.milestones import MilestoneService
from baby_tracker.services.recommendations import RecommendationService
from baby_tracker.services.users import UserService
from tests.conftest import new_feeding, new_growth


def test_ensure_user_creates_then_reuses(storage: InMemoryStorage) -> None:
    service = UserService(storage)

    created = service.ensure_user("parent", "secret")
    again = service.ensure_user("parent", "different")

    assert again == created
    assert service.get_user(created.id) == created


def test_register_rejects_taken_username(storage: InMemoryStorage) -> None:
    service = UserService(storage)
    service.register("parent", "secret")

    with pytest.raises(UsernameTakenError):
        service.register("parent", "secret")


def test_update_baby_ignores_omitted_fields(
    storage: InMemoryStorage, baby: Baby
) -> None:
    service = BabyService(storage)

    updated = service.update_baby(
        baby.id, BabyUpdate.model_validate({"feedingType": "Formula", "name": None})
    )

    assert updated is not None
    assert updated.feeding_type == "Formula"
    assert updated.name == baby.name
    assert service.list_babies(baby.user_id) == [updated]


def test_list_logs_filters_by_day_and_type(
    storage: InMemoryStorage, baby: Baby
) -> None:
    service = FeedingLogService(storage)
    service.log_feeding(new_feeding(baby.id, foodType="Formula"))
    kept = service.log_feeding(new_feeding(baby.id))
    service.log_feeding(new_feeding(baby.id, date="2024-06-02"))

    logs = service.list_logs(baby.id, day=date(2024, 6, 1), food_type="Puree")

    assert logs == [kept]


def test_summarize_feeding_logs(storage: InMemoryStorage, baby: Baby) -> None:
    service = FeedingLogService(storage)
    service.log_feeding(new_feeding(baby.id, date="2024-05-31", time="23:30"))
    service.log_feeding(new_feeding(baby.id, time="08:30"))
    service.log_feeding(new_feeding(baby.id, time="11:30", foodName="Pear"))

    summary = service.summarize(baby.id, today=date(2024, 6, 1))

    assert summary.today_count == 2
    assert summary.most_common_food == "Apple Sauce"
    assert summary.average_gap == "6.0 hours"
    assert summary.last_feeding == "Jun 1, 2024 at 11:30 AM"
    assert [entry.label for entry in summary.last_seven_days] == [
        "5/26",
        "5/27",
        "5/28",
        "5/29",
        "5/30",
        "5/31",
        "6/1",
    ]
    assert [entry.count for entry in summary.last_seven_days] == [0, 0, 0, 0, 0, 1, 2]


def test_summarize_without_logs(storage: InMemoryStorage, baby: Baby) -> None:
    summary = FeedingLogService(storage).summarize(baby.id, today=date(2024, 6, 1))

    assert summary.today_count == 0
    assert summary.most_common_food is None
    assert summary.average_gap is None
    assert summary.last_feeding is None
    assert len(summary.last_seven_days) == 7


def test_delete_log_reports_outcome(storage: InMemoryStorage, baby: Baby) -> None:
    service = FeedingLogService(storage)
    log = service.log_feeding(new_feeding(baby.id))

    assert service.delete_log(log.id) is True
    assert service.delete_log(log.id) is False
    assert service.get_log(log.id) is None


def test_growth_service_chart_follows_records(
    storage: InMemoryStorage, baby: Baby
) -> None:
    service = GrowthService(storage)
    service.record_growth(new_growth(baby.id, weight="4", height="60"))
    latest = service.record_growth(new_growth(baby.id, weight="8", height="66"))

    bars = service.chart(baby.id, "weight")

    assert [bar.percent for bar in bars] == [50.0, 100.0]
    assert storage.get_baby(baby.id).weight == "8"  # type: ignore[union-attr]
    assert service.delete_record(latest.id) is True
    assert [record.weight for record in service.list_records(baby.id)] == ["4"]


def test_completing_milestone_stamps_today(
    storage: InMemoryStorage, baby: Baby
) -> None:
    service = MilestoneService(storage)
    milestone = service.list_milestones(baby.id)[0]

    updated = service.update_milestone(
        milestone.id, MilestoneUpdate(completed=True), today=date(2024, 6, 1)
    )

    assert updated is not None
    assert updated.completed is True
    assert updated.completed_date == date(2024, 6, 1)


def test_completing_milestone_keeps_given_date(
    storage: InMemoryStorage, baby: Baby
) -> None:
    service = MilestoneService(storage)
    milestone = service.list_milestones(baby.id)[1]

    updated = service.update_milestone(
        milestone.id,
        MilestoneUpdate.model_validate({"completed": True, "completedDate": "2024-05-20"}),
        today=date(2024, 6, 1),
    )

    assert updated is not None
    assert updated.completed_date == date(2024, 5, 20)


def test_reopening_milestone_clears_date(storage: InMemoryStorage, baby: Baby) -> None:
    service = MilestoneService(storage)
    milestone = service.list_milestones(baby.id)[0]
    service.update_milestone(
        milestone.id, MilestoneUpdate(completed=True), today=date(2024, 6, 1)
    )

    reopened = service.update_milestone(milestone.id, MilestoneUpdate(completed=False))

    assert reopened is not None
    assert reopened.completed is False
    assert reopened.completed_date is None


def test_update_unknown_milestone(storage: InMemoryStorage) -> None:
    service = MilestoneService(storage)

    assert service.update_milestone(99, MilestoneUpdate(completed=True)) is None


def test_recommendations_for_baby(baby: Baby) -> None:
    service = RecommendationService()

    result = service.for_baby(baby, today=date(2024, 9, 20))

    assert result.baby_id == baby.id
    assert result.age == "8 months old"
    assert result.age_group == "6-12 months"
    assert result.schedule[0].title == "Breakfast"
    assert result.nutritionist_note.startswith("Continue breast milk")


def test_recommendation_foods() -> None:
    service = RecommendationService()

    assert [food.id for food in service.foods("Dairy")] == ["5"]
    assert service.food("1") is not None
    assert service.food("missing") is None


def test_recompleting_milestone_keeps_recorded_date(
    storage: InMemoryStorage, baby: Baby
) -> None:
    service = MilestoneService(storage)
    milestone = service.list_milestones(baby.id)[0]
    service.update_milestone(
        milestone.id,
        MilestoneUpdate.model_validate({"completed": True, "completedDate": "2024-05-20"}),
    )

    again = service.update_milestone(
        milestone.id, MilestoneUpdate(completed=True), today=date(2024, 6, 1)
    )

    assert again is not None
    assert again.completed_date == date(2024, 5, 20)


def test_date_alone_marks_milestone_complete(
    storage: InMemoryStorage, baby: Baby
) -> None:
    service = MilestoneService(storage)
    milestone = service.list_milestones(baby.id)[0]

    updated = service.update_milestone(
        milestone.id, MilestoneUpdate.model_validate({"completedDate": "2024-05-20"})
    )

    assert updated is not None
    assert updated.completed is True
    assert updated.completed_date == date(2024, 5, 20)


def test_reopen_with_date_still_clears_it(
    storage: InMemoryStorage, baby: Baby
) -> None:
    service = MilestoneService(storage)
    milestone = service.list_milestones(baby.id)[0]

    updated = service.update_milestone(
        milestone.id,
        MilestoneUpdate.model_validate(
            {"completed": False, "completedDate": "2024-05-20"}
        ),
    )

    assert updated is not None
    assert updated.completed is False
    assert updated.completed_date is None

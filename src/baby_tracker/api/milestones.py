"""Milestone endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from baby_tracker.api.dependencies import get_container, require_baby
from baby_tracker.api.models import MilestoneResponse
from baby_tracker.containers import AppContainer
from baby_tracker.domain.models import Baby, Milestone
from baby_tracker.domain.schemas import MilestoneUpdate

router = APIRouter(prefix="/api", tags=["milestones"])


@router.get("/babies/{baby_id}/milestones", response_model=list[MilestoneResponse])
async def list_milestones(
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
) -> list[Milestone]:
    """Return a baby's milestones."""
    return container.milestone_service.list_milestones(baby.id)


@router.patch("/milestones/{milestone_id}", response_model=MilestoneResponse)
async def update_milestone(
    milestone_id: int,
    payload: dict[str, Any] = Body(...),
    container: AppContainer = Depends(get_container),
) -> Milestone:
    """Mark a milestone complete or incomplete."""
    update = MilestoneUpdate.model_validate(payload)
    milestone = container.milestone_service.update_milestone(milestone_id, update)
    if milestone is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Milestone not found"
        )
    return milestone

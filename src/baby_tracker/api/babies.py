"""Baby profile endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from baby_tracker.api.dependencies import get_container, require_baby
from baby_tracker.api.models import BabyResponse
from baby_tracker.containers import AppContainer
from baby_tracker.domain.models import Baby
from baby_tracker.domain.schemas import BabyCreate, BabyUpdate

router = APIRouter(prefix="/api", tags=["babies"])


@router.get("/babies", response_model=list[BabyResponse])
async def list_babies(
    container: AppContainer = Depends(get_container),
) -> list[Baby]:
    """Return the household's babies."""
    return container.baby_service.list_babies(container.household_user.id)


@router.get("/babies/{baby_id}", response_model=BabyResponse)
async def get_baby(baby: Baby = Depends(require_baby)) -> Baby:
    """Return a single baby profile."""
    return baby


@router.post(
    "/babies", response_model=BabyResponse, status_code=status.HTTP_201_CREATED
)
async def create_baby(
    payload: dict[str, Any] = Body(...),
    container: AppContainer = Depends(get_container),
) -> Baby:
    """Create a baby profile along with its default milestones."""
    data = BabyCreate.model_validate(
        {**payload, "userId": container.household_user.id}
    )
    return container.baby_service.create_baby(data)


@router.patch("/babies/{baby_id}", response_model=BabyResponse)
async def update_baby(
    payload: dict[str, Any] = Body(...),
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
) -> Baby:
    """Apply a partial update to a baby profile."""
    update = BabyUpdate.model_validate(payload)
    updated = container.baby_service.update_baby(baby.id, update)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Baby not found")
    return updated

"""Feeding log endpoints."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

from baby_tracker.api.dependencies import get_container, require_baby
from baby_tracker.api.models import FeedingLogResponse, FeedingSummaryResponse
from baby_tracker.containers import AppContainer
from baby_tracker.domain.models import Baby, FeedingLog
from baby_tracker.domain.schemas import FeedingLogCreate
from baby_tracker.services.feeding import FeedingSummary

router = APIRouter(prefix="/api", tags=["feeding"])


@router.get(
    "/babies/{baby_id}/feeding-logs", response_model=list[FeedingLogResponse]
)
async def list_feeding_logs(
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
    day: date | None = Query(default=None, alias="date"),
    food_type: str | None = Query(default=None, alias="foodType"),
) -> list[FeedingLog]:
    """Return a baby's feeding logs, optionally filtered by day and food type."""
    return container.feeding_log_service.list_logs(
        baby.id, day=day, food_type=food_type
    )


@router.post(
    "/babies/{baby_id}/feeding-logs",
    response_model=FeedingLogResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_feeding_log(
    payload: dict[str, Any] = Body(...),
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
) -> FeedingLog:
    """Log a feeding for a baby."""
    data = FeedingLogCreate.model_validate({**payload, "babyId": baby.id})
    return container.feeding_log_service.log_feeding(data)


@router.get(
    "/babies/{baby_id}/feeding-summary", response_model=FeedingSummaryResponse
)
async def feeding_summary(
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
) -> FeedingSummary:
    """Return derived feeding statistics for a baby."""
    return container.feeding_log_service.summarize(baby.id)


@router.delete("/feeding-logs/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_feeding_log(
    log_id: int, container: AppContainer = Depends(get_container)
) -> Response:
    """Delete a feeding log."""
    if not container.feeding_log_service.delete_log(log_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Feeding log not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

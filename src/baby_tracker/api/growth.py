"""Growth record endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

from baby_tracker.api.dependencies import get_container, require_baby
from baby_tracker.api.models import ChartBarResponse, GrowthRecordResponse
from baby_tracker.containers import AppContainer
from baby_tracker.domain.growth import ChartBar
from baby_tracker.domain.models import Baby, GrowthRecord
from baby_tracker.domain.schemas import GrowthRecordCreate

router = APIRouter(prefix="/api", tags=["growth"])


@router.get(
    "/babies/{baby_id}/growth-records", response_model=list[GrowthRecordResponse]
)
async def list_growth_records(
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
) -> list[GrowthRecord]:
    """Return a baby's growth records."""
    return container.growth_service.list_records(baby.id)


@router.post(
    "/babies/{baby_id}/growth-records",
    response_model=GrowthRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_growth_record(
    payload: dict[str, Any] = Body(...),
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
) -> GrowthRecord:
    """Record a measurement; the baby's weight and height follow it."""
    data = GrowthRecordCreate.model_validate({**payload, "babyId": baby.id})
    return container.growth_service.record_growth(data)


@router.get("/babies/{baby_id}/growth-chart", response_model=list[ChartBarResponse])
async def growth_chart(
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
    metric: str = Query(default="weight"),
) -> list[ChartBar]:
    """Return bar heights for the weight or height chart."""
    try:
        return container.growth_service.chart(baby.id, metric)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc


@router.delete("/growth-records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_growth_record(
    record_id: int, container: AppContainer = Depends(get_container)
) -> Response:
    """Delete a growth record."""
    if not container.growth_service.delete_record(record_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Growth record not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

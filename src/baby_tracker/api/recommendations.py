"""Feeding recommendation and food suggestion endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from baby_tracker.api.dependencies import get_container, require_baby
from baby_tracker.api.models import (
    FoodResponse,
    RecommendationsResponse,
    VocabularyResponse,
)
from baby_tracker.containers import AppContainer
from baby_tracker.domain.foods import ALL_CATEGORIES, FOOD_CATEGORIES, Food
from baby_tracker.domain.models import Baby
from baby_tracker.domain.schemas import (
    AMOUNT_UNITS,
    DIETARY_RESTRICTIONS,
    FEEDING_TYPES,
)
from baby_tracker.services.recommendations import Recommendations

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.get(
    "/babies/{baby_id}/recommendations", response_model=RecommendationsResponse
)
async def recommendations(
    baby: Baby = Depends(require_baby),
    container: AppContainer = Depends(get_container),
) -> Recommendations:
    """Return the schedule and nutrition note for the baby's age group."""
    return container.recommendation_service.for_baby(baby)


@router.get("/foods", response_model=list[FoodResponse])
async def list_foods(
    container: AppContainer = Depends(get_container),
    category: str = Query(default=ALL_CATEGORIES),
) -> list[Food]:
    """Return suggested foods, optionally filtered by category."""
    try:
        return container.recommendation_service.foods(category)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc


@router.get("/foods/{food_id}", response_model=FoodResponse)
async def get_food(
    food_id: str, container: AppContainer = Depends(get_container)
) -> Food:
    """Return a single suggested food."""
    food = container.recommendation_service.food(food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food not found")
    return food


@router.get("/vocabulary", response_model=VocabularyResponse)
async def vocabulary() -> dict[str, list[str]]:
    """Return suggested values for the profile and feeding forms."""
    return {
        "feeding_types": list(FEEDING_TYPES),
        "dietary_restrictions": list(DIETARY_RESTRICTIONS),
        "amount_units": list(AMOUNT_UNITS),
        "food_categories": list(FOOD_CATEGORIES),
    }

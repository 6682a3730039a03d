"""Shared FastAPI dependencies."""

from fastapi import HTTPException, Request, status

from baby_tracker.containers import AppContainer
from baby_tracker.domain.models import Baby


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def require_baby(baby_id: int, request: Request) -> Baby:
    """Resolve the baby named in the path or respond with 404."""
    container = get_container(request)
    baby = container.baby_service.get_baby(baby_id)
    if baby is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Baby not found")
    return baby

"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from baby_tracker.api.babies import router as babies_router
from baby_tracker.api.feeding import router as feeding_router
from baby_tracker.api.growth import router as growth_router
from baby_tracker.api.milestones import router as milestones_router
from baby_tracker.api.recommendations import router as recommendations_router
from baby_tracker.app_logging import configure_logging
from baby_tracker.containers import AppContainer
from baby_tracker.domain.errors import ParentNotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Baby Tracker")
    app.state.container = container

    app.include_router(babies_router)
    app.include_router(feeding_router)
    app.include_router(growth_router)
    app.include_router(milestones_router)
    app.include_router(recommendations_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _validation_response(exc.errors())

    @app.exception_handler(ValidationError)
    async def payload_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return _validation_response(exc.errors(include_url=False))

    @app.exception_handler(ParentNotFoundError)
    async def parent_not_found(
        request: Request, exc: ParentNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": f"{exc.entity} not found"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error", extra={"method": request.method, "path": request.url.path}
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": _format_unexpected_error(container, exc)},
        )

    return app


def _validation_response(errors: object) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(errors)},
    )


def _format_unexpected_error(container: AppContainer, exc: Exception) -> str:
    """Return a generic error message with debug detail when running locally."""
    fallback = "An unexpected error occurred"
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        return f"{fallback} (debug: {detail})"
    return fallback

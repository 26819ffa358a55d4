"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from food_safety.api.products import router as products_router
from food_safety.api.profiles import router as profiles_router
from food_safety.api.safety import router as safety_router
from food_safety.api.schemas import HealthConditionResponse
from food_safety.app_logging import configure_logging
from food_safety.containers import AppContainer
from food_safety.domain.profiles import COMMON_CONDITIONS
from food_safety.errors import (
    FoodSafetyError,
    ProductNotFoundError,
    ProfileNotFoundError,
    ProfileValidationError,
    UpstreamError,
)

_ERROR_STATUS: dict[type[FoodSafetyError], int] = {
    ProductNotFoundError: status.HTTP_404_NOT_FOUND,
    ProfileNotFoundError: status.HTTP_404_NOT_FOUND,
    ProfileValidationError: status.HTTP_400_BAD_REQUEST,
    UpstreamError: status.HTTP_502_BAD_GATEWAY,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(products_router)
    app.include_router(profiles_router)
    app.include_router(safety_router)

    @app.exception_handler(FoodSafetyError)
    async def handle_domain_error(
        request: Request, exc: FoodSafetyError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.exception("Request %s failed", request.url.path, exc_info=exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/conditions")
    async def conditions() -> dict[str, list[HealthConditionResponse]]:
        """Return the common condition presets offered to users."""
        return {
            "conditions": [
                HealthConditionResponse.from_domain(condition)
                for condition in COMMON_CONDITIONS
            ]
        }

    return app

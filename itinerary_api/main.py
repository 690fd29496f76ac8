# path: transit-itinerary-api/itinerary_api/main.py

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from itinerary_api.api.routes.itineraries import router as itineraries_router
from itinerary_api.api.routes.reference import router as reference_router
from itinerary_api.core.config import settings
from itinerary_api.core.errors import GeometryResolutionError, NotFoundError
from itinerary_api.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "error": type(exc).__name__})


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title="transit-itinerary-api")

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return _error_response(404, exc)

    @app.exception_handler(GeometryResolutionError)
    async def handle_unresolved_geometry(request: Request, exc: GeometryResolutionError) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return _error_response(422, exc)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(itineraries_router)
    app.include_router(reference_router)
    return app


app = create_app()

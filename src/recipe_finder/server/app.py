"""ASGI application for Recipe Finder."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Optional
from uuid import uuid4

from fastapi import Depends, FastAPI, Query, Request, status
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from recipe_finder import __version__, metrics
from recipe_finder.config import Settings, get_settings
from recipe_finder.logging_utils import configure_logging as configure_app_logging
from recipe_finder.models.recipe import ErrorResponse, SearchResponse
from recipe_finder.server import deps, ui
from recipe_finder.upstream import RecipeApiClient, UpstreamError

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Failed to fetch recipes"
MISSING_ID_MESSAGE = "Missing recipe ID"
INVALID_ID_MESSAGE = "Invalid recipe ID"
DETAILS_FAILED_MESSAGE = "Failed to fetch recipe details"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _configure_logging(settings: Settings) -> None:
    secrets = [settings.recipe_api_key or ""]
    configure_app_logging(settings.log_level, settings.log_format, secrets)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    ``settings`` defaults to the environment-derived configuration; passing one
    explicitly keeps the upstream credential out of ambient lookups.
    """

    settings = settings or get_settings()
    _configure_logging(settings)

    application = FastAPI(title="Recipe Finder", version=__version__)
    application.state.settings = settings
    application.state.recipe_client = deps.build_recipe_client(settings)

    if not settings.recipe_api_key:
        logger.warning("No recipe API key configured; upstream calls will be rejected")

    application.include_router(ui.router)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("recipe_finder.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details without leaking sensitive data."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            path = request.url.path
            method = request.method
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                metrics.REQUEST_COUNT.labels(method=method, path=path, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                    duration_ms / 1000.0
                )
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            metrics.REQUEST_COUNT.labels(
                method=method,
                path=path,
                status=str(response.status_code),
            ).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                duration_ms / 1000.0
            )
            return response

    @application.get(
        "/api",
        summary="Search recipes",
        response_model=SearchResponse,
        responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
    )
    def search_proxy(
        q: Optional[str] = Query(default=None, description="Free-text recipe query."),
        client: RecipeApiClient = Depends(deps.get_recipe_client),
    ) -> Response:
        """Forward a free-text query to the upstream search endpoint."""

        if not q or not q.strip():
            return JSONResponse(content={"results": []})

        try:
            payload = client.search(q)
        except UpstreamError as exc:
            logger.warning("Recipe search failed: %s", exc)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, SEARCH_FAILED_MESSAGE)
        return JSONResponse(content=payload)

    @application.get(
        "/api/details",
        summary="Fetch recipe details",
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
            status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
        },
    )
    def details_proxy(
        recipe_id: Optional[str] = Query(default=None, alias="id", description="Recipe identifier."),
        client: RecipeApiClient = Depends(deps.get_recipe_client),
    ) -> Response:
        """Forward a recipe identifier to the upstream information endpoint."""

        if not recipe_id or not recipe_id.strip():
            return _error(status.HTTP_400_BAD_REQUEST, MISSING_ID_MESSAGE)
        try:
            numeric_id = int(recipe_id.strip())
        except ValueError:
            logger.info("Rejected non-numeric recipe id=%r", recipe_id)
            return _error(status.HTTP_400_BAD_REQUEST, INVALID_ID_MESSAGE)

        try:
            payload = client.details(numeric_id)
        except UpstreamError as exc:
            logger.warning("Recipe details failed for id=%s: %s", numeric_id, exc)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, DETAILS_FAILED_MESSAGE)
        return JSONResponse(content=payload)

    @application.get("/healthz", include_in_schema=False)
    def healthcheck() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    return application


app = create_app()

__all__ = ["app", "create_app"]

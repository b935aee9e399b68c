"""ASGI application for Petits Plats."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any
from uuid import uuid4

from fastapi import Depends, FastAPI, Query as QueryParam, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from petitsplats import __version__, metrics
from petitsplats.config import get_settings
from petitsplats.errors import CatalogError
from petitsplats.logging_utils import configure_logging
from petitsplats.models.query import FacetOptionSet, Query, QueryResult
from petitsplats.models.recipe import Recipe
from petitsplats.search import RecipeSearchEngine, narrow_facet_options
from petitsplats.server import deps

logger = logging.getLogger(__name__)


def _json_safe(value: Any) -> Any:
    """Convert non-serializable values into JSON-safe representations."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple)):
        return [_json_safe(entry) for entry in value]
    if isinstance(value, dict):
        return {key: _json_safe(sub_value) for key, sub_value in value.items()}
    return repr(value)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    application = FastAPI(title="Petits Plats Recipe Search", version=__version__)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("petitsplats.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details and record request metrics."""

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
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000.0)
            return response

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log_kwargs: dict[str, Any] = {}
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            log_kwargs["extra"] = {"request_id": request_id}

        logger.warning(
            "Validation error on %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
            **log_kwargs,
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": [_json_safe(dict(error)) for error in exc.errors()]},
        )

    @application.exception_handler(CatalogError)
    async def catalog_exception_handler(request: Request, exc: CatalogError):
        logger.error("Recipe catalog unavailable: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    @application.get("/health", summary="Service health")
    def health(
        engine: RecipeSearchEngine = Depends(deps.get_search_engine),
    ) -> dict[str, Any]:
        return {"status": "ok", "recipes": len(engine)}

    @application.get("/recipes", response_model=list[Recipe], summary="List the whole catalog")
    def recipes_list(
        engine: RecipeSearchEngine = Depends(deps.get_search_engine),
    ) -> list[Recipe]:
        return engine.recipes

    @application.get("/facets", response_model=FacetOptionSet, summary="List catalog facet options")
    def facets_list(
        filter_text: str = QueryParam(default="", alias="filter", max_length=255),
        engine: RecipeSearchEngine = Depends(deps.get_search_engine),
    ) -> FacetOptionSet:
        return narrow_facet_options(engine.facet_options, filter_text)

    @application.post("/search", response_model=QueryResult, summary="Search recipes")
    def search_endpoint(
        query: Query,
        engine: RecipeSearchEngine = Depends(deps.get_search_engine),
    ) -> QueryResult:
        """Return the recipes matching the keyword and tags, plus the facet options left."""

        result = engine.run(query)
        logger.debug(
            "Search returned %d recipes",
            len(result.results),
            extra={"keyword": query.keyword, "tag_count": len(query.tags), "result_count": len(result.results)},
        )
        return result

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    return application


app = create_app()

__all__ = ["app", "create_app"]

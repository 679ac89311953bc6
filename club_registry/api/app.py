# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, and Prometheus request metrics for operations visibility.
# Startup checks database connectivity and can create the registry tables when configured to.

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import RequestResponseEndpoint
from starlette.routing import Match

from club_registry.api.api_config import get_api_config
from club_registry.api.dependencies import get_database_client
from club_registry.api.error_handlers import register_error_handlers
from club_registry.api.routers.clubs import router as clubs_router
from club_registry.api.routers.health import router as health_router
from club_registry.api.routers.registrations import router as registrations_router
from club_registry.api.routers.students import router as students_router
from club_registry.common.ddl import create_schema
from club_registry.common.logging import configure_logging

LOGGER = logging.getLogger(__name__)

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method", "path"],
)


UNMATCHED_ROUTE_LABEL = "unmatched"


def _route_label(request: Request) -> str:
    """Return the route template (e.g. `/students/{studid}`) so raw ids never become label values."""

    partial: str | None = None
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", UNMATCHED_ROUTE_LABEL)
        if match == Match.PARTIAL and partial is None:
            partial = getattr(route, "path", None)
    return partial or UNMATCHED_ROUTE_LABEL


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config = get_api_config()
    try:
        db = get_database_client()
        if config.create_schema:
            create_schema(db.engine)
        app.state.db_connected_at_startup = db.can_connect()
    except SQLAlchemyError:
        LOGGER.exception("database startup checks failed")
        app.state.db_connected_at_startup = False

    if app.state.db_connected_at_startup:
        LOGGER.info("connected to database")
    else:
        LOGGER.warning("database unreachable at startup; requests will fail until it is available")

    yield

    get_database_client().dispose()


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description="CRUD API for students, clubs, and club registrations.",
        version=config.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "students", "description": "Student registration, lookup, and updates."},
            {"name": "clubs", "description": "Club catalog."},
            {"name": "registrations", "description": "Student-to-club registrations."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials="*" not in config.allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        path_label = _route_label(request)
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(students_router)
    app.include_router(clubs_router)
    app.include_router(registrations_router)

    return app


app = create_app()

"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize the FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount the master-data router under the /v1 prefix
  - Expose the health check endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: request id and logging context
  - interfaces.api.http.router: users/facilities endpoints
  - infrastructure.db.pool: Postgres connection pool lifecycle

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - The pool is only opened when STORAGE_BACKEND=postgres

Notes:
  - Middleware order matters: RequestContext → CORS → routes
  - /healthz follows the Kubernetes health check convention
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool, ping
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Initializes the pool for Postgres storage."""
    settings = get_settings()
    use_db = not settings.uses_in_memory_storage()

    if use_db:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    logger.info(
        "Master Data API starting up",
        extra={
            "app_env": settings.app_env,
            "storage_backend": settings.storage_backend,
            "db_pool_min": settings.db_pool_min_size,
            "db_pool_max": settings.db_pool_max_size,
        },
    )

    try:
        yield
    finally:
        if use_db:
            close_pool()
        logger.info("Master Data API shutting down")


# R: Create FastAPI application instance with API metadata
app = FastAPI(
    title="Master Data API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "users", "description": "User master table"},
        {"name": "facilities", "description": "Facility master table"},
        {"name": "health", "description": "Liveness probe"},
    ],
)

# R: Middleware order (bottom = first to execute):
# 1. CORSMiddleware - handles preflight
# 2. RequestContextMiddleware - sets request_id
app.add_middleware(RequestContextMiddleware)

_settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.get_allowed_origins_list(),
    allow_credentials=_settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-Id"],
    expose_headers=["X-Request-Id", "Content-Disposition"],
)

# R: Register API routes under /v1 prefix for versioning
app.include_router(router, prefix="/v1")

# R: Register exception handlers for structured error responses
register_exception_handlers(app)


@app.get("/healthz", tags=["health"])
def healthz(request: Request):
    """
    R: Liveness plus storage backend status.

    Returns:
        ok: True if the configured storage is usable
        storage: "postgres" or "memory"
        db: "connected", "disconnected" or "not_used"
        request_id: Correlation ID for this request
    """
    settings = get_settings()

    in_memory = settings.uses_in_memory_storage()

    if in_memory:
        db_status = "not_used"
    else:
        db_status = "connected" if ping() else "disconnected"

    return {
        "ok": db_status != "disconnected",
        "storage": "memory" if in_memory else "postgres",
        "db": db_status,
        "request_id": getattr(request.state, "request_id", None),
    }

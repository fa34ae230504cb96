"""
FastAPI application factory with middleware, CORS, and request tracing.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from govstatus import __version__
from govstatus.catalog import get_catalog, get_service_catalog
from govstatus.config import get_settings
from govstatus.engine.errors import EmptyWindow, InvalidWindow, MalformedRecord, TimelineError
from govstatus.routers import incidents, status, system, timeline
from govstatus.utils.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

_ERROR_STATUS = {
    InvalidWindow: 400,
    EmptyWindow: 422,
    MalformedRecord: 500,
}


def _status_for(exc: TimelineError) -> int:
    for error_cls, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_cls):
            return status_code
    return 400


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Loads both catalogs once so a malformed table fails start-up, not a request.
    """
    settings = get_settings()
    catalog = get_catalog()
    services = get_service_catalog()

    logger.info(
        "application_startup",
        version=app.version,
        dev_mode=settings.dev_mode,
        incidents=len(catalog),
        services=len(services),
    )

    yield

    logger.info("application_shutdown")


def create_app() -> FastAPI:
    """
    Application factory.
    Creates and configures FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Government uptime timeline - incident history, monthly grid and uptime",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    @app.middleware("http")
    async def request_tracing_middleware(request: Request, call_next):
        """Add request ID to the log context and the response headers."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
        )
        return response

    @app.exception_handler(TimelineError)
    async def timeline_error_handler(request: Request, exc: TimelineError):
        """Map engine failures to JSON error responses."""
        status_code = _status_for(exc)
        logger.warning(
            "timeline_error",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
            status_code=status_code,
            window_start=getattr(exc, "window_start", None),
            window_end=getattr(exc, "window_end", None),
        )
        return JSONResponse(
            status_code=status_code,
            content={
                "success": False,
                "error": type(exc).__name__,
                "detail": str(exc),
            },
        )

    @app.get("/health", tags=["System"])
    async def health_check():
        """Health check endpoint for load balancers and monitoring."""
        return {"status": "healthy", "version": app.version}

    app.include_router(incidents.router, prefix="/api/incidents", tags=["Incidents"])
    app.include_router(status.router, prefix="/api/status", tags=["Status"])
    app.include_router(timeline.router, prefix="/api/timeline", tags=["Timeline"])
    app.include_router(system.router, prefix="/api/system", tags=["System"])

    logger.info("application_configured", routers_count=4)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "govstatus.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )

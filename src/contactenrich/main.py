"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import ORJSONResponse

from contactenrich.config import settings
from contactenrich.api.deps import get_reference_data
from contactenrich.api.v1.router import api_router
from contactenrich.schemas.enrichment import ErrorResponse

REQUEST_ID_HEADER = "X-Request-ID"


def configure_logging(json_logs: bool) -> None:
    """Configure structlog; request-scoped values are merged from contextvars."""
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging(json_logs=settings.is_production)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load reference tables before serving; a broken table stops startup."""
    logger.info("Starting Contact Enrichment API", version=settings.app_version, environment=settings.environment)
    get_reference_data()
    if not settings.hubspot_access_token:
        logger.warning("HubSpot access token not configured, enrichment requests will be rejected")
    yield
    logger.info("Shutting down Contact Enrichment API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="CRM contact enrichment - company profile, seniority and department from email and job title",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json" if settings.debug else None,
        docs_url=f"{settings.api_v1_prefix}/docs" if settings.debug else None,
        redoc_url=None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next):
        """Tag every log line of a request with its request ID."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id, path=request.url.path)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Report readiness of the reference tables and CRM credentials."""
        reference = get_reference_data()
        return {
            "status": "healthy",
            "version": settings.app_version,
            "hubspot_configured": settings.hubspot_access_token is not None,
            "companies": len(reference.companies),
            "title_patterns": len(reference.patterns),
        }

    @app.get("/", tags=["Root"])
    async def root() -> dict:
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "enrich_contact": f"{settings.api_v1_prefix}/enrichment/contact",
            "health": "/health",
        }

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> ORJSONResponse:
        logger.error("Unhandled exception", method=request.method, error=str(exc), exc_info=exc)
        error = str(exc) if settings.debug else "An unexpected error occurred"
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=error).model_dump(),
        )

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn (for development)."""
    import uvicorn

    uvicorn.run(
        "contactenrich.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()

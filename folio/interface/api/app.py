"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from folio.adapter.error import StoreUnavailableError
from folio.config import Settings
from folio.domain.error import MalformedRecordError
from folio.interface.api.routes import health, portfolio, posts, tags
from folio.util.di.container import create_container, setup_di
from folio.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


async def handle_store_unavailable(
    request: Request, exc: StoreUnavailableError
) -> JSONResponse:
    """Content store unreachable or rejected the request."""
    logfire.error(
        "Content store unavailable",
        path=request.url.path,
        status_code=exc.status_code,
        code=exc.code,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Content store unavailable"},
    )


async def handle_malformed_record(
    request: Request, exc: MalformedRecordError
) -> JSONResponse:
    """Store data does not match the configured schema."""
    logfire.error(
        "Malformed record",
        path=request.url.path,
        record_id=exc.record_id,
        property=exc.property_name,
        expected=exc.expected,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (production container if None)
    """
    settings = Settings()

    # Instrument httpx for requests to Notion and image hosts
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Folio API",
        description="Read-only content API for a blog and portfolio site backed by Notion",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.frontend_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(StoreUnavailableError, handle_store_unavailable)
    app_instance.add_exception_handler(MalformedRecordError, handle_malformed_record)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(portfolio.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()

"""
Sync Notes API
FastAPI application entry point.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sync_notes.config import Settings, settings as default_settings
from sync_notes.exceptions import ApplicationError, ValidationError
from sync_notes.middleware import LoggingMiddleware
from sync_notes.routes import router
from sync_notes.services import Authorizer, Collector, NoteService, Scheduler
from sync_notes.utils import DocumentStore, setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings = default_settings,
    clock: Callable[[], float] = time.time,
) -> FastAPI:
    """Build the API with its own token cache, note store and scheduler."""
    setup_logging(settings.LOG_LEVEL)

    authorizer = Authorizer(ttl_seconds=settings.TOKEN_TTL_SECONDS, clock=clock)
    store = DocumentStore(settings.DATA_DIR, clock=clock)
    scheduler = Scheduler(
        authorizer,
        Collector(settings.DATA_DIR),
        token_ttl=settings.TOKEN_TTL_SECONDS,
        token_interval=settings.TOKEN_SWEEP_INTERVAL_SECONDS,
        retention=settings.NOTE_RETENTION_SECONDS,
        sweep_interval=settings.NOTE_SWEEP_INTERVAL_SECONDS,
        clock=clock,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        """Prepare storage and run maintenance for the lifetime of the app."""
        store.init()
        await scheduler.start()
        yield
        await scheduler.stop()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Reserve a note id, save a note under it, then read or overwrite it",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.authorizer = authorizer
    app.state.store = store
    app.state.scheduler = scheduler
    app.state.note_service = NoteService(authorizer, store)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Authorization", "Content-Type"],
        expose_headers=["Link"],
        max_age=300,
    )
    app.add_middleware(LoggingMiddleware)

    app.include_router(router)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    @app.get("/health")
    async def health():
        """Health check for deployment."""
        return {"status": "ok"}

    @app.exception_handler(ApplicationError)
    async def handle_application_error(_: Request, exc: ApplicationError):
        detail = exc.message
        if exc.status_code >= 500:
            logger.error("%s: %s", exc.code, exc.message)
            detail = "Internal server error"
        return JSONResponse(status_code=exc.status_code, content={"detail": detail, "code": exc.code})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(_: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=ValidationError.status_code,
            content={"detail": jsonable_encoder(exc.errors()), "code": ValidationError.code},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)

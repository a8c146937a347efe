"""
Main entrypoint for the News Headlines API.

This module assembles the FastAPI application: logging, the request
logging middleware, CORS, error handlers and the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn news_headlines_api.app.main:app --reload

Every error response has the shape ``{"error": "<message>"}``.
Unexpected exceptions are logged with their traceback and answered
with a generic 500 so that no internal detail reaches the caller.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.errors import HeadlineError
from .services.headline_service import SAMPLE_HEADLINES, HeadlineService

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Something went wrong!"
INVALID_BODY_MESSAGE = "Invalid request body"


def create_app(
    settings: Optional[Settings] = None,
    headline_service: Optional[HeadlineService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the module‑level settings read
        from the environment.
    headline_service : Optional[HeadlineService]
        Store to serve.  When omitted a new store is created and, if
        ``settings.seed_sample_data`` is true, seeded with the sample
        headlines.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if headline_service is None:
        headline_service = HeadlineService(SAMPLE_HEADLINES if settings.seed_sample_data else None)
    app.state.headline_service = headline_service

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": SERVER_ERROR_MESSAGE},
            )

    # Added after the logging middleware so it wraps it and 500
    # responses still carry CORS headers.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HeadlineError)
    async def headline_error_handler(request: Request, exc: HeadlineError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected request body for %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": INVALID_BODY_MESSAGE})

    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

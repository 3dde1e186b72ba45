import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.middleware.base import BaseHTTPMiddleware

from app.api import meals, users
from app.config import Settings, settings as default_settings
from app.database import make_engine, make_session_factory

logger = logging.getLogger(__name__)


# =============================================================================
# Request Logging Middleware
# =============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


# =============================================================================
# Exception Handlers
# =============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Report malformed bodies and path parameters as 400 with per-field errors.
    """
    errors = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    logger.info(
        "Validation failed: method=%s, path=%s, errors=%d",
        request.method,
        request.url.path,
        len(errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


# =============================================================================
# Application Factory
# =============================================================================


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None, engine: Optional[Engine] = None
) -> FastAPI:
    """
    Build an application instance.

    Each instance owns its engine and session factory, so tests can run
    isolated apps side by side. Pass ``engine`` to share an existing one.
    """
    settings = settings or default_settings
    owns_engine = engine is None
    if owns_engine:
        engine = make_engine(settings.database_url, echo=settings.database_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(users.router)
    app.include_router(meals.router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


def serve(app: FastAPI, settings: Optional[Settings] = None) -> None:
    """Start listening with uvicorn."""
    settings = settings or app.state.settings
    logger.info("HTTP server running on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    configure_logging(default_settings.log_level)
    serve(create_app())

"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shortener.exceptions import URLShortenerError

from .api import api_router
from .web import web_router
from .middleware import LoggingMiddleware


async def shortener_error_handler(request: Request, exc: URLShortenerError) -> JSONResponse:
    """Answer service errors that escape a route with their own status."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(
    db_instance,
    cache_instance,
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    The instances may be None when ``app.py`` builds them in the lifespan.

    Args:
        db_instance: Storage backend
        cache_instance: Optional RedisCache
        service_instance: URLShortenerService
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Deterministic, idempotent URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.db = db_instance
    app.state.cache = cache_instance
    app.state.service = service_instance
    app.state.config = config

    # Shortening is POST, redirects and lookups are GET
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_exception_handler(URLShortenerError, shortener_error_handler)

    # /api/* must be registered before the /{short_code} catch-all
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app

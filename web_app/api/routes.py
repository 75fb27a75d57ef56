"""API routes implementation."""

from fastapi import APIRouter, Request, HTTPException
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    URLInfoResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)

from shortener.common.headers import build_base_url, build_short_url, get_path_prefix
from shortener.exceptions import URLShortenerError

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed or empty URL"},
        409: {"model": ErrorResponse, "description": "No unique short code could be derived"},
    },
    summary="Create short URL",
    description="Shorten a URL. The same URL always gets the same short code.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create (or fetch) the short URL for a long URL."""
    service = request.app.state.service
    config = request.app.state.config

    try:
        result = await service.create_short_url(body.url)
    except URLShortenerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    headers = dict(request.headers)
    base_url = build_base_url(
        headers=headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    short_url = build_short_url(
        short_code=result["short_code"],
        base_url=base_url,
        path_prefix=get_path_prefix(headers, config.path_prefix),
    )

    return ShortenResponse(
        short_code=result["short_code"],
        short_url=short_url,
        original_url=result["original_url"],
        created=result["created"],
    )


@router.get(
    "/urls/{short_code}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get URL information",
    description="Get the stored mapping for a short code.",
)
async def get_url_info(request: Request, short_code: str):
    """Get information about a shortened URL."""
    service = request.app.state.service

    try:
        info = await service.get_url_info(short_code)
    except URLShortenerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return URLInfoResponse(**info)


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get service-wide statistics.",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    stats = await service.get_statistics()

    return StatisticsResponse(**stats)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )

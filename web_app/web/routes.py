"""Redirect routes served at the root of the short URL space."""

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import RedirectResponse

from shortener.exceptions import NotFoundError

router = APIRouter()


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = await service.health_check()

    if health["overall"]:
        return {"status": "healthy"}
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    try:
        original_url = await service.resolve(short_code)
    except NotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    # 302 so repeated visits keep going through the service
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)

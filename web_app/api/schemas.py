"""Pydantic schemas for API requests and responses."""

from pydantic import AliasChoices, BaseModel, Field
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    Accepts either ``url`` or ``longUrl`` as the field name. Validation of the
    URL itself happens in the service so every caller gets the same rules.
    """

    url: str = Field(
        ...,
        description="The URL to shorten",
        validation_alias=AliasChoices("url", "longUrl"),
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
                {"longUrl": "example.com/frostbite"},
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    short_code: str = Field(..., description="The short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The normalized long URL")
    created: bool = Field(..., description="False when an existing mapping was reused")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "short_code": "6e8b9a",
                    "short_url": "http://localhost:8080/6e8b9a",
                    "original_url": "http://example.com/frostbite",
                    "created": True,
                }
            ]
        }
    }


class URLInfoResponse(BaseModel):
    """Response with URL information."""

    short_code: str
    original_url: str
    created_at: datetime


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    database: str
    cache_enabled: bool
    max_collision_retries: int

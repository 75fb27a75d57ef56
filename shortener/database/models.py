"""Data models for URL shortener."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class URLMapping:
    """Represents a stored short code to long URL mapping.

    Mappings are insert-only; both fields are unique across the store.
    """

    short_code: str
    original_url: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "short_code": self.short_code,
            "original_url": self.original_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "URLMapping":
        """Create from dictionary (or a database row)."""
        created_at = data["created_at"]
        if not isinstance(created_at, datetime):
            created_at = datetime.fromisoformat(created_at)
        return cls(
            short_code=data["short_code"],
            original_url=data["original_url"],
            created_at=created_at,
        )

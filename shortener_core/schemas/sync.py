"""
Schemas for the internal sync endpoints consumed by the edge service.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime, timezone


class ActivePath(BaseModel):
    """One entry of the active path set the edge service caches."""

    short_path: str
    original_url: str
    hostname: str


class LogEntry(BaseModel):
    """
    One access event pushed by the edge service.

    hostname and short_path identify the Path; they may reference a path
    that no longer exists, in which case the entry is dropped at ingestion.
    """

    hostname: str = Field(..., max_length=255, description="Domain the request was served on")
    short_path: str = Field(..., max_length=255, description="Short path that was accessed")
    ip_address: Optional[str] = Field(None, max_length=255, description="Client IP address")
    user_agent: Optional[str] = Field(None, description="User agent string")
    country: Optional[str] = Field(None, max_length=255, description="Country code (e.g., US, UK)")
    timestamp: Optional[datetime] = Field(None, description="When the hit occurred, defaults to ingestion time")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "hostname": "sho.rt",
                "short_path": "abc",
                "ip_address": "192.168.1.1",
                "user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/120.0",
                "country": "US",
                "timestamp": "2025-10-29T10:30:00Z",
            }
        },
    )

    @field_validator("timestamp")
    @classmethod
    def to_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Access log timestamps are stored as naive UTC."""
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class SyncResult(BaseModel):
    success: bool = True

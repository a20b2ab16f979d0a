from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class TokenCreate(BaseModel):
    # Optional here so a missing name is reported as 400 by the service
    name: Optional[str] = Field(None, description="Label of the edge service the token is issued to")


class TokenResponse(BaseModel):
    name: str
    token: str

    model_config = ConfigDict(from_attributes=True)


class DomainCreate(BaseModel):
    hostname: str = Field(..., min_length=1, max_length=255, description="Hostname, e.g. sho.rt")


class DomainResponse(BaseModel):
    id: int
    hostname: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PathCreate(BaseModel):
    domain_id: int = Field(..., description="Owning domain")
    short_path: str = Field(..., min_length=1, max_length=255)
    original_url: str = Field(..., min_length=1, description="Redirect target")
    is_active: bool = True


class PathResponse(BaseModel):
    id: int
    domain_id: int
    short_path: str
    original_url: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AccessLogResponse(BaseModel):
    id: int
    path_id: int
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    country: Optional[str] = None
    timestamp: datetime
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

"""
FastAPI dependencies for dependency injection.

Routes never touch the engine or a global session: each request gets its
own Session from get_db(), wrapped in the service it needs.

Pattern: Dependency Injection
- Easy to test (override get_db with a test session)
- Services stay framework-free
"""

from typing import Optional

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from shortener_core.config import settings
from shortener_core.database.connection import get_db
from shortener_core.models import ApiKey
from shortener_core.services.admin_service import AdminService
from shortener_core.services.sync_service import SyncService

# auto_error=False so a missing header reaches SyncService.authenticate (401, not 403)
api_token_header = APIKeyHeader(name=settings.api_token_header, auto_error=False)


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    return AdminService(db=db)


def get_sync_service(db: Session = Depends(get_db)) -> SyncService:
    return SyncService(db=db)


def require_api_token(
    token: Optional[str] = Security(api_token_header),
    sync_service: SyncService = Depends(get_sync_service),
) -> ApiKey:
    """
    Guard for the /internal routes.

    Raises Unauthorized when the header is missing and Forbidden when the
    token is unknown, before the route body runs.
    """
    return sync_service.authenticate(token)

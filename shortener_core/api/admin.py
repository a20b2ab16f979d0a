from typing import List

from fastapi import APIRouter, Depends, status
from shortener_core.schemas.admin import (
    AccessLogResponse,
    DomainCreate,
    DomainResponse,
    PathCreate,
    PathResponse,
    TokenCreate,
    TokenResponse,
)
from shortener_core.services.admin_service import AdminService
from shortener_core.dependencies import get_admin_service

# No auth guard on the admin surface; see DESIGN.md
router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/tokens", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def create_token(
    data: TokenCreate,
    admin_service: AdminService = Depends(get_admin_service)
):
    """Issue a shared-secret token for the internal sync endpoints"""
    return admin_service.issue_token(data.name)


@router.post("/domains", response_model=DomainResponse, status_code=status.HTTP_201_CREATED)
def create_domain(
    data: DomainCreate,
    admin_service: AdminService = Depends(get_admin_service)
):
    """Register a hostname (409 if it already exists)"""
    return admin_service.create_domain(data)


@router.post("/paths", response_model=PathResponse, status_code=status.HTTP_201_CREATED)
def create_path(
    data: PathCreate,
    admin_service: AdminService = Depends(get_admin_service)
):
    """Add a short path under a domain (409 if the pair already exists)"""
    return admin_service.create_path(data)


@router.get("/history/{path_id}", response_model=List[AccessLogResponse])
def get_access_history(
    path_id: int,
    admin_service: AdminService = Depends(get_admin_service)
):
    """Access logs of a path, newest first"""
    return admin_service.get_access_history(path_id)

from typing import List

from fastapi import APIRouter, Depends, Request
from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from shortener_core.dependencies import get_sync_service, require_api_token
from shortener_core.exceptions import ValidationError
from shortener_core.schemas.sync import ActivePath, LogEntry, SyncResult
from shortener_core.services.sync_service import SyncService

router = APIRouter(
    prefix="/internal/sync",
    tags=["internal"],
    dependencies=[Depends(require_api_token)],
)

_log_entries = TypeAdapter(List[LogEntry])


async def read_log_batch(request: Request) -> List[LogEntry]:
    """
    Parse the log batch from the raw request body.

    Router dependencies are solved first, so the token guard has already
    passed when the body is read. A body that is not a JSON array of valid
    entries is a 400 and nothing is written.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        raise ValidationError("Invalid format: body is not valid JSON") from e

    if not isinstance(payload, list):
        raise ValidationError("Invalid format: expected an array of log entries")

    try:
        return _log_entries.validate_python(payload)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid log entry: {e.errors()[0]['msg']}") from e


@router.get("/paths", response_model=List[ActivePath])
def sync_paths(sync_service: SyncService = Depends(get_sync_service)):
    """Active path set for the edge service to cache"""
    return sync_service.get_active_paths()


@router.post("/logs", response_model=SyncResult)
def sync_logs(
    entries: List[LogEntry] = Depends(read_log_batch),
    sync_service: SyncService = Depends(get_sync_service)
):
    """Bulk-ingest access logs pushed by the edge service"""
    sync_service.ingest_logs(entries)
    return SyncResult(success=True)

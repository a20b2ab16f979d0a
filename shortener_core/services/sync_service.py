import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shortener_core.exceptions import Forbidden, TransientStoreFailure, Unauthorized
from shortener_core.models import AccessLog, ApiKey, Domain, Path
from shortener_core.schemas.sync import ActivePath, LogEntry

logger = logging.getLogger(__name__)


class SyncService:
    """
    Operations behind the /internal/sync endpoints.

    The edge service pulls the active path set from here and pushes its
    access logs back in batches. Log ingestion is at-least-once: a failed
    batch is rolled back completely and the edge service resends it.
    """

    def __init__(self, db: Session):
        self.db = db

    def authenticate(self, token: Optional[str]) -> ApiKey:
        """
        Check a shared-secret token against the issued API keys.

        Raises:
            Unauthorized: no token supplied
            Forbidden: token was never issued
        """
        if not token:
            raise Unauthorized("Missing API token")

        try:
            api_key = self.db.query(ApiKey).filter(ApiKey.token == token).first()
        except SQLAlchemyError as e:
            logger.error("API token lookup failed: %s", e)
            raise TransientStoreFailure(str(e)) from e

        if api_key is None:
            raise Forbidden("Invalid API token")
        return api_key

    def get_active_paths(self) -> List[ActivePath]:
        """Every active path with its hostname, in one unpaginated list."""
        try:
            rows = (
                self.db.query(Path.short_path, Path.original_url, Domain.hostname)
                .join(Domain, Path.domain_id == Domain.id)
                .filter(Path.is_active == True)  # noqa: E712
                .order_by(Path.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Failed to load active paths: %s", e)
            raise TransientStoreFailure(str(e)) from e

        return [
            ActivePath(short_path=short_path, original_url=original_url, hostname=hostname)
            for short_path, original_url, hostname in rows
        ]

    def ingest_logs(self, entries: Sequence[LogEntry]) -> int:
        """
        Store a batch of access logs in a single transaction.

        Entries are processed in order. An entry whose hostname or
        short_path does not resolve is skipped without error: the edge
        service may still reference paths removed since its last sync.
        Entries without a timestamp get the batch's ingestion time.

        Returns:
            Number of access log rows stored

        Raises:
            TransientStoreFailure: the batch was rolled back; nothing was stored
        """
        ingested_at = datetime.now(timezone.utc).replace(tzinfo=None)
        resolved: Dict[Tuple[str, str], Optional[int]] = {}
        stored = 0

        try:
            for entry in entries:
                key = (entry.hostname, entry.short_path)
                if key not in resolved:
                    resolved[key] = self._resolve_path_id(entry.hostname, entry.short_path)
                path_id = resolved[key]
                if path_id is None:
                    continue

                self.db.add(AccessLog(
                    path_id=path_id,
                    ip_address=entry.ip_address,
                    user_agent=entry.user_agent,
                    country=entry.country,
                    timestamp=entry.timestamp or ingested_at,
                ))
                self.db.flush()
                stored += 1

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Log sync of %d entries rolled back: %s", len(entries), e)
            raise TransientStoreFailure(str(e)) from e

        logger.info(
            "Log sync stored %d of %d entries (%d skipped as unresolved)",
            stored, len(entries), len(entries) - stored,
        )
        return stored

    def _resolve_path_id(self, hostname: str, short_path: str) -> Optional[int]:
        """Resolve hostname -> domain -> path, or None if either is unknown."""
        domain = self.db.query(Domain).filter(Domain.hostname == hostname).first()
        if domain is None:
            return None

        path = (
            self.db.query(Path)
            .filter(Path.domain_id == domain.id, Path.short_path == short_path)
            .first()
        )
        return path.id if path is not None else None

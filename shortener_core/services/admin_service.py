import logging
import secrets
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shortener_core.config import settings
from shortener_core.exceptions import ConstraintViolation, TransientStoreFailure, ValidationError
from shortener_core.models import AccessLog, ApiKey, Domain, Path
from shortener_core.schemas.admin import DomainCreate, PathCreate

logger = logging.getLogger(__name__)


def generate_token(nbytes: Optional[int] = None) -> str:
    """Return an unpredictable hex token (2 characters per byte of entropy)."""
    return secrets.token_hex(nbytes or settings.token_bytes)


class AdminService:
    """
    Create/list operations behind the /admin endpoints.

    There is no business logic here beyond validation: uniqueness is left
    to the database and reported back as ConstraintViolation.
    """

    def __init__(self, db: Session):
        self.db = db

    def issue_token(self, name: Optional[str]) -> ApiKey:
        """Issue a new shared-secret token for the internal sync endpoints."""
        if not name:
            raise ValidationError("Name is required")

        api_key = ApiKey(name=name, token=generate_token())
        self._save(api_key)
        logger.info("Issued API token for %r", name)
        return api_key

    def create_domain(self, data: DomainCreate) -> Domain:
        domain = Domain(hostname=data.hostname)
        self._save(domain)
        return domain

    def create_path(self, data: PathCreate) -> Path:
        path = Path(
            domain_id=data.domain_id,
            short_path=data.short_path,
            original_url=data.original_url,
            is_active=data.is_active,
        )
        self._save(path)
        return path

    def get_access_history(self, path_id: int) -> List[AccessLog]:
        """
        Access logs of a path, newest first.

        An unknown path simply has no logs, so it returns an empty list.
        """
        try:
            return (
                self.db.query(AccessLog)
                .filter(AccessLog.path_id == path_id)
                .order_by(AccessLog.timestamp.desc(), AccessLog.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Failed to load access history for path %s: %s", path_id, e)
            raise TransientStoreFailure(str(e)) from e

    def _save(self, record) -> None:
        """Insert and commit one record, translating database errors."""
        try:
            self.db.add(record)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Rejected %s: %s", type(record).__name__, e.orig)
            raise ConstraintViolation(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to save %s: %s", type(record).__name__, e)
            raise TransientStoreFailure(str(e)) from e
        self.db.refresh(record)

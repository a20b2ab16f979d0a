from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shortener_core.database.connection import Base


class ApiKey(Base):
    """
    Shared-secret token issued to an edge service.

    Tokens are generated server-side and checked verbatim on every
    /internal request. They have no expiry and no scope.
    """
    __tablename__ = "api_keys"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # unique=True creates the index used by the token lookup
    token = Column(String(128), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

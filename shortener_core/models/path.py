from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shortener_core.database.connection import Base


class Path(Base):
    """
    Short path to original URL mapping, scoped to one Domain.

    The same short_path may exist under different domains, never twice
    under the same one.
    """
    __tablename__ = "paths"
    __table_args__ = (
        UniqueConstraint("domain_id", "short_path", name="uq_paths_domain_short_path"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    domain_id = Column(Integer, ForeignKey("domains.id"), nullable=False, index=True)
    short_path = Column(String(255), nullable=False)
    original_url = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default="1")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    domain = relationship("Domain", back_populates="paths")
    access_logs = relationship("AccessLog", back_populates="path")

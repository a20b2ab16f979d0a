from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shortener_core.database.connection import Base


class AccessLog(Base):
    """
    One recorded visit of a Path, pushed in bulk by the edge service.

    Rows are append-only: nothing in the service updates or deletes them.
    """
    __tablename__ = "access_logs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    path_id = Column(Integer, ForeignKey("paths.id"), nullable=False, index=True)
    ip_address = Column(String(255), nullable=True)
    user_agent = Column(Text, nullable=True)
    country = Column(String(255), nullable=True)
    # Naive UTC, set at ingestion (entry timestamp or batch ingestion time)
    timestamp = Column(DateTime, nullable=False, server_default=func.now(), index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    path = relationship("Path", back_populates="access_logs")

"""
Database engine, session factory and declarative base.

One engine (and therefore one connection pool) exists per process.
Request handlers never use it directly: they get a Session through get_db().
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from shortener_core.config import settings


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Build an engine for the given URL.

    SQLite gets check_same_thread disabled (FastAPI runs sync handlers in a
    threadpool) and foreign keys switched on, so it enforces the same
    constraints as MySQL.
    """
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = create_db_engine(settings.database_url_computed, echo=settings.db_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Yield a database session for one request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

"""
Service bootstrap.

Startup order:
1. Verify the database is reachable (exit 1 if not)
2. Reconcile the schema with the models (missing tables and columns only)
3. Serve HTTP on the configured port

Usage:
    python main.py
    shortener-core
"""

import logging
import sys
from typing import List

import uvicorn
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateColumn

from shortener_core.config import settings
from shortener_core.database.connection import Base, engine as default_engine

# Import models to ensure they're registered with Base
from shortener_core import models  # noqa: F401

logger = logging.getLogger(__name__)


def check_database(engine: Engine = default_engine) -> None:
    """Open a connection and run SELECT 1. Raises on failure."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def sync_schema(engine: Engine = default_engine) -> List[str]:
    """
    Bring the database schema up to the shape declared by the models.

    Creates missing tables, then adds columns that exist on a model but
    not in the live table. Never drops or alters existing columns.

    Returns:
        "table.column" names of the columns that were added
    """
    Base.metadata.create_all(bind=engine)

    added = []
    inspector = inspect(engine)
    with engine.begin() as conn:
        for table in Base.metadata.sorted_tables:
            existing = {col["name"] for col in inspector.get_columns(table.name)}
            for column in table.columns:
                if column.name in existing:
                    continue
                ddl = CreateColumn(column).compile(dialect=engine.dialect)
                conn.execute(text(f"ALTER TABLE {table.name} ADD COLUMN {ddl}"))
                added.append(f"{table.name}.{column.name}")
                logger.info("Added column %s.%s", table.name, column.name)
    return added


def init_database(engine: Engine = default_engine) -> None:
    """Check connectivity, then reconcile the schema."""
    logger.info("Checking dependencies...")
    check_database(engine)
    logger.info("✅ Database connection: SUCCESS")
    sync_schema(engine)
    logger.info("✅ Database schema: SYNCED")


def run(app=None) -> None:
    """Initialize the database and start the HTTP server; exit 1 if the database is unreachable."""
    if app is None:
        from main import app

    try:
        init_database()
    except SQLAlchemyError as e:
        logger.error("❌ Database connection: FAILED")
        logger.error(str(e))
        sys.exit(1)
    app.state.db_initialized = True

    logger.info("🚀 Core Service running on port %s", settings.core_port)
    uvicorn.run(app, host=settings.host, port=settings.core_port, log_level=settings.log_level.lower())

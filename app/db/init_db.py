"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
deployments run ``alembic upgrade head`` instead; this is for local
SQLite databases and throwaway environments.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create every table registered in :mod:`app.db.base`."""
    import app.db.base  # noqa: F401

    logger.info("Creating database tables", extra={"tables": sorted(SQLModel.metadata.tables)})
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    from app.core.config import settings
    from app.core.logging_config import setup_logging

    setup_logging(settings.LOG_LEVEL)
    init_db()

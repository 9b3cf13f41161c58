"""Atlas — Main application entry point."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from application import create_app
from database import init_db, upgrade_schema
from logging_config import init_logging

logger = logging.getLogger(__name__)


def run_migrations():
    """Run Alembic migrations on startup."""
    try:
        upgrade_schema()
    except Exception as e:
        logger.warning("Migration failed: %s", e)
        try:
            init_db()
        except SQLAlchemyError as exc:
            # Requests are served from the local fallback store until this is fixed
            logger.error("Record store not provisioned: %s", exc)


init_logging()

# Run database migrations
run_migrations()

app = create_app()

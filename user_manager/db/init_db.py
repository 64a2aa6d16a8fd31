"""
Database initialization helpers.

Applies the migrations in ``user_manager.db.migrations`` against the
configured engine. Run directly to migrate without starting the API:

    python -m user_manager.db.init_db
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine

from user_manager.core.config import settings
from user_manager.core.logger import setup_logging
from user_manager.db.migrations import run_migrations
from user_manager.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Bring the database schema up to date.
    """
    applied = run_migrations(engine or default_engine)
    if applied:
        logger.info(f"Applied migrations: {', '.join(applied)}")


if __name__ == "__main__":
    setup_logging(settings.log_level)
    init_db()

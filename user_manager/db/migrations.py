# File: user_manager/db/migrations.py

"""
Forward-only schema migrations.

Each migration is a ``(version, function)`` pair. Applied versions are
recorded in ``schema_migrations`` and skipped on later runs. Every migration
runs in its own transaction together with its log entry.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Tuple

from sqlalchemy import Column, DateTime, MetaData, String, Table, select
from sqlalchemy.engine import Connection, Engine

from user_manager.db.schema import users_table

logger = logging.getLogger(__name__)

log_metadata = MetaData()

schema_migrations = Table(
    "schema_migrations",
    log_metadata,
    Column("version", String(64), primary_key=True),
    Column("applied_at", DateTime(timezone=True), nullable=False),
)


def _create_users_table(conn: Connection) -> None:
    # Also creates ix_users_email_lower.
    users_table.create(conn, checkfirst=True)


MIGRATIONS: List[Tuple[str, Callable[[Connection], None]]] = [
    ("0001_create_users_table", _create_users_table),
]


def applied_versions(engine: Engine) -> List[str]:
    log_metadata.create_all(engine)
    with engine.connect() as conn:
        rows = conn.execute(select(schema_migrations.c.version).order_by(schema_migrations.c.version))
        return [row.version for row in rows]


def run_migrations(engine: Engine) -> List[str]:
    """
    Apply pending migrations in order.

    Returns the versions applied by this call.
    """
    done = set(applied_versions(engine))
    logger.info(f"Found {len(MIGRATIONS)} migrations, {len(done)} already applied.")

    applied = []
    for version, migrate in MIGRATIONS:
        if version in done:
            continue
        logger.info(f"Applying migration: {version}")
        with engine.begin() as conn:
            migrate(conn)
            conn.execute(
                schema_migrations.insert().values(version=version, applied_at=datetime.now(timezone.utc))
            )
        applied.append(version)

    logger.info("All migrations applied.")
    return applied

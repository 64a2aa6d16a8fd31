# File: tests/test_migrations.py

from sqlalchemy import inspect, text

from user_manager.db.migrations import MIGRATIONS, applied_versions, run_migrations
from user_manager.db.session import build_engine


def test_fresh_database_gets_every_migration():
    engine = build_engine("sqlite://")

    applied = run_migrations(engine)

    assert applied == [version for version, _ in MIGRATIONS]
    assert applied_versions(engine) == applied
    inspector = inspect(engine)
    assert {"users", "schema_migrations"} <= set(inspector.get_table_names())
    with engine.connect() as conn:
        indexes = conn.execute(text("SELECT name FROM sqlite_master WHERE type = 'index'")).scalars().all()
    assert "ix_users_email_lower" in indexes


def test_rerun_applies_nothing(engine):
    assert run_migrations(engine) == []

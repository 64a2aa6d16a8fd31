# File: user_manager/models/base.py

from sqlalchemy.orm import DeclarativeBase

from user_manager.db.schema import metadata


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Models map onto the tables declared in ``user_manager.db.schema``.
    """
    metadata = metadata

# File: user_manager/repositories/user_repository.py

"""
Persistence gateway for ``User`` rows.

Lookups that find nothing return ``None`` or an empty list. Storage errors
roll the session back and propagate.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_manager.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, user: User) -> User:
        # id 0 means "not persisted yet"; storage assigns the real one.
        user.id = None
        try:
            self.db.add(user)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error creating user {user.email}: {e}", exc_info=True)
            raise
        self.db.refresh(user)
        return user

    def update(self, user: User) -> Optional[User]:
        """
        Replace the stored row with ``user``'s fields.

        Returns ``None`` without writing anything when the id is unknown.
        """
        stored = self.db.get(User, user.id)
        if stored is None:
            return None

        stored.name = user.name
        stored.email = user.email
        stored.password = user.password
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error updating user {user.id}: {e}", exc_info=True)
            raise
        self.db.refresh(stored)
        return stored

    def remove(self, user_id: int) -> bool:
        try:
            result = self.db.execute(delete(User).where(User.id == user_id))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error removing user {user_id}: {e}", exc_info=True)
            raise
        return result.rowcount > 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_all(self) -> List[User]:
        return list(self.db.scalars(select(User).order_by(User.id)))

    def get_by_email(self, email: str) -> Optional[User]:
        # Unique on lower(email); ordering keeps first-match deterministic anyway.
        stmt = select(User).where(func.lower(User.email) == func.lower(email)).order_by(User.id).limit(1)
        return self.db.scalars(stmt).first()

    def search_by_name(self, name: str) -> List[User]:
        return self._search(User.name, name)

    def search_by_email(self, email: str) -> List[User]:
        return self._search(User.email, email)

    def _search(self, column, fragment: str) -> List[User]:
        pattern = func.lower(f"%{_escape_like(fragment)}%")
        stmt = select(User).where(func.lower(column).like(pattern, escape="\\")).order_by(User.id)
        return list(self.db.scalars(stmt))


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

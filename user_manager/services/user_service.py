# File: user_manager/services/user_service.py

"""
User workflow service.

Enforces the create/update business rules on top of the repository and the
password cipher:

  - email must not belong to another user
  - entity fields must validate
  - passwords are encrypted before they are stored

Every rule violation is raised as ``DomainError``. Anything else coming out
of the repository propagates untouched.
"""

import logging
from typing import List, Optional

from user_manager.core.crypto import PasswordCipher
from user_manager.core.exceptions import DomainError, ValidationError
from user_manager.models.user import User
from user_manager.repositories.user_repository import UserRepository
from user_manager.schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

EMAIL_ALREADY_REGISTERED = "Email informado já cadastrado!"
USER_NOT_FOUND = "Nenhum usuário encontrado com o ID informado!"
INVALID_FIELDS = "Alguns campos estão inválidos, por favor corrija-os!"


class UserService:
    def __init__(self, repository: UserRepository, cipher: PasswordCipher):
        self.repository = repository
        self.cipher = cipher

    def create(self, payload: UserCreate) -> UserRead:
        if self.repository.get_by_email(payload.email) is not None:
            logger.warning(f"Create rejected: email {payload.email} already registered")
            raise DomainError(EMAIL_ALREADY_REGISTERED)

        user = User(id=0, name=payload.name, email=payload.email, password=payload.password)
        self._validate(user)
        user.change_password(self.cipher.encrypt(user.password))

        created = self.repository.create(user)
        logger.info(f"User created with ID: {created.id}")
        return UserRead.model_validate(created)

    def update(self, payload: UserUpdate) -> UserRead:
        if self.repository.get_by_id(payload.id) is None:
            logger.warning(f"Update rejected: no user with ID {payload.id}")
            raise DomainError(USER_NOT_FOUND)

        owner = self.repository.get_by_email(payload.email)
        if owner is not None and owner.id != payload.id:
            logger.warning(f"Update rejected: email {payload.email} belongs to user {owner.id}")
            raise DomainError(EMAIL_ALREADY_REGISTERED)

        user = User(id=payload.id, name=payload.name, email=payload.email, password=payload.password)
        self._validate(user)
        user.change_password(self.cipher.encrypt(user.password))

        updated = self.repository.update(user)
        logger.info(f"User {payload.id} updated")
        return UserRead.model_validate(updated)

    def remove(self, user_id: int) -> bool:
        removed = self.repository.remove(user_id)
        if removed:
            logger.info(f"User {user_id} removed")
        return removed

    def get_by_id(self, user_id: int) -> Optional[UserRead]:
        return _to_read(self.repository.get_by_id(user_id))

    def get_by_email(self, email: str) -> Optional[UserRead]:
        return _to_read(self.repository.get_by_email(email))

    def get_all(self) -> List[UserRead]:
        return _to_read_list(self.repository.get_all())

    def search_by_name(self, name: str) -> List[UserRead]:
        return _to_read_list(self.repository.search_by_name(name))

    def search_by_email(self, email: str) -> List[UserRead]:
        return _to_read_list(self.repository.search_by_email(email))

    @staticmethod
    def _validate(user: User) -> None:
        try:
            user.validate()
        except ValidationError as e:
            logger.warning(f"Validation failed: {e.errors}")
            raise DomainError(INVALID_FIELDS, e.errors) from e


def _to_read(user: Optional[User]) -> Optional[UserRead]:
    return UserRead.model_validate(user) if user is not None else None


def _to_read_list(users: Optional[List[User]]) -> List[UserRead]:
    return [UserRead.model_validate(u) for u in users or []]

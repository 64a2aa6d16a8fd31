# File: user_manager/models/user.py

"""
User entity.

Maps onto ``users_table`` and checks its own field constraints before the
service layer persists it. Messages are user facing (pt-BR).
"""

import re
from typing import List

from user_manager.core.exceptions import ValidationError
from user_manager.db.schema import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, users_table
from user_manager.models.base import Base

NAME_MIN_LENGTH = 3
EMAIL_MIN_LENGTH = 10
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 30

EMAIL_PATTERN = re.compile(
    r"^([\w\-\.]+)@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.)|(([\w-]+\.)+))([a-zA-Z]{2,4}|[0-9]{1,3})(\]?)$"
)


class User(Base):
    __table__ = users_table

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"

    def validate(self) -> None:
        """
        Raise ``ValidationError`` with every violated rule.
        """
        errors = self._name_errors() + self._email_errors() + self._password_errors()
        if errors:
            raise ValidationError(errors)

    def change_password(self, password: str) -> None:
        self.password = password

    def _name_errors(self) -> List[str]:
        name = self.name or ""
        if not name.strip():
            return ["O nome não pode ser vazio."]
        if len(name) < NAME_MIN_LENGTH:
            return [f"O nome deve ter no mínimo {NAME_MIN_LENGTH} caracteres."]
        if len(name) > NAME_MAX_LENGTH:
            return [f"O nome deve ter no máximo {NAME_MAX_LENGTH} caracteres."]
        return []

    def _email_errors(self) -> List[str]:
        email = self.email or ""
        if not email.strip():
            return ["O email não pode ser vazio."]
        errors = []
        if len(email) < EMAIL_MIN_LENGTH:
            errors.append(f"O email deve ter no mínimo {EMAIL_MIN_LENGTH} caracteres.")
        if len(email) > EMAIL_MAX_LENGTH:
            errors.append(f"O email deve ter no máximo {EMAIL_MAX_LENGTH} caracteres.")
        if not EMAIL_PATTERN.fullmatch(email):
            errors.append("O email informado não é válido.")
        return errors

    def _password_errors(self) -> List[str]:
        password = self.password or ""
        if not password.strip():
            return ["A senha não pode ser vazia."]
        if len(password) < PASSWORD_MIN_LENGTH:
            return [f"A senha deve ter no mínimo {PASSWORD_MIN_LENGTH} caracteres."]
        if len(password) > PASSWORD_MAX_LENGTH:
            return [f"A senha deve ter no máximo {PASSWORD_MAX_LENGTH} caracteres."]
        return []

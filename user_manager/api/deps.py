# File: user_manager/api/deps.py

from collections.abc import Generator

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from user_manager.api.v1.responses import ApiError
from user_manager.core.crypto import PasswordCipher, get_cipher
from user_manager.core.security import decode_token
from user_manager.db.session import SessionLocal
from user_manager.repositories.user_repository import UserRepository
from user_manager.services.user_service import UserService

INVALID_TOKEN = "Token de acesso ausente ou inválido!"

_bearer = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_user_service(
    db: Session = Depends(get_db),
    cipher: PasswordCipher = Depends(get_cipher),
) -> UserService:
    return UserService(UserRepository(db), cipher)


async def require_token(request: Request) -> str:
    """
    Reject the request unless it carries a valid bearer token.

    Returns the token subject.
    """
    credentials: HTTPAuthorizationCredentials | None = await _bearer(request)
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise ApiError(status.HTTP_401_UNAUTHORIZED, INVALID_TOKEN)

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, INVALID_TOKEN)
    return payload["sub"]

# File: user_manager/core/security.py

"""
Access token helpers for the User Manager API.

Tokens are HS256 JWTs signed with ``JWT_SECRET_KEY``. The ``sub`` claim
carries the login that requested the token.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt

from user_manager.core.config import settings

logger = logging.getLogger(__name__)

ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
SECRET_KEY = settings.secret_key


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode: dict[str, Any] = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode["exp"] = expire
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """
    Decode and validate a token.

    Returns the payload when the signature and expiry are valid and a
    ``sub`` claim is present, otherwise ``None``. python-jose checks ``exp``
    itself and raises ``ExpiredSignatureError`` (a ``JWTError``).
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning(f"Token rejected: {e}")
        return None

    if not payload.get("sub"):
        logger.warning("Token rejected: missing 'sub' claim")
        return None
    return payload

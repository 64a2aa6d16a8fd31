# File: user_manager/services/auth_service.py

"""
Authentication service.

The API has a single set of client credentials (``AUTH_LOGIN`` /
``AUTH_PASSWORD``). A successful login returns a signed access token.
"""

import logging
import secrets
from typing import Optional

from user_manager.core.config import settings
from user_manager.core.security import ACCESS_TOKEN_EXPIRE_MINUTES, create_access_token
from user_manager.schemas.auth import Token

logger = logging.getLogger(__name__)


def authenticate(
    *,
    login: str,
    password: str,
) -> Optional[Token]:
    """
    Check the credentials and issue a token.

    Returns None when the login/password pair doesn't match.
    """
    login_ok = secrets.compare_digest(login.encode("utf-8"), settings.auth_login.encode("utf-8"))
    password_ok = secrets.compare_digest(password.encode("utf-8"), settings.auth_password.encode("utf-8"))
    if not (login_ok and password_ok):
        logger.warning(f"Login failed for: {login}")
        return None

    logger.info(f"Login successful for: {login}")
    return Token(
        token=create_access_token({"sub": login}),
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )

# File: user_manager/api/v1/routes_auth.py

"""
Auth API routes.

Exchanges the configured API credentials for a bearer token used by the
``/users`` routes.
"""

from fastapi import APIRouter, status

from user_manager.api.v1.responses import failure, success
from user_manager.schemas.auth import LoginRequest
from user_manager.schemas.result import Result
from user_manager.services.auth_service import authenticate

router = APIRouter()


@router.post("/login", response_model=Result, summary="Issue access token")
def login(payload: LoginRequest):
    token = authenticate(login=payload.login, password=payload.password)
    if token is None:
        return failure(status.HTTP_401_UNAUTHORIZED, "A combinação de login e senha está incorreta!")
    return success("Usuário autenticado com sucesso!", token)

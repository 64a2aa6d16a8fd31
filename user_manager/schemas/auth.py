# File: user_manager/schemas/auth.py

from pydantic import BaseModel


class LoginRequest(BaseModel):
    login: str
    password: str


class Token(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int

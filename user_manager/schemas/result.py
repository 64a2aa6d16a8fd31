# File: user_manager/schemas/result.py

from typing import Any, Optional

from pydantic import BaseModel


class Result(BaseModel):
    """Envelope shared by every API response."""

    message: str
    success: bool
    data: Optional[Any] = None

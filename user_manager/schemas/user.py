# File: user_manager/schemas/user.py

from pydantic import BaseModel, ConfigDict, Field

from user_manager.db.schema import MAX_ID


class UserBase(BaseModel):
    # Field rules are enforced by User.validate() so every violation is reported together.
    name: str
    email: str


class UserCreate(UserBase):
    password: str


class UserUpdate(UserCreate):
    id: int = Field(..., ge=0, le=MAX_ID)


class UserRead(UserBase):
    """Outward view of a user. Has no password field."""

    id: int

    model_config = ConfigDict(from_attributes=True)

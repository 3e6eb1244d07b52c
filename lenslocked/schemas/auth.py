"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserSignup(BaseModel):
    """User signup request.

    Email and password are checked by the user service so that signup
    errors come back as alerts rather than schema errors.
    """

    name: str | None = Field(None, max_length=255)
    email: str = Field("", max_length=255)
    password: str = Field("", max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
    email: str
    created_at: datetime

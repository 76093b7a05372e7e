"""Request/response schemas for auth endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from inkwell.schemas.base import CamelModel


class RegisterRequest(BaseModel):
    """Registration payload. Lengths and email format are checked by the users service."""

    username: str = Field(..., description="Unique username (3-30 chars)")
    email: str = Field(..., description="Unique email address (case-insensitive)")
    password: str = Field(..., description="Password (6-128 chars)")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., description="Email used at registration")
    password: str = Field(..., description="Password")


class UserPublic(CamelModel):
    """User as exposed to clients. Never carries the password or its hash."""

    id: uuid.UUID
    username: str
    email: str
    created_at: datetime


class AuthResponse(BaseModel):
    """Token plus user, returned by register and login."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    user: UserPublic


class ProfileResponse(BaseModel):
    user: UserPublic


class CurrentUser(BaseModel):
    """Authenticated identity resolved from the bearer token, injected into handlers."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    username: str
    email: str
    created_at: datetime

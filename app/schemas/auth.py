"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["admin", "user"]


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=3, max_length=254, description="Account email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class RegisterRequest(BaseModel):
    """New account (admin only). Email is matched case-insensitively."""

    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6, max_length=128)
    first_name: str | None = Field(default=None, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    role: Role = "user"


class UpdateEmailRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)


class UpdatePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: str = Field(..., min_length=6, max_length=128)


class AccountProfile(BaseModel):
    """Public account fields; never includes the password hash."""

    model_config = {"from_attributes": True}

    id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None
    full_name: str = ""
    role: str
    is_active: bool = True
    last_login: datetime | None = None
    created_at: datetime | None = None


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: AccountProfile


class CurrentUser(BaseModel):
    """Authenticated account (id, email, role) for dependency injection."""

    model_config = {"from_attributes": True}

    id: int
    email: str
    role: str


class EmailResponse(BaseModel):
    email: str


class UsersListResponse(BaseModel):
    """Response for GET /auth/users (admin only)."""

    users: list[AccountProfile]

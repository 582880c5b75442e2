"""Request/response schemas for the contact form and contact section settings."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.core.security import is_valid_email, normalize_email
from app.schemas.common import Pagination

ContactStatus = Literal["unread", "read", "replied", "archived"]


def _validate_email(value: str) -> str:
    normalized = normalize_email(value)
    if not is_valid_email(normalized):
        raise ValueError("Please enter a valid email")
    return normalized


class ContactCreate(BaseModel):
    """Public contact form submission."""

    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: str = Field(..., max_length=254)
    subject: str = Field(..., min_length=5, max_length=100)
    message: str = Field(..., min_length=10, max_length=1000)

    @field_validator("first_name", "last_name", "subject", "message", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)


class ContactSubmitted(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    first_name: str
    last_name: str
    email: str
    subject: str
    created_at: datetime | None = None


class ContactOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    subject: str
    message: str
    status: str
    ip_address: str | None = None
    user_agent: str | None = None
    replied_at: datetime | None = None
    reply_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ContactListResponse(BaseModel):
    items: list[ContactOut]
    pagination: Pagination


class ContactStatusUpdate(BaseModel):
    status: ContactStatus
    reply_message: str | None = Field(default=None, min_length=1, max_length=1000)


class ContactSettingsIn(BaseModel):
    email: str = Field(..., min_length=1, max_length=254)
    phone: str = Field(default="", max_length=64)
    address: str = Field(default="", max_length=255)
    city: str = Field(default="", max_length=255)
    country: str = Field(default="", max_length=255)
    contact_title: str = Field(..., min_length=1, max_length=255)
    contact_subtitle: str = Field(default="", max_length=255)
    contact_description: str = ""
    form_enabled: bool = True
    auto_reply_enabled: bool = False
    auto_reply_message: str = ""


class ContactSettingsOut(ContactSettingsIn):
    model_config = {"from_attributes": True}

    id: int
    updated_at: datetime | None = None

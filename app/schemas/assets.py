"""Request/response schemas for image and resume endpoints (metadata only, never bytes)."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import Pagination


class ImageMetadata(BaseModel):
    """Image metadata plus its retrieval URL."""

    model_config = {"from_attributes": True}

    id: int
    filename: str
    original_name: str
    mime_type: str
    size: int = Field(..., ge=1)
    url: str
    uploaded_by: int
    project_id: int | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ImageListResponse(BaseModel):
    items: list[ImageMetadata]
    pagination: Pagination


class ImageUpdateRequest(BaseModel):
    """Metadata edit. Send project_id: null to detach the image from its project."""

    filename: str | None = Field(default=None, min_length=1, max_length=512)
    project_id: int | None = None


class ResumeMetadata(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    filename: str
    original_name: str
    mime_type: str
    size: int
    is_active: bool
    url: str
    upload_date: datetime | None = None


class ResumeListResponse(BaseModel):
    items: list[ResumeMetadata]
    pagination: Pagination


class ActiveResumeResponse(BaseModel):
    """Public info about the active resume; resume is null when none is active."""

    resume: ResumeMetadata | None = None
    message: str | None = None

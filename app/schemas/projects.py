"""Request/response schemas for projects and the projects section settings."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.models.project import PLACEHOLDER_IMAGE

ProjectStatus = Literal["active", "inactive", "archived"]


def _validate_optional_url(value: str | None) -> str | None:
    """Empty is allowed; anything else must be an http(s) URL."""
    if value is None:
        return None
    value = value.strip()
    if value and not value.startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return value


class ProjectCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10, max_length=500)
    technologies: list[str] = Field(..., min_length=1)
    github: str = Field(default="", max_length=1024)
    live: str = Field(default="", max_length=1024)
    image: str = Field(default=PLACEHOLDER_IMAGE, max_length=1024)
    featured: bool = False
    order: int = Field(default=0, ge=0)

    @field_validator("github", "live")
    @classmethod
    def validate_urls(cls, v: str | None) -> str | None:
        return _validate_optional_url(v)


class ProjectUpdate(BaseModel):
    """Partial update; only fields present in the body change."""

    title: str | None = Field(default=None, min_length=3, max_length=100)
    description: str | None = Field(default=None, min_length=10, max_length=500)
    technologies: list[str] | None = Field(default=None, min_length=1)
    github: str | None = Field(default=None, max_length=1024)
    live: str | None = Field(default=None, max_length=1024)
    image: str | None = Field(default=None, max_length=1024)
    featured: bool | None = None
    order: int | None = Field(default=None, ge=0)
    status: ProjectStatus | None = None

    @field_validator("github", "live")
    @classmethod
    def validate_urls(cls, v: str | None) -> str | None:
        return _validate_optional_url(v)


class ProjectOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    description: str
    technologies: list[str]
    github: str
    live: str
    featured: bool
    image: str
    order: int
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectListResponse(BaseModel):
    items: list[ProjectOut]
    count: int = Field(..., ge=0, description="Total matching projects before limit")


class ProjectsSettingsIn(BaseModel):
    projects_title: str = Field(..., min_length=1, max_length=255)
    projects_subtitle: str = Field(..., min_length=1)
    view_all_button_text: str = Field(default="View All Projects", max_length=255)
    view_all_button_url: str = Field(default="/projects", max_length=1024)
    show_view_all_button: bool = True
    max_featured_projects: int = Field(default=6, ge=1, le=12)


class ProjectsSettingsOut(ProjectsSettingsIn):
    model_config = {"from_attributes": True}

    id: int
    updated_at: datetime | None = None

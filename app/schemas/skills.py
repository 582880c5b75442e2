"""Request/response schemas for skill categories."""

from datetime import datetime

from pydantic import BaseModel, Field


class SkillEntry(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    level: int = Field(..., ge=0, le=100)
    icon: str | None = None


class SkillCategoryCreate(BaseModel):
    category: str = Field(..., min_length=2, max_length=50)
    skills: list[SkillEntry] = Field(..., min_length=1)
    order: int = Field(default=0, ge=0)


class SkillCategoryUpdate(BaseModel):
    category: str | None = Field(default=None, min_length=2, max_length=50)
    skills: list[SkillEntry] | None = Field(default=None, min_length=1)
    order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class SkillCategoryOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    category: str
    skills: list[SkillEntry]
    order: int
    is_active: bool
    additional_technologies: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SkillListResponse(BaseModel):
    items: list[SkillCategoryOut]
    count: int


class AdditionalTechnologies(BaseModel):
    additional_technologies: list[str]

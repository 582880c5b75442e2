"""Request/response schemas for the about and footer documents."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.settings import DEFAULT_ABOUT_HIGHLIGHTS, DEFAULT_TECHNOLOGY_TAGS


class AboutIn(BaseModel):
    """Full replacement of the about document; name, title, description, email, about_text required."""

    name: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    subtitle: str = Field(default="", max_length=255)
    description: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1, max_length=254)
    location: str = Field(default="", max_length=255)
    github: str = Field(default="", max_length=1024)
    linkedin: str = Field(default="", max_length=1024)
    twitter: str = Field(default="", max_length=1024)
    website: str = Field(default="", max_length=1024)
    avatar: str = Field(default="", max_length=1024)
    about_text: str = Field(..., min_length=1)
    about_section_title: str = Field(default="Full-Stack Software Engineer", max_length=255)
    about_highlights: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ABOUT_HIGHLIGHTS)
    )
    experience: str = Field(default="", max_length=255)
    education: str = Field(default="", max_length=255)
    technology_tags: list[str] = Field(default_factory=lambda: list(DEFAULT_TECHNOLOGY_TAGS))
    projects_completed: str = Field(default="25+", max_length=32)
    years_experience: str = Field(default="5+", max_length=32)
    technologies: str = Field(default="15+", max_length=32)
    certifications: str = Field(default="8", max_length=32)


class AboutOut(AboutIn):
    model_config = {"from_attributes": True}

    id: int
    updated_at: datetime | None = None


class SocialLink(BaseModel):
    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    icon: str = ""


class QuickLink(BaseModel):
    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class ContactInfo(BaseModel):
    email: str = ""
    phone: str = ""
    address: str = ""


class FooterIn(BaseModel):
    copyright: str = Field(..., min_length=1, max_length=255)
    tagline: str = Field(default="", max_length=255)
    description: str = ""
    social_links: list[SocialLink] = Field(default_factory=list)
    quick_links: list[QuickLink] = Field(default_factory=list)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)


class FooterOut(FooterIn):
    model_config = {"from_attributes": True}

    id: int
    updated_at: datetime | None = None

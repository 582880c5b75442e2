"""Pydantic request/response schemas."""

from app.schemas.analytics import AnalyticsSummary, TrackViewRequest, TrackViewResponse
from app.schemas.assets import (
    ActiveResumeResponse,
    ImageListResponse,
    ImageMetadata,
    ResumeListResponse,
    ResumeMetadata,
)
from app.schemas.auth import AccountProfile, CurrentUser, LoginRequest, TokenResponse
from app.schemas.common import MessageResponse, Pagination
from app.schemas.contact import ContactCreate, ContactOut, ContactSettingsOut
from app.schemas.content import AboutOut, FooterOut
from app.schemas.dashboard import ActivityItem, DashboardStats, SystemHealth
from app.schemas.health import HealthResponse
from app.schemas.projects import ProjectOut, ProjectsSettingsOut
from app.schemas.skills import SkillCategoryOut

__all__ = [
    "AboutOut",
    "AccountProfile",
    "ActiveResumeResponse",
    "ActivityItem",
    "AnalyticsSummary",
    "ContactCreate",
    "ContactOut",
    "ContactSettingsOut",
    "CurrentUser",
    "DashboardStats",
    "FooterOut",
    "HealthResponse",
    "ImageListResponse",
    "ImageMetadata",
    "LoginRequest",
    "MessageResponse",
    "Pagination",
    "ProjectOut",
    "ProjectsSettingsOut",
    "ResumeListResponse",
    "ResumeMetadata",
    "SkillCategoryOut",
    "SystemHealth",
    "TokenResponse",
    "TrackViewRequest",
    "TrackViewResponse",
]

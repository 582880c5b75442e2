"""Response schemas for the admin dashboard."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class DashboardOverview(BaseModel):
    total_projects: int
    featured_projects: int
    active_projects: int
    total_skills: int
    active_skills: int
    total_contacts: int
    unread_contacts: int
    total_users: int
    portfolio_views: int = Field(description="Views in the last 30 days")


class RecentCounts(BaseModel):
    """Records created in the last 7 days."""

    projects: int
    contacts: int
    users: int


class StatusBreakdown(BaseModel):
    contacts: dict[str, int]
    projects: dict[str, int]


class SkillLevel(BaseModel):
    name: str
    level: int


class TopSkillCategory(BaseModel):
    category: str
    skills: list[SkillLevel]
    avg_level: float


class DashboardStats(BaseModel):
    overview: DashboardOverview
    recent: RecentCounts
    breakdown: StatusBreakdown
    top_skills: list[TopSkillCategory]


class ActivityItem(BaseModel):
    type: Literal["project", "contact", "user", "view"]
    action: str
    title: str
    subtitle: str | None = None
    status: str | None = None
    role: str | None = None
    timestamp: datetime


class DatabaseHealth(BaseModel):
    status: Literal["connected", "disconnected"]
    response_time_ms: float | None = None


class SystemHealth(BaseModel):
    status: Literal["healthy", "unhealthy"]
    timestamp: datetime
    environment: str
    database: DatabaseHealth

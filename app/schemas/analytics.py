"""Request/response schemas for view tracking and analytics."""

from typing import Literal

from pydantic import BaseModel, Field

AnalyticsPeriod = Literal["1d", "7d", "30d", "90d"]


class TrackViewRequest(BaseModel):
    page: str = Field(default="home", min_length=1, max_length=255)
    session_id: str = Field(..., min_length=1, max_length=255)


class TrackViewResponse(BaseModel):
    is_unique: bool


class PageViewCount(BaseModel):
    page: str
    count: int
    unique_count: int


class DailyViewCount(BaseModel):
    date: str = Field(description="UTC day, YYYY-MM-DD")
    count: int
    unique_count: int


class ReferrerCount(BaseModel):
    referrer: str
    count: int


class AnalyticsSummary(BaseModel):
    period: AnalyticsPeriod
    total_views: int
    unique_views: int
    page_views: list[PageViewCount]
    daily_views: list[DailyViewCount]
    top_referrers: list[ReferrerCount]

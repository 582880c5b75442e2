"""Admin dashboard: aggregate stats, recent activity feed, system health."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.config import settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.dashboard import ActivityItem, DashboardStats, SystemHealth
from app.services.dashboard import build_stats, recent_activity, system_health

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> DashboardStats:
    return build_stats(db)


@router.get("/recent-activity", response_model=list[ActivityItem])
def get_recent_activity(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int, Query(ge=1, le=50)] = 10,
) -> list[ActivityItem]:
    """Newest projects, messages, accounts and views merged into one feed."""
    return recent_activity(db, limit=limit)


@router.get("/health", response_model=SystemHealth)
def get_system_health(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> SystemHealth:
    return system_health(db, environment=settings.APP_ENV)

"""View tracking (public) and the analytics summary (admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.api.v1.contact import client_ip
from app.core.database import get_db
from app.schemas.analytics import (
    AnalyticsPeriod,
    AnalyticsSummary,
    TrackViewRequest,
    TrackViewResponse,
)
from app.schemas.auth import CurrentUser
from app.services.analytics import summarize, track_view

router = APIRouter()


@router.post(
    "/track-view",
    response_model=TrackViewResponse,
    status_code=status.HTTP_201_CREATED,
)
def record_view(
    body: TrackViewRequest,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> TrackViewResponse:
    """Record a page view. Repeat visits from one IP and session within 24h are not unique."""
    view = track_view(
        db,
        ip_address=client_ip(request) or "unknown",
        user_agent=request.headers.get("user-agent", "")[:512],
        referrer=request.headers.get("referer", "")[:1024],
        page=body.page,
        session_id=body.session_id,
    )
    return TrackViewResponse(is_unique=view.is_unique)


@router.get("", response_model=AnalyticsSummary)
def get_analytics(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    period: AnalyticsPeriod = "7d",
) -> AnalyticsSummary:
    return summarize(db, period=period)

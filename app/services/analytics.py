"""Portfolio view tracking and aggregate analytics."""

from datetime import UTC, datetime, timedelta

from sqlalchemy import Integer, cast, func
from sqlalchemy.orm import Session

from app.models import PortfolioView
from app.schemas.analytics import (
    AnalyticsPeriod,
    AnalyticsSummary,
    DailyViewCount,
    PageViewCount,
    ReferrerCount,
)

# A repeat visit from the same ip+session inside this window is not unique.
UNIQUE_VIEW_WINDOW = timedelta(hours=24)
DAILY_VIEWS_WINDOW = timedelta(days=7)
TOP_REFERRERS_LIMIT = 10

PERIODS: dict[str, timedelta] = {
    "1d": timedelta(days=1),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
    "90d": timedelta(days=90),
}


def track_view(
    session: Session,
    ip_address: str,
    user_agent: str,
    referrer: str,
    page: str,
    session_id: str,
    now: datetime | None = None,
) -> PortfolioView:
    """Record one view; is_unique is False when ip+session was seen in the last 24h."""
    now = now or datetime.now(UTC)
    seen = (
        session.query(PortfolioView.id)
        .filter(
            PortfolioView.ip_address == ip_address,
            PortfolioView.session_id == session_id,
            PortfolioView.timestamp >= now - UNIQUE_VIEW_WINDOW,
        )
        .first()
    )
    view = PortfolioView(
        ip_address=ip_address,
        user_agent=user_agent or "",
        referrer=referrer or "",
        page=page or "home",
        session_id=session_id,
        timestamp=now,
        is_unique=seen is None,
    )
    session.add(view)
    session.commit()
    session.refresh(view)
    return view


def summarize(
    session: Session, period: AnalyticsPeriod = "7d", now: datetime | None = None
) -> AnalyticsSummary:
    """Totals, per-page counts, last-7-day daily counts and top referrers for a period."""
    now = now or datetime.now(UTC)
    start = now - PERIODS.get(period, PERIODS["7d"])
    unique_sum = func.sum(cast(PortfolioView.is_unique, Integer))
    in_period = PortfolioView.timestamp >= start

    total_views = session.query(func.count(PortfolioView.id)).filter(in_period).scalar()
    unique_views = (
        session.query(func.count(PortfolioView.id))
        .filter(in_period, PortfolioView.is_unique.is_(True))
        .scalar()
    )

    count_col = func.count(PortfolioView.id).label("count")
    page_rows = (
        session.query(PortfolioView.page, count_col, unique_sum)
        .filter(in_period)
        .group_by(PortfolioView.page)
        .order_by(count_col.desc(), PortfolioView.page)
        .all()
    )

    day = func.date(PortfolioView.timestamp)
    daily_rows = (
        session.query(day, func.count(PortfolioView.id), unique_sum)
        .filter(PortfolioView.timestamp >= now - DAILY_VIEWS_WINDOW)
        .group_by(day)
        .order_by(day)
        .all()
    )

    referrer_count = func.count(PortfolioView.id).label("count")
    referrer_rows = (
        session.query(PortfolioView.referrer, referrer_count)
        .filter(in_period, PortfolioView.referrer != "")
        .group_by(PortfolioView.referrer)
        .order_by(referrer_count.desc(), PortfolioView.referrer)
        .limit(TOP_REFERRERS_LIMIT)
        .all()
    )

    return AnalyticsSummary(
        period=period,
        total_views=total_views or 0,
        unique_views=unique_views or 0,
        page_views=[
            PageViewCount(page=p, count=c, unique_count=int(u or 0))
            for p, c, u in page_rows
        ],
        daily_views=[
            DailyViewCount(date=str(d), count=c, unique_count=int(u or 0))
            for d, c, u in daily_rows
        ],
        top_referrers=[ReferrerCount(referrer=r, count=c) for r, c in referrer_rows],
    )

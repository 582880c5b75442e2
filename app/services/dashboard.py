"""Admin dashboard aggregates: counts, status breakdowns, top skills, activity feed."""

import time
from datetime import UTC, datetime, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.database import check_db_connected
from app.models import Contact, PortfolioView, Project, Skill, User
from app.models.base import as_utc
from app.schemas.dashboard import (
    ActivityItem,
    DashboardOverview,
    DashboardStats,
    DatabaseHealth,
    RecentCounts,
    SkillLevel,
    StatusBreakdown,
    SystemHealth,
    TopSkillCategory,
)

CONTACT_STATUSES = ("unread", "read", "replied", "archived")
PROJECT_STATUSES = ("active", "inactive", "archived")
TOP_SKILL_CATEGORIES = 5
VIEWS_WINDOW = timedelta(days=30)
RECENT_WINDOW = timedelta(days=7)


def _count(session: Session, model: type, *criteria) -> int:
    return session.query(func.count(model.id)).filter(*criteria).scalar() or 0


def _status_breakdown(session: Session, model: type, statuses: tuple[str, ...]) -> dict[str, int]:
    breakdown = dict.fromkeys(statuses, 0)
    rows = session.query(model.status, func.count(model.id)).group_by(model.status).all()
    for status, count in rows:
        breakdown[status] = count
    return breakdown


def _top_skills(session: Session) -> list[TopSkillCategory]:
    """Active categories ranked by the average level of their skills."""
    ranked: list[TopSkillCategory] = []
    for row in session.query(Skill).filter(Skill.is_active.is_(True)).all():
        skills = [
            SkillLevel(name=str(s.get("name", "")), level=int(s.get("level", 0)))
            for s in (row.skills or [])
            if isinstance(s, dict)
        ]
        if not skills:
            continue
        avg = sum(s.level for s in skills) / len(skills)
        ranked.append(TopSkillCategory(category=row.category, skills=skills, avg_level=avg))
    ranked.sort(key=lambda c: c.avg_level, reverse=True)
    return ranked[:TOP_SKILL_CATEGORIES]


def build_stats(session: Session, now: datetime | None = None) -> DashboardStats:
    now = now or datetime.now(UTC)
    recent_since = now - RECENT_WINDOW
    overview = DashboardOverview(
        total_projects=_count(session, Project),
        featured_projects=_count(session, Project, Project.featured.is_(True)),
        active_projects=_count(session, Project, Project.status == "active"),
        total_skills=_count(session, Skill),
        active_skills=_count(session, Skill, Skill.is_active.is_(True)),
        total_contacts=_count(session, Contact),
        unread_contacts=_count(session, Contact, Contact.status == "unread"),
        total_users=_count(session, User),
        portfolio_views=_count(
            session, PortfolioView, PortfolioView.timestamp >= now - VIEWS_WINDOW
        ),
    )
    recent = RecentCounts(
        projects=_count(session, Project, Project.created_at >= recent_since),
        contacts=_count(session, Contact, Contact.created_at >= recent_since),
        users=_count(session, User, User.created_at >= recent_since),
    )
    breakdown = StatusBreakdown(
        contacts=_status_breakdown(session, Contact, CONTACT_STATUSES),
        projects=_status_breakdown(session, Project, PROJECT_STATUSES),
    )
    return DashboardStats(
        overview=overview,
        recent=recent,
        breakdown=breakdown,
        top_skills=_top_skills(session),
    )


def recent_activity(session: Session, limit: int = 10) -> list[ActivityItem]:
    """Newest projects, contacts, users and views merged into one feed."""
    items: list[ActivityItem] = []
    for p in session.query(Project).order_by(Project.created_at.desc()).limit(limit):
        items.append(
            ActivityItem(
                type="project",
                action="created",
                title=p.title,
                status=p.status,
                timestamp=as_utc(p.created_at),
            )
        )
    for c in session.query(Contact).order_by(Contact.created_at.desc()).limit(limit):
        items.append(
            ActivityItem(
                type="contact",
                action="received",
                title=c.full_name,
                subtitle=c.subject,
                status=c.status,
                timestamp=as_utc(c.created_at),
            )
        )
    for u in session.query(User).order_by(User.created_at.desc()).limit(limit):
        items.append(
            ActivityItem(
                type="user",
                action="registered",
                title=u.full_name or u.email,
                role=u.role,
                timestamp=as_utc(u.created_at),
            )
        )
    views = session.query(PortfolioView).order_by(PortfolioView.timestamp.desc()).limit(limit)
    for v in views:
        items.append(
            ActivityItem(
                type="view",
                action="visited",
                title=f"Portfolio {v.page}",
                subtitle=f"IP: {v.ip_address}",
                timestamp=as_utc(v.timestamp),
            )
        )
    items.sort(key=lambda a: a.timestamp, reverse=True)
    return items[:limit]


def system_health(session: Session, environment: str) -> SystemHealth:
    """Database round-trip check; status is unhealthy when the query fails."""
    started = time.perf_counter()
    connected = check_db_connected(session)
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    return SystemHealth(
        status="healthy" if connected else "unhealthy",
        timestamp=datetime.now(UTC),
        environment=environment,
        database=DatabaseHealth(
            status="connected" if connected else "disconnected",
            response_time_ms=elapsed_ms if connected else None,
        ),
    )

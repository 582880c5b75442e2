"""Content queries: singleton documents, project and skill listings, contact messages.

A singleton table holds one row keyed by SINGLETON_KEY; the unique constraint on
singleton_key rejects a second row. Reads create the default row lazily. When two
first reads race, the loser's insert fails on the constraint and it re-reads the
winner's row.
"""

import copy
import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Contact, Project, Skill
from app.models.settings import (
    DEFAULT_ABOUT_HIGHLIGHTS,
    DEFAULT_TECHNOLOGY_TAGS,
    SINGLETON_KEY,
)
from app.services.errors import NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

GENERAL_SKILLS_CATEGORY = "General Skills"

# Documents created on first read when the table is empty.
ABOUT_DEFAULTS: dict[str, Any] = {
    "name": "Your Name",
    "title": "Full Stack Developer",
    "subtitle": "Passionate about creating amazing web experiences",
    "description": "A dedicated developer with expertise in modern web technologies.",
    "email": "your.email@example.com",
    "about_text": (
        "I am a passionate developer with experience in building modern web "
        "applications. I love working with cutting-edge technologies and creating "
        "user-friendly solutions."
    ),
    "about_section_title": "Full-Stack Software Engineer",
    "about_highlights": DEFAULT_ABOUT_HIGHLIGHTS,
    "experience": "5+ years of experience in web development",
    "education": "Bachelor's degree in Computer Science",
    "technology_tags": DEFAULT_TECHNOLOGY_TAGS,
    "projects_completed": "25+",
    "years_experience": "5+",
    "technologies": "15+",
    "certifications": "8",
}

FOOTER_DEFAULTS: dict[str, Any] = {
    "copyright": "\u00a9 2025 Your Name. All rights reserved.",
    "tagline": "Building amazing digital experiences",
    "description": "Passionate developer creating innovative solutions for the web.",
    "social_links": [],
    "quick_links": [],
    "contact_info": {"email": "", "phone": "", "address": ""},
}

CONTACT_SETTINGS_DEFAULTS: dict[str, Any] = {
    "email": "your.email@example.com",
    "contact_title": "Get In Touch",
    "contact_subtitle": "Let's work together",
    "contact_description": (
        "I'm always interested in hearing about new opportunities and exciting projects."
    ),
    "form_enabled": True,
    "auto_reply_enabled": False,
    "auto_reply_message": "Thank you for your message! I'll get back to you soon.",
}

PROJECTS_SETTINGS_DEFAULTS: dict[str, Any] = {
    "projects_title": "Featured Projects",
    "projects_subtitle": (
        "A showcase of my recent work, demonstrating my skills in full-stack "
        "development and problem-solving."
    ),
    "view_all_button_text": "View All Projects",
    "view_all_button_url": "/projects",
    "show_view_all_button": True,
    "max_featured_projects": 6,
}


def _find(session: Session, model: type[ModelT]) -> ModelT | None:
    return (
        session.query(model)
        .filter(model.singleton_key == SINGLETON_KEY)  # type: ignore[attr-defined]
        .first()
    )


def get_or_create_singleton(
    session: Session, model: type[ModelT], defaults: Mapping[str, Any]
) -> ModelT:
    """Return the singleton row, inserting one built from defaults if none exists."""
    row = _find(session, model)
    if row is not None:
        return row
    row = model(singleton_key=SINGLETON_KEY, **copy.deepcopy(dict(defaults)))
    session.add(row)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        existing = _find(session, model)
        if existing is None:
            raise
        return existing
    session.refresh(row)
    logger.info("Created default %s document", model.__tablename__)  # type: ignore[attr-defined]
    return row


def save_singleton(
    session: Session,
    model: type[ModelT],
    values: Mapping[str, Any],
    defaults: Mapping[str, Any],
) -> ModelT:
    """Replace the singleton's fields with values (missing keys fall back to defaults)."""
    row = get_or_create_singleton(session, model, defaults)
    merged = {**copy.deepcopy(dict(defaults)), **dict(values)}
    apply_changes(row, merged)
    session.commit()
    session.refresh(row)
    return row


def apply_changes(row: Any, values: Mapping[str, Any]) -> Any:
    """Set each attribute in values on row (partial update)."""
    for key, value in values.items():
        setattr(row, key, value)
    return row


def get_or_404(session: Session, model: type[ModelT], row_id: int, label: str) -> ModelT:
    row = session.get(model, row_id)
    if row is None:
        raise NotFoundError(f"{label} not found")
    return row


def list_projects(
    session: Session,
    status: str = "active",
    featured: bool | None = None,
    limit: int | None = None,
) -> tuple[list[Project], int]:
    """
    Projects ordered by order then newest, plus the count before limit.

    status "all" disables the status filter.
    """
    query = session.query(Project)
    if status != "all":
        query = query.filter(Project.status == status)
    if featured:
        query = query.filter(Project.featured.is_(True))
    count = query.count()
    query = query.order_by(Project.order, Project.created_at.desc(), Project.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all(), count


def list_skills(
    session: Session, category: str | None = None, limit: int | None = None
) -> tuple[list[Skill], int]:
    """Active skill categories ordered by order then newest, plus the count before limit."""
    query = session.query(Skill).filter(Skill.is_active.is_(True))
    if category:
        query = query.filter(Skill.category == category)
    count = query.count()
    query = query.order_by(Skill.order, Skill.created_at.desc(), Skill.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all(), count


def get_additional_technologies(session: Session) -> list[str]:
    """The extra technology list is stored on the first skill category."""
    row = session.query(Skill).order_by(Skill.id).first()
    return list(row.additional_technologies or []) if row is not None else []


def set_additional_technologies(session: Session, technologies: list[str]) -> list[str]:
    row = session.query(Skill).order_by(Skill.id).first()
    if row is None:
        row = Skill(category=GENERAL_SKILLS_CATEGORY, skills=[], order=0, is_active=True)
        session.add(row)
    row.additional_technologies = list(technologies)
    session.commit()
    session.refresh(row)
    return list(row.additional_technologies)


def submit_contact(
    session: Session,
    values: Mapping[str, Any],
    ip_address: str | None,
    user_agent: str | None,
) -> Contact:
    contact = Contact(
        **dict(values),
        status="unread",
        ip_address=ip_address,
        user_agent=(user_agent or "")[:512] or None,
    )
    session.add(contact)
    session.commit()
    session.refresh(contact)
    logger.info("Contact message received", extra={"contact_id": contact.id})
    return contact


def list_contacts(
    session: Session, status: str | None = None, page: int = 1, page_size: int = 50
) -> tuple[list[Contact], int]:
    query = session.query(Contact)
    if status:
        query = query.filter(Contact.status == status)
    total = query.count()
    items = (
        query.order_by(Contact.created_at.desc(), Contact.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return items, total


def set_contact_status(
    session: Session,
    contact_id: int,
    status: str,
    reply_message: str | None = None,
    now: datetime | None = None,
) -> Contact:
    """Change a message's status; marking it replied with a message stamps replied_at."""
    contact = get_or_404(session, Contact, contact_id, "Contact message")
    contact.status = status
    if status == "replied" and reply_message:
        contact.reply_message = reply_message
        contact.replied_at = now or datetime.now(UTC)
    session.commit()
    session.refresh(contact)
    return contact

"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.contact import Contact
from app.models.image import Image
from app.models.portfolio_view import PortfolioView
from app.models.project import Project
from app.models.resume import Resume
from app.models.settings import About, ContactSettings, Footer, ProjectsSettings
from app.models.skill import Skill
from app.models.user import User

__all__ = [
    "About",
    "Base",
    "Contact",
    "ContactSettings",
    "Footer",
    "Image",
    "PortfolioView",
    "Project",
    "ProjectsSettings",
    "Resume",
    "Skill",
    "User",
]

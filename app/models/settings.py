"""ORM models for singleton content documents (about, footer, contact and projects settings).

Each table holds at most one row: singleton_key is unique and always SINGLETON_KEY.
"""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.models.base import Base, JSONType, TimestampMixin

SINGLETON_KEY = "default"

DEFAULT_ABOUT_HIGHLIGHTS = [
    "Full-Stack Expertise: Proficient in both frontend and backend development",
    "Modern Technologies: Experience with React, Node.js, TypeScript, and cloud platforms",
    "Problem Solving: Strong analytical skills and creative approach to technical challenges",
    "Team Collaboration: Excellent communication and collaboration skills",
]
DEFAULT_TECHNOLOGY_TAGS = ["React", "Node.js", "TypeScript", "Next.js", "Express.js"]


class SingletonMixin:
    singleton_key = Column(
        String(32), nullable=False, unique=True, default=SINGLETON_KEY
    )


class About(SingletonMixin, TimestampMixin, Base):
    """Owner profile shown in the hero and about sections."""

    __tablename__ = "about"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    subtitle = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False)
    email = Column(String(254), nullable=False)
    location = Column(String(255), nullable=False, default="")
    github = Column(String(1024), nullable=False, default="")
    linkedin = Column(String(1024), nullable=False, default="")
    twitter = Column(String(1024), nullable=False, default="")
    website = Column(String(1024), nullable=False, default="")
    avatar = Column(String(1024), nullable=False, default="")
    about_text = Column(Text, nullable=False)
    about_section_title = Column(
        String(255), nullable=False, default="Full-Stack Software Engineer"
    )
    about_highlights = Column(JSONType, nullable=False, default=list)
    experience = Column(String(255), nullable=False, default="")
    education = Column(String(255), nullable=False, default="")
    technology_tags = Column(JSONType, nullable=False, default=list)
    projects_completed = Column(String(32), nullable=False, default="25+")
    years_experience = Column(String(32), nullable=False, default="5+")
    technologies = Column(String(32), nullable=False, default="15+")
    certifications = Column(String(32), nullable=False, default="8")


class Footer(SingletonMixin, TimestampMixin, Base):
    """Footer copy; social_links/quick_links are lists of {name, url[, icon]}."""

    __tablename__ = "footer"

    id = Column(Integer, primary_key=True, autoincrement=True)
    copyright = Column(String(255), nullable=False)
    tagline = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    social_links = Column(JSONType, nullable=False, default=list)
    quick_links = Column(JSONType, nullable=False, default=list)
    contact_info = Column(JSONType, nullable=False, default=dict)


class ContactSettings(SingletonMixin, TimestampMixin, Base):
    __tablename__ = "contact_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(254), nullable=False)
    phone = Column(String(64), nullable=False, default="")
    address = Column(String(255), nullable=False, default="")
    city = Column(String(255), nullable=False, default="")
    country = Column(String(255), nullable=False, default="")
    contact_title = Column(String(255), nullable=False, default="Get In Touch")
    contact_subtitle = Column(String(255), nullable=False, default="")
    contact_description = Column(Text, nullable=False, default="")
    form_enabled = Column(Boolean, nullable=False, default=True)
    auto_reply_enabled = Column(Boolean, nullable=False, default=False)
    auto_reply_message = Column(Text, nullable=False, default="")


class ProjectsSettings(SingletonMixin, TimestampMixin, Base):
    __tablename__ = "projects_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    projects_title = Column(String(255), nullable=False)
    projects_subtitle = Column(Text, nullable=False)
    view_all_button_text = Column(
        String(255), nullable=False, default="View All Projects"
    )
    view_all_button_url = Column(String(1024), nullable=False, default="/projects")
    show_view_all_button = Column(Boolean, nullable=False, default=True)
    max_featured_projects = Column(Integer, nullable=False, default=6)

"""ORM model for portfolio projects."""

from sqlalchemy import Boolean, Column, Integer, String

from app.models.base import Base, JSONType, TimestampMixin

PLACEHOLDER_IMAGE = "/api/placeholder/400/250"


class Project(TimestampMixin, Base):
    """
    Portfolio project. image holds a URL, usually an /images/{id} retrieval URL.

    status: 'active', 'inactive' or 'archived'
    """

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    technologies = Column(JSONType, nullable=False, default=list)
    github = Column(String(1024), nullable=False, default="")
    live = Column(String(1024), nullable=False, default="")
    featured = Column(Boolean, nullable=False, default=False, index=True)
    image = Column(
        String(1024), nullable=False, default=PLACEHOLDER_IMAGE, index=True
    )
    order = Column(Integer, nullable=False, default=0)
    status = Column(String(32), nullable=False, default="active", index=True)

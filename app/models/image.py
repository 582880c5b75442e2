"""ORM model for uploaded images stored as bytes in the database."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, LargeBinary, String
from sqlalchemy.orm import deferred

from app.models.base import Base, TimestampMixin


class Image(TimestampMixin, Base):
    """
    Image payload plus metadata. Soft-deleted via is_active; rows are never purged.

    data is deferred so metadata listings never load the payload.
    """

    __tablename__ = "images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(512), nullable=False)
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(64), nullable=False)
    size = Column(Integer, nullable=False)
    data = deferred(Column(LargeBinary, nullable=False))
    uploaded_by = Column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_active = Column(Boolean, nullable=False, default=True, index=True)

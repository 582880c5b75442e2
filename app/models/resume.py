"""ORM model for uploaded resumes (PDF bytes stored in the database)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, LargeBinary, String, func
from sqlalchemy.orm import deferred

from app.models.base import Base, TimestampMixin


class Resume(TimestampMixin, Base):
    """Resume payload plus metadata. At most one row has is_active = true."""

    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(64), nullable=False)
    size = Column(Integer, nullable=False)
    data = deferred(Column(LargeBinary, nullable=False))
    is_active = Column(Boolean, nullable=False, default=False, index=True)
    upload_date = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

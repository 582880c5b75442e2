"""ORM model for skill categories."""

from sqlalchemy import Boolean, Column, Integer, String

from app.models.base import Base, JSONType, TimestampMixin


class Skill(TimestampMixin, Base):
    """Skill category; skills is a list of {name, level, icon} objects."""

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category = Column(String(50), nullable=False, index=True)
    skills = Column(JSONType, nullable=False, default=list)
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    additional_technologies = Column(JSONType, nullable=False, default=list)

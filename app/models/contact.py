"""ORM model for contact form submissions."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.models.base import Base, TimestampMixin


class Contact(TimestampMixin, Base):
    """
    Message sent through the public contact form.

    status: 'unread', 'read', 'replied' or 'archived'
    """

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(254), nullable=False, index=True)
    subject = Column(String(100), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(32), nullable=False, default="unread", index=True)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(String(512), nullable=True)
    replied_at = Column(DateTime(timezone=True), nullable=True)
    reply_message = Column(Text, nullable=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

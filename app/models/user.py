"""ORM model for accounts (auth, RBAC and login lockout)."""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from app.models.base import Base, TimestampMixin, as_utc


class User(TimestampMixin, Base):
    """
    Account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. email is stored lower-cased and is unique.
    failed_login_attempts / lock_until drive the brute-force lockout.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(254), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    role = Column(String(32), nullable=False, default="user")
    is_active = Column(Boolean, nullable=False, default=True)
    failed_login_attempts = Column(Integer, nullable=False, default=0)
    lock_until = Column(DateTime(timezone=True), nullable=True)
    last_login = Column(DateTime(timezone=True), nullable=True)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)

    def is_locked(self, now: datetime) -> bool:
        """True while lock_until lies in the future."""
        lock_until = as_utc(self.lock_until)
        return lock_until is not None and lock_until > now

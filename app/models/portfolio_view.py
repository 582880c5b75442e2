"""ORM model for tracked portfolio page views."""

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, func

from app.models.base import Base


class PortfolioView(Base):
    """One page view; is_unique is false when ip+session was seen in the last 24h."""

    __tablename__ = "portfolio_views"
    __table_args__ = (
        Index("ix_portfolio_views_ip_timestamp", "ip_address", "timestamp"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    ip_address = Column(String(64), nullable=False)
    user_agent = Column(String(512), nullable=False, default="")
    referrer = Column(String(1024), nullable=False, default="")
    page = Column(String(255), nullable=False, default="home")
    session_id = Column(String(255), nullable=False, index=True)
    timestamp = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    is_unique = Column(Boolean, nullable=False, default=True)

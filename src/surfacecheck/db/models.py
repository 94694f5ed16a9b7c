"""Database models for SurfaceCheck using SQLAlchemy."""

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship


def _utc_now() -> datetime:
    return datetime.now(UTC)


Base = declarative_base()


class User(Base):
    """A user whose email is checked against the breach database."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, nullable=False, unique=True)
    name = Column(String, default="")
    last_breach_check = Column(DateTime(timezone=True), nullable=True)
    security_score = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utc_now)

    services = relationship("Service", back_populates="user", cascade="all, delete-orphan")


class Service(Base):
    """An online service a user has an account with, plus its breach status."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    service_name = Column(String, nullable=False)
    domain = Column(String, nullable=False)
    is_active = Column(Boolean, default=True)

    # Breach status, written after each breach check
    is_breached = Column(Boolean, default=False)
    breach_name = Column(String, nullable=True)
    breach_date = Column(String, nullable=True)
    breach_severity = Column(String, nullable=True)  # high, medium, low
    breach_data_classes = Column(Text, default="[]")  # JSON list
    breach_description = Column(Text, nullable=True)
    breach_last_checked = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utc_now)

    user = relationship("User", back_populates="services")

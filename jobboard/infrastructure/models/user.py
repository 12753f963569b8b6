"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, Integer, String

from jobboard.infrastructure.database import Base
from jobboard.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Profile data owned by the accounts service, read for display purposes."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    role = Column(String(20), nullable=False, default="user")
    full_name = Column(String(120), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]

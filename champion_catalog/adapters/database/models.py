"""SQLAlchemy models for the Champion Catalog service."""

from datetime import datetime
from typing import List

from sqlalchemy import (
    String,
    DateTime,
    Integer,
    Index,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import declarative_base, Mapped, mapped_column
from sqlalchemy.sql import func

Base = declarative_base()


class User(Base):
    """Model for API users."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)  # bcrypt hash

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=func.now())

    __table_args__ = (
        Index("uq_users_email", "email", unique=True),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class Champion(Base):
    """Model for catalog champions.

    ``role`` holds Role enum values as plain strings; the repository
    converts them back to the enum.
    """

    __tablename__ = "champions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    role: Mapped[List[str]] = mapped_column(ARRAY(String(16)), nullable=False)
    image_path: Mapped[str] = mapped_column(String(1024), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("uq_champions_name", "name", unique=True),
    )

    def __repr__(self) -> str:
        return f"<Champion(id={self.id}, name='{self.name}')>"

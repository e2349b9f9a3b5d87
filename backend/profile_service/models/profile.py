"""Profile ORM — persists one submitted user profile with audit columns.

Invariants:
    - id is a 32-char hex string primary key, assigned by ProfileStore (no server default)
    - created_at is written once at insert; there is no onupdate for it
    - created_at <= updated_at
    - Timestamp server defaults match alembic 001, so raw INSERTs still get them
    - deleted_at NULL means active; rows with deleted_at set are excluded from reads
    - created_by is never NULL; updated_by / deleted_by stay NULL in this service

Design Decisions:
    - String(32) id over UUID column: the hex form is the public identifier and is
      portable across SQLite and PostgreSQL
    - deleted_at indexed: every normal read filters on it
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from profile_service.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Profile(Base):
    """Submitted user profile."""
    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)

    # Audit
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, server_default=func.now(), onupdate=_utcnow,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )
    created_by: Mapped[str] = mapped_column(String(32), nullable=False)
    updated_by: Mapped[str | None] = mapped_column(String(32), nullable=True)
    deleted_by: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Submission
    first_name: Mapped[str] = mapped_column(String(64), nullable=False)
    last_name: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)
    profile_image: Mapped[str] = mapped_column(Text, nullable=False)
    birth_date: Mapped[str] = mapped_column(String(64), nullable=False)
    occupation: Mapped[str] = mapped_column(String(64), nullable=False)
    sex: Mapped[str] = mapped_column(String(64), nullable=False)

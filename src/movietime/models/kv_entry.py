"""Key/value entry ORM model."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from movietime.database import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class KeyValueEntry(Base):
    """A single persisted key/value slot."""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(default=_utcnow, onupdate=_utcnow)

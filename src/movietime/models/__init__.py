"""SQLAlchemy ORM models."""

from movietime.models.kv_entry import KeyValueEntry

__all__ = [
    "KeyValueEntry",
]

"""Persistent key/value storage backends.

The favorites store only needs to read and write whole string values under a
fixed key. Backends raise on failure; deciding what a failure means is left to
the caller.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from movietime.models.kv_entry import KeyValueEntry


class KeyValueStore(Protocol):
    """Minimal async key/value interface."""

    async def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...


class InMemoryKeyValueStore:
    """Key/value store kept in a dict. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SQLKeyValueStore:
    """Key/value store backed by the ``kv_entries`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, key: str) -> str | None:
        async with self._session_factory() as session:
            entry = await session.get(KeyValueEntry, key)
            return entry.value if entry is not None else None

    async def set(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            try:
                entry = await session.get(KeyValueEntry, key)
                if entry is None:
                    session.add(KeyValueEntry(key=key, value=value))
                else:
                    entry.value = value
                await session.commit()
            except Exception:
                await session.rollback()
                raise

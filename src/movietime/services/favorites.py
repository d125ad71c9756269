"""Favorites store backed by a single key/value slot.

The whole favorites list is stored as one JSON array under a fixed key.
Every operation reads the full list, and every mutation writes the full list
back. There is no in-process cache.

Failures are never raised to callers. Favorites are a convenience, so a
broken or missing blob reads as an empty list and a failed write is reported
through :class:`StoreResult`. Both are logged.
"""

import asyncio
import logging
from collections.abc import Sequence

from pydantic import TypeAdapter

from movietime.schemas.catalog import Movie
from movietime.schemas.favorites import FavoritesSnapshot, StoreResult
from movietime.services.storage import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_FAVORITES_KEY = "favorite_movies"

_movie_list = TypeAdapter(list[Movie])


class FavoritesStore:
    """Deduplicated list of favorite movies, unique by id.

    Mutations on one instance are serialized through a lock so that an add
    and a remove fired together cannot overwrite each other's result.
    """

    def __init__(self, storage: KeyValueStore, key: str = DEFAULT_FAVORITES_KEY) -> None:
        """Initialize the favorites store.

        Args:
            storage: Backing key/value store.
            key: Key the serialized list is stored under.
        """
        self._storage = storage
        self.key = key
        self._write_lock = asyncio.Lock()

    async def read_favorites(self) -> FavoritesSnapshot:
        """Read the stored list, reporting why it could not be read.

        An absent key or a stored JSON null is not an error and yields an
        empty snapshot.
        """
        try:
            raw = await self._storage.get(self.key)
            if raw is None or not raw.strip() or raw.strip() == "null":
                return FavoritesSnapshot()
            return FavoritesSnapshot(movies=_movie_list.validate_json(raw))
        except Exception as e:
            logger.warning("Could not read favorites from %r: %s", self.key, e)
            return FavoritesSnapshot(error=str(e) or type(e).__name__)

    async def get_favorites(self) -> list[Movie]:
        """Return the favorite movies in stored order, or [] if unreadable."""
        snapshot = await self.read_favorites()
        return snapshot.movies

    async def _write(self, movies: Sequence[Movie]) -> StoreResult:
        try:
            payload = _movie_list.dump_json(list(movies)).decode()
            await self._storage.set(self.key, payload)
        except Exception as e:
            logger.warning("Could not save favorites to %r: %s", self.key, e)
            return StoreResult.failure(str(e) or type(e).__name__)
        return StoreResult.success()

    async def save_favorites(self, movies: Sequence[Movie]) -> StoreResult:
        """Replace the stored list with ``movies``."""
        async with self._write_lock:
            return await self._write(movies)

    async def add_favorite(self, movie: Movie) -> StoreResult:
        """Append ``movie`` unless a favorite with the same id exists.

        The first stored version wins; adding an existing id writes nothing.
        """
        async with self._write_lock:
            movies = await self.get_favorites()
            if any(m.id == movie.id for m in movies):
                return StoreResult.success()

            movies.append(movie)
            return await self._write(movies)

    async def remove_favorite(self, movie: Movie) -> StoreResult:
        """Remove every favorite with the same id as ``movie``.

        The list is written back even when nothing matched.
        """
        async with self._write_lock:
            movies = await self.get_favorites()
            remaining = [m for m in movies if m.id != movie.id]
            return await self._write(remaining)

    async def is_favorite(self, movie_id: int) -> bool:
        """Return True if a favorite with ``movie_id`` is stored."""
        movies = await self.get_favorites()
        return any(m.id == movie_id for m in movies)

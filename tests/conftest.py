"""Pytest fixtures and configuration."""

from collections.abc import AsyncGenerator, Iterator
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from movietime.config import CatalogConnection, get_settings
from movietime.database import create_session_factory, init_db
from movietime.schemas.catalog import Movie
from movietime.services.favorites import FavoritesStore
from movietime.services.storage import InMemoryKeyValueStore, SQLKeyValueStore


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Make every test read settings fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def direct_connection() -> CatalogConnection:
    """Authenticated connection straight to TMDB."""
    return CatalogConnection(
        base_url="https://api.themoviedb.org/3",
        headers={"Accept": "application/json", "Authorization": "Bearer test-api-key"},
        authenticated=True,
    )


@pytest.fixture
def make_movie():
    """Build Movie records with sensible defaults."""

    def _make(movie_id: int = 550, title: str = "Fight Club", **kwargs) -> Movie:
        fields = {
            "id": movie_id,
            "title": title,
            "overview": "An insomniac office worker...",
            "poster_path": "https://image.tmdb.org/t/p/w500/poster.jpg",
            "backdrop_path": "https://image.tmdb.org/t/p/w780/backdrop.jpg",
            "release_date": date(1999, 10, 15),
            "vote_average": 8.4,
            "vote_count": 25000,
        }
        fields.update(kwargs)
        return Movie(**fields)

    return _make


@pytest.fixture
def memory_storage() -> InMemoryKeyValueStore:
    """Empty in-memory key/value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def favorites(memory_storage: InMemoryKeyValueStore) -> FavoritesStore:
    """Favorites store over an empty in-memory backend."""
    return FavoritesStore(memory_storage)


@pytest.fixture
async def sqlite_engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine with tables created."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def sql_storage(sqlite_engine: AsyncEngine) -> SQLKeyValueStore:
    """Key/value store over the in-memory SQLite engine."""
    return SQLKeyValueStore(create_session_factory(sqlite_engine))

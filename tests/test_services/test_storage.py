"""Tests for key/value storage backends."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine

from movietime.database import create_session_factory
from movietime.models.kv_entry import KeyValueEntry
from movietime.services.favorites import FavoritesStore
from movietime.services.storage import InMemoryKeyValueStore, SQLKeyValueStore


class TestInMemoryKeyValueStore:
    """Tests for the dict-backed store."""

    async def test_get_missing(self) -> None:
        assert await InMemoryKeyValueStore().get("missing") is None

    async def test_set_and_replace(self) -> None:
        store = InMemoryKeyValueStore()

        await store.set("k", "one")
        await store.set("k", "two")

        assert await store.get("k") == "two"

    async def test_initial_data_is_copied(self) -> None:
        initial = {"k": "v"}
        store = InMemoryKeyValueStore(initial)

        await store.set("k", "changed")

        assert initial == {"k": "v"}


class TestSQLKeyValueStore:
    """Tests for the SQLAlchemy-backed store."""

    async def test_get_missing(self, sql_storage: SQLKeyValueStore) -> None:
        assert await sql_storage.get("favorite_movies") is None

    async def test_set_then_get(self, sql_storage: SQLKeyValueStore) -> None:
        await sql_storage.set("favorite_movies", "[]")

        assert await sql_storage.get("favorite_movies") == "[]"

    async def test_set_upserts_single_row(
        self, sql_storage: SQLKeyValueStore, sqlite_engine: AsyncEngine
    ) -> None:
        """Test that writing the same key twice keeps one row."""
        await sql_storage.set("favorite_movies", "[1]")
        await sql_storage.set("favorite_movies", "[1, 2]")

        async with create_session_factory(sqlite_engine)() as session:
            rows = (await session.execute(select(KeyValueEntry))).scalars().all()

        assert len(rows) == 1
        assert rows[0].value == "[1, 2]"
        assert rows[0].updated_at is not None

    async def test_keys_are_independent(self, sql_storage: SQLKeyValueStore) -> None:
        await sql_storage.set("a", "1")
        await sql_storage.set("b", "2")

        assert await sql_storage.get("a") == "1"
        assert await sql_storage.get("b") == "2"

    async def test_favorites_round_trip(self, sql_storage: SQLKeyValueStore, make_movie) -> None:
        """Test the favorites store over SQL storage."""
        store = FavoritesStore(sql_storage)

        await store.add_favorite(make_movie(550))
        await store.add_favorite(make_movie(680, "Pulp Fiction"))
        await store.add_favorite(make_movie(550))
        await store.remove_favorite(make_movie(680))

        movies = await store.get_favorites()
        assert [m.id for m in movies] == [550]
        assert movies[0] == make_movie(550)

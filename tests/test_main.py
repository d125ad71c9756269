"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from movietime.config import Settings
from movietime.main import open_services
from movietime.services.storage import SQLKeyValueStore


def _settings(tmp_path: Path, **overrides) -> Settings:
    fields = {
        "tmdb_api_key": "test-api-key",
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'movietime.db'}",
    }
    fields.update(overrides)
    return Settings(_env_file=None, **fields)


class TestOpenServices:
    """Tests for building and releasing shared services."""

    async def test_services_are_wired(self, tmp_path: Path) -> None:
        async with open_services(_settings(tmp_path, favorites_key="favs")) as services:
            assert services.catalog.default_headers["Authorization"] == "Bearer test-api-key"
            assert services.catalog.base_url == "https://api.themoviedb.org/3"
            assert services.catalog._client is services.http_client
            assert services.favorites.key == "favs"
            assert isinstance(services.favorites._storage, SQLKeyValueStore)

        assert services.http_client.is_closed

    async def test_proxy_mode(self, tmp_path: Path) -> None:
        settings = _settings(tmp_path, tmdb_api_key="", app_base_url="https://movies.example.org")

        async with open_services(settings) as services:
            assert "Authorization" not in services.catalog.default_headers
            assert services.catalog.base_url == "https://movies.example.org/tmdb"

    async def test_favorites_persist_between_sessions(self, tmp_path: Path, make_movie) -> None:
        settings = _settings(tmp_path)

        async with open_services(settings) as services:
            result = await services.favorites.add_favorite(make_movie(550))
            assert result.ok

        async with open_services(settings) as services:
            assert await services.favorites.is_favorite(550)
            assert [m.id for m in await services.favorites.get_favorites()] == [550]

    async def test_explicit_settings_ignore_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that invalid environment values do not override given settings."""
        monkeypatch.setenv("REQUEST_TIMEOUT", "0")

        async with open_services(_settings(tmp_path, request_timeout=5)) as services:
            assert services.catalog.timeout == 5
            assert services.http_client.timeout.read == 5

    async def test_setup_failure_releases_resources(self, tmp_path: Path) -> None:
        """Test that the HTTP client and engine are closed when setup fails."""
        with (
            patch("movietime.main.TMDBClient", side_effect=RuntimeError("boom")),
            patch.object(httpx.AsyncClient, "aclose", autospec=True) as mock_aclose,
            patch.object(AsyncEngine, "dispose", autospec=True) as mock_dispose,
        ):
            with pytest.raises(RuntimeError, match="boom"):
                async with open_services(_settings(tmp_path)):
                    pass

        mock_aclose.assert_awaited_once()
        mock_dispose.assert_awaited_once()

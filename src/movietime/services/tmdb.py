"""TMDB (The Movie Database) catalog client service."""

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from movietime.config import CatalogConnection, get_settings
from movietime.schemas.catalog import (
    CreditsResponse,
    MovieDetails,
    MovieListResponse,
    MovieVideoResponse,
    Video,
)
from movietime.services.base import APIError, BaseAPIClient, RemoteFetchError
from movietime.services.images import (
    normalize_credits,
    normalize_movie_details,
    normalize_movie_list,
)

logger = logging.getLogger(__name__)

# Fixed query parameters
LIST_PARAMS = {"region": "US", "language": "en-US"}
LANGUAGE_PARAMS = {"language": "en-US"}

ModelT = TypeVar("ModelT", bound=BaseModel)


def select_trailer(videos: Iterable[Video]) -> Video | None:
    """Return the first YouTube trailer, matching type and site case-insensitively."""
    for video in videos:
        if "trailer" in video.type.lower() and "youtube" in video.site.lower():
            return video
    return None


class TMDBClient(BaseAPIClient):
    """Client for The Movie Database (TMDB) API.

    Every operation issues a single GET, decodes the body, rewrites image
    paths and returns the typed result. Any failure along the way raises
    :class:`RemoteFetchError`; there are no retries.

    The client does not know whether it talks to TMDB directly or through
    the proxy. That is decided once by the :class:`CatalogConnection`.
    """

    def __init__(
        self,
        connection: CatalogConnection | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the TMDB client.

        Args:
            connection: Resolved base URL and headers. If not provided, uses settings.
            timeout: Request timeout in seconds. If not provided, uses settings.
            http_client: Shared HTTP client. If not provided, one is created on demand.
        """
        if connection is None or timeout is None:
            settings = get_settings()
            connection = connection or settings.catalog_connection()
            timeout = timeout if timeout is not None else settings.request_timeout
        self.connection = connection
        super().__init__(
            base_url=self.connection.base_url,
            timeout=timeout,
            http_client=http_client,
        )

    @property
    def default_headers(self) -> dict[str, str]:
        """Return the connection headers (Accept, and Authorization when configured)."""
        return dict(self.connection.headers)

    async def _fetch(
        self,
        endpoint: str,
        model: type[ModelT],
        resource: str,
        params: dict[str, Any] | None = None,
    ) -> ModelT:
        """GET an endpoint and decode it into ``model``.

        Raises:
            RemoteFetchError: If the request fails, the body is not JSON, is
                empty, or does not match ``model``.
        """
        try:
            data = await self.get(endpoint, params=params)
        except APIError as e:
            logger.warning("Could not fetch %s from %s: %s", resource, endpoint, e)
            raise RemoteFetchError(resource, status_code=e.status_code) from e

        if not data:
            logger.warning("Empty response for %s from %s", resource, endpoint)
            raise RemoteFetchError(resource)

        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning("Could not decode %s from %s: %s", resource, endpoint, e)
            raise RemoteFetchError(resource) from e

    async def get_now_playing(self) -> MovieListResponse:
        """Get movies currently playing in US theaters.

        Returns:
            List response with resolved poster and backdrop paths.

        Raises:
            RemoteFetchError: If the list cannot be retrieved.
        """
        response = await self._fetch(
            "/movie/now_playing", MovieListResponse, "now-playing movies", params=dict(LIST_PARAMS)
        )
        return normalize_movie_list(response)

    async def get_popular(self) -> MovieListResponse:
        """Get popular movies in the US region.

        Returns:
            List response with resolved poster and backdrop paths.

        Raises:
            RemoteFetchError: If the list cannot be retrieved.
        """
        response = await self._fetch(
            "/movie/popular", MovieListResponse, "popular movies", params=dict(LIST_PARAMS)
        )
        return normalize_movie_list(response)

    async def search_movies(self, query: str) -> MovieListResponse:
        """Search for movies by title.

        The query is sent as-is; an empty query is left for TMDB to answer.

        Args:
            query: Search query string.

        Returns:
            List response with resolved poster and backdrop paths.

        Raises:
            RemoteFetchError: If the search results cannot be retrieved.
        """
        params = {
            "query": query,
            "include_adult": "false",
            **LANGUAGE_PARAMS,
        }
        response = await self._fetch("/search/movie", MovieListResponse, "search results", params=params)
        return normalize_movie_list(response)

    async def get_movie_by_id(self, movie_id: int) -> MovieDetails:
        """Get detailed information about a specific movie.

        Args:
            movie_id: TMDB movie ID.

        Returns:
            Movie details with resolved poster and backdrop paths.

        Raises:
            RemoteFetchError: If the movie details cannot be retrieved.
        """
        details = await self._fetch(f"/movie/{movie_id}", MovieDetails, "movie details")
        return normalize_movie_details(details)

    async def get_movie_trailer(self, movie_id: int) -> Video | None:
        """Get the first YouTube trailer for a movie.

        Args:
            movie_id: TMDB movie ID.

        Returns:
            The trailer, or None if the movie has no YouTube trailer.

        Raises:
            RemoteFetchError: If the video list cannot be retrieved.
        """
        videos = await self._fetch(
            f"/movie/{movie_id}/videos",
            MovieVideoResponse,
            "movie trailer",
            params=dict(LANGUAGE_PARAMS),
        )
        return select_trailer(videos.results)

    async def get_movie_credits(self, movie_id: int) -> CreditsResponse:
        """Get cast and crew for a specific movie.

        Args:
            movie_id: TMDB movie ID.

        Returns:
            Credits with resolved profile paths.

        Raises:
            RemoteFetchError: If the credits cannot be retrieved.
        """
        credits = await self._fetch(
            f"/movie/{movie_id}/credits",
            CreditsResponse,
            "movie credits",
            params=dict(LANGUAGE_PARAMS),
        )
        return normalize_credits(credits)


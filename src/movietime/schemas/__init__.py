"""Pydantic schemas for catalog responses and favorites results."""

from movietime.schemas.catalog import (
    CastMember,
    CreditsResponse,
    CrewMember,
    Genre,
    Movie,
    MovieDetails,
    MovieListResponse,
    MovieVideoResponse,
    Video,
)
from movietime.schemas.favorites import FavoritesSnapshot, StoreResult

__all__ = [
    # Catalog schemas
    "Movie",
    "MovieListResponse",
    "Genre",
    "MovieDetails",
    "Video",
    "MovieVideoResponse",
    "CastMember",
    "CrewMember",
    "CreditsResponse",
    # Favorites schemas
    "StoreResult",
    "FavoritesSnapshot",
]

"""Catalog client, favorites store and their storage backends."""

from movietime.services.base import APIError, BaseAPIClient, RemoteFetchError
from movietime.services.favorites import FavoritesStore
from movietime.services.storage import InMemoryKeyValueStore, KeyValueStore, SQLKeyValueStore
from movietime.services.tmdb import TMDBClient, select_trailer

__all__ = [
    "APIError",
    "BaseAPIClient",
    "RemoteFetchError",
    "TMDBClient",
    "select_trailer",
    "FavoritesStore",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SQLKeyValueStore",
]
